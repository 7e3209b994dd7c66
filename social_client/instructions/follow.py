from __future__ import annotations
import typing
from solders.pubkey import Pubkey
from solders.instruction import Instruction, AccountMeta
from ..program_id import PROGRAM_ID
from .. import types


class FollowArgs(typing.TypedDict):
    target: Pubkey


class FollowAccounts(typing.TypedDict):
    profile: Pubkey


def follow(
    args: FollowArgs,
    accounts: FollowAccounts,
    program_id: Pubkey = PROGRAM_ID,
    remaining_accounts: typing.Optional[typing.List[AccountMeta]] = None,
) -> Instruction:
    keys: list[AccountMeta] = [
        AccountMeta(pubkey=accounts["profile"], is_signer=False, is_writable=True),
    ]
    if remaining_accounts is not None:
        keys += remaining_accounts
    data = types.social_instruction.encode(
        types.social_instruction.Follow((args["target"],))
    )
    return Instruction(program_id, data, keys)
