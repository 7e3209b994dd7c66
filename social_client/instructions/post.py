from __future__ import annotations
import typing
from solders.pubkey import Pubkey
from solders.instruction import Instruction, AccountMeta
from ..program_id import PROGRAM_ID
from .. import types


class PostArgs(typing.TypedDict):
    content: str


class PostAccounts(typing.TypedDict):
    authority: Pubkey
    user_post: Pubkey
    post: Pubkey
    system_program: Pubkey


def post(
    args: PostArgs,
    accounts: PostAccounts,
    program_id: Pubkey = PROGRAM_ID,
    remaining_accounts: typing.Optional[typing.List[AccountMeta]] = None,
) -> Instruction:
    keys: list[AccountMeta] = [
        AccountMeta(pubkey=accounts["authority"], is_signer=True, is_writable=True),
        AccountMeta(pubkey=accounts["user_post"], is_signer=False, is_writable=True),
        AccountMeta(pubkey=accounts["post"], is_signer=False, is_writable=True),
        AccountMeta(
            pubkey=accounts["system_program"], is_signer=False, is_writable=False
        ),
    ]
    if remaining_accounts is not None:
        keys += remaining_accounts
    data = types.social_instruction.encode(
        types.social_instruction.Post((args["content"],))
    )
    return Instruction(program_id, data, keys)
