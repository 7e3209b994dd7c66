from __future__ import annotations
import typing
from solders.pubkey import Pubkey
from solders.instruction import Instruction, AccountMeta
from ..program_id import PROGRAM_ID
from .. import types


class InitArgs(typing.TypedDict):
    seed_type: str


class InitAccounts(typing.TypedDict):
    authority: Pubkey
    social: Pubkey
    system_program: Pubkey


def init(
    args: InitArgs,
    accounts: InitAccounts,
    program_id: Pubkey = PROGRAM_ID,
    remaining_accounts: typing.Optional[typing.List[AccountMeta]] = None,
) -> Instruction:
    keys: list[AccountMeta] = [
        AccountMeta(pubkey=accounts["authority"], is_signer=True, is_writable=True),
        AccountMeta(pubkey=accounts["social"], is_signer=False, is_writable=True),
        AccountMeta(
            pubkey=accounts["system_program"], is_signer=False, is_writable=False
        ),
    ]
    if remaining_accounts is not None:
        keys += remaining_accounts
    data = types.social_instruction.encode(
        types.social_instruction.Init(
            types.social_instruction.InitValue(seed_type=args["seed_type"])
        )
    )
    return Instruction(program_id, data, keys)
