from __future__ import annotations
import typing
from solders.pubkey import Pubkey
from solders.instruction import Instruction, AccountMeta
from ..program_id import PROGRAM_ID
from .. import types


class QueryPostsAccounts(typing.TypedDict):
    user_post: Pubkey
    post: Pubkey


def query_posts(
    accounts: QueryPostsAccounts,
    program_id: Pubkey = PROGRAM_ID,
    remaining_accounts: typing.Optional[typing.List[AccountMeta]] = None,
) -> Instruction:
    keys: list[AccountMeta] = [
        AccountMeta(pubkey=accounts["user_post"], is_signer=False, is_writable=True),
        AccountMeta(pubkey=accounts["post"], is_signer=False, is_writable=True),
    ]
    if remaining_accounts is not None:
        keys += remaining_accounts
    data = types.social_instruction.encode(types.social_instruction.QueryPosts())
    return Instruction(program_id, data, keys)
