import typing
from dataclasses import dataclass
from construct import ConstructError
from solders.pubkey import Pubkey
from solana.rpc.async_api import AsyncClient
from solana.rpc.commitment import Commitment
import borsh_construct as borsh
from ..errors import AccountNotOwned, MalformedPayload
from ..program_id import PROGRAM_ID


class UserPostJSON(typing.TypedDict):
    post_count: int


@dataclass
class UserPost:
    layout: typing.ClassVar = borsh.CStruct("post_count" / borsh.U64)
    post_count: int

    @classmethod
    async def fetch(
        cls,
        conn: AsyncClient,
        address: Pubkey,
        commitment: typing.Optional[Commitment] = None,
        program_id: Pubkey = PROGRAM_ID,
    ) -> typing.Optional["UserPost"]:
        resp = await conn.get_account_info(address, commitment=commitment)
        info = resp.value
        if info is None:
            return None
        if info.owner != program_id:
            raise AccountNotOwned(str(address))
        return cls.decode(info.data)

    @classmethod
    def decode(cls, data: bytes) -> "UserPost":
        try:
            dec = UserPost.layout.parse(data)
        except ConstructError as exc:
            raise MalformedPayload(f"user post: {exc}") from exc
        return cls(post_count=dec.post_count)

    def to_json(self) -> UserPostJSON:
        return {"post_count": self.post_count}

    @classmethod
    def from_json(cls, obj: UserPostJSON) -> "UserPost":
        return cls(post_count=obj["post_count"])
