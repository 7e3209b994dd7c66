import typing
from dataclasses import dataclass
from construct import ConstructError
from solders.pubkey import Pubkey
from solana.rpc.async_api import AsyncClient
from solana.rpc.commitment import Commitment
import borsh_construct as borsh
from anchorpy.utils.rpc import get_multiple_accounts
from ..errors import AccountNotOwned, MalformedPayload
from ..program_id import PROGRAM_ID


class PostJSON(typing.TypedDict):
    content: str
    timestamp: int


@dataclass
class Post:
    layout: typing.ClassVar = borsh.CStruct(
        "content" / borsh.String,
        "timestamp" / borsh.U64,
    )
    content: str
    timestamp: int

    @classmethod
    async def fetch(
        cls,
        conn: AsyncClient,
        address: Pubkey,
        commitment: typing.Optional[Commitment] = None,
        program_id: Pubkey = PROGRAM_ID,
    ) -> typing.Optional["Post"]:
        resp = await conn.get_account_info(address, commitment=commitment)
        info = resp.value
        if info is None:
            return None
        if info.owner != program_id:
            raise AccountNotOwned(str(address))
        return cls.decode(info.data)

    @classmethod
    async def fetch_multiple(
        cls,
        conn: AsyncClient,
        addresses: list[Pubkey],
        commitment: typing.Optional[Commitment] = None,
        program_id: Pubkey = PROGRAM_ID,
    ) -> typing.List[typing.Optional["Post"]]:
        infos = await get_multiple_accounts(conn, addresses, commitment=commitment)
        res: typing.List[typing.Optional["Post"]] = []
        for info in infos:
            if info is None:
                res.append(None)
                continue
            if info.account.owner != program_id:
                raise AccountNotOwned(str(info.pubkey))
            res.append(cls.decode(info.account.data))
        return res

    @classmethod
    def decode(cls, data: bytes) -> "Post":
        try:
            dec = Post.layout.parse(data)
        except (ConstructError, UnicodeDecodeError) as exc:
            raise MalformedPayload(f"post: {exc}") from exc
        return cls(content=dec.content, timestamp=dec.timestamp)

    def to_json(self) -> PostJSON:
        return {"content": self.content, "timestamp": self.timestamp}

    @classmethod
    def from_json(cls, obj: PostJSON) -> "Post":
        return cls(content=obj["content"], timestamp=obj["timestamp"])
