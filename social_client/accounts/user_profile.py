import typing
from dataclasses import dataclass
from construct import ConstructError
from solders.pubkey import Pubkey
from solana.rpc.async_api import AsyncClient
from solana.rpc.commitment import Commitment
import borsh_construct as borsh
from anchorpy.utils.rpc import get_multiple_accounts
from anchorpy.borsh_extension import BorshPubkey
from ..errors import AccountNotOwned, MalformedPayload
from ..program_id import PROGRAM_ID


class UserProfileJSON(typing.TypedDict):
    data_len: int
    followers: list[str]


@dataclass
class UserProfile:
    layout: typing.ClassVar = borsh.CStruct(
        "data_len" / borsh.U16,
        "followers" / borsh.Vec(BorshPubkey),
    )
    data_len: int
    followers: list[Pubkey]

    @classmethod
    async def fetch(
        cls,
        conn: AsyncClient,
        address: Pubkey,
        commitment: typing.Optional[Commitment] = None,
        program_id: Pubkey = PROGRAM_ID,
    ) -> typing.Optional["UserProfile"]:
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
    ) -> typing.List[typing.Optional["UserProfile"]]:
        infos = await get_multiple_accounts(conn, addresses, commitment=commitment)
        res: typing.List[typing.Optional["UserProfile"]] = []
        for info in infos:
            if info is None:
                res.append(None)
                continue
            if info.account.owner != program_id:
                raise AccountNotOwned(str(info.pubkey))
            res.append(cls.decode(info.account.data))
        return res

    @classmethod
    def decode(cls, data: bytes) -> "UserProfile":
        # Profile accounts are allocated with spare room; trailing zeros are ignored.
        try:
            dec = UserProfile.layout.parse(data)
        except ConstructError as exc:
            raise MalformedPayload(f"user profile: {exc}") from exc
        return cls(
            data_len=dec.data_len,
            followers=list(dec.followers),
        )

    def follows(self, target: Pubkey) -> bool:
        return target in self.followers

    def to_json(self) -> UserProfileJSON:
        return {
            "data_len": self.data_len,
            "followers": [str(item) for item in self.followers],
        }

    @classmethod
    def from_json(cls, obj: UserProfileJSON) -> "UserProfile":
        return cls(
            data_len=obj["data_len"],
            followers=[Pubkey.from_string(item) for item in obj["followers"]],
        )
