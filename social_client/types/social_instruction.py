from __future__ import annotations
import typing
from dataclasses import dataclass
from construct import ConstructError
from solders.pubkey import Pubkey
from anchorpy.borsh_extension import EnumForCodegen, BorshPubkey
import borsh_construct as borsh
from ..errors import MalformedPayload, UnrecognizedOperation, ValidationError

FollowValue = tuple[Pubkey]
UnfollowValue = tuple[Pubkey]
PostValue = tuple[str]


class InitJSONValue(typing.TypedDict):
    seed_type: str


class InitValue(typing.TypedDict):
    seed_type: str


class InitJSON(typing.TypedDict):
    value: InitJSONValue
    kind: typing.Literal["Init"]


class FollowJSON(typing.TypedDict):
    value: tuple[str]
    kind: typing.Literal["Follow"]


class UnfollowJSON(typing.TypedDict):
    value: tuple[str]
    kind: typing.Literal["Unfollow"]


class QueryFollowsJSON(typing.TypedDict):
    kind: typing.Literal["QueryFollows"]


class PostJSON(typing.TypedDict):
    value: tuple[str]
    kind: typing.Literal["Post"]


class QueryPostsJSON(typing.TypedDict):
    kind: typing.Literal["QueryPosts"]


@dataclass
class Init:
    discriminator: typing.ClassVar = 0
    kind: typing.ClassVar = "Init"
    value: InitValue

    def to_json(self) -> InitJSON:
        return InitJSON(
            kind="Init",
            value={
                "seed_type": self.value["seed_type"],
            },
        )

    def to_encodable(self) -> dict:
        return {
            "Init": {
                "seed_type": self.value["seed_type"],
            },
        }


@dataclass
class Follow:
    discriminator: typing.ClassVar = 1
    kind: typing.ClassVar = "Follow"
    value: FollowValue

    def to_json(self) -> FollowJSON:
        return FollowJSON(
            kind="Follow",
            value=(str(self.value[0]),),
        )

    def to_encodable(self) -> dict:
        return {
            "Follow": {
                "item_0": self.value[0],
            },
        }


@dataclass
class Unfollow:
    discriminator: typing.ClassVar = 2
    kind: typing.ClassVar = "Unfollow"
    value: UnfollowValue

    def to_json(self) -> UnfollowJSON:
        return UnfollowJSON(
            kind="Unfollow",
            value=(str(self.value[0]),),
        )

    def to_encodable(self) -> dict:
        return {
            "Unfollow": {
                "item_0": self.value[0],
            },
        }


@dataclass
class QueryFollows:
    discriminator: typing.ClassVar = 3
    kind: typing.ClassVar = "QueryFollows"

    @classmethod
    def to_json(cls) -> QueryFollowsJSON:
        return QueryFollowsJSON(
            kind="QueryFollows",
        )

    @classmethod
    def to_encodable(cls) -> dict:
        return {
            "QueryFollows": {},
        }


@dataclass
class Post:
    discriminator: typing.ClassVar = 4
    kind: typing.ClassVar = "Post"
    value: PostValue

    def to_json(self) -> PostJSON:
        return PostJSON(
            kind="Post",
            value=(self.value[0],),
        )

    def to_encodable(self) -> dict:
        return {
            "Post": {
                "item_0": self.value[0],
            },
        }


@dataclass
class QueryPosts:
    discriminator: typing.ClassVar = 5
    kind: typing.ClassVar = "QueryPosts"

    @classmethod
    def to_json(cls) -> QueryPostsJSON:
        return QueryPostsJSON(
            kind="QueryPosts",
        )

    @classmethod
    def to_encodable(cls) -> dict:
        return {
            "QueryPosts": {},
        }


SocialInstructionKind = typing.Union[
    Init, Follow, Unfollow, QueryFollows, Post, QueryPosts
]
SocialInstructionJSON = typing.Union[
    InitJSON, FollowJSON, UnfollowJSON, QueryFollowsJSON, PostJSON, QueryPostsJSON
]

VARIANTS: tuple[type, ...] = (Init, Follow, Unfollow, QueryFollows, Post, QueryPosts)


def from_decoded(obj: dict) -> SocialInstructionKind:
    if not isinstance(obj, dict):
        raise ValueError("Invalid enum object")
    if "Init" in obj:
        val = obj["Init"]
        return Init(
            InitValue(
                seed_type=val["seed_type"],
            )
        )
    if "Follow" in obj:
        val = obj["Follow"]
        return Follow((val["item_0"],))
    if "Unfollow" in obj:
        val = obj["Unfollow"]
        return Unfollow((val["item_0"],))
    if "QueryFollows" in obj:
        return QueryFollows()
    if "Post" in obj:
        val = obj["Post"]
        return Post((val["item_0"],))
    if "QueryPosts" in obj:
        return QueryPosts()
    raise ValueError("Invalid enum object")


def from_json(obj: SocialInstructionJSON) -> SocialInstructionKind:
    if obj["kind"] == "Init":
        init_json_value = typing.cast(InitJSONValue, obj["value"])
        return Init(
            InitValue(
                seed_type=init_json_value["seed_type"],
            )
        )
    if obj["kind"] == "Follow":
        follow_json_value = typing.cast(tuple, obj["value"])
        return Follow((Pubkey.from_string(follow_json_value[0]),))
    if obj["kind"] == "Unfollow":
        unfollow_json_value = typing.cast(tuple, obj["value"])
        return Unfollow((Pubkey.from_string(unfollow_json_value[0]),))
    if obj["kind"] == "QueryFollows":
        return QueryFollows()
    if obj["kind"] == "Post":
        post_json_value = typing.cast(tuple, obj["value"])
        return Post((post_json_value[0],))
    if obj["kind"] == "QueryPosts":
        return QueryPosts()
    kind = obj["kind"]
    raise ValueError(f"Unrecognized enum kind: {kind}")


layout = EnumForCodegen(
    "Init" / borsh.CStruct("seed_type" / borsh.String),
    "Follow" / borsh.CStruct("item_0" / BorshPubkey),
    "Unfollow" / borsh.CStruct("item_0" / BorshPubkey),
    "QueryFollows" / borsh.CStruct(),
    "Post" / borsh.CStruct("item_0" / borsh.String),
    "QueryPosts" / borsh.CStruct(),
)


def encode(op: SocialInstructionKind) -> bytes:
    """Serialize an instruction as ``[u8 discriminant][borsh fields]``."""
    try:
        return layout.build(op.to_encodable())
    except (ConstructError, TypeError, ValueError) as exc:
        raise ValidationError(f"cannot encode {op.kind}: {exc}") from exc


def decode(data: bytes) -> SocialInstructionKind:
    """Parse instruction data produced by :func:`encode`.

    The whole buffer must be consumed; a short read, bad UTF-8 or trailing
    bytes raise :class:`MalformedPayload`.
    """
    if not data:
        raise MalformedPayload("empty instruction data")
    if data[0] >= len(VARIANTS):
        raise UnrecognizedOperation(data[0])
    try:
        op = from_decoded(layout.parse(data))
    except (ConstructError, UnicodeDecodeError) as exc:
        raise MalformedPayload(str(exc)) from exc
    consumed = len(encode(op))
    if consumed != len(data):
        raise MalformedPayload(
            f"{len(data) - consumed} trailing bytes after {op.kind} instruction"
        )
    return op
