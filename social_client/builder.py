"""Turn an operation kind plus caller parameters into a ready instruction.

Every address is re-derived on each call; nothing here keeps state, so the
functions are safe to call from any number of threads.
"""
from __future__ import annotations
import typing
from solders.pubkey import Pubkey
from solders.instruction import Instruction
from solders.system_program import ID as SYS_PROGRAM_ID
from . import instructions, pda
from .errors import ValidationError
from .program_id import PROGRAM_ID


class BuildParams(typing.TypedDict, total=False):
    seed_type: str
    target: Pubkey
    content: str
    index: int


REQUIRED_PARAMS: dict[str, frozenset] = {
    "Init": frozenset({"seed_type"}),
    "Follow": frozenset({"target"}),
    "Unfollow": frozenset({"target"}),
    "QueryFollows": frozenset(),
    "Post": frozenset({"content", "index"}),
    "QueryPosts": frozenset({"index"}),
}


def _check_params(kind: str, params: BuildParams) -> None:
    if kind not in REQUIRED_PARAMS:
        raise ValidationError(f"unknown operation kind: {kind!r}")
    required = REQUIRED_PARAMS[kind]
    missing = required - params.keys()
    if missing:
        raise ValidationError(f"{kind} requires {', '.join(sorted(missing))}")
    unexpected = params.keys() - required
    if unexpected:
        raise ValidationError(
            f"{kind} does not take {', '.join(sorted(unexpected))}"
        )


def _target(params: BuildParams) -> Pubkey:
    target = params["target"]
    if not isinstance(target, Pubkey):
        raise ValidationError(f"target must be a Pubkey, got {type(target).__name__}")
    return target


def validate_content(content: str) -> str:
    if not isinstance(content, str) or not content:
        raise ValidationError("post content must be a non-empty string")
    return content


def build(
    kind: str,
    authority: Pubkey,
    params: typing.Optional[BuildParams] = None,
    program_id: Pubkey = PROGRAM_ID,
) -> Instruction:
    """Build the instruction for ``kind`` on behalf of ``authority``.

    ``kind`` is one of the instruction variant names (``"Init"``,
    ``"Follow"``, ``"Unfollow"``, ``"QueryFollows"``, ``"Post"``,
    ``"QueryPosts"``). Parameters that are missing, unused by the kind or
    out of range raise :class:`ValidationError` before anything is derived.
    """
    params = params if params is not None else {}
    _check_params(kind, params)
    if not isinstance(authority, Pubkey):
        raise ValidationError(
            f"authority must be a Pubkey, got {type(authority).__name__}"
        )

    if kind == "Init":
        seed_type = params["seed_type"]
        return instructions.init(
            {"seed_type": seed_type},
            {
                "authority": authority,
                "social": pda.social_pda(authority, seed_type, program_id),
                "system_program": SYS_PROGRAM_ID,
            },
            program_id=program_id,
        )
    if kind == "Follow":
        return instructions.follow(
            {"target": _target(params)},
            {"profile": pda.profile_address(authority, program_id)},
            program_id=program_id,
        )
    if kind == "Unfollow":
        return instructions.unfollow(
            {"target": _target(params)},
            {"profile": pda.profile_address(authority, program_id)},
            program_id=program_id,
        )
    if kind == "QueryFollows":
        return instructions.query_follows(
            {"profile": pda.profile_address(authority, program_id)},
            program_id=program_id,
        )
    if kind == "Post":
        content = validate_content(params["content"])
        return instructions.post(
            {"content": content},
            {
                "authority": authority,
                "user_post": pda.post_container_address(authority, program_id),
                "post": pda.post_address(authority, params["index"], program_id),
                "system_program": SYS_PROGRAM_ID,
            },
            program_id=program_id,
        )
    # QueryPosts
    return instructions.query_posts(
        {
            "user_post": pda.post_container_address(authority, program_id),
            "post": pda.post_address(authority, params["index"], program_id),
        },
        program_id=program_id,
    )
