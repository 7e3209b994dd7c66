"""Program derived addresses for per-user social state.

Derivation itself is done by ``solders``; this module fixes the seed layout
and turns bad seeds or a failed derivation into this package's errors.
"""
import logging
import typing

from solders.pubkey import Pubkey

from .errors import DerivationExhausted, ValidationError
from .program_id import PROGRAM_ID

logger = logging.getLogger(__name__)

MAX_SEED_LEN = 32
MAX_SEEDS = 16

USER_PROFILE_SEED = b"profile"
USER_POST_SEED = b"post"

# Post slots are addressed by a single seed byte, so a user has 256 of them.
MAX_POST_SLOTS = 256


def _check_seeds(seeds: typing.Sequence[bytes], limit: int) -> None:
    if len(seeds) > limit:
        raise ValidationError(f"at most {limit} seeds allowed, got {len(seeds)}")
    for seed in seeds:
        if not isinstance(seed, (bytes, bytearray)):
            raise ValidationError(f"seed must be bytes, got {type(seed).__name__}")
        if len(seed) > MAX_SEED_LEN:
            raise ValidationError(
                f"seed longer than {MAX_SEED_LEN} bytes: {len(seed)}"
            )


def _is_derivation_failure(exc: BaseException) -> bool:
    # solders surfaces a failed derivation as ValueError or as a pyo3 panic
    return isinstance(exc, ValueError) or type(exc).__name__ == "PanicException"


def create_program_address(
    seeds: typing.Sequence[bytes], program_id: Pubkey = PROGRAM_ID
) -> typing.Optional[Pubkey]:
    """Address for ``seeds`` (nonce included), or ``None`` if it is on the curve."""
    _check_seeds(seeds, MAX_SEEDS)
    try:
        return Pubkey.create_program_address(list(seeds), program_id)
    except BaseException as exc:
        if not _is_derivation_failure(exc):
            raise
        return None


def find_program_address(
    seeds: typing.Sequence[bytes], program_id: Pubkey = PROGRAM_ID
) -> typing.Tuple[Pubkey, int]:
    """Return the program address for ``seeds`` and its nonce.

    Seed order is significant; the nonce takes one of the 16 seed slots.
    """
    seeds = list(seeds)
    _check_seeds(seeds, MAX_SEEDS - 1)
    try:
        return Pubkey.find_program_address(seeds, program_id)
    except BaseException as exc:
        if not _is_derivation_failure(exc):
            raise
        raise DerivationExhausted(str(exc)) from exc


def label_seed(label: str) -> bytes:
    if not isinstance(label, str) or not label:
        raise ValidationError("seed label must be a non-empty string")
    seed = label.encode("utf-8")
    if len(seed) > MAX_SEED_LEN:
        raise ValidationError(f"seed label longer than {MAX_SEED_LEN} bytes: {label!r}")
    return seed


def post_index_seed(index: int) -> bytes:
    if isinstance(index, bool) or not isinstance(index, int):
        raise ValidationError(f"post index must be an int, got {type(index).__name__}")
    if not 0 <= index < MAX_POST_SLOTS:
        raise ValidationError(
            f"post index {index} outside the {MAX_POST_SLOTS} addressable slots"
        )
    return bytes([index])


def social_pda(
    authority: Pubkey, seed_type: str, program_id: Pubkey = PROGRAM_ID
) -> Pubkey:
    address, _ = find_program_address([bytes(authority), label_seed(seed_type)], program_id)
    logger.debug("social pda %s seed_type=%s authority=%s", address, seed_type, authority)
    return address


def profile_address(authority: Pubkey, program_id: Pubkey = PROGRAM_ID) -> Pubkey:
    return social_pda(authority, USER_PROFILE_SEED.decode(), program_id)


def post_container_address(
    authority: Pubkey, program_id: Pubkey = PROGRAM_ID
) -> Pubkey:
    return social_pda(authority, USER_POST_SEED.decode(), program_id)


def post_address(
    authority: Pubkey, index: int, program_id: Pubkey = PROGRAM_ID
) -> Pubkey:
    address, _ = find_program_address(
        [bytes(authority), USER_POST_SEED, post_index_seed(index)], program_id
    )
    logger.debug("post pda %s index=%d authority=%s", address, index, authority)
    return address
