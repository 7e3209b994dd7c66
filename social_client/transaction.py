"""Wrap built instructions into a signed transaction.

The blockhash must be fetched right before calling :func:`assemble`; an
expired one is only detected by the cluster at submission time.
"""
import typing
from solders.hash import Hash
from solders.instruction import Instruction
from solders.keypair import Keypair
from solders.transaction import Transaction
from .errors import ValidationError


def assemble(
    instructions: typing.Sequence[Instruction],
    payer: Keypair,
    recent_blockhash: Hash,
) -> Transaction:
    """Sign ``instructions`` in order with ``payer`` as the sole fee payer.

    Every signer any instruction asks for must be the payer.
    """
    if not instructions:
        raise ValidationError("a transaction needs at least one instruction")
    signers = {
        meta.pubkey
        for ix in instructions
        for meta in ix.accounts
        if meta.is_signer
    }
    others = signers - {payer.pubkey()}
    if others:
        raise ValidationError(
            f"instructions need signers other than the payer: {sorted(map(str, others))}"
        )
    return Transaction.new_signed_with_payer(
        list(instructions), payer.pubkey(), [payer], recent_blockhash
    )
