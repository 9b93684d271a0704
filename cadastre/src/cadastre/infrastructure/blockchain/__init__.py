"""Solana address derivation for Cadastre."""

from cadastre.infrastructure.blockchain.associated_token import (
    derive_associated_address,
)
from cadastre.infrastructure.blockchain.program_address import (
    MAX_SEED_LEN,
    MAX_SEEDS,
    PDA_MARKER,
    create_program_address,
    find_program_address,
    is_on_curve,
)

__all__ = [
    "PDA_MARKER",
    "MAX_SEEDS",
    "MAX_SEED_LEN",
    "is_on_curve",
    "create_program_address",
    "find_program_address",
    "derive_associated_address",
]
