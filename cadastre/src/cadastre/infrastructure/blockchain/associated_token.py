"""
Associated token account address derivation.

Mirrors the SPL ``getAssociatedTokenAddress`` convention: one canonical
account per (owner, mint) pair, derived from
``[owner, token_program_id, mint]`` under the associated token program.
"""

from cadastre.domain.exceptions import OwnerOffCurveError
from cadastre.domain.value_objects import Address
from cadastre.domain.value_objects.address import AddressLike
from cadastre.domain.value_objects.program_registry import (
    ASSOCIATED_TOKEN_PROGRAM_ID,
    TOKEN_PROGRAM_ID,
)
from cadastre.infrastructure.blockchain.program_address import (
    find_program_address,
    is_on_curve,
)


def derive_associated_address(
    owner: AddressLike,
    mint: AddressLike,
    token_program_id: AddressLike = TOKEN_PROGRAM_ID,
    allow_owner_off_curve: bool = False,
    associated_program_id: AddressLike = ASSOCIATED_TOKEN_PROGRAM_ID,
) -> Address:
    """
    Derive the associated token account of owner for mint.

    Args:
        owner: Wallet (or PDA) that owns the token account
        mint: Mint of the held token
        token_program_id: Token program, part of the seeds
        allow_owner_off_curve: Permit a PDA owner (escrows, vaults)
        associated_program_id: Program the address is derived under

    Returns:
        Off-curve associated account address (bump is discarded)

    Raises:
        InvalidAddressError: If any address is malformed
        OwnerOffCurveError: If owner is off curve and that is not allowed
    """
    owner_address = Address.coerce(owner, field="owner")
    mint_address = Address.coerce(mint, field="mint")
    token_program = Address.coerce(token_program_id, field="token_program_id")

    if not allow_owner_off_curve and not is_on_curve(bytes(owner_address)):
        raise OwnerOffCurveError(str(owner_address))

    address, _ = find_program_address(
        [owner_address, token_program, mint_address],
        associated_program_id,
    )
    return address
