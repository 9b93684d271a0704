"""
Program derived address (PDA) derivation.

Candidates follow the Solana runtime layout:

    sha256(seed_0 || ... || seed_n || [bump] || program_id ||
           b"ProgramDerivedAddress")

Each candidate is built by solders. A candidate is accepted only if it is
NOT a valid ed25519 point, so no private key can ever sign for it. Bumps
are searched from 255 down to 0 and the first success is the canonical
bump. Seed limits are checked here before solders sees them.
"""

from typing import List, Sequence, Union

from solders.pubkey import Pubkey  # type: ignore

from cadastre.domain.exceptions import (
    InvalidSeedsError,
    NoValidBumpFoundError,
    OnCurveAddressError,
)
from cadastre.domain.value_objects import Address, DerivedAddress
from cadastre.domain.value_objects.address import AddressLike

PDA_MARKER = b"ProgramDerivedAddress"
MAX_SEEDS = 16
MAX_SEED_LEN = 32
MAX_BUMP = 255

Seed = Union[bytes, bytearray, memoryview, str, Address, Pubkey]


def is_on_curve(candidate: bytes) -> bool:
    """
    Check whether 32 bytes decompress to a valid ed25519 point.

    Args:
        candidate: 32-byte compressed point

    Returns:
        True if a private key could exist for the value
    """
    return Pubkey.from_bytes(candidate).is_on_curve()


def normalize_seeds(seeds: Sequence[Seed], max_seeds: int = MAX_SEEDS) -> List[bytes]:
    """
    Convert seeds to raw bytes and enforce the runtime limits.

    Strings are UTF-8 encoded; addresses contribute their 32 raw bytes.

    Raises:
        InvalidSeedsError: Too many seeds, a seed over 32 bytes, or an
            unsupported seed type
    """
    if isinstance(seeds, (bytes, bytearray, str)):
        raise InvalidSeedsError("seeds must be a sequence of seed values")

    if len(seeds) > max_seeds:
        raise InvalidSeedsError(f"at most {max_seeds} seeds allowed, got {len(seeds)}")

    normalized = []
    for index, seed in enumerate(seeds):
        if isinstance(seed, str):
            raw = seed.encode("utf-8")
        elif isinstance(seed, (bytes, bytearray, memoryview, Address, Pubkey)):
            raw = bytes(seed)
        else:
            raise InvalidSeedsError(
                f"seed {index} has unsupported type {type(seed).__name__}"
            )

        if len(raw) > MAX_SEED_LEN:
            raise InvalidSeedsError(
                f"seed {index} is {len(raw)} bytes, max is {MAX_SEED_LEN}"
            )
        normalized.append(raw)

    return normalized


def create_program_address(
    seeds: Sequence[Seed], program_id: AddressLike
) -> Address:
    """
    Derive one candidate address for seeds that already include the bump.

    Hashing and the curve check are done by ``Pubkey.create_program_address``.

    Args:
        seeds: Ordered seeds, normally ending with the one-byte bump
        program_id: Program the address belongs to

    Returns:
        The off-curve program address

    Raises:
        InvalidAddressError: If program_id is malformed
        InvalidSeedsError: If the seeds break the runtime limits
        OnCurveAddressError: If the candidate lies on the curve

    Examples:
        >>> derived = find_program_address([b"xyber_core"], program_id)
        >>> create_program_address([b"xyber_core", bytes([derived.bump])],
        ...                        program_id) == derived.address
        True
    """
    program = Address.coerce(program_id, field="program_id")
    raw_seeds = normalize_seeds(seeds)

    try:
        pubkey = Pubkey.create_program_address(raw_seeds, program.to_pubkey())
    except (KeyboardInterrupt, SystemExit):
        raise
    except BaseException as e:
        # solders surfaces an on-curve candidate as a Rust panic
        bump = raw_seeds[-1][0] if raw_seeds and len(raw_seeds[-1]) == 1 else None
        raise OnCurveAddressError(str(program), bump) from e

    return Address.from_pubkey(pubkey)


def find_program_address(
    seeds: Sequence[Seed], program_id: AddressLike
) -> DerivedAddress:
    """
    Search the canonical bump for seeds and derive the program address.

    Bumps are tried from 255 down to 0; the first off-curve candidate wins.

    Args:
        seeds: Ordered seeds without a bump (at most 15)
        program_id: Program the address belongs to

    Returns:
        DerivedAddress(address, bump)

    Raises:
        InvalidAddressError: If program_id is malformed
        InvalidSeedsError: If the seeds break the runtime limits
        NoValidBumpFoundError: If no bump yields an off-curve address
    """
    program = Address.coerce(program_id, field="program_id")
    # One slot is reserved for the bump
    raw_seeds = normalize_seeds(seeds, max_seeds=MAX_SEEDS - 1)

    for bump in range(MAX_BUMP, -1, -1):
        try:
            address = create_program_address([*raw_seeds, bytes([bump])], program)
        except OnCurveAddressError:
            continue
        return DerivedAddress(address, bump)

    raise NoValidBumpFoundError(str(program))
