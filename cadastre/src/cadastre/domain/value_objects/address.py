"""
Address value object - Immutable 32-byte Solana account address.
"""

from dataclasses import dataclass
from typing import Union

from solders.pubkey import Pubkey  # type: ignore

from cadastre.domain.exceptions import InvalidAddressError

ADDRESS_LENGTH = 32

AddressLike = Union["Address", Pubkey, bytes, bytearray, memoryview, str]


@dataclass(frozen=True)
class Address:
    """
    Value object representing a 32-byte account address.

    Business rules:
    - Exactly 32 raw bytes
    - Equal iff the raw bytes are equal
    - Any 32-byte value is a valid identifier; only on-curve values
      have a private key
    - Text form is base58
    """

    raw: bytes

    def __post_init__(self):
        """Validate address bytes on creation."""
        if isinstance(self.raw, (bytearray, memoryview)):
            object.__setattr__(self, "raw", bytes(self.raw))

        if not isinstance(self.raw, bytes):
            raise InvalidAddressError(
                "address", f"expected bytes, got {type(self.raw).__name__}"
            )

        if len(self.raw) != ADDRESS_LENGTH:
            raise InvalidAddressError(
                "address",
                f"expected {ADDRESS_LENGTH} bytes, got {len(self.raw)}",
            )

    @classmethod
    def from_string(cls, value: str, field: str = "address") -> "Address":
        """
        Parse a base58 address.

        Args:
            value: Base58 encoded address
            field: Field name reported on failure

        Raises:
            InvalidAddressError: If the string is empty or not a 32-byte key
        """
        if not value:
            raise InvalidAddressError(field, "cannot be empty")

        try:
            pubkey = Pubkey.from_string(value)
        except (ValueError, TypeError) as e:
            raise InvalidAddressError(
                field, f"invalid base58 key {value!r}: {e}"
            ) from e

        return cls(bytes(pubkey))

    @classmethod
    def from_pubkey(cls, pubkey: Pubkey) -> "Address":
        """Wrap a solders Pubkey."""
        return cls(bytes(pubkey))

    @classmethod
    def coerce(cls, value: AddressLike, field: str = "address") -> "Address":
        """
        Build an Address from any supported representation.

        Accepts Address, Pubkey, raw bytes and base58 strings.

        Raises:
            InvalidAddressError: If the value is missing or malformed
        """
        if isinstance(value, Address):
            return value
        if value is None:
            raise InvalidAddressError(field, "cannot be empty")
        if isinstance(value, Pubkey):
            return cls.from_pubkey(value)
        if isinstance(value, str):
            return cls.from_string(value, field=field)
        if isinstance(value, (bytes, bytearray, memoryview)):
            try:
                return cls(bytes(value))
            except InvalidAddressError as e:
                raise InvalidAddressError(field, e.reason) from e

        raise InvalidAddressError(
            field, f"unsupported address type {type(value).__name__}"
        )

    def to_pubkey(self) -> Pubkey:
        """Return the solders Pubkey for this address."""
        return Pubkey.from_bytes(self.raw)

    def is_on_curve(self) -> bool:
        """Whether the address is a valid ed25519 point (has a private key)."""
        return self.to_pubkey().is_on_curve()

    def truncated(self) -> str:
        """Return truncated address for display (e.g., 'ABC...XYZ')."""
        text = str(self)
        return f"{text[:6]}...{text[-4:]}"

    def __bytes__(self) -> bytes:
        return self.raw

    def __str__(self) -> str:
        """String representation returns base58 address."""
        return str(self.to_pubkey())

    def __repr__(self) -> str:
        return f"Address('{self}')"
