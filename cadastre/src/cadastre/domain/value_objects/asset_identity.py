"""
AssetIdentity value object - public half of a per-asset seed keypair.
"""

from dataclasses import dataclass
from typing import Union

from solders.keypair import Keypair  # type: ignore

from cadastre.domain.value_objects.address import Address, AddressLike


@dataclass(frozen=True)
class AssetIdentity:
    """
    Seed identity of one launched asset.

    Only the public address is used, purely as a seed value. The caller
    generates and persists the keypair; nothing here signs with it.
    """

    public_address: Address

    def __post_init__(self):
        """Validate the seed address before any derivation sees it."""
        object.__setattr__(
            self,
            "public_address",
            Address.coerce(self.public_address, field="asset_seed"),
        )

    @classmethod
    def from_keypair(cls, keypair: Keypair) -> "AssetIdentity":
        """Use the public key of an existing keypair."""
        return cls(Address.from_pubkey(keypair.pubkey()))

    @classmethod
    def coerce(
        cls, value: Union["AssetIdentity", Keypair, AddressLike]
    ) -> "AssetIdentity":
        """
        Build an AssetIdentity from a keypair or any address representation.

        Raises:
            InvalidAddressError: If the value is not a usable address
        """
        if isinstance(value, AssetIdentity):
            return value
        if isinstance(value, Keypair):
            return cls.from_keypair(value)
        return cls(value)

    def __str__(self) -> str:
        return str(self.public_address)
