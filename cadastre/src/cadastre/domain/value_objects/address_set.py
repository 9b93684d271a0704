"""
AddressSet value object - every account address of one token launch.
"""

from dataclasses import dataclass, field, fields
from types import MappingProxyType
from typing import Dict, Mapping

from cadastre.domain.value_objects.address import Address


@dataclass(frozen=True)
class AddressSet:
    """
    Immutable record of the launch accounts.

    Attributes:
        core: Global Xyber core state PDA
        token: Per-creator, per-asset Xyber token PDA
        mint: Token mint PDA
        metadata: Metaplex metadata PDA of the mint
        creator_token_account: Creator's associated account for the mint
        creator_payment_account: Creator's associated payment-mint account
        escrow_token_account: Token PDA's associated payment-mint account
        vault_token_account: Token PDA's associated account for the mint
        bumps: Bump of each directly derived PDA (core, token, mint, metadata)
    """

    core: Address
    token: Address
    mint: Address
    metadata: Address
    creator_token_account: Address
    creator_payment_account: Address
    escrow_token_account: Address
    vault_token_account: Address
    bumps: Mapping[str, int] = field(default_factory=dict, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "bumps", MappingProxyType(dict(self.bumps)))

    def as_dict(self) -> Dict[str, Address]:
        """Named addresses in derivation order."""
        return {
            f.name: getattr(self, f.name) for f in fields(self) if f.name != "bumps"
        }

    def to_dict(self) -> Dict[str, str]:
        """Named base58 addresses, ready for JSON."""
        return {name: str(address) for name, address in self.as_dict().items()}
