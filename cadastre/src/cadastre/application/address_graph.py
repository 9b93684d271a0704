"""
Application address graph.

Derives every account address of one Xyber token launch from the creator
identity and the asset seed. Order is fixed: core, token, mint and metadata
first, then the associated token accounts that depend on mint and token.
"""

from typing import Optional, Union

from solders.keypair import Keypair  # type: ignore

from cadastre.domain.exceptions import IdentityMissingError, OwnerOffCurveError
from cadastre.domain.value_objects import (
    Address,
    AddressSet,
    AssetIdentity,
    DerivedAddress,
    ProgramRegistry,
)
from cadastre.domain.value_objects.address import AddressLike
from cadastre.infrastructure.blockchain import (
    derive_associated_address,
    find_program_address,
)
from shared.reporter import SystemReporter

CORE_SEED = b"xyber_core"
TOKEN_SEED = b"xyber_token"
MINT_SEED = b"MINT"
METADATA_SEED = b"metadata"

AssetSeedLike = Union[AssetIdentity, Keypair, AddressLike]


class AddressGraph:
    """
    Fixed composition of the PDA and associated-address primitives.

    Program constants are injected so tests can swap in their own programs.
    """

    def __init__(
        self,
        registry: Optional[ProgramRegistry] = None,
        reporter: Optional[SystemReporter] = None,
    ):
        """
        Initialize graph.

        Args:
            registry: Program constants (defaults to the deployed programs)
            reporter: Optional reporter for derivation tracing
        """
        self.registry = registry or ProgramRegistry.default()
        self.reporter = reporter

    def _trace(self, name: str, derived: Union[DerivedAddress, Address]) -> None:
        if not self.reporter:
            return
        if isinstance(derived, DerivedAddress):
            msg = f"{name}: {derived.address} (bump {derived.bump})"
        else:
            msg = f"{name}: {derived}"
        self.reporter.debug(msg, context="AddressGraph", verbose_level=2)

    # ================================================================
    # Program derived addresses
    # ================================================================

    def derive_core(self) -> DerivedAddress:
        """Global core state PDA: ["xyber_core"]."""
        derived = find_program_address(
            [CORE_SEED], self.registry.application_program
        )
        self._trace("core", derived)
        return derived

    def derive_token(
        self, identity: AddressLike, asset_seed: AssetSeedLike
    ) -> DerivedAddress:
        """Per-asset token PDA: ["xyber_token", identity, asset seed]."""
        creator = Address.coerce(identity, field="identity")
        asset = AssetIdentity.coerce(asset_seed)
        derived = find_program_address(
            [TOKEN_SEED, creator, asset.public_address],
            self.registry.application_program,
        )
        self._trace("token", derived)
        return derived

    def derive_mint(self, asset_seed: AssetSeedLike) -> DerivedAddress:
        """Mint PDA: ["MINT", asset seed] under the token factory."""
        asset = AssetIdentity.coerce(asset_seed)
        derived = find_program_address(
            [MINT_SEED, asset.public_address],
            self.registry.token_factory_program,
        )
        self._trace("mint", derived)
        return derived

    def derive_metadata(self, mint: AddressLike) -> DerivedAddress:
        """Metadata PDA: ["metadata", metadata program, mint]."""
        mint_address = Address.coerce(mint, field="mint")
        derived = find_program_address(
            [METADATA_SEED, self.registry.metadata_program, mint_address],
            self.registry.metadata_program,
        )
        self._trace("metadata", derived)
        return derived

    # ================================================================
    # Associated token accounts
    # ================================================================

    def derive_associated(
        self, owner: AddressLike, mint: AddressLike, allow_owner_off_curve: bool = False
    ) -> Address:
        """Associated token account of owner for mint."""
        return derive_associated_address(
            owner,
            mint,
            token_program_id=self.registry.token_program,
            allow_owner_off_curve=allow_owner_off_curve,
            associated_program_id=self.registry.associated_token_program,
        )

    # ================================================================
    # Full graph
    # ================================================================

    def build_addresses(
        self, identity: Optional[AddressLike], asset_seed: AssetSeedLike
    ) -> AddressSet:
        """
        Derive all launch addresses.

        Args:
            identity: Connected creator wallet
            asset_seed: Asset seed keypair or its public address

        Returns:
            AddressSet with the eight launch addresses and PDA bumps

        Raises:
            IdentityMissingError: If identity is None
            InvalidAddressError: If identity or asset seed is malformed
            OwnerOffCurveError: If identity is not a signing key
        """
        if identity is None:
            raise IdentityMissingError()

        creator = Address.coerce(identity, field="identity")
        if not creator.is_on_curve():
            raise OwnerOffCurveError(str(creator))
        asset = AssetIdentity.coerce(asset_seed)
        payment_mint = self.registry.payment_mint

        core = self.derive_core()
        token = self.derive_token(creator, asset)
        mint = self.derive_mint(asset)
        metadata = self.derive_metadata(mint.address)

        creator_token_account = self.derive_associated(creator, mint.address)
        creator_payment_account = self.derive_associated(creator, payment_mint)
        escrow_token_account = self.derive_associated(
            token.address, payment_mint, allow_owner_off_curve=True
        )
        vault_token_account = self.derive_associated(
            token.address, mint.address, allow_owner_off_curve=True
        )

        address_set = AddressSet(
            core=core.address,
            token=token.address,
            mint=mint.address,
            metadata=metadata.address,
            creator_token_account=creator_token_account,
            creator_payment_account=creator_payment_account,
            escrow_token_account=escrow_token_account,
            vault_token_account=vault_token_account,
            bumps={
                "core": core.bump,
                "token": token.bump,
                "mint": mint.bump,
                "metadata": metadata.bump,
            },
        )

        if self.reporter:
            self.reporter.info(
                f"Derived launch addresses for creator {creator.truncated()}, "
                f"asset {asset.public_address.truncated()}",
                context="AddressGraph",
                verbose_level=2,
            )
            for name, address in address_set.as_dict().items():
                if name not in address_set.bumps:
                    self._trace(name, address)

        return address_set
