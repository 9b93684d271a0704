"""
Derive Launch Addresses use case.

Resolves the connected wallet and computes every account address of a new
token launch.
"""

from cadastre.application.address_graph import AddressGraph, AssetSeedLike
from cadastre.domain.exceptions import IdentityMissingError
from cadastre.domain.services.i_identity_provider import IIdentityProvider
from cadastre.domain.value_objects import AddressSet
from shared.reporter import SystemReporter


class DeriveLaunchAddresses:
    """
    Compute the launch account addresses for the connected wallet.

    Business rules:
    - A connected wallet is required
    - Addresses are computed, never stored
    - No partial result on failure
    """

    def __init__(
        self,
        identity_provider: IIdentityProvider,
        address_graph: AddressGraph,
        reporter: SystemReporter | None = None,
    ):
        """
        Initialize use case with dependencies.

        Args:
            identity_provider: Source of the connected wallet identity
            address_graph: Address graph bound to the program constants
            reporter: Optional reporter
        """
        self.identity_provider = identity_provider
        self.address_graph = address_graph
        self.reporter = reporter

    async def execute(self, asset_seed: AssetSeedLike) -> AddressSet:
        """
        Execute launch address derivation.

        Args:
            asset_seed: Asset seed keypair or its public address

        Returns:
            AddressSet for the connected creator and the asset

        Raises:
            IdentityMissingError: If no wallet is connected
        """
        # 1. Resolve identity (only suspension point)
        identity = await self.identity_provider.get_identity()
        if identity is None:
            if self.reporter:
                self.reporter.warning(
                    "Launch address derivation requested without a wallet",
                    context="DeriveLaunchAddresses",
                )
            raise IdentityMissingError()

        # 2. Derive the full graph (pure)
        return self.address_graph.build_addresses(identity, asset_seed)
