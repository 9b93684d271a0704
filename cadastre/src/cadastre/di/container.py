"""
Dependency Injection Container for Cadastre.

Wires settings, reporter, program registry and the address graph.
"""

import logging
from typing import Optional

from cadastre.application.address_graph import AddressGraph
from cadastre.application.use_cases.derive_launch_addresses import (
    DeriveLaunchAddresses,
)
from cadastre.config.settings import Settings, get_settings
from cadastre.domain.services.i_identity_provider import IIdentityProvider
from cadastre.domain.value_objects import ProgramRegistry
from shared.reporter import SystemReporter


class DIContainer:
    """
    Dependency Injection Container.

    Manages singleton instances built lazily from settings.
    """

    def __init__(self, settings: Optional[Settings] = None):
        """
        Initialize container.

        Args:
            settings: Settings to use (defaults to the global settings)
        """
        self._settings = settings
        self._reporter: Optional[SystemReporter] = None
        self._registry: Optional[ProgramRegistry] = None
        self._address_graph: Optional[AddressGraph] = None

    @property
    def settings(self) -> Settings:
        if self._settings is None:
            self._settings = get_settings()
        return self._settings

    @property
    def reporter(self) -> SystemReporter:
        if self._reporter is None:
            self._reporter = SystemReporter(
                name="cadastre",
                log_dir=self.settings.LOG_DIR,
                level=getattr(logging, self.settings.LOG_LEVEL),
                verbose=self.settings.VERBOSE,
            )
        return self._reporter

    @property
    def registry(self) -> ProgramRegistry:
        if self._registry is None:
            self._registry = ProgramRegistry.from_settings(self.settings)
        return self._registry

    @property
    def address_graph(self) -> AddressGraph:
        if self._address_graph is None:
            self._address_graph = AddressGraph(
                registry=self.registry,
                reporter=self.reporter,
            )
        return self._address_graph

    def derive_launch_addresses(
        self, identity_provider: IIdentityProvider
    ) -> DeriveLaunchAddresses:
        """Create the use case for one wallet session."""
        return DeriveLaunchAddresses(
            identity_provider=identity_provider,
            address_graph=self.address_graph,
            reporter=self.reporter,
        )
