"""Application use cases."""

from cadastre.application.use_cases.derive_launch_addresses import (
    DeriveLaunchAddresses,
)

__all__ = ["DeriveLaunchAddresses"]
