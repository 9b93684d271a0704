"""
Identity provider service interface.
"""

from abc import ABC, abstractmethod
from typing import Optional

from cadastre.domain.value_objects import Address


class IIdentityProvider(ABC):
    """
    Abstract source of the authenticated wallet identity.

    Implemented by the wallet/session collaborator. The identity is the
    connected wallet's public key, already verified upstream.
    """

    @abstractmethod
    async def get_identity(self) -> Optional[Address]:
        """
        Get the current identity address.

        Returns:
            Connected wallet address, or None if no wallet is connected
        """
