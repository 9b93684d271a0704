"""
In-memory wallet session adapter.

Holds the public key of the currently connected wallet.
"""

from typing import Optional

from cadastre.domain.services.i_identity_provider import IIdentityProvider
from cadastre.domain.value_objects import Address
from cadastre.domain.value_objects.address import AddressLike


class WalletSession(IIdentityProvider):
    """
    Wallet session exposing the connected identity.

    The public key is validated when the wallet connects, so consumers
    only ever see a well-formed Address or None.
    """

    def __init__(self, public_key: Optional[AddressLike] = None):
        """
        Initialize session.

        Args:
            public_key: Already connected wallet, if any
        """
        self._identity: Optional[Address] = None
        if public_key is not None:
            self.connect(public_key)

    @property
    def is_connected(self) -> bool:
        return self._identity is not None

    def connect(self, public_key: AddressLike) -> Address:
        """
        Connect a wallet.

        Raises:
            InvalidAddressError: If the public key is malformed
        """
        self._identity = Address.coerce(public_key, field="public_key")
        return self._identity

    def disconnect(self) -> None:
        self._identity = None

    async def get_identity(self) -> Optional[Address]:
        return self._identity
