"""Domain service interfaces."""

from cadastre.domain.services.i_identity_provider import IIdentityProvider

__all__ = ["IIdentityProvider"]
