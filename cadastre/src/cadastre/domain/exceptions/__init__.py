"""
Domain exceptions package.
"""

# Base exceptions
from cadastre.domain.exceptions.base import (
    CadastreException,
    IdentityMissingError,
    InvalidAddressError,
    InvalidSeedsError,
    ValidationError,
)

# Derivation exceptions
from cadastre.domain.exceptions.derivation import (
    DerivationError,
    NoValidBumpFoundError,
    OnCurveAddressError,
    OwnerOffCurveError,
)

__all__ = [
    # Base
    "CadastreException",
    "ValidationError",
    "InvalidAddressError",
    "InvalidSeedsError",
    "IdentityMissingError",
    # Derivation
    "DerivationError",
    "NoValidBumpFoundError",
    "OnCurveAddressError",
    "OwnerOffCurveError",
]
