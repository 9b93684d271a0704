"""
Address derivation exceptions.

Defines failures of the program-derived address search.
"""

from cadastre.domain.exceptions.base import CadastreException


class DerivationError(CadastreException):
    """Base exception for address derivation."""


class NoValidBumpFoundError(DerivationError):
    """Raised when every bump in [0, 255] produced an on-curve candidate."""

    def __init__(self, program_id: str):
        """
        Initialize bump exhaustion error.

        Args:
            program_id: Program the derivation was attempted for
        """
        super().__init__(
            f"Unable to find a viable program address bump for {program_id}",
            code="NO_VALID_BUMP",
        )
        self.program_id = program_id


class OnCurveAddressError(DerivationError):
    """Raised when a single derivation candidate lies on the ed25519 curve."""

    def __init__(self, program_id: str, bump: int | None = None):
        """
        Initialize on-curve candidate error.

        Args:
            program_id: Program the candidate was derived for
            bump: Trailing bump byte of the candidate seeds, if any
        """
        super().__init__(
            f"Derived address for {program_id} is on curve (bump={bump})",
            code="ON_CURVE_ADDRESS",
        )
        self.program_id = program_id
        self.bump = bump


class OwnerOffCurveError(DerivationError):
    """Raised when an off-curve owner is used without allowing it."""

    def __init__(self, owner: str):
        """
        Initialize off-curve owner error.

        Args:
            owner: Owner address that has no private key
        """
        super().__init__(
            f"Token account owner {owner} is off curve",
            code="OWNER_OFF_CURVE",
        )
        self.owner = owner
