"""
Base domain exceptions.
"""


class CadastreException(Exception):
    """Base exception for all Cadastre domain errors."""

    def __init__(self, message: str, code: str | None = None):
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(self.message)


class ValidationError(CadastreException):
    """Raised when an input is rejected before any derivation work."""

    def __init__(self, field: str, reason: str, code: str = "VALIDATION_ERROR"):
        message = f"Validation failed for {field}: {reason}"
        super().__init__(message, code=code)
        self.field = field
        self.reason = reason


class InvalidAddressError(ValidationError):
    """Raised when an address or program id is malformed."""

    def __init__(self, field: str, reason: str):
        super().__init__(field, reason, code="INVALID_ADDRESS")


class InvalidSeedsError(ValidationError):
    """Raised when a seed list breaks the runtime seed limits."""

    def __init__(self, reason: str):
        super().__init__("seeds", reason, code="INVALID_SEEDS")


class IdentityMissingError(CadastreException):
    """Raised when no authenticated identity is available."""

    def __init__(self, message: str = "No connected wallet identity"):
        super().__init__(message, code="IDENTITY_MISSING")
