"""Error hierarchy for regcred.

Error layers:
- RegcredError: Base class for all regcred errors
- DomainError: Malformed input or rule violations (4xx responses)
- InfrastructureError: Object store and configuration failures (5xx responses)

These errors are mapped to admission responses by the webhook route, see
regcred.application.api.v1.errors.
"""


class RegcredError(Exception):
    """Base class for all regcred errors."""

    def __init__(self, message: str, code: str | None = None) -> None:
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(message)


# =============================================================================
# Domain Errors (bad input - typically 4xx)
# =============================================================================


class DomainError(RegcredError):
    """Base class for domain errors."""


class DecodeError(DomainError):
    """The admission request does not carry a decodable Pod."""


class ValidationError(DomainError):
    """Input validation failed."""

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message, code="VALIDATION_ERROR")
        self.field = field


# =============================================================================
# Infrastructure Errors (store / system failures - typically 500)
# =============================================================================


class InfrastructureError(RegcredError):
    """Base class for infrastructure/system errors."""


class StoreReadError(InfrastructureError):
    """Fetching an object from the store failed for a reason other than not-found."""


class StoreWriteError(InfrastructureError):
    """Creating an object in the store failed for a reason other than already-exists."""


class CanonicalMissingError(InfrastructureError):
    """The template pull secret is absent from its source namespace."""


class ConfigurationError(InfrastructureError):
    """System misconfiguration detected."""
