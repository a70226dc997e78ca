"""Centralized mapping of regcred errors to admission status codes."""

from regcred.domain.shared.error import (
    DecodeError,
    DomainError,
    InfrastructureError,
    RegcredError,
    ValidationError,
)

DOMAIN_ERROR_STATUS_MAP: dict[type[DomainError], int] = {
    DecodeError: 400,
    ValidationError: 400,
}


def map_regcred_error(error: RegcredError) -> int:
    """Return the HTTP status code reported in the AdmissionResponse for `error`."""
    if isinstance(error, InfrastructureError):
        return 500

    if isinstance(error, DomainError):
        return DOMAIN_ERROR_STATUS_MAP.get(type(error), 400)

    # Fallback for unknown RegcredError subclasses
    return 500
