from regcred.domain.injection.port.secret_store import (
    AlreadyExists,
    CreateOutcome,
    Created,
    Found,
    NotFound,
    SecretLookup,
    SecretStore,
)

__all__ = [
    "AlreadyExists",
    "CreateOutcome",
    "Created",
    "Found",
    "NotFound",
    "SecretLookup",
    "SecretStore",
]
