"""Port for reading and creating Secrets in the cluster's object store."""

from abc import abstractmethod
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from regcred.domain.injection.model.secret import Secret, SecretRef
from regcred.domain.shared.port import Port


@dataclass(frozen=True)
class Found:
    secret: Secret


@dataclass(frozen=True)
class NotFound:
    ref: SecretRef


SecretLookup = Found | NotFound


@dataclass(frozen=True)
class Created:
    secret: Secret


@dataclass(frozen=True)
class AlreadyExists:
    """Another writer created the object first."""

    ref: SecretRef


CreateOutcome = Created | AlreadyExists


@runtime_checkable
class SecretStore(Port, Protocol):
    """Namespaced Secret access.

    Absence and create conflicts are expected outcomes and are returned as
    values. Every other failure raises.
    """

    @abstractmethod
    async def get(self, ref: SecretRef) -> SecretLookup:
        """Fetch a Secret.

        Raises:
            StoreReadError: If the read fails for any reason other than not-found.
        """
        ...

    @abstractmethod
    async def create(self, secret: Secret) -> CreateOutcome:
        """Create a Secret in the namespace named by its metadata.

        Raises:
            StoreWriteError: If the create fails for any reason other than a conflict.
        """
        ...
