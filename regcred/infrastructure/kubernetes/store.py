"""SecretStore backed by the Kubernetes core/v1 API."""

import asyncio

from kubernetes.client import CoreV1Api
from kubernetes.client.exceptions import ApiException
from urllib3.exceptions import HTTPError

from regcred.domain.injection.model import Secret, SecretRef
from regcred.domain.injection.port import (
    AlreadyExists,
    CreateOutcome,
    Created,
    Found,
    NotFound,
    SecretLookup,
    SecretStore,
)
from regcred.domain.shared.error import StoreReadError, StoreWriteError
from regcred.infrastructure.kubernetes.mappers import secret_to_body, secret_to_domain

HTTP_NOT_FOUND = 404
HTTP_CONFLICT = 409


class KubernetesSecretStore(SecretStore):
    """Reads and creates Secrets through CoreV1Api.

    The kubernetes client is synchronous; calls run in a worker thread so
    concurrent admission requests do not block each other.
    """

    def __init__(self, api: CoreV1Api):
        self._api = api

    async def get(self, ref: SecretRef) -> SecretLookup:
        try:
            v1_secret = await asyncio.to_thread(
                self._api.read_namespaced_secret,
                name=ref.name,
                namespace=ref.namespace,
            )
        except ApiException as e:
            if e.status == HTTP_NOT_FOUND:
                return NotFound(ref=ref)
            raise StoreReadError(
                f"Failed to read secret {ref}: {e.status} {e.reason}",
                code=f"read_failed_{e.status}",
            ) from e
        except (HTTPError, OSError) as e:
            # API server unreachable: connection refused, timeouts, TLS failures
            raise StoreReadError(
                f"Failed to read secret {ref}: {e}",
                code="read_unreachable",
            ) from e

        return Found(secret=secret_to_domain(self._api.api_client, v1_secret))

    async def create(self, secret: Secret) -> CreateOutcome:
        ref = secret.ref
        try:
            v1_secret = await asyncio.to_thread(
                self._api.create_namespaced_secret,
                namespace=ref.namespace,
                body=secret_to_body(secret),
            )
        except ApiException as e:
            if e.status == HTTP_CONFLICT:
                return AlreadyExists(ref=ref)
            raise StoreWriteError(
                f"Failed to create secret {ref}: {e.status} {e.reason}",
                code=f"create_failed_{e.status}",
            ) from e
        except (HTTPError, OSError) as e:
            raise StoreWriteError(
                f"Failed to create secret {ref}: {e}",
                code="create_unreachable",
            ) from e

        return Created(secret=secret_to_domain(self._api.api_client, v1_secret))
