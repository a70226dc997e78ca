"""Global test fixtures."""

import asyncio
import base64
import itertools
import uuid

import logfire
import pytest

from regcred.domain.injection.model import (
    DOCKER_CONFIG_JSON_TYPE,
    ObjectMeta,
    Pod,
    Secret,
    SecretRef,
)
from regcred.domain.injection.port import (
    AlreadyExists,
    CreateOutcome,
    Created,
    Found,
    NotFound,
    SecretLookup,
    SecretStore,
)

# Spans and instrumentation become no-ops instead of warning about missing config
logfire.configure(send_to_logfire=False, console=False)

SECRET_NAME = "regcred"
SECRET_NAMESPACE = "kube-system"
TEST_NAMESPACE = "default"

DOCKER_CONFIG = base64.b64encode(
    b'{"auths":{"https://index.docker.io/v1/":{"username":"d-kuro","password":"pass","auth":"ZC1rdXJvOnBhc3M="}}}'
).decode()


class InMemorySecretStore(SecretStore):
    """SecretStore that behaves like the API server for get/create.

    Every call yields to the event loop so concurrent callers interleave.
    """

    def __init__(self) -> None:
        self.secrets: dict[SecretRef, Secret] = {}
        self.get_calls: list[SecretRef] = []
        self.create_calls: list[SecretRef] = []
        self._versions = itertools.count(1)

    def add(self, secret: Secret) -> Secret:
        stored = secret.model_copy(deep=True)
        stored.metadata.resource_version = str(next(self._versions))
        stored.metadata.uid = str(uuid.uuid4())
        self.secrets[stored.ref] = stored
        return stored

    async def get(self, ref: SecretRef) -> SecretLookup:
        self.get_calls.append(ref)
        await asyncio.sleep(0)
        secret = self.secrets.get(ref)
        if secret is None:
            return NotFound(ref=ref)
        return Found(secret=secret.model_copy(deep=True))

    async def create(self, secret: Secret) -> CreateOutcome:
        self.create_calls.append(secret.ref)
        await asyncio.sleep(0)
        if secret.metadata.resource_version:
            raise AssertionError("resourceVersion must not be set on objects to be created")
        if secret.ref in self.secrets:
            return AlreadyExists(ref=secret.ref)
        return Created(secret=self.add(secret).model_copy(deep=True))


def new_pod(
    name: str = "nginx",
    namespace: str | None = TEST_NAMESPACE,
    image: str = "nginx:latest",
    pull_secrets: list[str] | None = None,
) -> Pod:
    return Pod.model_validate(
        {
            "apiVersion": "v1",
            "kind": "Pod",
            "metadata": {"name": name, "namespace": namespace},
            "spec": {
                "containers": [{"name": "nginx", "image": image}],
                "imagePullSecrets": [{"name": n} for n in pull_secrets or []],
            },
        }
    )


def new_secret(name: str = SECRET_NAME, namespace: str = SECRET_NAMESPACE) -> Secret:
    return Secret(
        metadata=ObjectMeta(name=name, namespace=namespace),
        type=DOCKER_CONFIG_JSON_TYPE,
        data={".dockerconfigjson": DOCKER_CONFIG},
    )


@pytest.fixture
def secret_store() -> InMemorySecretStore:
    return InMemorySecretStore()


@pytest.fixture
def canonical_secret(secret_store: InMemorySecretStore) -> Secret:
    return secret_store.add(new_secret())


@pytest.fixture
def pod_factory():
    return new_pod


@pytest.fixture
def secret_factory():
    return new_secret

