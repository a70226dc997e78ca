from typing import Iterable

from dishka import provide
from kubernetes.client import ApiClient, CoreV1Api

from regcred.config import Config
from regcred.domain.injection.port import SecretStore
from regcred.infrastructure.kubernetes.client import load_api_client
from regcred.infrastructure.kubernetes.store import KubernetesSecretStore
from regcred.util.di.base import Provider
from regcred.util.di.scope import Scope


class KubernetesProvider(Provider):
    @provide(scope=Scope.APP)
    def get_api_client(self, config: Config) -> Iterable[ApiClient]:
        api_client = load_api_client(config.kubernetes)
        yield api_client
        api_client.close()

    @provide(scope=Scope.APP)
    def get_core_api(self, api_client: ApiClient) -> CoreV1Api:
        return CoreV1Api(api_client)

    @provide(scope=Scope.APP)
    def get_secret_store(self, api: CoreV1Api) -> SecretStore:
        return KubernetesSecretStore(api=api)
