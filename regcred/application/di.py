from dishka import AsyncContainer, make_async_container

from regcred.config import Config
from regcred.domain.injection.util.di import InjectionProvider
from regcred.infrastructure.kubernetes import KubernetesProvider
from regcred.util.di.base import ConfigProvider
from regcred.util.di.scope import Scope


def create_container(config: Config | None = None) -> AsyncContainer:
    # Pydantic Settings populates from env vars at runtime
    config = config or Config()

    return make_async_container(
        ConfigProvider(),
        KubernetesProvider(),
        InjectionProvider(),
        context={Config: config},
        scopes=Scope,  # type: ignore[arg-type]  # Custom scope class
    )
