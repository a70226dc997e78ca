from dishka import provide

from regcred.config import Config
from regcred.domain.injection.model import InjectionSettings
from regcred.domain.injection.service import PullSecretInjector
from regcred.util.di.base import Provider
from regcred.util.di.scope import Scope


class InjectionProvider(Provider):
    injector = provide(PullSecretInjector, scope=Scope.APP)

    @provide(scope=Scope.APP)
    def get_settings(self, config: Config) -> InjectionSettings:
        config.validate_injector()
        return InjectionSettings(
            domain=config.injector.domain,
            secret_name=config.injector.secret_name,
            secret_namespace=config.injector.secret_namespace,
        )
