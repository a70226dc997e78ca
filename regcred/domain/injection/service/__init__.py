from regcred.domain.injection.service.injector import PullSecretInjector

__all__ = ["PullSecretInjector"]
