from regcred.domain.injection.util.di.provider import InjectionProvider

__all__ = ["InjectionProvider"]
