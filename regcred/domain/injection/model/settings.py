from regcred.domain.image import DEFAULT_DOMAIN
from regcred.domain.injection.model.secret import SecretRef
from regcred.domain.shared.model.value import ValueObject


class InjectionSettings(ValueObject):
    """What to inject and where the template secret lives. Fixed at startup."""

    domain: str = DEFAULT_DOMAIN
    secret_name: str
    secret_namespace: str = "default"

    @property
    def canonical(self) -> SecretRef:
        return SecretRef(namespace=self.secret_namespace, name=self.secret_name)

    def target(self, namespace: str) -> SecretRef:
        return SecretRef(namespace=namespace, name=self.secret_name)
