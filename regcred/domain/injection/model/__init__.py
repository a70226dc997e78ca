from regcred.domain.injection.model.pod import (
    Container,
    LocalObjectReference,
    ObjectMeta,
    Pod,
    PodSpec,
)
from regcred.domain.injection.model.secret import (
    DOCKER_CONFIG_JSON_TYPE,
    Secret,
    SecretRef,
)
from regcred.domain.injection.model.settings import InjectionSettings

__all__ = [
    "DOCKER_CONFIG_JSON_TYPE",
    "Container",
    "InjectionSettings",
    "LocalObjectReference",
    "ObjectMeta",
    "Pod",
    "PodSpec",
    "Secret",
    "SecretRef",
]
