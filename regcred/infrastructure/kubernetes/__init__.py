from regcred.infrastructure.kubernetes.di import KubernetesProvider
from regcred.infrastructure.kubernetes.store import KubernetesSecretStore

__all__ = ["KubernetesProvider", "KubernetesSecretStore"]
