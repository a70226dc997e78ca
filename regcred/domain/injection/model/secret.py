from pydantic import Field

from regcred.domain.injection.model.pod import ObjectMeta
from regcred.domain.shared.model.value import KubeObject, ValueObject

DOCKER_CONFIG_JSON_TYPE = "kubernetes.io/dockerconfigjson"


class SecretRef(ValueObject):
    """Identifies a namespaced Secret."""

    namespace: str
    name: str

    def __str__(self) -> str:
        return f"{self.namespace}/{self.name}"


class Secret(KubeObject):
    """Registry credentials stored as a Kubernetes Secret.

    The payload is opaque to us: `data` holds base64 values exactly as the
    API returns them and is copied verbatim.
    """

    api_version: str = "v1"
    kind: str = "Secret"
    metadata: ObjectMeta = Field(default_factory=ObjectMeta)
    type: str | None = None
    data: dict[str, str] | None = None
    string_data: dict[str, str] | None = None
    immutable: bool | None = None

    @property
    def ref(self) -> SecretRef:
        return SecretRef(namespace=self.metadata.namespace or "", name=self.metadata.name or "")

    def copy_to(self, namespace: str) -> "Secret":
        """Return a copy retargeted to `namespace`, ready to be created.

        Server-assigned identity fields are cleared; the API server rejects a
        create that carries a resourceVersion.
        """
        copied = self.model_copy(deep=True)
        copied.metadata = copied.metadata.model_copy(
            update={
                "namespace": namespace,
                "uid": None,
                "resource_version": None,
                "creation_timestamp": None,
                "managed_fields": None,
            }
        )
        return copied
