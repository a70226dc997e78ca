"""The slice of a Pod the injector reads and writes."""

from typing import Any

from pydantic import Field, field_validator

from regcred.domain.shared.model.value import KubeObject


class ObjectMeta(KubeObject):
    name: str | None = None
    generate_name: str | None = None
    namespace: str | None = None
    labels: dict[str, str] | None = None
    annotations: dict[str, str] | None = None
    owner_references: list[dict[str, Any]] | None = None

    # Assigned by the API server; meaningless outside the object they came from
    uid: str | None = None
    resource_version: str | None = None
    creation_timestamp: str | None = None
    managed_fields: list[dict[str, Any]] | None = None


class LocalObjectReference(KubeObject):
    name: str


class Container(KubeObject):
    name: str = ""
    image: str = ""


class PodSpec(KubeObject):
    containers: list[Container] = Field(default_factory=list)
    image_pull_secrets: list[LocalObjectReference] = Field(default_factory=list)

    @field_validator("containers", "image_pull_secrets", mode="before")
    @classmethod
    def null_list_as_empty(cls, v: Any) -> Any:
        # The API server serialises an unset list as null
        return [] if v is None else v


class Pod(KubeObject):
    api_version: str | None = None
    kind: str | None = None
    metadata: ObjectMeta = Field(default_factory=ObjectMeta)
    spec: PodSpec = Field(default_factory=PodSpec)

    @property
    def namespace(self) -> str | None:
        return self.metadata.namespace

    @property
    def images(self) -> list[str]:
        return [c.image for c in self.spec.containers]

    def has_pull_secret(self, name: str) -> bool:
        return any(ref.name == name for ref in self.spec.image_pull_secrets)

    def display_name(self) -> str:
        name = self.metadata.name or self.metadata.generate_name or ""
        return f"{self.metadata.namespace or ''}/{name}"
