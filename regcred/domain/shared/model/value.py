from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ValueObject(BaseModel):
    model_config = ConfigDict(frozen=True)


class KubeObject(BaseModel):
    """Base for Kubernetes API payloads.

    Fields are snake_case in Python and camelCase on the wire. Fields we do
    not model are kept as extras so a decoded object dumps back intact.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
    )

    def to_api(self) -> dict:
        """Serialize to the Kubernetes wire shape."""
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")
