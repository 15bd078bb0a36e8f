from typing import Any

from pydantic import BaseModel, ConfigDict


class BaseModelWithMethods(BaseModel):
    """Immutable base model for decoded API payloads.

    Wire names are mapped with field aliases; both the alias and the python
    name are accepted. Fields the API adds later are ignored.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    def to_json(self, **kwargs: Any) -> str:
        return self.model_dump_json(**kwargs)

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump()
