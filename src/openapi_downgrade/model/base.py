"""Shared base for every OpenAPI object kind.

Attributes are snake_case in Python and camelCase in documents. Keys a
document carries outside an object's recognized fields are kept in
``extensions`` and written back unchanged.
"""

from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field, SerializerFunctionWrapHandler, model_serializer, model_validator
from pydantic.alias_generators import to_camel


class OpenAPIObject(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    extensions: dict[str, Any] = Field(default_factory=dict, exclude=True)

    # Fields written out even when empty, e.g. `security: []` disables auth.
    keep_empty: ClassVar[frozenset[str]] = frozenset()

    @classmethod
    def _known_keys(cls) -> set[str]:
        keys = set()
        for name, field in cls.model_fields.items():
            keys.add(name)
            if field.alias:
                keys.add(field.alias)
        return keys

    @model_validator(mode="before")
    @classmethod
    def _collect_extensions(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        known = cls._known_keys()
        extra = {k: v for k, v in data.items() if k not in known}
        if not extra:
            return data
        fields = {k: v for k, v in data.items() if k in known}
        fields["extensions"] = {**fields.get("extensions", {}), **extra}
        return fields

    @model_serializer(mode="wrap")
    def _emit(self, handler: SerializerFunctionWrapHandler) -> dict[str, Any]:
        data = handler(self)
        for name, field in type(self).model_fields.items():
            value = getattr(self, name)
            empty = isinstance(value, (dict, list)) and not value
            if value is None or (empty and name not in self.keep_empty):
                data.pop(name, None)
                if field.alias:
                    data.pop(field.alias, None)
        data.update(self.extensions)
        return data
