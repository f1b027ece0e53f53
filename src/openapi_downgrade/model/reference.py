"""Reference-or-inline value cells.

Wherever an OpenAPI document allows indirection, a field holds a
``ReferenceOr[T]``: exactly one of ``Reference`` (a ``$ref`` pointer),
``Item`` (an inline T) or ``DereferencedReference`` (a pointer that an
external resolver already replaced with its target).
"""

from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar, get_args, get_origin

from pydantic import GetCoreSchemaHandler, RootModel
from pydantic_core import core_schema

T = TypeVar("T")
U = TypeVar("U")


class ReferenceOr(Generic[T]):
    """Base of the three cell shapes. Never instantiated directly."""

    __slots__ = ()

    @staticmethod
    def ref(reference: str) -> "Reference":
        """Build a ``Reference`` cell. The pointer is not validated here."""
        return Reference(reference)

    def into_item(self) -> T | None:
        """Return the contained value, or None for a plain ``Reference``."""
        return self.as_item()

    def as_item(self) -> T | None:
        if isinstance(self, Item):
            return self.item
        if isinstance(self, DereferencedReference):
            return self.item
        return None

    def map(self, fn: Callable[[T], U]) -> "ReferenceOr[U]":
        """Apply ``fn`` to the contained value, keeping the shape."""
        if isinstance(self, Item):
            return Item(fn(self.item))
        if isinstance(self, DereferencedReference):
            return DereferencedReference(self.reference, fn(self.item))
        return self

    def unbox(self) -> "ReferenceOr[Any]":
        """Drop one level of ``RootModel`` wrapping around the contained value."""
        return self.map(_unwrap_root)

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        if get_origin(source_type) is None:
            item_type = Any
        else:
            item_type = get_args(source_type)[0]
        item_schema = handler.generate_schema(item_type)

        def validate(value: Any, validate_item: Callable[[Any], Any]) -> "ReferenceOr[Any]":
            if isinstance(value, Reference):
                return value
            if isinstance(value, Item):
                return Item(validate_item(value.item))
            if isinstance(value, DereferencedReference):
                return DereferencedReference(value.reference, validate_item(value.item))
            if isinstance(value, dict) and "$ref" in value:
                return Reference(
                    value["$ref"],
                    summary=value.get("summary"),
                    description=value.get("description"),
                )
            return Item(validate_item(value))

        def serialize(value: "ReferenceOr[Any]", serialize_item: Callable[[Any], Any]) -> Any:
            if isinstance(value, Item):
                return serialize_item(value.item)
            if isinstance(value, DereferencedReference):
                return {"$ref": value.reference}
            return value.to_dict()

        return core_schema.no_info_wrap_validator_function(
            validate,
            item_schema,
            serialization=core_schema.wrap_serializer_function_ser_schema(
                serialize, schema=item_schema
            ),
        )


@dataclass(frozen=True)
class Reference(ReferenceOr[Any]):
    """A ``$ref`` pointer. ``summary``/``description`` exist only in 3.1."""

    reference: str
    summary: str | None = None
    description: str | None = None

    def to_dict(self) -> dict[str, str]:
        data = {"$ref": self.reference}
        if self.summary is not None:
            data["summary"] = self.summary
        if self.description is not None:
            data["description"] = self.description
        return data


@dataclass(frozen=True)
class Item(ReferenceOr[T]):
    item: T


@dataclass(frozen=True)
class DereferencedReference(ReferenceOr[T]):
    """A pointer together with the value an external resolver found for it."""

    reference: str
    item: T


def _unwrap_root(value: Any) -> Any:
    if not isinstance(value, RootModel):
        raise TypeError(f"cannot unbox {type(value).__name__}, expected a RootModel")
    return value.root
