"""Downgrade rule shared by every Reference Cell."""

from typing import Any, Callable, TypeVar

from openapi_downgrade.model.reference import DereferencedReference, Item, Reference, ReferenceOr

T = TypeVar("T")
U = TypeVar("U")


def downgrade_reference_or(cell: ReferenceOr[T], convert: Callable[[T], U]) -> ReferenceOr[U]:
    """Convert one cell to its 3.0 counterpart.

    A pointer is copied as-is (3.0 has no room for the 3.1 summary and
    description overrides). A dereferenced pointer loses its origin and
    becomes an inline ``Item``.
    """
    if isinstance(cell, Reference):
        return Reference(cell.reference)
    if isinstance(cell, (Item, DereferencedReference)):
        return Item(convert(cell.item))
    raise TypeError(f"expected a ReferenceOr cell, got {type(cell).__name__}")


def downgrade_map(cells: dict[str, ReferenceOr[Any]], convert: Callable[[Any], Any]) -> dict[str, ReferenceOr[Any]]:
    """Convert a name -> cell mapping, keeping keys and their order."""
    return {name: downgrade_reference_or(cell, convert) for name, cell in cells.items()}


def keep(value: T) -> T:
    """Identity conversion for objects shared by both revisions."""
    return value
