"""Typed OpenAPI 3.0 / 3.1 document model."""

from . import v3_0, v3_1
from .base import OpenAPIObject
from .reference import DereferencedReference, Item, Reference, ReferenceOr

__all__ = [
    "DereferencedReference",
    "Item",
    "OpenAPIObject",
    "Reference",
    "ReferenceOr",
    "v3_0",
    "v3_1",
]
