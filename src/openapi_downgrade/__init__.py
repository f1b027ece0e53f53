"""Typed OpenAPI 3.0/3.1 document model and a 3.1 -> 3.0 downgrader."""

from openapi_downgrade.converter import downgrade_document
from openapi_downgrade.errors import DowngradeError, StructuralInvariantError, UnsupportedFeatureError
from openapi_downgrade.model import DereferencedReference, Item, Reference, ReferenceOr, v3_0, v3_1
from openapi_downgrade.parser import dump_document, load_document

__all__ = [
    "DereferencedReference",
    "DowngradeError",
    "Item",
    "Reference",
    "ReferenceOr",
    "StructuralInvariantError",
    "UnsupportedFeatureError",
    "downgrade_document",
    "dump_document",
    "load_document",
    "v3_0",
    "v3_1",
]
