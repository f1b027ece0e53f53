"""Objects whose shape is the same in OpenAPI 3.0 and 3.1."""

from typing import Any

from pydantic import Field

from .base import OpenAPIObject

# Security scheme name -> required scopes.
SecurityRequirement = dict[str, list[str]]


class Contact(OpenAPIObject):
    name: str | None = None
    url: str | None = None
    email: str | None = None


class ExternalDocumentation(OpenAPIObject):
    url: str
    description: str | None = None


class Tag(OpenAPIObject):
    name: str
    description: str | None = None
    external_docs: ExternalDocumentation | None = None


class ServerVariable(OpenAPIObject):
    """Substitution value for a `{name}` placeholder in a server URL."""

    default: str
    enum: list[str] | None = None
    description: str | None = None


class Example(OpenAPIObject):
    summary: str | None = None
    description: str | None = None
    value: Any = None
    external_value: str | None = None


class Discriminator(OpenAPIObject):
    property_name: str
    mapping: dict[str, str] = Field(default_factory=dict)


class XML(OpenAPIObject):
    name: str | None = None
    namespace: str | None = None
    prefix: str | None = None
    attribute: bool | None = None
    wrapped: bool | None = None
