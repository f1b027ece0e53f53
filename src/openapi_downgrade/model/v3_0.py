"""OpenAPI 3.0 document model.

Every place where 3.0 allows a Reference Object is typed
``ReferenceOr[...]``, schemas included.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Any, ClassVar, Literal, Union

from pydantic import Field

from .base import OpenAPIObject
from .common import XML, Contact, Discriminator, Example, ExternalDocumentation, SecurityRequirement, ServerVariable, Tag
from .reference import ReferenceOr


class License(OpenAPIObject):
    name: str
    url: str | None = None


class Info(OpenAPIObject):
    title: str
    version: str
    description: str | None = None
    terms_of_service: str | None = None
    contact: Contact | None = None
    license: License | None = None


class Server(OpenAPIObject):
    url: str
    description: str | None = None
    # Absent rather than empty when the URL has no placeholders.
    variables: dict[str, ServerVariable] | None = None


class Schema(OpenAPIObject):
    """Schema Object: the OpenAPI 3.0 subset of JSON Schema draft 4/5."""

    title: str | None = None
    description: str | None = None
    type: str | None = None
    format: str | None = None
    nullable: bool | None = None
    multiple_of: int | float | None = None
    maximum: int | float | None = None
    exclusive_maximum: bool | None = None
    minimum: int | float | None = None
    exclusive_minimum: bool | None = None
    max_length: int | None = None
    min_length: int | None = None
    pattern: str | None = None
    max_items: int | None = None
    min_items: int | None = None
    unique_items: bool | None = None
    max_properties: int | None = None
    min_properties: int | None = None
    required: list[str] = Field(default_factory=list)
    enum: list[Any] | None = None
    all_of: list[ReferenceOr[Schema]] = Field(default_factory=list)
    one_of: list[ReferenceOr[Schema]] = Field(default_factory=list)
    any_of: list[ReferenceOr[Schema]] = Field(default_factory=list)
    not_: ReferenceOr[Schema] | None = Field(default=None, alias="not")
    items: ReferenceOr[Schema] | None = None
    properties: dict[str, ReferenceOr[Schema]] = Field(default_factory=dict)
    additional_properties: bool | ReferenceOr[Schema] | None = None
    default: Any = None
    discriminator: Discriminator | None = None
    read_only: bool | None = None
    write_only: bool | None = None
    xml: XML | None = None
    external_docs: ExternalDocumentation | None = None
    example: Any = None
    deprecated: bool | None = None


class Encoding(OpenAPIObject):
    content_type: str | None = None
    headers: dict[str, ReferenceOr[Header]] = Field(default_factory=dict)
    style: str | None = None
    explode: bool | None = None
    allow_reserved: bool | None = None


class MediaType(OpenAPIObject):
    schema_: ReferenceOr[Schema] | None = Field(default=None, alias="schema")
    example: Any = None
    examples: dict[str, ReferenceOr[Example]] = Field(default_factory=dict)
    encoding: dict[str, Encoding] = Field(default_factory=dict)


class Header(OpenAPIObject):
    description: str | None = None
    required: bool | None = None
    deprecated: bool | None = None
    style: str | None = None
    explode: bool | None = None
    schema_: ReferenceOr[Schema] | None = Field(default=None, alias="schema")
    example: Any = None
    examples: dict[str, ReferenceOr[Example]] = Field(default_factory=dict)
    content: dict[str, MediaType] = Field(default_factory=dict)


class Parameter(OpenAPIObject):
    name: str
    location: Literal["query", "header", "path", "cookie"] = Field(alias="in")
    description: str | None = None
    required: bool | None = None
    deprecated: bool | None = None
    allow_empty_value: bool | None = None
    style: str | None = None
    explode: bool | None = None
    allow_reserved: bool | None = None
    schema_: ReferenceOr[Schema] | None = Field(default=None, alias="schema")
    example: Any = None
    examples: dict[str, ReferenceOr[Example]] = Field(default_factory=dict)
    content: dict[str, MediaType] = Field(default_factory=dict)


class RequestBody(OpenAPIObject):
    content: dict[str, MediaType]
    description: str | None = None
    required: bool | None = None


class Link(OpenAPIObject):
    operation_ref: str | None = None
    operation_id: str | None = None
    parameters: dict[str, Any] = Field(default_factory=dict)
    request_body: Any = None
    description: str | None = None
    server: Server | None = None


class Response(OpenAPIObject):
    description: str
    headers: dict[str, ReferenceOr[Header]] = Field(default_factory=dict)
    content: dict[str, MediaType] = Field(default_factory=dict)
    links: dict[str, ReferenceOr[Link]] = Field(default_factory=dict)


class Operation(OpenAPIObject):
    keep_empty: ClassVar[frozenset[str]] = frozenset({"responses", "security"})

    responses: dict[str, ReferenceOr[Response]] = Field(default_factory=dict)
    tags: list[str] = Field(default_factory=list)
    summary: str | None = None
    description: str | None = None
    external_docs: ExternalDocumentation | None = None
    operation_id: str | None = None
    parameters: list[ReferenceOr[Parameter]] = Field(default_factory=list)
    request_body: ReferenceOr[RequestBody] | None = None
    callbacks: dict[str, ReferenceOr[Callback]] = Field(default_factory=dict)
    deprecated: bool | None = None
    security: list[SecurityRequirement] | None = None
    servers: list[Server] = Field(default_factory=list)


class PathItem(OpenAPIObject):
    reference: str | None = Field(default=None, alias="$ref")
    summary: str | None = None
    description: str | None = None
    get: Operation | None = None
    put: Operation | None = None
    post: Operation | None = None
    delete: Operation | None = None
    options: Operation | None = None
    head: Operation | None = None
    patch: Operation | None = None
    trace: Operation | None = None
    servers: list[Server] = Field(default_factory=list)
    parameters: list[ReferenceOr[Parameter]] = Field(default_factory=list)


# Runtime expression -> Path Item. In 3.0 the values cannot be references.
Callback = dict[str, PathItem]


class ApiKeyLocation(str, Enum):
    QUERY = "query"
    HEADER = "header"
    COOKIE = "cookie"


class ImplicitOAuthFlow(OpenAPIObject):
    keep_empty: ClassVar[frozenset[str]] = frozenset({"scopes"})

    authorization_url: str
    refresh_url: str | None = None
    scopes: dict[str, str] = Field(default_factory=dict)


class PasswordOAuthFlow(OpenAPIObject):
    keep_empty: ClassVar[frozenset[str]] = frozenset({"scopes"})

    token_url: str
    refresh_url: str | None = None
    scopes: dict[str, str] = Field(default_factory=dict)


class ClientCredentialsOAuthFlow(OpenAPIObject):
    keep_empty: ClassVar[frozenset[str]] = frozenset({"scopes"})

    token_url: str
    refresh_url: str | None = None
    scopes: dict[str, str] = Field(default_factory=dict)


class AuthorizationCodeOAuthFlow(OpenAPIObject):
    keep_empty: ClassVar[frozenset[str]] = frozenset({"scopes"})

    authorization_url: str
    token_url: str
    refresh_url: str | None = None
    scopes: dict[str, str] = Field(default_factory=dict)


class OAuthFlows(OpenAPIObject):
    """Four independent slots, each holding its own flow record."""

    implicit: ImplicitOAuthFlow | None = None
    password: PasswordOAuthFlow | None = None
    client_credentials: ClientCredentialsOAuthFlow | None = None
    authorization_code: AuthorizationCodeOAuthFlow | None = None


class ApiKeySecurityScheme(OpenAPIObject):
    type: Literal["apiKey"] = "apiKey"
    name: str
    location: ApiKeyLocation = Field(alias="in")
    description: str | None = None


class HttpSecurityScheme(OpenAPIObject):
    type: Literal["http"] = "http"
    scheme: str
    bearer_format: str | None = None
    description: str | None = None


class OAuth2SecurityScheme(OpenAPIObject):
    type: Literal["oauth2"] = "oauth2"
    flows: OAuthFlows
    description: str | None = None


class OpenIdConnectSecurityScheme(OpenAPIObject):
    type: Literal["openIdConnect"] = "openIdConnect"
    open_id_connect_url: str
    description: str | None = None


SecurityScheme = Annotated[
    Union[ApiKeySecurityScheme, HttpSecurityScheme, OAuth2SecurityScheme, OpenIdConnectSecurityScheme],
    Field(discriminator="type"),
]


class Components(OpenAPIObject):
    schemas: dict[str, ReferenceOr[Schema]] = Field(default_factory=dict)
    responses: dict[str, ReferenceOr[Response]] = Field(default_factory=dict)
    parameters: dict[str, ReferenceOr[Parameter]] = Field(default_factory=dict)
    examples: dict[str, ReferenceOr[Example]] = Field(default_factory=dict)
    request_bodies: dict[str, ReferenceOr[RequestBody]] = Field(default_factory=dict)
    headers: dict[str, ReferenceOr[Header]] = Field(default_factory=dict)
    security_schemes: dict[str, ReferenceOr[SecurityScheme]] = Field(default_factory=dict)
    links: dict[str, ReferenceOr[Link]] = Field(default_factory=dict)
    callbacks: dict[str, ReferenceOr[Callback]] = Field(default_factory=dict)


class OpenAPI(OpenAPIObject):
    keep_empty: ClassVar[frozenset[str]] = frozenset({"paths", "security"})

    openapi: str
    info: Info
    paths: dict[str, PathItem] = Field(default_factory=dict)
    servers: list[Server] = Field(default_factory=list)
    components: Components | None = None
    security: list[SecurityRequirement] | None = None
    tags: list[Tag] = Field(default_factory=list)
    external_docs: ExternalDocumentation | None = None


for _model in (Encoding, MediaType, Header, Parameter, RequestBody, Response, Operation, PathItem, Components, OpenAPI):
    _model.model_rebuild()
