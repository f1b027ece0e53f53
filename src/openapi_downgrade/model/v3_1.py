"""OpenAPI 3.1 document model.

Differences from 3.0 that matter for downgrading: schemas are JSON Schema
2020-12 objects carrying their own ``$ref`` keyword, Reference Objects may
override ``summary``/``description``, OAuth flows share one variant type,
callbacks may reference path items, and there are webhooks, path item
components and mutual TLS security schemes.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Any, ClassVar, Literal, Union

from pydantic import Field, model_validator

from .base import OpenAPIObject
from .common import XML, Contact, Discriminator, Example, ExternalDocumentation, SecurityRequirement, ServerVariable, Tag
from .reference import ReferenceOr


class License(OpenAPIObject):
    name: str
    identifier: str | None = None
    url: str | None = None


class Info(OpenAPIObject):
    title: str
    version: str
    summary: str | None = None
    description: str | None = None
    terms_of_service: str | None = None
    contact: Contact | None = None
    license: License | None = None


class Server(OpenAPIObject):
    url: str
    description: str | None = None
    variables: dict[str, ServerVariable] = Field(default_factory=dict)


class Schema(OpenAPIObject):
    """JSON Schema 2020-12 object as used by OpenAPI 3.1.

    Keywords without a dedicated attribute end up in ``extensions``.
    """

    reference: str | None = Field(default=None, alias="$ref")
    title: str | None = None
    description: str | None = None
    type: str | list[str] | None = None
    format: str | None = None
    const: Any = None
    multiple_of: int | float | None = None
    maximum: int | float | None = None
    exclusive_maximum: int | float | None = None
    minimum: int | float | None = None
    exclusive_minimum: int | float | None = None
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
    all_of: list[Schema] = Field(default_factory=list)
    one_of: list[Schema] = Field(default_factory=list)
    any_of: list[Schema] = Field(default_factory=list)
    not_: Schema | None = Field(default=None, alias="not")
    items: Schema | None = None
    properties: dict[str, Schema] = Field(default_factory=dict)
    additional_properties: bool | Schema | None = None
    default: Any = None
    discriminator: Discriminator | None = None
    read_only: bool | None = None
    write_only: bool | None = None
    xml: XML | None = None
    external_docs: ExternalDocumentation | None = None
    example: Any = None
    examples: list[Any] | None = None
    deprecated: bool | None = None


class Encoding(OpenAPIObject):
    content_type: str | None = None
    headers: dict[str, ReferenceOr[Header]] = Field(default_factory=dict)
    style: str | None = None
    explode: bool | None = None
    allow_reserved: bool | None = None


class MediaType(OpenAPIObject):
    schema_: Schema | None = Field(default=None, alias="schema")
    example: Any = None
    examples: dict[str, ReferenceOr[Example]] = Field(default_factory=dict)
    encoding: dict[str, Encoding] = Field(default_factory=dict)


class Header(OpenAPIObject):
    description: str | None = None
    required: bool | None = None
    deprecated: bool | None = None
    style: str | None = None
    explode: bool | None = None
    schema_: Schema | None = Field(default=None, alias="schema")
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
    schema_: Schema | None = Field(default=None, alias="schema")
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
    keep_empty: ClassVar[frozenset[str]] = frozenset({"security"})

    tags: list[str] = Field(default_factory=list)
    summary: str | None = None
    description: str | None = None
    external_docs: ExternalDocumentation | None = None
    operation_id: str | None = None
    parameters: list[ReferenceOr[Parameter]] = Field(default_factory=list)
    request_body: ReferenceOr[RequestBody] | None = None
    responses: dict[str, ReferenceOr[Response]] = Field(default_factory=dict)
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


Callback = dict[str, ReferenceOr[PathItem]]


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


OAuthFlow = Union[ImplicitOAuthFlow, PasswordOAuthFlow, ClientCredentialsOAuthFlow, AuthorizationCodeOAuthFlow]

FLOW_SLOTS: dict[str, type[OpenAPIObject]] = {
    "implicit": ImplicitOAuthFlow,
    "password": PasswordOAuthFlow,
    "client_credentials": ClientCredentialsOAuthFlow,
    "authorization_code": AuthorizationCodeOAuthFlow,
}


class OAuthFlows(OpenAPIObject):
    """OAuth flow set. Every slot holds an ``OAuthFlow``; the slot name picks the variant."""

    implicit: OAuthFlow | None = None
    password: OAuthFlow | None = None
    client_credentials: OAuthFlow | None = None
    authorization_code: OAuthFlow | None = None

    @model_validator(mode="before")
    @classmethod
    def _pick_variants(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        data = dict(data)
        for slot, flow_type in FLOW_SLOTS.items():
            for key in (slot, cls.model_fields[slot].alias):
                if isinstance(data.get(key), dict):
                    data[key] = flow_type.model_validate(data[key])
        return data

    @model_validator(mode="after")
    def _check_slots(self) -> OAuthFlows:
        for slot, flow_type in FLOW_SLOTS.items():
            flow = getattr(self, slot)
            if flow is not None and type(flow) is not flow_type:
                raise ValueError(f"{slot} slot holds a {type(flow).__name__}")
        return self

    def occupied(self) -> list[OAuthFlow]:
        """Return the flows that are present, in slot order."""
        return [getattr(self, slot) for slot in FLOW_SLOTS if getattr(self, slot) is not None]


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


class MutualTlsSecurityScheme(OpenAPIObject):
    type: Literal["mutualTLS"] = "mutualTLS"
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
    Union[
        ApiKeySecurityScheme,
        HttpSecurityScheme,
        MutualTlsSecurityScheme,
        OAuth2SecurityScheme,
        OpenIdConnectSecurityScheme,
    ],
    Field(discriminator="type"),
]


class Components(OpenAPIObject):
    schemas: dict[str, Schema] = Field(default_factory=dict)
    responses: dict[str, ReferenceOr[Response]] = Field(default_factory=dict)
    parameters: dict[str, ReferenceOr[Parameter]] = Field(default_factory=dict)
    examples: dict[str, ReferenceOr[Example]] = Field(default_factory=dict)
    request_bodies: dict[str, ReferenceOr[RequestBody]] = Field(default_factory=dict)
    headers: dict[str, ReferenceOr[Header]] = Field(default_factory=dict)
    security_schemes: dict[str, ReferenceOr[SecurityScheme]] = Field(default_factory=dict)
    links: dict[str, ReferenceOr[Link]] = Field(default_factory=dict)
    callbacks: dict[str, ReferenceOr[Callback]] = Field(default_factory=dict)
    path_items: dict[str, ReferenceOr[PathItem]] = Field(default_factory=dict)


class OpenAPI(OpenAPIObject):
    keep_empty: ClassVar[frozenset[str]] = frozenset({"security"})

    openapi: str
    info: Info
    json_schema_dialect: str | None = None
    servers: list[Server] = Field(default_factory=list)
    paths: dict[str, PathItem] = Field(default_factory=dict)
    webhooks: dict[str, ReferenceOr[PathItem]] = Field(default_factory=dict)
    components: Components | None = None
    security: list[SecurityRequirement] | None = None
    tags: list[Tag] = Field(default_factory=list)
    external_docs: ExternalDocumentation | None = None


for _model in (Encoding, MediaType, Header, Parameter, RequestBody, Response, Operation, PathItem, Components, OpenAPI):
    _model.model_rebuild()
