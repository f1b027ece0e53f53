"""Path items, operations and everything hanging off them."""

from openapi_downgrade.errors import StructuralInvariantError
from openapi_downgrade.model import v3_0, v3_1
from openapi_downgrade.model.reference import Reference

from .common import downgrade_map, downgrade_reference_or, keep
from .schema import downgrade_schema
from .server import downgrade_server

HTTP_METHODS = ("get", "put", "post", "delete", "options", "head", "patch", "trace")


def downgrade_path_item(path_item: v3_1.PathItem) -> v3_0.PathItem:
    operations = {}
    for method in HTTP_METHODS:
        operation = getattr(path_item, method)
        if operation is not None:
            operations[method] = downgrade_operation(operation)
    return v3_0.PathItem(
        reference=path_item.reference,
        summary=path_item.summary,
        description=path_item.description,
        servers=[downgrade_server(s) for s in path_item.servers],
        parameters=[downgrade_reference_or(p, downgrade_parameter) for p in path_item.parameters],
        extensions=path_item.extensions,
        **operations,
    )


def downgrade_operation(operation: v3_1.Operation) -> v3_0.Operation:
    request_body = None
    if operation.request_body is not None:
        request_body = downgrade_reference_or(operation.request_body, downgrade_request_body)
    security = None
    if operation.security is not None:
        security = [dict(requirement) for requirement in operation.security]
    return v3_0.Operation(
        tags=list(operation.tags),
        summary=operation.summary,
        description=operation.description,
        external_docs=operation.external_docs,
        operation_id=operation.operation_id,
        parameters=[downgrade_reference_or(p, downgrade_parameter) for p in operation.parameters],
        request_body=request_body,
        responses=downgrade_map(operation.responses, downgrade_response),
        callbacks=downgrade_map(operation.callbacks, downgrade_callback),
        deprecated=operation.deprecated,
        security=security,
        servers=[downgrade_server(s) for s in operation.servers],
        extensions=operation.extensions,
    )


def downgrade_callback(callback: v3_1.Callback) -> v3_0.Callback:
    """Convert expression -> path item entries, keeping their order.

    3.0 callbacks hold path items inline only, so a ``$ref`` entry is an
    invalid document and raises StructuralInvariantError.
    """
    result = {}
    for expression, cell in callback.items():
        if isinstance(cell, Reference):
            raise StructuralInvariantError(
                f"callback expression {expression!r} refers to a path item via $ref {cell.reference!r}",
                reference=cell.reference,
            )
        result[expression] = downgrade_path_item(cell.as_item())
    return result


def downgrade_parameter(parameter: v3_1.Parameter) -> v3_0.Parameter:
    return v3_0.Parameter(
        name=parameter.name,
        location=parameter.location,
        description=parameter.description,
        required=parameter.required,
        deprecated=parameter.deprecated,
        allow_empty_value=parameter.allow_empty_value,
        style=parameter.style,
        explode=parameter.explode,
        allow_reserved=parameter.allow_reserved,
        schema_=downgrade_schema(parameter.schema_) if parameter.schema_ is not None else None,
        example=parameter.example,
        examples=downgrade_map(parameter.examples, keep),
        content={name: downgrade_media_type(m) for name, m in parameter.content.items()},
        extensions=parameter.extensions,
    )


def downgrade_header(header: v3_1.Header) -> v3_0.Header:
    return v3_0.Header(
        description=header.description,
        required=header.required,
        deprecated=header.deprecated,
        style=header.style,
        explode=header.explode,
        schema_=downgrade_schema(header.schema_) if header.schema_ is not None else None,
        example=header.example,
        examples=downgrade_map(header.examples, keep),
        content={name: downgrade_media_type(m) for name, m in header.content.items()},
        extensions=header.extensions,
    )


def downgrade_request_body(request_body: v3_1.RequestBody) -> v3_0.RequestBody:
    return v3_0.RequestBody(
        description=request_body.description,
        content={name: downgrade_media_type(m) for name, m in request_body.content.items()},
        required=request_body.required,
        extensions=request_body.extensions,
    )


def downgrade_response(response: v3_1.Response) -> v3_0.Response:
    return v3_0.Response(
        description=response.description,
        headers=downgrade_map(response.headers, downgrade_header),
        content={name: downgrade_media_type(m) for name, m in response.content.items()},
        links=downgrade_map(response.links, downgrade_link),
        extensions=response.extensions,
    )


def downgrade_media_type(media_type: v3_1.MediaType) -> v3_0.MediaType:
    """Convert schema, examples and encodings; unknown keys pass through."""
    return v3_0.MediaType(
        schema_=downgrade_schema(media_type.schema_) if media_type.schema_ is not None else None,
        example=media_type.example,
        examples=downgrade_map(media_type.examples, keep),
        encoding={name: downgrade_encoding(e) for name, e in media_type.encoding.items()},
        extensions=media_type.extensions,
    )


def downgrade_encoding(encoding: v3_1.Encoding) -> v3_0.Encoding:
    return v3_0.Encoding(
        content_type=encoding.content_type,
        headers=downgrade_map(encoding.headers, downgrade_header),
        style=encoding.style,
        explode=encoding.explode,
        allow_reserved=encoding.allow_reserved,
        extensions=encoding.extensions,
    )


def downgrade_link(link: v3_1.Link) -> v3_0.Link:
    return v3_0.Link(
        operation_ref=link.operation_ref,
        operation_id=link.operation_id,
        parameters=dict(link.parameters),
        request_body=link.request_body,
        description=link.description,
        server=downgrade_server(link.server) if link.server is not None else None,
        extensions=link.extensions,
    )
