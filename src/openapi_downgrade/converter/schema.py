"""JSON Schema 2020-12 (OpenAPI 3.1) to Schema Object (OpenAPI 3.0)."""

from openapi_downgrade.log import logger
from openapi_downgrade.model import v3_0, v3_1
from openapi_downgrade.model.reference import Item, Reference, ReferenceOr

# Keywords 3.0 tooling rejects. Everything else unknown passes through.
JSON_SCHEMA_ONLY_KEYWORDS = frozenset({
    "$schema",
    "$id",
    "$anchor",
    "$comment",
    "$defs",
    "$dynamicRef",
    "$dynamicAnchor",
    "prefixItems",
    "propertyNames",
    "contains",
    "minContains",
    "maxContains",
    "dependentRequired",
    "dependentSchemas",
    "if",
    "then",
    "else",
    "unevaluatedItems",
    "unevaluatedProperties",
    "contentEncoding",
    "contentMediaType",
    "contentSchema",
})


def downgrade_schema(schema: v3_1.Schema) -> ReferenceOr[v3_0.Schema]:
    """Convert a 3.1 schema into a 3.0 schema cell.

    A bare ``$ref`` becomes a Reference cell. A ``$ref`` with sibling
    keywords, which 3.0 would ignore, is wrapped as ``allOf: [$ref]`` next
    to those keywords.
    """
    if schema.reference is None:
        return Item(_downgrade_object(schema))
    siblings = (schema.model_fields_set - {"reference", "extensions"}) or schema.extensions
    if not siblings:
        return Reference(schema.reference)
    logger.debug("wrapping $ref %s in allOf to keep its sibling keywords", schema.reference)
    inner = _downgrade_object(schema)
    return Item(inner.model_copy(update={"all_of": [Reference(schema.reference), *inner.all_of]}))


def _downgrade_object(schema: v3_1.Schema) -> v3_0.Schema:
    nullable = None
    schema_type = schema.type
    type_alternatives = []
    if isinstance(schema_type, list):
        kinds = [t for t in schema_type if t != "null"]
        if len(kinds) < len(schema_type):
            nullable = True
        if len(kinds) == 1:
            schema_type = kinds[0]
        else:
            schema_type = None
            type_alternatives = [Item(v3_0.Schema(type=kind)) for kind in kinds]
    elif schema_type == "null":
        nullable = True
        schema_type = None

    any_of, any_of_null = _without_null(schema.any_of)
    one_of, one_of_null = _without_null(schema.one_of)
    if any_of_null or one_of_null:
        nullable = True
    all_of = [downgrade_schema(s) for s in schema.all_of]
    if type_alternatives:
        if any_of:
            all_of.append(Item(v3_0.Schema(any_of=type_alternatives)))
        else:
            any_of = type_alternatives

    enum = schema.enum
    if enum is None and "const" in schema.model_fields_set:
        enum = [schema.const]

    minimum, exclusive_minimum = schema.minimum, None
    if schema.exclusive_minimum is not None and (minimum is None or schema.exclusive_minimum >= minimum):
        minimum, exclusive_minimum = schema.exclusive_minimum, True
    maximum, exclusive_maximum = schema.maximum, None
    if schema.exclusive_maximum is not None and (maximum is None or schema.exclusive_maximum <= maximum):
        maximum, exclusive_maximum = schema.exclusive_maximum, True

    example = schema.example
    if example is None and schema.examples:
        example = schema.examples[0]

    additional_properties = schema.additional_properties
    if isinstance(additional_properties, v3_1.Schema):
        additional_properties = downgrade_schema(additional_properties)

    dropped = sorted(JSON_SCHEMA_ONLY_KEYWORDS.intersection(schema.extensions))
    if dropped:
        logger.warning("dropping JSON Schema keywords unknown to OpenAPI 3.0: %s", ", ".join(dropped))

    return v3_0.Schema(
        title=schema.title,
        description=schema.description,
        type=schema_type,
        format=schema.format,
        nullable=nullable,
        multiple_of=schema.multiple_of,
        maximum=maximum,
        exclusive_maximum=exclusive_maximum,
        minimum=minimum,
        exclusive_minimum=exclusive_minimum,
        max_length=schema.max_length,
        min_length=schema.min_length,
        pattern=schema.pattern,
        max_items=schema.max_items,
        min_items=schema.min_items,
        unique_items=schema.unique_items,
        max_properties=schema.max_properties,
        min_properties=schema.min_properties,
        required=list(schema.required),
        enum=enum,
        all_of=all_of,
        one_of=one_of,
        any_of=any_of,
        not_=downgrade_schema(schema.not_) if schema.not_ is not None else None,
        items=downgrade_schema(schema.items) if schema.items is not None else None,
        properties={name: downgrade_schema(s) for name, s in schema.properties.items()},
        additional_properties=additional_properties,
        default=schema.default,
        discriminator=schema.discriminator,
        read_only=schema.read_only,
        write_only=schema.write_only,
        xml=schema.xml,
        external_docs=schema.external_docs,
        example=example,
        deprecated=schema.deprecated,
        extensions={k: v for k, v in schema.extensions.items() if k not in JSON_SCHEMA_ONLY_KEYWORDS},
    )


def _without_null(schemas: list[v3_1.Schema]) -> tuple[list[ReferenceOr[v3_0.Schema]], bool]:
    kept = [s for s in schemas if s.type != "null"]
    return [downgrade_schema(s) for s in kept], len(kept) < len(schemas)
