from openapi_downgrade.log import logger
from openapi_downgrade.model import v3_0, v3_1
from openapi_downgrade.model.reference import ReferenceOr

from .common import downgrade_map, keep
from .paths import downgrade_callback, downgrade_header, downgrade_link, downgrade_parameter, downgrade_request_body, downgrade_response
from .schema import downgrade_schema
from .security import downgrade_security_scheme


def downgrade_components(components: v3_1.Components) -> v3_0.Components:
    """Convert every registry entry by entry.

    Keys and their order are kept and empty registries stay empty, so they
    are left out of the written document. ``pathItems`` has no 3.0 slot.
    """
    if components.path_items:
        logger.warning(
            "dropping components.pathItems (%s): OpenAPI 3.0 has no reusable path items",
            ", ".join(components.path_items),
        )
    schemas: dict[str, ReferenceOr[v3_0.Schema]] = {
        name: downgrade_schema(schema) for name, schema in components.schemas.items()
    }
    return v3_0.Components(
        schemas=schemas,
        responses=downgrade_map(components.responses, downgrade_response),
        parameters=downgrade_map(components.parameters, downgrade_parameter),
        examples=downgrade_map(components.examples, keep),
        request_bodies=downgrade_map(components.request_bodies, downgrade_request_body),
        headers=downgrade_map(components.headers, downgrade_header),
        security_schemes=downgrade_map(components.security_schemes, downgrade_security_scheme),
        links=downgrade_map(components.links, downgrade_link),
        callbacks=downgrade_map(components.callbacks, downgrade_callback),
        extensions=components.extensions,
    )
