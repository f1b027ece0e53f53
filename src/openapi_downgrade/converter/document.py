from openapi_downgrade.log import logger
from openapi_downgrade.model import v3_0, v3_1

from .components import downgrade_components
from .paths import downgrade_path_item
from .server import downgrade_server

DEFAULT_TARGET_VERSION = "3.0.3"


def downgrade_document(document: v3_1.OpenAPI, target_version: str = DEFAULT_TARGET_VERSION) -> v3_0.OpenAPI:
    """Convert a whole 3.1 document to 3.0.

    The result declares ``target_version``, which has to be a 3.0.x version.
    """
    if not target_version.startswith("3.0."):
        raise ValueError(f"target version must be 3.0.x, got {target_version!r}")
    logger.debug("downgrading %r from %s to %s", document.info.title, document.openapi, target_version)

    if document.webhooks:
        logger.warning("dropping webhooks (%s): not supported in OpenAPI 3.0", ", ".join(document.webhooks))
    if document.json_schema_dialect is not None:
        logger.warning("dropping jsonSchemaDialect %s", document.json_schema_dialect)

    components = None
    if document.components is not None:
        components = downgrade_components(document.components)
    security = None
    if document.security is not None:
        security = [dict(requirement) for requirement in document.security]
    return v3_0.OpenAPI(
        openapi=target_version,
        info=downgrade_info(document.info),
        servers=[downgrade_server(s) for s in document.servers],
        paths={path: downgrade_path_item(item) for path, item in document.paths.items()},
        components=components,
        security=security,
        tags=list(document.tags),
        external_docs=document.external_docs,
        extensions=document.extensions,
    )


def downgrade_info(info: v3_1.Info) -> v3_0.Info:
    if info.summary is not None:
        logger.debug("dropping info.summary")
    return v3_0.Info(
        title=info.title,
        version=info.version,
        description=info.description,
        terms_of_service=info.terms_of_service,
        contact=info.contact,
        license=downgrade_license(info.license) if info.license is not None else None,
        extensions=info.extensions,
    )


def downgrade_license(license: v3_1.License) -> v3_0.License:
    if license.identifier is not None:
        logger.debug("dropping license.identifier %s", license.identifier)
    return v3_0.License(name=license.name, url=license.url, extensions=license.extensions)
