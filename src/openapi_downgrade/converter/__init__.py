"""Downgrade OpenAPI 3.1 objects to their OpenAPI 3.0 counterparts.

There is one ``downgrade_<kind>`` function per object kind. Each is pure
and either returns the 3.0 object or raises a DowngradeError.
"""

from .common import downgrade_reference_or
from .components import downgrade_components
from .document import DEFAULT_TARGET_VERSION, downgrade_document, downgrade_info, downgrade_license
from .paths import (
    downgrade_callback,
    downgrade_encoding,
    downgrade_header,
    downgrade_link,
    downgrade_media_type,
    downgrade_operation,
    downgrade_parameter,
    downgrade_path_item,
    downgrade_request_body,
    downgrade_response,
)
from .schema import downgrade_schema
from .security import downgrade_oauth_flow, downgrade_oauth_flows, downgrade_security_scheme
from .server import downgrade_server

__all__ = [
    "DEFAULT_TARGET_VERSION",
    "downgrade_callback",
    "downgrade_components",
    "downgrade_document",
    "downgrade_encoding",
    "downgrade_header",
    "downgrade_info",
    "downgrade_license",
    "downgrade_link",
    "downgrade_media_type",
    "downgrade_oauth_flow",
    "downgrade_oauth_flows",
    "downgrade_operation",
    "downgrade_parameter",
    "downgrade_path_item",
    "downgrade_reference_or",
    "downgrade_request_body",
    "downgrade_response",
    "downgrade_schema",
    "downgrade_security_scheme",
    "downgrade_server",
]
