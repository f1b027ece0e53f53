"""Security schemes and OAuth2 flows."""

from openapi_downgrade.errors import UnsupportedFeatureError
from openapi_downgrade.model import v3_0, v3_1
from openapi_downgrade.model.base import OpenAPIObject


def downgrade_security_scheme(scheme: v3_1.SecurityScheme) -> v3_0.SecurityScheme:
    """Map each scheme variant field-for-field, extensions included.

    Raises UnsupportedFeatureError for mutual TLS, which 3.0 cannot express.
    """
    if isinstance(scheme, v3_1.ApiKeySecurityScheme):
        return v3_0.ApiKeySecurityScheme(
            name=scheme.name,
            location=v3_0.ApiKeyLocation(scheme.location.value),
            description=scheme.description,
            extensions=scheme.extensions,
        )
    if isinstance(scheme, v3_1.HttpSecurityScheme):
        return v3_0.HttpSecurityScheme(
            scheme=scheme.scheme,
            bearer_format=scheme.bearer_format,
            description=scheme.description,
            extensions=scheme.extensions,
        )
    if isinstance(scheme, v3_1.OAuth2SecurityScheme):
        return v3_0.OAuth2SecurityScheme(
            flows=downgrade_oauth_flows(scheme.flows),
            description=scheme.description,
            extensions=scheme.extensions,
        )
    if isinstance(scheme, v3_1.OpenIdConnectSecurityScheme):
        return v3_0.OpenIdConnectSecurityScheme(
            open_id_connect_url=scheme.open_id_connect_url,
            description=scheme.description,
            extensions=scheme.extensions,
        )
    if isinstance(scheme, v3_1.MutualTlsSecurityScheme):
        raise UnsupportedFeatureError("mutualTLS", "mutualTLS security schemes are not supported in OpenAPI 3.0")
    raise TypeError(f"unknown security scheme {type(scheme).__name__}")


def downgrade_oauth_flows(flows: v3_1.OAuthFlows) -> v3_0.OAuthFlows:
    """Spread the occupied flows over the four 3.0 slots; empty slots stay empty."""
    slots = {}
    for flow in flows.occupied():
        slot, converted = downgrade_oauth_flow(flow)
        slots[slot] = converted
    return v3_0.OAuthFlows(**slots, extensions=flows.extensions)


def downgrade_oauth_flow(flow: v3_1.OAuthFlow) -> tuple[str, OpenAPIObject]:
    """Convert one flow, returning the 3.0 slot name it belongs in and its record."""
    if isinstance(flow, v3_1.ImplicitOAuthFlow):
        return "implicit", v3_0.ImplicitOAuthFlow(
            authorization_url=flow.authorization_url,
            refresh_url=flow.refresh_url,
            scopes=dict(flow.scopes),
            extensions=flow.extensions,
        )
    if isinstance(flow, v3_1.PasswordOAuthFlow):
        return "password", v3_0.PasswordOAuthFlow(
            token_url=flow.token_url,
            refresh_url=flow.refresh_url,
            scopes=dict(flow.scopes),
            extensions=flow.extensions,
        )
    if isinstance(flow, v3_1.ClientCredentialsOAuthFlow):
        return "client_credentials", v3_0.ClientCredentialsOAuthFlow(
            token_url=flow.token_url,
            refresh_url=flow.refresh_url,
            scopes=dict(flow.scopes),
            extensions=flow.extensions,
        )
    if isinstance(flow, v3_1.AuthorizationCodeOAuthFlow):
        return "authorization_code", v3_0.AuthorizationCodeOAuthFlow(
            authorization_url=flow.authorization_url,
            token_url=flow.token_url,
            refresh_url=flow.refresh_url,
            scopes=dict(flow.scopes),
            extensions=flow.extensions,
        )
    raise TypeError(f"unknown OAuth flow {type(flow).__name__}")
