import pytest
from hypothesis import given
from hypothesis.strategies import sampled_from
from pydantic import TypeAdapter

from openapi_downgrade.converter import downgrade_oauth_flow, downgrade_oauth_flows, downgrade_security_scheme
from openapi_downgrade.errors import DowngradeError, UnsupportedFeatureError
from openapi_downgrade.model import v3_0, v3_1

scheme_adapter = TypeAdapter(v3_1.SecurityScheme)

FLOW_DOCS = {
    "implicit": {"authorizationUrl": "https://auth.example.com/authorize", "scopes": {"read": "Read"}},
    "password": {"tokenUrl": "https://auth.example.com/token", "scopes": {}},
    "clientCredentials": {"tokenUrl": "https://auth.example.com/token", "refreshUrl": "https://auth.example.com/refresh", "scopes": {}},
    "authorizationCode": {
        "authorizationUrl": "https://auth.example.com/authorize",
        "tokenUrl": "https://auth.example.com/token",
        "scopes": {"write": "Write"},
    },
}

SLOT_ATTRIBUTES = {
    "implicit": "implicit",
    "password": "password",
    "clientCredentials": "client_credentials",
    "authorizationCode": "authorization_code",
}


def dump(obj):
    return obj.model_dump(mode="json", by_alias=True)


class TestSchemeVariants:
    def test_api_key_converts_field_for_field(self):
        scheme = scheme_adapter.validate_python({"type": "apiKey", "in": "header", "name": "X-Api-Key"})
        converted = downgrade_security_scheme(scheme)
        assert isinstance(converted, v3_0.ApiKeySecurityScheme)
        assert converted.name == "X-Api-Key"
        assert converted.location == v3_0.ApiKeyLocation.HEADER
        assert dump(converted) == {"type": "apiKey", "in": "header", "name": "X-Api-Key"}

    def test_api_key_keeps_extensions(self):
        scheme = scheme_adapter.validate_python(
            {"type": "apiKey", "in": "cookie", "name": "session", "description": "Session", "x-rotate": "daily"}
        )
        converted = downgrade_security_scheme(scheme)
        assert converted.extensions == {"x-rotate": "daily"}
        assert dump(converted)["x-rotate"] == "daily"
        assert converted.description == "Session"

    def test_http(self):
        scheme = scheme_adapter.validate_python({"type": "http", "scheme": "bearer", "bearerFormat": "JWT"})
        assert downgrade_security_scheme(scheme) == v3_0.HttpSecurityScheme(scheme="bearer", bearer_format="JWT")

    def test_open_id_connect(self):
        scheme = scheme_adapter.validate_python(
            {"type": "openIdConnect", "openIdConnectUrl": "https://id.example.com/.well-known/openid-configuration"}
        )
        converted = downgrade_security_scheme(scheme)
        assert isinstance(converted, v3_0.OpenIdConnectSecurityScheme)
        assert converted.open_id_connect_url == "https://id.example.com/.well-known/openid-configuration"

    def test_oauth2(self):
        scheme = scheme_adapter.validate_python(
            {"type": "oauth2", "description": "OAuth", "flows": {"implicit": FLOW_DOCS["implicit"]}, "x-team": "auth"}
        )
        converted = downgrade_security_scheme(scheme)
        assert isinstance(converted, v3_0.OAuth2SecurityScheme)
        assert converted.flows.implicit.scopes == {"read": "Read"}
        assert converted.extensions == {"x-team": "auth"}

    def test_mutual_tls_is_rejected(self):
        scheme = scheme_adapter.validate_python({"type": "mutualTLS", "description": "client certs"})
        with pytest.raises(UnsupportedFeatureError) as exc_info:
            downgrade_security_scheme(scheme)
        assert exc_info.value.feature == "mutualTLS"
        assert isinstance(exc_info.value, DowngradeError)


class TestOAuthFlows:
    @given(slot=sampled_from(sorted(FLOW_DOCS)))
    def test_single_slot_stays_single(self, slot):
        flows = v3_1.OAuthFlows.model_validate({slot: FLOW_DOCS[slot]})
        converted = downgrade_oauth_flows(flows)
        for other, attribute in SLOT_ATTRIBUTES.items():
            if other == slot:
                assert getattr(converted, attribute) is not None
            else:
                assert getattr(converted, attribute) is None
        assert dump(converted) == {slot: FLOW_DOCS[slot]}

    def test_all_slots(self):
        flows = v3_1.OAuthFlows.model_validate(FLOW_DOCS)
        converted = downgrade_oauth_flows(flows)
        assert type(converted.implicit) is v3_0.ImplicitOAuthFlow
        assert type(converted.password) is v3_0.PasswordOAuthFlow
        assert type(converted.client_credentials) is v3_0.ClientCredentialsOAuthFlow
        assert type(converted.authorization_code) is v3_0.AuthorizationCodeOAuthFlow
        assert dump(converted) == FLOW_DOCS

    def test_no_slots(self):
        assert dump(downgrade_oauth_flows(v3_1.OAuthFlows())) == {}

    def test_per_kind_fields(self):
        slot, flow = downgrade_oauth_flow(
            v3_1.AuthorizationCodeOAuthFlow(
                authorization_url="https://a", token_url="https://t", refresh_url="https://r", scopes={"s": "S"}
            )
        )
        assert slot == "authorization_code"
        assert flow == v3_0.AuthorizationCodeOAuthFlow(
            authorization_url="https://a", token_url="https://t", refresh_url="https://r", scopes={"s": "S"}
        )

    def test_client_credentials_has_no_authorization_url(self):
        slot, flow = downgrade_oauth_flow(v3_1.ClientCredentialsOAuthFlow(token_url="https://t"))
        assert slot == "client_credentials"
        assert "authorization_url" not in type(flow).model_fields
        assert dump(flow) == {"tokenUrl": "https://t", "scopes": {}}

    def test_flow_extensions_kept(self):
        flows = v3_1.OAuthFlows.model_validate({"password": {**FLOW_DOCS["password"], "x-grant": "legacy"}})
        assert downgrade_oauth_flows(flows).password.extensions == {"x-grant": "legacy"}
