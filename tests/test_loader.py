import json
from pathlib import Path

import pytest
import yaml
from pydantic import ValidationError

from openapi_downgrade.errors import DocumentError
from openapi_downgrade.model import v3_0, v3_1
from openapi_downgrade.model.reference import Reference
from openapi_downgrade.parser.detect import detect_version
from openapi_downgrade.parser.loader import dump_document, load_document, parse_document, read_document

FIXTURES = Path(__file__).parent / "fixtures"


class TestDetectVersion:
    def test_detect_3_1_yaml(self):
        assert detect_version(FIXTURES / "petstore-3.1.yaml") == "3.1"

    def test_detect_3_0_yaml(self):
        assert detect_version(FIXTURES / "petstore-3.0.yaml") == "3.0"

    def test_detect_json(self):
        assert detect_version(FIXTURES / "callback-ref-3.1.json") == "3.1"

    def test_detect_unknown_format(self, tmp_path):
        f = tmp_path / "doc.md"
        f.write_text("# API Docs\nSome text")
        assert detect_version(f) == "unknown"

    def test_detect_swagger_2(self, tmp_path):
        f = tmp_path / "swagger.yaml"
        f.write_text("swagger: '2.0'\ninfo: {title: T, version: '1'}\n")
        assert detect_version(f) == "unknown"


class TestLoadDocument:
    def test_load_3_1(self):
        doc = load_document(FIXTURES / "petstore-3.1.yaml")
        assert isinstance(doc, v3_1.OpenAPI)
        assert doc.info.title == "Petstore"
        assert list(doc.paths) == ["/pets"]

    def test_load_3_0(self):
        doc = load_document(FIXTURES / "petstore-3.0.yaml")
        assert isinstance(doc, v3_0.OpenAPI)

    def test_integer_status_codes_become_strings(self):
        doc = load_document(FIXTURES / "petstore-3.1.yaml")
        assert list(doc.paths["/pets"].get.responses) == ["200"]

    def test_references_parsed(self):
        doc = load_document(FIXTURES / "petstore-3.1.yaml")
        assert doc.paths["/pets"].get.parameters[0] == Reference("#/components/parameters/Limit")
        assert doc.components.schemas["Pet"].properties["owner"].reference == "#/components/schemas/Owner"

    def test_root_extensions(self):
        doc = load_document(FIXTURES / "petstore-3.1.yaml")
        assert doc.extensions == {"x-api-owner": "pets-team"}

    def test_unsupported_version(self):
        with pytest.raises(DocumentError):
            parse_document({"swagger": "2.0"})

    def test_invalid_document(self):
        with pytest.raises(ValidationError):
            parse_document({"openapi": "3.1.0", "info": {"title": "no version"}})

    def test_non_mapping(self, tmp_path):
        f = tmp_path / "list.yaml"
        f.write_text("- a\n- b\n")
        with pytest.raises(DocumentError):
            read_document(f)


class TestDumpDocument:
    def test_yaml_keeps_field_order(self):
        doc = load_document(FIXTURES / "petstore-3.0.yaml")
        text = dump_document(doc, "yaml")
        assert text.index("openapi:") < text.index("info:") < text.index("paths:")
        assert yaml.safe_load(text) == read_document(FIXTURES / "petstore-3.0.yaml")

    def test_json(self):
        doc = load_document(FIXTURES / "petstore-3.0.yaml")
        data = json.loads(dump_document(doc, "json"))
        assert data["paths"]["/pets"]["get"]["responses"]["200"]["description"] == "A list of pets"

    def test_reference_roundtrip(self, tmp_path):
        doc = v3_0.OpenAPI.model_validate(
            {
                "openapi": "3.0.3",
                "info": {"title": "T", "version": "1"},
                "paths": {},
                "components": {"schemas": {"Alias": {"$ref": "#/components/schemas/Pet"}}},
            }
        )
        f = tmp_path / "out.yaml"
        f.write_text(dump_document(doc, "yaml"))
        again = load_document(f)
        cell = again.components.schemas["Alias"]
        assert isinstance(cell, Reference)
        assert cell.reference == "#/components/schemas/Pet"
        assert cell.into_item() is None

    def test_unknown_format(self):
        doc = load_document(FIXTURES / "petstore-3.0.yaml")
        with pytest.raises(ValueError):
            dump_document(doc, "toml")
