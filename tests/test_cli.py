import json
from pathlib import Path

import yaml
from click.testing import CliRunner

from openapi_downgrade.cli import main

FIXTURES = Path(__file__).parent / "fixtures"


class TestCliDetect:
    def test_detect(self):
        runner = CliRunner()
        result = runner.invoke(main, ["detect", str(FIXTURES / "petstore-3.1.yaml")])
        assert result.exit_code == 0
        assert result.output.strip() == "3.1"


class TestCliConvert:
    def test_convert_petstore(self, tmp_path):
        output_file = tmp_path / "petstore-3.0.yaml"
        runner = CliRunner()
        result = runner.invoke(main, [
            "convert", str(FIXTURES / "petstore-3.1.yaml"),
            "-o", str(output_file),
        ])

        assert result.exit_code == 0, result.output
        doc = yaml.safe_load(output_file.read_text())
        assert doc["openapi"] == "3.0.3"
        assert doc["x-api-owner"] == "pets-team"
        assert "webhooks" not in doc
        assert "pathItems" not in doc["components"]
        assert doc["info"] == {"title": "Petstore", "version": "1.0.0", "license": {"name": "MIT"}}
        assert doc["servers"][1] == {"url": "https://petstore.example.com/v1"}
        assert doc["servers"][0]["variables"]["region"]["enum"] == ["eu", "us"]

        pet = doc["components"]["schemas"]["Pet"]
        assert pet["properties"]["tag"] == {"type": "string", "nullable": True}
        assert pet["properties"]["kind"] == {"enum": ["pet"]}
        assert pet["properties"]["id"]["exclusiveMinimum"] is True
        assert pet["properties"]["owner"] == {
            "description": "Current owner",
            "allOf": [{"$ref": "#/components/schemas/Owner"}],
        }
        assert doc["components"]["schemas"]["Owner"]["example"] == {"name": "Alice"}

        schemes = doc["components"]["securitySchemes"]
        assert schemes["api_key"] == {"type": "apiKey", "name": "X-Api-Key", "in": "header", "x-rate-limited": True}
        assert set(schemes["petstore_auth"]["flows"]) == {"implicit", "clientCredentials"}
        assert schemes["petstore_auth"]["flows"]["clientCredentials"]["scopes"] == {}

        get_pets = doc["paths"]["/pets"]["get"]
        assert get_pets["security"] == []
        assert get_pets["parameters"] == [{"$ref": "#/components/parameters/Limit"}]
        assert get_pets["responses"]["200"]["content"]["application/json"]["x-sample-size"] == 3
        callback = doc["paths"]["/pets"]["post"]["callbacks"]["onAdopted"]["{$request.body#/callbackUrl}"]
        assert callback["post"]["responses"]["204"]["description"] == "Acknowledged"

    def test_convert_to_json(self, tmp_path):
        output_file = tmp_path / "out.json"
        runner = CliRunner()
        result = runner.invoke(main, ["convert", str(FIXTURES / "petstore-3.1.yaml"), "-o", str(output_file)])

        assert result.exit_code == 0, result.output
        assert json.loads(output_file.read_text())["openapi"] == "3.0.3"

    def test_target_version_from_env(self, tmp_path):
        output_file = tmp_path / "out.yaml"
        runner = CliRunner()
        result = runner.invoke(
            main,
            ["convert", str(FIXTURES / "petstore-3.1.yaml"), "-o", str(output_file)],
            env={"OPENAPI_DOWNGRADE_TARGET_VERSION": "3.0.2"},
        )

        assert result.exit_code == 0, result.output
        assert yaml.safe_load(output_file.read_text())["openapi"] == "3.0.2"

    def test_3_0_written_unchanged(self, tmp_path):
        output_file = tmp_path / "out.yaml"
        runner = CliRunner()
        result = runner.invoke(main, ["convert", str(FIXTURES / "petstore-3.0.yaml"), "-o", str(output_file)])

        assert result.exit_code == 0
        assert "already OpenAPI 3.0.3" in result.output
        assert yaml.safe_load(output_file.read_text()) == yaml.safe_load((FIXTURES / "petstore-3.0.yaml").read_text())


class TestCliErrors:
    def test_mutual_tls_fails(self, tmp_path):
        output_file = tmp_path / "out.yaml"
        runner = CliRunner()
        result = runner.invoke(main, ["convert", str(FIXTURES / "mutual-tls-3.1.yaml"), "-o", str(output_file)])

        assert result.exit_code == 1
        assert "mutualTLS" in result.output
        assert not output_file.exists()

    def test_referenced_callback_path_item_fails(self, tmp_path):
        output_file = tmp_path / "out.yaml"
        runner = CliRunner()
        result = runner.invoke(main, ["convert", str(FIXTURES / "callback-ref-3.1.json"), "-o", str(output_file)])

        assert result.exit_code == 1
        assert "#/components/pathItems/Event" in result.output
        assert not output_file.exists()

    def test_bad_target_version(self, tmp_path):
        runner = CliRunner()
        result = runner.invoke(main, [
            "convert", str(FIXTURES / "petstore-3.1.yaml"),
            "-o", str(tmp_path / "out.yaml"),
            "--target-version", "3.1.0",
        ])

        assert result.exit_code == 1
        assert "3.0.x" in result.output
