"""Read OpenAPI documents into the typed model and write them back out."""

import json
from pathlib import Path

import yaml

from openapi_downgrade.errors import DocumentError
from openapi_downgrade.model import v3_0, v3_1

from .detect import version_of


def read_document(file_path: Path) -> dict:
    """Load a YAML or JSON document into plain Python data."""
    text = file_path.read_text(encoding="utf-8")
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError:
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise DocumentError(f"{file_path} is neither YAML nor JSON: {e}") from e
    if not isinstance(data, dict):
        raise DocumentError(f"{file_path} does not contain a mapping at the top level")
    return _stringify_keys(data)


def parse_document(data: dict) -> v3_0.OpenAPI | v3_1.OpenAPI:
    """Build the typed model matching the document's ``openapi`` version.

    Raises DocumentError for versions other than 3.0.x and 3.1.x and lets
    pydantic's ValidationError through for ill-typed documents.
    """
    version = version_of(data)
    if version == "3.1":
        return v3_1.OpenAPI.model_validate(data)
    if version == "3.0":
        return v3_0.OpenAPI.model_validate(data)
    raise DocumentError(f"unsupported openapi version {data.get('openapi')!r}")


def load_document(file_path: Path) -> v3_0.OpenAPI | v3_1.OpenAPI:
    return parse_document(read_document(file_path))


def dump_document(document: v3_0.OpenAPI | v3_1.OpenAPI, fmt: str = "yaml") -> str:
    """Serialize a document as 'yaml' or 'json', keeping field order."""
    data = document.model_dump(mode="json", by_alias=True)
    if fmt == "json":
        return json.dumps(data, indent=2, ensure_ascii=False) + "\n"
    if fmt == "yaml":
        return yaml.safe_dump(data, sort_keys=False, allow_unicode=True)
    raise ValueError(f"unknown output format {fmt!r}")


def _stringify_keys(value):
    # YAML reads `200:` as an int; OpenAPI keys are always strings.
    if isinstance(value, dict):
        return {str(k): _stringify_keys(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_stringify_keys(v) for v in value]
    return value
