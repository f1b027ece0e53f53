"""Auto-detect the OpenAPI revision of a document."""

import json
from pathlib import Path

import yaml


def detect_version(file_path: Path) -> str:
    """Detect which OpenAPI revision a document file declares.

    Returns: '3.1', '3.0', or 'unknown'.
    """
    text = file_path.read_text(encoding="utf-8")

    # Try YAML/JSON parsing
    try:
        data = yaml.safe_load(text)
        if isinstance(data, dict):
            return version_of(data)
    except yaml.YAMLError:
        pass

    # Try JSON specifically (for files not parseable as YAML)
    try:
        data = json.loads(text)
        if isinstance(data, dict):
            return version_of(data)
    except (json.JSONDecodeError, ValueError):
        pass

    return "unknown"


def version_of(data: dict) -> str:
    """Map the ``openapi`` field of a parsed document to a revision."""
    declared = str(data.get("openapi", ""))
    if declared.startswith("3.1."):
        return "3.1"
    if declared.startswith("3.0."):
        return "3.0"
    return "unknown"
