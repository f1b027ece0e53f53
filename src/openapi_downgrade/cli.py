"""CLI entry point for openapi-downgrade."""

import logging
from pathlib import Path

import click
from pydantic import ValidationError

from openapi_downgrade.converter import DEFAULT_TARGET_VERSION, downgrade_document
from openapi_downgrade.errors import DowngradeError
from openapi_downgrade.model import v3_0
from openapi_downgrade.parser.detect import detect_version
from openapi_downgrade.parser.loader import dump_document, load_document


def _output_format(output: Path, fmt: str) -> str:
    """Resolve 'auto' from the output file suffix."""
    if fmt != "auto":
        return fmt
    return "json" if output.suffix.lower() == ".json" else "yaml"


@click.group()
@click.option("--log-level", default="WARNING", type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"]), help="Logging verbosity.")
def main(log_level: str):
    """OpenAPI Downgrade: rewrite OpenAPI 3.1 documents as OpenAPI 3.0."""
    logging.basicConfig(level=log_level, format="%(levelname)s %(name)s: %(message)s")


@main.command()
@click.argument("doc_path", type=click.Path(exists=True, path_type=Path))
def detect(doc_path: Path):
    """Print the OpenAPI revision a document declares."""
    click.echo(detect_version(doc_path))


@main.command()
@click.argument("doc_path", type=click.Path(exists=True, path_type=Path))
@click.option("-o", "--output", required=True, type=click.Path(path_type=Path), help="Output file path for the 3.0 document.")
@click.option("--format", "fmt", default="auto", type=click.Choice(["auto", "yaml", "json"]), help="Output format.")
@click.option("--target-version", default=DEFAULT_TARGET_VERSION, envvar="OPENAPI_DOWNGRADE_TARGET_VERSION", show_default=True, help="3.0.x version written to the output.")
def convert(doc_path: Path, output: Path, fmt: str, target_version: str):
    """Downgrade an OpenAPI 3.1 document to OpenAPI 3.0."""
    click.echo(f"Reading {doc_path}...")
    try:
        document = load_document(doc_path)
        if isinstance(document, v3_0.OpenAPI):
            click.echo(f"{doc_path} is already OpenAPI {document.openapi}, writing it unchanged.")
            converted = document
        else:
            click.echo(f"Downgrading OpenAPI {document.openapi} to {target_version}...")
            converted = downgrade_document(document, target_version=target_version)
    except (DowngradeError, ValidationError, ValueError) as e:
        raise click.ClickException(str(e)) from e

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(dump_document(converted, _output_format(output, fmt)), encoding="utf-8")
    click.echo(f"OpenAPI {converted.openapi} document saved to {output}")
