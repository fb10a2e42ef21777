"""Command-line interface for inspecting feed extension trees."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List, Optional

import click
import structlog
import yaml
from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from feedmedia import __version__
from feedmedia.config import Config, settings
from feedmedia.extensions import ExtensionTreeError, MediaExtensionParser, load_extension_document
from feedmedia.observability import configure_logging
from feedmedia.protocols import MediaExtension
from feedmedia.utils import atomic_write_json

console = Console()
logger = structlog.get_logger(__name__)


def _load_config(config_path: Optional[Path]) -> Config:
    if config_path is not None:
        return Config.from_yaml(config_path)
    # Copy so command-line overrides never leak into the shared settings
    return settings.model_copy(deep=True)


def _render_table(index: int, media: MediaExtension) -> Table:
    table = Table(title=f"Media extension #{index}")
    table.add_column("Field", style="cyan")
    table.add_column("Value", style="magenta")

    table.add_row("title", media.title)
    table.add_row("description", media.description)
    if media.keywords is not None:
        table.add_row("keywords", ", ".join(repr(k) for k in media.keywords))
    for category in media.categories or ():
        table.add_row("category", f"{category.value} (scheme={category.scheme!r}, label={category.label!r})")
    for thumbnail in media.thumbnails or ():
        table.add_row("thumbnail", f"{thumbnail.url} {thumbnail.width}x{thumbnail.height}")
    for media_hash in media.hashes or ():
        table.add_row("hash", f"{media_hash.algorithm}:{media_hash.hash}")
    return table


@click.group()
@click.version_option(version=__version__)
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Configuration file path",
)
@click.option(
    "--log-level",
    default=None,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Logging level (overrides the configuration file)",
)
@click.pass_context
def cli(ctx: click.Context, config_path: Optional[Path], log_level: Optional[str]) -> None:
    """feedmedia - Media RSS metadata from parsed feed extensions."""
    ctx.ensure_object(dict)
    try:
        config = _load_config(config_path)
    except (ValidationError, yaml.YAMLError, OSError) as e:
        click.secho(f"Configuration error: {e}", fg="red", err=True)
        ctx.exit(1)

    if log_level:
        config.monitoring.log_level = log_level.upper()
    configure_logging(config.monitoring)
    ctx.obj["config"] = config


@cli.command()
@click.argument("input_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--namespaced/--bare",
    default=False,
    help="Input entries are namespace-keyed maps; select the configured extraction namespace",
)
@click.option("--output", "-o", type=click.Path(dir_okay=False, path_type=Path), help="Write JSON result to file")
@click.option(
    "--format",
    "output_format",
    default="json",
    type=click.Choice(["json", "table"]),
    help="Output format",
)
@click.pass_context
def extract(
    ctx: click.Context, input_path: Path, namespaced: bool, output: Optional[Path], output_format: str
) -> None:
    """Extract media metadata from a JSON extension document."""
    config: Config = ctx.obj["config"]
    namespace = config.extraction.namespace if namespaced else None
    parser = MediaExtensionParser(config.extraction)

    try:
        trees = load_extension_document(input_path, namespace=namespace)
    except ExtensionTreeError as e:
        click.secho(str(e), fg="red", err=True)
        ctx.exit(1)

    results = [parser.parse(tree) for tree in trees]
    logger.info("Extracted media metadata", input=str(input_path), trees=len(results))
    payload: List[Dict[str, Any]] = [media.to_dict() for media in results]

    if output_format == "table":
        for index, media in enumerate(results):
            console.print(_render_table(index, media))
    else:
        click.echo(json.dumps(payload, indent=2, ensure_ascii=False))

    if output:
        atomic_write_json(output, payload)
        click.secho(f"Result saved to {output}", fg="green", err=True)


@cli.command("show-config")
@click.pass_context
def show_config(ctx: click.Context) -> None:
    """Print the effective configuration as JSON."""
    config: Config = ctx.obj["config"]
    click.echo(config.model_dump_json(indent=2))


def main() -> None:
    """Main entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
