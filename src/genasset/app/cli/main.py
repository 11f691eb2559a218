"""CLI main entry point."""

import json
import sys
from collections.abc import Callable
from pathlib import Path

import click

from ...core import GenAssetConfig, GeneratedAssetHandler
from ..factory import create_handler


def _reader(path: Path | None) -> Callable[[], bytes] | None:
    if path is None:
        return None
    return path.read_bytes


@click.group()
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.option("--endpoint-url", default=None, help="S3 endpoint URL for the s3 store backend")
@click.option("--region", default=None, help="AWS region for the s3 store backend")
@click.option("--profile", default=None, help="AWS profile for the s3 store backend")
@click.pass_context
def cli(
    ctx: click.Context,
    debug: bool,
    endpoint_url: str | None,
    region: str | None,
    profile: str | None,
) -> None:
    """genasset - Cache-fronted references to generated file artifacts."""
    try:
        config = GenAssetConfig.from_env(
            endpoint_url=endpoint_url, region=region, profile=profile
        )
        # The flag wins over GA_LOG_LEVEL
        if debug:
            config.log_level = "DEBUG"
        ctx.obj = create_handler(config)
    except ValueError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


@cli.command()
@click.pass_obj
def flush(handler: GeneratedAssetHandler) -> None:
    """Clear every cached tuple."""
    handler.flush()
    click.echo("Cache flushed")


@cli.command()
@click.argument("filename")
@click.argument("source", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--entropy", default=None, help="Variant discriminator for the cache key")
@click.pass_obj
def update(
    handler: GeneratedAssetHandler, filename: str, source: Path, entropy: str | None
) -> None:
    """Store SOURCE as the generated content of FILENAME."""
    try:
        result = handler.update_content(filename, entropy, source.read_bytes())
        click.echo(json.dumps(result.to_dict(), indent=2))

    except Exception as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


@cli.command()
@click.argument("filename")
@click.option("--entropy", default=None, help="Variant discriminator for the cache key")
@click.option(
    "--regenerate-from",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="File to store when nothing is cached",
)
@click.pass_obj
def url(
    handler: GeneratedAssetHandler,
    filename: str,
    entropy: str | None,
    regenerate_from: Path | None,
) -> None:
    """Print the URL of the generated FILENAME."""
    try:
        result = handler.get_generated_url(filename, entropy, _reader(regenerate_from))
    except Exception as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if result is None:
        click.echo(f"Not found: {filename}", err=True)
        sys.exit(1)
    click.echo(result)


@cli.command()
@click.argument("filename")
@click.option("--entropy", default=None, help="Variant discriminator for the cache key")
@click.option(
    "--regenerate-from",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="File to store when nothing is cached",
)
@click.option("-o", "--output", type=click.Path(path_type=Path), help="Output file path")
@click.pass_obj
def content(
    handler: GeneratedAssetHandler,
    filename: str,
    entropy: str | None,
    regenerate_from: Path | None,
    output: Path | None,
) -> None:
    """Write the content of the generated FILENAME to stdout or a file."""
    try:
        data = handler.get_generated_content(filename, entropy, _reader(regenerate_from))
    except Exception as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if data is None:
        click.echo(f"Not found: {filename}", err=True)
        sys.exit(1)

    if output is None:
        click.get_binary_stream("stdout").write(data)
    else:
        output.write_bytes(data)
        click.echo(f"Successfully retrieved: {output}")


def main() -> None:
    """Main entry point."""
    cli()
