"""Command-line interface for Veneer."""

import json
import logging
import sys
from pathlib import Path
from typing import Optional, Tuple

import click
import yaml
from rich.console import Console
from rich.markup import escape

from . import __version__
from .config import ConfigModel, load_config, save_config
from .render import build as build_templates
from .render import check as check_templates
from .render import load_resolved
from .show import print_palette

logger = logging.getLogger(__name__)

error_console = Console(stderr=True)

palette_option = click.option(
    "--palette", "-p",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Palette file (TOML, YAML or JSON). Defaults to the configured palette.",
)


def configure_logging(level: str) -> None:
    """Send log records to stderr at the given level."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
        force=True,
    )


def fail(action: str, error: Exception) -> None:
    """Report an error and exit non-zero."""
    logger.debug(f"{action} failed", exc_info=True)
    error_console.print(f"[red]Error {action}: {escape(str(error))}[/red]", highlight=False, soft_wrap=True)
    sys.exit(1)


def resolve_palette_path(ctx: click.Context, palette: Optional[Path]) -> Path:
    config: ConfigModel = ctx.obj["config"]
    return palette if palette is not None else Path(config.palette)


@click.group()
@click.version_option(__version__, prog_name="veneer")
@click.option("--config", "config_path", type=click.Path(dir_okay=False, path_type=Path),
              help="Path to config file")
@click.option("--verbose", "-v", is_flag=True, help="Verbose output")
@click.pass_context
def main(ctx, config_path, verbose):
    """Veneer - describe a theme once, stamp it into any template."""
    ctx.ensure_object(dict)

    try:
        config = load_config(config_path)
    except Exception as e:
        fail("loading configuration", e)

    configure_logging("DEBUG" if verbose else config.log_level)
    ctx.obj["config"] = config
    ctx.obj["verbose"] = verbose


@main.command()
@click.argument("templates", nargs=-1, required=True,
                type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--out", "-o", "dest", type=click.Path(path_type=Path),
              help="Output file, or directory for several templates")
@palette_option
@click.pass_context
def build(ctx, templates: Tuple[Path, ...], dest: Optional[Path], palette: Optional[Path]):
    """Render templates to output files."""
    config: ConfigModel = ctx.obj["config"]
    palette_path = resolve_palette_path(ctx, palette)
    if dest is None and config.output_dir:
        dest = Path(config.output_dir).expanduser()
        dest.mkdir(parents=True, exist_ok=True)

    try:
        written = build_templates(palette_path, templates, dest, config.template_suffixes)
    except Exception as e:
        fail("building templates", e)

    for path in written:
        click.echo(f"wrote {path}")


@main.command()
@click.argument("templates", nargs=-1,
                type=click.Path(exists=True, dir_okay=False, path_type=Path))
@palette_option
@click.pass_context
def check(ctx, templates: Tuple[Path, ...], palette: Optional[Path]):
    """Validate the palette and templates without writing outputs."""
    palette_path = resolve_palette_path(ctx, palette)

    try:
        check_templates(palette_path, templates)
    except Exception as e:
        fail("checking", e)

    checked = f" and {len(templates)} template(s)" if templates else ""
    click.echo(f"ok: {palette_path}{checked}")


@main.command()
@palette_option
@click.pass_context
def show(ctx, palette: Optional[Path]):
    """Show palette values with color swatches."""
    palette_path = resolve_palette_path(ctx, palette)

    try:
        resolved = load_resolved(palette_path)
    except Exception as e:
        fail("showing palette", e)

    print_palette(resolved, palette_path)


@main.command()
@palette_option
@click.option("--format", "output_format", type=click.Choice(["json", "yaml"]),
              default="json", show_default=True, help="Output format")
@click.pass_context
def resolve(ctx, palette: Optional[Path], output_format: str):
    """Print the fully resolved palette."""
    palette_path = resolve_palette_path(ctx, palette)

    try:
        document = load_resolved(palette_path).to_document()
    except Exception as e:
        fail("resolving palette", e)

    if output_format == "yaml":
        click.echo(yaml.safe_dump(document, default_flow_style=False, sort_keys=False), nl=False)
    else:
        click.echo(json.dumps(document, indent=2))


@main.command(name="config")
@click.option("--save", "save_path", type=click.Path(dir_okay=False, path_type=Path),
              help="Write the effective configuration to this file")
@click.pass_context
def show_config(ctx, save_path: Optional[Path]):
    """Print the effective configuration."""
    config: ConfigModel = ctx.obj["config"]

    if save_path is not None:
        try:
            save_config(config, save_path)
        except Exception as e:
            fail("saving configuration", e)
        click.echo(f"wrote {save_path}")
        return

    click.echo(config.to_yaml(), nl=False)


if __name__ == "__main__":
    main()
