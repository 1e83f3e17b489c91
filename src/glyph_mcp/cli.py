"""glyph command line: run the MCP server or print an outline."""

import sys

import click

from . import __version__
from .config import Settings
from .errors import PatternError
from .files import require_absolute
from .log import configure_logging
from .server import main as run_mcp_server
from .tools.extract_symbols import extract_symbols


@click.group()
@click.version_option(version=__version__, prog_name="glyph")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """glyph - symbol outlines of source files for coding assistants."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose


@cli.command("mcp")
def mcp_command() -> None:
    """Run as an MCP server on stdio."""
    run_mcp_server()


@cli.command("extract")
@click.option(
    "--detail",
    default="standard",
    show_default=True,
    help="Level of detail: minimal, standard or full",
)
@click.argument("pattern")
@click.pass_context
def extract_command(ctx: click.Context, detail: str, pattern: str) -> None:
    """Print the symbol outline of files matching PATTERN.

    \b
    Examples:
      glyph extract '/path/to/project/*.go'
      glyph extract --detail=minimal '/path/to/project/**/*.js'
    """
    settings = Settings.from_env()
    level = "DEBUG" if ctx.obj.get("verbose") else settings.log_level
    configure_logging(level=level, json_format=settings.log_format == "json")

    try:
        result = extract_symbols(require_absolute(pattern), detail, settings)
    except PatternError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    click.echo(result.rstrip("\n"))


if __name__ == "__main__":
    cli()
