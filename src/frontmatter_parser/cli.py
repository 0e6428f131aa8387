"""Command line interface: ``frontmatter-parser file`` and ``frontmatter-parser dir``."""

from __future__ import annotations

import logging
from pathlib import Path

import click

from frontmatter_parser.collector import parse_directory
from frontmatter_parser.errors import FrontmatterError, SerializationError
from frontmatter_parser.parser import parse_file
from frontmatter_parser.render import FrontmatterEntry, render_entries

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])

EXIT_SUCCESS = 0
EXIT_FAILURE = 1
EXIT_PARTIAL = 2


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="frontmatter-parser")
@click.option("--debug", is_flag=True, help="Enable debug logging")
def cli(debug: bool) -> None:
    """Parse frontmatter from markdown files."""
    if debug:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s - %(levelname)s - %(message)s")


@cli.command("file")
@click.argument("path", type=click.Path(path_type=Path))
def file_cmd(path: Path) -> None:
    """Parse frontmatter from a single file."""
    try:
        output = parse_file(path).to_json()
    except FrontmatterError as exc:
        click.echo(f"Error: {exc}", err=True)
        raise SystemExit(EXIT_FAILURE) from None

    click.echo(output)


@cli.command("dir")
@click.argument("path", type=click.Path(path_type=Path))
@click.option("-r", "--recursive", is_flag=True, help="Recursively search subdirectories")
def dir_cmd(path: Path, recursive: bool) -> None:
    """Parse frontmatter from all markdown files in a directory."""
    entries: list[FrontmatterEntry] = []
    has_errors = False

    for outcome in parse_directory(path, recursive=recursive):
        if outcome.error is not None:
            click.echo(f"Warning: {outcome.error}", err=True)
            has_errors = True
            continue
        frontmatter = outcome.unwrap()
        entries.append(FrontmatterEntry(file=str(frontmatter.path), frontmatter=frontmatter.data))

    try:
        output = render_entries(entries)
    except SerializationError as exc:
        click.echo(f"Error: {exc}", err=True)
        raise SystemExit(EXIT_FAILURE) from None

    click.echo(output)
    if has_errors:
        raise SystemExit(EXIT_PARTIAL)


def main() -> None:
    """CLI entry point used by the ``frontmatter-parser`` console script."""
    cli()
