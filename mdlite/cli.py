"""
Converts a Markdown file into an HTML fragment.
The HTML is printed to stdout unless an output file is given.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click
from .config import ConfigError, build_config
from .filesystem import get_max_file_size, get_max_line_length, normalize_filepath, write_output
from .parser import ConvertFileError, convert_file

__all__ = ["cli"]

logger = logging.getLogger("mdlite")


def setup_logging(verbose: bool = False, quiet: bool = False) -> None:
    """Configure the package logger according to the CLI flags.

    Args:
        verbose: Show debug messages.
        quiet: Show errors only.
    """
    if quiet:
        level = logging.ERROR
    elif verbose:
        level = logging.DEBUG
    else:
        level = logging.WARNING

    logger.setLevel(level)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
        logger.addHandler(handler)


@click.command()
@click.version_option(package_name="mdlite")
@click.option(
    "-o",
    "--output",
    type=click.Path(dir_okay=False, writable=True),
    help="Write the HTML to this file instead of stdout",
)
@click.option("--code-class-prefix", help="Class prefix for fenced code languages")
@click.option("--line-break", help="Markup emitted for blank lines")
@click.option("--glue", help="Separator placed between output fragments")
@click.option("-v", "--verbose", is_flag=True, help="Show debug output")
@click.option("-q", "--quiet", is_flag=True, help="Only show errors")
@click.argument("filepath", type=click.Path(exists=True, dir_okay=False))
def cli(
    filepath: str,
    output: str | None = None,
    code_class_prefix: str | None = None,
    line_break: str | None = None,
    glue: str | None = None,
    verbose: bool = False,
    quiet: bool = False,
):
    """
    Entry point for converting a Markdown file into HTML.

    Args:
        filepath: Path to the Markdown file to convert.
        output: Optional destination file for the HTML.
        code_class_prefix: Override for the fenced code class prefix.
        line_break: Override for the blank line markup.
        glue: Override for the fragment separator.
        verbose: Enable debug logging.
        quiet: Restrict logging to errors.

    Raises:
        click.BadParameter: If the path is invalid or the configuration holds
            unsupported values.
        click.ClickException: If limits are exceeded, the file cannot be read,
            or the output cannot be written.

    Examples:
        mdlite README.md --output README.html
    """
    setup_logging(verbose=verbose, quiet=quiet)

    base_dir = Path.cwd().resolve()
    try:
        markdown_path = normalize_filepath(filepath, base_dir)
    except ValueError as error:
        raise click.BadParameter(str(error)) from error

    try:
        config = build_config(
            markdown_path.parent,
            code_class_prefix=code_class_prefix,
            line_break=line_break,
            glue=glue,
        )
    except ConfigError as error:
        raise click.BadParameter(str(error)) from error

    try:
        max_file_size = get_max_file_size(default=config.max_file_size)
        max_line_length = get_max_line_length(default=config.max_line_length)
    except ValueError as error:
        raise click.ClickException(str(error)) from error

    try:
        html = convert_file(markdown_path, config, max_file_size, max_line_length)
    except ConvertFileError as error:
        raise click.ClickException(str(error)) from error

    if output is None:
        click.echo(html)
        return

    output_path = Path(output).expanduser()
    try:
        write_output(output_path, html)
    except IOError as error:
        raise click.ClickException(str(error)) from error
    logger.info("Wrote %s", output_path)


if __name__ == "__main__":
    cli()
