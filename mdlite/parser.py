"""Markdown to HTML conversion entry points."""

from __future__ import annotations

import logging
from pathlib import Path

from .assembler import assemble_blocks
from .config import ConfigError, ParserConfig, validate_config
from .constants import LINE_SPLIT_PATTERN
from .exceptions import FileTooLargeError, LineTooLongError
from .filesystem import collect_file_stat, enforce_file_size, safe_read
from .inline import join_fragments, transform_fragments
from .models import ConversionResult, ParserState

logger = logging.getLogger(__name__)


def split_lines(markdown: str) -> list[str]:
    """Split a document on ``\\n`` or ``\\r\\n`` line terminators.

    Examples:
        split_lines("a\\r\\nb\\n")  # ["a", "b", ""]
    """
    return LINE_SPLIT_PATTERN.split(markdown)


class MarkdownParser:
    """Convert Markdown documents into HTML fragments.

    The parser owns the nesting state of the document being converted. Every
    call to `parse` or `convert` starts from a fresh state, so one instance
    can convert several documents one after another. Converting documents
    concurrently with the same instance is not supported.

    Args:
        config: Rendering configuration. Defaults to a new `ParserConfig`.

    Examples:
        parser = MarkdownParser()
        parser.parse("# Title")  # "<h1>Title</h1>"
    """

    def __init__(self, config: ParserConfig | None = None):
        self.config = config or ParserConfig()
        self.state = ParserState()

    def reset(self) -> None:
        """Forget any blockquote or code fence state from a previous document."""
        self.state = ParserState()

    def convert(self, markdown: object) -> ConversionResult:
        """Convert a document and return the HTML with its intermediate fragments.

        Args:
            markdown: Markdown text. Anything that is not a string, or a string
                holding only whitespace, converts to an empty result.

        Returns:
            ConversionResult: HTML output, transformed fragments, and the
                parser state left at the end of the document.
        """
        self.reset()
        if not isinstance(markdown, str) or not markdown.strip():
            return ConversionResult(html="", state=self.state)

        fragments = assemble_blocks(split_lines(markdown), self.state, self.config)
        transform_fragments(fragments)
        html = join_fragments(fragments, self.config.glue)
        logger.debug("Converted document into %d fragment(s)", len(fragments))
        return ConversionResult(html=html, fragments=fragments, state=self.state)

    def parse(self, markdown: object) -> str:
        """Convert a document into an HTML fragment.

        Examples:
            MarkdownParser().parse("Title\\n=====")  # "<h1>Title</h1>"
        """
        return self.convert(markdown).html


def markdown_to_html(markdown: object, config: ParserConfig | None = None) -> str:
    """Convert Markdown text into an HTML fragment using a fresh parser.

    Args:
        markdown: Markdown text to convert.
        config: Rendering configuration. Defaults to a new `ParserConfig`.

    Returns:
        str: HTML without a surrounding document wrapper. Empty for input that
            is not a string or holds only whitespace.

    Examples:
        markdown_to_html("**bold**")  # "<p><strong>bold</strong></p>"
    """
    return MarkdownParser(config).parse(markdown)


def check_line_lengths(markdown: str, max_line_length: int) -> None:
    """Ensure no line is longer than `max_line_length` characters.

    Raises:
        LineTooLongError: For the first line over the limit.
    """
    for line_number, line in enumerate(split_lines(markdown), start=1):
        if len(line) > max_line_length:
            raise LineTooLongError(line_number, max_line_length)


class ConvertFileError(Exception):
    """Raised when converting a Markdown file fails."""


def convert_file(
    filepath: Path,
    config: ParserConfig | None = None,
    max_file_size: int | None = None,
    max_line_length: int | None = None,
) -> str:
    """Read a Markdown file and convert it into an HTML fragment.

    Args:
        filepath: Path to the Markdown file.
        config: Configuration controlling limits and rendering; defaults to a
            new `ParserConfig` when omitted.
        max_file_size: Optional override for the maximum file size in bytes.
        max_line_length: Optional override for the maximum line length.

    Returns:
        str: Rendered HTML fragment.

    Raises:
        ConvertFileError: If configuration is invalid, the file cannot be read
            or decoded, or it exceeds the size or line length limits.

    Examples:
        html = convert_file(Path("README.md"))
    """
    config = config or ParserConfig()
    try:
        validate_config(config)
    except ConfigError as error:
        raise ConvertFileError(str(error)) from error

    effective_max_file_size = config.max_file_size if max_file_size is None else max_file_size
    effective_max_line_length = (
        config.max_line_length if max_line_length is None else max_line_length
    )
    if effective_max_file_size <= 0 or effective_max_line_length <= 0:
        raise ConvertFileError("Size and line length limits must be positive integers")

    try:
        enforce_file_size(collect_file_stat(filepath), effective_max_file_size)
        with safe_read(filepath) as file:
            content = file.read()
    except FileTooLargeError as error:
        error_message = (
            f"{filepath} exceeds the maximum allowed size of {error.max_size} bytes."
        )
        raise ConvertFileError(error_message) from error
    except UnicodeDecodeError as error:
        error_message = f"Invalid UTF-8 sequence in {filepath}: {error}"
        raise ConvertFileError(error_message) from error
    except IOError as error:
        raise ConvertFileError(str(error)) from error

    try:
        check_line_lengths(content, effective_max_line_length)
    except LineTooLongError as error:
        error_message = (
            f"{filepath} contains a line at line {error.line_number} "
            f"exceeding the maximum allowed length of {error.max_line_length} characters."
        )
        raise ConvertFileError(error_message) from error

    logger.info("Converting %s", filepath)
    return markdown_to_html(content, config)
