"""
mdlite: a small Markdown to HTML fragment converter.

This package can be used both as a CLI tool and as a library.

CLI Usage:
    mdlite README.md --output README.html

Library Usage:
    from mdlite import MarkdownParser, markdown_to_html

    html = markdown_to_html("# Title\\n\\nSome **bold** text")

    parser = MarkdownParser()
    first = parser.parse("> quoted")
    second = parser.parse("```python\\nprint('hi')\\n```")
"""

from .assembler import assemble_blocks
from .classifier import classify
from .config import ConfigError, ParserConfig
from .exceptions import ConversionError, FileTooLargeError, LineTooLongError
from .inline import (
    apply_inline_styles,
    escape_html,
    join_fragments,
    transform_fragments,
    wrap_with_tag,
)
from .models import (
    BlockMatch,
    BlockType,
    ConversionResult,
    Fragment,
    FragmentKind,
    ParserState,
)
from .parser import ConvertFileError, MarkdownParser, convert_file, markdown_to_html

__version__ = "0.1.0"

__all__ = [
    # Core functionality
    "markdown_to_html",
    "MarkdownParser",
    "convert_file",
    "classify",
    "assemble_blocks",
    "transform_fragments",
    "join_fragments",
    # Utilities
    "apply_inline_styles",
    "escape_html",
    "wrap_with_tag",
    # Data models
    "BlockMatch",
    "BlockType",
    "ConversionResult",
    "Fragment",
    "FragmentKind",
    "ParserConfig",
    "ParserState",
    # Exceptions
    "ConfigError",
    "ConversionError",
    "ConvertFileError",
    "FileTooLargeError",
    "LineTooLongError",
    # Version
    "__version__",
]
