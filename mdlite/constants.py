"""Constants used across the mdlite package."""

from __future__ import annotations

import re

from .config import ParserConfig
from .models import BlockType

DEFAULT_CONFIG = ParserConfig()

# Block rules, evaluated top to bottom; the first match wins.
# Breaks and plaintext are decided outside the table.
CODE_FENCE = "```"
BLOCK_RULES: list[tuple[BlockType, re.Pattern[str]]] = [
    (BlockType.CODE_FENCE_MARKER, re.compile(re.escape(CODE_FENCE))),
    (BlockType.ATX_HEADING, re.compile(r"^\s*#{1,6}")),
    (BlockType.SETEXT_HEADING, re.compile(r"^=+\s*$|^-+\s*$")),
    (BlockType.BLOCKQUOTE, re.compile(r"^>+\s*")),
]

# Inline rules, applied in order to the string as rewritten by earlier rules.
# A delimiter preceded by a backslash neither opens nor closes a span.
INLINE_RULES: list[tuple[re.Pattern[str], str]] = [
    (re.compile(r"(?<!\\)\*{2}(.+?)(?<!\\)\*{2}"), "strong"),
    (re.compile(r"(?<!\\)_{2}(.+?)(?<!\\)_{2}"), "strong"),
    (re.compile(r"(?<!\\)\*(.+?)(?<!\\)\*"), "em"),
    (re.compile(r"(?<!\\)_(.+?)(?<!\\)_"), "em"),
]

LINE_SPLIT_PATTERN = re.compile(r"\r?\n")

PARAGRAPH_TAG = "p"
PRE_OPEN_TAG = "<pre>"
PRE_CLOSE_TAG = "</pre>"
BLOCKQUOTE_OPEN_TAG = "<blockquote>"
BLOCKQUOTE_CLOSE_TAG = "</blockquote>"

# Limits and file handling
DEFAULT_MAX_FILE_SIZE = DEFAULT_CONFIG.max_file_size
DEFAULT_MAX_LINE_LENGTH = DEFAULT_CONFIG.max_line_length
MARKDOWN_EXTENSIONS = (".md", ".markdown", ".mdown", ".mkd", ".mkdn")
