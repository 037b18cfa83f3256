"""Data models for mdlite."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto


class BlockType(Enum):
    """Block types recognized by the line classifier.

    Attributes:
        CODE_FENCE_MARKER: A line containing a triple-backtick fence.
        ATX_HEADING: A heading introduced by one to six ``#`` characters.
        SETEXT_HEADING: A row of ``=`` or ``-`` underlining the previous line.
        BLOCKQUOTE: A line introduced by one or more ``>`` characters.
        BREAK: An empty or whitespace-only line.
        PLAINTEXT: Anything else.
    """

    CODE_FENCE_MARKER = auto()
    ATX_HEADING = auto()
    SETEXT_HEADING = auto()
    BLOCKQUOTE = auto()
    BREAK = auto()
    PLAINTEXT = auto()


@dataclass(frozen=True)
class BlockMatch:
    """Result of classifying a line.

    Attributes:
        block_type: Type of block matched at the classified offset.
        prefix: Text consumed by the match; empty for breaks and plaintext.
    """

    block_type: BlockType
    prefix: str = ""


class FragmentKind(Enum):
    """How the paragraph and inline pass treats a fragment.

    Attributes:
        STRUCTURAL: Tag-only output (blockquote, pre, line break).
        ESCAPED: Code fence content, already escaped and left untouched.
        PLAINTEXT: Text content, possibly already wrapped in a heading tag.
    """

    STRUCTURAL = auto()
    ESCAPED = auto()
    PLAINTEXT = auto()


@dataclass
class Fragment:
    """One unit of assembled output.

    Attributes:
        text: Rendered text of the fragment.
        kind: Classification controlling the paragraph and inline pass.
    """

    text: str
    kind: FragmentKind = FragmentKind.PLAINTEXT


@dataclass
class ParserState:
    """Nesting state carried across the lines of one document.

    Attributes:
        blockquote_level: Current blockquote nesting depth.
        inside_code_fence: Whether a code fence is currently open.
    """

    blockquote_level: int = 0
    inside_code_fence: bool = False


@dataclass
class ConversionResult:
    """Structured result of converting a Markdown document.

    Attributes:
        html: Joined HTML fragment.
        fragments: Fragments after the paragraph and inline pass.
        state: Parser state as left at the end of the document.
    """

    html: str
    fragments: list[Fragment] = field(default_factory=list)
    state: ParserState = field(default_factory=ParserState)
