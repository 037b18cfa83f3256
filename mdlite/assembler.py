"""Stateful block assembly over the lines of a Markdown document."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable

from .classifier import blockquote_depth, classify, heading_level
from .config import ParserConfig
from .constants import (
    BLOCKQUOTE_CLOSE_TAG,
    BLOCKQUOTE_OPEN_TAG,
    CODE_FENCE,
    PRE_CLOSE_TAG,
    PRE_OPEN_TAG,
)
from .inline import escape_attribute, escape_html, wrap_with_tag
from .models import BlockMatch, BlockType, Fragment, FragmentKind, ParserState

logger = logging.getLogger(__name__)

BlockHandler = Callable[[str, int, BlockMatch, list[Fragment], ParserConfig], None]


def _open_pre_tag(line: str, config: ParserConfig) -> str:
    """Build the opening ``<pre>`` tag, with a language class when one is given.

    Examples:
        _open_pre_tag("```python", ParserConfig())  # '<pre class="lang-python">'
    """
    language = line.split(CODE_FENCE, 1)[1].strip()
    if not language:
        return PRE_OPEN_TAG
    return f'<pre class="{config.code_class_prefix}{escape_attribute(language)}">'


def _try_toggle_fence(
    state: ParserState,
    line: str,
    match: BlockMatch,
    fragments: list[Fragment],
    config: ParserConfig,
) -> bool:
    """Open or close a code fence when the line is a fence marker.

    Args:
        state: Parser state to update.
        line: Current line with trailing whitespace removed.
        match: Classification of the line at offset zero.
        fragments: Output list receiving the ``<pre>`` or ``</pre>`` tag.
        config: Rendering configuration.

    Returns:
        bool: True when the line was a fence marker and has been consumed.
    """
    if match.block_type is not BlockType.CODE_FENCE_MARKER:
        return False

    state.inside_code_fence = not state.inside_code_fence
    if state.inside_code_fence:
        fragments.append(Fragment(_open_pre_tag(line, config), FragmentKind.STRUCTURAL))
        logger.debug("Opened code fence")
    else:
        fragments.append(Fragment(PRE_CLOSE_TAG, FragmentKind.STRUCTURAL))
        logger.debug("Closed code fence")
    return True


def _try_emit_fence_content(
    state: ParserState, raw_line: str, fragments: list[Fragment]
) -> bool:
    """Emit a line verbatim (escaped) while a code fence is open.

    Returns:
        bool: True when the line belonged to an open fence.
    """
    if not state.inside_code_fence:
        return False

    fragments.append(Fragment(escape_html(raw_line) + "\n", FragmentKind.ESCAPED))
    return True


def _blockquote_tags(count: int) -> Fragment:
    tag = BLOCKQUOTE_OPEN_TAG if count > 0 else BLOCKQUOTE_CLOSE_TAG
    return Fragment(tag * abs(count), FragmentKind.STRUCTURAL)


def _enter_blockquote(state: ParserState, match: BlockMatch, fragments: list[Fragment]) -> None:
    """Adjust blockquote nesting to the depth given by the line's prefix."""
    depth_diff = blockquote_depth(match) - state.blockquote_level
    if depth_diff == 0:
        return

    fragments.append(_blockquote_tags(depth_diff))
    state.blockquote_level += depth_diff


def close_blockquotes(state: ParserState, fragments: list[Fragment]) -> bool:
    """Close every open blockquote level.

    Returns:
        bool: True when any blockquote was closed.
    """
    if state.blockquote_level <= 0:
        return False

    logger.debug("Closing %d blockquote level(s)", state.blockquote_level)
    fragments.append(_blockquote_tags(-state.blockquote_level))
    state.blockquote_level = 0
    return True


def _emit_break(
    line: str, start: int, match: BlockMatch, fragments: list[Fragment], config: ParserConfig
) -> None:
    fragments.append(Fragment(config.line_break, FragmentKind.STRUCTURAL))


def _emit_atx_heading(
    line: str, start: int, match: BlockMatch, fragments: list[Fragment], config: ParserConfig
) -> None:
    title = line[start + len(match.prefix) :].strip()
    fragments.append(Fragment(wrap_with_tag(f"h{heading_level(match)}", title)))


def _patch_setext_heading(
    line: str, start: int, match: BlockMatch, fragments: list[Fragment], config: ParserConfig
) -> None:
    """Turn the previously emitted fragment into a heading.

    The underline itself produces no output and is dropped at the start of the
    document. Any other preceding fragment is escaped and wrapped whatever its
    kind, so markup such as ``<br />`` or ``</pre>`` becomes heading text.
    """
    if not fragments:
        return

    tag = "h1" if "=" in match.prefix else "h2"
    previous = fragments[-1]
    previous.text = wrap_with_tag(tag, previous.text)
    previous.kind = FragmentKind.PLAINTEXT


def _emit_plaintext(
    line: str, start: int, match: BlockMatch, fragments: list[Fragment], config: ParserConfig
) -> None:
    fragments.append(Fragment(line[start:]))


def _skip_line(
    line: str, start: int, match: BlockMatch, fragments: list[Fragment], config: ParserConfig
) -> None:
    pass


# Nested markers separated by whitespace ("> > text") only reach the handler
# table after the outer level was consumed; the rest of the line is dropped.
BLOCK_HANDLERS: dict[BlockType, BlockHandler] = {
    BlockType.BREAK: _emit_break,
    BlockType.ATX_HEADING: _emit_atx_heading,
    BlockType.SETEXT_HEADING: _patch_setext_heading,
    BlockType.PLAINTEXT: _emit_plaintext,
    BlockType.BLOCKQUOTE: _skip_line,
    BlockType.CODE_FENCE_MARKER: _skip_line,
}


def assemble_blocks(
    lines: Iterable[str], state: ParserState, config: ParserConfig | None = None
) -> list[Fragment]:
    """Turn raw Markdown lines into a list of partially rendered fragments.

    Tracks code fence membership and blockquote depth in `state`. Blockquotes
    close as soon as a line without a ``>`` prefix appears and are force-closed
    at the end of the document. A code fence left open at the end is not
    closed.

    Args:
        lines: Raw lines of the document, without line terminators.
        state: Parser state for this document; mutated in place.
        config: Rendering configuration. Defaults to a new `ParserConfig`.

    Returns:
        list[Fragment]: Fragments in output order, before paragraph wrapping
            and inline styling.

    Examples:
        assemble_blocks(["# Title", "text"], ParserState())
    """
    config = config or ParserConfig()
    fragments: list[Fragment] = []

    for raw_line in lines:
        line = raw_line.rstrip()
        match = classify(line)

        if _try_toggle_fence(state, line, match, fragments, config):
            continue

        if _try_emit_fence_content(state, raw_line, fragments):
            continue

        start = 0
        if match.block_type is BlockType.BLOCKQUOTE:
            _enter_blockquote(state, match, fragments)
            start = len(match.prefix)
            match = classify(line, start)
        else:
            close_blockquotes(state, fragments)

        BLOCK_HANDLERS[match.block_type](line, start, match, fragments, config)

    close_blockquotes(state, fragments)
    if state.inside_code_fence:
        logger.debug("Document ended inside an open code fence")

    return fragments
