"""Line-oriented block classification."""

from __future__ import annotations

from .constants import BLOCK_RULES
from .models import BlockMatch, BlockType


def classify(line: str, start: int = 0) -> BlockMatch:
    """Determine the block type of a line from a starting offset.

    Blank remainders are breaks. Otherwise the block rules are tried in
    priority order (code fence, ATX heading, setext underline, blockquote)
    and the first match wins; lines matching no rule are plaintext.

    Args:
        line: Line to classify, normally with trailing whitespace removed.
        start: Zero-based offset where classification begins.

    Returns:
        BlockMatch: Matched block type and the prefix text it consumed.

    Examples:
        classify("## Title")  # BlockMatch(BlockType.ATX_HEADING, "##")
        classify("> > quote", 2)  # BlockMatch(BlockType.BLOCKQUOTE, "> ")
        classify("   ")  # BlockMatch(BlockType.BREAK, "")
    """
    remainder = line[start:]
    if not remainder.strip():
        return BlockMatch(BlockType.BREAK)

    for block_type, pattern in BLOCK_RULES:
        match = pattern.search(remainder)
        if match:
            return BlockMatch(block_type, match.group(0))

    return BlockMatch(BlockType.PLAINTEXT)


def heading_level(match: BlockMatch) -> int:
    """Return the heading level encoded by an ATX prefix.

    Examples:
        heading_level(BlockMatch(BlockType.ATX_HEADING, "  ###"))  # 3
    """
    return len(match.prefix.strip())


def blockquote_depth(match: BlockMatch) -> int:
    """Return the nesting depth encoded by a blockquote prefix.

    Examples:
        blockquote_depth(BlockMatch(BlockType.BLOCKQUOTE, ">> "))  # 2
    """
    return len(match.prefix.strip())
