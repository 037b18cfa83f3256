"""Paragraph wrapping, inline emphasis, and fragment joining."""

from __future__ import annotations

import html
import re

from .constants import INLINE_RULES, PARAGRAPH_TAG
from .models import Fragment, FragmentKind


def escape_html(text: str) -> str:
    """Escape the HTML-reserved characters ``&``, ``<`` and ``>``.

    Examples:
        escape_html("a < b & c")  # "a &lt; b &amp; c"
    """
    return html.escape(text, quote=False)


def escape_attribute(value: str) -> str:
    """Escape a value for use inside a quoted HTML attribute."""
    return html.escape(value, quote=True)


def wrap_with_tag(tag: str, text: str) -> str:
    """Escape `text` and wrap it in an HTML element.

    Args:
        tag: Element name, for example ``"p"`` or ``"h2"``.
        text: Raw text to place inside the element.

    Returns:
        str: The escaped text surrounded by opening and closing tags.

    Examples:
        wrap_with_tag("h1", "Fish & Chips")  # "<h1>Fish &amp; Chips</h1>"
    """
    return f"<{tag}>{escape_html(text)}</{tag}>"


def _replace_span(tag: str):
    def replacement(match: re.Match[str]) -> str:
        return f"<{tag}>{match.group(1)}</{tag}>"

    return replacement


def apply_inline_styles(text: str) -> str:
    r"""Rewrite emphasis spans into ``<strong>`` and ``<em>`` elements.

    Rules run in priority order (``**``, ``__``, ``*``, ``_``), each against
    the text as rewritten by the previous ones, so a ``**bold**`` span is
    consumed before the single-asterisk rule sees it. Each span is replaced at
    the position where it was matched. A delimiter preceded by a backslash does
    not open or close a span. No escaping happens here.

    Args:
        text: Fragment text, already escaped where needed.

    Returns:
        str: Text with emphasis spans rewritten.

    Examples:
        apply_inline_styles("**a** and *b*")  # "<strong>a</strong> and <em>b</em>"
        apply_inline_styles(r"\*not em\*")  # unchanged
    """
    for pattern, tag in INLINE_RULES:
        text = pattern.sub(_replace_span(tag), text)
    return text


def wrap_paragraph(fragment: Fragment) -> None:
    """Wrap a plaintext fragment in a paragraph unless it already holds markup.

    Fragments containing ``<`` are trusted and left as they are, so markup is
    never escaped or wrapped twice.
    """
    if fragment.kind is not FragmentKind.PLAINTEXT:
        return
    if "<" in fragment.text:
        return
    fragment.text = wrap_with_tag(PARAGRAPH_TAG, fragment.text)


def transform_fragments(fragments: list[Fragment]) -> list[Fragment]:
    """Apply paragraph wrapping and inline emphasis to assembled fragments.

    Only plaintext fragments are touched; structural tags and escaped code
    fence content pass through unchanged. Fragments are rewritten in place.

    Args:
        fragments: Output of block assembly.

    Returns:
        list[Fragment]: The same list, for chaining.

    Examples:
        transform_fragments([Fragment("**hi**")])[0].text  # "<p><strong>hi</strong></p>"
    """
    for fragment in fragments:
        if fragment.kind is not FragmentKind.PLAINTEXT:
            continue
        wrap_paragraph(fragment)
        fragment.text = apply_inline_styles(fragment.text)
    return fragments


def join_fragments(fragments: list[Fragment], glue: str = "") -> str:
    """Concatenate fragment texts into the final HTML string."""
    return glue.join(fragment.text for fragment in fragments)
