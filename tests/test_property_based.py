from __future__ import annotations

import string

from hypothesis import given
from hypothesis import strategies as st
from mdlite.classifier import classify
from mdlite.inline import escape_html
from mdlite.models import BlockType
from mdlite.parser import MarkdownParser, markdown_to_html


@given(st.text())
def test_conversion_always_returns_a_string(markdown: str):
    assert isinstance(markdown_to_html(markdown), str)


@given(st.text(), st.integers(min_value=0, max_value=16))
def test_classifier_prefix_is_taken_from_the_line(line: str, start: int):
    match = classify(line, start)
    remainder = line[start:]

    if match.block_type is BlockType.CODE_FENCE_MARKER:
        assert match.prefix in remainder
    else:
        assert remainder.startswith(match.prefix)
    if match.block_type in (BlockType.BREAK, BlockType.PLAINTEXT):
        assert match.prefix == ""

# Without backticks or setext underlines, every blockquote tag in the output
# comes from the assembler and is never rewritten.
quote_documents = st.lists(
    st.text(alphabet="> #*_ab", max_size=12), min_size=1, max_size=20
).map("\n".join)


@given(quote_documents)
def test_blockquote_tags_always_balance(markdown: str):
    parser = MarkdownParser()

    html = parser.parse(markdown)

    assert html.count("<blockquote>") == html.count("</blockquote>")
    assert parser.state.blockquote_level == 0


@given(st.text(alphabet=string.ascii_letters + " ", min_size=1).filter(str.strip))
def test_single_words_line_becomes_a_paragraph(line: str):
    line = line.strip()

    assert markdown_to_html(line) == f"<p>{line}</p>"


fence_bodies = st.lists(
    st.text(alphabet="*_<>&#= ab", max_size=10), min_size=1, max_size=8
)


@given(fence_bodies)
def test_fenced_content_is_only_escaped(lines: list[str]):
    markdown = "\n".join(["```", *lines, "```"])

    expected = "<pre>" + "".join(escape_html(line) + "\n" for line in lines) + "</pre>"
    assert markdown_to_html(markdown) == expected


@given(quote_documents, quote_documents)
def test_reused_parser_matches_fresh_parser(first: str, second: str):
    parser = MarkdownParser()
    parser.parse(first)

    assert parser.parse(second) == markdown_to_html(second)
