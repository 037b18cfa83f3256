from __future__ import annotations

import os

import pytest
from mdlite.parser import MarkdownParser

atheris = pytest.importorskip("atheris")


def test_convert_with_fuzzed_input():
    data = os.urandom(4096)
    provider = atheris.FuzzedDataProvider(data)
    parser = MarkdownParser()
    converted = 0

    for _ in range(128):
        if provider.remaining_bytes() == 0:
            break
        text = provider.ConsumeUnicodeNoSurrogates(256)
        result = parser.convert(text)
        assert isinstance(result.html, str)
        assert result.state.blockquote_level == 0
        converted += 1

    assert converted  # ensure we exercised the loop


def test_convert_with_fuzzed_markdown_lines():
    data = os.urandom(4096)
    provider = atheris.FuzzedDataProvider(data)
    prefixes = ["", "# ", "> ", ">> ", "```", "===", "---", "**", "_"]
    lines: list[str] = []

    while provider.remaining_bytes() > 0 and len(lines) < 64:
        prefix = prefixes[provider.ConsumeIntInRange(0, len(prefixes) - 1)]
        lines.append(prefix + provider.ConsumeUnicodeNoSurrogates(16))

    html = MarkdownParser().parse("\n".join(lines))
    assert isinstance(html, str)
