from __future__ import annotations

import logging
import textwrap
from pathlib import Path

import mdlite.cli as cli_module
from mdlite.cli import cli, setup_logging


def _write(tmp_path: Path, filename: str, content: str) -> Path:
    path = tmp_path / filename
    path.write_text(textwrap.dedent(content).lstrip(), encoding="utf-8")
    return path


def _write_pyproject(base: Path, body: str) -> Path:
    path = base / "pyproject.toml"
    path.write_text(textwrap.dedent(body).lstrip(), encoding="utf-8")
    return path


def test_cli_prints_html(cli_runner, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    target = _write(
        tmp_path,
        "doc.md",
        """
        # Introduction
        Some **bold** text
        """,
    )

    result = cli_runner.invoke(cli, [str(target)])

    assert result.exit_code == 0
    assert result.output == (
        "<h1>Introduction</h1><p>Some <strong>bold</strong> text</p><br />\n"
    )


def test_cli_writes_output_file(cli_runner, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    target = _write(tmp_path, "doc.md", "> quoted\n")
    output = tmp_path / "doc.html"

    result = cli_runner.invoke(cli, [str(target), "--output", str(output)])

    assert result.exit_code == 0
    assert result.output == ""
    assert output.read_text(encoding="utf-8") == (
        "<blockquote><p>quoted</p></blockquote><br />"
    )


def test_cli_overrides_rendering_options(cli_runner, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    target = _write(tmp_path, "code.md", "```py\nx = 1\n```")

    result = cli_runner.invoke(
        cli, ["--code-class-prefix", "language-", "--glue", "|", str(target)]
    )

    assert result.exit_code == 0
    assert result.output == '<pre class="language-py">|x = 1\n|</pre>\n'


def test_cli_reads_config_next_to_file(cli_runner, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    _write_pyproject(
        tmp_path,
        """
        [tool.mdlite]
        line_break = "<br>"
        """,
    )
    target = _write(tmp_path, "doc.md", "a\n\nb")

    result = cli_runner.invoke(cli, [str(target)])

    assert result.exit_code == 0
    assert result.output == "<p>a</p><br><p>b</p>\n"


def test_cli_command_line_beats_config(cli_runner, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    _write_pyproject(
        tmp_path,
        """
        [tool.mdlite]
        line_break = "<br>"
        """,
    )
    target = _write(tmp_path, "doc.md", "a\n\nb")

    result = cli_runner.invoke(cli, ["--line-break", "<hr />", str(target)])

    assert result.exit_code == 0
    assert result.output == "<p>a</p><hr /><p>b</p>\n"


def test_cli_rejects_invalid_config(cli_runner, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    _write_pyproject(
        tmp_path,
        """
        [tool.mdlite]
        max_file_size = 0
        """,
    )
    target = _write(tmp_path, "doc.md", "# Title\n")

    result = cli_runner.invoke(cli, [str(target)])

    assert result.exit_code == 2
    assert "max_file_size" in result.output


def test_cli_rejects_non_markdown_file(cli_runner, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    target = _write(tmp_path, "notes.txt", "# Title\n")

    result = cli_runner.invoke(cli, [str(target)])

    assert result.exit_code == 2
    assert "is not a Markdown file" in result.output


def test_cli_reports_long_lines(cli_runner, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("MDLITE_MAX_LINE_LENGTH", "5")
    target = _write(tmp_path, "doc.md", "short\nway too long\n")

    result = cli_runner.invoke(cli, [str(target)])

    assert result.exit_code == 1
    assert "line 2" in result.output


def test_cli_reports_invalid_environment_limits(cli_runner, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("MDLITE_MAX_FILE_SIZE", "lots")
    target = _write(tmp_path, "doc.md", "# Title\n")

    result = cli_runner.invoke(cli, [str(target)])

    assert result.exit_code == 1
    assert "MDLITE_MAX_FILE_SIZE" in result.output


def test_cli_reports_write_failures(cli_runner, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    target = _write(tmp_path, "doc.md", "# Title\n")

    def fail(filepath, content):
        raise IOError(f"Error writing {filepath}: disk full")

    monkeypatch.setattr(cli_module, "write_output", fail)

    result = cli_runner.invoke(cli, [str(target), "-o", str(tmp_path / "out.html")])

    assert result.exit_code == 1
    assert "disk full" in result.output


def test_setup_logging_levels():
    logger = logging.getLogger("mdlite")

    setup_logging(verbose=True)
    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 1

    setup_logging(quiet=True)
    assert logger.level == logging.ERROR
    assert len(logger.handlers) == 1

    setup_logging()
    assert logger.level == logging.WARNING
