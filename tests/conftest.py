import logging

import pytest
from click.testing import CliRunner

from mdlite.parser import MarkdownParser


@pytest.fixture()
def cli_runner() -> CliRunner:
    """Provides a reusable Click CLI runner."""
    return CliRunner()


@pytest.fixture()
def parser() -> MarkdownParser:
    """Provides a parser with the default configuration."""
    return MarkdownParser()


@pytest.fixture(autouse=True)
def _reset_package_logger():
    """Drops handlers the CLI installs so each test starts unconfigured."""
    yield
    logger = logging.getLogger("mdlite")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
