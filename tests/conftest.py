"""Shared pytest fixtures for reckon tests."""

import logging
from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def reset_reckon_logging():
    """Drop handlers installed by configure_logging between tests."""
    yield
    root_logger = logging.getLogger("reckon")
    root_logger.handlers.clear()
    root_logger.setLevel(logging.NOTSET)


@pytest.fixture
def config_file(tmp_path: Path):
    """Return a writer that creates reckon.toml in a temporary directory."""

    def _write(content: str) -> Path:
        path = tmp_path / "reckon.toml"
        path.write_text(content)
        return path

    return _write
