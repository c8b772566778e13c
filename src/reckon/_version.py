"""Version lookup for the ``reckon --version`` flag."""

import tomllib
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

DISTRIBUTION = "reckon"
UNKNOWN_VERSION = "0.0.0"

_PYPROJECT = Path(__file__).resolve().parents[2] / "pyproject.toml"


def _source_tree_version(pyproject: Path) -> str | None:
    if not pyproject.is_file():
        return None
    try:
        project = tomllib.loads(pyproject.read_text(encoding="utf-8")).get("project", {})
    except tomllib.TOMLDecodeError:
        return None
    if project.get("name") != DISTRIBUTION:
        return None
    return project.get("version")


def get_version(pyproject: Path = _PYPROJECT) -> str:
    """
    Version of the running reckon.

    A source checkout (editable install or plain ``src`` on the path) reports
    the ``[project].version`` of its own pyproject.toml; otherwise the
    installed distribution metadata is used.
    """
    return (
        _source_tree_version(pyproject)
        or _installed_version()
        or UNKNOWN_VERSION
    )


def _installed_version() -> str | None:
    try:
        return version(DISTRIBUTION)
    except PackageNotFoundError:
        return None
