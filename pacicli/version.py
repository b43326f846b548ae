"""
Version management for pacicli.

The version is read from pyproject.toml when running from a source tree,
otherwise from the installed distribution's metadata.
"""

from importlib import metadata
from pathlib import Path

import tomli

PROJECT_ROOT = Path(__file__).resolve().parent.parent
PYPROJECT_PATH = PROJECT_ROOT / "pyproject.toml"

FALLBACK_VERSION = "0.0.0"


def get_version_from_pyproject() -> str:
    """
    Read the version string from pyproject.toml.

    Raises:
        FileNotFoundError: If pyproject.toml cannot be found
        KeyError: If the version is not defined in it
    """
    with open(PYPROJECT_PATH, "rb") as f:
        pyproject_data = tomli.load(f)
    return pyproject_data["project"]["version"]


def get_version() -> str:
    try:
        return get_version_from_pyproject()
    except (FileNotFoundError, KeyError, tomli.TOMLDecodeError):
        pass
    try:
        return metadata.version("pacicli")
    except metadata.PackageNotFoundError:
        return FALLBACK_VERSION


__version__ = get_version()
