"""Installed version of the eventmodel distribution."""

from importlib.metadata import PackageNotFoundError, version

DISTRIBUTION = "eventmodel"
UNKNOWN_VERSION = "0.0.0"


def get_version() -> str:
    try:
        return version(DISTRIBUTION)
    except PackageNotFoundError:
        return UNKNOWN_VERSION
