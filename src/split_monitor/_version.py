"""Version lookup from the installed package metadata."""

import importlib.metadata


def get_version() -> str:
    """
    Retrieve the installed package version.

    Returns:
        str: The version string, or "unknown" when the package is not installed
        (e.g. when running from a source checkout via PYTHONPATH).
    """
    try:
        return importlib.metadata.version("split-monitor")
    except importlib.metadata.PackageNotFoundError:
        return "unknown"


__version__: str = get_version()
