"""Split Monitor: reset and success chance tracking for timed runs."""

from split_monitor._version import __version__

__all__ = ["__version__"]
