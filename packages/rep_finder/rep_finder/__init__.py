"""Representative lookup with a time-bounded cache in front of the remote finder."""

from .version import __version__

__all__ = ["__version__"]
