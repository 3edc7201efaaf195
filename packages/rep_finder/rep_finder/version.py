"""Version information for rep_finder."""

__version__ = "0.1.0"
