"""Cleanup of temporary tags and their releases on GitHub."""

__version__ = "0.1.0"
