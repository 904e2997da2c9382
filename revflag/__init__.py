"""Render three-stripe flags from a colour palette and a simple settings file, saving them as PNG."""

__version__ = "0.1.0"