"""Command-line interface for Fret Finder."""

from .main import main

__all__ = ["main"]
