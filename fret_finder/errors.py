"""Exceptions raised by Fret Finder."""

from typing import Optional


class FretFinderError(Exception):
    """Base class for all Fret Finder errors."""


class ParseError(FretFinderError, ValueError):
    """Raised when a note name cannot be parsed."""

    def __init__(self, text: str, reason: Optional[str] = None):
        self.text = text
        self.reason = reason
        message = f"invalid note '{text}'"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class DomainError(FretFinderError, ValueError):
    """Raised when a value falls outside what the fretboard model can represent."""


class ArgumentError(FretFinderError):
    """Raised when command line arguments do not match the CLI grammar.

    ``prog`` and ``usage`` describe the (sub)command whose arguments failed.
    """

    def __init__(self, message: str, prog: Optional[str] = None, usage: Optional[str] = None):
        self.prog = prog
        self.usage = usage
        super().__init__(message)
