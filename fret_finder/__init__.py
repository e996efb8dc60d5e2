"""Fret Finder - locate notes on a fretted string instrument."""

from .diagram import FretDiagram, Size
from .errors import ArgumentError, DomainError, FretFinderError, ParseError
from .guitar import STANDARD_TUNING, Guitar, GuitarString, standard_tuning
from .interval import Interval
from .note_types import FretboardLocation
from .pitch import Pitch

__all__ = [
    "ArgumentError",
    "DomainError",
    "FretboardLocation",
    "FretDiagram",
    "FretFinderError",
    "Guitar",
    "GuitarString",
    "Interval",
    "ParseError",
    "Pitch",
    "Size",
    "STANDARD_TUNING",
    "standard_tuning",
]
