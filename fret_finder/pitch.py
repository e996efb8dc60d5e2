"""Integer-encoded pitches with flat-only note names.

A pitch is stored as the number of semitones above C0, so the octave is
``value // 12`` and the pitch class is ``value % 12``. Names are always spelled
with flats: sharps, ``Cb`` and ``Fb`` are rejected by the parser.
"""

import itertools
import re
from dataclasses import dataclass
from typing import Iterator, Union

from .errors import DomainError, ParseError
from .interval import Interval
from .logger import get_logger

# Get logger for this module
logger = get_logger(__name__)

SEMITONES_PER_OCTAVE = 12

NOTE_NAMES = ["C", "Db", "D", "Eb", "E", "F", "Gb", "G", "Ab", "A", "Bb", "B"]

NAME_TO_PITCH_CLASS = {name: index for index, name in enumerate(NOTE_NAMES)}

# Two-character flats come first so "Db" binds before "D".
NOTE_PATTERN = re.compile(
    r"(%s)(.*)"
    % "|".join(sorted(NOTE_NAMES, key=len, reverse=True)),
    re.DOTALL,
)
OCTAVE_PATTERN = re.compile(r"[0-9]+")


@dataclass(frozen=True, order=True)
class Pitch:
    """A pitch, measured in semitones above C0.

    ``str(pitch)`` gives the name with its octave (``"Db3"``), while
    ``format(pitch, "#")`` gives the bare pitch-class name (``"Db"``).
    """

    value: int

    def __post_init__(self):
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise DomainError(f"Pitch value must be an integer, got {self.value!r}")
        if self.value < 0:
            raise DomainError(f"Pitch value must be non-negative, got {self.value}")

    @classmethod
    def from_name(cls, name: str, octave: int = 0) -> "Pitch":
        """Build a pitch from a pitch-class name and an octave number.

        Args:
            name: One of the twelve flat-spelled names (e.g. 'C', 'Db', 'Bb')
            octave: Non-negative octave number

        Raises:
            ParseError: If the name is not in the note table
            DomainError: If the octave is negative
        """
        if name not in NAME_TO_PITCH_CLASS:
            raise ParseError(name, "unknown note name")
        if octave < 0:
            raise DomainError(f"Octave must be non-negative, got {octave}")
        return cls(NAME_TO_PITCH_CLASS[name] + octave * SEMITONES_PER_OCTAVE)

    @classmethod
    def parse(cls, text: str) -> "Pitch":
        """Parse a note such as 'E2', 'Db3' or 'Ab' (octave defaults to 0).

        The longest matching name wins, and whatever follows it must be a
        non-negative decimal octave.

        Raises:
            ParseError: If the text is not a valid note
        """
        match = NOTE_PATTERN.match(text)
        if match is None:
            raise ParseError(text, "unknown note name")

        name, rest = match.groups()
        if not rest:
            octave = 0
        elif OCTAVE_PATTERN.fullmatch(rest):
            octave = int(rest)
        else:
            raise ParseError(text, f"unexpected octave '{rest}'")

        pitch = cls.from_name(name, octave)
        logger.debug(f"Parsed '{text}' as {pitch} (value {pitch.value})")
        return pitch

    @property
    def octave(self) -> int:
        return self.value // SEMITONES_PER_OCTAVE

    @property
    def pitch_class(self) -> int:
        return self.value % SEMITONES_PER_OCTAVE

    @property
    def name(self) -> str:
        """The pitch-class name without octave (e.g. 'Db')."""
        return NOTE_NAMES[self.pitch_class]

    def disregard_octave(self) -> "Pitch":
        """Return the same pitch class in octave 0."""
        return Pitch(self.pitch_class)

    def ascend(self) -> Iterator["Pitch"]:
        """Yield this pitch, then every pitch one semitone higher, forever.

        Each call returns a fresh iterator; the pitch itself is never changed.
        """
        for value in itertools.count(self.value):
            yield Pitch(value)

    def __add__(self, other: Interval) -> "Pitch":
        if not isinstance(other, Interval):
            return NotImplemented
        return Pitch(self.value + other.semitones)

    def __sub__(self, other: Union["Pitch", Interval]):
        if isinstance(other, Pitch):
            return Interval.between(self, other)
        if isinstance(other, Interval):
            if other.semitones > self.value:
                raise DomainError(
                    f"Cannot lower {self} by {other.semitones} semitones: "
                    "result would be below C0"
                )
            return Pitch(self.value - other.semitones)
        return NotImplemented

    def __str__(self):
        return f"{self.name}{self.octave}"

    def __format__(self, format_spec: str) -> str:
        if format_spec.startswith("#"):
            return format(self.name, format_spec[1:])
        return format(str(self), format_spec)
