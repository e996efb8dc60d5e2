"""Semitone distances between pitches."""

from dataclasses import dataclass
from typing import TYPE_CHECKING

from .errors import DomainError

if TYPE_CHECKING:
    from .pitch import Pitch


@dataclass(frozen=True, order=True)
class Interval:
    """A non-negative distance between two pitches, in semitones."""

    semitones: int

    def __post_init__(self):
        if isinstance(self.semitones, bool) or not isinstance(self.semitones, int):
            raise DomainError(
                f"Interval semitones must be an integer, got {self.semitones!r}"
            )
        if self.semitones < 0:
            raise DomainError(
                f"Interval semitones must be non-negative, got {self.semitones}"
            )

    @classmethod
    def between(cls, a: "Pitch", b: "Pitch") -> "Interval":
        """Return the absolute distance between two pitches (order independent)."""
        return cls(abs(a.value - b.value))

    def __int__(self) -> int:
        return self.semitones

    def __str__(self):
        return f"{self.semitones} semitones"
