"""Type definitions for the Fret Finder project."""

from dataclasses import dataclass

from .errors import DomainError


@dataclass(frozen=True)
class FretboardLocation:
    """Represents a position on the guitar fretboard."""

    string_number: int  # String number (1-X, where 1 is the highest-pitched string)
    fret_number: int  # Fret number (0 for open string)

    def __post_init__(self):
        if self.string_number < 1:
            raise DomainError(
                f"String numbers start at 1, got {self.string_number}"
            )
        if self.fret_number < 0:
            raise DomainError(
                f"Fret numbers must be non-negative, got {self.fret_number}"
            )

    @property
    def is_open(self) -> bool:
        return self.fret_number == 0

    def __str__(self):
        if self.is_open:
            return f"Open {self.string_number} string"
        return f"String {self.string_number}, fret {self.fret_number}"
