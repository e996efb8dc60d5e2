"""Fretboard model: strings built from open pitches and the guitar that holds them."""

import itertools
from typing import Iterator, List, Optional, Sequence, Tuple

import numpy as np

from .errors import DomainError
from .logger import get_logger
from .note_types import FretboardLocation
from .pitch import Pitch

# Get logger for this module
logger = get_logger(__name__)

# Lowest string first, the way guitarists list a tuning.
STANDARD_TUNING: Tuple[Pitch, ...] = (
    Pitch.from_name("E", 2),
    Pitch.from_name("A", 2),
    Pitch.from_name("D", 3),
    Pitch.from_name("G", 3),
    Pitch.from_name("B", 3),
    Pitch.from_name("E", 4),
)


def standard_tuning() -> List[Pitch]:
    """Standard six-string guitar tuning, E2 A2 D3 G3 B3 E4."""
    return list(STANDARD_TUNING)


# Largest pitch value the fretboard matrix can hold
MAX_FRETBOARD_VALUE = int(np.iinfo(np.int64).max)


def _check_num_frets(num_frets: int) -> None:
    if isinstance(num_frets, bool) or not isinstance(num_frets, int):
        raise DomainError(f"Fret count must be an integer, got {num_frets!r}")
    if num_frets < 0:
        raise DomainError(f"Fret count must be non-negative, got {num_frets}")


class GuitarString:
    """A single string, holding the pitch at each of its frets.

    Index 0 is the open string, index ``num_frets`` the highest fret.
    """

    def __init__(self, open_pitch: Pitch, num_frets: int):
        _check_num_frets(num_frets)
        # One extra element for the open string
        self._frets: Tuple[Pitch, ...] = tuple(
            itertools.islice(open_pitch.ascend(), num_frets + 1)
        )

    @property
    def frets(self) -> Tuple[Pitch, ...]:
        return self._frets

    @property
    def open_pitch(self) -> Pitch:
        return self._frets[0]

    @property
    def num_frets(self) -> int:
        return len(self._frets) - 1

    def frets_of(self, pitch: Pitch) -> List[int]:
        """Return the fret numbers on this string that sound exactly ``pitch``."""
        return [fret for fret, fret_pitch in enumerate(self._frets) if fret_pitch == pitch]

    def __getitem__(self, fret: int) -> Pitch:
        return self._frets[fret]

    def __len__(self) -> int:
        return len(self._frets)

    def __iter__(self) -> Iterator[Pitch]:
        return iter(self._frets)

    def __eq__(self, other):
        if not isinstance(other, GuitarString):
            return NotImplemented
        return self._frets == other._frets

    def __hash__(self):
        return hash(self._frets)

    def __repr__(self):
        return f"GuitarString(open_pitch={self.open_pitch}, num_frets={self.num_frets})"


class Guitar:
    """A fretted instrument with any number of strings.

    The tuning is given lowest string first, but strings are stored highest
    first so that ``strings[0]`` is string number 1.
    """

    def __init__(self, num_frets: int, tuning: Optional[Sequence[Pitch]] = None):
        """Create a guitar.

        Args:
            num_frets: Number of frets on every string
            tuning: Open pitches in ascending order, or None for standard tuning
        """
        _check_num_frets(num_frets)
        if tuning is None:
            tuning = STANDARD_TUNING

        self.num_frets = num_frets
        self.strings: Tuple[GuitarString, ...] = tuple(
            GuitarString(open_pitch, num_frets) for open_pitch in reversed(tuning)
        )
        logger.debug(
            f"Created guitar with {len(self.strings)} strings and {num_frets} frets "
            f"(tuning: {' '.join(str(p) for p in tuning)})"
        )

    @property
    def tuning(self) -> List[Pitch]:
        """The open pitches, lowest string first."""
        return [string.open_pitch for string in reversed(self.strings)]

    def string(self, number: int) -> GuitarString:
        """Return the string with the given 1-based number (1 is the highest)."""
        if not 1 <= number <= len(self.strings):
            raise DomainError(
                f"String number must be between 1 and {len(self.strings)}, got {number}"
            )
        return self.strings[number - 1]

    def fretboard(self) -> np.ndarray:
        """Return the pitch values as a (strings x frets) integer matrix."""
        highest = max((string[-1] for string in self.strings), default=None)
        if highest is not None and highest.value > MAX_FRETBOARD_VALUE:
            raise DomainError(
                f"Pitch {highest} is too high for the fretboard "
                f"(pitch values are limited to {MAX_FRETBOARD_VALUE})"
            )
        values = [[pitch.value for pitch in string] for string in self.strings]
        return np.array(values, dtype=np.int64).reshape(
            len(self.strings), self.num_frets + 1
        )

    def locate(self, pitch: Pitch) -> List[FretboardLocation]:
        """Return every fretboard location that sounds exactly ``pitch``.

        Locations are ordered by string (highest first), then by fret.
        """
        board = self.fretboard()
        if pitch.value > MAX_FRETBOARD_VALUE:
            logger.debug(f"{pitch} is above every fret")
            return []
        # argwhere walks the matrix row by row, which is string then fret order
        matches = np.argwhere(board == pitch.value)
        locations = [
            FretboardLocation(int(string_idx) + 1, int(fret_idx))
            for string_idx, fret_idx in matches
        ]
        logger.debug(f"Found {len(locations)} locations for {pitch}")
        return locations

    def __repr__(self):
        return f"Guitar(num_frets={self.num_frets}, tuning={[str(p) for p in self.tuning]})"
