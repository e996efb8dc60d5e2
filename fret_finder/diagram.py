"""ASCII fret diagrams.

Strings run left to right from string 6 (lowest) to string 1 (highest) and
frets run top to bottom starting at fret 1. Open-string locations are not
drawn; callers list them as text instead.
"""

from enum import Enum, auto
from typing import Iterable, List, TextIO, Tuple

from .errors import DomainError
from .logger import get_logger
from .note_types import FretboardLocation

logger = get_logger(__name__)

NUM_STRINGS = 6
MIN_FRETS = 5

MARKED = "*"
UNMARKED = "|"


class Size(Enum):
    """Diagram sizes."""

    SMALL = auto()
    MEDIUM = auto()
    LARGE = auto()

    @classmethod
    def from_name(cls, name: str) -> "Size":
        """Look up a size by name, ignoring case (e.g. 'small')."""
        try:
            return cls[name.upper()]
        except KeyError:
            raise DomainError(
                f"Unknown diagram size '{name}' "
                f"(expected one of: {', '.join(s.name.lower() for s in cls)})"
            ) from None


class FretDiagram:
    """A fret diagram marking a set of fretboard locations."""

    def __init__(
        self, locations: Iterable[FretboardLocation], size: Size = Size.SMALL
    ):
        self.locations: Tuple[FretboardLocation, ...] = tuple(locations)
        self.size = size

    @property
    def highest_fret(self) -> int:
        """The last fret row drawn: at least 5, more if a location sits higher."""
        return max([MIN_FRETS] + [loc.fret_number for loc in self.locations])

    def _symbols(self, fret: int) -> List[str]:
        occupied = {(loc.string_number, loc.fret_number) for loc in self.locations}
        return [
            MARKED if (string, fret) in occupied else UNMARKED
            for string in range(NUM_STRINGS, 0, -1)
        ]

    def _render_small(self) -> List[str]:
        lines = ["______  \n"]
        for fret in range(1, self.highest_fret + 1):
            lines.append(f"{''.join(self._symbols(fret))} {fret}\n")
        return lines

    def _render_medium(self) -> List[str]:
        lines = ["______\n", "------\n"]
        for fret in range(1, self.highest_fret + 1):
            lines.append(f"{''.join(self._symbols(fret))}  {fret}\n")
            lines.append("------\n")
        return lines

    def _render_large(self) -> List[str]:
        lines = ["_|_|_|_|_|_|_\n", "-|-|-|-|-|-|-\n"]
        for fret in range(1, self.highest_fret + 1):
            lines.append(" | | | | | | \n")
            lines.append(f" {' '.join(self._symbols(fret))}  {fret}\n")
            lines.append(" |-|-|-|-|-| \n")
        return lines

    def render(self) -> str:
        """Return the diagram text, one newline-terminated line per row."""
        renderers = {
            Size.SMALL: self._render_small,
            Size.MEDIUM: self._render_medium,
            Size.LARGE: self._render_large,
        }
        logger.debug(
            f"Rendering {self.size.name.lower()} diagram of {len(self.locations)} "
            f"locations up to fret {self.highest_fret}"
        )
        return "".join(renderers[self.size]())

    def write(self, stream: TextIO) -> None:
        """Write the rendered diagram to a text stream."""
        stream.write(self.render())

    def __str__(self):
        return self.render()
