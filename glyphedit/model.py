from dataclasses import dataclass
from enum import Enum


@dataclass
class Location:
    """Logical text position: a line and a grapheme index within it.

    ``grapheme_index`` may equal the line's grapheme count, which is the
    end-of-line position.
    """
    line_index: int = 0
    grapheme_index: int = 0


@dataclass(frozen=True)
class Position:
    """Screen coordinate in terminal cells."""
    row: int = 0
    col: int = 0

    def saturating_sub(self, other: "Position") -> "Position":
        return Position(max(0, self.row - other.row), max(0, self.col - other.col))


@dataclass(frozen=True)
class Size:
    width: int = 0
    height: int = 0


class Direction(Enum):
    """Cursor motions understood by the view."""
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    PAGE_UP = "page_up"
    PAGE_DOWN = "page_down"
    HOME = "home"
    END = "end"
