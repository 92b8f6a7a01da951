"""Document buffer: an ordered list of lines with structural edits."""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from .line import Line
from .model import Location

logger = logging.getLogger(__name__)


class BufferLoadError(Exception):
    """Raised when a file cannot be read into the buffer."""


def _split_lines(content: str) -> list[str]:
    # Only LF separates lines; a CR stays part of the line's content.
    rows = content.split("\n")
    if rows and rows[-1] == "":
        rows.pop()
    return rows


class Buffer:
    """The lines of the document being edited.

    Locations that do not address a line are ignored by every edit, except
    that ``line_index == height()`` (the row just past the last line) grows
    the buffer so typing on an empty document works.
    """

    def __init__(self, lines: Optional[Iterable[str]] = None):
        self.lines: list[Line] = [Line(text) for text in (lines or [])]

    @classmethod
    def from_text(cls, content: str) -> "Buffer":
        return cls(_split_lines(content))

    def load(self, path: str) -> None:
        """Replace the buffer contents with the lines of ``path``.

        Raises:
            BufferLoadError: the file is missing, unreadable or not UTF-8.
                The current contents are kept.
        """
        try:
            with open(path, 'r', encoding='utf-8', newline='') as f:
                content = f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise BufferLoadError(f"Could not load {path}: {e}") from e

        self.lines = [Line(text) for text in _split_lines(content)]
        logger.info(f"Loaded {len(self.lines)} lines from {path}")

    def is_empty(self) -> bool:
        return not self.lines

    def height(self) -> int:
        return len(self.lines)

    def text(self) -> str:
        return "\n".join(str(line) for line in self.lines)

    def get_line(self, line_index: int) -> Optional[Line]:
        if 0 <= line_index < len(self.lines):
            return self.lines[line_index]
        return None

    def insert_char(self, character: str, at: Location) -> None:
        if at.line_index == self.height():
            self.lines.append(Line(character))
            return
        line = self.get_line(at.line_index)
        if line is None:
            logger.debug(f"Ignoring insert at {at}: no such line")
            return
        line.insert_char(character, at.grapheme_index)

    def insert_newline(self, at: Location) -> None:
        if at.line_index == self.height():
            self.lines.append(Line())
            return
        line = self.get_line(at.line_index)
        if line is None:
            logger.debug(f"Ignoring newline at {at}: no such line")
            return
        remainder = line.split(at.grapheme_index)
        self.lines.insert(at.line_index + 1, remainder)

    def delete(self, at: Location) -> bool:
        """Delete the grapheme at ``at``, or join the next line at end of line.

        Returns:
            True if the buffer changed
        """
        line = self.get_line(at.line_index)
        if line is None or not 0 <= at.grapheme_index <= line.grapheme_count():
            return False
        if at.grapheme_index < line.grapheme_count():
            line.delete(at.grapheme_index)
            return True
        if at.line_index + 1 < self.height():
            next_line = self.lines.pop(at.line_index + 1)
            line.append(next_line)
            return True
        return False
