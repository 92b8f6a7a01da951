"""The editing view: cursor, scrolling and rendering of the buffer."""

import dataclasses
import logging
from typing import Optional

from .buffer import Buffer
from .constants import EditorConstants
from .model import Direction, Location, Position, Size
from .terminal import DisplaySink
from .version import __version__

logger = logging.getLogger(__name__)


def build_welcome_message(width: int) -> str:
    """Return the banner row shown on an empty document.

    The message is centred on the row, which still starts with the usual
    ``~`` filler, and is cut off (without an ellipsis) when the viewport
    is too narrow.
    """
    if width <= 0:
        return ""
    message = EditorConstants.WELCOME_TEMPLATE.format(
        name=EditorConstants.PRODUCT_NAME, version=__version__
    )
    padding = max(0, (width - len(message)) // 2)
    banner = EditorConstants.EMPTY_ROW_MARKER + " " * max(0, padding - 1) + message
    return banner[:width]


class View:
    """Owns the buffer and keeps the cursor visible inside the viewport.

    The cursor is a ``Location`` in the text. It may sit on the row just
    past the last line, where typing starts a new line. Every motion or
    edit recomputes the scroll offset so that the caret stays on screen,
    and anything that changes what is on screen sets ``needs_redraw``.
    """

    def __init__(self, sink: DisplaySink, buffer: Optional[Buffer] = None,
                 size: Optional[Size] = None):
        self.sink = sink
        self.buffer = buffer if buffer is not None else Buffer()
        self.size = size if size is not None else sink.get_viewport_size()
        self.text_location = Location()
        self.scroll_offset = Position()
        self.needs_redraw = True

    def load(self, path: str) -> None:
        """Load ``path`` into the buffer; BufferLoadError propagates."""
        self.buffer.load(path)
        self.text_location = Location()
        self.scroll_offset = Position()
        self.needs_redraw = True

    def handle_command(self, command) -> bool:
        """Apply an editor command. Returns True if the document changed."""
        logger.debug(f"Handling {command!r}")
        return command.execute(self)

    def resize(self, size: Size) -> None:
        self.size = size
        self.scroll_text_location_into_view()
        self.needs_redraw = True

    # region Rendering

    def render(self) -> None:
        if not self.needs_redraw:
            return
        width, height = self.size.width, self.size.height
        top, left = self.scroll_offset.row, self.scroll_offset.col
        vertical_center = height // 3
        for current_row in range(height):
            line = self.buffer.get_line(top + current_row)
            if line is not None:
                text = line.get_visible_graphemes(left, left + width)
            elif current_row == vertical_center and self.buffer.is_empty():
                text = build_welcome_message(width)
            else:
                text = EditorConstants.EMPTY_ROW_MARKER
            self.sink.print_at(current_row, text)
        self.needs_redraw = False

    def caret_position(self) -> Position:
        """Where the terminal cursor goes, relative to the viewport."""
        return self.text_location_to_position().saturating_sub(self.scroll_offset)

    def text_location_to_position(self) -> Position:
        row = self.text_location.line_index
        line = self.buffer.get_line(row)
        col = line.width_until(self.text_location.grapheme_index) if line else 0
        return Position(row=row, col=col)

    # endregion

    # region Scrolling

    def scroll_text_location_into_view(self) -> None:
        position = self.text_location_to_position()
        self._scroll_vertically(position.row)
        self._scroll_horizontally(position.col)

    def _scroll_vertically(self, to: int) -> None:
        height = max(1, self.size.height)
        offset = self.scroll_offset.row
        if to < offset:
            offset = to
        elif to >= offset + height:
            offset = to - height + 1
        if offset != self.scroll_offset.row:
            self.scroll_offset = dataclasses.replace(self.scroll_offset, row=offset)
            self.needs_redraw = True

    def _scroll_horizontally(self, to: int) -> None:
        width = max(1, self.size.width)
        offset = self.scroll_offset.col
        if to < offset:
            offset = to
        elif to >= offset + width:
            offset = to - width + 1
        if offset != self.scroll_offset.col:
            self.scroll_offset = dataclasses.replace(self.scroll_offset, col=offset)
            self.needs_redraw = True

    # endregion

    # region Cursor movement

    def move_text_location(self, direction: Direction) -> None:
        self._snap_to_valid_line()
        self._snap_to_valid_grapheme()
        page = max(0, self.size.height - 1)
        if direction is Direction.UP:
            self._move_up(1)
        elif direction is Direction.DOWN:
            self._move_down(1)
        elif direction is Direction.LEFT:
            self._move_left()
        elif direction is Direction.RIGHT:
            self._move_right()
        elif direction is Direction.PAGE_UP:
            self._move_up(page)
        elif direction is Direction.PAGE_DOWN:
            self._move_down(page)
        elif direction is Direction.HOME:
            self.text_location.grapheme_index = 0
        elif direction is Direction.END:
            self.text_location.grapheme_index = self._current_line_length()
        self.scroll_text_location_into_view()

    def _current_line_length(self) -> int:
        line = self.buffer.get_line(self.text_location.line_index)
        return line.grapheme_count() if line else 0

    def _move_up(self, step: int) -> None:
        self.text_location.line_index = max(0, self.text_location.line_index - step)
        self._snap_to_valid_grapheme()

    def _move_down(self, step: int) -> None:
        self.text_location.line_index = min(
            self.text_location.line_index + step, self.buffer.height()
        )
        self._snap_to_valid_grapheme()

    def _move_left(self) -> None:
        if self.text_location.grapheme_index > 0:
            self.text_location.grapheme_index -= 1
        elif self.text_location.line_index > 0:
            self._move_up(1)
            self.text_location.grapheme_index = self._current_line_length()

    def _move_right(self) -> None:
        if self.text_location.grapheme_index < self._current_line_length():
            self.text_location.grapheme_index += 1
        elif self.text_location.line_index < self.buffer.height():
            self.text_location.grapheme_index = 0
            self._move_down(1)

    def _snap_to_valid_grapheme(self) -> None:
        self.text_location.grapheme_index = max(
            0, min(self.text_location.grapheme_index, self._current_line_length())
        )

    def _snap_to_valid_line(self) -> None:
        self.text_location.line_index = max(
            0, min(self.text_location.line_index, self.buffer.height())
        )

    # endregion

    # region Editing

    def insert_char(self, character: str) -> None:
        """Insert at the cursor and step over whatever was added.

        A combining mark typed after a base character joins that cluster,
        so the cursor may not move at all.
        """
        self._snap_to_valid_line()
        self._snap_to_valid_grapheme()
        old_length = self._current_line_length()
        self.buffer.insert_char(character, self.text_location)
        grapheme_delta = self._current_line_length() - old_length
        if grapheme_delta > 0:
            self.text_location.grapheme_index += grapheme_delta
        self.needs_redraw = True
        self.scroll_text_location_into_view()

    def insert_newline(self) -> None:
        self._snap_to_valid_line()
        self._snap_to_valid_grapheme()
        self.buffer.insert_newline(self.text_location)
        self.text_location = Location(self.text_location.line_index + 1, 0)
        self.needs_redraw = True
        self.scroll_text_location_into_view()

    def delete(self) -> bool:
        """Delete the grapheme under the cursor; the cursor stays put."""
        self._snap_to_valid_line()
        self._snap_to_valid_grapheme()
        changed = self.buffer.delete(self.text_location)
        if changed:
            self.needs_redraw = True
        return changed

    def delete_backward(self) -> bool:
        """Backspace: step left and delete. Nothing happens at the very start."""
        self._snap_to_valid_line()
        self._snap_to_valid_grapheme()
        if self.text_location == Location(0, 0):
            return False
        self.move_text_location(Direction.LEFT)
        return self.delete()

    # endregion
