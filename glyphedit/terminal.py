"""Display sink backed by Blessed for output and Curtsies for input."""

import logging
import select
import sys
import termios
from abc import ABC, abstractmethod
from typing import Optional, TextIO

import blessed

from .model import Size

logger = logging.getLogger(__name__)


class DisplaySink(ABC):
    """Where the view draws.

    Draw calls may be queued; nothing is guaranteed to reach the screen
    until ``flush`` is called. Write failures raise ``OSError``.
    """

    @abstractmethod
    def print_at(self, row: int, text: str) -> None:
        """Clear ``row`` and write ``text`` from its first column."""

    @abstractmethod
    def move_cursor(self, row: int, col: int) -> None:
        pass

    @abstractmethod
    def hide_cursor(self) -> None:
        pass

    @abstractmethod
    def show_cursor(self) -> None:
        pass

    @abstractmethod
    def get_viewport_size(self) -> Size:
        pass

    @abstractmethod
    def flush(self) -> None:
        pass


def disable_flow_control(stream=None) -> Optional[list]:
    """Turn off IXON/IXOFF and IEXTEN so Ctrl-Q and friends reach us.

    Returns the previous termios settings for ``restore_tty_settings``, or
    None when the stream is not a terminal.
    """
    stream = stream or sys.stdin
    try:
        old_settings = termios.tcgetattr(stream)
        new_settings = list(old_settings)
        new_settings[0] &= ~(termios.IXON | termios.IXOFF)
        if hasattr(termios, 'IEXTEN'):
            new_settings[3] &= ~termios.IEXTEN
        termios.tcsetattr(stream, termios.TCSANOW, new_settings)
        return old_settings
    except (termios.error, OSError) as e:
        logger.debug(f"Leaving tty flow control alone: {e}")
        return None


def restore_tty_settings(old_settings: Optional[list], stream=None) -> None:
    if old_settings is None:
        return
    try:
        termios.tcsetattr(stream or sys.stdin, termios.TCSANOW, old_settings)
    except (termios.error, OSError) as e:
        logger.warning(f"Could not restore terminal settings: {e}")


class TerminalInterface(DisplaySink):
    """Handles terminal I/O using Blessed.

    Output is queued in memory and written to the stream in one piece on
    ``flush``, so a frame appears on screen all at once.
    """

    def __init__(self, terminal: Optional[blessed.Terminal] = None,
                 stream: Optional[TextIO] = None):
        """Initialize with a terminal instance (or create one)."""
        self.term = terminal or blessed.Terminal()
        self.stream = stream or sys.stdout
        self.is_fullscreen = False
        self._pending: list[str] = []
        self._curtsies_input: Optional[object] = None

    def setup(self):
        """Enter fullscreen mode and raw keyboard input."""
        self._pending.append(self.term.enter_fullscreen + self.term.clear)
        self.flush()
        self.is_fullscreen = True
        if self._curtsies_input is None:
            try:
                from curtsies import Input
                self._curtsies_input = Input(keynames='curtsies')
                self._curtsies_input.__enter__()
            except (termios.error, OSError) as e:
                # Not attached to a terminal (CI, pipes); run without key input.
                logger.warning(f"Keyboard input unavailable: {e}")
                self._curtsies_input = None

    def cleanup(self):
        """Exit fullscreen mode and restore terminal."""
        if self._curtsies_input is not None:
            try:
                self._curtsies_input.__exit__(None, None, None)
            finally:
                self._curtsies_input = None
        if self.is_fullscreen:
            self._pending.append(self.term.exit_fullscreen + self.term.normal_cursor)
            self.is_fullscreen = False
            self.flush()

    def print_at(self, row: int, text: str) -> None:
        self._pending.append(self.term.move_yx(row, 0) + self.term.clear_eol + text)

    def move_cursor(self, row: int, col: int) -> None:
        self._pending.append(self.term.move_yx(row, col))

    def hide_cursor(self) -> None:
        self._pending.append(self.term.hide_cursor)

    def show_cursor(self) -> None:
        self._pending.append(self.term.normal_cursor)

    def get_viewport_size(self) -> Size:
        return Size(width=self.term.width, height=self.term.height)

    def flush(self) -> None:
        if not self._pending:
            return
        output = "".join(self._pending)
        self._pending.clear()
        self.stream.write(output)
        self.stream.flush()

    def get_key(self, timeout=None):
        """Get a single keypress token from curtsies.

        Args:
            timeout: Timeout in seconds (None for blocking, 0 for non-blocking)

        Returns:
            The curtsies key name (e.g. ``'<UP>'`` or ``'a'``), or None.
        """
        if self._curtsies_input is None:
            return None
        if timeout is not None:
            ready, _, _ = select.select([sys.stdin], [], [], float(timeout))
            if not ready:
                return None
        return str(next(self._curtsies_input))
