"""Main editor controller: event loop, resize handling and file loading."""

import logging
import os
import select
import signal
from typing import Optional

from .buffer import BufferLoadError
from .commands import CommandRegistry, EditorCommand, QuitCommand, ResizeCommand
from .constants import EditorConstants
from .keyboard import KeyboardHandler, KeyEvent
from .terminal import TerminalInterface, disable_flow_control, restore_tty_settings
from .view import View

logger = logging.getLogger(__name__)


class Editor:
    """Ties the terminal, keyboard and view together."""

    def __init__(self, terminal: Optional[TerminalInterface] = None):
        """Initialize the editor components."""
        self.terminal = terminal or TerminalInterface()
        self.keyboard = KeyboardHandler(self.terminal)
        self.view = View(self.terminal)
        self.command_registry = CommandRegistry()
        self.running = False
        self.filename: Optional[str] = None
        self.load_error: Optional[str] = None
        # Create pipe for resize signaling
        self._resize_pipe_r, self._resize_pipe_w = os.pipe()

    def _handle_resize(self, signum, frame):
        """Handle terminal resize signal."""
        del signum, frame  # Unused
        # Write to pipe to wake up select()
        os.write(self._resize_pipe_w, EditorConstants.RESIZE_PIPE_MARKER)

    def load_file(self, filename: str) -> bool:
        """Load a file into the editor.

        A file that cannot be read is logged and leaves the current buffer
        in place; the editor keeps running either way.

        Returns:
            True if the file was loaded
        """
        try:
            self.view.load(filename)
        except BufferLoadError as e:
            logger.warning(f"{e}")
            self.load_error = str(e)
            return False
        self.filename = filename
        self.load_error = None
        return True

    def run(self):
        """Run the main editor loop until Ctrl-Q.

        Terminal write failures end the loop and propagate once the terminal
        has been restored.
        """
        self.terminal.setup()
        self.running = True
        original_winch_handler = signal.signal(signal.SIGWINCH, self._handle_resize)
        old_settings = disable_flow_control()

        try:
            self.process_command(ResizeCommand(self.terminal.get_viewport_size()))
            while self.running:
                self.refresh_screen()

                # Wait for input on stdin or resize pipe
                ready, _, _ = select.select([0, self._resize_pipe_r], [], [])

                if self._resize_pipe_r in ready:
                    # Clear the pipe; several signals collapse into one resize
                    os.read(self._resize_pipe_r, 1024)
                    self.process_command(ResizeCommand(self.terminal.get_viewport_size()))
                elif 0 in ready:
                    key_event = self.keyboard.get_key_event(timeout=0)
                    if key_event:
                        self._handle_key_event(key_event)
        except KeyboardInterrupt:
            logger.info("Interrupted, shutting down")
        finally:
            restore_tty_settings(old_settings)
            signal.signal(signal.SIGWINCH, original_winch_handler)
            os.close(self._resize_pipe_r)
            os.close(self._resize_pipe_w)
            self.terminal.cleanup()

    def refresh_screen(self):
        """Draw pending changes and put the cursor on the caret."""
        self.terminal.hide_cursor()
        self.view.render()
        caret = self.view.caret_position()
        self.terminal.move_cursor(caret.row, caret.col)
        self.terminal.show_cursor()
        self.terminal.flush()

    def process_command(self, command: EditorCommand):
        if isinstance(command, QuitCommand):
            self.running = False
            return
        self.view.handle_command(command)

    def _handle_key_event(self, key_event: KeyEvent):
        command = self.command_registry.command_for(key_event)
        if command is None:
            return
        self.process_command(command)
