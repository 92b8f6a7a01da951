"""Command pattern implementation for editor actions."""

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Dict, Optional, Tuple

from .keyboard import KeyType
from .model import Direction, Size

if TYPE_CHECKING:
    from .keyboard import KeyEvent
    from .view import View

logger = logging.getLogger(__name__)


class EditorCommand(ABC):
    """Base class for editor commands."""

    @abstractmethod
    def execute(self, view: 'View') -> bool:
        """Apply the command to the view.

        Returns:
            True if the command modified the document
        """

    def __eq__(self, other):
        return type(self) is type(other) and vars(self) == vars(other)

    def __repr__(self):
        args = ", ".join(f"{k}={v!r}" for k, v in vars(self).items())
        return f"{type(self).__name__}({args})"


class MoveCommand(EditorCommand):
    def __init__(self, direction: Direction):
        self.direction = direction

    def execute(self, view):
        view.move_text_location(self.direction)
        return False


class InsertCharCommand(EditorCommand):
    def __init__(self, character: str):
        self.character = character

    def execute(self, view):
        view.insert_char(self.character)
        return True


class BackspaceCommand(EditorCommand):
    def execute(self, view):
        return view.delete_backward()


class DeleteCommand(EditorCommand):
    def execute(self, view):
        return view.delete()


class EnterCommand(EditorCommand):
    def execute(self, view):
        view.insert_newline()
        return True


class ResizeCommand(EditorCommand):
    def __init__(self, size: Size):
        self.size = size

    def execute(self, view):
        view.resize(self.size)
        return False


class QuitCommand(EditorCommand):
    """Ends the editor loop; the view has nothing to do."""

    def execute(self, view):
        return False


class CommandRegistry:
    """Registry mapping key combinations to commands."""

    def __init__(self):
        self._commands: Dict[Tuple[KeyType, str], EditorCommand] = {}
        self._register_default_commands()

    def _register_default_commands(self):
        # Navigation
        self.register((KeyType.SPECIAL, 'up'), MoveCommand(Direction.UP))
        self.register((KeyType.SPECIAL, 'down'), MoveCommand(Direction.DOWN))
        self.register((KeyType.SPECIAL, 'left'), MoveCommand(Direction.LEFT))
        self.register((KeyType.SPECIAL, 'right'), MoveCommand(Direction.RIGHT))
        self.register((KeyType.SPECIAL, 'page_up'), MoveCommand(Direction.PAGE_UP))
        self.register((KeyType.SPECIAL, 'page_down'), MoveCommand(Direction.PAGE_DOWN))
        self.register((KeyType.SPECIAL, 'home'), MoveCommand(Direction.HOME))
        self.register((KeyType.SPECIAL, 'end'), MoveCommand(Direction.END))
        self.register((KeyType.CTRL, 'a'), MoveCommand(Direction.HOME))
        self.register((KeyType.CTRL, 'e'), MoveCommand(Direction.END))

        # Editing
        self.register((KeyType.SPECIAL, 'backspace'), BackspaceCommand())
        self.register((KeyType.SPECIAL, 'delete'), DeleteCommand())
        self.register((KeyType.CTRL, 'd'), DeleteCommand())
        self.register((KeyType.SPECIAL, 'enter'), EnterCommand())

        # System commands
        self.register((KeyType.CTRL, 'q'), QuitCommand())

    def register(self, key: Tuple[KeyType, str], command: EditorCommand):
        """Register a command for a key combination."""
        self._commands[key] = command

    def get_command(self, key_type: KeyType, value: str) -> Optional[EditorCommand]:
        return self._commands.get((key_type, value))

    def command_for(self, key_event: 'KeyEvent') -> Optional[EditorCommand]:
        """Translate a key event, or return None if nothing is bound to it."""
        command = self.get_command(key_event.key_type, key_event.value)
        if command is not None:
            return command

        # Handle regular text input
        if key_event.key_type == KeyType.REGULAR and _is_insertable(key_event.value):
            return InsertCharCommand(key_event.value)

        logger.debug(f"Dropping unbound key {key_event.raw!r}")
        return None


def _is_insertable(text: str) -> bool:
    # Tab is the only control character typed as text
    return len(text) == 1 and (text == '\t' or text.isprintable())
