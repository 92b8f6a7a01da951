"""Keyboard input handling using curtsies key names."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class KeyType(Enum):
    """Types of key events."""
    REGULAR = "regular"
    ALT = "alt"
    CTRL = "ctrl"
    SPECIAL = "special"


@dataclass
class KeyEvent:
    """Represents a parsed keyboard event."""
    key_type: KeyType
    value: str  # The base key (e.g., 'a', 'left', 'backspace')
    raw: str  # The raw key token from curtsies
    is_alt: bool = False
    is_ctrl: bool = False


# Curtsies spellings mapped onto the names used by the command registry
_SPECIAL_ALIASES = {
    'pageup': 'page_up',
    'page_up': 'page_up',
    'pagedown': 'page_down',
    'page_down': 'page_down',
    'return': 'enter',
    'enter': 'enter',
    'del': 'delete',
    'delete': 'delete',
    'backspace': 'backspace',
    'left': 'left',
    'right': 'right',
    'up': 'up',
    'down': 'down',
    'home': 'home',
    'end': 'end',
    'insert': 'insert',
    'esc': 'escape',
    'escape': 'escape',
}


class KeyboardHandler:
    """Turns terminal key tokens into KeyEvents."""

    def __init__(self, terminal_interface):
        """Initialize with a terminal interface."""
        self.terminal = terminal_interface

    def get_key_event(self, timeout: Optional[float] = None) -> Optional[KeyEvent]:
        key = self.terminal.get_key(timeout)
        if not key:
            return None
        return self.parse_key(key)

    def parse_key(self, key) -> KeyEvent:
        """Parse a curtsies key token into a KeyEvent.

        Handles bracketed names such as ``<UP>``, ``<Ctrl-q>`` and
        ``<Esc+x>``, raw single-byte control characters, and plain text.
        """
        key_str = str(key)

        if len(key_str) > 2 and key_str.startswith('<') and key_str.endswith('>'):
            return self._parse_named_key(key_str)

        if len(key_str) == 1:
            code = ord(key_str)
            if key_str in ('\r', '\n'):
                return KeyEvent(KeyType.SPECIAL, 'enter', key_str)
            if key_str == '\t':
                return KeyEvent(KeyType.REGULAR, '\t', key_str)
            if key_str in ('\x7f', '\x08'):
                return KeyEvent(KeyType.SPECIAL, 'backspace', key_str)
            if key_str == '\x1b':
                return KeyEvent(KeyType.SPECIAL, 'escape', key_str)
            if 1 <= code <= 26:
                return KeyEvent(KeyType.CTRL, chr(ord('a') + code - 1), key_str, is_ctrl=True)

        return KeyEvent(KeyType.REGULAR, key_str, key_str)

    def _parse_named_key(self, key_str: str) -> KeyEvent:
        name = key_str[1:-1].lower().replace('+', '-')
        parts = name.split('-')
        # '<Ctrl-->' style names end in an empty part for the '-' key itself
        base = parts[-1] or '-'
        mods = set(parts[:-1]) - {''}
        if mods & {'meta', 'esc'}:
            mods.add('alt')

        if not mods:
            if base in ('space', 'spacebar', 'spc'):
                return KeyEvent(KeyType.REGULAR, ' ', ' ')
            if base == 'tab':
                return KeyEvent(KeyType.REGULAR, '\t', '\t')
        if 'ctrl' in mods and len(base) == 1:
            if base in ('j', 'm'):
                return KeyEvent(KeyType.SPECIAL, 'enter', key_str)
            if base == 'h':
                return KeyEvent(KeyType.SPECIAL, 'backspace', key_str)
            return KeyEvent(KeyType.CTRL, base, key_str, is_ctrl=True)
        if 'alt' in mods:
            return KeyEvent(KeyType.ALT, _SPECIAL_ALIASES.get(base, base), key_str, is_alt=True)
        return KeyEvent(KeyType.SPECIAL, _SPECIAL_ALIASES.get(base, base), key_str)
