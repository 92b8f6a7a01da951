"""glyphedit CLI entry point.

Allows running via `python -m glyphedit` and provides the console script
defined in `pyproject.toml`.

Usage:
    glyphedit [--verbose] [FILE]
    glyphedit --version
    glyphedit --keytest
"""

from __future__ import annotations

import sys

from .constants import EditorConstants
from .version import get_version_string


def _escape(s: str) -> str:
    """Return a printable representation of a raw key string."""
    return s.encode('unicode_escape').decode('ascii')


def run_keyboard_test() -> None:
    """Print each decoded key event and the command it maps to. Quit with ESC."""
    from .commands import CommandRegistry
    from .keyboard import KeyboardHandler, KeyType
    from .terminal import TerminalInterface, disable_flow_control, restore_tty_settings

    print("Keyboard test mode: press keys to see parsed events.")
    print("Quit with ESC.")

    term = TerminalInterface()
    term.setup()
    old_settings = disable_flow_control()
    kb = KeyboardHandler(term)
    registry = CommandRegistry()

    try:
        while True:
            ev = kb.get_key_event(timeout=None)
            if not ev:
                continue
            if ev.key_type == KeyType.SPECIAL and ev.value == 'escape':
                break
            command = registry.command_for(ev)
            print(f"type={ev.key_type.value} value={_escape(ev.value)} "
                  f"raw='{_escape(ev.raw)}' command={command!r}\r")
    finally:
        restore_tty_settings(old_settings)
        term.cleanup()
    print("Exiting keyboard test.")


def main() -> None:
    # Very small arg parsing: version, key test, verbosity and an optional filename
    args = sys.argv[1:]
    if args and args[0] in ("--version", "-V"):
        print(get_version_string())
        return
    if args and args[0] in ('--keytest', '--keyboard-test'):
        run_keyboard_test()
        return

    level = None
    if args and args[0] in ('--verbose', '-v'):
        level = "DEBUG"
        args = args[1:]

    # Lazy import to avoid importing UI deps for --version
    from .editor import Editor
    from .logging_setup import configure_logging
    from .settings import load_settings

    configure_logging(load_settings(), level=level)
    editor = Editor()
    if args:
        editor.load_file(args[0])
    editor.run()
    if editor.load_error:
        print(editor.load_error, file=sys.stderr)
    print(EditorConstants.GOODBYE_MESSAGE)


if __name__ == "__main__":  # pragma: no cover
    main()
