#!/usr/bin/env python3
"""glyphedit - a small terminal text editor.

Usage:
    python main.py [filename]

Controls:
    Arrow keys, Home/End, PageUp/PageDown: Move the cursor
    Type to insert text
    Backspace / Delete: Delete character
    Enter: Split line
    Ctrl-Q: Quit
"""

from glyphedit.__main__ import main


if __name__ == "__main__":
    main()
