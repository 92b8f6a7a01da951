"""Constants and configuration for the glyphedit editor."""

class EditorConstants:
    """Central configuration constants for the editor."""

    # Product identity shown in the welcome banner
    PRODUCT_NAME = "glyphedit"
    WELCOME_TEMPLATE = "{name} editor -- version {version}"

    # Display substitutions for graphemes that cannot be drawn as-is
    TAB_REPLACEMENT = " "
    WHITESPACE_REPLACEMENT = "_"  # Visible whitespace other than plain space
    CONTROL_REPLACEMENT = "▯"  # Lone control character
    ZERO_WIDTH_REPLACEMENT = "·"  # Combining-only or other zero-width content
    CLIPPED_GLYPH_MARKER = "…"  # Wide glyph cut by a viewport edge

    # Filler for rows past the end of the document
    EMPTY_ROW_MARKER = "~"

    # Resize handling
    RESIZE_PIPE_MARKER = b'R'  # Byte written to pipe to signal resize

    # Settings / logging
    SETTINGS_FILENAME = "settings.json"
    LOG_FILENAME = "glyphedit.log"
    DEFAULT_LOG_LEVEL = "WARNING"

    # Shutdown
    GOODBYE_MESSAGE = "Goodbye."
