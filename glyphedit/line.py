"""A single line of text as a sequence of displayable grapheme clusters."""

import unicodedata
from dataclasses import dataclass
from enum import Enum
from typing import Optional

import grapheme
from wcwidth import wcswidth

from .constants import EditorConstants


class GraphemeWidth(Enum):
    """Number of terminal columns a fragment occupies."""
    HALF = 1
    FULL = 2

    @property
    def columns(self) -> int:
        return self.value


@dataclass(frozen=True)
class TextFragment:
    grapheme: str
    rendered_width: GraphemeWidth
    replacement: Optional[str] = None


def _replacement_character(cluster: str) -> Optional[str]:
    """Return the glyph drawn in place of ``cluster``, or None to draw it as-is.

    Plain spaces are drawn literally and tabs become a single space. Other
    whitespace that takes up room is made visible. Anything that measures
    zero columns gets a placeholder: lone control characters one glyph,
    everything else (stray combining marks, zero-width spaces) another.
    """
    width = max(0, wcswidth(cluster))
    if cluster == " ":
        return None
    if cluster == "\t":
        return EditorConstants.TAB_REPLACEMENT
    if width > 0 and not cluster.strip():
        return EditorConstants.WHITESPACE_REPLACEMENT
    if width == 0:
        if len(cluster) == 1 and unicodedata.category(cluster) == "Cc":
            return EditorConstants.CONTROL_REPLACEMENT
        return EditorConstants.ZERO_WIDTH_REPLACEMENT
    return None


def _str_to_fragments(text: str) -> list[TextFragment]:
    fragments = []
    for cluster in grapheme.graphemes(text):
        replacement = _replacement_character(cluster)
        if replacement is not None:
            rendered_width = GraphemeWidth.HALF
        elif max(0, wcswidth(cluster)) <= 1:
            rendered_width = GraphemeWidth.HALF
        else:
            rendered_width = GraphemeWidth.FULL
        fragments.append(TextFragment(cluster, rendered_width, replacement))
    return fragments


class Line:
    """One line of a document, segmented into grapheme clusters.

    The fragment list is rebuilt from the line's text after every edit, so
    neighbouring clusters are always segmented the same way they would be
    if the text had been loaded from disk.
    """

    def __init__(self, text: str = ""):
        self._fragments = _str_to_fragments(text)

    def __str__(self) -> str:
        return "".join(fragment.grapheme for fragment in self._fragments)

    def __repr__(self) -> str:
        return f"Line({str(self)!r})"

    def __len__(self) -> int:
        return len(self._fragments)

    @property
    def fragments(self) -> tuple[TextFragment, ...]:
        return tuple(self._fragments)

    def grapheme_count(self) -> int:
        return len(self._fragments)

    def width_until(self, grapheme_index: int) -> int:
        """Display columns taken by the first ``grapheme_index`` graphemes."""
        return sum(
            fragment.rendered_width.columns
            for fragment in self._fragments[:max(0, grapheme_index)]
        )

    def get_visible_graphemes(self, start: int, end: int) -> str:
        """Render the columns in ``[start, end)`` as a string.

        A full-width glyph that straddles either edge is replaced by a
        single ellipsis so that half a glyph is never drawn.
        """
        if start >= end:
            return ""

        result = []
        current_pos = 0
        for fragment in self._fragments:
            if current_pos >= end:
                break
            fragment_end = current_pos + fragment.rendered_width.columns
            if fragment_end > start:
                if fragment_end > end or current_pos < start:
                    result.append(EditorConstants.CLIPPED_GLYPH_MARKER)
                elif fragment.replacement is not None:
                    result.append(fragment.replacement)
                else:
                    result.append(fragment.grapheme)
            current_pos = fragment_end
        return "".join(result)

    def insert_char(self, character: str, grapheme_index: int):
        """Insert ``character`` before the grapheme at ``grapheme_index``.

        Indices past the end append. The line is re-segmented afterwards, so
        a combining mark may join the preceding cluster instead of adding a
        new one.
        """
        graphemes = [fragment.grapheme for fragment in self._fragments]
        graphemes.insert(max(0, min(grapheme_index, len(graphemes))), character)
        self._fragments = _str_to_fragments("".join(graphemes))

    def delete(self, grapheme_index: int):
        if not 0 <= grapheme_index < len(self._fragments):
            return
        graphemes = [fragment.grapheme for fragment in self._fragments]
        del graphemes[grapheme_index]
        self._fragments = _str_to_fragments("".join(graphemes))

    def append(self, other: "Line"):
        self._fragments = _str_to_fragments(str(self) + str(other))

    def split(self, grapheme_index: int) -> "Line":
        """Keep the graphemes before ``grapheme_index``; return the rest."""
        grapheme_index = max(0, min(grapheme_index, len(self._fragments)))
        remainder = Line("".join(f.grapheme for f in self._fragments[grapheme_index:]))
        self._fragments = _str_to_fragments(
            "".join(f.grapheme for f in self._fragments[:grapheme_index])
        )
        return remainder
