"""glyphedit - a small terminal text editor."""

from .buffer import Buffer, BufferLoadError
from .line import GraphemeWidth, Line, TextFragment
from .model import Direction, Location, Position, Size
from .version import __version__
from .view import View

__all__ = [
    'Buffer',
    'BufferLoadError',
    'Direction',
    'GraphemeWidth',
    'Line',
    'Location',
    'Position',
    'Size',
    'TextFragment',
    'View',
    '__version__',
]
