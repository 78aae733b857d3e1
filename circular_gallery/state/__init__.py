"""State management submodules for the circular gallery."""

from .scroll import ScrollState
from .input import InputState
from .app_state import GalleryState

__all__ = [
    'ScrollState',
    'InputState',
    'GalleryState',
]
