"""Circular gallery - an infinite, curved, draggable carousel of image cards."""

from .types import GalleryItem, GalleryOptions
from .state import GalleryState, ScrollState
from .gestures import InputRouter, GestureKind, GestureResult
from .render_loop import RenderLoop

__all__ = [
    'GalleryItem',
    'GalleryOptions',
    'GalleryState',
    'ScrollState',
    'InputRouter',
    'GestureKind',
    'GestureResult',
    'RenderLoop',
]
