"""Input state - pointer gesture tracking."""

from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple

from ..config import DRAG_THRESHOLD_PX


@dataclass
class InputState:
    """State of the current pointer gesture."""
    is_down: bool = False
    is_dragging: bool = False
    start_pos: Tuple[float, float] = (0.0, 0.0)
    start_scroll: float = 0.0
    pointer_pos: Tuple[float, float] = (0.0, 0.0)

    def begin(self, x: float, y: float, scroll_position: float) -> None:
        """Pointer went down: remember where, and where the track was."""
        self.is_down = True
        self.is_dragging = False
        self.start_pos = (x, y)
        self.start_scroll = scroll_position
        self.pointer_pos = (x, y)

    def end(self) -> bool:
        """Pointer released. Returns True if the gesture was a drag."""
        was_dragging = self.is_dragging
        self.is_down = False
        self.is_dragging = False
        return was_dragging

    def get_drag_distance(self, x: float, y: float) -> Tuple[float, float]:
        """Distance from the start point, positive when moving left/up."""
        return (self.start_pos[0] - x, self.start_pos[1] - y)

    def exceeds_threshold(self, x: float, y: float,
                          threshold: float = DRAG_THRESHOLD_PX) -> bool:
        dx, dy = self.get_drag_distance(x, y)
        return abs(dx) > threshold or abs(dy) > threshold
