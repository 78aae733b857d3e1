"""Scroll state - eased track offset with target/current/last."""

from __future__ import annotations
from dataclasses import dataclass

from ..config import DEFAULT_SCROLL_EASE
from ..math_utils import lerp, round_half_up


@dataclass
class ScrollState:
    """Track offset in world units.

    ``target`` is where input wants the track to be, ``current`` chases it by
    exponential smoothing, ``last`` is the previous frame's ``current``.
    """
    ease: float = DEFAULT_SCROLL_EASE
    current: float = 0.0
    target: float = 0.0
    last: float = 0.0

    @property
    def direction(self) -> str:
        """'right' when the track moved forward this frame, else 'left'."""
        return "right" if self.current > self.last else "left"

    @property
    def speed(self) -> float:
        return self.current - self.last

    def advance(self) -> None:
        """Move current a fixed fraction of the way toward target."""
        self.current = lerp(self.current, self.target, self.ease)

    def commit(self) -> None:
        """End-of-frame bookkeeping."""
        self.last = self.current

    def auto_advance(self, speed: float) -> None:
        self.target += speed

    def step(self, count: int, item_width: float) -> None:
        """Jump the target by whole items (arrow buttons, keys, wheel)."""
        self.target += count * item_width

    def settle(self, item_width: float) -> None:
        """Snap target to the nearest item boundary, keeping its sign."""
        if item_width <= 0:
            return
        index = round_half_up(abs(self.target) / item_width)
        item = item_width * index
        self.target = -item if self.target < 0 else item

    def reset(self) -> None:
        self.current = self.target = self.last = 0.0
