"""Item layout - track positions, arc bend and wraparound.

Every card lives on a flat horizontal track in world units. Each frame its
track position is shifted by the scroll offset and then bent onto a circular
arc: cards away from the centre drop (or rise) and tilt, which fakes a curved
shelf with plain 2D transforms.
"""

from __future__ import annotations
import math
import random
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, List, Optional, Sequence, Tuple

from .config import (
    REFERENCE_HEIGHT, CARD_BASE_PX, CARD_PADDING,
    TIME_STEP, TIME_SEED_RANGE,
    WOBBLE_AMPLITUDE, WOBBLE_BASE, WOBBLE_SPEED_GAIN,
    TITLE_HEIGHT_FRAC, TITLE_GAP,
)
from .math_utils import clamp, sign, rotate_point
from .types import GalleryItem, Viewport

if TYPE_CHECKING:
    from .state.scroll import ScrollState


def arc_radius(half_width: float, bend: float) -> float:
    """Radius of the circle through the centre and both viewport edges."""
    b = abs(bend)
    return (half_width * half_width + b * b) / (2.0 * b)


def compute_arc(x: float, half_width: float, bend: float) -> Tuple[float, float]:
    """Vertical offset and rotation (radians) of a card at track position x.

    Positive bend curves the row downward at the edges, negative upward.
    """
    if bend == 0:
        return (0.0, 0.0)

    r = arc_radius(half_width, bend)
    effective_x = min(abs(x), half_width)
    arc = r - math.sqrt(max(0.0, r * r - effective_x * effective_x))
    tilt = math.asin(clamp(effective_x / r, -1.0, 1.0))

    if bend > 0:
        return (-arc, -sign(x) * tilt)
    return (arc, sign(x) * tilt)


def card_size(viewport: Viewport, screen_w: float, screen_h: float) -> float:
    """Square card edge in world units, proportional to container height."""
    scale = screen_h / REFERENCE_HEIGHT
    return min(
        (viewport.width * (CARD_BASE_PX * scale)) / screen_w,
        (viewport.height * (CARD_BASE_PX * scale)) / screen_h,
    )


@dataclass
class RenderedItem:
    """One card on the track (duplicates included)."""
    item: GalleryItem
    index: int
    length: int
    source_count: int
    bend: float = 0.0

    # static layout
    card: float = 0.0
    width: float = 0.0
    width_total: float = 0.0
    base_x: float = 0.0
    viewport: Optional[Viewport] = None

    # per-frame
    x: float = 0.0
    y: float = 0.0
    rotation: float = 0.0
    extra: float = 0.0
    is_before: bool = False
    is_after: bool = False
    speed: float = 0.0
    time: float = field(default_factory=lambda: TIME_SEED_RANGE * random.random())

    @property
    def source_index(self) -> int:
        """Index into the caller's (non-duplicated) list."""
        return self.index % self.source_count if self.source_count else self.index

    @property
    def laid_out(self) -> bool:
        return self.viewport is not None and self.width > 0

    @property
    def on_screen(self) -> bool:
        """At least part of the card overlaps the viewport."""
        if not self.laid_out:
            return False
        return abs(self.x) - self.card / 2.0 <= self.viewport.half_width

    @property
    def wobble(self) -> float:
        """Idle breathing displacement, stronger while the track moves."""
        w = (math.sin(self.time) + math.cos(self.time)) * WOBBLE_AMPLITUDE
        return w * (WOBBLE_BASE + abs(self.speed) * WOBBLE_SPEED_GAIN)

    def on_resize(self, viewport: Viewport, screen_w: float, screen_h: float) -> None:
        """Recompute static layout for a new viewport."""
        self.viewport = viewport
        self.card = card_size(viewport, screen_w, screen_h)
        self.width = self.card + CARD_PADDING
        self.width_total = self.width * self.length
        self.base_x = self.width * self.index

    def update(self, scroll: ScrollState, direction: str) -> bool:
        """Per-frame position. Returns True if the card wrapped around."""
        if self.viewport is None:
            return False

        self.x = self.base_x - scroll.current - self.extra
        half_width = self.viewport.half_width
        self.y, self.rotation = compute_arc(self.x, half_width, self.bend)

        self.speed = scroll.current - scroll.last
        self.time += TIME_STEP

        half_card = self.card / 2.0
        self.is_before = self.x + half_card < -half_width
        self.is_after = self.x - half_card > half_width

        if direction == "right" and self.is_before:
            self.extra -= self.width_total
            self.is_before = self.is_after = False
            return True
        if direction == "left" and self.is_after:
            self.extra += self.width_total
            self.is_before = self.is_after = False
            return True
        return False

    def title_anchor(self) -> Tuple[float, float, float]:
        """World centre of the label under the card, and the label height."""
        text_h = self.card * TITLE_HEIGHT_FRAC
        dx, dy = rotate_point(0.0, -(self.card / 2.0 + text_h / 2.0 + TITLE_GAP), self.rotation)
        return (self.x + dx, self.y + dy, text_h)


def build_rendered_items(items: Sequence[GalleryItem], source_count: int,
                         bend: float) -> List[RenderedItem]:
    """Create one RenderedItem per entry of an already duplicated list."""
    length = len(items)
    return [
        RenderedItem(item=item, index=i, length=length,
                     source_count=source_count, bend=bend)
        for i, item in enumerate(items)
    ]


def relayout(rendered: Sequence[RenderedItem], viewport: Viewport,
             screen_w: float, screen_h: float) -> None:
    for r in rendered:
        r.on_resize(viewport, screen_w, screen_h)


def update_all(rendered: Sequence[RenderedItem], scroll: ScrollState, direction: str) -> int:
    """Advance every card one frame. Returns how many wrapped."""
    wrapped = 0
    for r in rendered:
        if r.update(scroll, direction):
            wrapped += 1
    return wrapped
