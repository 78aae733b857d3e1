"""Hit regions - screen rectangles that follow the rendered cards.

Clicks are resolved against this structured list with point-in-rectangle
tests instead of asking the renderer what is under the pointer. There is
exactly one region per caller item; it holds a rectangle for every
on-screen copy of that item, so either copy of a duplicated card resolves
to the same item id.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Dict, List, Optional, Sequence, Tuple

from .config import (
    EYE_BTN_SIZE, EYE_BTN_MARGIN, EYE_FADE_SPEED,
    NAV_BTN_RADIUS, NAV_BTN_MARGIN,
)
from .math_utils import lerp, point_in_rect, distance_squared
from .types import GalleryItem, ItemId
from .layout import RenderedItem
from .viewport import ViewportController

Rect = Tuple[float, float, float, float]
NO_RECT: Rect = (0.0, 0.0, 0.0, 0.0)


class HitKind(Enum):
    """What part of the overlay a point landed on."""
    CARD = auto()
    EYE = auto()
    NAV_LEFT = auto()
    NAV_RIGHT = auto()


@dataclass
class HitRegion:
    """Invisible click target over every visible copy of one caller item.

    ``rects`` is ordered nearest-to-centre first. ``active`` is the copy the
    pointer last hovered; its eye control is the one drawn.
    """
    source_index: int
    item_id: Optional[ItemId]
    rects: List[Rect] = field(default_factory=list)
    eye_rects: List[Rect] = field(default_factory=list)
    active: int = 0
    hovered: bool = False
    eye_alpha: float = 0.0

    @property
    def visible(self) -> bool:
        return bool(self.rects)

    @property
    def rect(self) -> Rect:
        return self.rects[0] if self.rects else NO_RECT

    @property
    def eye_rect(self) -> Rect:
        if not self.eye_rects:
            return NO_RECT
        return self.eye_rects[self.active if self.active < len(self.eye_rects) else 0]

    def copy_at(self, x: float, y: float) -> Optional[int]:
        for i, rect in enumerate(self.rects):
            if point_in_rect(x, y, *rect):
                return i
        return None

    def eye_copy_at(self, x: float, y: float) -> Optional[int]:
        for i, rect in enumerate(self.eye_rects):
            if point_in_rect(x, y, *rect):
                return i
        return None

    def contains(self, x: float, y: float) -> bool:
        return self.copy_at(x, y) is not None

    def eye_contains(self, x: float, y: float) -> bool:
        return self.eye_copy_at(x, y) is not None


@dataclass
class NavButton:
    """Round arrow button at a side edge."""
    kind: HitKind
    cx: float = 0.0
    cy: float = 0.0
    radius: float = NAV_BTN_RADIUS

    @property
    def step(self) -> int:
        return -1 if self.kind is HitKind.NAV_LEFT else 1

    def contains(self, x: float, y: float) -> bool:
        return distance_squared(x, y, self.cx, self.cy) <= self.radius * self.radius


@dataclass(frozen=True)
class HitTarget:
    """Result of a hit test."""
    kind: HitKind
    region: Optional[HitRegion] = None
    nav: Optional[NavButton] = None

    @property
    def item_id(self) -> Optional[ItemId]:
        return self.region.item_id if self.region else None


def card_rect(item: RenderedItem, viewport: ViewportController) -> Rect:
    """Axis-aligned screen square covering a card."""
    cx, cy = viewport.to_screen(item.x, item.y)
    size = viewport.to_pixels(item.card)
    return (cx - size / 2.0, cy - size / 2.0, size, size)


def eye_rect_for(rect: Rect) -> Rect:
    """Square control in the top-right corner of a card rectangle."""
    x, y, w, h = rect
    size = min(EYE_BTN_SIZE, w / 3.0, h / 3.0)
    margin = min(EYE_BTN_MARGIN, w / 10.0)
    return (x + w - size - margin, y + margin, size, size)


@dataclass
class HitRegionOverlay:
    """All hit regions plus the two navigation buttons."""
    regions: List[HitRegion] = field(default_factory=list)
    nav_buttons: List[NavButton] = field(default_factory=lambda: [
        NavButton(HitKind.NAV_LEFT), NavButton(HitKind.NAV_RIGHT)])

    @classmethod
    def for_items(cls, items: Sequence[GalleryItem]) -> HitRegionOverlay:
        """One region per caller item; an empty list gives an empty overlay."""
        return cls(regions=[HitRegion(i, item.id) for i, item in enumerate(items)])

    @property
    def hovered(self) -> Optional[HitRegion]:
        for region in self.regions:
            if region.hovered:
                return region
        return None

    def layout_nav(self, screen_w: float, screen_h: float) -> None:
        """Place the arrows at the vertical centre of each side."""
        left, right = self.nav_buttons
        offset = NAV_BTN_MARGIN + NAV_BTN_RADIUS
        left.cx, left.cy = offset, screen_h / 2.0
        right.cx, right.cy = screen_w - offset, screen_h / 2.0

    def sync(self, rendered: Sequence[RenderedItem], viewport: ViewportController) -> None:
        """Move every region onto the on-screen copies of its card."""
        if not self.regions or not rendered or not viewport.ready:
            return

        copies: Dict[int, List[RenderedItem]] = {}
        for r in rendered:
            if r.on_screen:
                copies.setdefault(r.source_index, []).append(r)

        for region in self.regions:
            shown = sorted(copies.get(region.source_index, ()), key=lambda r: abs(r.x))
            region.rects = [card_rect(r, viewport) for r in shown]
            region.eye_rects = [eye_rect_for(rect) for rect in region.rects]
            if region.active >= len(region.rects):
                region.active = 0

    def fade(self) -> None:
        """Ease each eye control toward shown (hovered) or hidden."""
        for region in self.regions:
            target = 1.0 if region.hovered else 0.0
            region.eye_alpha = lerp(region.eye_alpha, target, EYE_FADE_SPEED)
            if abs(region.eye_alpha - target) < 0.01:
                region.eye_alpha = target

    def update_hover(self, x: float, y: float) -> Optional[HitRegion]:
        """Mark the region under the pointer as hovered (at most one)."""
        found: Optional[HitRegion] = None
        for region in self.regions:
            index = region.copy_at(x, y) if found is None else None
            region.hovered = index is not None
            if index is not None:
                region.active = index
                found = region
        return found

    def clear_hover(self) -> None:
        for region in self.regions:
            region.hovered = False

    def hit_test(self, x: float, y: float) -> Optional[HitTarget]:
        """Find what lies under (x, y): arrows, then eye controls, then cards."""
        for nav in self.nav_buttons:
            if nav.contains(x, y):
                return HitTarget(nav.kind, nav=nav)
        for region in self.regions:
            if region.eye_contains(x, y):
                return HitTarget(HitKind.EYE, region=region)
        for region in self.regions:
            if region.contains(x, y):
                return HitTarget(HitKind.CARD, region=region)
        return None
