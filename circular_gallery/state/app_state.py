"""Composite GalleryState - everything one gallery instance owns."""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List

from .input import InputState
from .scroll import ScrollState
from ..types import GalleryItem, GalleryOptions, placeholder_items, duplicate_items
from ..layout import RenderedItem, build_rendered_items, relayout
from ..hit_regions import HitRegionOverlay
from ..viewport import ViewportController
from ..logging import log


@dataclass
class GalleryState:
    """
    State of one gallery.

    ``items`` is what the caller passed; ``gallery_items`` is what is shown
    (the placeholders when ``items`` is empty). Hit regions only ever exist
    for ``items``.
    """
    options: GalleryOptions = field(default_factory=GalleryOptions)
    items: List[GalleryItem] = field(default_factory=list)
    gallery_items: List[GalleryItem] = field(default_factory=list)
    rendered: List[RenderedItem] = field(default_factory=list)
    scroll: ScrollState = field(default_factory=ScrollState)
    input: InputState = field(default_factory=InputState)
    viewport: ViewportController = field(default_factory=ViewportController)
    overlay: HitRegionOverlay = field(default_factory=HitRegionOverlay)
    auto_scroll: bool = False

    @classmethod
    def from_options(cls, options: GalleryOptions) -> GalleryState:
        items = list(options.items)
        gallery_items = items or placeholder_items()
        state = cls(
            options=options,
            items=items,
            gallery_items=gallery_items,
            rendered=build_rendered_items(duplicate_items(gallery_items),
                                          len(gallery_items), options.bend),
            scroll=ScrollState(ease=options.scroll_ease),
            overlay=HitRegionOverlay.for_items(items),
            auto_scroll=options.auto_scroll,
        )
        log(f"[STATE] {len(gallery_items)} items "
            f"({'caller' if items else 'placeholder'}), {len(state.rendered)} cards")
        return state

    @property
    def item_width(self) -> float:
        """Track distance between neighbouring cards (0 before layout)."""
        if not self.rendered:
            return 0.0
        return self.rendered[0].width

    @property
    def laid_out(self) -> bool:
        return self.viewport.ready and bool(self.rendered) and self.rendered[0].laid_out

    def resize(self, screen_w: int, screen_h: int, dpr: float = 1.0) -> bool:
        """Apply a container resize and re-lay cards and hit regions."""
        if not self.viewport.resize(screen_w, screen_h, dpr):
            return False
        vc = self.viewport
        relayout(self.rendered, vc.viewport, vc.screen_w, vc.screen_h)
        self.overlay.layout_nav(vc.screen_w, vc.screen_h)
        self.overlay.sync(self.rendered, vc)
        return True
