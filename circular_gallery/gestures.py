"""Input router - turns pointer sequences into drags, clicks and steps.

A press that moves more than DRAG_THRESHOLD_PX on either axis becomes a
drag and pans the track; anything shorter is a click resolved against the
hit-region overlay.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum, auto
from typing import TYPE_CHECKING, Optional

from .config import DRAG_SCALE, DRAG_THRESHOLD_PX
from .hit_regions import HitKind, HitTarget
from .types import ItemCallback, ItemId
from .logging import log

if TYPE_CHECKING:
    from .state import GalleryState


class GestureKind(Enum):
    """How a pointer-up was classified."""
    NONE = auto()        # pointer was not down
    DRAG = auto()
    CLICK = auto()       # click that hit no control
    ITEM_CLICK = auto()
    EYE_CLICK = auto()
    NAV_CLICK = auto()


@dataclass(frozen=True)
class GestureResult:
    """Outcome of a finished gesture."""
    kind: GestureKind
    item_id: Optional[ItemId] = None
    dispatched: bool = False


class InputRouter:
    """Drag/click disambiguation and click dispatch for one gallery."""

    def __init__(self, state: "GalleryState",
                 threshold: float = DRAG_THRESHOLD_PX):
        self.state = state
        self.threshold = threshold

    @property
    def drag_factor(self) -> float:
        return self.state.options.scroll_speed * DRAG_SCALE

    def pointer_down(self, x: float, y: float) -> None:
        self.state.input.begin(x, y, self.state.scroll.current)

    def pointer_move(self, x: float, y: float) -> bool:
        """Track a move. Returns True while the gesture is a drag."""
        inp = self.state.input
        inp.pointer_pos = (x, y)
        if not inp.is_down:
            return False

        if not inp.is_dragging and inp.exceeds_threshold(x, y, self.threshold):
            inp.is_dragging = True
            log(f"[INPUT] Drag started at ({inp.start_pos[0]:.0f}, {inp.start_pos[1]:.0f})")

        if inp.is_dragging:
            dx, _ = inp.get_drag_distance(x, y)
            self.state.scroll.target = inp.start_scroll + dx * self.drag_factor
        return inp.is_dragging

    def pointer_up(self, x: float, y: float) -> GestureResult:
        inp = self.state.input
        if not inp.is_down:
            return GestureResult(GestureKind.NONE)

        inp.pointer_pos = (x, y)
        if inp.end():
            self.settle()
            return GestureResult(GestureKind.DRAG)

        target = self.hit_test(x, y)
        if target is None:
            self.settle()
            return GestureResult(GestureKind.CLICK)

        if target.nav is not None:
            self.settle()
            self.state.scroll.step(target.nav.step, self.state.item_width)
            return GestureResult(GestureKind.NAV_CLICK)

        if target.kind is HitKind.EYE:
            fired = self._dispatch(self.state.options.on_eye_button_click, target)
            return GestureResult(GestureKind.EYE_CLICK, target.item_id, fired)

        fired = self._dispatch(self.state.options.on_image_click, target)
        return GestureResult(GestureKind.ITEM_CLICK, target.item_id, fired)

    def hover(self, x: float, y: float) -> None:
        self.state.input.pointer_pos = (x, y)
        if self.state.laid_out:
            self.state.overlay.update_hover(x, y)

    def hit_test(self, x: float, y: float) -> Optional[HitTarget]:
        if not self.state.laid_out:
            return None
        return self.state.overlay.hit_test(x, y)

    def settle(self) -> None:
        self.state.scroll.settle(self.state.item_width)

    def step(self, count: int) -> None:
        self.state.scroll.step(count, self.state.item_width)

    def _dispatch(self, callback: Optional[ItemCallback], target: HitTarget) -> bool:
        """Call the per-item callback when both it and the item id exist.

        A failing callback is logged; the click still counts as dispatched.
        """
        item_id = target.item_id
        if item_id is None or not callable(callback):
            return False
        log(f"[INPUT] {target.kind.name} click -> item {item_id!r}")
        try:
            callback(item_id)
        except Exception as e:
            log(f"[INPUT][ERR] {target.kind.name} callback for {item_id!r} failed: {e!r}")
        return True
