"""Renderer - handles all drawing operations.

The Renderer is a pure drawing layer that only reads state and draws to screen.
It does not modify state - all state changes happen in the render loop and
input router.
"""

from __future__ import annotations
import math
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Optional, Tuple

if TYPE_CHECKING:
    from .state import GalleryState
    from .textures import TextureCache

from .rl_compat import (
    rl,
    make_rect as RL_Rect, make_vec2 as RL_V2, make_color as RL_Color,
    rgba as RL_Rgba, default_font, draw_text_pro,
)
from .config import (
    BG_COLOR, PLACEHOLDER_COLOR, WOBBLE_PX,
    NAV_BTN_BG_ALPHA,
)
from .layout import RenderedItem
from .hit_regions import HitRegion, NavButton, HitKind


@dataclass
class Renderer:
    """
    Draws one gallery.

    Usage:
        renderer = Renderer(textures=cache, text_color=(255, 255, 255, 255))
        loop = RenderLoop(state, draw=renderer.draw_frame)
    """
    textures: Optional["TextureCache"] = None
    text_color: Tuple[int, int, int, int] = (255, 255, 255, 255)
    font: Any = None
    _white: Any = field(default=None, repr=False)

    def begin_frame(self) -> None:
        rl.BeginDrawing()

    def end_frame(self) -> None:
        rl.EndDrawing()

    def draw_background(self) -> None:
        rl.ClearBackground(RL_Color(*BG_COLOR))

    # ═══════════════════════════════════════════════════════════════════════
    # Cards
    # ═══════════════════════════════════════════════════════════════════════

    def draw_cards(self, state: "GalleryState") -> None:
        """Draw every card that is at least partly inside the viewport."""
        if not state.laid_out:
            return
        for item in state.rendered:
            if item.is_before or item.is_after:
                continue
            self._draw_card(state, item)

    def _card_screen(self, state: "GalleryState", item: RenderedItem) -> Tuple[float, float, float, float]:
        """Centre x, centre y, edge length in pixels, rotation in degrees."""
        vc = state.viewport
        cx, cy = vc.to_screen(item.x, item.y)
        cy -= item.wobble * WOBBLE_PX
        size = vc.to_pixels(item.card)
        # World rotation is counter-clockwise with y up; raylib is clockwise with y down
        return (cx, cy, size, -math.degrees(item.rotation))

    def _draw_card(self, state: "GalleryState", item: RenderedItem) -> None:
        cx, cy, size, rot = self._card_screen(state, item)
        ti = self.textures.get(item.item.image) if self.textures else None

        dst = RL_Rect(cx, cy, size, size)
        origin = RL_V2(size / 2.0, size / 2.0)
        if ti is not None:
            if self._white is None:
                self._white = RL_Color(255, 255, 255, 255)
            rl.DrawTexturePro(ti.tex, RL_Rect(0, 0, ti.w, ti.h), dst, origin, rot, self._white)
        else:
            rl.DrawRectanglePro(dst, origin, rot, RL_Color(*PLACEHOLDER_COLOR))

        if item.item.text:
            self._draw_title(state, item)

    def _draw_title(self, state: "GalleryState", item: RenderedItem) -> None:
        vc = state.viewport
        tx, ty, text_h = item.title_anchor()
        sx, sy = vc.to_screen(tx, ty)
        sy -= item.wobble * WOBBLE_PX
        font_size = max(8.0, vc.to_pixels(text_h))
        draw_text_pro(self.font or default_font(), item.item.text, sx, sy, font_size,
                      -math.degrees(item.rotation), RL_Rgba(self.text_color))

    # ═══════════════════════════════════════════════════════════════════════
    # Overlay controls
    # ═══════════════════════════════════════════════════════════════════════

    def draw_eye_buttons(self, state: "GalleryState") -> None:
        """Draw the preview control on hovered (or fading) cards."""
        for region in state.overlay.regions:
            if region.visible and region.eye_alpha > 0.01:
                self._draw_eye(region)

    def _draw_eye(self, region: HitRegion) -> None:
        x, y, w, h = region.eye_rect
        cx, cy = x + w / 2.0, y + h / 2.0
        a = region.eye_alpha
        fg = RL_Color(255, 255, 255, int(255 * a))

        rl.DrawCircle(int(cx), int(cy), w / 2.0, RL_Color(0, 0, 0, int(255 * NAV_BTN_BG_ALPHA * a)))
        rl.DrawEllipseLines(int(cx), int(cy), w * 0.32, h * 0.18, fg)
        rl.DrawCircle(int(cx), int(cy), w * 0.1, fg)

    def draw_nav_buttons(self, state: "GalleryState") -> None:
        for nav in state.overlay.nav_buttons:
            self._draw_nav(nav)

    def _draw_nav(self, nav: NavButton) -> None:
        cx, cy, r = int(nav.cx), int(nav.cy), nav.radius
        color = RL_Color(255, 255, 255, 230)
        rl.DrawCircle(cx, cy, r, RL_Color(0, 0, 0, int(255 * NAV_BTN_BG_ALPHA)))
        rl.DrawCircleLines(cx, cy, r, color)
        if nav.kind is HitKind.NAV_LEFT:
            self._draw_arrow_left(cx, cy, r * 0.8, color)
        else:
            self._draw_arrow_right(cx, cy, r * 0.8, color)

    def _draw_arrow_left(self, cx: int, cy: int, size: float, color) -> None:
        points = [
            RL_V2(cx + size * 0.4, cy - size * 0.6),
            RL_V2(cx - size * 0.4, cy),
            RL_V2(cx + size * 0.4, cy + size * 0.6),
        ]
        rl.DrawLineEx(points[0], points[1], 2.5, color)
        rl.DrawLineEx(points[1], points[2], 2.5, color)

    def _draw_arrow_right(self, cx: int, cy: int, size: float, color) -> None:
        points = [
            RL_V2(cx - size * 0.4, cy - size * 0.6),
            RL_V2(cx + size * 0.4, cy),
            RL_V2(cx - size * 0.4, cy + size * 0.6),
        ]
        rl.DrawLineEx(points[0], points[1], 2.5, color)
        rl.DrawLineEx(points[1], points[2], 2.5, color)

    # ═══════════════════════════════════════════════════════════════════════
    # Convenience methods
    # ═══════════════════════════════════════════════════════════════════════

    def draw_all(self, state: "GalleryState") -> None:
        """Draw everything in correct order."""
        self.draw_background()
        self.draw_cards(state)
        self.draw_eye_buttons(state)
        self.draw_nav_buttons(state)

    def draw_frame(self, state: "GalleryState") -> None:
        """Complete frame: begin, draw all, end."""
        self.begin_frame()
        self.draw_all(state)
        self.end_frame()
