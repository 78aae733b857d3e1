"""Viewport math - container pixels to world units at the card plane."""

from __future__ import annotations
import math
from dataclasses import dataclass
from typing import Optional, Tuple

from .config import CAMERA_FOV_DEG, CAMERA_DISTANCE, MAX_DPR
from .types import Viewport
from .logging import log


def compute_viewport(screen_w: float, screen_h: float,
                     fov_deg: float = CAMERA_FOV_DEG,
                     distance: float = CAMERA_DISTANCE) -> Viewport:
    """Visible world size for a perspective camera looking at z=0.

    Raises ZeroDivisionError for a zero-height screen; callers filter
    degenerate sizes first.
    """
    fov = math.radians(fov_deg)
    height = 2.0 * math.tan(fov / 2.0) * distance
    width = height * (screen_w / screen_h)
    return Viewport(width=width, height=height)


@dataclass
class ViewportController:
    """Tracks container size and the derived world viewport."""
    fov_deg: float = CAMERA_FOV_DEG
    distance: float = CAMERA_DISTANCE
    screen_w: int = 0
    screen_h: int = 0
    dpr: float = 1.0
    viewport: Optional[Viewport] = None

    @property
    def ready(self) -> bool:
        return self.viewport is not None

    @property
    def pixels_per_unit(self) -> float:
        """Screen pixels per world unit (0 before the first valid resize)."""
        if self.viewport is None or self.viewport.height <= 0:
            return 0.0
        return self.screen_h / self.viewport.height

    @property
    def surface_size(self) -> Tuple[int, int]:
        """Backing surface size in device pixels, DPR capped."""
        return (int(self.screen_w * self.dpr), int(self.screen_h * self.dpr))

    def resize(self, screen_w: int, screen_h: int, dpr: float = 1.0) -> bool:
        """Apply a new container size. Returns True if the viewport changed.

        Degenerate sizes (hidden or collapsed container) keep the previous
        viewport so downstream layout never divides by zero.
        """
        if screen_w <= 0 or screen_h <= 0:
            log(f"[VIEWPORT] Ignoring degenerate size {screen_w}x{screen_h}")
            return False

        dpr = min(dpr if dpr > 0 else 1.0, MAX_DPR)
        if (screen_w, screen_h, dpr) == (self.screen_w, self.screen_h, self.dpr) and self.viewport:
            return False

        self.screen_w, self.screen_h, self.dpr = int(screen_w), int(screen_h), dpr
        self.viewport = compute_viewport(screen_w, screen_h, self.fov_deg, self.distance)
        log(f"[VIEWPORT] {screen_w}x{screen_h} dpr={dpr:.2f} -> "
            f"world {self.viewport.width:.3f}x{self.viewport.height:.3f}")
        return True

    def to_screen(self, wx: float, wy: float) -> Tuple[float, float]:
        """World point (origin centre, y up) to screen pixels (origin top-left, y down)."""
        ppu = self.pixels_per_unit
        return (self.screen_w / 2.0 + wx * ppu, self.screen_h / 2.0 - wy * ppu)

    def to_pixels(self, length: float) -> float:
        return length * self.pixels_per_unit
