"""Input Handler - maps raylib input events to commands.

This module bridges the gap between raw raylib input and the command pattern.
It polls input each frame and returns a list of commands to execute. Mouse
and touch are folded into one pointer stream.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .rl_compat import rl
from .commands import (
    Command,
    PointerDown, PointerMove, PointerUp, Hover,
    ScrollStep, ToggleAutoScroll,
    Resize, CloseGallery,
)
from .config import WHEEL_STEP_ITEMS
from .math_utils import sign


@dataclass
class PointerState:
    """Current pointer snapshot (mouse or first touch)."""
    x: float = 0.0
    y: float = 0.0
    pressed: bool = False
    released: bool = False
    down: bool = False
    wheel: float = 0.0


@dataclass
class InputHandler:
    """Polls raylib once per frame for one gallery window."""

    key_next: List[int] = field(default_factory=lambda: [rl.KEY_RIGHT, rl.KEY_D])
    key_prev: List[int] = field(default_factory=lambda: [rl.KEY_LEFT, rl.KEY_A])
    key_toggle_auto: int = rl.KEY_SPACE
    key_close: int = rl.KEY_ESCAPE

    _touch_down: bool = False
    _last_pos: Optional[Tuple[float, float]] = None

    def poll_pointer(self) -> PointerState:
        """Read mouse state, or the first touch point when one is active."""
        touching = rl.GetTouchPointCount() > 0
        if touching or self._touch_down:
            was_down = self._touch_down
            self._touch_down = touching
            if touching:
                pos = rl.GetTouchPosition(0)
            else:
                pos = rl.GetMousePosition()
            return PointerState(
                x=pos.x, y=pos.y,
                pressed=touching and not was_down,
                released=was_down and not touching,
                down=touching,
            )

        pos = rl.GetMousePosition()
        return PointerState(
            x=pos.x,
            y=pos.y,
            pressed=rl.IsMouseButtonPressed(rl.MOUSE_BUTTON_LEFT),
            released=rl.IsMouseButtonReleased(rl.MOUSE_BUTTON_LEFT),
            down=rl.IsMouseButtonDown(rl.MOUSE_BUTTON_LEFT),
            wheel=rl.GetMouseWheelMove(),
        )

    def poll(self) -> List[Command]:
        """Poll all inputs and return list of commands to execute."""
        commands: List[Command] = []

        if rl.IsKeyPressed(self.key_close):
            commands.append(CloseGallery())
            return commands

        if rl.IsWindowResized():
            dpi = rl.GetWindowScaleDPI()
            commands.append(Resize(rl.GetScreenWidth(), rl.GetScreenHeight(), dpi.x))

        # ─── Pointer ─────────────────────────────────────────────────────────
        p = self.poll_pointer()
        moved = self._last_pos != (p.x, p.y)
        self._last_pos = (p.x, p.y)

        if p.pressed:
            commands.append(PointerDown(p.x, p.y))
        elif p.down and moved:
            commands.append(PointerMove(p.x, p.y))

        if p.released:
            commands.append(PointerUp(p.x, p.y))
        elif not p.down and moved:
            commands.append(Hover(p.x, p.y))

        if p.wheel != 0.0:
            commands.append(ScrollStep(int(-sign(p.wheel)) * WHEEL_STEP_ITEMS))

        # ─── Keys ────────────────────────────────────────────────────────────
        for key in self.key_next:
            if rl.IsKeyPressed(key):
                commands.append(ScrollStep(1))
                break

        for key in self.key_prev:
            if rl.IsKeyPressed(key):
                commands.append(ScrollStep(-1))
                break

        if rl.IsKeyPressed(self.key_toggle_auto):
            commands.append(ToggleAutoScroll())

        return commands
