"""Render loop - the per-frame update, as a stoppable repeating task."""

from __future__ import annotations
from typing import TYPE_CHECKING, Callable, List, Optional

from .layout import update_all
from .logging import log, increment_frame

if TYPE_CHECKING:
    from .state import GalleryState

DrawFn = Callable[["GalleryState"], None]
UpdateFn = Callable[["GalleryState"], None]


class RenderLoop:
    """
    Advances one gallery a frame at a time.

    Usage:
        loop = RenderLoop(state, draw=renderer.draw_frame).start()
        loop.run(lambda: not rl.WindowShouldClose())
        loop.stop()
    """

    def __init__(self, state: "GalleryState", draw: Optional[DrawFn] = None):
        self.state = state
        self.draw = draw
        self.running = False
        self.stopped = False
        self.frames = 0
        self.update_functions: List[UpdateFn] = []

    def start(self) -> RenderLoop:
        """Arm the loop. The returned handle is what stop() is called on."""
        if self.stopped:
            raise RuntimeError("render loop already stopped")
        self.running = True
        return self

    def stop(self) -> None:
        """Stop ticking. Safe to call more than once."""
        if self.stopped:
            return
        self.running = False
        self.stopped = True
        log(f"[LOOP] Stopped after {self.frames} frames")

    def tick(self) -> bool:
        """Run one frame. Returns False (and does nothing) once stopped."""
        if not self.running:
            return False

        state = self.state
        scroll = state.scroll

        if state.auto_scroll:
            scroll.auto_advance(state.options.auto_scroll_speed)

        scroll.advance()
        direction = scroll.direction
        update_all(state.rendered, scroll, direction)

        for update_fn in self.update_functions:
            try:
                update_fn(state)
            except Exception as e:
                log(f"[LOOP][UPDATE][ERR] {e!r}")

        if self.draw is not None:
            self.draw(state)

        scroll.commit()
        state.overlay.sync(state.rendered, state.viewport)
        state.overlay.fade()

        self.frames += 1
        increment_frame()
        return True

    def run(self, should_continue: Callable[[], bool],
            before_frame: Optional[Callable[[], None]] = None) -> None:
        """Tick until stopped or should_continue() turns False."""
        while self.running and should_continue():
            if before_frame is not None:
                before_frame()
                if not self.running:
                    break
            self.tick()

    def register_update(self, fn: UpdateFn) -> None:
        """Register an update function to be called each frame before drawing."""
        self.update_functions.append(fn)

    def unregister_update(self, fn: UpdateFn) -> None:
        if fn in self.update_functions:
            self.update_functions.remove(fn)
