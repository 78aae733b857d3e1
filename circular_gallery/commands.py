"""Command Pattern for input handling.

Commands encapsulate actions that can be triggered by various inputs.
Each command has an execute() method and optional can_execute() for guards.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .app import CircularGallery

from .logging import log


class Command(ABC):
    """Base class for all commands."""

    @abstractmethod
    def execute(self, gallery: "CircularGallery") -> bool:
        """Execute the command. Returns True if action was taken."""
        pass

    def can_execute(self, gallery: "CircularGallery") -> bool:
        """Check if command can be executed. Override for guards."""
        return not gallery.destroyed


# ═══════════════════════════════════════════════════════════════════════════
# Pointer Commands
# ═══════════════════════════════════════════════════════════════════════════

@dataclass
class PointerDown(Command):
    """Mouse button or first touch went down."""
    x: float
    y: float

    def execute(self, gallery: "CircularGallery") -> bool:
        if not self.can_execute(gallery):
            return False
        gallery.router.pointer_down(self.x, self.y)
        return True


@dataclass
class PointerMove(Command):
    """Pointer moved while pressed."""
    x: float
    y: float

    def can_execute(self, gallery: "CircularGallery") -> bool:
        return super().can_execute(gallery) and gallery.state.input.is_down

    def execute(self, gallery: "CircularGallery") -> bool:
        if not self.can_execute(gallery):
            return False
        return gallery.router.pointer_move(self.x, self.y)


@dataclass
class PointerUp(Command):
    """Pointer released: finishes a drag or becomes a click."""
    x: float
    y: float

    def can_execute(self, gallery: "CircularGallery") -> bool:
        return super().can_execute(gallery) and gallery.state.input.is_down

    def execute(self, gallery: "CircularGallery") -> bool:
        if not self.can_execute(gallery):
            return False
        result = gallery.router.pointer_up(self.x, self.y)
        log(f"[CMD] PointerUp: {result.kind.name}")
        return True


@dataclass
class Hover(Command):
    """Pointer position while no button is held."""
    x: float
    y: float

    def execute(self, gallery: "CircularGallery") -> bool:
        if not self.can_execute(gallery):
            return False
        gallery.router.hover(self.x, self.y)
        return True


# ═══════════════════════════════════════════════════════════════════════════
# Scroll Commands
# ═══════════════════════════════════════════════════════════════════════════

@dataclass
class ScrollStep(Command):
    """Move the track by whole items (arrow keys, wheel notches)."""
    count: int

    def can_execute(self, gallery: "CircularGallery") -> bool:
        return super().can_execute(gallery) and gallery.state.laid_out and self.count != 0

    def execute(self, gallery: "CircularGallery") -> bool:
        if not self.can_execute(gallery):
            return False
        gallery.router.settle()
        gallery.router.step(self.count)
        log(f"[CMD] ScrollStep: {self.count:+d} -> target={gallery.state.scroll.target:.3f}")
        return True


class ToggleAutoScroll(Command):
    """Pause or resume automatic scrolling."""

    def execute(self, gallery: "CircularGallery") -> bool:
        if not self.can_execute(gallery):
            return False
        state = gallery.state
        state.auto_scroll = not state.auto_scroll
        log(f"[CMD] ToggleAutoScroll: {state.auto_scroll}")
        return True


# ═══════════════════════════════════════════════════════════════════════════
# Window Commands
# ═══════════════════════════════════════════════════════════════════════════

@dataclass
class Resize(Command):
    """Container (window) size changed."""
    width: int
    height: int
    dpr: float = 1.0

    def execute(self, gallery: "CircularGallery") -> bool:
        if not self.can_execute(gallery):
            return False
        return gallery.state.resize(self.width, self.height, self.dpr)


class CloseGallery(Command):
    """Close the window and tear the gallery down."""

    def execute(self, gallery: "CircularGallery") -> bool:
        log("[CMD] CloseGallery")
        gallery.stop()
        return True
