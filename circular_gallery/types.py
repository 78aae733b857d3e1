"""Core data types for the circular gallery."""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Tuple, Optional, Callable, Any, List, Sequence, Mapping
from enum import IntEnum

from . import config as cfg

ItemId = Any
ItemCallback = Callable[[ItemId], None]


@dataclass(frozen=True)
class GalleryItem:
    """One caller-supplied card: image source plus label."""
    image: str
    text: str = ""
    id: Optional[ItemId] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> GalleryItem:
        """Build an item from a plain mapping with image/text/id keys."""
        if "image" not in data:
            raise ValueError(f"gallery item without 'image': {data!r}")
        return cls(image=str(data["image"]), text=str(data.get("text", "")),
                   id=data.get("id"))


def coerce_items(items: Optional[Sequence[Any]]) -> List[GalleryItem]:
    """Accept GalleryItem instances or dicts and return a list of GalleryItem."""
    result: List[GalleryItem] = []
    for item in items or ():
        if isinstance(item, GalleryItem):
            result.append(item)
        elif isinstance(item, Mapping):
            result.append(GalleryItem.from_dict(item))
        else:
            raise ValueError(f"unsupported gallery item: {item!r}")
    return result


def placeholder_items() -> List[GalleryItem]:
    """Built-in items shown when the caller supplies none."""
    return [GalleryItem.from_dict(d) for d in cfg.PLACEHOLDER_ITEMS]


def duplicate_items(items: Sequence[GalleryItem]) -> List[GalleryItem]:
    """Concatenate the list with itself so the track can wrap seamlessly."""
    return list(items) + list(items)


def parse_hex_color(value: str) -> Tuple[int, int, int, int]:
    """Parse '#rgb', '#rrggbb' or '#rrggbbaa' into an RGBA tuple."""
    s = value.strip().lstrip("#")
    if len(s) == 3:
        s = "".join(ch * 2 for ch in s)
    if len(s) == 6:
        s += "ff"
    if len(s) != 8:
        raise ValueError(f"invalid hex color: {value!r}")
    try:
        return tuple(int(s[i:i + 2], 16) for i in (0, 2, 4, 6))  # type: ignore[return-value]
    except ValueError:
        raise ValueError(f"invalid hex color: {value!r}") from None


@dataclass
class GalleryOptions:
    """Construction parameters of a gallery. All fields are optional."""
    items: List[Any] = field(default_factory=list)
    bend: float = cfg.DEFAULT_BEND
    text_color: str = cfg.DEFAULT_TEXT_COLOR
    border_radius: float = cfg.DEFAULT_BORDER_RADIUS
    font_path: Optional[str] = None
    scroll_speed: float = cfg.DEFAULT_SCROLL_SPEED
    scroll_ease: float = cfg.DEFAULT_SCROLL_EASE
    auto_scroll: bool = cfg.DEFAULT_AUTO_SCROLL
    auto_scroll_speed: float = cfg.DEFAULT_AUTO_SCROLL_SPEED
    height: int = cfg.DEFAULT_HEIGHT
    width: int = cfg.DEFAULT_WIDTH
    on_image_click: Optional[ItemCallback] = None
    on_eye_button_click: Optional[ItemCallback] = None

    def __post_init__(self) -> None:
        self.items = coerce_items(self.items)
        if not (0.0 < self.scroll_ease <= 1.0):
            raise ValueError(f"scroll_ease must be in (0, 1], got {self.scroll_ease}")
        if self.height <= 0 or self.width <= 0:
            raise ValueError(f"invalid size {self.width}x{self.height}")
        if not (0.0 <= self.border_radius <= 0.5):
            raise ValueError(f"border_radius must be in [0, 0.5], got {self.border_radius}")
        # Fail early on a bad colour rather than mid-frame
        parse_hex_color(self.text_color)

    @property
    def text_rgba(self) -> Tuple[int, int, int, int]:
        return parse_hex_color(self.text_color)


@dataclass(frozen=True)
class Viewport:
    """World-space size of the visible area at the card plane."""
    width: float
    height: float

    @property
    def half_width(self) -> float:
        return self.width / 2.0


class LoadPriority(IntEnum):
    """Priority levels for async image loading."""
    VISIBLE = 0   # Card currently on screen
    QUEUED = 1    # Everything else


@dataclass
class LoadTask:
    """A task for the async image loader."""
    source: str
    priority: LoadPriority
    callback: Callable
    timestamp: float = 0.0

    def __lt__(self, other: LoadTask) -> bool:
        """Compare tasks for priority queue ordering."""
        if self.priority != other.priority:
            return self.priority < other.priority
        return self.timestamp < other.timestamp


@dataclass
class UIEvent:
    """An event to be processed on the main/render thread."""
    callback: Callable
    args: tuple


@dataclass
class PreparedImage:
    """Card image decoded and shaped off-thread, ready for texture upload."""
    source: str
    png: bytes
    w: int
    h: int
    natural_size: Tuple[int, int] = (0, 0)


@dataclass
class TextureInfo:
    """Information about a loaded texture."""
    tex: Any  # rl.Texture2D - using Any to avoid raylib import
    w: int
    h: int
    source: str = ""
