"""Command line entry: open a gallery window from flags and a JSON items file."""

from __future__ import annotations
import argparse
import json
import os
from typing import List, Optional, Sequence

from .types import GalleryItem, GalleryOptions, coerce_items
from .image_utils import is_remote, is_supported_image
from .logging import log, set_enabled
from . import config as cfg


def load_items(path: str) -> List[GalleryItem]:
    """Read a JSON list of {"id", "image", "text"} objects.

    Relative local image paths are resolved against the file's directory.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise ValueError(f"cannot read items file {path!r}: {e}") from e

    if isinstance(data, dict):
        data = data.get("items", [])
    if not isinstance(data, list):
        raise ValueError(f"items file {path!r} must contain a list")

    base = os.path.dirname(os.path.abspath(path))
    items = coerce_items(data)
    return [_resolve(item, base) for item in items]


def _resolve(item: GalleryItem, base: str) -> GalleryItem:
    src = item.image
    if is_remote(src):
        return item
    if not is_supported_image(src):
        log(f"[ITEMS] {src}: unsupported extension, card will stay blank")
    if "://" in src or os.path.isabs(src):
        return item
    return GalleryItem(image=os.path.join(base, src), text=item.text, id=item.id)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="circular-gallery",
                                description="Infinite circular carousel of image cards.")
    p.add_argument("items", nargs="?", help="JSON file with a list of {id, image, text}")
    p.add_argument("--bend", type=float, default=cfg.DEFAULT_BEND,
                   help="row curvature, 0 for a flat row, negative curves upward")
    p.add_argument("--text-color", default=cfg.DEFAULT_TEXT_COLOR)
    p.add_argument("--border-radius", type=float, default=cfg.DEFAULT_BORDER_RADIUS)
    p.add_argument("--font", dest="font_path", default=None, help="TTF/OTF file for titles")
    p.add_argument("--scroll-speed", type=float, default=cfg.DEFAULT_SCROLL_SPEED)
    p.add_argument("--scroll-ease", type=float, default=cfg.DEFAULT_SCROLL_EASE)
    p.add_argument("--no-auto-scroll", dest="auto_scroll", action="store_false")
    p.add_argument("--auto-scroll-speed", type=float, default=cfg.DEFAULT_AUTO_SCROLL_SPEED)
    p.add_argument("--width", type=int, default=cfg.DEFAULT_WIDTH)
    p.add_argument("--height", type=int, default=cfg.DEFAULT_HEIGHT)
    p.add_argument("-q", "--quiet", action="store_true", help="disable logging")
    return p


def options_from_args(args: argparse.Namespace) -> GalleryOptions:
    """Build GalleryOptions; clicks are reported through the log."""
    items = load_items(args.items) if args.items else []
    return GalleryOptions(
        items=items,
        bend=args.bend,
        text_color=args.text_color,
        border_radius=args.border_radius,
        font_path=args.font_path,
        scroll_speed=args.scroll_speed,
        scroll_ease=args.scroll_ease,
        auto_scroll=args.auto_scroll,
        auto_scroll_speed=args.auto_scroll_speed,
        height=args.height,
        width=args.width,
        on_image_click=lambda item_id: log(f"[CLICK] image {item_id!r}"),
        on_eye_button_click=lambda item_id: log(f"[CLICK] preview {item_id!r}"),
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.quiet:
        set_enabled(False)

    try:
        options = options_from_args(args)
    except ValueError as e:
        parser.error(str(e))

    from .app import CircularGallery
    CircularGallery(options).run()
    return 0
