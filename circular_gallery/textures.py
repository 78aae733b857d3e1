"""Texture cache - one GPU texture per unique image source."""

from __future__ import annotations
import os
from collections import OrderedDict
from typing import Optional, Sequence

from .rl_compat import rl, load_texture_from_png, is_texture_valid
from .loader import AsyncImageLoader
from .types import GalleryItem, LoadPriority, PreparedImage, TextureInfo
from .logging import log


class TextureCache:
    """Requests card images once and keeps their textures until closed.

    A source maps to None while loading or after a failed load, so both
    cases render as a blank placeholder card.
    """

    def __init__(self, loader: AsyncImageLoader):
        self.loader = loader
        self.textures: "OrderedDict[str, Optional[TextureInfo]]" = OrderedDict()
        self.failed: set = set()
        self.closed = False

    def request_all(self, items: Sequence[GalleryItem]) -> None:
        for i, item in enumerate(items):
            priority = LoadPriority.VISIBLE if i < 6 else LoadPriority.QUEUED
            self.request(item.image, priority)

    def request(self, source: str, priority: LoadPriority = LoadPriority.QUEUED) -> None:
        if self.closed or source in self.textures:
            return
        self.textures[source] = None
        self.loader.submit(source, priority, self._on_loaded)

    def _on_loaded(self, source: str, prepared: Optional[PreparedImage],
                   error: Optional[Exception]) -> None:
        if self.closed:
            return
        if error is not None or prepared is None:
            self.failed.add(source)
            log(f"[LOAD][ERR] {_short(source)}: {error!r}")
            return
        try:
            tex = load_texture_from_png(prepared.png)
        except Exception as e:
            self.failed.add(source)
            log(f"[LOAD][ERR] Texture upload failed for {_short(source)}: {e!r}")
            return
        if not is_texture_valid(tex):
            self.failed.add(source)
            log(f"[LOAD][ERR] Invalid texture for {_short(source)}")
            return
        self.textures[source] = TextureInfo(tex=tex, w=prepared.w, h=prepared.h, source=source)
        w, h = prepared.natural_size
        log(f"[LOAD] {_short(source)} ({w}x{h})")

    def get(self, source: str) -> Optional[TextureInfo]:
        return self.textures.get(source)

    def close(self) -> None:
        """Unload every texture. Later load callbacks are ignored."""
        if self.closed:
            return
        self.closed = True
        count = 0
        for ti in self.textures.values():
            if ti and is_texture_valid(ti.tex):
                try:
                    rl.UnloadTexture(ti.tex)
                    count += 1
                except Exception as e:
                    log(f"[UNLOAD][ERR] {e!r}")
        self.textures.clear()
        log(f"[UNLOAD] Released {count} textures")


def _short(source: str) -> str:
    return os.path.basename(source.split("?", 1)[0]) or source
