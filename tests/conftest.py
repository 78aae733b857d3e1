from __future__ import annotations

import pytest

from circular_gallery.logging import set_enabled
from circular_gallery.render_loop import RenderLoop
from circular_gallery.state import GalleryState
from circular_gallery.types import GalleryItem, GalleryOptions

SCREEN_W = 1200
SCREEN_H = 400


@pytest.fixture(autouse=True)
def quiet_logs():
    set_enabled(False)
    yield
    set_enabled(True)


def make_items(n: int, with_ids: bool = True):
    return [
        GalleryItem(image=f"img{i}.png", text=f"Item {i}", id=f"id-{i}" if with_ids else None)
        for i in range(n)
    ]


def make_state(n: int = 3, *, bend: float = 0.0, auto_scroll: bool = False,
               laid_out: bool = True, items=None, **kwargs) -> GalleryState:
    """Gallery state sized to 1200x400 with two frames already run.

    A card that wraps keeps its old position until the following frame, so
    the second frame is the first one where every card sits on its copy.
    """
    if items is None:
        items = make_items(n)
    options = GalleryOptions(items=items, bend=bend, auto_scroll=auto_scroll, **kwargs)
    state = GalleryState.from_options(options)
    if laid_out:
        state.resize(SCREEN_W, SCREEN_H)
        loop = RenderLoop(state).start()
        loop.tick()
        loop.tick()
    return state


class Recorder:
    """Collects ids passed to a callback."""

    def __init__(self):
        self.calls = []

    def __call__(self, item_id):
        self.calls.append(item_id)


@pytest.fixture
def image_clicks():
    return Recorder()


@pytest.fixture
def eye_clicks():
    return Recorder()
