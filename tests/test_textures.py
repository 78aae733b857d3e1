import pytest

textures = pytest.importorskip("circular_gallery.textures")

from circular_gallery.types import GalleryItem, LoadPriority, PreparedImage


class FakeLoader:
    def __init__(self):
        self.submitted = []

    def submit(self, source, priority, callback):
        self.submitted.append((source, priority, callback))


@pytest.fixture
def cache(monkeypatch):
    unloaded = []
    monkeypatch.setattr(textures, "load_texture_from_png", lambda png: ("tex", png))
    monkeypatch.setattr(textures, "is_texture_valid", lambda tex: tex is not None)
    monkeypatch.setattr(textures.rl, "UnloadTexture", unloaded.append, raising=False)
    c = textures.TextureCache(FakeLoader())
    c.unloaded = unloaded
    return c


def test_each_source_requested_once_with_priority(cache):
    items = [GalleryItem(f"img{i % 7}.png") for i in range(10)]
    cache.request_all(items + items)
    sources = [s for s, _, _ in cache.loader.submitted]
    assert sources == [f"img{i}.png" for i in range(7)]
    priorities = [p for _, p, _ in cache.loader.submitted]
    assert priorities == [LoadPriority.VISIBLE] * 6 + [LoadPriority.QUEUED]
    assert cache.get("img0.png") is None


def test_loaded_image_becomes_texture(cache):
    cache.request("a.png")
    _, _, callback = cache.loader.submitted[0]
    callback("a.png", PreparedImage("a.png", b"png", 8, 8, (100, 50)), None)
    info = cache.get("a.png")
    assert info.tex == ("tex", b"png")
    assert (info.w, info.h) == (8, 8)


def test_failed_load_keeps_placeholder(cache):
    cache.request("broken.png")
    _, _, callback = cache.loader.submitted[0]
    callback("broken.png", None, OSError("404"))
    assert cache.get("broken.png") is None
    assert "broken.png" in cache.failed


def test_close_unloads_and_ignores_late_results(cache):
    cache.request("a.png")
    cache.request("b.png")
    (_, _, cb_a), (_, _, cb_b) = cache.loader.submitted
    cb_a("a.png", PreparedImage("a.png", b"a", 8, 8), None)
    cache.close()
    cache.close()
    assert cache.unloaded == [("tex", b"a")]
    cb_b("b.png", PreparedImage("b.png", b"b", 8, 8), None)
    assert cache.get("b.png") is None
    cache.request("c.png")
    assert len(cache.loader.submitted) == 2
