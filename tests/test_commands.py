import pytest

from circular_gallery.commands import (
    PointerDown, PointerMove, PointerUp, Hover,
    ScrollStep, ToggleAutoScroll, Resize, CloseGallery,
)
from circular_gallery.gestures import InputRouter

from conftest import make_state


class FakeGallery:
    """Just enough of CircularGallery for commands."""

    def __init__(self, state):
        self.state = state
        self.router = InputRouter(state)
        self.destroyed = False
        self.stopped = False

    def stop(self):
        self.stopped = True


@pytest.fixture
def gallery(image_clicks):
    return FakeGallery(make_state(3, on_image_click=image_clicks))


def test_pointer_sequence_clicks_centre_card(gallery, image_clicks):
    assert PointerDown(600, 200).execute(gallery)
    assert PointerUp(600, 200).execute(gallery)
    assert image_clicks.calls == ["id-0"]


def test_move_and_up_need_pointer_down(gallery):
    assert not PointerMove(500, 200).execute(gallery)
    assert not PointerUp(500, 200).execute(gallery)


def test_drag_through_commands(gallery):
    PointerDown(600, 200).execute(gallery)
    assert PointerMove(500, 200).execute(gallery) is True
    PointerUp(500, 200).execute(gallery)
    assert gallery.state.scroll.target == pytest.approx(0.0)


def test_hover_command(gallery):
    assert Hover(600, 200).execute(gallery)
    assert gallery.state.overlay.hovered is gallery.state.overlay.regions[0]


def test_scroll_step(gallery):
    width = gallery.state.item_width
    assert ScrollStep(2).execute(gallery)
    assert gallery.state.scroll.target == pytest.approx(2 * width)
    assert not ScrollStep(0).execute(gallery)


def test_scroll_step_waits_for_layout(image_clicks):
    g = FakeGallery(make_state(3, laid_out=False))
    assert not ScrollStep(1).execute(g)
    assert g.state.scroll.target == 0.0


def test_toggle_auto_scroll_leaves_caller_options_alone(gallery):
    assert gallery.state.auto_scroll is False
    ToggleAutoScroll().execute(gallery)
    assert gallery.state.auto_scroll is True
    assert gallery.state.options.auto_scroll is False
    ToggleAutoScroll().execute(gallery)
    assert gallery.state.auto_scroll is False


def test_resize_command(gallery):
    assert Resize(800, 400).execute(gallery)
    assert gallery.state.viewport.screen_w == 800
    assert not Resize(0, 0).execute(gallery)


def test_destroyed_gallery_ignores_commands(gallery):
    gallery.destroyed = True
    assert not PointerDown(600, 200).execute(gallery)
    assert not ScrollStep(1).execute(gallery)
    assert not Resize(800, 300).execute(gallery)


def test_close(gallery):
    assert CloseGallery().execute(gallery)
    assert gallery.stopped
