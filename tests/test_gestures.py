import pytest

from circular_gallery.gestures import InputRouter, GestureKind
from circular_gallery.render_loop import RenderLoop

from conftest import make_items, make_state, SCREEN_W


def centre(rect):
    x, y, w, h = rect
    return (x + w / 2, y + h / 2)


def click(router, x, y):
    router.pointer_down(x, y)
    return router.pointer_up(x, y)


@pytest.fixture
def gallery(image_clicks, eye_clicks):
    state = make_state(3, on_image_click=image_clicks, on_eye_button_click=eye_clicks)
    return state, InputRouter(state)


def test_click_on_card_fires_image_callback(gallery, image_clicks, eye_clicks):
    state, router = gallery
    x, y = centre(state.overlay.regions[0].rect)
    result = click(router, x, y)
    assert result.kind is GestureKind.ITEM_CLICK
    assert result.dispatched
    assert image_clicks.calls == ["id-0"]
    assert eye_clicks.calls == []


def test_eye_click_takes_precedence(gallery, image_clicks, eye_clicks):
    state, router = gallery
    x, y = centre(state.overlay.regions[1].eye_rect)
    result = click(router, x, y)
    assert result.kind is GestureKind.EYE_CLICK
    assert eye_clicks.calls == ["id-1"]
    assert image_clicks.calls == []


def test_move_within_threshold_is_still_a_click(gallery, image_clicks):
    state, router = gallery
    x, y = centre(state.overlay.regions[0].rect)
    router.pointer_down(x, y)
    assert router.pointer_move(x + 5, y - 5) is False
    result = router.pointer_up(x + 5, y - 5)
    assert result.kind is GestureKind.ITEM_CLICK
    assert image_clicks.calls == ["id-0"]
    assert state.scroll.target == 0.0


@pytest.mark.parametrize("dx,dy", [(6, 0), (-6, 0), (0, 6), (0, -6)])
def test_move_past_threshold_is_a_drag(gallery, image_clicks, eye_clicks, dx, dy):
    state, router = gallery
    x, y = centre(state.overlay.regions[0].rect)
    router.pointer_down(x, y)
    assert router.pointer_move(x + dx, y + dy) is True
    result = router.pointer_up(x + dx, y + dy)
    assert result.kind is GestureKind.DRAG
    assert image_clicks.calls == []
    assert eye_clicks.calls == []


def test_drag_moves_target_by_horizontal_distance(gallery):
    state, router = gallery
    router.pointer_down(600, 200)
    router.pointer_move(500, 200)
    # 100px left * scroll_speed 1.5 * 0.025
    assert state.scroll.target == pytest.approx(3.75)
    router.pointer_move(500, 320)
    assert state.scroll.target == pytest.approx(3.75)


def test_vertical_drag_does_not_scroll(gallery):
    state, router = gallery
    router.pointer_down(600, 200)
    router.pointer_move(600, 260)
    assert state.input.is_dragging
    assert state.scroll.target == 0.0


def test_drag_release_settles_to_item_boundary(gallery):
    state, router = gallery
    width = state.item_width
    router.pointer_down(600, 200)
    router.pointer_move(300, 200)        # target 11.25
    router.pointer_up(300, 200)
    assert state.scroll.target == pytest.approx(width)

    router.pointer_down(600, 200)
    router.pointer_move(700, 200)        # target -3.75
    router.pointer_up(700, 200)
    assert state.scroll.target == pytest.approx(0.0)

    router.pointer_down(600, 200)
    router.pointer_move(900, 200)        # target -11.25
    router.pointer_up(900, 200)
    assert state.scroll.target == pytest.approx(-width)


def test_drag_starts_from_current_scroll(gallery):
    state, router = gallery
    state.scroll.current = 2.0
    router.pointer_down(600, 200)
    router.pointer_move(560, 200)
    assert state.scroll.target == pytest.approx(2.0 + 40 * 1.5 * 0.025)


def test_click_on_empty_space_settles(gallery, image_clicks):
    state, router = gallery
    state.scroll.target = state.item_width * 0.7
    result = click(router, SCREEN_W / 2, 395)
    assert result.kind is GestureKind.CLICK
    assert state.scroll.target == pytest.approx(state.item_width)
    assert image_clicks.calls == []


def test_nav_buttons_step_one_item(gallery):
    state, router = gallery
    left, right = state.overlay.nav_buttons
    assert click(router, right.cx, right.cy).kind is GestureKind.NAV_CLICK
    assert state.scroll.target == pytest.approx(state.item_width)
    click(router, left.cx, left.cy)
    click(router, left.cx, left.cy)
    assert state.scroll.target == pytest.approx(-state.item_width)


def test_duplicate_copy_maps_to_source_id(gallery, image_clicks):
    state, router = gallery
    # Item 2's nearest copy sits left of centre after the first frame's wrap
    region = state.overlay.regions[2]
    x, y = centre(region.rect)
    assert x < SCREEN_W / 2
    click(router, x, y)
    assert image_clicks.calls == ["id-2"]


def test_regions_keep_tracking_after_scroll(gallery, image_clicks):
    state, router = gallery
    state.scroll.target = state.item_width
    loop = RenderLoop(state).start()
    for _ in range(400):
        loop.tick()
    # Item 1 is now at the centre
    click(router, SCREEN_W / 2, 200)
    assert image_clicks.calls == ["id-1"]


def test_items_without_ids_do_not_fire(image_clicks):
    state = make_state(items=make_items(3, with_ids=False), on_image_click=image_clicks)
    router = InputRouter(state)
    x, y = centre(state.overlay.regions[0].rect)
    result = click(router, x, y)
    assert result.kind is GestureKind.ITEM_CLICK
    assert not result.dispatched
    assert image_clicks.calls == []


def test_missing_callback_is_ignored():
    state = make_state(3)
    router = InputRouter(state)
    x, y = centre(state.overlay.regions[0].rect)
    assert click(router, x, y).dispatched is False


def test_placeholder_gallery_has_no_clickable_regions(image_clicks):
    state = make_state(items=[], on_image_click=image_clicks)
    assert len(state.gallery_items) == 12
    assert state.overlay.regions == []
    router = InputRouter(state)
    result = click(router, SCREEN_W / 2, 200)
    assert result.kind is GestureKind.CLICK
    assert image_clicks.calls == []


def test_unlaid_gallery_click_is_noop(image_clicks):
    state = make_state(3, laid_out=False, on_image_click=image_clicks)
    router = InputRouter(state)
    state.scroll.target = 1.3
    result = click(router, 600, 200)
    assert result.kind is GestureKind.CLICK
    assert state.scroll.target == 1.3
    assert image_clicks.calls == []


def test_pointer_up_without_down_is_ignored(gallery):
    state, router = gallery
    assert router.pointer_up(600, 200).kind is GestureKind.NONE
    assert router.pointer_move(700, 200) is False


def test_hover_marks_single_region(gallery):
    state, router = gallery
    x, y = centre(state.overlay.regions[1].rect)
    router.hover(x, y)
    assert [r.hovered for r in state.overlay.regions] == [False, True, False]
    router.hover(5, 5)
    assert state.overlay.hovered is None


def test_both_visible_copies_map_to_same_id(gallery, image_clicks):
    state, router = gallery
    near, far = state.rendered[1], state.rendered[4]
    assert near.on_screen and far.on_screen
    # Copy 4 of item 1 sits left of centre while copy 1 sits right of it
    x, y = state.viewport.to_screen(far.x, far.y)
    assert x < SCREEN_W / 2
    result = click(router, x, y)
    assert result.kind is GestureKind.ITEM_CLICK
    x, y = state.viewport.to_screen(near.x, near.y)
    click(router, x, y)
    assert image_clicks.calls == ["id-1", "id-1"]


def test_eye_on_second_copy_fires(gallery, eye_clicks):
    state, router = gallery
    region = state.overlay.regions[1]
    assert len(region.eye_rects) == 2
    ex, ey, ew, eh = region.eye_rects[1]
    result = click(router, ex + ew / 2, ey + eh / 2)
    assert result.kind is GestureKind.EYE_CLICK
    assert eye_clicks.calls == ["id-1"]


def test_failing_callback_is_logged_not_raised():
    def explode(item_id):
        raise RuntimeError("handler failed")

    state = make_state(3, on_image_click=explode, on_eye_button_click=explode)
    router = InputRouter(state)
    x, y = centre(state.overlay.regions[0].rect)
    result = click(router, x, y)
    assert result.kind is GestureKind.ITEM_CLICK
    assert result.dispatched
    ex, ey, ew, eh = state.overlay.regions[0].eye_rect
    assert click(router, ex + ew / 2, ey + eh / 2).kind is GestureKind.EYE_CLICK
    # Gallery keeps working afterwards
    left, right = state.overlay.nav_buttons
    assert click(router, right.cx, right.cy).kind is GestureKind.NAV_CLICK
