import pytest

from circular_gallery.state import ScrollState


def test_current_approaches_target_without_overshoot():
    s = ScrollState(ease=0.05, target=10.0)
    prev = s.current
    for _ in range(300):
        s.advance()
        assert prev <= s.current <= s.target
        prev = s.current
        s.commit()
    assert s.target - s.current < 1e-5


def test_advance_moves_by_ease_fraction():
    s = ScrollState(ease=0.25, current=0.0, target=8.0)
    s.advance()
    assert s.current == pytest.approx(2.0)


def test_direction_follows_current_vs_last():
    s = ScrollState(current=1.0, last=0.5)
    assert s.direction == "right"
    s = ScrollState(current=0.5, last=1.0)
    assert s.direction == "left"
    # no movement counts as left
    assert ScrollState().direction == "left"


@pytest.mark.parametrize("target,expected", [
    (0.0, 0.0),
    (4.9, 4.0),
    (5.0, 6.0),      # 2.5 items rounds up
    (5.2, 6.0),
    (-5.0, -6.0),
    (-4.9, -4.0),
    (-0.4, 0.0),
    (13.1, 14.0),
])
def test_settle_snaps_to_nearest_item(target, expected):
    s = ScrollState(target=target)
    s.settle(2.0)
    assert s.target == pytest.approx(expected)


def test_settle_without_layout_is_noop():
    s = ScrollState(target=3.3)
    s.settle(0.0)
    assert s.target == 3.3


def test_step_and_auto_advance_move_target_only():
    s = ScrollState()
    s.step(2, 1.5)
    s.auto_advance(0.25)
    assert s.target == pytest.approx(3.25)
    assert s.current == 0.0


def test_reset_zeroes_everything():
    s = ScrollState(current=1.0, target=2.0, last=3.0)
    s.reset()
    assert (s.current, s.target, s.last) == (0.0, 0.0, 0.0)
