"""Tests for StageNavigator clamping and change hooks."""
import pytest

from scale_stages import INTRO_INDEX, StageNavigator


def test_starts_in_intro():
    """A new navigator sits in the intro."""
    nav = StageNavigator(5)
    assert nav.index == INTRO_INDEX
    assert not nav.started


def test_start():
    """start() enters stage 0 once."""
    nav = StageNavigator(5)
    assert nav.start()
    assert nav.index == 0
    assert nav.started
    assert not nav.start()


def test_advance_clamps_at_last_stage():
    """advance() stops at the last stage."""
    nav = StageNavigator(3)
    nav.start()
    assert nav.advance()
    assert nav.advance()
    assert nav.at_end
    assert not nav.advance()
    assert nav.index == 2


def test_advance_from_intro_enters_first_stage():
    """advance() from the intro lands on stage 0."""
    nav = StageNavigator(3)
    assert nav.advance()
    assert nav.index == 0


def test_retreat_clamps_at_first_stage():
    """retreat() stops at stage 0."""
    nav = StageNavigator(3)
    nav.start()
    nav.advance()
    assert nav.retreat()
    assert nav.index == 0
    assert not nav.retreat()
    assert nav.index == 0


def test_retreat_in_intro_is_noop():
    """retreat() does nothing before navigation starts."""
    nav = StageNavigator(3)
    assert not nav.retreat()
    assert nav.index == INTRO_INDEX


def test_reset_returns_to_intro():
    """reset() goes back to the intro once."""
    nav = StageNavigator(3)
    nav.start()
    nav.advance()
    assert nav.reset()
    assert nav.index == INTRO_INDEX
    assert not nav.reset()


def test_hooks_receive_old_and_new():
    """Hooks fire with (old, new) only on real changes."""
    nav = StageNavigator(3)
    changes = []
    nav.on_change(lambda old, new: changes.append((old, new)))
    nav.start()
    nav.advance()
    nav.advance()
    nav.advance()  # clamped, no hook
    nav.retreat()
    assert changes == [(-1, 0), (0, 1), (1, 2), (2, 1)]


def test_off_change():
    """A removed hook is no longer called."""
    nav = StageNavigator(3)
    changes = []

    def hook(old, new):
        changes.append(new)

    nav.on_change(hook)
    nav.start()
    nav.off_change(hook)
    nav.advance()
    assert changes == [0]


def test_stage_count_must_be_positive():
    """An empty sequence is refused."""
    with pytest.raises(ValueError):
        StageNavigator(0)
