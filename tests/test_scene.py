"""Integration tests for ScaleScene wiring."""
import random

import pytest

from scale_stages import (
    INTRO_INDEX,
    PUZZLE_COMPLETE,
    STAGE_CHANGED,
    PuzzlePhase,
    RenderFrame,
    ScaleConfig,
    ScaleScene,
    compute_layout,
)


def make_scene(**kwargs):
    """A scene with a seeded puzzle shuffle."""
    return ScaleScene(rng=random.Random(42), **kwargs)


def solve(scene):
    """Place every item in the correct order and validate."""
    for item_id in scene.puzzle.solution:
        scene.puzzle.select(item_id)
    return scene.puzzle.validate()


def test_intro_frame():
    """Before navigation the frame is empty with the intro camera."""
    scene = make_scene()
    frame = scene.frame()
    assert isinstance(frame, RenderFrame)
    assert frame.active_index == INTRO_INDEX
    assert frame.stage is None
    assert frame.bodies == ()
    assert frame.reference is None
    assert frame.camera.position == (0.0, 0.0, 15.0)


def test_solving_puzzle_starts_navigation_on_next_tick():
    """Success starts stage 0 once the bus flushes."""
    scene = make_scene()
    assert solve(scene) is PuzzlePhase.SUCCESS
    assert scene.active_index == INTRO_INDEX
    scene.step()
    assert scene.active_index == 0
    assert scene.active_stage.id == "humans"


def test_completion_reaches_host_subscribers():
    """A host listening for puzzle_complete hears it on the tick that starts stage 0."""
    scene = make_scene()
    heard = []
    scene.bus.subscribe(
        PUZZLE_COMPLETE, lambda signal, data: heard.append((scene.active_index, data["order"]))
    )
    solve(scene)
    scene.step()
    assert heard == [(0, scene.puzzle.solution)]
    assert scene.puzzle.phase is PuzzlePhase.SUCCESS


def test_failed_puzzle_does_not_start():
    """A wrong answer keeps the scene in the intro."""
    scene = make_scene()
    for item_id in reversed(scene.puzzle.solution):
        scene.puzzle.select(item_id)
    assert scene.puzzle.validate() is PuzzlePhase.FAIL
    scene.run(5)
    assert scene.active_index == INTRO_INDEX


def test_stage_change_recomputes_layout_immediately():
    """The layout updates on advance, before any tick."""
    scene = make_scene()
    scene.start()
    scene.advance()
    assert scene.layout == compute_layout(scene.catalog, 1, scene.config)
    assert scene.animation.layout is scene.layout


def test_stage_changes_are_signalled():
    """Each stage change publishes stage_changed."""
    scene = make_scene()
    changes = []
    scene.bus.subscribe(STAGE_CHANGED, lambda name, data: changes.append(data))
    scene.start()
    scene.advance()
    scene.step()
    assert changes == [
        {"old": -1, "new": 0, "stage_id": "humans"},
        {"old": 0, "new": 1, "stage_id": "trees"},
    ]


def test_bodies_follow_navigation():
    """Frames list the bodies of the current layout."""
    scene = make_scene()
    scene.start()
    scene.step()
    frame = scene.frame()
    assert [b.stage_id for b in frame.bodies] == ["humans"]
    assert frame.bodies[0].radius == pytest.approx(4.0)

    scene.advance()
    scene.step()
    frame = scene.frame()
    assert [b.stage_id for b in frame.bodies] == ["humans", "trees"]
    trees = frame.bodies[1]
    assert trees.radius > 4.0
    assert frame.stage.id == "trees"


def test_retreat_hides_later_bodies():
    """Stages right of the active one disappear after retreat."""
    scene = make_scene()
    scene.start()
    scene.advance()
    scene.step()
    scene.retreat()
    scene.step()
    assert [b.stage_id for b in scene.frame().bodies] == ["humans"]
    assert "trees" in scene.animation


def test_navigation_clamps_through_scene():
    """Scene navigation clamps like the navigator."""
    scene = make_scene()
    scene.start()
    for _ in range(20):
        scene.advance()
    assert scene.active_index == len(scene.catalog) - 1
    assert not scene.advance()
    for _ in range(20):
        scene.retreat()
    assert scene.active_index == 0


def test_reference_stage_frame():
    """The last stage adds a reference body."""
    scene = make_scene()
    scene.start()
    for _ in range(10):
        scene.advance()
        scene.step()
    frame = scene.frame()
    assert frame.stage.id == "sun"
    assert frame.reference is not None
    assert frame.reference.radius == 400.0
    assert frame.reference.position == (0.0, 0.0, -400.0)
    assert len(frame.bodies) == 10


def test_camera_settles_on_active_stage():
    """The camera converges on the active stage framing."""
    scene = make_scene()
    scene.start()
    scene.advance()
    scene.run(1200)
    target = scene.view.target
    frame = scene.frame()
    assert frame.camera.position == pytest.approx(target.position, abs=1e-4)
    assert frame.camera.look_at == pytest.approx(target.look_at, abs=1e-4)


def test_advance_time_uses_configured_tps():
    """Frame time converts to ticks at the configured rate."""
    scene = make_scene(config=ScaleConfig(tps=30))
    assert scene.advance_time(1.0) == 30
    assert scene.frame().tick_number == 30


def test_set_aspect_changes_reference_framing():
    """Aspect changes move the reference camera."""
    scene = make_scene()
    scene.start()
    for _ in range(10):
        scene.advance()
    wide = scene.view.target.position[2]
    scene.set_aspect(0.4)
    assert scene.view.target.position[2] > wide


def test_reset_returns_to_intro_pose():
    """reset empties the layout and heads back to the intro pose."""
    scene = make_scene()
    scene.start()
    scene.advance()
    scene.reset()
    assert scene.view.target.position == (0.0, 0.0, 15.0)
    assert scene.frame().bodies == ()
