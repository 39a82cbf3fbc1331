"""Tests for the fixed-timestep Clock and TickLoop."""
import pytest

from scale_stages import Clock, TickContext, TickLoop


def test_clock_dt():
    """dt is the reciprocal of tps and the clock starts at tick 0."""
    clock = Clock(tps=20)
    assert clock.tps == 20
    assert clock.dt == pytest.approx(0.05)
    assert clock.tick_number == 0


def test_clock_rejects_non_positive_tps():
    """A zero tick rate is refused."""
    with pytest.raises(ValueError):
        Clock(tps=0)


def test_clock_context():
    """The context reports tick number and elapsed time and is frozen."""
    clock = Clock(tps=20)
    clock.advance()
    clock.advance()
    ctx = clock.context(lambda: None)
    assert isinstance(ctx, TickContext)
    assert ctx.tick_number == 2
    assert ctx.elapsed == pytest.approx(0.1)
    with pytest.raises(AttributeError):
        ctx.dt = 1.0  # type: ignore[misc]


def test_clock_due_carries_remainder():
    """Partial ticks carry over into the next frame."""
    clock = Clock(tps=20)
    assert clock.due(0.03) == 0
    assert clock.due(0.03) == 1
    assert clock.due(0.1) == 2
    assert clock.due(0.04) == 1


def test_systems_run_in_order_with_owner():
    """Systems run in registration order and receive the owner."""
    owner = object()
    loop = TickLoop(owner, tps=20)
    calls = []
    loop.add_system(lambda o, ctx: calls.append(("first", o is owner, ctx.tick_number)))
    loop.add_system(lambda o, ctx: calls.append(("second", o is owner, ctx.tick_number)))
    loop.step()
    assert calls == [("first", True, 1), ("second", True, 1)]


def test_run_n_ticks():
    """run(n) advances the clock n times."""
    loop = TickLoop(None, tps=20)
    ticks = []
    loop.add_system(lambda o, ctx: ticks.append(ctx.tick_number))
    assert loop.run(5) == 5
    assert ticks == [1, 2, 3, 4, 5]
    assert loop.clock.tick_number == 5


def test_request_stop_ends_run_and_skips_later_systems():
    """A stop request ends the run and skips the rest of that tick."""
    loop = TickLoop(None, tps=20)
    seen = []

    def stopper(owner, ctx):
        seen.append(("stopper", ctx.tick_number))
        if ctx.tick_number == 3:
            ctx.request_stop()

    loop.add_system(stopper)
    loop.add_system(lambda o, ctx: seen.append(("after", ctx.tick_number)))
    assert loop.run(10) == 3
    assert ("after", 3) not in seen
    assert ("after", 2) in seen


def test_advance_time_runs_owed_ticks():
    """Half a second at 60 tps is 30 ticks; a sliver is none."""
    loop = TickLoop(None, tps=60)
    ticks = []
    loop.add_system(lambda o, ctx: ticks.append(ctx.tick_number))
    assert loop.advance_time(0.5) == 30
    assert loop.advance_time(0.001) == 0
    assert len(ticks) == 30


def test_dt_passed_to_systems():
    """Every system sees the fixed dt."""
    loop = TickLoop(None, tps=50)
    dts = []
    loop.add_system(lambda o, ctx: dts.append(ctx.dt))
    loop.run(2)
    assert dts == [pytest.approx(0.02), pytest.approx(0.02)]
