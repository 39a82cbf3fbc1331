"""Fixed-timestep tick loop running registered systems in order."""

from typing import Any, Callable

from scale_stages.types import System, TickContext


class Clock:
    def __init__(self, tps: int) -> None:
        if tps <= 0:
            raise ValueError("tps must be positive")
        self._tps = tps
        self._dt = 1.0 / tps
        self._tick_number = 0
        self._carry = 0.0

    @property
    def tps(self) -> int:
        return self._tps

    @property
    def dt(self) -> float:
        return self._dt

    @property
    def tick_number(self) -> int:
        return self._tick_number

    def advance(self) -> int:
        self._tick_number += 1
        return self._tick_number

    def due(self, seconds: float) -> int:
        """Bank ``seconds`` of frame time; return how many whole ticks are due."""
        self._carry += seconds
        ticks = int(self._carry * self._tps + 1e-9)
        self._carry = max(0.0, self._carry - ticks * self._dt)
        return ticks

    def context(self, stop_fn: Callable[[], None]) -> TickContext:
        return TickContext(
            tick_number=self._tick_number,
            dt=self._dt,
            elapsed=self._tick_number * self._dt,
            request_stop=stop_fn,
        )


class TickLoop:
    """Calls each system once per tick with the owner and a TickContext.

    ``owner`` is whatever the systems operate on (the composed scene).
    ``step`` and ``run`` are deterministic; ``advance_time`` converts frame
    time from a host loop into whole ticks.
    """

    def __init__(self, owner: Any, tps: int = 60) -> None:
        self._owner = owner
        self._clock = Clock(tps)
        self._systems: list[System] = []
        self._stop_requested = False

    @property
    def clock(self) -> Clock:
        return self._clock

    def add_system(self, system: System) -> None:
        self._systems.append(system)

    def _request_stop(self) -> None:
        self._stop_requested = True

    def _tick(self) -> None:
        self._clock.advance()
        ctx = self._clock.context(self._request_stop)
        for system in self._systems:
            system(self._owner, ctx)
            if self._stop_requested:
                break

    def step(self) -> None:
        self._stop_requested = False
        self._tick()

    def run(self, n: int) -> int:
        """Run up to ``n`` ticks. Returns how many ran before a stop request."""
        self._stop_requested = False
        ran = 0
        for _ in range(n):
            self._tick()
            ran += 1
            if self._stop_requested:
                break
        return ran

    def advance_time(self, seconds: float) -> int:
        """Run the ticks owed for ``seconds`` of frame time, carrying the remainder."""
        return self.run(self._clock.due(seconds))

