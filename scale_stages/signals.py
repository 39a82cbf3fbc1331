"""Queued signal bus, flushed once per tick."""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable

from scale_stages.types import TickContext

if TYPE_CHECKING:
    from scale_stages.scene import ScaleScene

Handler = Callable[[str, dict[str, Any]], None]

PUZZLE_COMPLETE = "puzzle_complete"
STAGE_CHANGED = "stage_changed"


class SignalBus:
    """Publishers queue signals; handlers run when the bus is flushed.

    Signals published by a handler during a flush are delivered on the
    next flush, not the current one.
    """

    def __init__(self) -> None:
        self._handlers: dict[str, list[Handler]] = {}
        self._queue: list[tuple[str, dict[str, Any]]] = []

    def subscribe(self, name: str, handler: Handler) -> None:
        self._handlers.setdefault(name, []).append(handler)

    def unsubscribe(self, name: str, handler: Handler) -> None:
        handlers = self._handlers.get(name)
        if handlers and handler in handlers:
            handlers.remove(handler)

    def publish(self, name: str, **data: Any) -> None:
        self._queue.append((name, data))

    def pending(self) -> int:
        return len(self._queue)

    def flush(self) -> int:
        """Deliver every queued signal. Returns the number delivered."""
        batch, self._queue = self._queue, []
        for name, data in batch:
            for handler in self._handlers.get(name, []):
                handler(name, data)
        return len(batch)


def make_signal_system(bus: SignalBus) -> Callable[[ScaleScene, TickContext], None]:
    def signal_system(scene: ScaleScene, ctx: TickContext) -> None:
        bus.flush()

    return signal_system
