"""Active stage index with clamped stepping and change hooks."""
from __future__ import annotations

import logging
from typing import Callable

from scale_stages.layout import INTRO_INDEX

logger = logging.getLogger(__name__)

ChangeHook = Callable[[int, int], None]


class StageNavigator:
    """The single owner of the active stage index.

    ``-1`` is the intro (nothing active). ``start``, ``advance``,
    ``retreat`` and ``reset`` are the only mutators; hooks receive
    ``(old, new)`` synchronously and only when the index changes.
    """

    def __init__(self, stage_count: int) -> None:
        if stage_count <= 0:
            raise ValueError("stage_count must be positive")
        self._count = stage_count
        self._index = INTRO_INDEX
        self._hooks: list[ChangeHook] = []

    @property
    def index(self) -> int:
        return self._index

    @property
    def started(self) -> bool:
        return self._index != INTRO_INDEX

    @property
    def at_end(self) -> bool:
        return self._index == self._count - 1

    def on_change(self, hook: ChangeHook) -> None:
        self._hooks.append(hook)

    def off_change(self, hook: ChangeHook) -> None:
        if hook in self._hooks:
            self._hooks.remove(hook)

    def _set(self, index: int) -> bool:
        if index == self._index:
            return False
        old, self._index = self._index, index
        logger.debug("Active stage %d -> %d", old, index)
        for hook in list(self._hooks):
            hook(old, index)
        return True

    def start(self) -> bool:
        return self._set(0)

    def advance(self) -> bool:
        """Step forward; a no-op on the last stage."""
        return self._set(min(self._index + 1, self._count - 1))

    def retreat(self) -> bool:
        """Step back; a no-op on the first stage and during the intro."""
        if self._index == INTRO_INDEX:
            return False
        return self._set(max(self._index - 1, 0))

    def reset(self) -> bool:
        return self._set(INTRO_INDEX)
