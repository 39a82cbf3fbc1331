"""Ordering puzzle: rank the catalog quantities from smallest to largest."""
from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from enum import Enum

from scale_stages.catalog import StageCatalog
from scale_stages.signals import PUZZLE_COMPLETE, SignalBus

logger = logging.getLogger(__name__)

UNPLACED = "unplaced"
PLACED = "placed"


class PuzzlePhase(Enum):
    PLAYING = "playing"
    SUCCESS = "success"
    FAIL = "fail"


@dataclass(frozen=True)
class PuzzleItem:
    id: str
    label: str
    magnitude: float


@dataclass(frozen=True)
class DragPayload:
    """What was picked up: the item, the list it came from and its index there."""

    item_id: str
    source: str
    index: int


class OrderingPuzzle:
    """Two ordered lists of items and an exact-order validator.

    Every item is always in exactly one of ``unplaced`` and ``placed``.
    Mutators return True when they changed state and False for a no-op;
    unknown items, unknown list names, stale drags and calls outside the
    ``PLAYING`` phase are all no-ops.

    ``SUCCESS`` is terminal and publishes ``puzzle_complete`` on the bus.
    ``FAIL`` returns to ``PLAYING`` through ``reset``.
    """

    def __init__(
        self,
        catalog: StageCatalog,
        total_items: int = 10,
        rng: random.Random | None = None,
        bus: SignalBus | None = None,
    ) -> None:
        numeric = catalog.numeric()
        if not 0 < total_items <= len(numeric):
            raise ValueError(
                f"total_items must be between 1 and {len(numeric)}, got {total_items}"
            )
        self._items = tuple(
            PuzzleItem(id=stage.id, label=stage.label, magnitude=stage.magnitude)
            for stage in numeric[:total_items]
        )
        self._solution = tuple(
            item.id for item in sorted(self._items, key=lambda item: item.magnitude)
        )
        self._rng = rng if rng is not None else random.Random()
        self._bus = bus
        self._unplaced: list[PuzzleItem] = []
        self._placed: list[PuzzleItem] = []
        self._phase = PuzzlePhase.PLAYING
        self._drag: DragPayload | None = None
        self._deal()

    # -- State --

    @property
    def phase(self) -> PuzzlePhase:
        return self._phase

    @property
    def items(self) -> tuple[PuzzleItem, ...]:
        return self._items

    @property
    def solution(self) -> tuple[str, ...]:
        return self._solution

    @property
    def unplaced(self) -> tuple[PuzzleItem, ...]:
        return tuple(self._unplaced)

    @property
    def placed(self) -> tuple[PuzzleItem, ...]:
        return tuple(self._placed)

    @property
    def drag(self) -> DragPayload | None:
        return self._drag

    @property
    def can_validate(self) -> bool:
        return self._phase is PuzzlePhase.PLAYING and not self._unplaced

    def _deal(self) -> None:
        items = list(self._items)
        self._rng.shuffle(items)
        self._unplaced = items
        self._placed = []

    def _list(self, name: str) -> list[PuzzleItem] | None:
        if name == UNPLACED:
            return self._unplaced
        if name == PLACED:
            return self._placed
        return None

    @staticmethod
    def _find(items: list[PuzzleItem], item_id: str) -> int | None:
        for index, item in enumerate(items):
            if item.id == item_id:
                return index
        return None

    # -- Click operations --

    def select(self, item_id: str) -> bool:
        """Move an item from unplaced to the end of placed."""
        return self.move_across_lists(item_id, UNPLACED, PLACED)

    def deselect(self, item_id: str) -> bool:
        """Move an item from placed back to the end of unplaced."""
        return self.move_across_lists(item_id, PLACED, UNPLACED)

    # -- Reordering --

    def move_within_placed(self, item_id: str, target_index: int) -> bool:
        """Reinsert a placed item so it lands before what was at ``target_index``.

        ``target_index`` counts positions before the removal, so moving an
        item forward lands it one slot earlier than the raw index. Indices
        outside the list are clamped to its ends.
        """
        if self._phase is not PuzzlePhase.PLAYING:
            return False
        index = self._find(self._placed, item_id)
        if index is None:
            return False
        insert_at = max(0, min(target_index, len(self._placed)))
        if index < insert_at:
            insert_at -= 1
        if insert_at == index:
            return False
        item = self._placed.pop(index)
        self._placed.insert(insert_at, item)
        return True

    def move_across_lists(
        self,
        item_id: str,
        from_list: str,
        to_list: str,
        target_index: int | None = None,
    ) -> bool:
        """Move an item between lists, inserting at ``target_index`` or the end."""
        if self._phase is not PuzzlePhase.PLAYING:
            return False
        source = self._list(from_list)
        dest = self._list(to_list)
        if source is None or dest is None:
            return False
        if source is dest:
            if dest is self._placed:
                end = len(self._placed) if target_index is None else target_index
                return self.move_within_placed(item_id, end)
            return False
        index = self._find(source, item_id)
        if index is None:
            return False
        item = source.pop(index)
        if target_index is None:
            dest.append(item)
        else:
            dest.insert(max(0, min(target_index, len(dest))), item)
        return True

    # -- Drag and drop --

    def pick_up(self, item_id: str, source: str) -> bool:
        if self._phase is not PuzzlePhase.PLAYING:
            return False
        items = self._list(source)
        if items is None:
            return False
        index = self._find(items, item_id)
        if index is None:
            return False
        self._drag = DragPayload(item_id=item_id, source=source, index=index)
        return True

    def drop(self, target_list: str, target_index: int | None = None) -> bool:
        """Finish the current drag over ``target_list``.

        Dropping on placed from placed reorders; dropping on unplaced from
        unplaced does nothing; anything else moves the item across.
        """
        payload, self._drag = self._drag, None
        if payload is None:
            return False
        return self.move_across_lists(
            payload.item_id, payload.source, target_list, target_index
        )

    def cancel_drag(self) -> None:
        self._drag = None

    # -- Outcome --

    def validate(self) -> PuzzlePhase:
        """Check the placed order once every item is placed.

        Called early or outside ``PLAYING``, the phase is returned unchanged.
        """
        if not self.can_validate:
            return self._phase
        attempt = tuple(item.id for item in self._placed)
        if attempt == self._solution:
            self._phase = PuzzlePhase.SUCCESS
            logger.info("Puzzle solved")
            if self._bus is not None:
                self._bus.publish(PUZZLE_COMPLETE, order=attempt)
        else:
            self._phase = PuzzlePhase.FAIL
            logger.info("Puzzle attempt rejected: %s", ", ".join(attempt))
        return self._phase

    def reset(self) -> bool:
        """Reshuffle and play again. A no-op once solved."""
        if self._phase is PuzzlePhase.SUCCESS:
            return False
        self._phase = PuzzlePhase.PLAYING
        self._drag = None
        self._deal()
        logger.debug("Puzzle reset")
        return True
