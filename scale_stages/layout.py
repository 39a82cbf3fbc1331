"""Layout computation: ratio-preserving radii chained left of the active stage."""
from __future__ import annotations

import math
from dataclasses import dataclass

from scale_stages.catalog import StageCatalog
from scale_stages.config import ScaleConfig
from scale_stages.types import Vec3

INTRO_INDEX = -1


@dataclass(frozen=True)
class LayoutEntry:
    stage_id: str
    radius: float
    center_offset: float
    elevation: float = 0.0
    depth: float = 0.0

    @property
    def position(self) -> Vec3:
        return (self.center_offset, self.elevation, self.depth)


@dataclass(frozen=True)
class Layout:
    """Target layout for one active index.

    ``entries`` are the numeric stages ordered by index, the last one being
    the active (largest) stage. ``reference`` is set only while the terminal
    reference stage is active.
    """

    active_index: int
    entries: tuple[LayoutEntry, ...] = ()
    reference: LayoutEntry | None = None

    @property
    def active(self) -> LayoutEntry | None:
        return self.entries[-1] if self.entries else None

    def get(self, stage_id: str) -> LayoutEntry | None:
        for entry in self.entries:
            if entry.stage_id == stage_id:
                return entry
        return None

    def targets(self) -> dict[str, LayoutEntry]:
        return {entry.stage_id: entry for entry in self.entries}


def compute_layout(
    catalog: StageCatalog, active_index: int, config: ScaleConfig
) -> Layout:
    """Compute the target layout for ``active_index``.

    The active numeric stage gets ``config.base_radius`` at offset 0. Each
    earlier stage is scaled by its magnitude ratio to the next one, floored
    at ``config.min_radius``, and placed immediately to its left with
    ``config.gap`` between the two surfaces.
    """
    if not INTRO_INDEX <= active_index < len(catalog):
        raise IndexError(
            f"Stage index {active_index} out of range for {len(catalog)} stages"
        )
    if active_index == INTRO_INDEX:
        return Layout(active_index=active_index)

    effective = min(active_index, catalog.last_numeric_index)
    radii = [0.0] * (effective + 1)
    offsets = [0.0] * (effective + 1)
    radii[effective] = config.base_radius

    for i in range(effective - 1, -1, -1):
        ratio = catalog[i].magnitude / catalog[i + 1].magnitude
        radius = radii[i + 1] * ratio
        # Sub-pixel radii are pinned to the floor; this breaks strict
        # proportionality for the widest gaps.
        if not math.isfinite(radius) or radius < config.min_radius:
            radius = config.min_radius
        radii[i] = radius
        offsets[i] = offsets[i + 1] - (radii[i + 1] + radius + config.gap)

    entries = tuple(
        LayoutEntry(stage_id=catalog[i].id, radius=radii[i], center_offset=offsets[i])
        for i in range(effective + 1)
    )

    reference = None
    if active_index == catalog.reference_index:
        stage = catalog[active_index]
        x, y, z = stage.position
        reference = LayoutEntry(
            stage_id=stage.id,
            radius=stage.radius,
            center_offset=x,
            elevation=y,
            depth=z,
        )

    return Layout(active_index=active_index, entries=entries, reference=reference)
