"""Per-stage animation state smoothed toward the current layout."""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

from scale_stages import vec
from scale_stages.catalog import StageCatalog
from scale_stages.config import ScaleConfig
from scale_stages.layout import INTRO_INDEX, Layout, LayoutEntry
from scale_stages.types import TickContext, Vec3

if TYPE_CHECKING:
    from scale_stages.scene import ScaleScene


@dataclass
class AnimatedEntity:
    """Current (not target) size and placement of one stage.

    ``entered_as_active`` records whether the entity was created while its
    stage was the active one; only those entities start oversized.
    """

    stage_id: str
    radius: float
    position: Vec3
    rotation_axis: Vec3 = (0.0, 1.0, 0.0)
    rotation_angle: float = 0.0
    entered_as_active: bool = False


class AnimationController:
    """Owns one AnimatedEntity per stage, keyed by stage id.

    Entities are created lazily the first tick their stage has a target and
    then live for the lifetime of the controller. A retarget only swaps the
    layout; every entity keeps its current values and keeps approaching.
    """

    def __init__(self, catalog: StageCatalog, config: ScaleConfig) -> None:
        self._catalog = catalog
        self._config = config
        self._entities: dict[str, AnimatedEntity] = {}
        self._layout = Layout(active_index=INTRO_INDEX)

    @property
    def layout(self) -> Layout:
        return self._layout

    def retarget(self, layout: Layout) -> None:
        self._layout = layout

    def entity(self, stage_id: str) -> AnimatedEntity | None:
        return self._entities.get(stage_id)

    def __len__(self) -> int:
        return len(self._entities)

    def __contains__(self, stage_id: object) -> bool:
        return stage_id in self._entities

    def visible(self) -> list[AnimatedEntity]:
        """Entities with a target in the current layout, in stage order."""
        return [
            self._entities[entry.stage_id]
            for entry in self._layout.entries
            if entry.stage_id in self._entities
        ]

    def _spawn(self, entry: LayoutEntry) -> AnimatedEntity:
        index = self._catalog.index_of(entry.stage_id)
        stage = self._catalog[index]
        entered_as_active = index == self._layout.active_index
        radius = entry.radius
        if entered_as_active and index > 0:
            radius = self._config.entry_radius
        entity = AnimatedEntity(
            stage_id=entry.stage_id,
            radius=radius,
            position=entry.position,
            rotation_axis=vec.normalize(stage.rotation_axis),
            entered_as_active=entered_as_active,
        )
        self._entities[entry.stage_id] = entity
        return entity

    def step(self, dt: float) -> None:
        factor = vec.smoothing_factor(self._config.smooth_rate, dt)
        spin = self._config.spin_rate * dt
        for entry in self._layout.entries:
            entity = self._entities.get(entry.stage_id)
            if entity is None:
                entity = self._spawn(entry)
            entity.radius = vec.approach(entity.radius, entry.radius, factor)
            entity.position = vec.approach_vec(entity.position, entry.position, factor)
            entity.rotation_angle += spin


def make_animation_system(
    controller: AnimationController,
) -> Callable[[ScaleScene, TickContext], None]:
    def animation_system(scene: ScaleScene, ctx: TickContext) -> None:
        controller.step(ctx.dt)

    return animation_system
