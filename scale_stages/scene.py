"""ScaleScene - composes navigation, layout, animation, camera and puzzle."""
from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Any

from scale_stages.animation import AnimationController, make_animation_system
from scale_stages.camera import ViewController, make_camera_system
from scale_stages.catalog import Stage, StageCatalog, default_catalog
from scale_stages.config import ScaleConfig
from scale_stages.layout import INTRO_INDEX, Layout, compute_layout
from scale_stages.loop import TickLoop
from scale_stages.navigation import StageNavigator
from scale_stages.puzzle import OrderingPuzzle
from scale_stages.signals import PUZZLE_COMPLETE, STAGE_CHANGED, SignalBus, make_signal_system
from scale_stages.types import Vec3

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BodyView:
    stage_id: str
    radius: float
    position: Vec3
    rotation_axis: Vec3
    rotation_angle: float = 0.0


@dataclass(frozen=True)
class CameraView:
    position: Vec3
    look_at: Vec3


@dataclass(frozen=True)
class RenderFrame:
    """Read-only snapshot of current values for a renderer."""

    tick_number: int
    active_index: int
    stage: Stage | None
    bodies: tuple[BodyView, ...]
    reference: BodyView | None
    camera: CameraView


class ScaleScene:
    """Owns all mutable state and the tick loop that advances it.

    Systems run in this order every tick: stage animation, camera, signal
    flush. Changing the active stage recomputes the layout immediately and
    retargets both controllers; the visual transition happens over the
    following ticks.
    """

    def __init__(
        self,
        catalog: StageCatalog | None = None,
        config: ScaleConfig | None = None,
        aspect: float = 16 / 9,
        rng: random.Random | None = None,
    ) -> None:
        self.catalog = catalog if catalog is not None else default_catalog()
        self.config = config if config is not None else ScaleConfig()
        self.bus = SignalBus()
        self.navigator = StageNavigator(len(self.catalog))
        self.animation = AnimationController(self.catalog, self.config)
        self.view = ViewController(self.config, aspect)
        self.puzzle = OrderingPuzzle(
            self.catalog, self.config.total_game_items, rng=rng, bus=self.bus
        )
        self._layout = Layout(active_index=INTRO_INDEX)

        self.loop = TickLoop(self, tps=self.config.tps)
        self.loop.add_system(make_animation_system(self.animation))
        self.loop.add_system(make_camera_system(self.view))
        self.loop.add_system(make_signal_system(self.bus))

        self.navigator.on_change(self._on_stage_change)
        self.bus.subscribe(PUZZLE_COMPLETE, self._on_puzzle_complete)

    # -- Wiring --

    def _on_stage_change(self, old: int, new: int) -> None:
        self._layout = compute_layout(self.catalog, new, self.config)
        self.animation.retarget(self._layout)
        self.view.retarget(self._layout)
        stage_id = self.catalog[new].id if new != INTRO_INDEX else None
        self.bus.publish(STAGE_CHANGED, old=old, new=new, stage_id=stage_id)

    def _on_puzzle_complete(self, signal: str, data: dict[str, Any]) -> None:
        logger.info("Puzzle complete, starting stage navigation")
        self.navigator.start()

    # -- Navigation --

    @property
    def layout(self) -> Layout:
        return self._layout

    @property
    def active_index(self) -> int:
        return self.navigator.index

    @property
    def active_stage(self) -> Stage | None:
        if self.navigator.index == INTRO_INDEX:
            return None
        return self.catalog[self.navigator.index]

    def start(self) -> bool:
        return self.navigator.start()

    def advance(self) -> bool:
        return self.navigator.advance()

    def retreat(self) -> bool:
        return self.navigator.retreat()

    def reset(self) -> bool:
        return self.navigator.reset()

    def set_aspect(self, aspect: float) -> None:
        self.view.set_aspect(aspect)

    # -- Ticking --

    def step(self) -> None:
        self.loop.step()

    def run(self, n: int) -> int:
        return self.loop.run(n)

    def advance_time(self, seconds: float) -> int:
        return self.loop.advance_time(seconds)

    # -- Output --

    def frame(self) -> RenderFrame:
        bodies = tuple(
            BodyView(
                stage_id=entity.stage_id,
                radius=entity.radius,
                position=entity.position,
                rotation_axis=entity.rotation_axis,
                rotation_angle=entity.rotation_angle,
            )
            for entity in self.animation.visible()
        )
        reference = None
        if self._layout.reference is not None:
            entry = self._layout.reference
            reference = BodyView(
                stage_id=entry.stage_id,
                radius=entry.radius,
                position=entry.position,
                rotation_axis=self.catalog.get(entry.stage_id).rotation_axis,
            )
        camera = self.view.state
        return RenderFrame(
            tick_number=self.loop.clock.tick_number,
            active_index=self.navigator.index,
            stage=self.active_stage,
            bodies=bodies,
            reference=reference,
            camera=CameraView(position=camera.position, look_at=camera.look_at),
        )
