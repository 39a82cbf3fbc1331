"""Camera framing for the active stage, smoothed like the stage entities."""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

from scale_stages import vec
from scale_stages.config import ScaleConfig
from scale_stages.layout import INTRO_INDEX, Layout
from scale_stages.types import TickContext, Vec3

if TYPE_CHECKING:
    from scale_stages.scene import ScaleScene

_WORLD_UP: Vec3 = (0.0, 1.0, 0.0)
_NEAR = 1e-6


@dataclass(frozen=True)
class CameraTarget:
    position: Vec3
    look_at: Vec3


@dataclass
class CameraState:
    position: Vec3
    look_at: Vec3


def view_distance(size: float, fov: float) -> float:
    """Pinhole distance at which ``size`` spans a field of view of ``fov`` degrees."""
    return size / (2.0 * math.tan(math.radians(fov) / 2.0))


def frame_target(layout: Layout, aspect: float, config: ScaleConfig) -> CameraTarget:
    """Camera pose that frames the active stage of ``layout``.

    The reference stage is fitted by the larger of its width- and
    height-derived distances, times ``config.reference_margin``. A numeric
    stage is fitted so ``frame_height_factor`` active radii fill the view
    height, lifted by ``vertical_offset_factor`` radii.
    """
    if aspect <= 0:
        raise ValueError("aspect must be positive")

    if layout.active_index == INTRO_INDEX:
        return CameraTarget(config.intro_camera, config.intro_look_at)

    if layout.reference is not None:
        size = config.reference_view_size
        distance = max(
            view_distance(size / aspect, config.fov),
            view_distance(size, config.fov),
        ) * config.reference_margin
        focus_x = config.reference_focus_x
        return CameraTarget((focus_x, 0.0, distance), (focus_x, 0.0, 0.0))

    active = layout.active
    if active is None:
        return CameraTarget(config.fallback_camera, (0.0, 0.0, 0.0))

    x = active.center_offset
    radius = active.radius
    distance = view_distance(radius * config.frame_height_factor, config.fov)
    return CameraTarget(
        (x, radius * config.vertical_offset_factor, distance),
        (x, 0.0, 0.0),
    )


class ViewController:
    """Smooths a CameraState toward the framing of the current layout."""

    def __init__(self, config: ScaleConfig, aspect: float = 16 / 9) -> None:
        self._config = config
        self._aspect = aspect
        self._layout = Layout(active_index=INTRO_INDEX)
        self._target = frame_target(self._layout, aspect, config)
        self.state = CameraState(self._target.position, self._target.look_at)

    @property
    def target(self) -> CameraTarget:
        return self._target

    @property
    def aspect(self) -> float:
        return self._aspect

    def retarget(self, layout: Layout) -> None:
        self._layout = layout
        self._target = frame_target(layout, self._aspect, self._config)

    def set_aspect(self, aspect: float) -> None:
        self._target = frame_target(self._layout, aspect, self._config)
        self._aspect = aspect

    def step(self, dt: float) -> None:
        factor = vec.smoothing_factor(self._config.camera_smooth_rate, dt)
        self.state.position = vec.approach_vec(
            self.state.position, self._target.position, factor
        )
        self.state.look_at = vec.approach_vec(
            self.state.look_at, self._target.look_at, factor
        )


def make_camera_system(
    controller: ViewController,
) -> Callable[[ScaleScene, TickContext], None]:
    def camera_system(scene: ScaleScene, ctx: TickContext) -> None:
        controller.step(ctx.dt)

    return camera_system


def project(
    position: Vec3,
    look_at: Vec3,
    point: Vec3,
    viewport: tuple[int, int],
    fov: float,
) -> tuple[float, float, float] | None:
    """Project ``point`` through a look-at perspective camera.

    Returns ``(screen_x, screen_y, pixels_per_unit)`` for a viewport of
    ``(width, height)`` pixels, or None when the point is behind the camera.
    """
    forward = vec.normalize(vec.sub(look_at, position))
    right = vec.normalize(vec.cross(forward, _WORLD_UP))
    up = vec.cross(right, forward)

    rel = vec.sub(point, position)
    depth = vec.dot(rel, forward)
    if depth <= _NEAR:
        return None

    width, height = viewport
    focal = (height / 2.0) / math.tan(math.radians(fov) / 2.0)
    pixels_per_unit = focal / depth
    screen_x = width / 2.0 + vec.dot(rel, right) * pixels_per_unit
    screen_y = height / 2.0 - vec.dot(rel, up) * pixels_per_unit
    return screen_x, screen_y, pixels_per_unit
