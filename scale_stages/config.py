"""Tuning configuration dataclass."""
from __future__ import annotations

import dataclasses
import math
from dataclasses import dataclass
from typing import Any, Mapping

from scale_stages.types import ConfigError, Vec3

_POSITIVE_FIELDS = (
    "base_radius",
    "min_radius",
    "entry_radius",
    "smooth_rate",
    "camera_smooth_rate",
    "fov",
    "frame_height_factor",
    "reference_view_size",
    "reference_margin",
    "total_game_items",
    "tps",
)

_VECTOR_FIELDS = ("intro_camera", "intro_look_at", "fallback_camera")


def _require_finite(name: str, value: Any) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ConfigError(f"{name} must be a number, got {value!r}")
    if not math.isfinite(value):
        raise ConfigError(f"{name} must be finite, got {value!r}")


@dataclass(frozen=True)
class ScaleConfig:
    """Immutable tuning values for layout, animation, camera and puzzle.

    Attributes:
        base_radius: Radius of the active stage.
        gap: Visual gap between neighbouring stages.
        min_radius: Floor for ratio-derived radii.
        entry_radius: Oversized starting radius of a newly activated stage.
        smooth_rate: Per-second smoothing rate for stage radius and position.
        camera_smooth_rate: Per-second smoothing rate for the camera.
        spin_rate: Radians per second each stage turns around its axis.
        fov: Vertical field of view in degrees.
        frame_height_factor: On-screen height, in active radii, of a numeric stage.
        vertical_offset_factor: Camera lift, in active radii, for three-quarter framing.
        reference_view_size: World size the reference stage view must fit.
        reference_margin: Multiplier applied to the reference view distance.
        reference_focus_x: Horizontal point the camera looks at on the reference stage.
        intro_camera: Camera position before navigation starts.
        intro_look_at: Camera look-at point before navigation starts.
        fallback_camera: Camera position when the active stage has no entry.
        total_game_items: Number of stages used by the ordering puzzle.
        tps: Ticks per second of the loop.
    """

    base_radius: float = 4.0
    gap: float = 1.0
    min_radius: float = 0.02
    entry_radius: float = 60.0
    smooth_rate: float = 2.0
    camera_smooth_rate: float = 1.5
    spin_rate: float = 0.2
    fov: float = 60.0
    frame_height_factor: float = 4.0
    vertical_offset_factor: float = 0.5
    reference_view_size: float = 1000.0
    reference_margin: float = 1.2
    reference_focus_x: float = 355.0
    intro_camera: Vec3 = (0.0, 0.0, 15.0)
    intro_look_at: Vec3 = (0.0, 0.0, 0.0)
    fallback_camera: Vec3 = (0.0, 0.0, 10.0)
    total_game_items: int = 10
    tps: int = 60

    def __post_init__(self) -> None:
        for f in dataclasses.fields(self):
            value = getattr(self, f.name)
            if f.name in _VECTOR_FIELDS:
                if not isinstance(value, (tuple, list)) or len(value) != 3:
                    raise ConfigError(f"{f.name} must have 3 components")
                for component in value:
                    _require_finite(f.name, component)
            else:
                _require_finite(f.name, value)
        for name in _POSITIVE_FIELDS:
            if getattr(self, name) <= 0:
                raise ConfigError(f"{name} must be positive")
        if self.gap < 0:
            raise ConfigError("gap must not be negative")
        if self.min_radius >= self.base_radius:
            raise ConfigError("min_radius must be smaller than base_radius")
        if self.fov >= 180:
            raise ConfigError("fov must be below 180 degrees")

    @property
    def dt(self) -> float:
        return 1.0 / self.tps

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ScaleConfig:
        """Build a config from plain data, e.g. a parsed JSON object.

        Raises ``ConfigError`` on unknown keys or invalid values.
        """
        known = {f.name for f in dataclasses.fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigError(f"Unknown config keys: {', '.join(unknown)}")
        values = dict(data)
        for name in _VECTOR_FIELDS:
            if name in values:
                try:
                    values[name] = tuple(float(c) for c in values[name])
                except (TypeError, ValueError) as exc:
                    raise ConfigError(f"{name} must be a list of 3 numbers") from exc
        return cls(**values)
