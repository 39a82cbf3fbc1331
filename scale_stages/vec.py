"""3-vector helpers operating on plain float tuples."""
from __future__ import annotations

from scale_stages.types import Vec3


def sub(a: Vec3, b: Vec3) -> Vec3:
    return (a[0] - b[0], a[1] - b[1], a[2] - b[2])


def scale(v: Vec3, s: float) -> Vec3:
    return (v[0] * s, v[1] * s, v[2] * s)


def dot(a: Vec3, b: Vec3) -> float:
    return a[0] * b[0] + a[1] * b[1] + a[2] * b[2]


def cross(a: Vec3, b: Vec3) -> Vec3:
    return (
        a[1] * b[2] - a[2] * b[1],
        a[2] * b[0] - a[0] * b[2],
        a[0] * b[1] - a[1] * b[0],
    )


def magnitude(v: Vec3) -> float:
    return dot(v, v) ** 0.5


def normalize(v: Vec3) -> Vec3:
    mag = magnitude(v)
    if mag == 0.0:
        return v
    return scale(v, 1.0 / mag)


def approach(current: float, target: float, factor: float) -> float:
    """Move ``current`` toward ``target`` by ``factor`` of the remaining gap."""
    return current + (target - current) * factor


def approach_vec(current: Vec3, target: Vec3, factor: float) -> Vec3:
    """Per-axis ``approach``: a straight-line step toward ``target``."""
    return (
        approach(current[0], target[0], factor),
        approach(current[1], target[1], factor),
        approach(current[2], target[2], factor),
    )


def smoothing_factor(rate: float, dt: float) -> float:
    """Fraction of the remaining gap closed in one tick, capped at 1."""
    return min(1.0, rate * dt)
