"""Shared type aliases, tick context, and errors for scale-stages."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

Vec3 = tuple[float, float, float]


@dataclass(frozen=True, slots=True)
class TickContext:
    tick_number: int
    dt: float
    elapsed: float
    request_stop: Callable[[], None]


class CatalogError(ValueError):
    """Raised when stage data breaks the catalog contract."""

    def __init__(self, stage_id: str | None, message: str) -> None:
        self.stage_id = stage_id
        super().__init__(message)


class ConfigError(ValueError):
    """Raised on invalid tuning values or unknown config keys."""


if TYPE_CHECKING:
    from scale_stages.scene import ScaleScene

System = Callable[["ScaleScene", TickContext], None]
