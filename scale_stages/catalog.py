"""Stage catalog: the ordered, immutable list of compared quantities."""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, Sequence

from scale_stages.types import CatalogError, Vec3


@dataclass(frozen=True)
class Stage:
    """One quantity in the sequence.

    Numeric stages carry a ``magnitude``. The terminal reference stage has
    ``magnitude=None`` and a fixed absolute ``radius`` and ``position``.
    """

    id: str
    label: str
    magnitude: float | None
    rotation_axis: Vec3 = (0.0, 1.0, 0.0)
    scientific: str = ""
    value_label: str = ""
    color: str = "#ffffff"
    emissive: str = "#000000"
    particle_count: int = 400
    radius: float | None = None
    position: Vec3 | None = None

    @property
    def is_reference(self) -> bool:
        return self.magnitude is None


class StageCatalog:
    """Validated, read-only sequence of stages.

    Numeric magnitudes must be finite, strictly positive and strictly
    increasing with index. At most one reference stage is allowed and it
    must come last.
    """

    def __init__(self, stages: Sequence[Stage]) -> None:
        self._stages: tuple[Stage, ...] = tuple(stages)
        self._by_id: dict[str, int] = {}
        self._validate()

    def _validate(self) -> None:
        if not self._stages:
            raise CatalogError(None, "Catalog must contain at least one stage")

        previous: float | None = None
        for index, stage in enumerate(self._stages):
            if stage.id in self._by_id:
                raise CatalogError(stage.id, f"Duplicate stage id {stage.id!r}")
            self._by_id[stage.id] = index

            if stage.is_reference:
                if index != len(self._stages) - 1:
                    raise CatalogError(
                        stage.id, f"Reference stage {stage.id!r} must be the last stage"
                    )
                if stage.radius is None or stage.radius <= 0 or stage.position is None:
                    raise CatalogError(
                        stage.id,
                        f"Reference stage {stage.id!r} needs a positive radius and a position",
                    )
                continue

            magnitude = stage.magnitude
            if not math.isfinite(magnitude) or magnitude <= 0:
                raise CatalogError(
                    stage.id, f"Stage {stage.id!r} has non-positive magnitude {magnitude!r}"
                )
            if previous is not None and magnitude <= previous:
                raise CatalogError(
                    stage.id,
                    f"Stage {stage.id!r} magnitude {magnitude!r} does not exceed "
                    f"the previous stage ({previous!r})",
                )
            previous = magnitude

        if self._stages[0].is_reference:
            raise CatalogError(self._stages[0].id, "Catalog needs at least one numeric stage")

    def __len__(self) -> int:
        return len(self._stages)

    def __getitem__(self, index: int) -> Stage:
        return self._stages[index]

    def __iter__(self) -> Iterator[Stage]:
        return iter(self._stages)

    def __contains__(self, stage_id: object) -> bool:
        return stage_id in self._by_id

    @property
    def stages(self) -> tuple[Stage, ...]:
        return self._stages

    @property
    def reference_index(self) -> int | None:
        if self._stages[-1].is_reference:
            return len(self._stages) - 1
        return None

    @property
    def last_numeric_index(self) -> int:
        if self.reference_index is not None:
            return len(self._stages) - 2
        return len(self._stages) - 1

    def index_of(self, stage_id: str) -> int:
        """Return the index of ``stage_id``. Raises KeyError if unknown."""
        try:
            return self._by_id[stage_id]
        except KeyError:
            raise KeyError(f"Unknown stage {stage_id!r}") from None

    def get(self, stage_id: str) -> Stage:
        return self._stages[self.index_of(stage_id)]

    def numeric(self) -> tuple[Stage, ...]:
        return self._stages[: self.last_numeric_index + 1]


def scientific_parts(text: str) -> tuple[str, str] | None:
    """Split ``"A x 10^B"`` or ``"10^B"`` into ``(base, exponent)``.

    ``base`` is empty for the bare power form. Returns None for anything
    else (e.g. ``"Reference"``).
    """
    if "x 10^" in text:
        base, exponent = text.split("x 10^", 1)
        return base.strip(), exponent.strip()
    if text.startswith("10^"):
        return "", text[3:].strip()
    return None


DEFAULT_STAGES: tuple[Stage, ...] = (
    Stage(
        id="humans",
        label="Humans on Earth",
        magnitude=8e9,
        rotation_axis=(0.0, 1.0, 0.0),
        scientific="8 x 10^9",
        value_label="8,000,000,000",
        color="#00ff44",
        emissive="#004400",
        particle_count=400,
    ),
    Stage(
        id="trees",
        label="Trees on Earth",
        magnitude=3.04e12,
        rotation_axis=(0.0, 1.0, 0.5),
        scientific="3 x 10^12",
        value_label="3,040,000,000,000",
        color="#228B22",
        emissive="#004400",
        particle_count=400,
    ),
    Stage(
        id="cells",
        label="Cells in Human Body",
        magnitude=3.72e13,
        rotation_axis=(1.0, 1.0, 1.0),
        scientific="3.7 x 10^13",
        value_label="37,200,000,000,000",
        color="#FF6347",
        emissive="#550000",
        particle_count=400,
    ),
    Stage(
        id="ants",
        label="Ants on Earth",
        magnitude=2e16,
        rotation_axis=(1.0, 0.0, 0.0),
        scientific="2 x 10^16",
        value_label="20,000,000,000,000,000",
        color="#a0522d",
        emissive="#5a2d0c",
        particle_count=400,
    ),
    Stage(
        id="seconds",
        label="Seconds since Big Bang",
        magnitude=4e17,
        rotation_axis=(0.0, 0.0, 1.0),
        scientific="4 x 10^17",
        value_label="430,000,000,000,000,000",
        color="#888888",
        emissive="#444444",
        particle_count=600,
    ),
    Stage(
        id="sand",
        label="Grains of Sand",
        magnitude=7.5e18,
        rotation_axis=(0.5, 1.0, 0.0),
        scientific="7.5 x 10^18",
        value_label="7,500,000,000,000,000,000",
        color="#ffcc00",
        emissive="#664400",
        particle_count=800,
    ),
    Stage(
        id="water",
        label="Drops of Water in Oceans",
        magnitude=2.6e25,
        rotation_axis=(1.0, 1.0, 0.0),
        scientific="2.6 x 10^25",
        value_label="26,000,000,000,000,000,000,000,000",
        color="#00aaff",
        emissive="#004488",
        particle_count=1600,
    ),
    Stage(
        id="atoms",
        label="Atoms on Earth",
        magnitude=1e50,
        rotation_axis=(0.0, 1.0, 1.0),
        scientific="10^50",
        value_label=(
            "100,000,000,000,000,000,000,000,000,000,000,000,000,000,000,000,000"
        ),
        color="#0066ff",
        emissive="#001133",
        particle_count=5000,
    ),
    Stage(
        id="milkyway",
        label="Atoms in Milky Way",
        magnitude=1e67,
        rotation_axis=(1.0, 0.0, 1.0),
        scientific="10^67",
        value_label=(
            "10,000,000,000,000,000,000,000,000,000,000,000,000,000,000,000,000,000,"
            "000,000,000,000,000"
        ),
        color="#aa88ff",
        emissive="#220044",
        particle_count=10000,
    ),
    Stage(
        id="cards",
        label="# of Shuffles in 52-cards deck",
        magnitude=8e67,
        rotation_axis=(1.0, 0.0, 0.0),
        scientific="8 x 10^67",
        value_label=(
            "80,000,000,000,000,000,000,000,000,000,000,000,000,000,000,000,000,000,"
            "000,000,000,000,000"
        ),
        color="#00ffff",
        emissive="#004444",
        particle_count=15000,
    ),
    Stage(
        id="sun",
        label="The Sun",
        magnitude=None,
        rotation_axis=(0.0, 1.0, 0.0),
        scientific="Reference",
        color="#ffaa00",
        emissive="#ff4400",
        particle_count=0,
        radius=400.0,
        position=(0.0, 0.0, -400.0),
    ),
)


def default_catalog() -> StageCatalog:
    return StageCatalog(DEFAULT_STAGES)
