"""Small catalogs shared by the tests."""
from __future__ import annotations

from scale_stages import Stage, StageCatalog


def make_catalog(*pairs: tuple[str, float], reference: bool = False) -> StageCatalog:
    """Numeric stages from (id, magnitude) pairs, optionally ending on a reference stage."""
    stages = [Stage(id=stage_id, label=stage_id.title(), magnitude=m) for stage_id, m in pairs]
    if reference:
        stages.append(
            Stage(
                id="ref",
                label="Reference",
                magnitude=None,
                radius=50.0,
                position=(0.0, 0.0, -50.0),
            )
        )
    return StageCatalog(stages)


def doubling_catalog(count: int = 4, reference: bool = False) -> StageCatalog:
    """Stages s0..s(n-1) with magnitudes 1, 2, 4, ... (no clamping at default radii)."""
    return make_catalog(*((f"s{i}", float(2**i)) for i in range(count)), reference=reference)
