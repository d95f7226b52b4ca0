"""
Paint Estimator
===============
The pure estimation formula: surfaces and parameters in, result out.

Algorithm:
1. Area of each surface kind = sum of height * width.
2. Paintable area = wall area - door area - window area (not clamped).
3. Volume = coats * paintable area / coverage, for primer and paint.
4. Cans = ceiling of volume.
5. Cost = primer cans * primer unit cost + paint cans * paint unit cost.
6. Hours = (paintable area * coats / painter throughput) / workers.

The function has no side effects. It does not guard against zero coverage,
workers or coats; use 'estimate_from_parameters' with validated parameters.
"""
from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Any, Dict, Iterable, TYPE_CHECKING
import logging

import numpy as np

from paintestimator.config import PAINTER_THROUGHPUT_M2_PER_HOUR
from paintestimator.model.surfaces import Surface

if TYPE_CHECKING:
    from paintestimator.model.parameters import ResolvedParameters

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EstimateResult:
    paintable_area: float          # m²
    primer_volume_needed: float    # cans (coverage is per can)
    paint_volume_needed: float
    primer_cans_needed: int
    paint_cans_needed: int
    total_cost: float
    total_hours_needed: float

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def surface_area(surfaces: Iterable[Surface]) -> float:
    """Sum of height * width over the given surfaces."""
    dims = np.array([(s.height, s.width) for s in surfaces], dtype=float).reshape(-1, 2)
    return float(np.sum(dims[:, 0] * dims[:, 1]))


def estimate(
    walls: Iterable[Surface],
    doors: Iterable[Surface],
    windows: Iterable[Surface],
    primer_coverage: float,
    paint_coverage: float,
    primer_unit_cost: float,
    paint_unit_cost: float,
    worker_count: int,
    coat_count: int,
) -> EstimateResult:
    wall_area = surface_area(walls)
    door_area = surface_area(doors)
    window_area = surface_area(windows)
    paintable_area = wall_area - door_area - window_area

    if paintable_area < 0:
        logger.warning(
            f"Openings ({door_area + window_area:.2f} m²) exceed wall area ({wall_area:.2f} m²)"
        )

    primer_volume = coat_count * paintable_area / primer_coverage
    paint_volume = coat_count * paintable_area / paint_coverage

    primer_cans = int(np.ceil(primer_volume))
    paint_cans = int(np.ceil(paint_volume))

    total_cost = primer_cans * primer_unit_cost + paint_cans * paint_unit_cost

    hours = paintable_area * coat_count / PAINTER_THROUGHPUT_M2_PER_HOUR
    total_hours = hours / worker_count

    return EstimateResult(
        paintable_area=paintable_area,
        primer_volume_needed=primer_volume,
        paint_volume_needed=paint_volume,
        primer_cans_needed=primer_cans,
        paint_cans_needed=paint_cans,
        total_cost=total_cost,
        total_hours_needed=total_hours,
    )


def estimate_from_parameters(
    walls: Iterable[Surface],
    doors: Iterable[Surface],
    windows: Iterable[Surface],
    parameters: ResolvedParameters,
) -> EstimateResult:
    return estimate(
        walls,
        doors,
        windows,
        primer_coverage=parameters.primer_coverage,
        paint_coverage=parameters.paint_coverage,
        primer_unit_cost=parameters.primer_unit_cost,
        paint_unit_cost=parameters.paint_unit_cost,
        worker_count=parameters.worker_count,
        coat_count=parameters.coat_count,
    )
