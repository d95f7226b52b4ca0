"""
Coverage & Cost Parameters
==========================
Holds the coverage, cost and crew values entered in the form.

Logic:
1. While the user types, every field is optional (None = not entered yet).
2. Before estimating, 'validate()' turns the optional form into a
   ResolvedParameters instance in which every value is strictly positive.
   The estimator is never invoked with anything else.
"""
from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Dict, List, Optional, Union
import logging
import math

logger = logging.getLogger(__name__)


# Human readable labels used by the form and by validation messages
PARAMETER_LABELS: Dict[str, str] = {
    "primer_coverage": "Primer Coverage",
    "paint_coverage": "Paint Coverage",
    "coat_count": "Number of Coats",
    "primer_unit_cost": "Primer Cost",
    "paint_unit_cost": "Paint Cost",
    "worker_count": "Number of Workers",
}

COUNT_PARAMETERS = ("coat_count", "worker_count")


class MissingParametersError(ValueError):
    """Raised when one or more parameters are missing or not positive."""

    def __init__(self, names: List[str]) -> None:
        self.names = names
        labels = ", ".join(PARAMETER_LABELS.get(n, n) for n in names)
        super().__init__(f"Please enter a positive value for: {labels}")


@dataclass(frozen=True)
class ResolvedParameters:
    primer_coverage: float   # m² per can
    paint_coverage: float    # m² per can
    primer_unit_cost: float  # per can
    paint_unit_cost: float   # per can
    worker_count: int
    coat_count: int


@dataclass
class EstimateParameters:
    primer_coverage: Optional[float] = None
    paint_coverage: Optional[float] = None
    primer_unit_cost: Optional[float] = None
    paint_unit_cost: Optional[float] = None
    worker_count: Optional[int] = None
    coat_count: Optional[int] = None

    def set(self, name: str, value: Optional[Union[float, int]]) -> None:
        if name not in PARAMETER_LABELS:
            raise KeyError(f"Unknown parameter '{name}'.")
        setattr(self, name, value)

    def missing(self) -> List[str]:
        """Names of the parameters that are not set to a positive value."""
        missing = []
        for f in fields(self):
            value = getattr(self, f.name)
            if value is None or not math.isfinite(value) or value <= 0:
                missing.append(f.name)
            elif f.name in COUNT_PARAMETERS and not float(value).is_integer():
                missing.append(f.name)
        return missing

    def is_complete(self) -> bool:
        return not self.missing()

    def validate(self) -> ResolvedParameters:
        missing = self.missing()
        if missing:
            logger.warning(f"Cannot estimate, missing parameters: {missing}")
            raise MissingParametersError(missing)

        return ResolvedParameters(
            primer_coverage=float(self.primer_coverage),
            paint_coverage=float(self.paint_coverage),
            primer_unit_cost=float(self.primer_unit_cost),
            paint_unit_cost=float(self.paint_unit_cost),
            worker_count=int(self.worker_count),
            coat_count=int(self.coat_count),
        )
