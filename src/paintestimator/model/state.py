"""
Project State (Data Model)
==========================
This module defines the central data structure for the running application.

Why is this file needed?
------------------------
1. State Management: It holds the surfaces, the entered parameters and the
   last computed result in one place.
2. Consistency: Every edit clears the last result, so the results panel never
   shows numbers that belong to different inputs.
3. Decoupling: Views read from this object and call its methods to change it.

Classes:
    ProjectState: The main container class.
"""
from __future__ import annotations

from dataclasses import dataclass, field
import logging
from typing import Dict, Optional, Union

from paintestimator.model.estimator import EstimateResult, estimate_from_parameters, surface_area
from paintestimator.model.parameters import EstimateParameters
from paintestimator.model.surfaces import Surface, SurfaceKind, SurfaceList

logger = logging.getLogger(__name__)


def _default_surfaces() -> Dict[SurfaceKind, SurfaceList]:
    return {kind: SurfaceList(kind) for kind in SurfaceKind}


@dataclass
class ProjectState:
    """
    Holds the entire state of the open estimate.
    Pass this instance to your Views.
    """
    surfaces: Dict[SurfaceKind, SurfaceList] = field(default_factory=_default_surfaces)
    parameters: EstimateParameters = field(default_factory=EstimateParameters)
    result: Optional[EstimateResult] = None

    @property
    def walls(self) -> SurfaceList:
        return self.surfaces[SurfaceKind.WALL]

    @property
    def doors(self) -> SurfaceList:
        return self.surfaces[SurfaceKind.DOOR]

    @property
    def windows(self) -> SurfaceList:
        return self.surfaces[SurfaceKind.WINDOW]

    # --- SURFACES ---

    def add_surface(self, kind: SurfaceKind) -> Surface:
        surface = self.surfaces[kind].add()
        self._invalidate_result()
        return surface

    def remove_surface(self, kind: SurfaceKind, surface_id: int) -> Surface:
        surface = self.surfaces[kind].remove(surface_id)
        self._invalidate_result()
        return surface

    def update_surface(
        self,
        kind: SurfaceKind,
        surface_id: int,
        height: Optional[float] = None,
        width: Optional[float] = None
    ) -> Surface:
        surface = self.surfaces[kind].update(surface_id, height=height, width=width)
        self._invalidate_result()
        return surface

    def area_breakdown(self) -> Dict[SurfaceKind, float]:
        return {kind: surface_area(lst) for kind, lst in self.surfaces.items()}

    # --- PARAMETERS ---

    def set_parameter(self, name: str, value: Optional[Union[float, int]]) -> None:
        self.parameters.set(name, value)
        self._invalidate_result()

    # --- CALCULATION ---

    def calculate(self) -> EstimateResult:
        """
        Validates the parameters and runs the estimator.
        Raises MissingParametersError and leaves the result empty if any
        parameter is missing.
        """
        resolved = self.parameters.validate()
        self.result = estimate_from_parameters(self.walls, self.doors, self.windows, resolved)
        logger.info(
            f"Estimate computed: area={self.result.paintable_area:.2f}, "
            f"cost={self.result.total_cost:.2f}, hours={self.result.total_hours_needed:.2f}"
        )
        return self.result

    def _invalidate_result(self) -> None:
        self.result = None

    def reset(self) -> None:
        """Clear all data for a new estimate"""
        self.surfaces = _default_surfaces()
        self.parameters = EstimateParameters()
        self.result = None
        logger.info("Project state has been reset.")
