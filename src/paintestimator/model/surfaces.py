"""
Measured Surfaces
=================
Defines the rectangular surfaces entered by the user (walls, doors, windows)
and the row-keyed lists that hold them.

Why is this file needed?
------------------------
1. Identity: Every row carries an identifier issued by its list. Edits and
   removals address rows by identifier, never by position, so removing a row
   can never shift the meaning of another.
2. Invariant: A list never becomes empty. The form always shows at least one
   row per surface kind.

Classes:
    SurfaceKind: The three surface categories.
    Surface: One measured rectangle.
    SurfaceList: Ordered arena of surfaces with monotonically issued ids.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Dict, Iterator, List, Optional
import logging
import math

logger = logging.getLogger(__name__)


class SurfaceKind(StrEnum):
    WALL = "Wall"
    DOOR = "Door"
    WINDOW = "Window"

    @property
    def label(self) -> str:
        return self.value

    @property
    def plural(self) -> str:
        return f"{self.value}s"


class LastSurfaceError(ValueError):
    """Raised when removing a surface would leave its list empty."""


class InvalidDimensionError(ValueError):
    """Raised when a height or width is negative or not a finite number."""


def _check_dimension(name: str, value: float) -> float:
    if not math.isfinite(value) or value < 0:
        raise InvalidDimensionError(f"{name.capitalize()} must be a finite number >= 0, got {value}.")
    return float(value)


@dataclass
class Surface:
    id: int
    height: float = 0.0  # m
    width: float = 0.0   # m

    @property
    def area(self) -> float:
        return self.height * self.width


class SurfaceList:
    """
    Ordered collection of surfaces of a single kind.
    A new list starts with a single zero-sized surface with id 1.
    """

    def __init__(self, kind: SurfaceKind) -> None:
        self.kind = kind
        self._surfaces: Dict[int, Surface] = {}
        self._next_id: int = 1
        self.add()

    def __iter__(self) -> Iterator[Surface]:
        return iter(list(self._surfaces.values()))

    def __len__(self) -> int:
        return len(self._surfaces)

    def __contains__(self, surface_id: object) -> bool:
        return surface_id in self._surfaces

    @property
    def ids(self) -> List[int]:
        return list(self._surfaces.keys())

    def get(self, surface_id: int) -> Surface:
        try:
            return self._surfaces[surface_id]
        except KeyError:
            raise KeyError(f"{self.kind.label} with id {surface_id} does not exist.") from None

    def add(self, height: float = 0.0, width: float = 0.0) -> Surface:
        surface = Surface(
            id=self._next_id,
            height=_check_dimension("height", height),
            width=_check_dimension("width", width),
        )
        self._surfaces[surface.id] = surface
        self._next_id += 1
        logger.debug(f"Added {self.kind.label} {surface.id}")
        return surface

    def remove(self, surface_id: int) -> Surface:
        surface = self.get(surface_id)
        if len(self._surfaces) == 1:
            raise LastSurfaceError(f"At least one {self.kind.label.lower()} must remain.")
        del self._surfaces[surface_id]
        logger.debug(f"Removed {self.kind.label} {surface_id}")
        return surface

    def update(self, surface_id: int, height: Optional[float] = None, width: Optional[float] = None) -> Surface:
        surface = self.get(surface_id)
        # Both values are checked before either is stored
        new_height = surface.height if height is None else _check_dimension("height", height)
        new_width = surface.width if width is None else _check_dimension("width", width)
        surface.height, surface.width = new_height, new_width
        return surface

    def can_remove(self) -> bool:
        return len(self._surfaces) > 1

    def position_of(self, surface_id: int) -> int:
        """Zero-based row position of a surface, used for labels like 'Wall 2'."""
        return self.ids.index(self.get(surface_id).id)
