import os

# Widgets are created without a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest

from paintestimator.model.parameters import EstimateParameters
from paintestimator.model.state import ProjectState
from paintestimator.model.surfaces import Surface


@pytest.fixture(scope="session")
def qapp():
    from paintestimator.application import create_app
    return create_app()


@pytest.fixture
def example_walls():
    return [Surface(id=1, height=3.0, width=2.0)]


@pytest.fixture
def example_doors():
    return [Surface(id=1, height=1.0, width=2.0)]


@pytest.fixture
def complete_parameters():
    return EstimateParameters(
        primer_coverage=10.0,
        paint_coverage=5.0,
        primer_unit_cost=20.0,
        paint_unit_cost=30.0,
        worker_count=2,
        coat_count=1,
    )


@pytest.fixture
def example_state(complete_parameters):
    """Wall 3 x 2, door 1 x 2, empty window row, all parameters entered."""
    state = ProjectState()
    wall_id = state.walls.ids[0]
    door_id = state.doors.ids[0]
    state.update_surface(state.walls.kind, wall_id, height=3.0, width=2.0)
    state.update_surface(state.doors.kind, door_id, height=1.0, width=2.0)
    state.parameters = complete_parameters
    return state
