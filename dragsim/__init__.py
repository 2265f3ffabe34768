"""
Projectile Trajectory Simulator with Quadratic Drag
===================================================
Computes the flight path of a projectile launched horizontally from a
given height, under:
  - Gravity (constant, vertical)
  - Quadratic aerodynamic drag (constant sea-level air density)

Integration is fixed-step semi-implicit Euler (dt = 0.01 s) with a hard
step cap, returning time-sampled positions plus flight time and range.
Drag-free runs are checked against the closed-form parabola.
"""

from .environment import (
    GRAVITY, AIR_DENSITY, TIME_STEP, MAX_STEPS,
    SimulationConfig, DEFAULT_CONFIG,
)
from .drag_model import drag_force, drag_coefficient, SHAPE_DRAG_COEFFICIENTS
from .models import (
    SimulationInput, PhysicsState, SimulationOutput, InvalidInputError,
)
from .integrator import simulate, compute_acceleration
from .validation import (
    ballistic_reference, ballistic_flight_time,
    validate_against_ballistic, REFERENCE_BALLISTIC,
)
from .studies import sweep_parameter, compare_shapes, SweepPoint

__version__ = "1.0.0"
__all__ = [
    'SimulationInput', 'PhysicsState', 'SimulationOutput', 'InvalidInputError',
    'SimulationConfig', 'DEFAULT_CONFIG',
    'GRAVITY', 'AIR_DENSITY', 'TIME_STEP', 'MAX_STEPS',
    'simulate', 'compute_acceleration',
    'drag_force', 'drag_coefficient', 'SHAPE_DRAG_COEFFICIENTS',
    'ballistic_reference', 'ballistic_flight_time',
    'validate_against_ballistic', 'REFERENCE_BALLISTIC',
    'sweep_parameter', 'compare_shapes', 'SweepPoint',
]
