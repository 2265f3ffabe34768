"""
Parameter Sensitivity Studies
=============================
Re-run the integrator while varying one launch parameter at a time.

Typical uses:
  - drag coefficient / area sweeps  (range shrinks as drag grows)
  - mass sweeps                      (range approaches the drag-free
                                      parabola as mass grows)
  - shape comparison over the Cd presets
"""

from dataclasses import dataclass, fields, replace
from typing import Dict, Iterable, List

from .drag_model import SHAPE_DRAG_COEFFICIENTS, drag_coefficient
from .environment import SimulationConfig, DEFAULT_CONFIG
from .integrator import simulate
from .models import SimulationInput, SimulationOutput

SWEEPABLE_FIELDS = tuple(f.name for f in fields(SimulationInput))


@dataclass
class SweepPoint:
    """Summary of one run in a sweep."""
    value: float
    total_time: float      # s
    max_distance: float    # m


def sweep_parameter(base: SimulationInput, field: str, values: Iterable[float],
                    config: SimulationConfig = DEFAULT_CONFIG) -> List[SweepPoint]:
    """
    Simulate `base` once per value with `field` replaced.

    Raises ValueError for an unknown field name; invalid values raise
    InvalidInputError from the integrator.
    """
    if field not in SWEEPABLE_FIELDS:
        raise ValueError(
            f"Unknown field '{field}'. Available: {list(SWEEPABLE_FIELDS)}"
        )

    points = []
    for value in values:
        out = simulate(replace(base, **{field: value}), config)
        points.append(SweepPoint(
            value=value,
            total_time=out.total_time,
            max_distance=out.max_distance,
        ))
    return points


def compare_shapes(base: SimulationInput, shapes: Iterable[str] = None,
                   config: SimulationConfig = DEFAULT_CONFIG) -> Dict[str, SimulationOutput]:
    """Run `base` with each preset shape's drag coefficient."""
    if shapes is None:
        shapes = SHAPE_DRAG_COEFFICIENTS.keys()

    results = {}
    for shape in shapes:
        cd = drag_coefficient(shape)
        results[shape] = simulate(replace(base, drag_coefficient=cd), config)
    return results
