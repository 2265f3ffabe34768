"""
Simulation Records
==================
Immutable value types exchanged with the integrator:

  - SimulationInput  — launch parameters (validated before integrating)
  - PhysicsState     — one trajectory sample (t, x, y)
  - SimulationOutput — ordered samples + flight time and range

Wire format (JSON, camelCase keys):

    input : {"initialVelocity", "initialHeight", "mass",
             "dragCoefficient", "area"}
    output: {"trajectory": [{"time", "positionX", "positionY"}, ...],
             "totalTime", "maxDistance"}

Coordinate system:
  x = horizontal distance from the launch point
  y = height above ground (up positive)
"""

import math
import numbers
from dataclasses import dataclass, fields
from typing import Mapping, Sequence, Tuple

import numpy as np


class InvalidInputError(ValueError):
    """Raised when simulation inputs cannot produce a meaningful trajectory."""


# Python attribute name -> wire (JSON) key
_INPUT_KEYS = {
    'initial_velocity': 'initialVelocity',
    'initial_height': 'initialHeight',
    'mass': 'mass',
    'drag_coefficient': 'dragCoefficient',
    'area': 'area',
}


@dataclass(frozen=True)
class SimulationInput:
    """
    Launch parameters for a horizontal throw.
    """
    initial_velocity: float = 50.0    # m/s  horizontal, negative = reversed
    initial_height: float = 150.0     # m    above ground
    mass: float = 10.0                # kg
    drag_coefficient: float = 0.47    # Cd (sphere)
    area: float = 0.1                 # m²   frontal area

    def validate(self) -> 'SimulationInput':
        """
        Fail fast on inputs the integrator cannot handle.

        Raises InvalidInputError for non-finite fields, non-positive mass,
        negative height, and negative drag coefficient or area.

        The last three checks are stricter than the plain integration loop,
        which would accept them: a negative height would otherwise come back
        as a single sample below ground.
        """
        for f in fields(self):
            value = getattr(self, f.name)
            if not math.isfinite(value):
                raise InvalidInputError(
                    f"{_INPUT_KEYS[f.name]} must be finite, got {value!r}"
                )
        if self.mass <= 0:
            raise InvalidInputError(f"mass must be > 0, got {self.mass!r}")
        if self.initial_height < 0:
            raise InvalidInputError(
                f"initialHeight must be >= 0, got {self.initial_height!r}"
            )
        if self.drag_coefficient < 0:
            raise InvalidInputError(
                f"dragCoefficient must be >= 0, got {self.drag_coefficient!r}"
            )
        if self.area < 0:
            raise InvalidInputError(f"area must be >= 0, got {self.area!r}")
        return self

    @classmethod
    def from_dict(cls, data: Mapping) -> 'SimulationInput':
        """Build from a wire-format mapping; all five keys are required."""
        values = {}
        for attr, key in _INPUT_KEYS.items():
            if key not in data:
                raise InvalidInputError(f"missing field '{key}'")
            value = data[key]
            # bool is an int subclass, but never a meaningful quantity here
            if isinstance(value, bool) or not isinstance(value, numbers.Real):
                raise InvalidInputError(
                    f"field '{key}' must be a number, got {type(value).__name__}"
                )
            values[attr] = float(value)
        return cls(**values)

    def to_dict(self) -> dict:
        return {key: getattr(self, attr) for attr, key in _INPUT_KEYS.items()}


@dataclass(frozen=True)
class PhysicsState:
    """One trajectory sample."""
    time: float         # s
    position_x: float   # m
    position_y: float   # m, clamped to >= 0

    def to_dict(self) -> dict:
        return {
            'time': self.time,
            'positionX': self.position_x,
            'positionY': self.position_y,
        }


@dataclass(frozen=True)
class SimulationOutput:
    """Complete trajectory output."""
    trajectory: Tuple[PhysicsState, ...]
    total_time: float      # s, time of last sample
    max_distance: float    # m, horizontal position at last sample

    @classmethod
    def from_trajectory(cls, samples: Sequence[PhysicsState]) -> 'SimulationOutput':
        """Freeze the samples and derive the totals from the last one."""
        if not samples:
            raise ValueError("trajectory must contain at least one sample")
        last = samples[-1]
        return cls(
            trajectory=tuple(samples),
            total_time=last.time,
            max_distance=last.position_x,
        )

    # ── Array views for analysis and plotting ─────────────────────────────
    @property
    def time(self) -> np.ndarray:
        return np.array([s.time for s in self.trajectory])

    @property
    def x(self) -> np.ndarray:
        return np.array([s.position_x for s in self.trajectory])

    @property
    def y(self) -> np.ndarray:
        return np.array([s.position_y for s in self.trajectory])

    @property
    def n_samples(self) -> int:
        return len(self.trajectory)

    @property
    def flight_time(self) -> float:
        """Total flight time (s)."""
        return self.total_time

    @property
    def range_total(self) -> float:
        """Horizontal distance at the last sample (m)."""
        return self.max_distance

    @property
    def launch_height(self) -> float:
        return self.trajectory[0].position_y

    def to_dict(self) -> dict:
        return {
            'trajectory': [s.to_dict() for s in self.trajectory],
            'totalTime': self.total_time,
            'maxDistance': self.max_distance,
        }

    def summary(self) -> str:
        """Human-readable summary string."""
        lines = [
            f"╔══════════════════════════════════════════╗",
            f"║  TRAJECTORY SUMMARY                      ║",
            f"╠══════════════════════════════════════════╣",
            f"║  Launch height: {self.launch_height:>10.2f} m{'':<13s}║",
            f"║  Flight time  : {self.total_time:>10.2f} s{'':<13s}║",
            f"║  Range        : {self.max_distance:>10.2f} m{'':<13s}║",
            f"║  Samples      : {self.n_samples:>10d}{'':<15s}║",
            f"╚══════════════════════════════════════════╝",
        ]
        return '\n'.join(lines)
