"""
Flight Environment & Integration Settings
=========================================
Physical constants for a point mass falling through still air near
sea level, plus the fixed-step integration settings.

The air density is held constant (sea-level standard value) and gravity
acts on the vertical axis only. All four values are bundled in a
SimulationConfig so tests can substitute them (e.g. gravity = 0).
"""

import math
import numbers
from dataclasses import dataclass

from .models import InvalidInputError


# ── Physical constants ────────────────────────────────────────────────────
GRAVITY      = 9.81       # m/s²
AIR_DENSITY  = 1.225      # kg/m³  (sea level, 15 °C)

# ── Integration settings ──────────────────────────────────────────────────
TIME_STEP    = 0.01       # s
MAX_STEPS    = 10000      # runaway-loop guard


@dataclass(frozen=True)
class SimulationConfig:
    """
    Constants used by one integration run.

    Defaults: g = 9.81 m/s², ρ = 1.225 kg/m³, dt = 0.01 s, 10000 steps.
    """
    gravity: float = GRAVITY
    air_density: float = AIR_DENSITY
    time_step: float = TIME_STEP
    max_steps: int = MAX_STEPS

    def validate(self) -> 'SimulationConfig':
        """Raise InvalidInputError if a setting cannot drive the loop."""
        if not math.isfinite(self.time_step) or self.time_step <= 0:
            raise InvalidInputError(
                f"time_step must be a positive finite number, got {self.time_step!r}"
            )
        if (isinstance(self.max_steps, bool)
                or not isinstance(self.max_steps, numbers.Integral)
                or self.max_steps < 0):
            raise InvalidInputError(
                f"max_steps must be a non-negative integer, got {self.max_steps!r}"
            )
        for name in ('gravity', 'air_density'):
            value = getattr(self, name)
            if not math.isfinite(value) or value < 0:
                raise InvalidInputError(
                    f"{name} must be a non-negative finite number, got {value!r}"
                )
        return self

    @property
    def max_samples(self) -> int:
        """Upper bound on trajectory length (initial sample + every step)."""
        return self.max_steps + 1


DEFAULT_CONFIG = SimulationConfig()
