"""
Validation Against the Closed-Form Ballistic Solution
=====================================================
With no drag (Cd = 0 or A = 0) a horizontal throw has the exact solution

    x(t) = v0 t
    y(t) = h - ½ g t²
    T    = sqrt(2 h / g)

The semi-implicit Euler scheme reproduces x(t) exactly and lags y(t) by

    y_n - y(t_n) = -½ g dt t_n

so the engine is accepted when every sample lies inside that bound
(plus rounding slack) and the flight time is within a couple of steps
of T.
"""

from dataclasses import dataclass, replace

import numpy as np

from .environment import SimulationConfig, DEFAULT_CONFIG
from .integrator import simulate
from .models import SimulationInput


# Reference case: 20 m/s throw from 100 m, 1 kg
REFERENCE_BALLISTIC = SimulationInput(
    initial_velocity=20.0,
    initial_height=100.0,
    mass=1.0,
    drag_coefficient=0.0,
    area=0.0,
)


def ballistic_flight_time(height: float, gravity: float = DEFAULT_CONFIG.gravity) -> float:
    """
    Time (s) to fall `height` metres from rest vertically.

    Without gravity nothing above the ground ever lands: returns inf.
    """
    if gravity == 0:
        return 0.0 if height == 0 else float("inf")
    return float(np.sqrt(2.0 * height / gravity))


def ballistic_reference(inputs: SimulationInput, times: np.ndarray,
                        gravity: float = DEFAULT_CONFIG.gravity) -> tuple:
    """
    Closed-form drag-free positions at the given times.

    Returns (x, y) arrays; y is clamped at the ground like the engine's samples.
    """
    times = np.asarray(times, dtype=float)
    x = inputs.initial_velocity * times
    y = np.clip(inputs.initial_height - 0.5 * gravity * times ** 2, 0.0, None)
    return x, y


@dataclass
class ValidationResult:
    """Result of one engine-vs-closed-form comparison."""
    n_samples: int
    max_x_error: float          # m
    max_y_error: float          # m
    y_error_bound: float        # m, ½ g dt t_last
    ref_flight_time: float      # s
    sim_flight_time: float      # s
    flight_time_error: float    # s
    passed: bool


def validate_against_ballistic(inputs: SimulationInput = REFERENCE_BALLISTIC,
                               config: SimulationConfig = DEFAULT_CONFIG,
                               verbose: bool = True) -> ValidationResult:
    """
    Run the engine with drag disabled and compare every sample against
    the closed-form parabola.
    """
    drag_free = replace(inputs, drag_coefficient=0.0)
    out = simulate(drag_free, config)

    g = config.gravity
    dt = config.time_step
    t = out.time
    x_ref, y_ref = ballistic_reference(drag_free, t, g)

    # Skip the final sample for y: it is clamped to the ground after crossing.
    x_err = np.abs(out.x - x_ref)
    y_err = np.abs(out.y[:-1] - y_ref[:-1])
    max_y_err = float(np.max(y_err)) if y_err.size else 0.0

    ref_tof = ballistic_flight_time(drag_free.initial_height, g)
    tof_err = out.total_time - ref_tof
    bound = 0.5 * g * dt * out.total_time + 1e-9

    passed = (
        float(np.max(x_err)) <= 1e-6 * max(1.0, abs(out.max_distance))
        and max_y_err <= bound
        and abs(tof_err) <= 2 * dt
    )

    result = ValidationResult(
        n_samples=out.n_samples,
        max_x_error=float(np.max(x_err)),
        max_y_error=max_y_err,
        y_error_bound=bound,
        ref_flight_time=ref_tof,
        sim_flight_time=out.total_time,
        flight_time_error=tof_err,
        passed=passed,
    )

    if verbose:
        print(f"\n{'='*60}")
        print(f"  VALIDATION: drag-free throw vs closed form")
        print(f"  v0 = {drag_free.initial_velocity} m/s | h = {drag_free.initial_height} m"
              f" | dt = {dt} s")
        print(f"{'='*60}")
        print(f"  {'Samples':<22s} {result.n_samples:>12d}")
        print(f"  {'Max |Δx| (m)':<22s} {result.max_x_error:>12.2e}")
        print(f"  {'Max |Δy| (m)':<22s} {result.max_y_error:>12.4f}"
              f"   (bound {result.y_error_bound:.4f})")
        print(f"  {'Flight time ref (s)':<22s} {result.ref_flight_time:>12.4f}")
        print(f"  {'Flight time sim (s)':<22s} {result.sim_flight_time:>12.4f}")
        print(f"  {'Δ flight time (s)':<22s} {result.flight_time_error:>+12.4f}")
        print("-" * 60)
        status = "✓ PASS" if result.passed else "✗ FAIL"
        print(f"  Status: {status}")
        print(f"{'='*60}\n")

    return result


if __name__ == "__main__":
    validate_against_ballistic(verbose=True)
