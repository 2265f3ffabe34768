#!/usr/bin/env python3
"""
═══════════════════════════════════════════════════════════════════════════════
  PROJECTILE TRAJECTORY SIMULATOR — Main Runner
═══════════════════════════════════════════════════════════════════════════════

  Executes the complete simulation pipeline:
    1. Default scenario (sphere, 50 m/s from 150 m)
    2. Shape comparison (sphere vs cube)
    3. Drag coefficient sweep
    4. Mass sweep
    5. Drag-free validation against the closed-form parabola
    6. Animated trajectory GIF

  All outputs saved to outputs/ directory.

  Usage:
    python main.py              # Run everything
    python main.py --quick      # Skip animation (faster)
    python main.py --json       # Print default scenario as JSON and exit
═══════════════════════════════════════════════════════════════════════════════
"""

import json
import sys
import os
import time

import numpy as np

from dragsim.drag_model import SHAPE_DRAG_COEFFICIENTS, SHAPE_NAMES, drag_coefficient
from dragsim.environment import DEFAULT_CONFIG
from dragsim.integrator import simulate
from dragsim.models import SimulationInput
from dragsim.studies import sweep_parameter, compare_shapes
from dragsim.validation import validate_against_ballistic, REFERENCE_BALLISTIC
from dragsim.visualization import (
    plot_trajectory, plot_shape_comparison, plot_sweep,
    plot_ballistic_check, create_trajectory_animation,
    ensure_output_dir,
)

import matplotlib.pyplot as plt


DEFAULT_SCENARIO = SimulationInput(
    initial_velocity=50.0,
    initial_height=150.0,
    mass=10.0,
    drag_coefficient=drag_coefficient('sphere'),
    area=0.1,
)


def banner():
    print("""
╔═══════════════════════════════════════════════════════════════════════╗
║                                                                       ║
║     PROJECTILE TRAJECTORY SIMULATOR WITH QUADRATIC DRAG               ║
║     ─────────────────────────────────────────────────────             ║
║     Physics: Gravity · Quadratic drag · Sea-level air                 ║
║     Method : Semi-implicit Euler │ Checked against closed form        ║
║                                                                       ║
╚═══════════════════════════════════════════════════════════════════════╝
""")


def section(title):
    print(f"\n{'─'*60}")
    print(f"  {title}")
    print(f"{'─'*60}")


def main():
    if '--json' in sys.argv:
        print(json.dumps(simulate(DEFAULT_SCENARIO).to_dict()))
        return

    start_time = time.time()
    quick = '--quick' in sys.argv

    banner()
    out = ensure_output_dir('outputs')

    # ══════════════════════════════════════════════════════════════════════
    #  PHASE 1: Default Scenario
    # ══════════════════════════════════════════════════════════════════════
    section("PHASE 1: Default Scenario (Sphere)")
    for key, value in DEFAULT_SCENARIO.to_dict().items():
        print(f"  {key:<18s} {value:>10.3f}")
    print(f"  {'dt':<18s} {DEFAULT_CONFIG.time_step:>10.3f}")

    result = simulate(DEFAULT_SCENARIO)
    print(result.summary())

    fig = plot_trajectory(result, save_path=f'{out}/01_trajectory.png')
    plt.close(fig)
    print(f"  ✓ Saved: {out}/01_trajectory.png")

    # ══════════════════════════════════════════════════════════════════════
    #  PHASE 2: Shape Comparison
    # ══════════════════════════════════════════════════════════════════════
    section("PHASE 2: Shape Comparison (Same Launch Conditions)")
    shape_results = compare_shapes(DEFAULT_SCENARIO)
    for key, r in shape_results.items():
        print(f"  {SHAPE_NAMES[key]:<10s} Cd={SHAPE_DRAG_COEFFICIENTS[key]:.2f}  "
              f"Range: {r.max_distance:>8.2f} m  ToF: {r.total_time:>6.2f} s")

    fig = plot_shape_comparison(shape_results,
                                save_path=f'{out}/02_shape_comparison.png')
    plt.close(fig)
    print(f"\n  ✓ Saved: {out}/02_shape_comparison.png")

    # ══════════════════════════════════════════════════════════════════════
    #  PHASE 3: Drag Coefficient Sweep
    # ══════════════════════════════════════════════════════════════════════
    section("PHASE 3: Drag Coefficient Sweep")
    cd_points = sweep_parameter(DEFAULT_SCENARIO, 'drag_coefficient',
                                np.linspace(0.0, 1.5, 7))
    for p in cd_points:
        print(f"  Cd={p.value:>5.2f}  Range: {p.max_distance:>8.2f} m  "
              f"ToF: {p.total_time:>6.2f} s")

    fig = plot_sweep(cd_points, 'drag_coefficient',
                     save_path=f'{out}/03_cd_sweep.png')
    plt.close(fig)
    print(f"\n  ✓ Saved: {out}/03_cd_sweep.png")

    # ══════════════════════════════════════════════════════════════════════
    #  PHASE 4: Mass Sweep
    # ══════════════════════════════════════════════════════════════════════
    section("PHASE 4: Mass Sweep")
    mass_points = sweep_parameter(DEFAULT_SCENARIO, 'mass',
                                  [0.5, 1.0, 2.0, 5.0, 10.0, 50.0, 1000.0])
    for p in mass_points:
        print(f"  m={p.value:>7.1f} kg  Range: {p.max_distance:>8.2f} m  "
              f"ToF: {p.total_time:>6.2f} s")

    fig = plot_sweep(mass_points, 'mass', save_path=f'{out}/04_mass_sweep.png')
    plt.close(fig)
    print(f"\n  ✓ Saved: {out}/04_mass_sweep.png")

    # ══════════════════════════════════════════════════════════════════════
    #  PHASE 5: Drag-Free Validation
    # ══════════════════════════════════════════════════════════════════════
    section("PHASE 5: Validation — Drag-Free Parabola")
    validate_against_ballistic(REFERENCE_BALLISTIC, verbose=True)
    ref_out = simulate(REFERENCE_BALLISTIC)
    fig = plot_ballistic_check(ref_out, REFERENCE_BALLISTIC,
                               save_path=f'{out}/05_ballistic_check.png')
    plt.close(fig)
    print(f"  ✓ Saved: {out}/05_ballistic_check.png")

    # ══════════════════════════════════════════════════════════════════════
    #  PHASE 6: Trajectory Animation
    # ══════════════════════════════════════════════════════════════════════
    if not quick:
        section("PHASE 6: Trajectory Animation (GIF)")
        create_trajectory_animation(result,
                                    save_path=f'{out}/06_trajectory_animation.gif',
                                    frames=120)
        print(f"  ✓ Saved: {out}/06_trajectory_animation.gif")
    else:
        section("PHASE 6: Animation SKIPPED (--quick mode)")

    # ══════════════════════════════════════════════════════════════════════
    #  SUMMARY
    # ══════════════════════════════════════════════════════════════════════
    elapsed = time.time() - start_time
    section("COMPLETE")
    print(f"""
  All outputs saved to: {os.path.abspath(out)}/

  Generated files:
    01_trajectory.png            — Default scenario trajectory
    02_shape_comparison.png      — Sphere vs cube
    03_cd_sweep.png              — Range / flight time vs Cd
    04_mass_sweep.png            — Range / flight time vs mass
    05_ballistic_check.png       — Engine vs closed-form parabola
    {'06_trajectory_animation.gif — Animated trajectory' if not quick else '(animation skipped)'}

  Total runtime: {elapsed:.1f} seconds
""")


if __name__ == "__main__":
    main()
