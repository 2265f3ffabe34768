"""
Tests for parameter sweeps and plotting helpers.
"""

import sys
import os

import numpy as np
import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt

from dragsim.models import SimulationInput, InvalidInputError
from dragsim.integrator import simulate
from dragsim.studies import sweep_parameter, compare_shapes, SWEEPABLE_FIELDS
from dragsim.validation import REFERENCE_BALLISTIC
from dragsim.visualization import (
    plot_trajectory, plot_shape_comparison, plot_sweep,
    plot_ballistic_check, create_trajectory_animation,
)


BASE = SimulationInput()


class TestSweeps:

    def test_sweepable_fields(self):
        assert SWEEPABLE_FIELDS == (
            'initial_velocity', 'initial_height', 'mass', 'drag_coefficient', 'area',
        )

    def test_sweep_matches_direct_runs(self):
        points = sweep_parameter(BASE, 'mass', [1.0, 10.0])
        assert [p.value for p in points] == [1.0, 10.0]
        direct = simulate(SimulationInput(mass=1.0))
        assert points[0].total_time == direct.total_time
        assert points[0].max_distance == direct.max_distance

    def test_drag_sweep_range_decreases(self):
        points = sweep_parameter(BASE, 'drag_coefficient', np.linspace(0.0, 1.5, 6))
        ranges = [p.max_distance for p in points]
        assert all(a > b for a, b in zip(ranges, ranges[1:]))

    def test_unknown_field(self):
        with pytest.raises(ValueError, match='Unknown field'):
            sweep_parameter(BASE, 'gravity', [0.0])

    def test_invalid_value_propagates(self):
        with pytest.raises(InvalidInputError):
            sweep_parameter(BASE, 'mass', [1.0, 0.0])

    def test_compare_shapes(self):
        results = compare_shapes(BASE)
        assert set(results) == {'sphere', 'cube'}
        assert results['sphere'].max_distance > results['cube'].max_distance

    def test_compare_unknown_shape(self):
        with pytest.raises(ValueError):
            compare_shapes(BASE, ['pyramid'])


class TestVisualization:
    """Smoke tests: figures build and save without a display."""

    def test_plot_trajectory(self, tmp_path):
        path = tmp_path / 'traj.png'
        fig = plot_trajectory(simulate(BASE), save_path=str(path))
        assert isinstance(fig, plt.Figure)
        assert path.exists()
        plt.close(fig)

    def test_plot_shape_comparison(self, tmp_path):
        fig = plot_shape_comparison(compare_shapes(BASE),
                                    save_path=str(tmp_path / 'shapes.png'))
        plt.close(fig)

    def test_plot_sweep(self):
        fig = plot_sweep(sweep_parameter(BASE, 'area', [0.05, 0.1]), 'area')
        plt.close(fig)

    def test_plot_ballistic_check(self):
        fig = plot_ballistic_check(simulate(REFERENCE_BALLISTIC), REFERENCE_BALLISTIC)
        plt.close(fig)

    def test_animation(self, tmp_path):
        path = tmp_path / 'anim.gif'
        saved = create_trajectory_animation(simulate(BASE), save_path=str(path), frames=5)
        assert saved == str(path)
        assert path.exists()
