"""
Tests for the simulation records and their JSON wire format.
"""

import sys
import os
import json
import dataclasses

import numpy as np
import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from dragsim.models import (
    SimulationInput, PhysicsState, SimulationOutput, InvalidInputError,
)
from dragsim.integrator import simulate


WIRE_INPUT = {
    'initialVelocity': 50,
    'initialHeight': 150.0,
    'mass': 10.0,
    'dragCoefficient': 0.47,
    'area': 0.1,
}


class TestSimulationInput:

    def test_from_dict(self):
        inputs = SimulationInput.from_dict(WIRE_INPUT)
        assert inputs == SimulationInput(50.0, 150.0, 10.0, 0.47, 0.1)
        assert isinstance(inputs.initial_velocity, float)

    def test_to_dict_uses_wire_keys(self):
        assert SimulationInput.from_dict(WIRE_INPUT).to_dict() == {
            'initialVelocity': 50.0,
            'initialHeight': 150.0,
            'mass': 10.0,
            'dragCoefficient': 0.47,
            'area': 0.1,
        }

    def test_missing_field(self):
        data = dict(WIRE_INPUT)
        del data['mass']
        with pytest.raises(InvalidInputError, match='mass'):
            SimulationInput.from_dict(data)

    @pytest.mark.parametrize('bad', ['10', None, True, [1.0]])
    def test_non_numeric_field(self, bad):
        data = dict(WIRE_INPUT, area=bad)
        with pytest.raises(InvalidInputError, match='area'):
            SimulationInput.from_dict(data)

    def test_defaults_are_valid(self):
        assert SimulationInput().validate() == SimulationInput()

    def test_zero_drag_is_valid(self):
        SimulationInput(drag_coefficient=0.0, area=0.0).validate()

    def test_frozen(self):
        inputs = SimulationInput()
        with pytest.raises(dataclasses.FrozenInstanceError):
            inputs.mass = 1.0


class TestSimulationOutput:

    def test_from_trajectory_derives_totals(self):
        samples = [PhysicsState(0.0, 0.0, 5.0), PhysicsState(0.01, 0.3, 0.0)]
        out = SimulationOutput.from_trajectory(samples)
        assert out.trajectory == tuple(samples)
        assert out.total_time == 0.01
        assert out.max_distance == 0.3

    def test_empty_trajectory_rejected(self):
        with pytest.raises(ValueError):
            SimulationOutput.from_trajectory([])

    def test_array_views(self):
        out = simulate(SimulationInput())
        assert out.time.shape == out.x.shape == out.y.shape == (out.n_samples,)
        assert out.flight_time == out.total_time
        assert out.range_total == out.max_distance
        assert out.launch_height == 150.0

    def test_to_dict_wire_shape(self):
        out = simulate(SimulationInput())
        data = out.to_dict()
        assert set(data) == {'trajectory', 'totalTime', 'maxDistance'}
        assert data['trajectory'][0] == {'time': 0.0, 'positionX': 0.0, 'positionY': 150.0}
        assert len(data['trajectory']) == out.n_samples
        assert data['totalTime'] == data['trajectory'][-1]['time']
        assert data['maxDistance'] == data['trajectory'][-1]['positionX']

    def test_json_serializable(self):
        out = simulate(SimulationInput.from_dict(WIRE_INPUT))
        decoded = json.loads(json.dumps(out.to_dict()))
        assert decoded['totalTime'] == pytest.approx(out.total_time)
        assert np.all(np.array([s['positionY'] for s in decoded['trajectory']]) >= 0)

    def test_summary(self):
        text = simulate(SimulationInput()).summary()
        assert 'Flight time' in text
        assert 'Range' in text

    def test_trajectory_is_immutable(self):
        out = simulate(SimulationInput())
        assert isinstance(out.trajectory, tuple)
        with pytest.raises(dataclasses.FrozenInstanceError):
            out.trajectory[0].time = 1.0
