"""
Numerical Integration Engine
=============================
Fixed-step semi-implicit (symplectic) Euler integration of a horizontally
launched point mass under gravity and quadratic drag:

    v_{n+1} = v_n + a(v_n) * dt
    x_{n+1} = x_n + v_{n+1} * dt

Velocity is updated before position.

The loop stops once the height reaches the ground (y <= 0) or after
config.max_steps steps, whichever comes first. Hitting the step cap is
not an error: the partial trajectory is returned as-is.

simulate() is a pure function. Every call builds its own sample list and
shares nothing with other calls.
"""

from .drag_model import drag_force
from .environment import SimulationConfig, DEFAULT_CONFIG
from .models import SimulationInput, SimulationOutput, PhysicsState


def compute_acceleration(vx: float, vy: float, inputs: SimulationInput,
                         config: SimulationConfig = DEFAULT_CONFIG) -> tuple:
    """
    Acceleration (m/s²) for the current velocity.

    Net force = drag on both axes + weight on the vertical axis,
    divided by mass.
    """
    fdx, fdy = drag_force(vx, vy, config.air_density,
                          inputs.drag_coefficient, inputs.area)

    f_net_x = fdx
    f_net_y = -inputs.mass * config.gravity + fdy

    return f_net_x / inputs.mass, f_net_y / inputs.mass


def simulate(inputs: SimulationInput,
             config: SimulationConfig = DEFAULT_CONFIG) -> SimulationOutput:
    """
    Integrate the trajectory from launch to ground contact.

    Parameters
    ----------
    inputs : SimulationInput
        Launch parameters. Validated first; InvalidInputError is raised
        before any step is taken.
    config : SimulationConfig
        Physical constants and integration settings.

    Returns
    -------
    SimulationOutput
        Samples at t = 0, dt, 2 dt, ... with heights clamped to >= 0.
    """
    inputs.validate()
    config.validate()

    dt = config.time_step

    x = 0.0
    y = inputs.initial_height
    vx = inputs.initial_velocity
    vy = 0.0
    t = 0.0

    history = [PhysicsState(t, x, y)]

    steps = 0
    while steps < config.max_steps and y > 0:
        ax, ay = compute_acceleration(vx, vy, inputs, config)

        vx += ax * dt
        vy += ay * dt

        x += vx * dt
        y += vy * dt
        t += dt
        steps += 1

        # Clamp the stored sample only; the loop exits on this step anyway.
        history.append(PhysicsState(t, x, max(0.0, y)))

    return SimulationOutput.from_trajectory(history)
