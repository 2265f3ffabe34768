"""
Aerodynamic Drag Model
======================
Quadratic drag for a point mass moving in the vertical plane.

    F_drag = -½ ρ |v| v Cd A

The force is split per axis using the scalar speed |v| as the common
multiplier, so each component opposes its own velocity component and the
resultant opposes the velocity vector.

Drag coefficient presets come from standard bluff-body data
(Hoerner, "Fluid Dynamic Drag", 1965) for low subsonic flow.
"""

import numpy as np


# ══════════════════════════════════════════════════════════════════════════
#  Cd presets — subsonic, Reynolds number ~1e4–1e5
# ══════════════════════════════════════════════════════════════════════════

SHAPE_DRAG_COEFFICIENTS = {
    'sphere': 0.47,
    'cube': 1.05,
}

SHAPE_NAMES = {
    'sphere': 'Sphere',
    'cube': 'Cube',
}


def drag_coefficient(shape: str) -> float:
    """Return the preset drag coefficient for a named shape."""
    if shape not in SHAPE_DRAG_COEFFICIENTS:
        raise ValueError(
            f"Unknown shape '{shape}'. "
            f"Available: {list(SHAPE_DRAG_COEFFICIENTS.keys())}"
        )
    return SHAPE_DRAG_COEFFICIENTS[shape]


def speed(vx: float, vy: float) -> float:
    """Scalar speed |v| (m/s)."""
    return float(np.sqrt(vx * vx + vy * vy))


def drag_force(vx: float, vy: float, rho: float, cd: float,
               area: float) -> tuple:
    """
    Compute aerodynamic drag force components (N).

    Parameters
    ----------
    vx, vy : float
        Velocity components (m/s)
    rho : float
        Air density (kg/m³)
    cd : float
        Drag coefficient (dimensionless)
    area : float
        Frontal area (m²)

    Returns
    -------
    (Fx, Fy) : tuple of float
    """
    v = speed(vx, vy)
    # Evaluated left to right; do not regroup.
    fx = -0.5 * rho * vx * v * cd * area
    fy = -0.5 * rho * vy * v * cd * area
    return fx, fy
