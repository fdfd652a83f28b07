"""
Drag Force Model
================
Velocity-dependent resistance for a projectile moving through a medium.

Two force laws are supported:
- Linear     F = -k v            (viscous / low Reynolds number)
- Quadratic  F = -k |v| v        (turbulent / high Reynolds number)

For both laws the resulting acceleration components are

    dvx/dt =     - (k/m) vx f(|v|)
    dvy/dt = -g  - (k/m) vy f(|v|)

with f(|v|) = 1 for the linear law and f(|v|) = |v| for the quadratic law.
The quadratic form multiplies each component by the scalar speed, so the
force points against the velocity vector without ever dividing by |v|.

Medium coefficients come in pairs because k has different units per law
(kg/s for linear, kg/m for quadratic).
"""

from enum import Enum

import numpy as np


class DragLaw(Enum):
    """Functional form relating drag force to speed."""
    LINEAR = 'linear'
    QUADRATIC = 'quadratic'

    @classmethod
    def parse(cls, value) -> 'DragLaw':
        """Accept a DragLaw or its name ('linear' / 'quadratic')."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ValueError(
                f"Unknown drag model '{value}'. "
                f"Available: {[law.value for law in cls]}"
            ) from None


# ══════════════════════════════════════════════════════════════════════════
#  Medium table — drag coefficient per force law
# ══════════════════════════════════════════════════════════════════════════

MEDIA = {
    'vacuum': {
        'name': 'Vacuum',
        'k_linear': 0.0,
        'k_quadratic': 0.0,
    },
    'air': {
        'name': 'Still Air',
        'k_linear': 0.02,
        'k_quadratic': 0.001,
    },
    'strong_wind': {
        'name': 'Strong Wind',
        'k_linear': 0.08,
        'k_quadratic': 0.003,
    },
    'water': {
        'name': 'Water',
        'k_linear': 5.0,
        'k_quadratic': 0.5,
    },
    'oil': {
        'name': 'Oil',
        'k_linear': 8.0,
        'k_quadratic': 0.8,
    },
}


def drag_coefficient_for(medium_key: str, drag_model) -> float:
    """
    Drag coefficient k of a medium preset for the given force law.

    Parameters
    ----------
    medium_key : str
        One of 'vacuum', 'air', 'strong_wind', 'water', 'oil'
    drag_model : DragLaw or str
        Force law selecting which coefficient of the pair is returned
    """
    if medium_key not in MEDIA:
        raise ValueError(
            f"Unknown medium '{medium_key}'. "
            f"Available: {list(MEDIA.keys())}"
        )
    law = DragLaw.parse(drag_model)
    data = MEDIA[medium_key]
    return data['k_linear'] if law is DragLaw.LINEAR else data['k_quadratic']


# ══════════════════════════════════════════════════════════════════════════
#  Acceleration
# ══════════════════════════════════════════════════════════════════════════

def drag_acceleration(vx: float, vy: float, params) -> tuple:
    """
    Total acceleration (gravity + drag) for the current velocity.

    Parameters
    ----------
    vx, vy : float
        Velocity components (m/s)
    params : PhysicalParameters
        Supplies mass, gravity, drag_coefficient and drag_model

    Returns
    -------
    tuple
        (ax, ay) in m/s²
    """
    damping = params.drag_coefficient / params.mass

    if params.drag_model is DragLaw.QUADRATIC:
        speed = np.sqrt(vx ** 2 + vy ** 2)
        damping = damping * speed

    ax = -damping * vx
    ay = -params.gravity - damping * vy
    return float(ax), float(ay)


def derivatives(vector: np.ndarray, params) -> np.ndarray:
    """
    Right-hand side of the equations of motion for [x, y, vx, vy].

        d/dt [x, y, vx, vy] = [vx, vy, ax, ay]
    """
    _, _, vx, vy = vector
    ax, ay = drag_acceleration(vx, vy, params)
    return np.array([vx, vy, ax, ay], dtype=float)


if __name__ == "__main__":
    print("Drag Model — Coefficients per Medium")
    print("=" * 50)
    print(f"{'Medium':<14} {'k linear':>10} {'k quadratic':>12}")
    print("-" * 50)
    for key, data in MEDIA.items():
        print(f"{data['name']:<14} {data['k_linear']:>10.3f} {data['k_quadratic']:>12.4f}")
