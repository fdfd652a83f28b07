"""
Numerical Integration Engine
=============================
Fixed-step 4th-order Runge-Kutta (RK4) for the planar equations of motion:
    dx/dt = v
    dv/dt = a(v)   (from drag_acceleration)

The state vector is [x, y, vx, vy]. Time is not part of the vector; each
step returns a new KinematicState with t advanced by exactly dt. The input
state is never modified.
"""

from typing import List

from .drag_model import derivatives
from .projectile import KinematicState


DEFAULT_DT = 0.01  # s


def rk4_step(state: KinematicState, dt: float, params) -> KinematicState:
    """
    Advance one RK4 step.

    k1 at the current state, k2 and k3 at the half step, k4 at the full
    step, combined with weights (1, 2, 2, 1) / 6.
    """
    s = state.as_vector()

    k1 = derivatives(s, params)
    k2 = derivatives(s + 0.5 * dt * k1, params)
    k3 = derivatives(s + 0.5 * dt * k2, params)
    k4 = derivatives(s + dt * k3, params)

    s_next = s + (dt / 6.0) * (k1 + 2*k2 + 2*k3 + k4)
    return KinematicState.from_vector(state.t + dt, s_next)


def integrate(state: KinematicState, params, duration: float,
              dt: float = DEFAULT_DT) -> List[KinematicState]:
    """
    Repeated RK4 steps from `state` for `duration` seconds.

    No ground or target handling; returns every state including the
    starting one.
    """
    n_steps = int(round(duration / dt))
    history = [state]
    for _ in range(n_steps):
        state = rk4_step(state, dt, params)
        history.append(state)
    return history
