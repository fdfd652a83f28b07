"""
Validation Against Reference Solutions
======================================
Checks the fixed-step RK4 integrator against independent solutions:
  - Vacuum (k = 0): exact projectile motion
        x = vx0 t,   y = vy0 t - g t² / 2
  - Linear drag: closed form with b = k / m and v_t = g / b
        vx = vx0 e^(-bt)
        vy = -v_t + (vy0 + v_t) e^(-bt)
  - Quadratic drag: no closed form in 2-D, compared against SciPy's
    adaptive RK45 (solve_ivp) at tight tolerances

Also verifies that a long straight-down fall approaches the analytic
terminal velocity.
"""

import numpy as np
from dataclasses import dataclass, replace
from typing import Dict, Optional

from scipy.integrate import solve_ivp

from .drag_model import MEDIA, DragLaw, derivatives
from .integrator import DEFAULT_DT, integrate, rk4_step
from .projectile import KinematicState, PhysicalParameters
from .terminal import terminal_velocity


POSITION_TOLERANCE = 1e-3    # m
CONVERGENCE_TOLERANCE = 0.01  # 1 % of v_t


# ══════════════════════════════════════════════════════════════════════════
#  Closed-form solutions
# ══════════════════════════════════════════════════════════════════════════

def free_fall_state(params, t: float) -> KinematicState:
    """Exact vacuum trajectory at time t."""
    vx0, vy0 = params.initial_velocity()
    g = params.gravity
    return KinematicState(
        t=t,
        x=float(vx0 * t),
        y=float(vy0 * t - 0.5 * g * t ** 2),
        vx=float(vx0),
        vy=float(vy0 - g * t),
    )


def linear_drag_state(params, t: float) -> KinematicState:
    """Exact linear-drag trajectory at time t (requires k > 0)."""
    vx0, vy0 = params.initial_velocity()
    b = params.drag_coefficient / params.mass
    v_t = params.gravity / b
    decay = np.exp(-b * t)
    return KinematicState(
        t=t,
        x=float(vx0 / b * (1.0 - decay)),
        y=float(-v_t * t + (vy0 + v_t) / b * (1.0 - decay)),
        vx=float(vx0 * decay),
        vy=float(-v_t + (vy0 + v_t) * decay),
    )


def reference_solution(params, times: np.ndarray) -> np.ndarray:
    """
    High-accuracy solution from solve_ivp, evaluated at `times`.

    Returns array of shape (N, 4) with columns [x, y, vx, vy].
    """
    s0 = params.initial_state().as_vector()
    sol = solve_ivp(
        lambda t, s: derivatives(s, params),
        (0.0, float(times[-1])),
        s0,
        method='RK45',
        t_eval=times,
        rtol=1e-10,
        atol=1e-10,
    )
    return sol.y.T


# ══════════════════════════════════════════════════════════════════════════
#  Integrator validation
# ══════════════════════════════════════════════════════════════════════════

@dataclass
class ValidationResult:
    """RK4 run compared against a reference solution."""
    label: str
    reference: str                 # 'analytic' or 'solve_ivp'
    duration: float                # s
    dt: float                      # s
    max_position_error: float      # m
    max_velocity_error: float      # m/s

    @property
    def passed(self) -> bool:
        return self.max_position_error < POSITION_TOLERANCE


def validate_case(params: PhysicalParameters, duration: float = 5.0,
                  dt: float = DEFAULT_DT, label: str = '',
                  verbose: bool = False) -> ValidationResult:
    """
    Integrate `duration` seconds with RK4 and compare every step against
    the best available reference.
    """
    history = integrate(params.initial_state(), params, duration, dt)
    rk4 = np.array([s.as_vector() for s in history])
    times = np.array([s.t for s in history])

    if params.drag_coefficient == 0:
        reference = 'analytic'
        ref = np.array([free_fall_state(params, t).as_vector() for t in times])
    elif params.drag_model is DragLaw.LINEAR:
        reference = 'analytic'
        ref = np.array([linear_drag_state(params, t).as_vector() for t in times])
    else:
        reference = 'solve_ivp'
        ref = reference_solution(params, times)

    pos_err = np.linalg.norm(rk4[:, :2] - ref[:, :2], axis=1)
    vel_err = np.linalg.norm(rk4[:, 2:] - ref[:, 2:], axis=1)

    result = ValidationResult(
        label=label or f"{params.drag_model.value} k={params.drag_coefficient:g}",
        reference=reference,
        duration=duration,
        dt=dt,
        max_position_error=float(np.max(pos_err)),
        max_velocity_error=float(np.max(vel_err)),
    )

    if verbose:
        status = "✓" if result.passed else "✗"
        print(f"  {status} {result.label:<28s} vs {reference:<9s}  "
              f"max |Δr| = {result.max_position_error:.2e} m   "
              f"max |Δv| = {result.max_velocity_error:.2e} m/s")
    return result


def run_all_validations(duration: float = 5.0, dt: float = DEFAULT_DT,
                        verbose: bool = True) -> Dict[str, ValidationResult]:
    """Validate RK4 for every medium preset under both drag laws."""
    if verbose:
        print(f"\n{'='*75}")
        print(f"  VALIDATION: RK4 (dt={dt} s) over {duration} s")
        print(f"{'='*75}")

    results = {}
    for medium in MEDIA:
        for law in DragLaw:
            if medium == 'vacuum' and law is DragLaw.QUADRATIC:
                continue
            params = PhysicalParameters.from_presets(medium=medium, drag_model=law)
            key = f"{medium}/{law.value}"
            results[key] = validate_case(params, duration, dt, label=key,
                                         verbose=verbose)

    if verbose:
        n_pass = sum(r.passed for r in results.values())
        print("-" * 75)
        print(f"  {n_pass}/{len(results)} cases within {POSITION_TOLERANCE:g} m")
        print(f"{'='*75}\n")
    return results


# ══════════════════════════════════════════════════════════════════════════
#  Terminal velocity convergence
# ══════════════════════════════════════════════════════════════════════════

@dataclass
class ConvergenceResult:
    """Speed reached by a long vertical fall vs the analytic v_t."""
    terminal_velocity: Optional[float]   # m/s, None in vacuum
    final_speed: float                   # m/s
    duration: float                      # s

    @property
    def relative_error(self) -> Optional[float]:
        if self.terminal_velocity is None:
            return None
        return abs(self.final_speed - self.terminal_velocity) / self.terminal_velocity

    @property
    def converged(self) -> bool:
        err = self.relative_error
        return err is not None and err <= CONVERGENCE_TOLERANCE


def check_terminal_convergence(params: PhysicalParameters, duration: float = 100.0,
                               dt: float = DEFAULT_DT) -> ConvergenceResult:
    """
    Launch straight up (90°) and integrate without ground contact until the
    speed settles on the descending branch.
    """
    state = replace(params, launch_angle_deg=90.0).initial_state()
    for _ in range(int(round(duration / dt))):
        state = rk4_step(state, dt, params)

    return ConvergenceResult(
        terminal_velocity=terminal_velocity(params),
        final_speed=state.speed,
        duration=duration,
    )


if __name__ == "__main__":
    run_all_validations(verbose=True)
