"""
dragsim — Projectile Motion with Drag
=====================================
A teaching tool that integrates two-dimensional projectile motion under
gravity and a velocity-dependent drag force:
  - Linear drag     F ∝ v
  - Quadratic drag  F ∝ v²

A TrajectorySession advances the projectile with fixed-step RK4, detects
target impact and ground contact, and records a subsampled trajectory.
The terminal-velocity calculator grades student answers against the
analytic formulas, and the validation module checks the integrator
against closed-form and SciPy reference solutions.
"""

from .environment import PLANETS, gravity_for, free_fall_time
from .drag_model import (
    DragLaw, MEDIA, drag_coefficient_for, drag_acceleration, derivatives,
)
from .projectile import (
    HIT_RADIUS, Target, KinematicState, TrajectorySample, PhysicalParameters,
)
from .integrator import DEFAULT_DT, rk4_step, integrate
from .session import (
    DEFAULT_SAMPLE_STRIDE, SessionState, TrajectorySession,
    Running, ImpactTarget, MissedGround,
)
from .terminal import (
    VERIFY_TOLERANCE, terminal_velocity, verify,
    Success, GradedError, InvalidInput, Undefined,
)
from .validation import (
    free_fall_state, linear_drag_state, reference_solution,
    validate_case, run_all_validations, check_terminal_convergence,
)

__version__ = "1.0.0"
__all__ = [
    'PLANETS', 'gravity_for', 'free_fall_time',
    'DragLaw', 'MEDIA', 'drag_coefficient_for', 'drag_acceleration', 'derivatives',
    'HIT_RADIUS', 'Target', 'KinematicState', 'TrajectorySample', 'PhysicalParameters',
    'DEFAULT_DT', 'rk4_step', 'integrate',
    'DEFAULT_SAMPLE_STRIDE', 'SessionState', 'TrajectorySession',
    'Running', 'ImpactTarget', 'MissedGround',
    'VERIFY_TOLERANCE', 'terminal_velocity', 'verify',
    'Success', 'GradedError', 'InvalidInput', 'Undefined',
    'free_fall_state', 'linear_drag_state', 'reference_solution',
    'validate_case', 'run_all_validations', 'check_terminal_convergence',
]
