"""
Terminal Velocity
=================
Analytic terminal velocity and grading of user-submitted answers.

Terminal velocity is the speed at which drag balances gravity:
  - Linear law     k v_t   = m g   →  v_t = m g / k
  - Quadratic law  k v_t²  = m g   →  v_t = sqrt(m g / k)

In vacuum (k = 0) it does not exist: the projectile keeps accelerating at g.

verify() never raises on a bad answer. It returns one of four tagged
results so the caller can render each case differently.
"""

import numpy as np
from dataclasses import dataclass
from typing import Optional, Union

from .drag_model import DragLaw


VERIFY_TOLERANCE = 0.03   # 3 % relative
_BOUNDARY_EPS = 1e-9      # absorbs rounding at the tolerance boundary


@dataclass(frozen=True)
class Success:
    theoretical: float
    user_value: float
    percent_error: float
    message: str


@dataclass(frozen=True)
class GradedError:
    theoretical: float
    user_value: float
    percent_error: float
    message: str


@dataclass(frozen=True)
class InvalidInput:
    message: str


@dataclass(frozen=True)
class Undefined:
    message: str


VerificationResult = Union[Success, GradedError, InvalidInput, Undefined]


def terminal_velocity(params) -> Optional[float]:
    """Terminal velocity (m/s), or None in vacuum."""
    k = params.drag_coefficient
    if k == 0:
        return None

    ratio = params.mass * params.gravity / k
    if params.drag_model is DragLaw.LINEAR:
        return float(ratio)
    return float(np.sqrt(ratio))


def _parse_answer(user_value) -> Optional[float]:
    if user_value is None or isinstance(user_value, bool):
        return None
    try:
        value = float(user_value)
    except (TypeError, ValueError):
        return None
    return value if np.isfinite(value) else None


def verify(user_value, params) -> VerificationResult:
    """
    Grade a terminal-velocity answer against the analytic value.

    Accepted when |answer - v_t| <= 3 % of v_t.
    """
    theoretical = terminal_velocity(params)
    if theoretical is None:
        return Undefined(
            "In vacuum (k = 0) there is no terminal velocity: the projectile "
            "keeps accelerating under gravity indefinitely."
        )

    value = _parse_answer(user_value)
    if value is None:
        return InvalidInput("Please enter a valid numeric value.")

    difference = abs(value - theoretical)
    tolerance = VERIFY_TOLERANCE * theoretical
    percent_error = difference / theoretical * 100.0

    if difference <= tolerance * (1.0 + _BOUNDARY_EPS):
        return Success(
            theoretical=theoretical,
            user_value=value,
            percent_error=percent_error,
            message="Correct! Your answer is within the accepted margin (±3%).",
        )

    return GradedError(
        theoretical=theoretical,
        user_value=value,
        percent_error=percent_error,
        message=(
            f"Incorrect. The error is {percent_error:.2f}%. Check your "
            f"calculation with the {params.drag_model.value} drag formula."
        ),
    )
