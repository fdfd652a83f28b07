"""
Trajectory Session
==================
State machine that turns single integrator steps into a run:

    IDLE ──start()──▶ RUNNING ──step()──▶ IMPACT_TARGET | MISSED_GROUND
      ▲                  │ pause()/resume()                  │
      └──────────────────┴────────────── reset() ────────────┘

The session owns no timer. An external driver (render loop, test, the
`run()` helper) calls `step()` once per logical tick; the physics step `dt`
is fixed per session and never derived from wall-clock time.

After every step the candidate state is checked in this order:
  1. target hit (on the unclamped candidate, so a step that both enters
     the target and crosses the ground counts as a hit)
  2. ground contact (y < 0, clamped to 0)
  3. otherwise the candidate is committed and sampled every
     `sample_stride` steps
"""

import numpy as np
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, Optional, Tuple, Union

from .integrator import DEFAULT_DT, rk4_step
from .projectile import KinematicState, PhysicalParameters, TrajectorySample


DEFAULT_SAMPLE_STRIDE = 3   # record every 3rd step (30 ms at dt = 0.01 s)
DEFAULT_MAX_TIME = 300.0    # s, safety limit for run()


class SessionState(Enum):
    IDLE = 'idle'
    RUNNING = 'running'
    IMPACT_TARGET = 'impact_target'
    MISSED_GROUND = 'missed_ground'


# ── Run outcomes ──────────────────────────────────────────────────────────

@dataclass(frozen=True)
class Running:
    """Run in progress."""


@dataclass(frozen=True)
class ImpactTarget:
    """Run ended inside the target radius."""
    sample: TrajectorySample


@dataclass(frozen=True)
class MissedGround:
    """Run ended on the ground outside the target."""
    sample: TrajectorySample


RunOutcome = Union[Running, ImpactTarget, MissedGround]


class TrajectorySession:
    """
    One independently owned simulation.

    Parameters
    ----------
    parameters : PhysicalParameters, optional
        Initial configuration; can also be supplied via configure()/start()
    dt : float
        Physics time step (s)
    sample_stride : int
        Record one trajectory sample every `sample_stride` steps
    """

    def __init__(self, parameters: Optional[PhysicalParameters] = None,
                 dt: float = DEFAULT_DT,
                 sample_stride: int = DEFAULT_SAMPLE_STRIDE):
        if dt <= 0:
            raise ValueError(f"Time step must be positive, got {dt}")
        if sample_stride < 1:
            raise ValueError(f"Sample stride must be >= 1, got {sample_stride}")

        self.dt = dt
        self.sample_stride = int(sample_stride)

        self._configured = parameters
        self._active = None
        self._state = KinematicState()
        self._trajectory = []
        self._outcome = None
        self._paused = False
        self._step_count = 0

    # ── Configuration & lifecycle ─────────────────────────────────────────

    def configure(self, parameters: PhysicalParameters) -> None:
        """Store parameters for the next start(); a run in flight is untouched."""
        self._configured = parameters

    def start(self, parameters: Optional[PhysicalParameters] = None) -> RunOutcome:
        """Launch a new run from the configured parameters."""
        if parameters is not None:
            self.configure(parameters)
        if self._configured is None:
            raise ValueError("No parameters configured; call configure() first")

        self._active = self._configured
        self._state = self._active.initial_state()
        self._trajectory = []
        self._outcome = Running()
        self._paused = False
        self._step_count = 0
        return self._outcome

    def pause(self) -> None:
        if self.running:
            self._paused = True

    def resume(self) -> None:
        if self.running:
            self._paused = False

    def reset(self) -> None:
        """Return to IDLE from any state."""
        self._active = None
        self._state = KinematicState()
        self._trajectory = []
        self._outcome = None
        self._paused = False
        self._step_count = 0

    # ── Stepping ──────────────────────────────────────────────────────────

    def step(self) -> Optional[RunOutcome]:
        """
        Advance one physics step.

        No-op (returns the current outcome) unless the run is active and
        not paused.
        """
        if not self.running or self._paused:
            return self._outcome

        params = self._active
        candidate = rk4_step(self._state, self.dt, params)
        self._step_count += 1

        if params.target.contains(candidate.x, candidate.y):
            self._commit(candidate)
            self._outcome = ImpactTarget(candidate)
            return self._outcome

        if candidate.y < 0:
            landed = KinematicState(t=candidate.t, x=candidate.x, y=0.0,
                                    vx=candidate.vx, vy=candidate.vy)
            self._commit(landed)
            self._outcome = MissedGround(landed)
            return self._outcome

        self._state = candidate
        if self._step_count % self.sample_stride == 0:
            self._trajectory.append(candidate)
        return self._outcome

    def _commit(self, state: KinematicState) -> None:
        self._state = state
        self._trajectory.append(state)

    def run(self, max_time: float = DEFAULT_MAX_TIME,
            callback: Optional[Callable[[KinematicState], None]] = None) -> Optional[RunOutcome]:
        """
        Drive step() until the run terminates, is paused, or simulated time
        reaches `max_time`. `callback(state)` is invoked after every step.
        """
        while self.running and not self._paused and self._state.t < max_time:
            self.step()
            if callback is not None:
                callback(self._state)
        return self._outcome

    # ── Accessors ─────────────────────────────────────────────────────────

    @property
    def state(self) -> KinematicState:
        return self._state

    @property
    def outcome(self) -> Optional[RunOutcome]:
        return self._outcome

    @property
    def parameters(self) -> Optional[PhysicalParameters]:
        """Parameters of the active run (None while idle)."""
        return self._active

    @property
    def trajectory(self) -> Tuple[TrajectorySample, ...]:
        return tuple(self._trajectory)

    @property
    def paused(self) -> bool:
        return self._paused

    @property
    def running(self) -> bool:
        return isinstance(self._outcome, Running)

    @property
    def status(self) -> SessionState:
        if self._outcome is None:
            return SessionState.IDLE
        if isinstance(self._outcome, ImpactTarget):
            return SessionState.IMPACT_TARGET
        if isinstance(self._outcome, MissedGround):
            return SessionState.MISSED_GROUND
        return SessionState.RUNNING

    # ── Readouts ──────────────────────────────────────────────────────────

    def trajectory_arrays(self) -> Dict[str, np.ndarray]:
        """Recorded samples as column arrays: t, x, y, vx, vy, speed."""
        samples = self._trajectory
        return {
            't': np.array([s.t for s in samples]),
            'x': np.array([s.x for s in samples]),
            'y': np.array([s.y for s in samples]),
            'vx': np.array([s.vx for s in samples]),
            'vy': np.array([s.vy for s in samples]),
            'speed': np.array([s.speed for s in samples]),
        }

    def max_height(self) -> float:
        """Highest recorded altitude (m), including the current state."""
        heights = [s.y for s in self._trajectory] + [self._state.y]
        return float(max(heights))

    def summary(self) -> str:
        """Human-readable summary string."""
        p = self._active
        s = self._state
        if p is None:
            return "Trajectory session idle"
        lines = [
            f"╔══════════════════════════════════════════════════════╗",
            f"║  RUN SUMMARY — {self.status.value.upper():<38s}║",
            f"╠══════════════════════════════════════════════════════╣",
            f"║  Drag model   : {p.drag_model.value:<37s}║",
            f"║  k            : {p.drag_coefficient:<37.4f}║",
            f"║  Mass         : {p.mass:>10.2f} kg{'':<25s}║",
            f"║  Gravity      : {p.gravity:>10.2f} m/s²{'':<23s}║",
            f"║  Launch       : {p.launch_speed:>10.1f} m/s @ {p.launch_angle_deg:>5.1f} °{'':<12s}║",
            f"╠══════════════════════════════════════════════════════╣",
            f"║  Time         : {s.t:>10.2f} s{'':<26s}║",
            f"║  Range        : {s.x:>10.2f} m{'':<26s}║",
            f"║  Max height   : {self.max_height():>10.2f} m{'':<26s}║",
            f"║  Speed        : {s.speed:>10.2f} m/s{'':<24s}║",
            f"║  Samples      : {len(self._trajectory):>10d}{'':<27s}║",
            f"╚══════════════════════════════════════════════════════╝",
        ]
        return '\n'.join(lines)
