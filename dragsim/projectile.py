"""
Projectile Parameters & Kinematic State
=======================================
Defines the immutable inputs of a run (PhysicalParameters, Target) and the
kinematic snapshot (KinematicState) that the integrator advances.

Coordinate system:
  x = downrange (horizontal, launch point at 0)
  y = altitude  (vertical, up positive, ground at 0)
"""

import numpy as np
from dataclasses import dataclass, field

from .drag_model import DragLaw, drag_coefficient_for
from .environment import EARTH_GRAVITY, gravity_for


HIT_RADIUS = 3.0  # m


@dataclass(frozen=True)
class Target:
    """Circular target in the trajectory plane."""
    x: float = 50.0                  # m downrange
    y: float = 0.0                   # m altitude
    radius: float = HIT_RADIUS       # m

    def distance_to(self, x: float, y: float) -> float:
        """Euclidean distance (m) from (x, y) to the target centre."""
        return float(np.sqrt((x - self.x) ** 2 + (y - self.y) ** 2))

    def contains(self, x: float, y: float) -> bool:
        """True when (x, y) lies strictly inside the hit radius."""
        return self.distance_to(x, y) < self.radius


@dataclass(frozen=True)
class KinematicState:
    """Snapshot of projectile state at one instant."""
    t: float = 0.0      # s
    x: float = 0.0      # m
    y: float = 0.0      # m
    vx: float = 0.0     # m/s
    vy: float = 0.0     # m/s

    @property
    def speed(self) -> float:
        return float(np.sqrt(self.vx ** 2 + self.vy ** 2))

    def as_vector(self) -> np.ndarray:
        """[x, y, vx, vy] as used by the integrators."""
        return np.array([self.x, self.y, self.vx, self.vy], dtype=float)

    @classmethod
    def from_vector(cls, t: float, vector: np.ndarray) -> 'KinematicState':
        x, y, vx, vy = (float(v) for v in vector)
        return cls(t=float(t), x=x, y=y, vx=vx, vy=vy)


# Recorded trajectory points are plain kinematic snapshots.
TrajectorySample = KinematicState


@dataclass(frozen=True)
class PhysicalParameters:
    """
    Complete specification of one launch.

    Values are taken as given: the caller is responsible for physically
    sane input (mass > 0, gravity > 0, k >= 0, angle in [0, 90],
    speed >= 0).
    """
    mass: float = 0.3                     # kg
    gravity: float = EARTH_GRAVITY        # m/s²
    drag_coefficient: float = 0.02        # kg/s (linear) or kg/m (quadratic)
    drag_model: DragLaw = DragLaw.LINEAR
    launch_speed: float = 50.0            # m/s
    launch_angle_deg: float = 45.0        # degrees above horizontal
    target: Target = field(default_factory=Target)

    def __post_init__(self):
        object.__setattr__(self, 'drag_model', DragLaw.parse(self.drag_model))

    @classmethod
    def from_presets(cls, planet: str = 'earth', medium: str = 'air',
                     drag_model=DragLaw.LINEAR, **overrides) -> 'PhysicalParameters':
        """
        Build parameters from the planet and medium tables.

        Any remaining field (mass, launch_speed, launch_angle_deg, target)
        can be passed as a keyword override.
        """
        law = DragLaw.parse(drag_model)
        return cls(
            gravity=gravity_for(planet),
            drag_coefficient=drag_coefficient_for(medium, law),
            drag_model=law,
            **overrides,
        )

    def initial_velocity(self) -> np.ndarray:
        """Launch speed + elevation converted to [vx, vy]."""
        elev = np.radians(self.launch_angle_deg)
        return np.array([self.launch_speed * np.cos(elev),
                         self.launch_speed * np.sin(elev)])

    def initial_state(self) -> KinematicState:
        """Launch conditions: origin, t = 0, velocity along the elevation."""
        vx, vy = self.initial_velocity()
        return KinematicState(t=0.0, x=0.0, y=0.0, vx=float(vx), vy=float(vy))
