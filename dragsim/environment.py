"""
Gravitational Environment Presets
=================================
Surface gravity for the bodies a projectile can be launched on.

The values are the rounded figures used for classroom exercises, not
precise geodetic constants:
  - Earth    9.8  m/s²
  - Moon     1.6  m/s²
  - Jupiter 24.8  m/s²
"""


# ── Gravity Constants ──────────────────────────────────────────────────────
EARTH_GRAVITY    = 9.8     # m/s²
MOON_GRAVITY     = 1.6     # m/s²
JUPITER_GRAVITY  = 24.8    # m/s²


PLANETS = {
    'earth': {
        'name': 'Earth',
        'gravity': EARTH_GRAVITY,
    },
    'moon': {
        'name': 'Moon',
        'gravity': MOON_GRAVITY,
    },
    'jupiter': {
        'name': 'Jupiter',
        'gravity': JUPITER_GRAVITY,
    },
}


def gravity_for(planet_key: str) -> float:
    """Surface gravity (m/s²) for a planet preset key."""
    if planet_key not in PLANETS:
        raise ValueError(
            f"Unknown planet '{planet_key}'. "
            f"Available: {list(PLANETS.keys())}"
        )
    return PLANETS[planet_key]['gravity']


def free_fall_time(height: float, gravity: float) -> float:
    """
    Time (s) to fall `height` metres from rest in vacuum: t = sqrt(2h / g).
    """
    return (2.0 * height / gravity) ** 0.5


if __name__ == "__main__":
    print("Gravity Presets")
    print("=" * 40)
    print(f"{'Body':>10} {'g (m/s²)':>10} {'t_fall 10 m (s)':>16}")
    print("-" * 40)
    for key, data in PLANETS.items():
        g = data['gravity']
        print(f"{data['name']:>10} {g:>10.2f} {free_fall_time(10.0, g):>16.3f}")
