#!/usr/bin/env python3
"""
═══════════════════════════════════════════════════════════════════════════════
  DRAGSIM — Projectile Motion with Drag — Main Runner
═══════════════════════════════════════════════════════════════════════════════

  Executes the complete demonstration pipeline:
    1. Gravity and medium presets
    2. Reference launch (Earth, still air, linear drag)
    3. Media comparison (same launch, every medium and drag law)
    4. Target practice (hit vs miss)
    5. Terminal velocity answers graded by the verifier
    6. RK4 validation against analytic and solve_ivp references
    7. Terminal velocity convergence of a long vertical fall

  Usage:
    python main.py              # Run everything
    python main.py --quick      # Skip the convergence phase (faster)
═══════════════════════════════════════════════════════════════════════════════
"""

import sys
import os
import time

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from dragsim.environment import PLANETS, free_fall_time
from dragsim.drag_model import MEDIA, DragLaw
from dragsim.projectile import PhysicalParameters, Target
from dragsim.session import TrajectorySession, ImpactTarget
from dragsim.terminal import terminal_velocity, verify
from dragsim.validation import run_all_validations, check_terminal_convergence


def banner():
    print("""
╔═══════════════════════════════════════════════════════════════════════╗
║                                                                       ║
║     DRAGSIM — TWO-DIMENSIONAL PROJECTILE MOTION WITH DRAG             ║
║     ─────────────────────────────────────────────────────             ║
║     Physics: Gravity · Linear drag (∝v) · Quadratic drag (∝v²)        ║
║     Method: fixed-step RK4 │ Terminal velocity grading               ║
║                                                                       ║
╚═══════════════════════════════════════════════════════════════════════╝
""")


def section(title):
    print(f"\n{'─'*60}")
    print(f"  {title}")
    print(f"{'─'*60}")


def main():
    start_time = time.time()
    quick = '--quick' in sys.argv

    banner()

    # ══════════════════════════════════════════════════════════════════════
    #  PHASE 1: Presets
    # ══════════════════════════════════════════════════════════════════════
    section("PHASE 1: Gravity and Medium Presets")
    print(f"  {'Body':<10} {'g (m/s²)':>9} {'fall 10 m (s)':>14}")
    for data in PLANETS.values():
        g = data['gravity']
        print(f"  {data['name']:<10} {g:>9.2f} {free_fall_time(10.0, g):>14.3f}")

    print(f"\n  {'Medium':<12} {'k lin':>7} {'k quad':>7} {'v_t lin':>9} {'v_t quad':>9}")
    for key, data in MEDIA.items():
        vt = [terminal_velocity(PhysicalParameters.from_presets(medium=key, drag_model=law))
              for law in DragLaw]
        vt_txt = ['—' if v is None else f"{v:.2f}" for v in vt]
        print(f"  {data['name']:<12} {data['k_linear']:>7.3f} {data['k_quadratic']:>7.3f} "
              f"{vt_txt[0]:>9} {vt_txt[1]:>9}")

    # ══════════════════════════════════════════════════════════════════════
    #  PHASE 2: Reference launch
    # ══════════════════════════════════════════════════════════════════════
    section("PHASE 2: Reference Launch (0.3 kg, 50 m/s @ 45°, air)")

    params = PhysicalParameters.from_presets(planet='earth', medium='air',
                                             drag_model='linear',
                                             target=Target(x=500.0, y=500.0))
    session = TrajectorySession(params)
    session.start()
    session.run()
    print(session.summary())

    # ══════════════════════════════════════════════════════════════════════
    #  PHASE 3: Media comparison
    # ══════════════════════════════════════════════════════════════════════
    section("PHASE 3: Media Comparison (Same Launch Conditions)")

    for law in DragLaw:
        for key, data in MEDIA.items():
            p = PhysicalParameters.from_presets(medium=key, drag_model=law,
                                                target=Target(x=-100.0, y=-100.0))
            s = TrajectorySession(p)
            s.start()
            s.run()
            print(f"  {law.value:<10s} {data['name']:<12s}  "
                  f"Range: {s.state.x:>7.2f} m  "
                  f"Max height: {s.max_height():>6.2f} m  "
                  f"ToF: {s.state.t:>5.2f} s")

    # ══════════════════════════════════════════════════════════════════════
    #  PHASE 4: Target practice
    # ══════════════════════════════════════════════════════════════════════
    section("PHASE 4: Target Practice")

    for angle in [30.0, 40.0, 45.0, 50.0, 60.0]:
        p = PhysicalParameters(launch_speed=25.0, launch_angle_deg=angle,
                               target=Target(x=55.0, y=0.0))
        s = TrajectorySession(p)
        s.start()
        outcome = s.run()
        verdict = "HIT" if isinstance(outcome, ImpactTarget) else "miss"
        print(f"  θ={angle:>4.0f}°  landed at x={s.state.x:>6.2f} m  "
              f"t={s.state.t:>5.2f} s  → {verdict}")

    # ══════════════════════════════════════════════════════════════════════
    #  PHASE 5: Verifier
    # ══════════════════════════════════════════════════════════════════════
    section("PHASE 5: Terminal Velocity Verification")

    cases = [
        (PhysicalParameters(), '147'),
        (PhysicalParameters(), '150'),
        (PhysicalParameters(), '160'),
        (PhysicalParameters.from_presets(drag_model='quadratic'), '54.2'),
        (PhysicalParameters.from_presets(drag_model='quadratic'), 'fast'),
        (PhysicalParameters.from_presets(medium='vacuum'), '100'),
    ]
    for p, answer in cases:
        result = verify(answer, p)
        print(f"  {p.drag_model.value:<10s} k={p.drag_coefficient:<6g} "
              f"answer={answer:<6s} → {type(result).__name__}: {result.message}")

    # ══════════════════════════════════════════════════════════════════════
    #  PHASE 6: Validation
    # ══════════════════════════════════════════════════════════════════════
    section("PHASE 6: RK4 Validation")
    run_all_validations(verbose=True)

    # ══════════════════════════════════════════════════════════════════════
    #  PHASE 7: Terminal velocity convergence
    # ══════════════════════════════════════════════════════════════════════
    if not quick:
        section("PHASE 7: Terminal Velocity Convergence (100 s vertical fall)")
        for law in DragLaw:
            p = PhysicalParameters.from_presets(medium='air', drag_model=law)
            conv = check_terminal_convergence(p)
            status = "✓" if conv.converged else "✗"
            print(f"  {status} {law.value:<10s} v_t={conv.terminal_velocity:>8.3f} m/s  "
                  f"reached {conv.final_speed:>8.3f} m/s  "
                  f"({100*conv.relative_error:.3f}%)")
    else:
        section("PHASE 7: Convergence SKIPPED (--quick mode)")

    elapsed = time.time() - start_time
    section("COMPLETE")
    print(f"\n  Total runtime: {elapsed:.1f} seconds\n")


if __name__ == "__main__":
    main()
