"""
Unit Tests for dragsim Physics
==============================
Tests drag model, integrator, terminal velocity and validation modules.
Run: python -m pytest tests/ -v
"""

import sys
import os
import numpy as np
import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from dragsim.environment import gravity_for, free_fall_time, PLANETS
from dragsim.drag_model import (
    DragLaw, MEDIA, drag_coefficient_for, drag_acceleration, derivatives,
)
from dragsim.projectile import PhysicalParameters, KinematicState, Target, HIT_RADIUS
from dragsim.integrator import rk4_step, integrate, DEFAULT_DT
from dragsim.terminal import (
    terminal_velocity, verify, Success, GradedError, InvalidInput, Undefined,
)
from dragsim.validation import (
    free_fall_state, linear_drag_state, validate_case,
    check_terminal_convergence, run_all_validations,
)


class TestEnvironment:
    """Gravity presets."""

    def test_planet_gravity(self):
        assert gravity_for('earth') == 9.8
        assert gravity_for('moon') == 1.6
        assert gravity_for('jupiter') == 24.8

    def test_unknown_planet_rejected(self):
        with pytest.raises(ValueError):
            gravity_for('mars')

    def test_free_fall_time(self):
        assert abs(free_fall_time(19.6, 9.8) - 2.0) < 1e-12

    def test_all_planets_positive(self):
        for data in PLANETS.values():
            assert data['gravity'] > 0


class TestDragModel:
    """Acceleration under both drag laws."""

    def test_vacuum_is_free_fall(self):
        for law in DragLaw:
            p = PhysicalParameters(drag_coefficient=0.0, drag_model=law)
            ax, ay = drag_acceleration(10.0, -5.0, p)
            assert ax == 0.0
            assert ay == -p.gravity

    def test_linear_components(self):
        p = PhysicalParameters(mass=2.0, gravity=9.8, drag_coefficient=0.5,
                               drag_model=DragLaw.LINEAR)
        ax, ay = drag_acceleration(4.0, 2.0, p)
        assert ax == pytest.approx(-1.0)
        assert ay == pytest.approx(-10.3)

    def test_quadratic_components(self):
        """Speed 5 m/s multiplies each component."""
        p = PhysicalParameters(mass=1.0, gravity=9.8, drag_coefficient=0.1,
                               drag_model=DragLaw.QUADRATIC)
        ax, ay = drag_acceleration(3.0, 4.0, p)
        assert ax == pytest.approx(-1.5)
        assert ay == pytest.approx(-11.8)

    def test_quadratic_at_rest(self):
        p = PhysicalParameters(drag_coefficient=0.5, drag_model=DragLaw.QUADRATIC)
        assert drag_acceleration(0.0, 0.0, p) == (0.0, -p.gravity)

    def test_drag_opposes_motion(self):
        for law in DragLaw:
            p = PhysicalParameters(drag_coefficient=0.05, drag_model=law)
            v = np.array([30.0, -12.0])
            ax, ay = drag_acceleration(v[0], v[1], p)
            drag = np.array([ax, ay + p.gravity])
            assert np.dot(drag, v) < 0

    def test_derivatives_vector(self):
        p = PhysicalParameters()
        d = derivatives(np.array([1.0, 2.0, 3.0, 4.0]), p)
        ax, ay = drag_acceleration(3.0, 4.0, p)
        assert np.allclose(d, [3.0, 4.0, ax, ay])

    def test_medium_coefficients(self):
        assert drag_coefficient_for('air', 'linear') == 0.02
        assert drag_coefficient_for('air', DragLaw.QUADRATIC) == 0.001
        assert drag_coefficient_for('water', 'quadratic') == 0.5
        for law in DragLaw:
            assert drag_coefficient_for('vacuum', law) == 0.0

    def test_unknown_medium_rejected(self):
        with pytest.raises(ValueError):
            drag_coefficient_for('honey', 'linear')

    def test_parse_drag_law(self):
        assert DragLaw.parse('Linear') is DragLaw.LINEAR
        assert DragLaw.parse(' quadratic ') is DragLaw.QUADRATIC
        assert DragLaw.parse(DragLaw.LINEAR) is DragLaw.LINEAR
        with pytest.raises(ValueError):
            DragLaw.parse('cubic')

    def test_media_pairs_non_negative(self):
        for data in MEDIA.values():
            assert data['k_linear'] >= 0
            assert data['k_quadratic'] >= 0


class TestProjectile:
    """Parameters and launch state."""

    def test_initial_state(self):
        p = PhysicalParameters(launch_speed=50.0, launch_angle_deg=45.0)
        s = p.initial_state()
        assert (s.t, s.x, s.y) == (0.0, 0.0, 0.0)
        assert s.vx == pytest.approx(50.0 * np.cos(np.pi / 4))
        assert s.vy == pytest.approx(50.0 * np.sin(np.pi / 4))
        assert s.speed == pytest.approx(50.0)

    def test_vertical_launch(self):
        s = PhysicalParameters(launch_speed=10.0, launch_angle_deg=90.0).initial_state()
        assert abs(s.vx) < 1e-12
        assert s.vy == pytest.approx(10.0)

    def test_from_presets(self):
        p = PhysicalParameters.from_presets(planet='moon', medium='oil',
                                            drag_model='quadratic', mass=2.0)
        assert p.gravity == 1.6
        assert p.drag_coefficient == 0.8
        assert p.drag_model is DragLaw.QUADRATIC
        assert p.mass == 2.0

    def test_drag_model_name_normalized(self):
        assert PhysicalParameters(drag_model='quadratic').drag_model is DragLaw.QUADRATIC

    def test_target_radius_is_strict(self):
        t = Target(x=10.0, y=0.0)
        assert t.radius == HIT_RADIUS == 3.0
        assert t.contains(12.9, 0.0)
        assert not t.contains(13.0, 0.0)

    def test_state_vector_roundtrip(self):
        s = KinematicState(t=1.5, x=1.0, y=2.0, vx=3.0, vy=4.0)
        assert KinematicState.from_vector(1.5, s.as_vector()) == s


class TestIntegrator:
    """RK4 stepping."""

    def test_step_advances_time_only_by_dt(self):
        p = PhysicalParameters()
        s0 = p.initial_state()
        s1 = rk4_step(s0, 0.01, p)
        assert s1.t == pytest.approx(0.01)
        assert s0 == p.initial_state()
        assert s1.x > 0

    def test_free_fall_reduction(self):
        """k = 0 gives exact projectile motion for 5 s at dt = 0.01 s."""
        for law in DragLaw:
            p = PhysicalParameters(drag_coefficient=0.0, drag_model=law,
                                   launch_speed=50.0, launch_angle_deg=45.0)
            history = integrate(p.initial_state(), p, 5.0, 0.01)
            assert len(history) == 501
            for s in history:
                exact = free_fall_state(p, s.t)
                assert np.allclose(s.as_vector(), exact.as_vector(),
                                   rtol=1e-6, atol=1e-6)

    def test_linear_drag_matches_closed_form(self):
        p = PhysicalParameters.from_presets(medium='air', drag_model='linear')
        history = integrate(p.initial_state(), p, 5.0)
        for s in history:
            exact = linear_drag_state(p, s.t)
            assert np.allclose(s.as_vector(), exact.as_vector(), atol=1e-6)

    def test_quadratic_matches_solve_ivp(self):
        p = PhysicalParameters.from_presets(medium='air', drag_model='quadratic')
        result = validate_case(p, duration=5.0)
        assert result.reference == 'solve_ivp'
        assert result.passed

    def test_drag_shortens_flight(self):
        vacuum = PhysicalParameters(drag_coefficient=0.0)
        air = PhysicalParameters(drag_coefficient=0.02)
        s_vac = integrate(vacuum.initial_state(), vacuum, 3.0)[-1]
        s_air = integrate(air.initial_state(), air, 3.0)[-1]
        assert s_air.x < s_vac.x
        assert s_air.speed < s_vac.speed

    @pytest.mark.parametrize('law', [DragLaw.LINEAR, DragLaw.QUADRATIC])
    def test_terminal_velocity_convergence(self, law):
        p = PhysicalParameters.from_presets(medium='air', drag_model=law)
        conv = check_terminal_convergence(p, duration=100.0, dt=DEFAULT_DT)
        assert conv.converged
        assert conv.relative_error < 0.01

    def test_convergence_undefined_in_vacuum(self):
        p = PhysicalParameters(drag_coefficient=0.0)
        conv = check_terminal_convergence(p, duration=1.0)
        assert conv.terminal_velocity is None
        assert not conv.converged


class TestTerminalVelocity:
    """Analytic terminal velocity and answer grading."""

    def test_linear_value(self):
        p = PhysicalParameters(mass=0.3, gravity=9.8, drag_coefficient=0.02,
                               drag_model='linear')
        assert terminal_velocity(p) == pytest.approx(147.0)

    def test_quadratic_value(self):
        p = PhysicalParameters(mass=0.3, gravity=9.8, drag_coefficient=0.001,
                               drag_model='quadratic')
        assert terminal_velocity(p) == pytest.approx(np.sqrt(2940.0))
        assert terminal_velocity(p) == pytest.approx(54.222, abs=1e-3)

    def test_vacuum_undefined(self):
        for law in DragLaw:
            assert terminal_velocity(PhysicalParameters(drag_coefficient=0.0,
                                                        drag_model=law)) is None

    def _ten(self):
        return PhysicalParameters(mass=1.0, gravity=10.0, drag_coefficient=1.0,
                                  drag_model='linear')

    def test_tolerance_boundary_inclusive(self):
        p = self._ten()
        assert terminal_velocity(p) == 10.0
        assert isinstance(verify(10.3, p), Success)
        assert isinstance(verify(9.7, p), Success)

    def test_just_outside_tolerance(self):
        result = verify(10.31, self._ten())
        assert isinstance(result, GradedError)
        assert result.percent_error == pytest.approx(3.1)
        assert result.theoretical == 10.0
        assert result.user_value == 10.31

    def test_exact_answer(self):
        result = verify('147', PhysicalParameters())
        assert isinstance(result, Success)
        assert result.percent_error == pytest.approx(0.0)

    def test_invalid_answers(self):
        p = PhysicalParameters()
        for answer in ['', 'abc', None, float('nan'), float('inf'), '1e999']:
            assert isinstance(verify(answer, p), InvalidInput)

    def test_vacuum_always_informational(self):
        p = PhysicalParameters.from_presets(medium='vacuum')
        for answer in ['147', 'abc', None, 0.0]:
            result = verify(answer, p)
            assert isinstance(result, Undefined)
            assert 'no terminal velocity' in result.message


class TestValidation:
    """Validation suite over the medium presets."""

    def test_all_cases_pass_for_light_media(self):
        results = run_all_validations(duration=2.0, verbose=False)
        assert 'vacuum/quadratic' not in results
        for key in ['vacuum/linear', 'air/linear', 'air/quadratic',
                    'strong_wind/linear', 'strong_wind/quadratic']:
            assert results[key].passed, key

    def test_vacuum_uses_analytic_reference(self):
        result = validate_case(PhysicalParameters(drag_coefficient=0.0))
        assert result.reference == 'analytic'
        assert result.max_velocity_error < 1e-9


if __name__ == "__main__":
    pytest.main([__file__, '-v'])
