import math
from dataclasses import replace

import pytest

from py_sharpshooter.conditions import Environment, ShotRequest, WindSegment
from py_sharpshooter.constants import cGravityConstant
from py_sharpshooter.engines import (
    BaseIntegrationEngine,
    EulerIntegrationEngine,
    RK4IntegrationEngine,
    ShotProps,
    create_base_engine_config,
)
from py_sharpshooter.exceptions import ShotParameterError, SimulationInputError
from py_sharpshooter.generics.engine import EngineProtocol
from py_sharpshooter.vector import Vector

ENGINES = [EulerIntegrationEngine, RK4IntegrationEngine]
TOLERANCE = {EulerIntegrationEngine: 2e-3, RK4IntegrationEngine: 1e-4}

RIFLE = ShotRequest(distance_m=300.0, muzzle_velocity_mps=850.0, drag_factor=0.0002)


@pytest.mark.parametrize("engine_cls", ENGINES)
class TestVacuumFlight:

    def test_implements_protocol(self, engine_cls):
        assert isinstance(engine_cls(), EngineProtocol)
        assert issubclass(engine_cls, BaseIntegrationEngine)

    def test_level_shot_drops(self, engine_cls, vacuum_request, calm_env):
        result = engine_cls().integrate(vacuum_request, calm_env)
        assert result.reached_target
        assert result.impact_y_m < 0
        assert result.impact_z_m == 0

    def test_matches_analytic_drop(self, engine_cls, vacuum_request, calm_env):
        result = engine_cls().integrate(vacuum_request, calm_env)
        tof = vacuum_request.distance_m / vacuum_request.muzzle_velocity_mps
        assert result.time_of_flight_s == pytest.approx(tof, rel=1e-6)
        expected_drop = -0.5 * cGravityConstant * tof * tof
        assert result.impact_y_m == pytest.approx(expected_drop, abs=TOLERANCE[engine_cls])

    def test_horizontal_aim(self, engine_cls, vacuum_request, calm_env):
        result = engine_cls().integrate(replace(vacuum_request, aim_z_m=0.1), calm_env)
        assert result.impact_z_m == pytest.approx(0.1, abs=1e-6)

    def test_vertical_aim_offsets_drop(self, engine_cls, vacuum_request, calm_env):
        level = engine_cls().integrate(vacuum_request, calm_env)
        high = engine_cls().integrate(replace(vacuum_request, aim_y_m=0.2), calm_env)
        assert high.impact_y_m - level.impact_y_m == pytest.approx(0.2, abs=1e-3)

    def test_wind_has_no_effect_without_drag(self, engine_cls, vacuum_request):
        result = engine_cls().integrate(vacuum_request, Environment(base_wind=10.0))
        assert result.impact_z_m == 0
        assert result.wind_used_mps == 10.0

    def test_gravity_override(self, engine_cls, vacuum_request):
        result = engine_cls().integrate(vacuum_request, Environment(gravity=0.0))
        assert result.impact_y_m == 0

    def test_gravity_from_config(self, engine_cls, vacuum_request, calm_env):
        result = engine_cls({'cGravityConstant': 0.0}).integrate(vacuum_request, calm_env)
        assert result.impact_y_m == 0


@pytest.mark.parametrize("engine_cls", ENGINES)
class TestDragAndWind:

    def test_drag_slows_and_drops(self, engine_cls, calm_env):
        vacuum = engine_cls().integrate(replace(RIFLE, drag_factor=0.0), calm_env)
        dragged = engine_cls().integrate(RIFLE, calm_env)
        assert dragged.time_of_flight_s > vacuum.time_of_flight_s
        assert dragged.impact_y_m < vacuum.impact_y_m

    def test_thin_air_drags_less(self, engine_cls):
        dense = engine_cls().integrate(RIFLE, Environment(temperature_c=-20))
        thin = engine_cls().integrate(RIFLE, Environment(altitude_m=3500))
        assert thin.time_of_flight_s < dense.time_of_flight_s

    @pytest.mark.parametrize("wind, sign", [(4.0, 1), (-4.0, -1)])
    def test_crosswind_sign(self, engine_cls, calm_env, wind, sign):
        result = engine_cls().integrate(RIFLE, replace(calm_env, base_wind=wind))
        assert math.copysign(1, result.impact_z_m) == sign
        assert result.wind_used_mps == wind
        assert not result.layered_wind

    def test_single_segment_profile_matches_constant_wind(self, engine_cls, calm_env):
        constant = engine_cls().integrate(RIFLE, replace(calm_env, base_wind=3.0))
        layered = engine_cls().integrate(
            RIFLE, replace(calm_env, wind_profile=(WindSegment(0, 1000, 3.0),))
        )
        assert layered.layered_wind
        assert layered.impact_z_m == constant.impact_z_m
        assert layered.impact_y_m == constant.impact_y_m

    def test_near_wind_deflects_more_than_far_wind(self, engine_cls, calm_env):
        near = replace(calm_env, wind_profile=(WindSegment(0, 150, 5.0), WindSegment(150, 300, 0.0)))
        far = replace(calm_env, wind_profile=(WindSegment(0, 150, 0.0), WindSegment(150, 300, 5.0)))
        near_result = engine_cls().integrate(RIFLE, near)
        far_result = engine_cls().integrate(RIFLE, far)
        assert near_result.impact_z_m > far_result.impact_z_m > 0
        assert near_result.wind_used_mps == 0.0
        assert far_result.wind_used_mps == 5.0

    def test_deterministic(self, engine_cls):
        env = Environment(base_wind=2.0, gust=1.5, seed="replay")
        assert engine_cls().integrate(RIFLE, env) == engine_cls().integrate(RIFLE, env)


@pytest.mark.parametrize("engine_cls", ENGINES)
class TestLoopBounds:

    @pytest.mark.parametrize("field_name, value", [
        ('dt_s', 0.0),
        ('dt_s', -0.001),
        ('dt_s', float('nan')),
        ('max_time_s', 0.0),
        ('max_time_s', -1.0),
        ('max_time_s', float('inf')),
        ('dt_s', float('inf')),
    ])
    def test_rejects_non_terminating_parameters(self, engine_cls, calm_env, field_name, value):
        request = replace(RIFLE, **{field_name: value})
        with pytest.raises(ShotParameterError) as exc_info:
            engine_cls().integrate(request, calm_env)
        assert exc_info.value.parameter == field_name
        assert isinstance(exc_info.value, SimulationInputError)

    def test_rejects_bad_config_step(self, engine_cls, calm_env):
        with pytest.raises(ShotParameterError):
            engine_cls({'cTimeStep': 0.0}).integrate(RIFLE, calm_env)

    def test_rejects_unbounded_config_time_cap(self, engine_cls, calm_env):
        stalled = ShotRequest(distance_m=100.0, muzzle_velocity_mps=0.0)
        with pytest.raises(ShotParameterError):
            engine_cls({'cMaxTime': float('inf')}).integrate(stalled, replace(calm_env, gravity=0.0))

    def test_time_cap_returns_last_state(self, engine_cls, calm_env):
        request = ShotRequest(distance_m=1000.0, muzzle_velocity_mps=100.0, max_time_s=1.0)
        result = engine_cls().integrate(request, calm_env)
        assert not result.reached_target
        assert result.time_of_flight_s == pytest.approx(1.0, abs=0.003)
        assert result.impact_y_m < 0
        assert 500 <= result.step_count <= 501

    def test_zero_muzzle_velocity_is_finite(self, engine_cls, calm_env):
        request = ShotRequest(distance_m=100.0, muzzle_velocity_mps=0.0, drag_factor=0.001, max_time_s=0.1)
        result = engine_cls().integrate(request, calm_env)
        assert not result.reached_target
        assert math.isfinite(result.impact_y_m)
        assert result.impact_y_m < 0

    def test_path(self, engine_cls, calm_env):
        result = engine_cls().integrate(replace(RIFLE, record_path=True), calm_env)
        assert result.path[0] == Vector(0.0, 0.0, 0.0)
        assert len(result.path) == result.step_count + 1
        assert result.path[-1].x >= RIFLE.distance_m
        assert all(a.x < b.x for a, b in zip(result.path, result.path[1:]))

    def test_no_path_by_default(self, engine_cls, calm_env):
        assert engine_cls().integrate(RIFLE, calm_env).path is None

    def test_custom_step(self, engine_cls, calm_env):
        coarse = engine_cls().integrate(RIFLE, calm_env)
        fine = engine_cls({'cTimeStep': 0.0005}).integrate(RIFLE, calm_env)
        per_request = engine_cls().integrate(replace(RIFLE, dt_s=0.0005), calm_env)
        assert fine.step_count > coarse.step_count
        assert per_request == fine

    def test_step_counter_accumulates(self, engine_cls, calm_env):
        engine = engine_cls()
        first = engine.integrate(RIFLE, calm_env)
        second = engine.integrate(RIFLE, calm_env)
        assert engine.integration_step_count == first.step_count + second.step_count


def test_euler_and_rk4_agree(calm_env):
    env = replace(calm_env, base_wind=3.0)
    euler = EulerIntegrationEngine().integrate(RIFLE, env)
    rk4 = RK4IntegrationEngine().integrate(RIFLE, env)
    assert euler.impact_y_m == pytest.approx(rk4.impact_y_m, abs=0.01)
    assert euler.impact_z_m == pytest.approx(rk4.impact_z_m, abs=0.01)
    assert euler.time_of_flight_s == pytest.approx(rk4.time_of_flight_s, rel=1e-3)


class TestShotProps:

    def test_defaults_resolved(self, calm_env):
        props = ShotProps.from_request(RIFLE, calm_env, create_base_engine_config())
        assert props.time_step == 0.002
        assert props.max_time == 5.0
        assert props.drag_coefficient == pytest.approx(0.0002 * 1.225)
        assert props.gravity_vector == Vector(0.0, -cGravityConstant, 0.0)
        assert props.initial_velocity == Vector(850.0, 0.0, 0.0)

    def test_launch_angle_points_at_aim(self, calm_env):
        request = replace(RIFLE, aim_y_m=3.0)
        props = ShotProps.from_request(request, calm_env, create_base_engine_config())
        v = props.initial_velocity
        assert v.y / v.x == pytest.approx(3.0 / 300.0)
        assert v.magnitude() == pytest.approx(850.0)
