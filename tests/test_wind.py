import pytest

from py_sharpshooter.conditions import Environment, WindSegment
from py_sharpshooter.vector import Vector
from py_sharpshooter.wind import (
    CONSTANT_WIND_INDEX,
    WindSock,
    is_layered_wind,
    sample_wind_at_distance,
    sample_wind_at_distances,
    wind_at_flag_positions,
)

PROFILE = (
    WindSegment(0, 100, 2.0),
    WindSegment(100, 200, -1.0, gust_mps=0.5),
    WindSegment(200, 300, 4.0),
)


class TestConstantWind:

    def test_no_gust_returns_base_wind(self):
        env = Environment(base_wind=3.0)
        sample = sample_wind_at_distance(150, env)
        assert sample.wind_speed == 3.0
        assert sample.segment_index == CONSTANT_WIND_INDEX

    def test_gust_is_bounded_and_deterministic(self):
        env = Environment(base_wind=3.0, gust=1.0, seed=99)
        first = sample_wind_at_distance(10, env)
        assert 2.0 <= first.wind_speed < 4.0
        assert sample_wind_at_distance(10, env) == first
        # Same gust everywhere along the flight
        assert sample_wind_at_distance(250, env) == first

    def test_different_seeds_give_different_gusts(self):
        a = sample_wind_at_distance(0, Environment(base_wind=0.0, gust=2.0, seed=1))
        b = sample_wind_at_distance(0, Environment(base_wind=0.0, gust=2.0, seed=2))
        assert a.wind_speed != b.wind_speed

    def test_text_seed(self):
        a = sample_wind_at_distance(0, Environment(gust=2.0, seed="storm"))
        b = sample_wind_at_distance(0, Environment(gust=2.0, seed="storm"))
        assert a == b


class TestLayeredWind:

    def setup_method(self):
        self.env = Environment(wind_profile=PROFILE, seed=5)

    @pytest.mark.parametrize("distance, index, speed", [
        (0, 0, 2.0),
        (99.9, 0, 2.0),
        (200, 2, 4.0),
        (299, 2, 4.0),
    ])
    def test_segment_lookup(self, distance, index, speed):
        sample = sample_wind_at_distance(distance, self.env)
        assert sample.segment_index == index
        assert sample.wind_speed == speed

    def test_segment_end_is_exclusive(self):
        assert sample_wind_at_distance(100, self.env).segment_index == 1

    def test_gusty_segment(self):
        sample = sample_wind_at_distance(150, self.env)
        assert sample.segment_index == 1
        assert -1.5 <= sample.wind_speed < -0.5

    def test_beyond_profile_uses_last_segment(self):
        assert sample_wind_at_distance(450, self.env) == sample_wind_at_distance(250, self.env)

    def test_segments_use_distinct_seeds(self):
        env = Environment(wind_profile=(WindSegment(0, 100, 0.0, 1.0), WindSegment(100, 200, 0.0, 1.0)), seed=3)
        near, far = sample_wind_at_distances((50, 150), env)
        assert near.wind_speed != far.wind_speed

    def test_profile_overrides_base_wind(self):
        env = Environment(base_wind=10.0, wind_profile=PROFILE)
        assert sample_wind_at_distance(50, env).wind_speed == 2.0
        assert is_layered_wind(env)
        assert not is_layered_wind(Environment(base_wind=10.0))

    def test_flag_positions(self):
        flags = wind_at_flag_positions(300, self.env)
        assert flags.near.segment_index == 0  # 99 m
        assert flags.mid.segment_index == 1  # 198 m
        assert flags.far.segment_index == 2  # 300 m, past the profile end


class TestWindSock:

    def test_matches_free_function(self):
        env = Environment(wind_profile=PROFILE, seed="flags")
        sock = WindSock(env)
        for distance in (0, 50, 100, 150, 199, 250, 400):
            assert sock.sample_for_range(distance) == sample_wind_at_distance(distance, env)

    def test_constant_wind(self):
        env = Environment(base_wind=-2.5)
        sock = WindSock(env)
        assert sock.speed_for_range(0) == -2.5
        assert sock.speed_for_range(1000) == -2.5

    def test_vector_is_crosswind(self):
        sock = WindSock(Environment(base_wind=3.0))
        assert sock.vector_for_range(42) == Vector(0.0, 0.0, 3.0)
