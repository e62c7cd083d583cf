import pytest

from py_sharpshooter.conditions import Shot, ShotRequest
from py_sharpshooter.trajectory_data import HitResult, ShotResult
from py_sharpshooter.vector import Vector


@pytest.fixture
def hit() -> HitResult:
    flight = ShotResult(impact_y_m=-0.3, impact_z_m=0.35, time_of_flight_s=0.4, wind_used_mps=2.0,
                        path=(Vector(0, 0, 0), Vector(50, 0.1, 0.01), Vector(100, -0.3, 0.35)))
    return HitResult(Shot(ShotRequest(distance_m=100.0, muzzle_velocity_mps=800.0)), flight,
                     expert_offset=(0.0, 0.05))


class TestShotResult:

    def test_defaults(self):
        result = ShotResult(0.0, 0.0, 0.1, 0.0)
        assert result.path is None
        assert result.reached_target
        assert not result.layered_wind
        assert result.step_count == 0


class TestHitResult:

    def test_impact_includes_expert_offset(self, hit):
        assert hit.impact_y_m == -0.3
        assert hit.impact_z_m == pytest.approx(0.4)
        assert hit.time_of_flight_s == 0.4
        assert hit.distance_m == 100.0

    def test_miss_distance(self, hit):
        assert hit.miss_distance() == pytest.approx(0.5)
        assert hit.is_hit(0.5 + 1e-12)
        assert not hit.is_hit(0.49)

    def test_offset_mils(self, hit):
        assert hit.offset_mils() == pytest.approx((-3.0, 4.0))

    def test_iter_path(self, hit):
        assert [p.x for p in hit] == [0, 50, 100]

    def test_iter_without_path(self):
        flight = ShotResult(0.0, 0.0, 0.1, 0.0)
        assert list(HitResult(Shot(ShotRequest(10.0, 300.0)), flight)) == []

    def test_repr_hides_flight(self, hit):
        assert 'flight' not in repr(hit)
