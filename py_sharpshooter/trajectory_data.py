"""Results of a simulated shot"""
import math
from dataclasses import dataclass, field

from typing_extensions import Iterator, NamedTuple, Optional, Tuple

from py_sharpshooter.conditions import Shot
from py_sharpshooter.turret import meters_to_mils
from py_sharpshooter.vector import Vector

__all__ = ('ShotResult', 'HitResult')


class ShotResult(NamedTuple):
    """
    Projectile state at the target plane

    Attributes:
        impact_y_m (float): vertical impact offset, up positive
        impact_z_m (float): horizontal impact offset, right positive
        time_of_flight_s (float): flight time to the target plane
        wind_used_mps (float): crosswind sampled at the last integration position
        path (Optional[Tuple[Vector, ...]]): every sub-step position when requested
        layered_wind (bool): a layered wind profile was used
        reached_target (bool): False when the flight time cap was hit first
        step_count (int): number of integration steps
    """

    impact_y_m: float
    impact_z_m: float
    time_of_flight_s: float
    wind_used_mps: float
    path: Optional[Tuple[Vector, ...]] = None
    layered_wind: bool = False
    reached_target: bool = True
    step_count: int = 0


@dataclass
class HitResult:
    """Outcome of one trigger pull through the shot pipeline

    Attributes:
        shot: the shot that was fired
        flight: raw integrator result for the perturbed aim point
        aim_y_m: vertical aim point fed to the integrator
        aim_z_m: horizontal aim point fed to the integrator
        dispersion: (d_y, d_z) precision scatter added to the aim point
        expert_offset: (vertical, horizontal) spin drift and Coriolis deflection
    """

    shot: Shot
    flight: ShotResult = field(repr=False)
    aim_y_m: float = 0.0
    aim_z_m: float = 0.0
    dispersion: Tuple[float, float] = (0.0, 0.0)
    expert_offset: Tuple[float, float] = (0.0, 0.0)

    @property
    def impact_y_m(self) -> float:
        """Final vertical impact offset including expert effects"""
        return self.flight.impact_y_m + self.expert_offset[0]

    @property
    def impact_z_m(self) -> float:
        """Final horizontal impact offset including expert effects"""
        return self.flight.impact_z_m + self.expert_offset[1]

    @property
    def time_of_flight_s(self) -> float:
        return self.flight.time_of_flight_s

    @property
    def distance_m(self) -> float:
        return self.shot.request.distance_m

    def __iter__(self) -> Iterator[Vector]:
        yield from self.flight.path or ()

    def miss_distance(self) -> float:
        """:return: distance of the impact from the target center (m)"""
        return math.hypot(self.impact_y_m, self.impact_z_m)

    def is_hit(self, radius_m: float) -> bool:
        """:return: True when the impact lies within ``radius_m`` of the center, boundary included"""
        return self.miss_distance() <= radius_m

    def offset_mils(self) -> Tuple[float, float]:
        """:return: (vertical, horizontal) impact offset in MILs at the target distance"""
        return (meters_to_mils(self.distance_m, self.impact_y_m),
                meters_to_mils(self.distance_m, self.impact_z_m))
