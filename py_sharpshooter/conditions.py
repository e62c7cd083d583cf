"""Shot and environment conditions.

Plain data structures passed into the core by the game/session layer.

Classes:
    WindSegment: Wind in effect over one down-range interval
    Environment: Air, gravity, wind and seed for a shot
    ShotRequest: Flight parameters for the trajectory integrator
    Shot: Everything the one-shot pipeline needs besides the environment
"""
from dataclasses import dataclass, field

from typing_extensions import Optional, Sequence, Tuple

from py_sharpshooter.atmosphere import compute_air_density
from py_sharpshooter.constants import (
    cDefaultLatitudeDeg,
    cDefaultSeed,
    cStandardTemperatureC,
)
from py_sharpshooter.rng import SeedT
from py_sharpshooter.turret import TurretState

__all__ = ('WindSegment', 'Environment', 'ShotRequest', 'Shot')


@dataclass(frozen=True)
class WindSegment:
    """
    Describe wind in effect over a particular down-range interval.

    Attributes:
        start_m: segment start, inclusive (meters from the shooter)
        end_m: segment end, exclusive
        wind_mps: crosswind speed, positive blows from left to right
        gust_mps: gust range, the sampled gust lies in [-gust_mps, +gust_mps)
    """

    start_m: float
    end_m: float
    wind_mps: float
    gust_mps: float = 0.0

    def contains(self, distance_m: float) -> bool:
        """True when ``distance_m`` lies in ``[start_m, end_m)``."""
        return self.start_m <= distance_m < self.end_m


@dataclass
class Environment:
    """
    Air, gravity and wind conditions of a shot.

    When ``wind_profile`` is empty the scalar ``base_wind`` and ``gust`` are
    used for the whole flight; otherwise the segments are consulted in order.

    Attributes:
        air_density: kg/m³, derived from temperature and altitude when None
        temperature_c: range temperature (°C)
        altitude_m: range altitude (m)
        gravity: gravitational acceleration (m/s²), engine default (9.80665) when None
        base_wind: constant crosswind fallback (m/s)
        gust: constant gust range fallback (m/s)
        wind_profile: ordered layered wind segments
        seed: deterministic seed for gust sampling (int or free text)
    """

    air_density: Optional[float] = None
    temperature_c: float = cStandardTemperatureC
    altitude_m: float = 0.0
    gravity: Optional[float] = None
    base_wind: float = 0.0
    gust: float = 0.0
    wind_profile: Sequence[WindSegment] = field(default_factory=tuple)
    seed: SeedT = cDefaultSeed

    @property
    def density(self) -> float:
        """Air density used by the integrator (kg/m³)."""
        if self.air_density is not None:
            return self.air_density
        return compute_air_density(self.temperature_c, self.altitude_m)

    @property
    def is_layered(self) -> bool:
        """True when a non-empty layered wind profile is present."""
        return bool(self.wind_profile)


@dataclass
class ShotRequest:
    """
    Flight parameters for one projectile.

    Attributes:
        distance_m: down-range distance to the target plane
        muzzle_velocity_mps: muzzle velocity
        drag_factor: gameplay-tunable aggregate drag coefficient
        aim_y_m: vertical aim offset on the target plane, up positive
        aim_z_m: horizontal aim offset on the target plane, right positive
        dt_s: integration step, engine default when None
        max_time_s: flight time cap, engine default when None
        record_path: keep every sub-step position in the result
    """

    distance_m: float
    muzzle_velocity_mps: float
    drag_factor: float = 0.0
    aim_y_m: float = 0.0
    aim_z_m: float = 0.0
    dt_s: Optional[float] = None
    max_time_s: Optional[float] = None
    record_path: bool = False


@dataclass
class Shot:
    """
    One trigger pull as seen by the shot pipeline.

    Attributes:
        request: flight parameters, aim offsets relative to target center
        precision_moa: weapon precision at 100 yards, 0 disables dispersion
        seed: base seed of the level or challenge (int or free text)
        shot_index: zero-based shot number, mixed into the dispersion seed
        turret: dialed turret, None for a bare reticle
        aim_offset_mils: sway/recoil offset (vertical, horizontal) in MILs
        spin_drift: add spin drift to the impact
        coriolis: add Coriolis deflection to the impact
        heading_deg: shooting direction, 0 is North, 90 is East
        latitude_deg: shooting latitude
    """

    request: ShotRequest
    precision_moa: float = 0.0
    seed: SeedT = cDefaultSeed
    shot_index: int = 0
    turret: Optional[TurretState] = None
    aim_offset_mils: Tuple[float, float] = (0.0, 0.0)
    spin_drift: bool = False
    coriolis: bool = False
    heading_deg: float = 0.0
    latitude_deg: float = cDefaultLatitudeDeg
