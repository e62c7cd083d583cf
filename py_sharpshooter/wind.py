"""Distance-varying crosswind with deterministic gusts.

A layered profile is a list of ``WindSegment`` consulted in order. The gust of
each segment is drawn once from an RNG seeded with ``seed + index * 1000``, so
the same segment always blows the same way for a given seed. Past the end of
the profile the last segment is extrapolated. Without a profile the scalar
``base_wind`` plus one gust drawn from the environment seed applies everywhere.

Classes:
    WindSample: Sampled wind speed and the index of the segment it came from
    FlagWinds: Near/mid/far samples for wind flag cues
    WindSock: Per-flight cache of segment samples used by the integrators
"""
from typing_extensions import Dict, Iterable, List, NamedTuple

from py_sharpshooter.conditions import Environment, WindSegment
from py_sharpshooter.constants import cSegmentSeedStride
from py_sharpshooter.rng import Mulberry32, to_seed
from py_sharpshooter.vector import Vector

__all__ = (
    'WindSample',
    'FlagWinds',
    'WindSock',
    'CONSTANT_WIND_INDEX',
    'sample_wind_at_distance',
    'sample_wind_at_distances',
    'wind_at_flag_positions',
    'is_layered_wind',
)

CONSTANT_WIND_INDEX = -1
"""Segment index reported when no layered profile is present"""


class WindSample(NamedTuple):
    """Wind sampled at a down-range distance.

    Attributes:
        wind_speed: crosswind in m/s, positive blows to the right
        segment_index: index of the profile segment, or -1 for constant wind
    """

    wind_speed: float
    segment_index: int


class FlagWinds(NamedTuple):
    """Wind at the near (33 %), mid (66 %) and far (100 %) flag positions."""

    near: WindSample
    mid: WindSample
    far: WindSample


def _gust(seed: int, gust_mps: float) -> float:
    if gust_mps == 0:
        return 0.0
    return Mulberry32(seed).symmetric(gust_mps)


def _find_segment(distance_m: float, profile: Iterable[WindSegment]) -> int:
    for index, segment in enumerate(profile):
        if segment.contains(distance_m):
            return index
    return -1


def _segment_sample(env: Environment, index: int) -> WindSample:
    segment = env.wind_profile[index]
    seed = to_seed(env.seed) + index * cSegmentSeedStride
    return WindSample(segment.wind_mps + _gust(seed, segment.gust_mps), index)


def sample_wind_at_distance(distance_m: float, env: Environment) -> WindSample:
    """Sample the crosswind at ``distance_m``.

    Args:
        distance_m: Distance from the shooter in meters.
        env: Environment with either a layered profile or scalar wind.

    Returns:
        WindSample with the wind speed and the segment index (-1 when not layered).
    """
    if env.wind_profile:
        index = _find_segment(distance_m, env.wind_profile)
        if index < 0:
            # Outside the profile: extrapolate with the last segment
            index = len(env.wind_profile) - 1
        return _segment_sample(env, index)

    return WindSample(env.base_wind + _gust(to_seed(env.seed), env.gust), CONSTANT_WIND_INDEX)


def sample_wind_at_distances(distances_m: Iterable[float], env: Environment) -> List[WindSample]:
    """Sample the wind at several distances, e.g. to plot a profile."""
    return [sample_wind_at_distance(distance, env) for distance in distances_m]


def wind_at_flag_positions(target_distance_m: float, env: Environment) -> FlagWinds:
    """Wind at the standard flag positions along the range."""
    return FlagWinds(
        near=sample_wind_at_distance(target_distance_m * 0.33, env),
        mid=sample_wind_at_distance(target_distance_m * 0.66, env),
        far=sample_wind_at_distance(target_distance_m, env),
    )


def is_layered_wind(env: Environment) -> bool:
    """True when the environment uses a layered wind profile."""
    return env.is_layered


class WindSock:
    """Winds in effect down range for one flight.

    Segment samples are computed at most once per segment. Results are identical
    to ``sample_wind_at_distance`` for the same environment.
    """

    env: Environment
    _cache: Dict[int, WindSample]

    def __init__(self, env: Environment):
        self.env = env
        self._cache = {}
        self._constant = None if env.wind_profile else sample_wind_at_distance(0.0, env)

    def sample_for_range(self, distance_m: float) -> WindSample:
        """Return the wind sample at ``distance_m``."""
        if self._constant is not None:
            return self._constant
        index = _find_segment(distance_m, self.env.wind_profile)
        if index < 0:
            index = len(self.env.wind_profile) - 1
        sample = self._cache.get(index)
        if sample is None:
            sample = _segment_sample(self.env, index)
            self._cache[index] = sample
        return sample

    def speed_for_range(self, distance_m: float) -> float:
        """Crosswind speed in m/s at ``distance_m``."""
        return self.sample_for_range(distance_m).wind_speed

    def vector_for_range(self, distance_m: float) -> Vector:
        """Wind velocity vector at ``distance_m`` (crosswind along +z)."""
        return Vector(0.0, 0.0, self.sample_for_range(distance_m).wind_speed)
