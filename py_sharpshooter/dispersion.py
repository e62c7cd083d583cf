"""Weapon precision as a Gaussian scatter of the point of impact.

A precision rating in MOA at 100 yards is scaled linearly with distance and
treated as the diameter of the circle that holds 95 % of the shots (two
standard deviations of radius). Offsets are drawn from a seeded ``Mulberry32``
so the same seed always produces the same shot.

Classes:
    DispersionSample: Vertical and horizontal offset of one shot

Functions:
    moa_to_meters: Linear size of an MOA angle at a distance
    dispersion_std_dev: Standard deviation of the scatter per axis
    sample_offset: Scatter offset of one shot
    sample_group: Scatter offsets of a string of shots
    group_size: Extreme spread of a group

Examples:
    >>> dispersion_std_dev(0, 100)
    0.0
    >>> sample_offset(300, 1.0, seed=7) == sample_offset(300, 1.0, seed=7)
    True
"""
import math

from deprecated import deprecated
from typing_extensions import Iterable, List, NamedTuple, Sequence, Union

from py_sharpshooter.constants import cMetersPerYard
from py_sharpshooter.rng import Mulberry32, SeedT, combine_seed, to_seed

__all__ = (
    'DispersionSample',
    'moa_to_meters',
    'dispersion_std_dev',
    'sample_offset',
    'sample_group',
    'group_size',
    'sample_radial_offset',
)

_MIN_UNIFORM = 1e-12  # keeps log(u1) finite when the generator returns exactly 0


class DispersionSample(NamedTuple):
    """Scatter offset of one shot in meters.

    Attributes:
        d_y: vertical offset, up positive
        d_z: horizontal offset, right positive
    """

    d_y: float
    d_z: float


_NO_DISPERSION = DispersionSample(0.0, 0.0)


def moa_to_meters(moa: float, distance_m: float) -> float:
    """Size in meters subtended by ``moa`` minutes of angle at ``distance_m``.

    Examples:
        >>> round(moa_to_meters(1, 91.44), 4)
        0.0266
    """
    return distance_m * math.tan(moa * math.pi / 10800)


def dispersion_std_dev(precision_moa: float, distance_m: float) -> float:
    """Standard deviation of the per-axis scatter in meters.

    Args:
        precision_moa: Group diameter rating in MOA at 100 yards.
        distance_m: Target distance in meters.

    Returns:
        Sigma in meters; 0 for a zero rating or zero distance.

    Note:
        The rating is read as the 95 % group diameter, so
        ``sigma = radius / 2`` with ``radius = diameter / 2``.
    """
    distance_yards = distance_m / cMetersPerYard
    moa_at_distance = precision_moa * distance_yards / 100
    moa_radius = moa_at_distance / 2
    return moa_to_meters(moa_radius * 2, distance_m) / 2


def _normal(rng: Mulberry32) -> float:
    """Standard normal deviate, Box-Muller cosine branch."""
    u1 = rng.next() or _MIN_UNIFORM
    u2 = rng.next()
    return math.sqrt(-2 * math.log(u1)) * math.cos(2 * math.pi * u2)


def sample_offset(distance_m: float, precision_moa: float, seed: SeedT) -> DispersionSample:
    """Scatter offset of a single shot.

    Args:
        distance_m: Target distance in meters.
        precision_moa: Weapon precision in MOA at 100 yards.
        seed: Shot seed, int or free text.

    Returns:
        DispersionSample; exactly (0, 0) when the rating is not positive.
    """
    if precision_moa <= 0:
        return _NO_DISPERSION
    rng = Mulberry32(to_seed(seed))
    sigma = dispersion_std_dev(precision_moa, distance_m)
    d_y = _normal(rng) * sigma
    d_z = _normal(rng) * sigma
    return DispersionSample(d_y, d_z)


def sample_group(distance_m: float, precision_moa: float,
                 base_seed: SeedT, count: int) -> List[DispersionSample]:
    """Offsets of ``count`` consecutive shots, each seeded with ``combine_seed(base_seed, i)``."""
    numeric_seed = to_seed(base_seed)
    return [sample_offset(distance_m, precision_moa, combine_seed(numeric_seed, i))
            for i in range(max(0, count))]


def group_size(impacts: Sequence[Union[DispersionSample, Iterable[float]]]) -> float:
    """Extreme spread: largest distance between any two impacts (m), 0 for fewer than two."""
    points = [tuple(impact) for impact in impacts]
    max_distance = 0.0
    for i, (y1, z1) in enumerate(points):
        for y2, z2 in points[i + 1:]:
            max_distance = max(max_distance, math.hypot(y2 - y1, z2 - z1))
    return max_distance


@deprecated(reason="Use sample_offset instead of sample_radial_offset", version="0.2.0")
def sample_radial_offset(distance_m: float, precision_moa: float, seed: SeedT) -> DispersionSample:
    return sample_offset(distance_m, precision_moa, seed)
