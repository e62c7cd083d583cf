"""Shotgun pellet pattern engine.

Pellets are spread uniformly over a disk whose radius grows with distance and
shrinks with the choke constriction. Every pellet has its own generator seeded
from the shot seed and the pellet number, so a pattern is reproducible and a
pellet does not change when the pellet count changes.

Classes:
    ShotgunPatternConfig: Parameters of one shotgun shot
    PelletImpact: Offset of one pellet from the aim point

Type Aliases:
    ShotgunChoke: Literal type for the supported chokes

Examples:
    ```python
    from py_sharpshooter.shotgun import ShotgunPatternConfig, sample_pellets, count_pellets_on_target

    config = ShotgunPatternConfig(distance_m=25, pellet_count=9, base_spread_mils=40,
                                  choke='modified', seed='clay-3')
    pellets = sample_pellets(config)
    hits = count_pellets_on_target(pellets, target_radius_m=0.2)
    ```
"""
import math
from dataclasses import dataclass

from typing_extensions import Dict, List, Literal, NamedTuple, Optional, Sequence, get_args

from py_sharpshooter.constants import cMaxPelletCount, cPelletSeedStride
from py_sharpshooter.exceptions import UnknownPresetError
from py_sharpshooter.rng import Mulberry32, SeedT, combine_seed, to_seed

__all__ = (
    'ShotgunChoke',
    'CHOKE_SPREAD_MODIFIERS',
    'ShotgunPatternConfig',
    'PelletImpact',
    'mils_to_spread_meters',
    'spread_radius',
    'sample_pellets',
    'count_pellets_on_target',
    'best_pellet',
    'average_spread',
)

ShotgunChoke = Literal['cylinder', 'improved-cylinder', 'modified', 'improved-modified', 'full']

# Multipliers of the base spread, tighter chokes give tighter patterns
CHOKE_SPREAD_MODIFIERS: Dict[str, float] = {
    'cylinder': 1.0,
    'improved-cylinder': 0.8,
    'modified': 0.65,
    'improved-modified': 0.55,
    'full': 0.45,
}


@dataclass(frozen=True)
class ShotgunPatternConfig:
    """
    Parameters of one shotgun shot.

    Attributes:
        distance_m: target distance
        pellet_count: requested pellets, capped at 50
        base_spread_mils: pattern diameter without choke (MIL)
        choke: barrel constriction
        seed: shot seed, int or free text
    """

    distance_m: float
    pellet_count: int
    base_spread_mils: float
    choke: ShotgunChoke = 'cylinder'
    seed: SeedT = 1


class PelletImpact(NamedTuple):
    """Offset of one pellet from the aim point in meters.

    Attributes:
        d_y: vertical offset, up positive
        d_z: horizontal offset, right positive
    """

    d_y: float
    d_z: float

    def distance_from_center(self) -> float:
        return math.hypot(self.d_y, self.d_z)


def _choke_modifier(choke: str) -> float:
    try:
        return CHOKE_SPREAD_MODIFIERS[choke]
    except KeyError as exc:
        raise UnknownPresetError('choke', choke, get_args(ShotgunChoke)) from exc


def mils_to_spread_meters(spread_mils: float, distance_m: float) -> float:
    """Radius in meters of a pattern whose diameter is ``spread_mils``."""
    return spread_mils * distance_m / 2000


def spread_radius(distance_m: float, base_spread_mils: float, choke: ShotgunChoke = 'cylinder') -> float:
    """Pattern radius in meters with the choke applied.

    Raises:
        UnknownPresetError: If ``choke`` is not a supported choke.
    """
    return mils_to_spread_meters(base_spread_mils * _choke_modifier(choke), distance_m)


def sample_pellets(config: ShotgunPatternConfig) -> List[PelletImpact]:
    """Deterministic pellet offsets for one shot.

    Angles are uniform in [0, 2π) and radii are ``sqrt(u) * R`` so that the
    pellets cover the disk uniformly instead of clustering at the center.

    Args:
        config: Shot parameters.

    Returns:
        At most 50 pellet offsets.

    Raises:
        UnknownPresetError: If the choke is not supported.
    """
    numeric_seed = to_seed(config.seed)
    radius = spread_radius(config.distance_m, config.base_spread_mils, config.choke)
    count = max(0, min(config.pellet_count, cMaxPelletCount))

    pellets: List[PelletImpact] = []
    for i in range(count):
        rng = Mulberry32(combine_seed(numeric_seed, i, cPelletSeedStride))
        angle = rng.next() * 2 * math.pi
        r = math.sqrt(rng.next()) * radius
        pellets.append(PelletImpact(d_y=r * math.sin(angle), d_z=r * math.cos(angle)))
    return pellets


def count_pellets_on_target(pellets: Sequence[PelletImpact], target_radius_m: float) -> int:
    """Number of pellets within ``target_radius_m`` of the center, edge included."""
    return sum(1 for pellet in pellets if pellet.distance_from_center() <= target_radius_m)


def best_pellet(pellets: Sequence[PelletImpact]) -> Optional[PelletImpact]:
    """Pellet closest to the center, None when there are no pellets."""
    if not pellets:
        return None
    return min(pellets, key=lambda p: p.d_y * p.d_y + p.d_z * p.d_z)


def average_spread(pellets: Sequence[PelletImpact]) -> float:
    """Mean distance of the pellets from the center, 0 when there are no pellets."""
    if not pellets:
        return 0.0
    return sum(pellet.distance_from_center() for pellet in pellets) / len(pellets)
