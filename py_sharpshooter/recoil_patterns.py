"""Deterministic recoil pattern library.

Each weapon names a recoil pattern that moves the sight away from the point of
aim as a pure function of the time since the last shot. The same time always
gives the same offset, so players can learn to control recoil through timing.

Patterns belong to one of four kinds:
    - smooth: cubic ease-out with a horizontal ratio and a small sine ripple
    - sharp_vertical: quadratic vertical climb with linear horizontal drift
    - circular: spiral whose radius grows with time
    - snap: quick rise and fall with a faster horizontal wobble

Time is normalized by the pattern's peak time and clamped to [0, 1], so every
curve stops growing at its peak.

Examples:
    >>> pattern = get_recoil_pattern('rifle-heavy')
    >>> pattern.offset(120, 2.0)
    (2.0, 1.0)
    >>> get_recoil_offset('no-such-pattern', 50, 2.0)
    (1.0, 0.0)
"""
import math
from dataclasses import dataclass

from typing_extensions import Callable, Dict, Literal, Optional, Tuple

__all__ = (
    'RecoilKind',
    'RecoilPattern',
    'RECOIL_PATTERNS',
    'get_recoil_pattern',
    'get_recoil_offset',
    'is_deterministic',
)

RecoilKind = Literal['smooth', 'sharp_vertical', 'circular', 'snap']
RecoilOffset = Tuple[float, float]


@dataclass(frozen=True)
class RecoilPattern:
    """
    Named recoil curve.

    Attributes:
        id: catalog id referenced by weapons
        name: display name
        description: display description
        kind: curve family
        peak_time_ms: time at which the curve stops growing
        decay_rate: recovery rate hint for the game layer
        horizontal_ratio: smooth, horizontal share of the vertical kick
        horizontal_drift: sharp_vertical, horizontal drift per unit kick
        frequency: circular, angular speed multiplier
        snap_strength: snap, vertical multiplier
    """

    id: str
    name: str
    description: str
    kind: RecoilKind
    peak_time_ms: float
    decay_rate: float = 0.7
    horizontal_ratio: float = 0.0
    horizontal_drift: float = 0.0
    frequency: float = 1.0
    snap_strength: float = 1.0

    @classmethod
    def smooth(cls, id: str, name: str, description: str, peak_time_ms: float,
               decay_rate: float, horizontal_ratio: float) -> 'RecoilPattern':
        return cls(id, name, description, 'smooth', peak_time_ms,
                   decay_rate=decay_rate, horizontal_ratio=horizontal_ratio)

    @classmethod
    def sharp_vertical(cls, id: str, name: str, description: str, peak_time_ms: float,
                       horizontal_drift: float) -> 'RecoilPattern':
        return cls(id, name, description, 'sharp_vertical', peak_time_ms,
                   horizontal_drift=horizontal_drift)

    @classmethod
    def circular(cls, id: str, name: str, description: str, peak_time_ms: float,
                 frequency: float) -> 'RecoilPattern':
        return cls(id, name, description, 'circular', peak_time_ms, frequency=frequency)

    @classmethod
    def snap(cls, id: str, name: str, description: str, peak_time_ms: float,
             snap_strength: float) -> 'RecoilPattern':
        return cls(id, name, description, 'snap', peak_time_ms, snap_strength=snap_strength)

    def normalized_time(self, elapsed_ms: float) -> float:
        """Time since the shot as a fraction of the peak time, clamped to [0, 1]."""
        return min(max(elapsed_ms / self.peak_time_ms, 0.0), 1.0)

    def offset(self, elapsed_ms: float, intensity: float) -> RecoilOffset:
        """Sight offset ``elapsed_ms`` after the shot.

        Args:
            elapsed_ms: Milliseconds since the last shot.
            intensity: Kick intensity of the weapon, scales the curve.

        Returns:
            (vertical, horizontal) offset in MILs.
        """
        return _OFFSET_BY_KIND[self.kind](self, elapsed_ms, intensity)

    def peak_time(self) -> float:
        """Milliseconds after the shot at which the curve peaks."""
        return self.peak_time_ms


def _smooth_offset(pattern: RecoilPattern, elapsed_ms: float, intensity: float) -> RecoilOffset:
    t = pattern.normalized_time(elapsed_ms)
    magnitude = intensity * t * (2 - t) * t
    vertical = magnitude
    horizontal = magnitude * pattern.horizontal_ratio
    organic = math.sin(elapsed_ms * 0.01) * 0.1
    return vertical + organic * vertical, horizontal + organic * horizontal


def _sharp_vertical_offset(pattern: RecoilPattern, elapsed_ms: float, intensity: float) -> RecoilOffset:
    t = pattern.normalized_time(elapsed_ms)
    return intensity * t * t, intensity * pattern.horizontal_drift * t


def _circular_offset(pattern: RecoilPattern, elapsed_ms: float, intensity: float) -> RecoilOffset:
    t = pattern.normalized_time(elapsed_ms)
    magnitude = intensity * t
    angle = elapsed_ms * 0.1 * pattern.frequency
    return magnitude * math.cos(angle), magnitude * math.sin(angle)


def _snap_offset(pattern: RecoilPattern, elapsed_ms: float, intensity: float) -> RecoilOffset:
    t = pattern.normalized_time(elapsed_ms)
    vertical = intensity * pattern.snap_strength * math.sin(t * math.pi)
    horizontal = intensity * 0.3 * math.sin(t * math.pi * 2)
    return vertical, horizontal


_OFFSET_BY_KIND: Dict[str, Callable[[RecoilPattern, float, float], RecoilOffset]] = {
    'smooth': _smooth_offset,
    'sharp_vertical': _sharp_vertical_offset,
    'circular': _circular_offset,
    'snap': _snap_offset,
}

_CATALOG = (
    # Pistol patterns
    RecoilPattern.smooth('pistol-standard', 'Standard',
                         'Balanced recoil pattern for standard pistols', 150, 0.7, 0.2),
    RecoilPattern.smooth('pistol-controllable', 'Controllable',
                         'Very smooth recoil pattern for competition firearms', 120, 0.8, 0.15),
    RecoilPattern.sharp_vertical('pistol-magnum', 'Magnum Kick',
                                 'Sharp vertical climb for magnum calibers', 200, 0.3),
    RecoilPattern.snap('pistol-fast', 'Fast Response',
                       'Quick snap-and-reset for rapid-fire pistols', 100, 1.5),
    # Rifle patterns
    RecoilPattern.smooth('rifle-car', 'Carbine',
                         'Moderate recoil pattern for compact rifles', 80, 0.8, 0.25),
    RecoilPattern.smooth('rifle-standard', 'Rifle Standard',
                         'Balanced pattern for military rifles', 70, 0.85, 0.2),
    RecoilPattern.sharp_vertical('rifle-heavy', 'Battle Rifle',
                                 'Strong vertical kick for battle rifles', 120, 0.5),
    # DMR patterns
    RecoilPattern.smooth('dmr-standard', 'DMR Standard',
                         'Higher but controllable recoil for DMRs', 100, 0.6, 0.2),
    RecoilPattern.sharp_vertical('dmr-heavy', 'Magnum DMR',
                                 'Strong recoil for heavy DMR cartridges', 140, 0.4),
    # Sniper patterns
    RecoilPattern.circular('sniper-standard', 'SVD Pattern',
                           'Circular drift pattern for semi-auto snipers', 180, 1.0),
    RecoilPattern.circular('sniper-bolt', 'Bolt Action',
                           'Classic bolt-action recoil pattern', 200, 0.7),
    RecoilPattern.circular('sniper-heavy', 'Heavy .50',
                           'Massive recoil pattern for heavy snipers', 250, 0.9),
    RecoilPattern.circular('elr-standard', 'ELR Pattern',
                           'High-magnitude pattern for long-range snipers', 220, 1.1),
    # Shotgun patterns
    RecoilPattern.sharp_vertical('shotgun-pump', 'Pump Action',
                                 'Strong vertical kick for pump shotguns', 250, 0.2),
    RecoilPattern.smooth('shotgun-semi', 'Semi-Auto',
                         'Moderate recoil for semi-auto shotguns', 180, 0.75, 0.3),
    RecoilPattern.smooth('shotgun-light', 'Light Shotgun',
                         'Gentle recoil for light gauge shotguns', 120, 0.8, 0.15),
)

RECOIL_PATTERNS: Dict[str, RecoilPattern] = {pattern.id: pattern for pattern in _CATALOG}


def get_recoil_pattern(pattern_id: str) -> Optional[RecoilPattern]:
    """Catalog entry for ``pattern_id``, None when unknown."""
    return RECOIL_PATTERNS.get(pattern_id)


def get_recoil_offset(pattern_id: str, elapsed_ms: float, intensity: float) -> RecoilOffset:
    """Recoil offset of a catalog pattern in MILs.

    Unknown ids fall back to a flat half-intensity vertical kick.
    """
    pattern = get_recoil_pattern(pattern_id)
    if pattern is None:
        return intensity * 0.5, 0.0
    return pattern.offset(elapsed_ms, intensity)


def is_deterministic(pattern: RecoilPattern, intensity: float) -> bool:
    """True when repeated calls with the same inputs return identical offsets."""
    return all(pattern.offset(ms, intensity) == pattern.offset(ms, intensity)
               for ms in (0.0, 50.0, 100.0, pattern.peak_time_ms))
