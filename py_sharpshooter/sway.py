"""Aim sway and recoil recovery.

Sway is a continuous wander of the reticle built from three sine waves per
axis at distinct frequency multipliers, so the motion never visibly repeats.
Recoil is an impulse that decays exponentially back to the point of aim.
Both are expressed in MILs at the target and scale with the realism preset and
the weapon class.

Classes:
    SwayOffset: Reticle offset in MILs
    RecoilState: Current recoil offset and its decay rate

Functions:
    sway_offset: Sway at a moment in time
    recoil_impulse: Recoil state right after a shot
    decay: Recoil offset after some time
    combine: Sum of sway and recoil offsets
"""
import math
from dataclasses import dataclass, replace

from typing_extensions import Dict, NamedTuple, Optional, Tuple

from py_sharpshooter.munition import RealismPreset, WeaponType, check_preset, check_weapon_type

__all__ = (
    'SwayOffset',
    'RecoilState',
    'sway_offset',
    'recoil_impulse',
    'decay',
    'combine',
)

# Lighter weapons sway more
_SWAY_MULTIPLIERS: Dict[str, float] = {
    'pistol': 1.2,
    'rifle': 1.0,
    'sniper': 0.6,
    'shotgun': 1.5,
}

# MILs at the target
_BASE_SWAY_AMPLITUDE: Dict[str, float] = {
    'arcade': 0.1,
    'realistic': 0.3,
    'expert': 0.6,
}

# Hz
_SWAY_FREQUENCY: Dict[str, float] = {
    'arcade': 0.3,
    'realistic': 0.5,
    'expert': 0.8,
}

_SWAY_FREQ_MULTIPLIERS_Y: Tuple[float, ...] = (1.0, 2.3, 0.7)
_SWAY_FREQ_MULTIPLIERS_Z: Tuple[float, ...] = (1.7, 0.9, 3.1)

_RECOIL_AMPLITUDE: Dict[str, Dict[str, float]] = {
    'arcade': {'pistol': 0.5, 'rifle': 0.8, 'sniper': 1.0, 'shotgun': 2.0},
    'realistic': {'pistol': 1.5, 'rifle': 2.0, 'sniper': 2.5, 'shotgun': 4.0},
    'expert': {'pistol': 3.0, 'rifle': 4.0, 'sniper': 5.0, 'shotgun': 8.0},
}

# 1/s, higher recovers faster
_RECOIL_DECAY_RATE: Dict[str, float] = {
    'arcade': 8.0,
    'realistic': 4.0,
    'expert': 2.0,
}

_RECOIL_HORIZONTAL_RATIO = 0.3


class SwayOffset(NamedTuple):
    """Reticle offset in MILs.

    Attributes:
        y: vertical, up positive
        z: horizontal, right positive
    """

    y: float
    z: float


@dataclass(frozen=True)
class RecoilState:
    """
    Recoil offset of the reticle and how fast it recovers.

    Attributes:
        offset_y: vertical offset in MILs, up positive
        offset_z: horizontal offset in MILs, right positive
        decay_rate: exponential recovery rate (1/s)
    """

    offset_y: float
    offset_z: float
    decay_rate: float

    @property
    def offset(self) -> SwayOffset:
        return SwayOffset(self.offset_y, self.offset_z)

    def advance(self, dt_s: float) -> 'RecoilState':
        """State ``dt_s`` seconds later; repeated calls compose like one longer call."""
        offset = decay(self, dt_s)
        return replace(self, offset_y=offset.y, offset_z=offset.z)


def _sine_sum(time_s: float, base_frequency: float, multipliers: Tuple[float, ...]) -> float:
    weight = 1 / len(multipliers)
    return sum(math.sin(2 * math.pi * base_frequency * m * time_s) * weight for m in multipliers)


def sway_offset(time_s: float, preset: RealismPreset, weapon_type: WeaponType,
                magnification: float = 1.0) -> SwayOffset:
    """Reticle sway at ``time_s``.

    Args:
        time_s: Time in seconds since sway started.
        preset: Realism preset, scales amplitude and frequency.
        weapon_type: Weapon class, scales amplitude.
        magnification: Optic magnification, amplitude grows with its square root.

    Returns:
        SwayOffset in MILs; exactly (0, 0) at ``time_s == 0``.

    Raises:
        UnknownPresetError: If ``preset`` or ``weapon_type`` is unknown.
    """
    check_preset(preset)
    check_weapon_type(weapon_type)
    amplitude = (_BASE_SWAY_AMPLITUDE[preset]
                 * _SWAY_MULTIPLIERS[weapon_type]
                 * math.sqrt(magnification))
    frequency = _SWAY_FREQUENCY[preset]
    return SwayOffset(
        _sine_sum(time_s, frequency, _SWAY_FREQ_MULTIPLIERS_Y) * amplitude,
        _sine_sum(time_s, frequency, _SWAY_FREQ_MULTIPLIERS_Z) * amplitude,
    )


def recoil_impulse(preset: RealismPreset, weapon_type: WeaponType,
                   custom_amplitude_mils: Optional[float] = None) -> RecoilState:
    """Recoil right after a shot.

    The kick is mostly vertical with a horizontal part of 30 %.

    Args:
        preset: Realism preset, selects amplitude and decay rate.
        weapon_type: Weapon class, selects amplitude.
        custom_amplitude_mils: Overrides the table amplitude (e.g. ammo recoil).

    Raises:
        UnknownPresetError: If ``preset`` or ``weapon_type`` is unknown.
    """
    check_preset(preset)
    check_weapon_type(weapon_type)
    amplitude = _RECOIL_AMPLITUDE[preset][weapon_type]
    if custom_amplitude_mils is not None:
        amplitude = custom_amplitude_mils
    return RecoilState(
        offset_y=amplitude,
        offset_z=amplitude * _RECOIL_HORIZONTAL_RATIO,
        decay_rate=_RECOIL_DECAY_RATE[preset],
    )


def decay(state: RecoilState, dt_s: float) -> SwayOffset:
    """Recoil offset ``dt_s`` seconds after ``state``; negative ``dt_s`` counts as 0."""
    factor = math.exp(-state.decay_rate * max(dt_s, 0.0))
    return SwayOffset(state.offset_y * factor, state.offset_z * factor)


def combine(sway: SwayOffset, recoil: SwayOffset) -> SwayOffset:
    return SwayOffset(sway.y + recoil.y, sway.z + recoil.z)
