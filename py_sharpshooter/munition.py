"""Weapon and ammunition scalars and realism preset scaling.

The catalog data (weapon and ammo lists) belongs to the game layer. This module
only holds the plain parameters each entry carries and the math that folds a
weapon, an ammo variant and a realism preset into the final numbers fed to the
shot pipeline.

Classes:
    Weapon: Base gameplay parameters of a weapon
    Ammo: Multipliers applied by an ammunition variant
    FinalShotParams: Aggregated parameters of a weapon/ammo/preset combination

Type Aliases:
    RealismPreset: Literal type for the realism presets ('arcade', 'realistic', 'expert')
    WeaponType: Literal type for the weapon classes ('pistol', 'rifle', 'sniper', 'shotgun')

Examples:
    ```python
    from py_sharpshooter.munition import Weapon, Ammo, compute_final_shot_params

    weapon = Weapon('rifle', muzzle_velocity_mps=850, drag_factor=0.00002, precision_moa=1.0)
    ammo = Ammo('Match Grade', muzzle_velocity_scale=1.02, dispersion_scale=0.7)
    params = compute_final_shot_params(weapon, ammo, 'realistic')
    ```
"""
from dataclasses import dataclass

from typing_extensions import Dict, Literal, NamedTuple, Optional, get_args

from py_sharpshooter.constants import cMetersPerYard
from py_sharpshooter.exceptions import UnknownPresetError

__all__ = (
    'RealismPreset',
    'WeaponType',
    'REALISM_PRESETS',
    'WEAPON_TYPES',
    'check_preset',
    'check_weapon_type',
    'Weapon',
    'Ammo',
    'FinalShotParams',
    'compute_final_shot_params',
    'format_ammo_summary',
)

RealismPreset = Literal['arcade', 'realistic', 'expert']
WeaponType = Literal['pistol', 'rifle', 'sniper', 'shotgun']

REALISM_PRESETS = get_args(RealismPreset)
WEAPON_TYPES = get_args(WeaponType)

_DRAG_PRESET_SCALE: Dict[str, float] = {
    'arcade': 0.5,
    'realistic': 1.0,
    'expert': 1.2,
}

# MILs at the target before preset scaling
_BASE_RECOIL_MILS: Dict[str, float] = {
    'pistol': 2.0,
    'rifle': 3.0,
    'sniper': 4.0,
    'shotgun': 5.0,
}

_RECOIL_PRESET_SCALE: Dict[str, float] = {
    'arcade': 0.5,
    'realistic': 1.0,
    'expert': 1.3,
}

_GROUP_REFERENCE_M = 100 * cMetersPerYard


def check_preset(preset: str) -> RealismPreset:
    """Return ``preset`` if it names a realism preset.

    Raises:
        UnknownPresetError: If the name is not one of 'arcade', 'realistic', 'expert'.
    """
    if preset not in REALISM_PRESETS:
        raise UnknownPresetError('realism preset', preset, REALISM_PRESETS)
    return preset  # type: ignore[return-value]


def check_weapon_type(weapon_type: str) -> WeaponType:
    """Return ``weapon_type`` if it names a weapon class.

    Raises:
        UnknownPresetError: If the name is not one of 'pistol', 'rifle', 'sniper', 'shotgun'.
    """
    if weapon_type not in WEAPON_TYPES:
        raise UnknownPresetError('weapon type', weapon_type, WEAPON_TYPES)
    return weapon_type  # type: ignore[return-value]


@dataclass
class Weapon:
    """
    Base gameplay parameters of a weapon.

    Attributes:
        weapon_type: weapon class, selects sway/recoil tables
        muzzle_velocity_mps: muzzle velocity
        drag_factor: gameplay-tunable aggregate drag coefficient
        precision_moa: group diameter at 100 yards (MOA)
        recoil_pattern_id: recoil pattern catalog id
        name: display name
    """

    weapon_type: WeaponType
    muzzle_velocity_mps: float
    drag_factor: float
    precision_moa: float
    recoil_pattern_id: Optional[str] = None
    name: str = ''

    def __post_init__(self):
        check_weapon_type(self.weapon_type)


@dataclass
class Ammo:
    """
    Multipliers applied by an ammunition variant.

    Attributes:
        name: display name
        muzzle_velocity_scale: multiplier of the weapon muzzle velocity
        drag_scale: multiplier of the weapon drag factor
        dispersion_scale: multiplier of the weapon precision (lower is tighter)
        recoil_scale: multiplier of the recoil impulse
    """

    name: str = ''
    muzzle_velocity_scale: float = 1.0
    drag_scale: float = 1.0
    dispersion_scale: float = 1.0
    recoil_scale: float = 1.0


class FinalShotParams(NamedTuple):
    """Weapon, ammo and preset folded into the numbers used by the pipeline.

    Attributes:
        muzzle_velocity_mps: muzzle velocity
        drag_factor: drag factor including the preset drag scale
        precision_moa: precision rating after the ammo dispersion scale
        dispersion_group_size_m: group size at 100 yards in meters
        recoil_impulse_mils: recoil kick amplitude in MILs
    """

    muzzle_velocity_mps: float
    drag_factor: float
    precision_moa: float
    dispersion_group_size_m: float
    recoil_impulse_mils: float


def compute_final_shot_params(weapon: Weapon, ammo: Optional[Ammo],
                              preset: RealismPreset) -> FinalShotParams:
    """Aggregate weapon, ammo and realism preset.

    Args:
        weapon: Base weapon parameters.
        ammo: Ammunition variant, None for neutral (all scales 1).
        preset: Realism preset.

    Returns:
        FinalShotParams for the combination.

    Raises:
        UnknownPresetError: If ``preset`` is not a realism preset.
    """
    check_preset(preset)
    ammo = ammo or Ammo()
    precision_moa = weapon.precision_moa * ammo.dispersion_scale
    recoil = (_BASE_RECOIL_MILS.get(weapon.weapon_type, 2.0)
              * _RECOIL_PRESET_SCALE[preset]
              * ammo.recoil_scale)
    return FinalShotParams(
        muzzle_velocity_mps=weapon.muzzle_velocity_mps * ammo.muzzle_velocity_scale,
        drag_factor=weapon.drag_factor * ammo.drag_scale * _DRAG_PRESET_SCALE[preset],
        precision_moa=precision_moa,
        dispersion_group_size_m=(precision_moa / 60) * _GROUP_REFERENCE_M,
        recoil_impulse_mils=recoil,
    )


def format_ammo_summary(ammo: Ammo) -> str:
    """Short display of the ammo effects, e.g. ``"Vel: + 105%, Dispersion: ↑"``.

    Dispersion shows ↑ when the ammo tightens groups (better precision).
    """
    if ammo.muzzle_velocity_scale > 1.0:
        velocity_effect = '+'
    elif ammo.muzzle_velocity_scale < 1.0:
        velocity_effect = '−'
    else:
        velocity_effect = '='
    if ammo.dispersion_scale < 1.0:
        dispersion_effect = '↑'
    elif ammo.dispersion_scale > 1.0:
        dispersion_effect = '↓'
    else:
        dispersion_effect = '='
    percent = int(ammo.muzzle_velocity_scale * 100 + 0.5)
    return f"Vel: {velocity_effect} {percent}%, Dispersion: {dispersion_effect}"
