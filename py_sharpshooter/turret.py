"""Turret dialing and zero correction math.

Turrets are adjusted in MIL clicks, typically 0.1 MIL per click. At distance D
meters, X MILs move the point of impact by ``D * 0.001 * X`` meters.

Sign convention:
    - Elevation: positive shifts the impact up
    - Windage: positive shifts the impact right

Classes:
    TurretState: Dialed elevation and windage of a scope
    AimOffset: Aim point on the target plane
    TurretAdjustment: Signed correction in MILs
    DialRecommendation: Correction with clicks and hold values for coaching

Examples:
    ```python
    from py_sharpshooter.turret import TurretState, recommend_dial_from_offset

    turret = TurretState()
    turret.dial_elevation(+1)
    print(turret)  # E: +0.1, W: +0.0

    # Shot landed 12 cm high and 3 cm left at 300 m
    rec = recommend_dial_from_offset(300, 0.12, -0.03)
    print(rec.elevation_clicks, rec.windage_clicks)  # -4 1
    ```
"""
import math
from dataclasses import dataclass

from typing_extensions import Any, Dict, Literal, NamedTuple

from py_sharpshooter.constants import cDefaultClickSizeMils

__all__ = (
    'TurretState',
    'AimOffset',
    'TurretAdjustment',
    'DialRecommendation',
    'quantize_to_click',
    'next_click_value',
    'mils_to_meters',
    'meters_to_mils',
    'format_turret_state',
    'apply_turret_offset',
    'compute_adjustment_for_offset',
    'recommend_dial_from_offset',
)

ClickDirection = Literal[1, -1]


def _round_half_up(value: float) -> int:
    whole = math.floor(value)
    # value - whole is exact, value + 0.5 is not
    return whole + 1 if value - whole >= 0.5 else whole


def _positive_zero(value: float) -> float:
    # -0.0 + 0.0 == +0.0
    return value + 0.0


def quantize_to_click(value: float, click_size: float = cDefaultClickSizeMils) -> float:
    """Snap ``value`` to the nearest multiple of ``click_size``, halves rounding up.

    Examples:
        >>> round(quantize_to_click(0.26), 10)
        0.3
    """
    return _round_half_up(value / click_size) * click_size


def next_click_value(current_value: float, direction: ClickDirection,
                     click_size: float = cDefaultClickSizeMils) -> float:
    """Dial value after one click in ``direction`` (+1 or -1)."""
    quantized = quantize_to_click(current_value, click_size)
    return quantize_to_click(quantized + direction * click_size, click_size)


def mils_to_meters(distance_m: float, mils: float) -> float:
    """Size in meters subtended by ``mils`` at ``distance_m``."""
    return distance_m * 0.001 * mils


def meters_to_mils(distance_m: float, meters: float) -> float:
    """Angle in MILs subtended by ``meters`` at ``distance_m``; 0 when distance is not positive."""
    if distance_m <= 0:
        return 0.0
    return meters / (distance_m * 0.001)


@dataclass
class TurretState:
    """
    Dialed turret values.

    Attributes:
        elevation_mils: positive = impact up
        windage_mils: positive = impact right
        click_size: MILs per click
    """

    elevation_mils: float = 0.0
    windage_mils: float = 0.0
    click_size: float = cDefaultClickSizeMils

    def dial_elevation(self, direction: ClickDirection) -> float:
        """Move the elevation turret one click and return the new value."""
        self.elevation_mils = next_click_value(self.elevation_mils, direction, self.click_size)
        return self.elevation_mils

    def dial_windage(self, direction: ClickDirection) -> float:
        """Move the windage turret one click and return the new value."""
        self.windage_mils = next_click_value(self.windage_mils, direction, self.click_size)
        return self.windage_mils

    def reset(self) -> None:
        """Return both turrets to zero."""
        self.elevation_mils = 0.0
        self.windage_mils = 0.0

    def to_dict(self) -> Dict[str, float]:
        """Plain mapping for the external settings store."""
        return {
            'elevation_mils': self.elevation_mils,
            'windage_mils': self.windage_mils,
            'click_size': self.click_size,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'TurretState':
        """Rebuild a state saved with ``to_dict``; missing keys default to zero."""
        return cls(
            elevation_mils=float(data.get('elevation_mils', 0.0)),
            windage_mils=float(data.get('windage_mils', 0.0)),
            click_size=float(data.get('click_size', cDefaultClickSizeMils)),
        )

    def __str__(self) -> str:
        return format_turret_state(self)


def format_turret_state(state: TurretState) -> str:
    """Format turret values like ``"E: +0.0, W: -2.1"``."""
    elevation = _positive_zero(state.elevation_mils)
    windage = _positive_zero(state.windage_mils)
    e_sign = '+' if elevation >= 0 else ''
    w_sign = '+' if windage >= 0 else ''
    return f"E: {e_sign}{elevation:.1f}, W: {w_sign}{windage:.1f}"


class AimOffset(NamedTuple):
    """Aim point relative to the target center, in meters."""

    aim_y_m: float
    aim_z_m: float


class TurretAdjustment(NamedTuple):
    """Turret correction in MILs."""

    elevation_mils: float
    windage_mils: float


class DialRecommendation(NamedTuple):
    """Turret correction suggested after an observed miss.

    Attributes:
        raw_elevation_mils: exact elevation correction
        raw_windage_mils: exact windage correction
        elevation_mils: elevation correction quantized to whole clicks
        windage_mils: windage correction quantized to whole clicks
        elevation_clicks: signed number of elevation clicks
        windage_clicks: signed number of windage clicks
        hold_elevation_mils: reticle hold instead of dialing, same sign as the correction
        hold_windage_mils: reticle hold instead of dialing, same sign as the correction
        click_size: MILs per click used for quantization
    """

    raw_elevation_mils: float
    raw_windage_mils: float
    elevation_mils: float
    windage_mils: float
    elevation_clicks: int
    windage_clicks: int
    hold_elevation_mils: float
    hold_windage_mils: float
    click_size: float


def apply_turret_offset(aim_y_m: float, aim_z_m: float,
                        turret: TurretState, distance_m: float) -> AimOffset:
    """Shift an aim point by the dialed turret values.

    Elevation moves the aim along Y and windage along Z, each converted from MILs
    to meters at ``distance_m``.

    Args:
        aim_y_m: Vertical aim offset in meters.
        aim_z_m: Horizontal aim offset in meters.
        turret: Dialed turret.
        distance_m: Target distance in meters.

    Returns:
        AimOffset with the adjusted aim point.
    """
    return AimOffset(
        aim_y_m + mils_to_meters(distance_m, turret.elevation_mils),
        aim_z_m + mils_to_meters(distance_m, turret.windage_mils),
    )


def compute_adjustment_for_offset(offset_y_m: float, offset_z_m: float,
                                  distance_m: float) -> TurretAdjustment:
    """Turret correction that cancels an observed impact offset.

    A shot that landed high needs negative elevation; a shot that landed right
    needs negative windage.

    Examples:
        >>> compute_adjustment_for_offset(0.1, 0.0, 100)
        TurretAdjustment(elevation_mils=-1.0, windage_mils=0.0)
    """
    return TurretAdjustment(
        _positive_zero(-meters_to_mils(distance_m, offset_y_m)),
        _positive_zero(-meters_to_mils(distance_m, offset_z_m)),
    )


def recommend_dial_from_offset(distance_m: float, offset_y_m: float, offset_z_m: float,
                               click_size: float = cDefaultClickSizeMils) -> DialRecommendation:
    """Build a full coaching recommendation for an observed impact offset.

    Args:
        distance_m: Target distance in meters.
        offset_y_m: Observed vertical impact offset, positive = high.
        offset_z_m: Observed horizontal impact offset, positive = right.
        click_size: MILs per turret click.

    Returns:
        DialRecommendation; every zero is a positive zero.
    """
    raw = compute_adjustment_for_offset(offset_y_m, offset_z_m, distance_m)
    elevation_clicks = int(_round_half_up(raw.elevation_mils / click_size))
    windage_clicks = int(_round_half_up(raw.windage_mils / click_size))
    elevation = _positive_zero(elevation_clicks * click_size)
    windage = _positive_zero(windage_clicks * click_size)
    return DialRecommendation(
        raw_elevation_mils=raw.elevation_mils,
        raw_windage_mils=raw.windage_mils,
        elevation_mils=elevation,
        windage_mils=windage,
        elevation_clicks=elevation_clicks,
        windage_clicks=windage_clicks,
        hold_elevation_mils=elevation,
        hold_windage_mils=windage,
        click_size=click_size,
    )
