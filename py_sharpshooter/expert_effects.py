"""Expert simulation extras: spin drift and Coriolis.

These are simplified gameplay approximations, tuned to be noticeable at long
range. They are not real-world ballistic solver output.

Functions:
    spin_drift: Rightward drift growing with time of flight squared
    coriolis: Horizontal and vertical (Eötvös) deflection
    combined_expert_effects: Sum of the enabled extras
    enabled_extras_description: Display names of the enabled extras
"""
import math

from typing_extensions import List, NamedTuple

from py_sharpshooter.constants import (
    cCoriolisHorizontalCoefficient,
    cCoriolisHorizontalMaxM,
    cCoriolisVerticalCoefficient,
    cCoriolisVerticalMaxM,
    cDefaultLatitudeDeg,
    cSpinDriftCoefficient,
    cSpinDriftMaxM,
)

__all__ = (
    'ExpertEffectsParams',
    'ExpertOffset',
    'spin_drift',
    'coriolis',
    'combined_expert_effects',
    'enabled_extras_description',
)


class ExpertEffectsParams(NamedTuple):
    """Inputs of the expert extras.

    Attributes:
        time_of_flight_s: flight time to the target
        heading_deg: shooting direction, 0 = North, 90 = East
        latitude_deg: shooting latitude
    """

    time_of_flight_s: float
    heading_deg: float = 0.0
    latitude_deg: float = cDefaultLatitudeDeg


class ExpertOffset(NamedTuple):
    """Deflection in meters.

    Attributes:
        d_y: vertical, up positive
        d_z: horizontal, right positive
    """

    d_y: float
    d_z: float


def _clamp(value: float, limit: float) -> float:
    return max(min(value, limit), -limit)


def spin_drift(time_of_flight_s: float) -> float:
    """Rightward spin drift in meters: ``0.12 * t²`` capped at 0.25 m."""
    drift = cSpinDriftCoefficient * time_of_flight_s * time_of_flight_s
    return min(drift, cSpinDriftMaxM)


def coriolis(time_of_flight_s: float, heading_deg: float,
             latitude_deg: float = cDefaultLatitudeDeg) -> ExpertOffset:
    """Coriolis deflection in meters.

    Shooting North in the northern hemisphere deflects right, shooting South
    deflects left. Shooting East lifts the impact (Eötvös), shooting West
    lowers it.

    Args:
        time_of_flight_s: Flight time in seconds.
        heading_deg: Shooting direction, 0 = North, 90 = East.
        latitude_deg: Shooting latitude in degrees.

    Returns:
        ExpertOffset clamped to ±0.1 m vertical and ±0.2 m horizontal.
    """
    heading = math.radians(heading_deg)
    latitude = math.radians(latitude_deg)
    horizontal = cCoriolisHorizontalCoefficient * time_of_flight_s * math.sin(latitude) * math.cos(heading)
    vertical = cCoriolisVerticalCoefficient * time_of_flight_s * math.sin(heading) * math.cos(latitude)
    return ExpertOffset(
        d_y=_clamp(vertical, cCoriolisVerticalMaxM),
        d_z=_clamp(horizontal, cCoriolisHorizontalMaxM),
    )


def combined_expert_effects(params: ExpertEffectsParams,
                            spin_enabled: bool = False,
                            coriolis_enabled: bool = False) -> ExpertOffset:
    """Sum of the enabled extras; exactly (0, 0) when both are disabled."""
    d_y = 0.0
    d_z = 0.0
    if spin_enabled:
        d_z += spin_drift(params.time_of_flight_s)
    if coriolis_enabled:
        deflection = coriolis(params.time_of_flight_s, params.heading_deg, params.latitude_deg)
        d_y += deflection.d_y
        d_z += deflection.d_z
    return ExpertOffset(d_y, d_z)


def enabled_extras_description(spin_enabled: bool, coriolis_enabled: bool) -> List[str]:
    """Display names of the enabled extras, e.g. ``['Spin Drift', 'Coriolis']``."""
    extras = []
    if spin_enabled:
        extras.append('Spin Drift')
    if coriolis_enabled:
        extras.append('Coriolis')
    return extras
