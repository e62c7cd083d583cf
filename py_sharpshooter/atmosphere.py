"""Air density model.

Computes air density from temperature and altitude with a simplified ISA model:
the pressure follows the barometric formula with the standard lapse rate, while
the density uses the *actual* temperature of the range (ideal gas law). Warm or
high ranges therefore give thinner air and less drag.

Functions:
    compute_air_density: Density in kg/m³ for a temperature and altitude
    get_environment_preset: Named shooting conditions
    format_environment_summary: Compact display string
    density_index: 0..5 density scale for range cards
"""
import math
import warnings

from typing_extensions import Dict, NamedTuple, Optional

from py_sharpshooter.constants import (
    cDegreesCtoK,
    cGasConstantAir,
    cGravityConstant,
    cLapseRateKperMeter,
    cLowestTempC,
    cSeaLevelPressurePa,
    cSeaLevelTemperatureK,
    cStandardTemperatureC,
    cTropopauseAltitudeM,
)

__all__ = (
    'AtmosphereParams',
    'compute_air_density',
    'DEFAULT_ENVIRONMENT',
    'ENVIRONMENT_PRESETS',
    'get_environment_preset',
    'format_environment_summary',
    'density_index',
)

_PRESSURE_EXPONENT = cGravityConstant / (cGasConstantAir * cLapseRateKperMeter)
_TROPOPAUSE_TEMP_K = cSeaLevelTemperatureK - cLapseRateKperMeter * cTropopauseAltitudeM
_TROPOPAUSE_PRESSURE_PA = cSeaLevelPressurePa * math.pow(
    1 - cLapseRateKperMeter * cTropopauseAltitudeM / cSeaLevelTemperatureK, _PRESSURE_EXPONENT
)

# Density index scale bounds, kg/m³
_MIN_INDEX_DENSITY = 0.5
_MAX_INDEX_DENSITY = 1.4


class AtmosphereParams(NamedTuple):
    """Shooting conditions that determine air density.

    Attributes:
        temperature_c: Range temperature in °C.
        altitude_m: Range altitude above sea level in meters.
    """

    temperature_c: float = cStandardTemperatureC
    altitude_m: float = 0.0


def compute_air_density(temperature_c: float, altitude_m: float) -> float:
    """Air density (kg/m³) for the given temperature and altitude.

    Below the tropopause the pressure ratio is
    ``(1 - L*h/T0) ** (g/(R*L))``; above it the pressure decays exponentially
    in an isothermal layer. The density is ``P / (R * T)`` with the actual
    temperature.

    Args:
        temperature_c: Temperature in °C.
        altitude_m: Altitude in meters.

    Returns:
        Air density in kg/m³ (1.225 at 15 °C and sea level).

    Examples:
        >>> round(compute_air_density(15, 0), 3)
        1.225
    """
    if temperature_c < cLowestTempC:
        warnings.warn(f"Temperature {temperature_c}°C is below the supported minimum, "
                      f"using {cLowestTempC}°C", RuntimeWarning)
        temperature_c = cLowestTempC
    temperature_k = temperature_c + cDegreesCtoK

    if altitude_m <= cTropopauseAltitudeM:
        pressure_ratio = math.pow(1 - cLapseRateKperMeter * altitude_m / cSeaLevelTemperatureK,
                                  _PRESSURE_EXPONENT)
        pressure = cSeaLevelPressurePa * pressure_ratio
    else:
        # Isothermal layer above the tropopause
        pressure = _TROPOPAUSE_PRESSURE_PA * math.exp(
            -cGravityConstant * (altitude_m - cTropopauseAltitudeM) / (cGasConstantAir * _TROPOPAUSE_TEMP_K)
        )
    return pressure / (cGasConstantAir * temperature_k)


DEFAULT_ENVIRONMENT = AtmosphereParams(temperature_c=cStandardTemperatureC, altitude_m=0.0)

ENVIRONMENT_PRESETS: Dict[str, AtmosphereParams] = {
    'sea-level': AtmosphereParams(15.0, 0.0),
    'desert-hot': AtmosphereParams(35.0, 100.0),
    'mountain-summit': AtmosphereParams(0.0, 2500.0),
    'arctic-cold': AtmosphereParams(-20.0, 0.0),
    'high-altitude': AtmosphereParams(10.0, 3500.0),
    'tropical': AtmosphereParams(30.0, 500.0),
}


def get_environment_preset(name: str) -> Optional[AtmosphereParams]:
    """Return the named preset, or None when the name is unknown."""
    return ENVIRONMENT_PRESETS.get(name)


def _format_number(value: float) -> str:
    # whole numbers print without ".0", others with the shortest round-trip digits
    value = float(value)
    if value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    return repr(value)


def format_environment_summary(params: AtmosphereParams) -> str:
    """Format conditions like ``"15°C @ 0m"``."""
    return f"{_format_number(params.temperature_c)}°C @ {_format_number(params.altitude_m)}m"


def density_index(params: AtmosphereParams) -> int:
    """Map air density to a 0..5 scale (5 = dense, cold sea-level air)."""
    density = compute_air_density(params.temperature_c, params.altitude_m)
    normalized = (density - _MIN_INDEX_DENSITY) / (_MAX_INDEX_DENSITY - _MIN_INDEX_DENSITY)
    return math.floor(normalized * 5 + 0.5)
