"""Global physical and gameplay constants for shot simulation.

This module defines the constants used throughout the shot pipeline, including
atmosphere model constants, integrator defaults, RNG mixing constants, and the
gameplay coefficients of the expert effects.

Constant Categories:
    - Atmosphere constants: ISA-like sea-level reference and lapse rate
    - Integrator defaults: step size, flight time cap, gravity
    - RNG constants: mulberry32 increment, seed mixing multipliers
    - Gameplay limits: pellet cap, expert effect coefficients and clamps

References:
    - ISA: https://www.engineeringtoolbox.com/international-standard-atmosphere-d_985.html
"""

# Third-party imports
from typing_extensions import Final

# =============================================================================
# Atmosphere Constants
# =============================================================================

cSeaLevelPressurePa: Final[float] = 101325.0  # Pa
"""Standard atmospheric pressure at sea level (Pa)"""

cSeaLevelTemperatureK: Final[float] = 288.15  # K (15 °C)
"""Standard temperature at sea level in Kelvin (K)"""

cStandardTemperatureC: Final[float] = 15.0  # °C
"""Standard temperature at sea level in Celsius (°C)"""

cStandardDensityMetric: Final[float] = 1.2250  # kg/m^3
"""Standard air density at sea level (kg/m³)"""

cGasConstantAir: Final[float] = 287.05  # J/(kg·K)
"""Specific gas constant for dry air (J/(kg·K))"""

cLapseRateKperMeter: Final[float] = 0.0065  # K/m
"""Temperature lapse rate in the troposphere (K/m)"""

cTropopauseAltitudeM: Final[float] = 11000.0  # m
"""Altitude of the tropopause (m)"""

cDegreesCtoK: Final[float] = 273.15  # K = °C + 273.15
"""Celsius to Kelvin conversion constant (K)"""

cLowestTempC: Final[float] = -90.0  # °C
"""Minimum allowed temperature for atmospheric calculations (°C)"""

# =============================================================================
# Integrator Defaults
# =============================================================================

cGravityConstant: Final[float] = 9.80665  # m/s^2
"""Standard gravitational acceleration (m/s²)"""

cTimeStep: Final[float] = 0.002  # s
"""Default fixed integration step (s)"""

cMaxTime: Final[float] = 5.0  # s
"""Default flight time cap (s)"""

cDefaultSeed: Final[int] = 1
"""Seed used when an environment does not provide one"""

# =============================================================================
# RNG Constants
# =============================================================================

cUint32Mask: Final[int] = 0xFFFFFFFF
cMulberryIncrement: Final[int] = 0x6D2B79F5
cSeedMultiplier: Final[int] = 2654435761  # Knuth multiplicative hash
cDjb2Initial: Final[int] = 5381
cSegmentSeedStride: Final[int] = 1000
"""Seed offset between two wind segments"""
cPelletSeedStride: Final[int] = 15731
"""Seed offset between two pellets of one shotgun shot"""

# =============================================================================
# Gameplay Limits
# =============================================================================

cMaxPelletCount: Final[int] = 50
"""Maximum number of sampled pellets per shotgun shot"""

cMetersPerYard: Final[float] = 0.9144

cSpinDriftCoefficient: Final[float] = 0.12  # m/s^2
cSpinDriftMaxM: Final[float] = 0.25  # m
cCoriolisHorizontalCoefficient: Final[float] = 0.03
cCoriolisVerticalCoefficient: Final[float] = 0.015
cCoriolisHorizontalMaxM: Final[float] = 0.2  # m
cCoriolisVerticalMaxM: Final[float] = 0.1  # m
cDefaultLatitudeDeg: Final[float] = 45.0

cDefaultClickSizeMils: Final[float] = 0.1  # MIL per click

__all__ = (
    # Atmosphere constants
    'cSeaLevelPressurePa',
    'cSeaLevelTemperatureK',
    'cStandardTemperatureC',
    'cStandardDensityMetric',
    'cGasConstantAir',
    'cLapseRateKperMeter',
    'cTropopauseAltitudeM',
    'cDegreesCtoK',
    'cLowestTempC',
    # Integrator defaults
    'cGravityConstant',
    'cTimeStep',
    'cMaxTime',
    'cDefaultSeed',
    # RNG constants
    'cUint32Mask',
    'cMulberryIncrement',
    'cSeedMultiplier',
    'cDjb2Initial',
    'cSegmentSeedStride',
    'cPelletSeedStride',
    # Gameplay limits
    'cMaxPelletCount',
    'cMetersPerYard',
    'cSpinDriftCoefficient',
    'cSpinDriftMaxM',
    'cCoriolisHorizontalCoefficient',
    'cCoriolisVerticalCoefficient',
    'cCoriolisHorizontalMaxM',
    'cCoriolisVerticalMaxM',
    'cDefaultLatitudeDeg',
    'cDefaultClickSizeMils',
)
