"""Integration engines for shot trajectory calculations.

All engines implement the EngineProtocol interface and share the fixed step,
target plane interpolation and flight time cap of BaseIntegrationEngine.

Available Engines:
    - BaseIntegrationEngine: Abstract base class for all integration engines
    - EulerIntegrationEngine: Semi-implicit Euler method (default)
    - RK4IntegrationEngine: Fourth-order Runge-Kutta method

Engine Selection Guidelines:
    - Default: EulerIntegrationEngine (euler_engine) - the gameplay reference
    - Accuracy: RK4IntegrationEngine (rk4_engine) - closer to the exact flight at coarse steps

Examples:
    >>> from py_sharpshooter.engines import RK4IntegrationEngine, BaseEngineConfigDict
    >>> custom_config = BaseEngineConfigDict(cTimeStep=0.001)

    >>> # Using with Calculator
    >>> from py_sharpshooter import Calculator
    >>> calc = Calculator(engine="rk4_engine")  # By name
    >>> calc = Calculator(config=custom_config, engine=RK4IntegrationEngine)  # By class

See Also:
    - py_sharpshooter.generics.engine.EngineProtocol: Base protocol for engines
    - py_sharpshooter.interface.Calculator: Main interface using engines
"""

from .base_engine import *
from .euler import *
from .rk4 import *

__all__ = (
    # Base engine infrastructure
    'create_base_engine_config',
    'BaseEngineConfig',
    'BaseEngineConfigDict',
    'DEFAULT_BASE_ENGINE_CONFIG',
    'set_default_engine_config',
    'ShotProps',
    'BaseIntegrationEngine',

    # Integration engines
    'EulerIntegrationEngine',
    'RK4IntegrationEngine',
)
