"""Engine protocol module for py_sharpshooter.

This module defines the EngineProtocol type protocol that every trajectory
engine must implement, so that engines are interchangeable inside the
Calculator.

Classes:
    EngineProtocol: Type protocol for trajectory integration engines

Type Variables:
    ConfigT: Configuration type for the engine (covariant)
"""
# Standard library imports
from abc import abstractmethod
from typing import Optional, TypeVar

# Third-party imports
from typing_extensions import Protocol, runtime_checkable

# Local imports
from py_sharpshooter.conditions import Environment, ShotRequest
from py_sharpshooter.trajectory_data import ShotResult

__all__ = ['EngineProtocol', 'ConfigT']

# Type variable for engine configuration
ConfigT = TypeVar("ConfigT", covariant=True)


@runtime_checkable
class EngineProtocol(Protocol[ConfigT]):
    """Protocol defining the interface for trajectory integration engines.

    Type Parameters:
        ConfigT: The configuration type used by this engine implementation.

    Required Methods:
        - integrate: Fly one projectile to the target plane.

    Examples:
        ```python
        from py_sharpshooter.engines.base_engine import BaseEngineConfigDict

        class MyEngine(EngineProtocol[BaseEngineConfigDict]):
            def __init__(self, config: BaseEngineConfigDict):
                self.config = config

            def integrate(self, shot, env):
                ...

        isinstance(MyEngine({}), EngineProtocol)  # True
        ```

    Note:
        The protocol is structural: any class with a matching ``integrate``
        method is accepted by the Calculator.
    """

    def __init__(self, config: Optional[ConfigT] = None) -> None:
        ...

    @abstractmethod
    def integrate(self, shot: ShotRequest, env: Environment) -> ShotResult:
        """Fly a projectile from the muzzle to the target plane.

        The equation of motion is
        ```
        dV/dt = -k * |V - W| * (V - W) - g
        Where:
        - V is the projectile velocity relative to the ground
        - W = (0, 0, w) is the crosswind at the current down-range position
        - k = drag_factor * air_density
        - g is gravitational acceleration along -y
        ```

        Args:
            shot: Flight parameters of the projectile.
            env: Air, gravity and wind in effect.

        Returns:
            ShotResult at the target plane, or the last state when the flight
            time cap is hit first.

        Raises:
            ShotParameterError: If the step size or time cap is not positive.
        """
        ...
