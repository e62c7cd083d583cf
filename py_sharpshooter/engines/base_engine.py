"""Base integration engine for shot trajectory calculations.

The module serves as the core framework for the engine system, providing:
- Engine configuration management through BaseEngineConfig and BaseEngineConfigDict
- Abstract base class BaseIntegrationEngine implementing the EngineProtocol
- Shared drag/gravity acceleration and target plane interpolation

Classes:
    BaseEngineConfig: Dataclass configuration for engine parameters
    BaseEngineConfigDict: TypedDict version for flexible configuration
    ShotProps: Shot parameters resolved against the engine defaults
    BaseIntegrationEngine: Abstract base class for integration engines

Architecture:
    This module follows the strategy pattern, where BaseIntegrationEngine
    validates and prepares a shot, while concrete subclasses implement the
    fixed-step loop of a specific numerical method (semi-implicit Euler, RK4).

See Also:
    py_sharpshooter.generics.engine.EngineProtocol: Protocol interface
    py_sharpshooter.engines: Concrete engine implementations
    py_sharpshooter.trajectory_data: Data structures for results
"""
from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import asdict, dataclass

from typing_extensions import List, Optional, TypedDict, TypeVar

from py_sharpshooter.conditions import Environment, ShotRequest
from py_sharpshooter.constants import cGravityConstant, cMaxTime, cTimeStep
from py_sharpshooter.exceptions import ShotParameterError
from py_sharpshooter.generics.engine import EngineProtocol
from py_sharpshooter.logger import logger
from py_sharpshooter.trajectory_data import ShotResult
from py_sharpshooter.vector import Vector
from py_sharpshooter.wind import WindSock

__all__ = (
    'create_base_engine_config',
    'BaseEngineConfig',
    'BaseEngineConfigDict',
    'DEFAULT_BASE_ENGINE_CONFIG',
    'set_default_engine_config',
    'ShotProps',
    'BaseIntegrationEngine',
)

_ZERO_VECTOR = Vector(0.0, 0.0, 0.0)
_MIN_CROSSING_GAP = 1e-9  # m, guards the crossing fraction against a zero-length step


@dataclass
class BaseEngineConfig:
    """Configuration dataclass for trajectory engines.

    All parameters use metric units (meters, seconds).

    Attributes:
        cTimeStep: Fixed integration step in seconds, used when the shot
                   request does not set ``dt_s``. Defaults to 0.002 s.
        cMaxTime: Flight time cap in seconds, used when the shot request does
                  not set ``max_time_s``. Defaults to 5 s.
        cGravityConstant: Gravitational acceleration in m/s², used when the
                          environment does not set ``gravity``.
                          Defaults to 9.80665 m/s².

    Examples:
        >>> config = BaseEngineConfig(cTimeStep=0.001)  # finer steps
    """

    cTimeStep: float = cTimeStep
    cMaxTime: float = cMaxTime
    cGravityConstant: float = cGravityConstant


#: Default configuration instance
DEFAULT_BASE_ENGINE_CONFIG: BaseEngineConfig = BaseEngineConfig()


class BaseEngineConfigDict(TypedDict, total=False):
    """TypedDict for flexible engine configuration from dictionaries.

    When used with create_base_engine_config(), any unspecified fields will
    use their default values from DEFAULT_BASE_ENGINE_CONFIG.

    Examples:
        >>> config_dict: BaseEngineConfigDict = {'cTimeStep': 0.001}
        >>> config = create_base_engine_config(config_dict)
    """

    cTimeStep: Optional[float]
    cMaxTime: Optional[float]
    cGravityConstant: Optional[float]


def create_base_engine_config(interface_config: Optional[BaseEngineConfigDict] = None) -> BaseEngineConfig:
    """Create BaseEngineConfig from optional dictionary configuration.

    Args:
        interface_config: Optional dictionary containing configuration overrides.
                         If None, returns the default configuration.

    Returns:
        BaseEngineConfig instance with merged configuration values.
    """
    config = asdict(DEFAULT_BASE_ENGINE_CONFIG)
    if interface_config is not None and isinstance(interface_config, dict):
        config.update(interface_config)
    return BaseEngineConfig(**config)


def set_default_engine_config(overrides: Optional[BaseEngineConfigDict] = None) -> BaseEngineConfig:
    """Replace the defaults used by engines created afterwards.

    Fields missing from ``overrides`` fall back to the built-in constants, so
    calling it without arguments restores the factory defaults. Unknown keys
    are logged and ignored.

    Args:
        overrides: Values for some or all BaseEngineConfig fields.

    Returns:
        The updated DEFAULT_BASE_ENGINE_CONFIG.
    """
    config = asdict(BaseEngineConfig())
    for name, value in (overrides or {}).items():
        if name not in config:
            logger.warning(f"Unknown engine config key {name!r} ignored")
            continue
        config[name] = value
    for name, value in config.items():
        setattr(DEFAULT_BASE_ENGINE_CONFIG, name, value)
    return DEFAULT_BASE_ENGINE_CONFIG


@dataclass
class ShotProps:
    """Shot request and environment resolved to the floats used in the loop.

    Attributes:
        distance_m: down-range distance of the target plane
        time_step: fixed integration step (s)
        max_time: flight time cap (s)
        drag_coefficient: ``drag_factor * air_density``
        gravity_vector: gravity acceleration vector (points down)
        initial_velocity: muzzle velocity vector
        wind_sock: per-flight wind sampler
        layered_wind: a layered wind profile is in effect
        record_path: keep every sub-step position
    """

    distance_m: float
    time_step: float
    max_time: float
    drag_coefficient: float
    gravity_vector: Vector
    initial_velocity: Vector
    wind_sock: WindSock
    layered_wind: bool = False
    record_path: bool = False

    @classmethod
    def from_request(cls, shot: ShotRequest, env: Environment, config: BaseEngineConfig) -> ShotProps:
        """Resolve defaults and validate parameters that bound the loop.

        Raises:
            ShotParameterError: If the step size or time cap is not positive and finite.
        """
        time_step = config.cTimeStep if shot.dt_s is None else shot.dt_s
        max_time = config.cMaxTime if shot.max_time_s is None else shot.max_time_s
        if not (time_step > 0 and math.isfinite(time_step)):
            raise ShotParameterError('dt_s', time_step, "integration step must be positive and finite")
        if not (max_time > 0 and math.isfinite(max_time)):
            raise ShotParameterError('max_time_s', max_time, "flight time cap must be positive and finite")
        gravity = config.cGravityConstant if env.gravity is None else env.gravity

        # Launch angles that put the bore line through the aim point
        angle_y = math.atan2(shot.aim_y_m, shot.distance_m)
        angle_z = math.atan2(shot.aim_z_m, shot.distance_m)
        initial_velocity = Vector(
            math.cos(angle_y) * math.cos(angle_z),
            math.sin(angle_y),
            math.cos(angle_y) * math.sin(angle_z),
        ).mul_by_const(shot.muzzle_velocity_mps)

        return cls(
            distance_m=shot.distance_m,
            time_step=time_step,
            max_time=max_time,
            drag_coefficient=shot.drag_factor * env.density,
            gravity_vector=Vector(0.0, -gravity, 0.0),
            initial_velocity=initial_velocity,
            wind_sock=WindSock(env),
            layered_wind=env.is_layered,
            record_path=shot.record_path,
        )


_BaseEngineConfigDictT = TypeVar("_BaseEngineConfigDictT", bound='BaseEngineConfigDict', covariant=True)


class BaseIntegrationEngine(ABC, EngineProtocol[_BaseEngineConfigDictT]):
    """All calculations are done in metric units (meters and m/s)."""

    def __init__(self, _config: Optional[_BaseEngineConfigDictT] = None):
        """Initialize the class.

        Args:
            _config: The configuration object.
        """
        self._config: BaseEngineConfig = create_base_engine_config(_config)
        self.integration_step_count: int = 0

    def _init_trajectory(self, shot: ShotRequest, env: Environment) -> ShotProps:
        return ShotProps.from_request(shot, env, self._config)

    def integrate(self, shot: ShotRequest, env: Environment) -> ShotResult:
        """Compute the flight of one projectile to the target plane.

        Args:
            shot: Flight parameters of the projectile.
            env: Air, gravity and wind in effect.

        Returns:
            ShotResult at the target plane. When the target plane is not
            reached within the time cap the last computed state is returned
            with ``reached_target=False``.

        Raises:
            ShotParameterError: If the step size or time cap is not positive and finite.
        """
        props = self._init_trajectory(shot, env)
        return self._integrate(props)

    @abstractmethod
    def _integrate(self, props: ShotProps) -> ShotResult:
        """Run the fixed-step loop for the prepared shot.

        Args:
            props: Shot parameters resolved against engine defaults.

        Returns:
            ShotResult describing the flight.
        """
        ...

    @staticmethod
    def acceleration(props: ShotProps, velocity: Vector, wind_vector: Vector) -> Vector:
        """Gravity plus quadratic drag opposing the velocity relative to the air.

        Args:
            props: Prepared shot.
            velocity: Projectile velocity relative to the ground.
            wind_vector: Wind velocity relative to the ground.

        Returns:
            Acceleration vector (m/s²).
        """
        # Air resistance seen by bullet is ground velocity minus wind velocity relative to ground
        relative_velocity = velocity - wind_vector
        relative_speed = relative_velocity.magnitude()
        if relative_speed == 0:
            return props.gravity_vector
        drag = relative_velocity * (props.drag_coefficient * relative_speed)
        return props.gravity_vector - drag  # type: ignore[operator]

    def _crossing_result(self, props: ShotProps,
                         prev_position: Vector, prev_time: float,
                         position: Vector, time: float,
                         wind_mps: float, path: Optional[List[Vector]],
                         step_count: int) -> ShotResult:
        """Interpolate the state at the target plane between two sub-steps."""
        gap = position.x - prev_position.x
        fraction = (props.distance_m - prev_position.x) / (gap or _MIN_CROSSING_GAP)
        impact = prev_position.lerp(position, fraction)
        self.integration_step_count += step_count
        return ShotResult(
            impact_y_m=impact.y,
            impact_z_m=impact.z,
            time_of_flight_s=prev_time + (time - prev_time) * fraction,
            wind_used_mps=wind_mps,
            path=tuple(path) if path is not None else None,
            layered_wind=props.layered_wind,
            reached_target=True,
            step_count=step_count,
        )

    def _capped_result(self, props: ShotProps, position: Vector, time: float,
                       wind_mps: float, path: Optional[List[Vector]],
                       step_count: int) -> ShotResult:
        """Last computed state of a flight that did not reach the target plane."""
        logger.debug(f"Flight capped at {time:.3f}s, {position.x:.2f}m of {props.distance_m:.2f}m")
        self.integration_step_count += step_count
        return ShotResult(
            impact_y_m=position.y,
            impact_z_m=position.z,
            time_of_flight_s=time,
            wind_used_mps=wind_mps,
            path=tuple(path) if path is not None else None,
            layered_wind=props.layered_wind,
            reached_target=False,
            step_count=step_count,
        )

    @staticmethod
    def _start_path(props: ShotProps) -> Optional[List[Vector]]:
        return [_ZERO_VECTOR] if props.record_path else None
