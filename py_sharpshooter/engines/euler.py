"""Semi-implicit Euler integration engine.

The default engine. Each fixed step first updates the velocity from the
current acceleration and then moves the projectile with the *new* velocity
(symplectic Euler), which keeps long flights stable at a coarse step.

Classes:
    EulerIntegrationEngine: Concrete implementation using semi-implicit Euler

Examples:
    >>> from py_sharpshooter import Calculator
    >>> calc = Calculator(engine="py_sharpshooter:EulerIntegrationEngine")

Mathematical Background:
    ```
    v(t + h) = v(t) + h * a(t, x(t), v(t))
    x(t + h) = x(t) + h * v(t + h)
    ```

See Also:
    py_sharpshooter.engines.rk4: Fourth-order integration
    py_sharpshooter.engines.base_engine.BaseIntegrationEngine: Base class
"""
from typing_extensions import override

from py_sharpshooter.engines.base_engine import (
    BaseEngineConfigDict,
    BaseIntegrationEngine,
    ShotProps,
)
from py_sharpshooter.logger import logger
from py_sharpshooter.trajectory_data import ShotResult
from py_sharpshooter.vector import Vector

__all__ = ('EulerIntegrationEngine',)


class EulerIntegrationEngine(BaseIntegrationEngine[BaseEngineConfigDict]):
    """Semi-implicit Euler integration engine.

    Attributes:
        integration_step_count: Number of integration steps performed by this engine.

    Examples:
        >>> config = BaseEngineConfigDict(cTimeStep=0.001)
        >>> engine = EulerIntegrationEngine(config)
    """

    @override
    def _integrate(self, props: ShotProps) -> ShotResult:
        """Fly the prepared shot with fixed semi-implicit Euler steps.

        Args:
            props: Shot parameters resolved against engine defaults.

        Returns:
            ShotResult: Interpolated state at the target plane, or the last
            state when the time cap is reached.
        """
        delta_time = props.time_step
        wind_sock = props.wind_sock

        time: float = .0
        # x: downrange distance, y: vertical, z: horizontal
        range_vector = Vector(.0, .0, .0)
        velocity_vector = props.initial_velocity
        wind_vector = wind_sock.vector_for_range(range_vector.x)
        path = self._start_path(props)

        # region Trajectory Loop
        integration_step_count = 0
        while time < props.max_time:
            integration_step_count += 1
            prev_range_vector, prev_time = range_vector, time

            # Update wind reading at current point in trajectory
            wind_vector = wind_sock.vector_for_range(range_vector.x)

            acceleration = self.acceleration(props, velocity_vector, wind_vector)
            velocity_vector += acceleration * delta_time  # type: ignore[operator]
            range_vector += velocity_vector * delta_time  # type: ignore[operator]
            time += delta_time

            if path is not None:
                path.append(range_vector)

            if range_vector.x >= props.distance_m:
                logger.debug(f"Euler ran {integration_step_count} iterations")
                return self._crossing_result(props, prev_range_vector, prev_time, range_vector, time,
                                             wind_vector.z, path, integration_step_count)
        # endregion Trajectory Loop

        logger.debug(f"Euler ran {integration_step_count} iterations")
        return self._capped_result(props, range_vector, time, wind_vector.z, path, integration_step_count)
