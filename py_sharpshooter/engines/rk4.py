"""Runge-Kutta 4th order integration engine.

Same fixed step, target plane interpolation and time cap as the Euler engine,
with a fourth-order update of velocity and position. The wind is sampled once
per step at the start-of-step position and held for the four stages.

Classes:
    RK4IntegrationEngine: Fixed-step fourth-order Runge-Kutta integrator

Examples:
    >>> from py_sharpshooter import Calculator
    >>> calc = Calculator(engine="rk4_engine")
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

__all__ = ('RK4IntegrationEngine',)


class RK4IntegrationEngine(BaseIntegrationEngine[BaseEngineConfigDict]):
    """Runge-Kutta 4th order integration engine."""

    @override
    def _integrate(self, props: ShotProps) -> ShotResult:
        delta_time = props.time_step
        half_step = 0.5 * delta_time
        wind_sock = props.wind_sock

        time: float = .0
        range_vector = Vector(.0, .0, .0)
        velocity_vector = props.initial_velocity
        wind_vector = wind_sock.vector_for_range(range_vector.x)
        path = self._start_path(props)

        def f(v: Vector) -> Vector:  # dv/dt (acceleration)
            return self.acceleration(props, v, wind_vector)

        # region Trajectory Loop
        integration_step_count = 0
        while time < props.max_time:
            integration_step_count += 1
            prev_range_vector, prev_time = range_vector, time

            wind_vector = wind_sock.vector_for_range(range_vector.x)

            # region RK4 integration
            v1 = f(velocity_vector)
            v2 = f(velocity_vector + v1 * half_step)  # type: ignore[operator]
            v3 = f(velocity_vector + v2 * half_step)  # type: ignore[operator]
            v4 = f(velocity_vector + v3 * delta_time)  # type: ignore[operator]
            p1 = velocity_vector
            p2 = velocity_vector + v1 * half_step  # type: ignore[operator]
            p3 = velocity_vector + v2 * half_step  # type: ignore[operator]
            p4 = velocity_vector + v3 * delta_time  # type: ignore[operator]
            velocity_vector += (v1 + v2 * 2 + v3 * 2 + v4) * (delta_time / 6.0)  # type: ignore[operator]
            range_vector += (p1 + p2 * 2 + p3 * 2 + p4) * (delta_time / 6.0)  # type: ignore[operator]
            # endregion RK4 integration

            time += delta_time

            if path is not None:
                path.append(range_vector)

            if range_vector.x >= props.distance_m:
                logger.debug(f"RK4 ran {integration_step_count} iterations")
                return self._crossing_result(props, prev_range_vector, prev_time, range_vector, time,
                                             wind_vector.z, path, integration_step_count)
        # endregion Trajectory Loop

        logger.debug(f"RK4 ran {integration_step_count} iterations")
        return self._capped_result(props, range_vector, time, wind_vector.z, path, integration_step_count)
