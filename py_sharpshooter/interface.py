"""Shot calculator interface and engine loading system.

This module provides the main `Calculator` class that runs the one-shot
pipeline: precision scatter, sway/recoil offset and turret dial are folded
into the aim point, the projectile is flown by a pluggable integration engine,
and the optional expert extras are added to the impact. Engines are loaded by
class, by entry point name (``"rk4_engine"``) or by ``"module:Class"`` path.

Key Classes:
    - Calculator: Shot pipeline with pluggable engine support
    - _EngineLoader: Internal utility for discovering and loading engine plugins
"""
from dataclasses import dataclass, field, replace
from importlib.metadata import entry_points, EntryPoint
from typing import Generic, Any

from typing_extensions import Union, Optional, TypeVar, Type, Generator

from py_sharpshooter.conditions import Environment, Shot, ShotRequest
from py_sharpshooter.dispersion import sample_offset
from py_sharpshooter.engines import EulerIntegrationEngine
from py_sharpshooter.expert_effects import ExpertEffectsParams, combined_expert_effects
from py_sharpshooter.generics.engine import EngineProtocol
from py_sharpshooter.logger import logger
from py_sharpshooter.rng import combine_seed, to_seed
from py_sharpshooter.trajectory_data import HitResult, ShotResult
from py_sharpshooter.turret import (
    DialRecommendation,
    apply_turret_offset,
    mils_to_meters,
    recommend_dial_from_offset,
)

ConfigT = TypeVar('ConfigT', covariant=True)

DEFAULT_ENTRY_SUFFIX = '_engine'
DEFAULT_ENTRY_GROUP = 'py_sharpshooter'
DEFAULT_ENTRY: Type[EngineProtocol] = EulerIntegrationEngine

EngineProtocolType = Type[EngineProtocol[ConfigT]]
EngineProtocolEntry = Union[str, EngineProtocolType, None]


@dataclass
class _EngineLoader:
    _entry_point_group = DEFAULT_ENTRY_GROUP
    _entry_point_suffix = DEFAULT_ENTRY_SUFFIX

    @classmethod
    def _get_entries_by_group(cls) -> set:
        all_entry_points = entry_points()
        if hasattr(all_entry_points, 'select'):  # for importlib >= 5
            engine_entry_points = all_entry_points.select(group=cls._entry_point_group)
        elif hasattr(all_entry_points, 'get'):  # for importlib < 5
            engine_entry_points = all_entry_points.get(cls._entry_point_group, [])  # type: ignore[arg-type]
        else:
            raise RuntimeError('Entry point not supported')
        return set(engine_entry_points)

    @classmethod
    def iter_engines(cls) -> Generator[EntryPoint, None, None]:
        """Iterate over all available engines in the entry points."""
        for ep in cls._get_entries_by_group():
            if ep.name.endswith(cls._entry_point_suffix):
                yield ep

    @classmethod
    def _load_from_entry(cls, ep: EntryPoint) -> Optional[EngineProtocolType]:
        try:
            handle: EngineProtocolType = ep.load()
            if not isinstance(handle, EngineProtocol):
                raise TypeError(f"Unsupported engine {ep.value} does not implement EngineProtocol")
            logger.debug(f"Loaded engine from: {ep.value} (Class: {handle})")
            return handle  # type: ignore
        except ImportError as e:
            logger.error(f"Error loading engine from {ep.value}: {e}")
        except AttributeError as e:
            logger.error(f"Error loading attribute from {ep.value}: {e}")
        except TypeError as e:
            logger.error(str(e))
        return None

    @classmethod
    def load(cls, entry_point: EngineProtocolEntry = DEFAULT_ENTRY) -> Type[EngineProtocol[Any]]:
        if entry_point is None:
            entry_point = DEFAULT_ENTRY
        if isinstance(entry_point, EngineProtocol):
            return entry_point  # type: ignore
        if isinstance(entry_point, str):
            for ep in cls.iter_engines():
                if ep.name == entry_point:
                    if handle := cls._load_from_entry(ep):
                        return handle

            if ':' in entry_point:
                ep = EntryPoint(entry_point, entry_point, cls._entry_point_group)
                if handle := cls._load_from_entry(ep):
                    return handle
            raise ValueError(f"No 'engine' entry point found containing '{entry_point}'")
        raise TypeError("Invalid entry_point type, expected 'str' or 'EngineProtocol'")


@dataclass
class Calculator(Generic[ConfigT]):
    """One-shot pipeline around an integration engine.

    Examples:
        ```python
        from py_sharpshooter import Calculator, Environment, Shot, ShotRequest, TurretState

        calc = Calculator()
        shot = Shot(ShotRequest(distance_m=300, muzzle_velocity_mps=850, drag_factor=0.00002),
                    precision_moa=1.0, seed='daily-2026-10-18', shot_index=2,
                    turret=TurretState(elevation_mils=1.2))
        hit = calc.fire(shot, Environment(base_wind=3.0, gust=1.0, seed=42))
        print(hit.impact_y_m, hit.impact_z_m)
        print(calc.recommend(hit))
        ```
    """

    config: Optional[ConfigT] = field(default=None)
    engine: EngineProtocolEntry = field(default=DEFAULT_ENTRY)
    _engine_instance: EngineProtocol[Any] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        self._engine_instance = _EngineLoader.load(self.engine)(self.config)

    def __getattr__(self, item: str) -> Any:
        """Delegate attribute access to the underlying engine instance.

        Raises:
            AttributeError: If the attribute is not found on either the
                `Calculator` object or its `_engine_instance`.
        """
        if item == '_engine_instance':
            raise AttributeError(item)
        if hasattr(self._engine_instance, item):
            return getattr(self._engine_instance, item)
        raise AttributeError(
            f"'{self.__class__.__name__}' object or its underlying engine "
            f"'{self._engine_instance.__class__.__name__}' has no attribute '{item}'"
        )

    def simulate(self, request: ShotRequest, env: Environment) -> ShotResult:
        """Fly a bare projectile without scatter, sway, turret or extras."""
        return self._engine_instance.integrate(request, env)

    def fire(self, shot: Shot, env: Environment) -> HitResult:
        """Run the full pipeline for one trigger pull.

        Steps:
            1. Precision scatter seeded with ``combine_seed(shot.seed, shot.shot_index)``
            2. Sway/recoil offset converted from MILs to meters at the target distance
            3. Dialed turret offset
            4. Flight to the target plane
            5. Spin drift and Coriolis from the time of flight, when enabled

        Args:
            shot: Aim, weapon precision, seed and toggles of the shot.
            env: Air, gravity and wind in effect.

        Returns:
            HitResult with the final impact.

        Raises:
            ShotParameterError: If the step size or time cap is not positive.
        """
        request = shot.request
        distance = request.distance_m

        dispersion_seed = combine_seed(to_seed(shot.seed), shot.shot_index)
        dispersion = sample_offset(distance, shot.precision_moa, dispersion_seed)

        offset_y_mils, offset_z_mils = shot.aim_offset_mils
        aim_y = request.aim_y_m + dispersion.d_y + mils_to_meters(distance, offset_y_mils)
        aim_z = request.aim_z_m + dispersion.d_z + mils_to_meters(distance, offset_z_mils)
        if shot.turret is not None:
            aim_y, aim_z = apply_turret_offset(aim_y, aim_z, shot.turret, distance)

        flight = self._engine_instance.integrate(replace(request, aim_y_m=aim_y, aim_z_m=aim_z), env)

        expert_offset = combined_expert_effects(
            ExpertEffectsParams(flight.time_of_flight_s, shot.heading_deg, shot.latitude_deg),
            spin_enabled=shot.spin_drift,
            coriolis_enabled=shot.coriolis,
        )
        hit = HitResult(shot, flight, aim_y_m=aim_y, aim_z_m=aim_z,
                        dispersion=tuple(dispersion), expert_offset=tuple(expert_offset))
        logger.debug(f"Shot {shot.shot_index} at {distance}m: "
                     f"impact y={hit.impact_y_m:.4f}m z={hit.impact_z_m:.4f}m "
                     f"tof={flight.time_of_flight_s:.4f}s")
        return hit

    @staticmethod
    def recommend(hit: HitResult, click_size: Optional[float] = None) -> DialRecommendation:
        """Turret correction that would have centered ``hit``.

        Args:
            hit: Result of ``fire``.
            click_size: MILs per click, defaults to the shot's turret click size.
        """
        if click_size is None:
            turret = hit.shot.turret
            if turret is not None:
                click_size = turret.click_size
            else:
                return recommend_dial_from_offset(hit.distance_m, hit.impact_y_m, hit.impact_z_m)
        return recommend_dial_from_offset(hit.distance_m, hit.impact_y_m, hit.impact_z_m, click_size)

    @staticmethod
    def iter_engines() -> Generator[EntryPoint, None, None]:
        """Iterate all available engines in the entry points."""
        yield from _EngineLoader.iter_engines()


__all__ = ('Calculator', '_EngineLoader',)
