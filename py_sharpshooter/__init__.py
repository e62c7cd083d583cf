"""Deterministic exterior ballistics and shot dispersion for marksmanship games."""

import importlib.metadata

__version__ = importlib.metadata.version("py_sharpshooter")

# Standard library imports
import os
import sys

# Third-party imports
from typing_extensions import Any, Dict, Optional

# Local imports
from .logger import logger as log
from .engines.base_engine import BaseEngineConfigDict, set_default_engine_config

if sys.version_info[:2] < (3, 11):
    import tomli as tomllib
else:
    import tomllib


def _load_config(filepath: Optional[str] = None, suppress_warnings: bool = False) -> None:
    """Load engine defaults from a .pyss.toml file.

    Args:
        filepath: Path to configuration file. If None, searches for .pyss.toml or pyss.toml
        suppress_warnings: If True, suppress warning messages
    """
    def find_pyss_toml(start_dir: str) -> Optional[str]:
        """Search for .pyss.toml or pyss.toml from ``start_dir`` up to the filesystem root.

        Returns:
            The absolute path to the config file if found, otherwise None.
        """
        current_dir = os.path.abspath(start_dir)
        while True:
            pyss_paths = [
                os.path.join(current_dir, '.pyss.toml'),
                os.path.join(current_dir, 'pyss.toml'),
            ]
            for pyss_path in pyss_paths:
                if os.path.exists(pyss_path):
                    return os.path.abspath(pyss_path)

            parent_dir = os.path.dirname(current_dir)
            if parent_dir == current_dir:
                return None
            current_dir = parent_dir

    if filepath is None:
        filepath = find_pyss_toml(os.getcwd())

    if filepath is None:
        log.debug("No pyss.toml found, using built-in engine defaults")
        return

    log.debug(f"Found {os.path.basename(filepath)} at {os.path.dirname(filepath)}")
    with open(filepath, "rb") as fp:
        _config: Dict[str, Any] = tomllib.load(fp)

    if _pyss := _config.get('pyss'):
        if (engine_table := _pyss.get('engine')) is not None:
            set_default_engine_config(engine_table)
        elif not suppress_warnings:
            log.warning("Config has no `pyss.engine` section")
    elif not suppress_warnings:
        log.warning("Config has no `pyss` section")

    log.debug("Engine defaults load success")


def _basic_config(filename: Optional[str] = None,
                  engine_config: Optional[BaseEngineConfigDict] = None,
                  suppress_warnings: bool = False) -> None:
    """Load engine defaults from file or Mapping.

    Args:
        filename: Configuration file path
        engine_config: Dictionary of BaseEngineConfig overrides
        suppress_warnings: If True, suppress warning messages

    Raises:
        ValueError: If both filename and engine_config are provided
    """
    if filename and engine_config:
        raise ValueError("Can't use engine_config and config file at same time")
    if not filename and engine_config:
        set_default_engine_config(engine_config)
    else:
        # trying to load definitions from pyss.toml
        _load_config(filename, suppress_warnings)


basicConfig = _basic_config

basicConfig()


from .atmosphere import (AtmosphereParams, compute_air_density, DEFAULT_ENVIRONMENT, ENVIRONMENT_PRESETS,
                         get_environment_preset, format_environment_summary, density_index)
from .conditions import WindSegment, Environment, ShotRequest, Shot
from .dispersion import DispersionSample, moa_to_meters, dispersion_std_dev, sample_offset, sample_group, group_size
from .engines import (create_base_engine_config, BaseEngineConfig, DEFAULT_BASE_ENGINE_CONFIG,
                      BaseIntegrationEngine, EulerIntegrationEngine, RK4IntegrationEngine)
from .exceptions import SimulationInputError, ShotParameterError, UnknownPresetError
from .expert_effects import (ExpertEffectsParams, ExpertOffset, spin_drift, coriolis, combined_expert_effects,
                             enabled_extras_description)
from .interface import Calculator, _EngineLoader
from .logger import logger, enable_file_logging, disable_file_logging
from .munition import (RealismPreset, WeaponType, Weapon, Ammo, FinalShotParams, compute_final_shot_params,
                       format_ammo_summary)
from .recoil_patterns import RecoilPattern, RECOIL_PATTERNS, get_recoil_pattern, get_recoil_offset
from .rng import Mulberry32, string_hash, combine_seed, to_seed
from .shotgun import (ShotgunChoke, ShotgunPatternConfig, PelletImpact, spread_radius, sample_pellets,
                      count_pellets_on_target, best_pellet, average_spread)
from .sway import SwayOffset, RecoilState, sway_offset, recoil_impulse, decay, combine
from .trajectory_data import ShotResult, HitResult
from .turret import (TurretState, DialRecommendation, quantize_to_click, next_click_value, mils_to_meters,
                     meters_to_mils, apply_turret_offset, compute_adjustment_for_offset,
                     recommend_dial_from_offset)
from .vector import Vector
from .wind import WindSample, WindSock, sample_wind_at_distance, wind_at_flag_positions

# DRY: build __all__ from global symbols
_SKIP_GLOBALS = {
    # Skip Python builtins
    "__name__", "__doc__", "__package__", "__loader__", "__spec__",
    "__file__", "__cached__", "__builtins__",
    # Skip imported modules
    "tomllib", "sys", "os", "importlib",
    # Skip typing helpers
    "Any", "Dict", "Optional",
    # Skip private/internal symbols
    "_load_config", "_basic_config", "log",
    # Public aliases, appended below
    "basicConfig",
}
# Build __all__ from the module's global namespace
__all__ = [
    name for name in globals()
    if not name.startswith("_") and name not in _SKIP_GLOBALS
]
# Add the public aliases for private functions
__all__.extend(["basicConfig"])
