import logging

import pytest

from py_sharpshooter.conditions import Environment, ShotRequest
from py_sharpshooter.engines import set_default_engine_config
from py_sharpshooter.interface import _EngineLoader
from py_sharpshooter.logger import logger

logger.setLevel(logging.DEBUG)


def pytest_addoption(parser):
    parser.addoption(
        "--engine",
        action="store",
        default=None,  # be sure to use the default value from _EngineLoader
        help="Specify the engine entry point name",
    )


@pytest.fixture(scope="class")
def loaded_engine_instance(request):
    engine_name = request.config.getoption("--engine", None)
    logger.info(f"Attempting to load engine: '{engine_name}'")
    try:
        engine = _EngineLoader.load(engine_name)
        # probe:
        engine({})
    except (ValueError, TypeError) as e:
        pytest.exit(f"Cannot start tests: failed to load engine via _EngineLoader: {e}", returncode=1)
    yield engine


@pytest.fixture(autouse=True)
def restore_engine_defaults():
    yield
    set_default_engine_config()


@pytest.fixture
def calm_env() -> Environment:
    """Sea-level air, no wind"""
    return Environment(air_density=1.225)


@pytest.fixture
def vacuum_request() -> ShotRequest:
    """Zero-drag 100 m shot aimed dead level"""
    return ShotRequest(distance_m=100.0, muzzle_velocity_mps=800.0, drag_factor=0.0)
