"""Generic type definitions for trajectory engines.

Protocol Definitions:
    EngineProtocol: Core interface for trajectory integration engines

Type Variables:
    ConfigT: Generic configuration type for engine parameters

See Also:
    py_sharpshooter.engines: Concrete engine implementations
    py_sharpshooter.interface.Calculator: Main calculator interface
"""

# Local imports
from .engine import ConfigT, EngineProtocol

__all__ = (
    'ConfigT',
    'EngineProtocol',
)
