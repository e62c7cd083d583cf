"""py_sharpshooter exception types.

The core is total wherever it can be: zero distances, unknown recoil pattern ids
and zero precision all resolve to well-defined defaults. Only malformed inputs
that would make a simulation loop forever, or names outside a closed preset
table, are rejected.

Exception Hierarchy
-------------------

Exception (built-in Python)
└── ValueError
    └── SimulationInputError
        ├── ShotParameterError
        └── UnknownPresetError

Exception Types
---------------

- SimulationInputError: Base class for rejected inputs. Not raised directly.

- ShotParameterError: Raised before integration starts when a parameter would
  prevent the flight loop from terminating (non-positive step or time cap). Contains:
  - parameter: Name of the offending parameter
  - value: The rejected value

- UnknownPresetError: Raised when a name is looked up in a closed table
  (realism preset, weapon type, choke). Contains:
  - kind: Which table was consulted
  - value: The name that was not found
  - allowed: The accepted names
"""
from __future__ import annotations

from typing import Any, Iterable, Tuple

__all__ = (
    'SimulationInputError',
    'ShotParameterError',
    'UnknownPresetError',
)


class SimulationInputError(ValueError):
    """Simulation input error."""


class ShotParameterError(SimulationInputError):
    """Exception for shot parameters that would not terminate the flight loop.

    Contains:
    - The parameter name
    - The rejected value
    """

    def __init__(self, parameter: str, value: Any, note: str = ""):
        self.parameter: str = parameter
        self.value: Any = value
        msg = f"Invalid shot parameter {parameter}={value!r}"
        if note:
            msg += f": {note}"
        super().__init__(msg)


class UnknownPresetError(SimulationInputError):
    """Exception for names missing from a preset table.

    Contains:
    - The table kind (e.g. 'realism preset', 'weapon type', 'choke')
    - The unknown value
    - The allowed values
    """

    def __init__(self, kind: str, value: Any, allowed: Iterable[str]):
        self.kind: str = kind
        self.value: Any = value
        self.allowed: Tuple[str, ...] = tuple(allowed)
        super().__init__(f"Unknown {kind} {value!r}, expected one of: {', '.join(self.allowed)}")
