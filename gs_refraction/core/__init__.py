"""
Core constants and error types.
"""

from gs_refraction.core.constants import EARTH_RADIUS, SHELL_HEIGHT
from gs_refraction.core.errors import (
    RefractionError,
    DegenerateInputError,
    GeometryInconsistencyError,
    DivisionByZeroError,
    AtmosphereDomainError,
)

__all__ = [
    "EARTH_RADIUS",
    "SHELL_HEIGHT",
    "RefractionError",
    "DegenerateInputError",
    "GeometryInconsistencyError",
    "DivisionByZeroError",
    "AtmosphereDomainError",
]
