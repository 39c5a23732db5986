"""
Error types raised by the refraction-correction pipeline.

Every error is raised where the problem is detected and propagates
unchanged; the correction either succeeds or fails with one of these.
"""

from typing import Any, Dict, Optional


class RefractionError(Exception):
    """Base class for refraction-correction failures.

    Attributes:
        inputs: Offending input values, keyed by name
    """

    def __init__(self, message: str, inputs: Optional[Dict[str, Any]] = None):
        self.inputs = dict(inputs or {})
        if self.inputs:
            details = ", ".join(f"{key}={value!r}" for key, value in self.inputs.items())
            message = f"{message} ({details})"
        super().__init__(message)


class DegenerateInputError(RefractionError, ValueError):
    """Raised for zero-length or non-finite position vectors, or a spacecraft
    on or below the reference sphere (zenith angle undefined)."""
    pass


class GeometryInconsistencyError(RefractionError, ArithmeticError):
    """Raised when an intermediate value leaves its mathematical domain."""
    pass


class DivisionByZeroError(RefractionError, ZeroDivisionError):
    """Raised when the spacecraft projection coincides with the ground station
    while a nonzero displacement was computed."""
    pass


class AtmosphereDomainError(RefractionError, ValueError):
    """Raised when the tropospheric model is evaluated at or above the tropopause."""
    pass
