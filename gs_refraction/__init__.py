"""
gs-refraction: Atmospheric refraction correction for satellite-to-ground lines of sight.

Given the position of a low-Earth-orbit spacecraft and of a ground station,
both in an Earth-centred inertial frame and in meters, computes the apparent
position of the ground station seen from the spacecraft, accounting for
atmospheric refraction only.

Assumptions
-----------
- The Earth is a sphere; terrain is ignored.
- Ground stations lie on the reference sphere.
- Coordinates are in meters, origin at the Earth centre (e.g. GCI).

Modules
-------
geometry
    Surface projection, chord distances, spacecraft zenith angle
atmosphere
    Tropospheric refractive index (lapse-rate model)
refraction
    Refraction strategies, angular displacement, coordinate correction,
    batch correction
config
    Configuration dataclasses and loading (dict, JSON, YAML)
core
    Constants and error types
"""

__version__ = "0.1.0"
__author__ = "gs-refraction Contributors"

from gs_refraction.core.errors import (
    RefractionError,
    DegenerateInputError,
    GeometryInconsistencyError,
    DivisionByZeroError,
    AtmosphereDomainError,
)
from gs_refraction.config import RefractionConfig, ConfigurationManager
from gs_refraction.geometry import Point3D, project_to_sphere, zenith_angle
from gs_refraction.atmosphere import LapseRateAtmosphere
from gs_refraction.refraction import (
    delta_angle,
    CoordinateCorrector,
    RefractionResult,
    correct_ground_station,
    correct_ground_station_detailed,
    correct_batch,
)

__all__ = [
    "__version__",
    "RefractionError",
    "DegenerateInputError",
    "GeometryInconsistencyError",
    "DivisionByZeroError",
    "AtmosphereDomainError",
    "RefractionConfig",
    "ConfigurationManager",
    "Point3D",
    "project_to_sphere",
    "zenith_angle",
    "LapseRateAtmosphere",
    "delta_angle",
    "CoordinateCorrector",
    "RefractionResult",
    "correct_ground_station",
    "correct_ground_station_detailed",
    "correct_batch",
]
