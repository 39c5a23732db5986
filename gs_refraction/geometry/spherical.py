"""
Spherical Earth Geometry Calculations
=====================================

This module provides the geometry of the line of sight between a
spacecraft and a ground station on a spherical Earth: projection of a
space point onto the reference sphere, chord distances, and the zenith
angle of the spacecraft seen from its surface projection.

Input coordinates are Cartesian, in meters, in an inertial frame with
origin at the Earth centre (e.g. GCI).
"""

import logging
import numpy as np
from typing import NamedTuple, Tuple

from gs_refraction.core.constants import EARTH_RADIUS
from gs_refraction.core.errors import DegenerateInputError

logger = logging.getLogger(__name__)


def _norm(values) -> float:
    """Euclidean norm scaled by the largest component so it neither overflows nor underflows."""
    arr = np.asarray(values, dtype=float)
    scale = np.max(np.abs(arr))
    if scale == 0 or not np.isfinite(scale):
        return float(scale)
    return float(scale * np.linalg.norm(arr / scale))


# =============================================================================
# Point Type
# =============================================================================

class Point3D(NamedTuple):
    """Immutable Cartesian position (x, y, z) in meters."""
    x: float
    y: float
    z: float

    @classmethod
    def from_array(cls, values) -> "Point3D":
        """Build a point from any length-3 array-like."""
        arr = np.asarray(values, dtype=float).reshape(-1)
        if arr.shape != (3,):
            raise ValueError(f"Expected 3 coordinates, got {arr.size}")
        return cls(float(arr[0]), float(arr[1]), float(arr[2]))

    def as_array(self) -> np.ndarray:
        """Coordinates as a float64 numpy array."""
        return np.array(self, dtype=float)

    @property
    def magnitude(self) -> float:
        """Distance from the Earth centre in meters."""
        return _norm(self)


def as_point(values, name: str = "point") -> Point3D:
    """
    Convert an array-like to a finite Point3D.

    Parameters
    ----------
    values : array_like
        Three Cartesian coordinates in meters
    name : str
        Name used in error messages

    Returns
    -------
    point : Point3D

    Raises
    ------
    DegenerateInputError
        If the input does not hold three coordinates, or any coordinate
        is NaN or infinite
    """
    if isinstance(values, Point3D):
        point = values
    else:
        try:
            point = Point3D.from_array(values)
        except (TypeError, ValueError) as e:
            raise DegenerateInputError(f"{name} is not a 3D point: {e}", {name: values}) from e
    if not np.all(np.isfinite(point.as_array())):
        raise DegenerateInputError(
            f"{name} has non-finite coordinates", {name: tuple(point)}
        )
    return point


# =============================================================================
# Distances
# =============================================================================

def chord_distance(a, b) -> float:
    """
    Straight-line (Euclidean) distance between two points.

    Parameters
    ----------
    a, b : array_like
        Cartesian coordinates in meters

    Returns
    -------
    distance : float
        Chord distance in meters

    Notes
    -----
    This is the chord through the sphere, not the great-circle arc. The
    two agree only for small separations.
    """
    diff = np.asarray(a, dtype=float) - np.asarray(b, dtype=float)
    return _norm(diff)


def altitude_above_sphere(point, earth_radius: float = EARTH_RADIUS) -> float:
    """Height of a point above the reference sphere in meters."""
    return as_point(point).magnitude - earth_radius


# =============================================================================
# Projection
# =============================================================================

def project_to_sphere(point, earth_radius: float = EARTH_RADIUS) -> Point3D:
    """
    Project a point in space onto the Earth sphere.

    The projection lies on the line joining the point to the Earth centre,
    at distance ``earth_radius`` from the centre.

    Parameters
    ----------
    point : array_like
        Cartesian coordinates of the point in meters
    earth_radius : float
        Radius of the reference sphere in meters

    Returns
    -------
    projection : Point3D
        Point on the sphere with magnitude ``earth_radius``

    Raises
    ------
    DegenerateInputError
        If the point is the origin (direction undefined) or too close to
        it for the scale factor to be representable
    """
    p = as_point(point).as_array()
    r = _norm(p)

    if r == 0:
        raise DegenerateInputError(
            "Cannot project the Earth centre onto the sphere", {"point": tuple(p)}
        )

    t = earth_radius / r
    if not np.isfinite(t):
        raise DegenerateInputError(
            "Projection scale factor is not finite", {"point": tuple(p), "magnitude": r}
        )

    projection = Point3D.from_array(p * t)
    if not np.all(np.isfinite(projection.as_array())):
        raise DegenerateInputError(
            "Projection is not finite", {"point": tuple(p), "magnitude": r}
        )
    return projection


# =============================================================================
# Zenith Angle
# =============================================================================

def zenith_angle(
    satellite,
    ground_station,
    earth_radius: float = EARTH_RADIUS,
) -> Tuple[float, float]:
    """
    Calculate the zenith angle of a spacecraft and its projection offset.

    Solves the triangle between the spacecraft, its projection onto the
    Earth surface, and the ground station.

    Parameters
    ----------
    satellite : array_like
        Spacecraft position in meters
    ground_station : array_like
        Unrefracted ground-station position in meters
    earth_radius : float
        Radius of the reference sphere in meters

    Returns
    -------
    zenith : float
        Zenith angle of the spacecraft in radians
    distance : float
        Chord distance from the spacecraft projection to the ground
        station in meters

    Raises
    ------
    DegenerateInputError
        If the spacecraft is the origin or lies on or below the sphere

    Notes
    -----
    The triangle is treated as right-angled at the projection, i.e. Earth
    curvature between the projection and the ground station is neglected.
    Accuracy degrades as the separation grows.
    """
    sat = as_point(satellite, "satellite")
    gs = as_point(ground_station, "ground_station")

    proj = project_to_sphere(sat, earth_radius)
    distance = chord_distance(proj, gs)

    height = sat.magnitude - earth_radius

    if height <= 0:
        raise DegenerateInputError(
            "Spacecraft must lie above the reference sphere; zenith angle undefined",
            {"satellite": tuple(sat), "height_m": height},
        )

    zenith = float(np.arctan(distance / height))

    logger.debug(
        f"Projection {tuple(proj)}, height {height:.6f} m, "
        f"chord {distance:.6f} m, zenith {zenith:.12f} rad"
    )

    return zenith, distance
