"""
Spherical Earth Geometry
========================

Line-of-sight geometry between a spacecraft and a ground station on a
spherical Earth:

- Projection of a space point onto the reference sphere
- Chord distances between surface points
- Zenith angle of the spacecraft seen from its surface projection

References
----------
- Noerdlinger, P. (1999). Atmospheric refraction effects in Earth remote
  sensing. ISPRS J. Photogramm. Remote Sens. 54, 360-373.
"""

from gs_refraction.geometry.spherical import (
    Point3D,
    as_point,
    chord_distance,
    altitude_above_sphere,
    project_to_sphere,
    zenith_angle,
)

__all__ = [
    "Point3D",
    "as_point",
    "chord_distance",
    "altitude_above_sphere",
    "project_to_sphere",
    "zenith_angle",
]
