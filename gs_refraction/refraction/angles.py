"""
Angular displacement between refracted and unrefracted lines of sight.

The ground station G, the spacecraft projection P and the Earth centre O
form a triangle whose angle at O is theta = |P - G| / R. Adding theta to
the spacecraft zenith angle closes the triangle and gives the unrefracted
zenith direction z0 at the ground station. A refraction strategy turns z0
into the apparent direction zed; their difference is the displacement.

References
----------
- Noerdlinger, P. (1999). Atmospheric refraction effects in Earth remote
  sensing.
- Liu, N. (2018). Acquisition and Tracking Strategies for Satellite to
  Ground Optical Communication Systems. MASc thesis, Ryerson University.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from gs_refraction.core.constants import EARTH_RADIUS
from gs_refraction.geometry.spherical import zenith_angle
from gs_refraction.refraction.models import RefractionModel, ConstantShellRefraction

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RefractionGeometry:
    """
    Intermediate angles of the refraction triangle.

    Attributes
    ----------
    zenith_angle : float
        Spacecraft zenith angle seen from its projection, radians
    chord_distance : float
        Chord from the spacecraft projection to the ground station, meters
    central_angle : float
        Angle theta at the Earth centre, radians
    closure_angle : float
        Unrefracted zenith direction z0, radians
    apparent_angle : float
        Refracted zenith direction zed, radians
    delta_angle : float
        Angular displacement z0 - zed, radians
    """
    zenith_angle: float
    chord_distance: float
    central_angle: float
    closure_angle: float
    apparent_angle: float
    delta_angle: float


def refraction_geometry(
    satellite,
    ground_station,
    model: Optional[RefractionModel] = None,
    earth_radius: float = EARTH_RADIUS,
) -> RefractionGeometry:
    """
    Solve the refraction triangle.

    Parameters
    ----------
    satellite : array_like
        Spacecraft position in meters
    ground_station : array_like
        Unrefracted ground-station position in meters
    model : RefractionModel, optional
        Refraction strategy (default: constant 15 m shell)
    earth_radius : float
        Radius of the reference sphere in meters

    Returns
    -------
    geometry : RefractionGeometry
    """
    if model is None:
        model = ConstantShellRefraction(earth_radius=earth_radius)

    zen, distance = zenith_angle(satellite, ground_station, earth_radius)

    theta = distance / earth_radius
    z_0 = zen + theta
    zed = model.apparent_zenith(z_0, ground_station)
    d_ang = z_0 - zed

    logger.debug(
        f"theta={theta:.16f} z_0={z_0:.16f} zed={zed:.16f} dAng={d_ang:.16f} ({model!r})"
    )

    return RefractionGeometry(
        zenith_angle=zen,
        chord_distance=distance,
        central_angle=theta,
        closure_angle=z_0,
        apparent_angle=zed,
        delta_angle=d_ang,
    )


def delta_angle(
    satellite,
    ground_station,
    model: Optional[RefractionModel] = None,
    earth_radius: float = EARTH_RADIUS,
) -> float:
    """
    Angular displacement between refracted and unrefracted ground station.

    Parameters
    ----------
    satellite : array_like
        Spacecraft position in meters
    ground_station : array_like
        Unrefracted ground-station position in meters
    model : RefractionModel, optional
        Refraction strategy (default: constant 15 m shell)
    earth_radius : float
        Radius of the reference sphere in meters

    Returns
    -------
    d_ang : float
        Angular displacement in radians

    Raises
    ------
    DegenerateInputError
        If the zenith angle is undefined
    GeometryInconsistencyError
        If the refraction relation has no real solution
    """
    return refraction_geometry(satellite, ground_station, model, earth_radius).delta_angle
