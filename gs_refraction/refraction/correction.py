"""
Refracted ground-station coordinates.

Converts the angular displacement of the line of sight into a linear
displacement on the surface and translates the unrefracted ground station
toward the spacecraft projection by that amount.
"""

import logging
import numpy as np
from dataclasses import dataclass
from typing import Optional

from gs_refraction.config.settings import RefractionConfig
from gs_refraction.core.errors import DivisionByZeroError, GeometryInconsistencyError
from gs_refraction.geometry.spherical import (
    Point3D,
    as_point,
    chord_distance,
    project_to_sphere,
)
from gs_refraction.refraction.angles import refraction_geometry
from gs_refraction.refraction.models import RefractionModel, build_refraction_model

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RefractionResult:
    """
    Refracted ground station with the intermediate values that produced it.

    Attributes
    ----------
    refracted : Point3D
        Refracted (apparent) ground-station position in meters
    ground_station : Point3D
        Unrefracted ground-station position in meters
    satellite : Point3D
        Spacecraft position in meters
    projection : Point3D
        Spacecraft projection onto the reference sphere in meters
    zenith_angle : float
        Spacecraft zenith angle in radians
    chord_distance : float
        Projection to ground-station chord in meters
    central_angle : float
        Angle at the Earth centre in radians
    closure_angle : float
        Unrefracted zenith direction z0 in radians
    apparent_angle : float
        Refracted zenith direction in radians
    delta_angle : float
        Angular displacement in radians
    linear_displacement : float
        Surface displacement in meters
    """
    refracted: Point3D
    ground_station: Point3D
    satellite: Point3D
    projection: Point3D
    zenith_angle: float
    chord_distance: float
    central_angle: float
    closure_angle: float
    apparent_angle: float
    delta_angle: float
    linear_displacement: float

    @property
    def zenith_angle_deg(self) -> float:
        """Spacecraft zenith angle in degrees."""
        return float(np.degrees(self.zenith_angle))

    @property
    def delta_angle_arcsec(self) -> float:
        """Angular displacement in arcseconds."""
        return float(np.degrees(self.delta_angle) * 3600.0)

    @property
    def displacement(self) -> float:
        """Distance between refracted and unrefracted ground station in meters."""
        return chord_distance(self.refracted, self.ground_station)


class CoordinateCorrector:
    """
    Computes refracted ground-station coordinates.

    The corrector holds only its configuration and refraction strategy;
    every call is independent, so one instance may be shared between
    threads.

    Example:
        >>> corrector = CoordinateCorrector()
        >>> corrector.correct((6871000.0, 0.0, 0.0), (6371000.0, 0.0, 0.0))
        Point3D(x=6371000.0, y=0.0, z=0.0)
    """

    def __init__(
        self,
        config: Optional[RefractionConfig] = None,
        model: Optional[RefractionModel] = None,
    ):
        """Initialize the corrector.

        Args:
            config: Pipeline configuration. Defaults to RefractionConfig().
            model: Refraction strategy. Defaults to the strategy named by
                ``config.refraction.model``.
        """
        self.config = config or RefractionConfig()
        self.model = model or build_refraction_model(self.config)

    @property
    def earth_radius(self) -> float:
        """Radius of the reference sphere in meters."""
        return self.config.earth.radius_m

    def correct_detailed(self, satellite, ground_station) -> RefractionResult:
        """
        Refract a ground station and keep the intermediate values.

        Parameters
        ----------
        satellite : array_like
            Spacecraft position in meters
        ground_station : array_like
            Unrefracted ground-station position in meters

        Returns
        -------
        result : RefractionResult

        Raises
        ------
        DegenerateInputError
            If the zenith angle is undefined for the inputs
        GeometryInconsistencyError
            If an intermediate value leaves its domain
        DivisionByZeroError
            If the projection coincides with the ground station while a
            nonzero displacement was computed
        """
        sat = as_point(satellite, "satellite")
        gs = as_point(ground_station, "ground_station")
        R = self.earth_radius

        proj = project_to_sphere(sat, R)
        geometry = refraction_geometry(sat, gs, self.model, R)

        # Arc length; only valid while the angle stays small
        linear_displacement = R * geometry.delta_angle

        if abs(geometry.delta_angle) > self.config.refraction.small_angle_limit_rad:
            logger.warning(
                f"Angular displacement {geometry.delta_angle:.6f} rad exceeds the "
                f"small-angle limit {self.config.refraction.small_angle_limit_rad} rad; "
                f"linear displacement is approximate"
            )

        distance = chord_distance(proj, gs)

        if linear_displacement == 0.0:
            refracted = gs
        elif distance == 0.0:
            raise DivisionByZeroError(
                "Spacecraft projection coincides with the ground station "
                "but a nonzero displacement was computed",
                {
                    "satellite": tuple(sat),
                    "ground_station": tuple(gs),
                    "linear_displacement_m": linear_displacement,
                },
            )
        else:
            direction = (proj.as_array() - gs.as_array()) / distance
            refracted = Point3D.from_array(gs.as_array() + linear_displacement * direction)

        if not np.all(np.isfinite(refracted.as_array())):
            raise GeometryInconsistencyError(
                "Refracted coordinates are not finite",
                {"satellite": tuple(sat), "ground_station": tuple(gs)},
            )

        logger.debug(f"linearDisplacement={linear_displacement:.16f} m, refracted={tuple(refracted)}")

        return RefractionResult(
            refracted=refracted,
            ground_station=gs,
            satellite=sat,
            projection=proj,
            zenith_angle=geometry.zenith_angle,
            chord_distance=geometry.chord_distance,
            central_angle=geometry.central_angle,
            closure_angle=geometry.closure_angle,
            apparent_angle=geometry.apparent_angle,
            delta_angle=geometry.delta_angle,
            linear_displacement=linear_displacement,
        )

    def correct(self, satellite, ground_station) -> Point3D:
        """
        Refracted ground-station coordinates.

        Parameters
        ----------
        satellite : array_like
            Spacecraft position in meters
        ground_station : array_like
            Unrefracted ground-station position in meters

        Returns
        -------
        refracted : Point3D
            Apparent ground-station position in meters
        """
        return self.correct_detailed(satellite, ground_station).refracted


def correct_ground_station(
    satellite,
    ground_station,
    config: Optional[RefractionConfig] = None,
) -> Point3D:
    """Refracted ground-station coordinates using a one-off corrector."""
    return CoordinateCorrector(config).correct(satellite, ground_station)


def correct_ground_station_detailed(
    satellite,
    ground_station,
    config: Optional[RefractionConfig] = None,
) -> RefractionResult:
    """Refracted ground station with intermediate values."""
    return CoordinateCorrector(config).correct_detailed(satellite, ground_station)
