"""
Refraction strategies.

A refraction strategy maps the unrefracted zenith direction at the ground
station (the triangle closure angle z0) to the apparent, refracted zenith
direction. The angular displacement is the difference of the two.

Strategies
----------
ConstantShellRefraction
    Single effective refracting shell a fixed height above the surface
SurfaceIndexRefraction
    Single refracting interface using the tropospheric refractive index
    at the ground station
"""

import numpy as np
from abc import ABC, abstractmethod
from typing import Optional

from gs_refraction.atmosphere.refractivity import LapseRateAtmosphere
from gs_refraction.config.settings import RefractionConfig
from gs_refraction.core.constants import EARTH_RADIUS, SHELL_HEIGHT
from gs_refraction.core.errors import GeometryInconsistencyError


def _checked_arcsin(value: float, **inputs) -> float:
    """Arcsine that refuses arguments outside [-1, 1]."""
    if not np.isfinite(value) or abs(value) > 1.0:
        raise GeometryInconsistencyError(
            "Arcsine argument outside [-1, 1]", {"argument": value, **inputs}
        )
    return float(np.arcsin(value))


class RefractionModel(ABC):
    """Base class for refraction strategies."""

    name = "BASE"

    @abstractmethod
    def apparent_zenith(self, closure_angle: float, ground_station) -> float:
        """
        Apparent zenith angle for a given unrefracted zenith direction.

        Parameters
        ----------
        closure_angle : float
            Unrefracted zenith direction z0 in radians
        ground_station : array_like
            Unrefracted ground-station position in meters

        Returns
        -------
        zed : float
            Refracted zenith angle in radians

        Raises
        ------
        GeometryInconsistencyError
            If the refraction relation has no real solution
        """

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


class ConstantShellRefraction(RefractionModel):
    """
    Refraction by a single effective shell above the surface.

    sin(zed) = sin(z0) * R / (R + h)

    Parameters
    ----------
    shell_height : float
        Effective refracting-shell height h in meters
    earth_radius : float
        Radius R of the reference sphere in meters
    """

    name = "CONSTANT_SHELL"

    def __init__(self, shell_height: float = SHELL_HEIGHT, earth_radius: float = EARTH_RADIUS):
        if shell_height <= 0:
            raise ValueError("Shell height must be positive")
        self.shell_height = shell_height
        self.earth_radius = earth_radius

    def apparent_zenith(self, closure_angle: float, ground_station=None) -> float:
        ratio = self.earth_radius / (self.earth_radius + self.shell_height)
        return _checked_arcsin(
            np.sin(closure_angle) * ratio,
            closure_angle=closure_angle,
            shell_height_m=self.shell_height,
        )

    def __repr__(self) -> str:
        return f"ConstantShellRefraction(shell_height={self.shell_height}, earth_radius={self.earth_radius})"


class SurfaceIndexRefraction(RefractionModel):
    """
    Refraction at a single interface at the ground station.

    sin(zed) = sin(z0) / mu0

    where mu0 is the refractive index of the troposphere at the ground
    station. Only the index at the ground station enters.

    Parameters
    ----------
    atmosphere : LapseRateAtmosphere, optional
        Refractive index model (default: standard troposphere)
    """

    name = "SURFACE_INDEX"

    def __init__(self, atmosphere: Optional[LapseRateAtmosphere] = None):
        self.atmosphere = atmosphere or LapseRateAtmosphere()

    def apparent_zenith(self, closure_angle: float, ground_station) -> float:
        mu_0 = self.atmosphere.refractive_index(ground_station)
        return _checked_arcsin(
            np.sin(closure_angle) / mu_0,
            closure_angle=closure_angle,
            refractive_index=mu_0,
        )

    def __repr__(self) -> str:
        return f"SurfaceIndexRefraction(atmosphere={self.atmosphere!r})"


def build_refraction_model(config: Optional[RefractionConfig] = None) -> RefractionModel:
    """
    Create the refraction strategy named by a configuration.

    Parameters
    ----------
    config : RefractionConfig, optional
        Configuration (default: constant 15 m shell on a 6371 km sphere)

    Returns
    -------
    model : RefractionModel

    Raises
    ------
    ValueError
        If the configured model name is unknown
    """
    config = config or RefractionConfig()
    model = config.refraction.model.upper()

    if model == "CONSTANT_SHELL":
        return ConstantShellRefraction(
            shell_height=config.refraction.shell_height_m,
            earth_radius=config.earth.radius_m,
        )
    elif model == "SURFACE_INDEX":
        atmosphere = LapseRateAtmosphere.from_config(config.atmosphere, config.earth.radius_m)
        return SurfaceIndexRefraction(atmosphere)
    else:
        raise ValueError(f"Unknown refraction model: {config.refraction.model}")
