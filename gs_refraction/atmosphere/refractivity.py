"""
Tropospheric refractive index model.

Refractive index of air as a function of altitude from a barometric
lapse-rate law (Noerdlinger 1999, p. 371). Only the troposphere is
modeled: the index is needed at the ground station, and the model is
not valid at or above the tropopause.
"""

import numpy as np
from dataclasses import dataclass
from typing import Union

from gs_refraction.core.constants import (
    EARTH_RADIUS,
    MEAN_MOLECULAR_WEIGHT,
    GRAVITY,
    GAS_CONSTANT,
    LAPSE_RATE,
    SEA_LEVEL_TEMPERATURE,
    SEA_LEVEL_TEMPERATURE_GLOBAL_MEAN,
    REFRACTIVITY_SCALE,
    TROPOPAUSE_ALTITUDE,
)
from gs_refraction.core.errors import AtmosphereDomainError, DegenerateInputError
from gs_refraction.geometry.spherical import as_point


@dataclass(frozen=True)
class LapseRateAtmosphere:
    """
    Troposphere with a constant temperature lapse rate.

    The refractive index at altitude h above the reference sphere is

        mu = 1 + k * (1 - L * h / T0) ** (M * g / (R * L) - 1)

    Attributes
    ----------
    molecular_weight : float
        Mean molecular weight M in kg/kmol
    gravity : float
        Sea-level gravitational acceleration g in m/s^2
    gas_constant : float
        Ideal gas constant R in J/(kmol K)
    lapse_rate : float
        Tropospheric lapse rate L in K/m
    sea_level_temperature : float
        Sea-level temperature T0 in K
    refractivity_scale : float
        Sea-level refractivity k (mu - 1 at h = 0)
    tropopause_altitude : float
        Upper validity limit of the model in meters
    earth_radius : float
        Radius of the reference sphere in meters
    """
    molecular_weight: float = MEAN_MOLECULAR_WEIGHT
    gravity: float = GRAVITY
    gas_constant: float = GAS_CONSTANT
    lapse_rate: float = LAPSE_RATE
    sea_level_temperature: float = SEA_LEVEL_TEMPERATURE
    refractivity_scale: float = REFRACTIVITY_SCALE
    tropopause_altitude: float = TROPOPAUSE_ALTITUDE
    earth_radius: float = EARTH_RADIUS

    @classmethod
    def global_mean(cls) -> "LapseRateAtmosphere":
        """Atmosphere with Noerdlinger's global mean sea-level temperature."""
        return cls(sea_level_temperature=SEA_LEVEL_TEMPERATURE_GLOBAL_MEAN)

    @classmethod
    def from_config(cls, atmosphere_config, earth_radius: float = EARTH_RADIUS) -> "LapseRateAtmosphere":
        """Create the model from an AtmosphereConfig."""
        return cls(
            molecular_weight=atmosphere_config.molecular_weight,
            gravity=atmosphere_config.gravity_m_s2,
            gas_constant=atmosphere_config.gas_constant,
            lapse_rate=atmosphere_config.lapse_rate_k_m,
            sea_level_temperature=atmosphere_config.sea_level_temperature_k,
            refractivity_scale=atmosphere_config.refractivity_scale,
            tropopause_altitude=atmosphere_config.tropopause_altitude_m,
            earth_radius=earth_radius,
        )

    @property
    def density_exponent(self) -> float:
        """Exponent of the temperature factor, M*g/(R*L) - 1."""
        return (self.molecular_weight * self.gravity) / (self.gas_constant * self.lapse_rate) - 1

    def _check_altitude(self, altitude):
        if np.any(np.asarray(altitude) >= self.tropopause_altitude):
            raise AtmosphereDomainError(
                "Refractive index model is only valid below the tropopause",
                {"altitude_m": altitude, "tropopause_m": self.tropopause_altitude},
            )

    def temperature(self, altitude: Union[float, np.ndarray]) -> Union[float, np.ndarray]:
        """
        Temperature at altitude.

        Parameters
        ----------
        altitude : float or array_like
            Altitude above the reference sphere in meters

        Returns
        -------
        temperature : float or ndarray
            Temperature in K
        """
        self._check_altitude(altitude)
        return self.sea_level_temperature - self.lapse_rate * np.asarray(altitude, dtype=float)

    def density_factor(self, altitude: Union[float, np.ndarray]) -> Union[float, np.ndarray]:
        """Air density relative to sea level at altitude."""
        self._check_altitude(altitude)
        temp_factor = 1.0 - self.lapse_rate * np.asarray(altitude, dtype=float) / self.sea_level_temperature
        return temp_factor ** self.density_exponent

    def refractive_index_at_altitude(self, altitude: Union[float, np.ndarray]) -> Union[float, np.ndarray]:
        """
        Refractive index at altitude.

        Parameters
        ----------
        altitude : float or array_like
            Altitude above the reference sphere in meters

        Returns
        -------
        mu : float or ndarray
            Refractive index (dimensionless)

        Raises
        ------
        AtmosphereDomainError
            If any altitude is at or above the tropopause
        """
        mu = 1.0 + self.refractivity_scale * self.density_factor(altitude)
        if np.ndim(mu) == 0:
            return float(mu)
        return mu

    def refractive_index(self, point) -> float:
        """
        Refractive index at a position.

        Parameters
        ----------
        point : array_like
            Cartesian position in meters, Earth-centred frame

        Returns
        -------
        mu : float
            Refractive index at the altitude of ``point``

        Raises
        ------
        DegenerateInputError
            If ``point`` is the origin
        AtmosphereDomainError
            If ``point`` is at or above the tropopause
        """
        p = as_point(point)
        r = p.magnitude
        if r == 0:
            raise DegenerateInputError(
                "Refractive index is undefined at the Earth centre", {"point": tuple(p)}
            )
        return self.refractive_index_at_altitude(r - self.earth_radius)
