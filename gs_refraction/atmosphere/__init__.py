"""
Atmospheric refractive index models.

Provides the tropospheric lapse-rate refractivity model consumed by the
surface-index refraction strategy.
"""

from gs_refraction.atmosphere.refractivity import LapseRateAtmosphere

__all__ = [
    "LapseRateAtmosphere",
]
