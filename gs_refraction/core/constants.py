"""
Physical and geometric constants for refraction correction.

All constants are in SI units unless otherwise specified.
"""

# Earth model
EARTH_RADIUS = 6371000.0  # m, mean radius of the reference sphere

# Effective refracting shell above the surface
SHELL_HEIGHT = 15.0  # m

# Tropospheric refractivity model (Noerdlinger 1999, p. 371)
MEAN_MOLECULAR_WEIGHT = 28.825  # kg/kmol, mean tropospheric value
GRAVITY = 9.805  # m/s^2, mean sea-level acceleration of gravity
GAS_CONSTANT = 8314.3  # J/(kmol K)
LAPSE_RATE = 0.0065  # K/m
SEA_LEVEL_TEMPERATURE = 273.15  # K
SEA_LEVEL_TEMPERATURE_GLOBAL_MEAN = 288.115  # K, Noerdlinger global mean
REFRACTIVITY_SCALE = 0.0002905
TROPOPAUSE_ALTITUDE = 10500.0  # m, approximate

# Arc-length approximation of the linear displacement
SMALL_ANGLE_LIMIT = 0.01  # rad

# Tolerances
PROJECTION_TOLERANCE = 1e-6  # m
