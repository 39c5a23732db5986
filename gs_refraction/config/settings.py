"""
Refraction correction configuration data structures.

Defines the configuration schema for the correction pipeline: the Earth
model, the refraction strategy, and the tropospheric constants. Every
constant of the pipeline can be overridden here, e.g. to test against
another planetary body or atmosphere.
"""

from dataclasses import dataclass, field
from typing import Dict, Any
import json
import yaml

from gs_refraction.core.constants import (
    EARTH_RADIUS,
    SHELL_HEIGHT,
    SMALL_ANGLE_LIMIT,
    MEAN_MOLECULAR_WEIGHT,
    GRAVITY,
    GAS_CONSTANT,
    LAPSE_RATE,
    SEA_LEVEL_TEMPERATURE,
    REFRACTIVITY_SCALE,
    TROPOPAUSE_ALTITUDE,
)

REFRACTION_MODELS = ["CONSTANT_SHELL", "SURFACE_INDEX"]


@dataclass
class EarthConfig:
    """Reference sphere configuration.

    Attributes:
        radius_m: Radius of the reference sphere in meters
    """
    radius_m: float = EARTH_RADIUS


@dataclass
class RefractionModelConfig:
    """Refraction strategy configuration.

    Attributes:
        model: Strategy name (CONSTANT_SHELL, SURFACE_INDEX)
        shell_height_m: Height of the effective refracting shell (CONSTANT_SHELL)
        small_angle_limit_rad: Angular displacement above which the
            arc-length approximation is reported as unreliable
    """
    model: str = "CONSTANT_SHELL"
    shell_height_m: float = SHELL_HEIGHT
    small_angle_limit_rad: float = SMALL_ANGLE_LIMIT


@dataclass
class AtmosphereConfig:
    """Tropospheric refractivity constants.

    Attributes:
        molecular_weight: Mean molecular weight in kg/kmol
        gravity_m_s2: Sea-level gravitational acceleration
        gas_constant: Ideal gas constant in J/(kmol K)
        lapse_rate_k_m: Tropospheric lapse rate in K/m
        sea_level_temperature_k: Sea-level temperature in K
        refractivity_scale: Sea-level refractivity (mu - 1)
        tropopause_altitude_m: Upper validity limit of the model
    """
    molecular_weight: float = MEAN_MOLECULAR_WEIGHT
    gravity_m_s2: float = GRAVITY
    gas_constant: float = GAS_CONSTANT
    lapse_rate_k_m: float = LAPSE_RATE
    sea_level_temperature_k: float = SEA_LEVEL_TEMPERATURE
    refractivity_scale: float = REFRACTIVITY_SCALE
    tropopause_altitude_m: float = TROPOPAUSE_ALTITUDE


@dataclass
class RefractionConfig:
    """Complete refraction correction configuration.

    Example JSON input:
        {
            "earth": {"radius_m": 6371000.0},
            "refraction": {"model": "CONSTANT_SHELL", "shell_height_m": 15.0},
            "atmosphere": {"sea_level_temperature_k": 288.115}
        }
    """
    earth: EarthConfig = field(default_factory=EarthConfig)
    refraction: RefractionModelConfig = field(default_factory=RefractionModelConfig)
    atmosphere: AtmosphereConfig = field(default_factory=AtmosphereConfig)

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> "RefractionConfig":
        """Create RefractionConfig from a dictionary.

        Missing sections and keys take their default values.

        Args:
            config_dict: Configuration dictionary

        Returns:
            RefractionConfig instance
        """
        earth_dict = config_dict.get("earth") or {}
        earth = EarthConfig(
            radius_m=earth_dict.get("radius_m", EARTH_RADIUS),
        )

        refr_dict = config_dict.get("refraction") or {}
        refraction = RefractionModelConfig(
            model=str(refr_dict.get("model", "CONSTANT_SHELL")).upper(),
            shell_height_m=refr_dict.get("shell_height_m", SHELL_HEIGHT),
            small_angle_limit_rad=refr_dict.get("small_angle_limit_rad", SMALL_ANGLE_LIMIT),
        )

        atmo_dict = config_dict.get("atmosphere") or {}
        atmosphere = AtmosphereConfig(
            molecular_weight=atmo_dict.get("molecular_weight", MEAN_MOLECULAR_WEIGHT),
            gravity_m_s2=atmo_dict.get("gravity_m_s2", GRAVITY),
            gas_constant=atmo_dict.get("gas_constant", GAS_CONSTANT),
            lapse_rate_k_m=atmo_dict.get("lapse_rate_k_m", LAPSE_RATE),
            sea_level_temperature_k=atmo_dict.get("sea_level_temperature_k", SEA_LEVEL_TEMPERATURE),
            refractivity_scale=atmo_dict.get("refractivity_scale", REFRACTIVITY_SCALE),
            tropopause_altitude_m=atmo_dict.get("tropopause_altitude_m", TROPOPAUSE_ALTITUDE),
        )

        return cls(earth=earth, refraction=refraction, atmosphere=atmosphere)

    @classmethod
    def from_json(cls, json_path: str) -> "RefractionConfig":
        """Load configuration from a JSON file.

        Args:
            json_path: Path to JSON configuration file

        Returns:
            RefractionConfig instance
        """
        with open(json_path, 'r') as f:
            config_dict = json.load(f)
        return cls.from_dict(config_dict)

    @classmethod
    def from_yaml(cls, yaml_path: str) -> "RefractionConfig":
        """Load configuration from a YAML file.

        Args:
            yaml_path: Path to YAML configuration file

        Returns:
            RefractionConfig instance
        """
        with open(yaml_path, 'r') as f:
            config_dict = yaml.safe_load(f) or {}
        return cls.from_dict(config_dict)

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary."""
        return {
            "earth": {
                "radius_m": self.earth.radius_m,
            },
            "refraction": {
                "model": self.refraction.model,
                "shell_height_m": self.refraction.shell_height_m,
                "small_angle_limit_rad": self.refraction.small_angle_limit_rad,
            },
            "atmosphere": {
                "molecular_weight": self.atmosphere.molecular_weight,
                "gravity_m_s2": self.atmosphere.gravity_m_s2,
                "gas_constant": self.atmosphere.gas_constant,
                "lapse_rate_k_m": self.atmosphere.lapse_rate_k_m,
                "sea_level_temperature_k": self.atmosphere.sea_level_temperature_k,
                "refractivity_scale": self.atmosphere.refractivity_scale,
                "tropopause_altitude_m": self.atmosphere.tropopause_altitude_m,
            },
        }

    def to_json(self, json_path: str, indent: int = 2) -> None:
        """Save configuration to JSON file."""
        with open(json_path, 'w') as f:
            json.dump(self.to_dict(), f, indent=indent)

    def to_yaml(self, yaml_path: str) -> None:
        """Save configuration to YAML file."""
        with open(yaml_path, 'w') as f:
            yaml.safe_dump(self.to_dict(), f, default_flow_style=False, sort_keys=False)

    def validate(self) -> list:
        """Validate configuration parameters.

        Returns:
            List of validation error messages (empty if valid)
        """
        errors = []

        if self.earth.radius_m <= 0:
            errors.append("Earth radius must be positive")

        if self.refraction.model not in REFRACTION_MODELS:
            errors.append(f"Invalid refraction model: {self.refraction.model}")

        if self.refraction.shell_height_m <= 0:
            errors.append("shell height must be positive")

        if self.refraction.small_angle_limit_rad <= 0:
            errors.append("small-angle limit must be positive")

        atmo = self.atmosphere
        if atmo.sea_level_temperature_k <= 0:
            errors.append("sea-level temperature must be positive")
        if atmo.lapse_rate_k_m <= 0:
            errors.append("lapse rate must be positive")
        if atmo.gas_constant <= 0 or atmo.molecular_weight <= 0 or atmo.gravity_m_s2 <= 0:
            errors.append("gas constant, molecular weight and gravity must be positive")
        if atmo.refractivity_scale < 0:
            errors.append("refractivity scale must be non-negative")
        if atmo.tropopause_altitude_m <= 0:
            errors.append("tropopause altitude must be positive")
        elif atmo.lapse_rate_k_m * atmo.tropopause_altitude_m >= atmo.sea_level_temperature_k:
            errors.append("lapse rate drives the temperature to zero below the tropopause")

        return errors
