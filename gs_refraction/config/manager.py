"""
Configuration Manager for refraction correction.

Handles loading and validation of configurations and construction of the
refraction strategy they name.
"""

import json
import logging
from pathlib import Path
from typing import Dict, Any, Optional, Union
from dataclasses import dataclass

from gs_refraction.config.settings import RefractionConfig

logger = logging.getLogger(__name__)


@dataclass
class LoadedConfiguration:
    """Container for a loaded and validated configuration.

    Attributes:
        config: The refraction configuration settings
        model: Refraction strategy built from the configuration, or None
            if it could not be built
        is_valid: Whether the configuration passed validation
        validation_errors: List of validation error messages
    """
    config: RefractionConfig
    model: Optional[Any]
    is_valid: bool
    validation_errors: list


class ConfigurationManager:
    """Loads refraction configurations.

    This class handles:
    - Loading configurations from JSON/YAML/dict
    - Validating the configured constants
    - Building the configured refraction strategy

    Example:
        >>> manager = ConfigurationManager()
        >>> loaded = manager.load_config({"refraction": {"model": "SURFACE_INDEX"}})
        >>> if loaded.is_valid:
        ...     print(loaded.model)
    """

    def __init__(self, base_path: Optional[str] = None):
        """Initialize the configuration manager.

        Args:
            base_path: Base path for relative file references.
                      Defaults to current working directory.
        """
        self.base_path = Path(base_path) if base_path else Path.cwd()

    def load_config(
        self,
        config_source: Union[Dict[str, Any], str, Path],
    ) -> LoadedConfiguration:
        """Load and validate a configuration.

        Args:
            config_source: Configuration dictionary, JSON path, or YAML path

        Returns:
            LoadedConfiguration with parsed config and refraction strategy
        """
        if isinstance(config_source, dict):
            config = RefractionConfig.from_dict(config_source)
        elif isinstance(config_source, (str, Path)):
            path = self.resolve_path(str(config_source))
            if path.suffix.lower() == '.json':
                config = RefractionConfig.from_json(str(path))
            elif path.suffix.lower() in ('.yaml', '.yml'):
                config = RefractionConfig.from_yaml(str(path))
            else:
                raise ValueError(f"Unsupported config file format: {path.suffix}")
            logger.info(f"Loaded refraction configuration from {path}")
        else:
            raise TypeError(f"Invalid config source type: {type(config_source)}")

        validation_errors = config.validate()

        model = None
        if not validation_errors:
            model = self._build_model(config)

        is_valid = len(validation_errors) == 0

        if not is_valid:
            for error in validation_errors:
                logger.warning(f"Configuration validation error: {error}")

        return LoadedConfiguration(
            config=config,
            model=model,
            is_valid=is_valid,
            validation_errors=validation_errors,
        )

    def _build_model(self, config: RefractionConfig):
        """Build the refraction strategy named by the configuration."""
        from gs_refraction.refraction.models import build_refraction_model

        model = build_refraction_model(config)
        logger.info(f"Using refraction model: {model!r}")
        return model

    def resolve_path(self, path: str) -> Path:
        """Resolve a path relative to base_path.

        Args:
            path: Relative or absolute path string

        Returns:
            Resolved absolute Path
        """
        p = Path(path)
        if p.is_absolute():
            return p
        return (self.base_path / p).resolve()

    @staticmethod
    def create_example_config() -> Dict[str, Any]:
        """Create an example configuration dictionary.

        Returns:
            Example configuration with every section present
        """
        return {
            "earth": {
                "radius_m": 6371000.0,
            },
            "refraction": {
                "model": "CONSTANT_SHELL",
                "shell_height_m": 15.0,
                "small_angle_limit_rad": 0.01,
            },
            "atmosphere": {
                "sea_level_temperature_k": 273.15,
                "lapse_rate_k_m": 0.0065,
                "tropopause_altitude_m": 10500.0,
            },
        }

    def save_example_config(self, output_path: str) -> None:
        """Save an example configuration file.

        Args:
            output_path: Path to save the example JSON
        """
        example = self.create_example_config()
        with open(output_path, 'w') as f:
            json.dump(example, f, indent=2)
        logger.info(f"Saved example configuration to {output_path}")
