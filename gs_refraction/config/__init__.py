"""
Configuration management for refraction correction.

This module provides:
- RefractionConfig: Data class tree for pipeline constants
- ConfigurationManager: Loading and validation of configurations
"""

from gs_refraction.config.settings import (
    RefractionConfig,
    EarthConfig,
    RefractionModelConfig,
    AtmosphereConfig,
)
from gs_refraction.config.manager import ConfigurationManager, LoadedConfiguration

__all__ = [
    "RefractionConfig",
    "EarthConfig",
    "RefractionModelConfig",
    "AtmosphereConfig",
    "ConfigurationManager",
    "LoadedConfiguration",
]
