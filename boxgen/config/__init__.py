"""Configuration layer: path, test data, and compiler settings."""

from .errors import ConfigLoadError, ConfigValidationError
from .models import (
    BatchSettings,
    CompilerSettings,
    GeneratedClassSettings,
    GeneratorConfig,
    PathSettings,
    ProfileSettings,
    FixtureSettings,
)
from .loader import load_config, load_config_from_string, load_yaml

__all__ = [
    "ConfigLoadError",
    "ConfigValidationError",
    "BatchSettings",
    "CompilerSettings",
    "GeneratedClassSettings",
    "GeneratorConfig",
    "PathSettings",
    "ProfileSettings",
    "FixtureSettings",
    "load_config",
    "load_config_from_string",
    "load_yaml",
]
