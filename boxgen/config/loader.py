"""YAML loading and parsing for generator configuration."""

from pathlib import Path

import yaml
from pydantic import ValidationError

from .errors import ConfigLoadError, ConfigValidationError
from .models import GeneratorConfig


def load_yaml(path: str | Path) -> dict:
    """Load a YAML file and return the raw data.

    Args:
        path: Path to the YAML file.

    Returns:
        The parsed YAML data as a dictionary.

    Raises:
        ConfigLoadError: If the file cannot be read or parsed.
    """
    path = Path(path)

    if not path.exists():
        raise ConfigLoadError(f"File not found: {path}", str(path))

    if not path.is_file():
        raise ConfigLoadError(f"Not a file: {path}", str(path))

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigLoadError(f"Invalid YAML: {e}", str(path)) from e
    except OSError as e:
        raise ConfigLoadError(f"Cannot read file: {e}", str(path)) from e

    return _root_mapping(data, str(path))


def load_config(path: str | Path) -> GeneratorConfig:
    """Load and parse a YAML file into a GeneratorConfig.

    Relative paths in the file are kept as written, so they resolve
    against the working directory of the run.

    Raises:
        ConfigLoadError: If the file cannot be read or parsed.
        ConfigValidationError: If the data fails validation.
    """
    return _parse_config_data(load_yaml(path))


def load_config_from_string(yaml_string: str) -> GeneratorConfig:
    """Parse a YAML string into a GeneratorConfig.

    Raises:
        ConfigLoadError: If the YAML cannot be parsed.
        ConfigValidationError: If the data fails validation.
    """
    try:
        data = yaml.safe_load(yaml_string)
    except yaml.YAMLError as e:
        raise ConfigLoadError(f"Invalid YAML: {e}") from e

    return _parse_config_data(_root_mapping(data))


def _root_mapping(data, path: str | None = None) -> dict:
    """An empty document is an empty mapping; any other non-mapping is an error."""
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigLoadError(
            f"Expected YAML mapping at root, got {type(data).__name__}", path
        )
    return data


def _parse_config_data(data: dict) -> GeneratorConfig:
    try:
        return GeneratorConfig.model_validate(data)
    except ValidationError as e:
        errors = [
            {
                "loc": ".".join(str(x) for x in err["loc"]),
                "msg": err["msg"],
                "type": err["type"],
            }
            for err in e.errors()
        ]
        raise ConfigValidationError(
            f"Configuration validation failed with {len(errors)} error(s)", errors
        ) from e
