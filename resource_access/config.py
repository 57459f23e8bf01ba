"""YAML configuration loading for resource access."""

from pathlib import Path

import yaml

from resource_access.exceptions import ConfigurationError
from resource_access.models import ResourceConfig

_KNOWN_FIELDS = {
    "search_path",
    "excluded_suffixes",
    "archive_suffixes",
    "temp_prefix",
    "temp_suffix",
    "buffer_size",
}


def parse_config(data: dict | None) -> ResourceConfig:
    """Validate a configuration mapping and build a ResourceConfig.

    Raises:
        ConfigurationError: If the mapping has unknown keys or bad values
    """
    if data is None:
        data = {}

    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Configuration must be a YAML dictionary, got {type(data).__name__}"
        )

    unknown = set(data) - _KNOWN_FIELDS
    if unknown:
        raise ConfigurationError(
            f"Unknown configuration field(s): {', '.join(sorted(unknown))}"
        )

    for key in ("search_path", "excluded_suffixes", "archive_suffixes"):
        value = data.get(key, [])
        if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
            raise ConfigurationError(f"Configuration field '{key}' must be a list of strings")

    for key in ("temp_prefix", "temp_suffix"):
        if key in data and not isinstance(data[key], str):
            raise ConfigurationError(f"Configuration field '{key}' must be a string")

    buffer_size = data.get("buffer_size", 1)
    if isinstance(buffer_size, bool) or not isinstance(buffer_size, int) or buffer_size <= 0:
        raise ConfigurationError("Configuration field 'buffer_size' must be a positive integer")

    return ResourceConfig.from_dict(data)


def load_config(config_path: Path) -> ResourceConfig:
    """Load a ResourceConfig from a YAML file.

    Relative search path entries are resolved against the directory that
    holds the configuration file.

    Example file:
        search_path:
          - build/resources
          - lib/app.zip
        excluded_suffixes: [".class", ".pyc"]
        temp_prefix: "app-"

    Args:
        config_path: Path to the YAML configuration file

    Returns:
        The parsed ResourceConfig

    Raises:
        ConfigurationError: If the file is missing, is not valid YAML, or
                            holds invalid values
    """
    config_path = Path(config_path).expanduser()

    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in {config_path}: {e}") from e
    except OSError as e:
        raise ConfigurationError(f"Configuration file could not be read: {config_path}") from e

    config = parse_config(data)
    base = config_path.parent
    config.search_path = [
        entry if entry.is_absolute() else base / entry
        for entry in config.search_path
    ]
    return config
