"""Configuration file support for factorial-cli."""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Any, Optional

import tomli

from core.exceptions import ConfigurationError

CONFIG_FILENAME = ".factorial.toml"
CONFIG_PROFILES = ["dev", "prod", "test"]
LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def find_config_file(repo_root: str) -> Optional[Path]:
    """
    Find the configuration file in the repository.

    Args:
        repo_root: Repository root directory.

    Returns:
        Path to config file if found, None otherwise.
    """
    config_path = Path(repo_root) / CONFIG_FILENAME

    if config_path.exists() and config_path.is_file():
        return config_path

    return None


def _merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    merged = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_config(repo_root: str, profile: Optional[str] = None) -> Dict[str, Any]:
    """
    Load configuration from file.

    Args:
        repo_root: Repository root directory.
        profile: Optional profile name (dev, prod, test).

    Returns:
        Configuration dictionary, empty when no file exists.

    Raises:
        ConfigurationError: If the file is not valid TOML, fails validation,
            or the requested profile is not defined.
    """
    config_path = find_config_file(repo_root)
    if not config_path:
        if profile:
            raise ConfigurationError(f"Profile '{profile}' requested but no {CONFIG_FILENAME} found")
        return {}

    try:
        with open(config_path, "rb") as f:
            config_data = tomli.load(f)
    except (OSError, tomli.TOMLDecodeError) as exc:
        raise ConfigurationError(f"Cannot read {config_path}: {exc}") from exc

    profiles = config_data.get("profiles", {})
    base_config = {k: v for k, v in config_data.items() if k != "profiles"}
    if profile:
        if profile not in profiles:
            raise ConfigurationError(f"Unknown profile '{profile}' in {config_path}")
        # Profile sections override base sections key by key
        base_config = _merge(base_config, profiles[profile])

    is_valid, errors = validate_config(base_config)
    if not is_valid:
        raise ConfigurationError(f"Invalid {config_path}: " + "; ".join(errors))

    return base_config


def get_config_value(config: Dict[str, Any], key: str, default: Any = None) -> Any:
    """
    Get a configuration value, supporting nested keys.

    Args:
        config: Configuration dictionary.
        key: Key path (e.g., "factorial.strict").
        default: Default value if not found.

    Returns:
        Configuration value or default.
    """
    value = config

    for k in key.split("."):
        if isinstance(value, dict) and k in value:
            value = value[k]
        else:
            return default

    return value


def validate_config(config: Dict[str, Any]) -> tuple[bool, list[str]]:
    """
    Validate configuration file.

    Args:
        config: Configuration dictionary.

    Returns:
        Tuple of (is_valid, errors).
    """
    errors = []

    if "factorial" in config:
        fact_config = config["factorial"]
        if not isinstance(fact_config, dict):
            errors.append("factorial must be a table")
        elif "strict" in fact_config and not isinstance(fact_config["strict"], bool):
            errors.append("factorial.strict must be a boolean")

    if "logging" in config:
        log_config = config["logging"]
        if not isinstance(log_config, dict):
            errors.append("logging must be a table")
        elif "level" in log_config:
            level = log_config["level"]
            if not isinstance(level, str) or level.upper() not in LOG_LEVELS:
                errors.append(f"logging.level must be one of {', '.join(LOG_LEVELS)}")

    return len(errors) == 0, errors


def create_default_config(repo_root: str) -> Path:
    """
    Create a default configuration file.

    Args:
        repo_root: Repository root directory.

    Returns:
        Path to created config file.

    Raises:
        ConfigurationError: If a config file already exists.
    """
    config_path = Path(repo_root) / CONFIG_FILENAME
    if config_path.exists():
        raise ConfigurationError(f"{config_path} already exists")

    default_config = """# factorial-cli configuration

[factorial]
# Reject malformed input and results above 20! instead of reading 0 / wrapping
strict = false

[logging]
# DEBUG, INFO, WARNING, ERROR or CRITICAL (overridden by FACT_LOG_LEVEL)
level = "WARNING"

[profiles.dev]
logging = { level = "DEBUG" }

[profiles.prod]
factorial = { strict = true }
"""

    config_path.write_text(default_config, encoding="utf-8")
    return config_path
