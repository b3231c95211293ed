"""Global configuration management for difftour.

Handles user-level configuration stored in ~/.difftour/config.yaml.
"""

from pathlib import Path
from typing import Any, Dict

import yaml

from difftour.tour.inventory import DEFAULT_MAX_DIFF_CHARS


class GlobalConfigError(Exception):
    """Raised when there's an error with global configuration."""
    pass


_CONFIG_DIR = Path.home() / ".difftour"


def get_global_config_dir() -> Path:
    """Get the global difftour configuration directory.

    Returns:
        Path to ~/.difftour/
    """
    return _CONFIG_DIR


def ensure_global_config_dir() -> Path:
    """Ensure the global config directory exists.

    Returns:
        Path to ~/.difftour/
    """
    config_dir = get_global_config_dir()
    config_dir.mkdir(parents=True, exist_ok=True)
    return config_dir


def get_config_file_path() -> Path:
    """Get path to config.yaml file.

    Returns:
        Path to ~/.difftour/config.yaml
    """
    return get_global_config_dir() / "config.yaml"


def load_global_config() -> Dict[str, Any]:
    """Load global configuration from ~/.difftour/config.yaml.

    Returns:
        Dictionary with configuration values. Empty dict if file doesn't exist.
    """
    config_file = get_config_file_path()

    if not config_file.exists():
        return {}

    try:
        with open(config_file, "r") as f:
            config = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise GlobalConfigError(f"Failed to load config from {config_file}: {e}")

    if not isinstance(config, dict):
        raise GlobalConfigError(f"Config file {config_file} must contain a mapping")
    return config


def save_global_config(config: Dict[str, Any]) -> None:
    """Save global configuration to ~/.difftour/config.yaml.

    Args:
        config: Configuration dictionary to save.
    """
    ensure_global_config_dir()
    config_file = get_config_file_path()

    try:
        with open(config_file, "w") as f:
            yaml.dump(config, f, default_flow_style=False, sort_keys=False)
    except (OSError, yaml.YAMLError) as e:
        raise GlobalConfigError(f"Failed to save config to {config_file}: {e}")


def get_max_diff_chars() -> int:
    """Get the maximum size of the hunk inventory sent to a model.

    Returns:
        Configured limit, or DEFAULT_MAX_DIFF_CHARS if not set.
    """
    config = load_global_config()
    value = config.get("max_diff_chars")
    if value is None:
        return DEFAULT_MAX_DIFF_CHARS
    if not isinstance(value, int) or isinstance(value, bool) or value <= 0:
        raise GlobalConfigError(f"max_diff_chars must be a positive integer, got {value!r}")
    return value


def set_max_diff_chars(max_chars: int) -> None:
    """Set the maximum size of the hunk inventory in global config.

    Args:
        max_chars: Positive character limit.
    """
    if max_chars <= 0:
        raise GlobalConfigError(f"max_diff_chars must be a positive integer, got {max_chars!r}")
    config = load_global_config()
    config["max_diff_chars"] = max_chars
    save_global_config(config)


def is_configured() -> bool:
    """Check if difftour has a config file.

    Returns:
        True if config.yaml exists, False otherwise.
    """
    return get_config_file_path().exists()
