"""Configuration management for UI-19 Export.

Configuration lives in a single settings.json file:
   - output_dir: where the CLI writes export files
   - default_system: target system used when --system is omitted

Config directory resolution:
1. UI19_EXPORT_CONFIG_PATH environment variable (if set)
2. ~/.config/ui19-export/ (XDG_CONFIG_HOME fallback)

Data paths follow XDG spec:
- Exports: settings 'output_dir', else XDG_DATA_HOME/ui19-export/exports/
"""

import json
import os
from pathlib import Path
from typing import Any, Optional

from .errors import ConfigError
from .formats import SUPPORTED_SYSTEMS, is_supported_system


APP_NAME = "ui19-export"
SETTINGS_FILENAME = "settings.json"
EXPORTS_DIRNAME = "exports"

SETTING_KEYS = ("output_dir", "default_system")


def get_config_dir() -> Path:
    """Get the configuration directory path.

    Resolution order:
    1. UI19_EXPORT_CONFIG_PATH environment variable
    2. ~/.config/ui19-export/ (XDG_CONFIG_HOME)

    Returns:
        Path to the configuration directory
    """
    env_path = os.environ.get("UI19_EXPORT_CONFIG_PATH")
    if env_path:
        return Path(env_path)

    xdg_config_home = os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config")
    return Path(xdg_config_home) / APP_NAME


def get_settings_path() -> Path:
    """Get the path to settings.json (may not exist yet)."""
    return get_config_dir() / SETTINGS_FILENAME


def load_settings() -> dict:
    """Load settings from settings.json.

    Returns:
        Settings dictionary (empty dict if file doesn't exist)

    Raises:
        ConfigError: If the file exists but is not a JSON object
    """
    settings_file = get_settings_path()

    if not settings_file.exists():
        return {}

    with open(settings_file, "r") as f:
        try:
            settings = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in {settings_file}: {e}") from e

    if not isinstance(settings, dict):
        raise ConfigError(f"Settings must be a JSON object: {settings_file}")
    return settings


def save_settings(settings: dict) -> Path:
    """Save settings to settings.json.

    Returns:
        Path to the saved settings file
    """
    config_dir = get_config_dir()
    config_dir.mkdir(parents=True, exist_ok=True)

    settings_file = config_dir / SETTINGS_FILENAME

    with open(settings_file, "w") as f:
        json.dump(settings, f, indent=2)

    return settings_file


def validate_setting(key: str, value: Any) -> Any:
    """Check a setting before it is stored.

    Returns:
        The normalized value

    Raises:
        ConfigError: Unknown key or invalid value
    """
    if key not in SETTING_KEYS:
        raise ConfigError(
            f"Unknown setting '{key}'. Valid settings: {', '.join(SETTING_KEYS)}"
        )

    if key == "default_system":
        value = str(value).lower()
        if not is_supported_system(value):
            raise ConfigError(
                f"Invalid default_system '{value}'. "
                f"Expected one of: {', '.join(SUPPORTED_SYSTEMS)}"
            )
    elif key == "output_dir":
        value = str(Path(value).expanduser())

    return value


def get_setting(key: str, default: Any = None) -> Any:
    """Get a setting value, or default if not set."""
    return load_settings().get(key, default)


def set_setting(key: str, value: Any) -> Path:
    """Validate and store a setting value.

    Returns:
        Path to the saved settings file
    """
    value = validate_setting(key, value)
    settings = load_settings()
    settings[key] = value
    return save_settings(settings)


def unset_setting(key: str) -> bool:
    """Remove a setting. Returns True if it was set."""
    settings = load_settings()
    if key not in settings:
        return False
    del settings[key]
    save_settings(settings)
    return True


# =============================================================================
# XDG path helpers
# =============================================================================

def get_data_path() -> Path:
    """Get the data directory path (XDG_DATA_HOME/ui19-export/)."""
    xdg_data_home = os.environ.get("XDG_DATA_HOME", Path.home() / ".local" / "share")
    return Path(xdg_data_home) / APP_NAME


def get_output_dir(override: Optional[str] = None) -> Path:
    """Resolve the directory export files are written to.

    Resolution order:
    1. override (e.g. --output-dir)
    2. settings.json 'output_dir'
    3. XDG_DATA_HOME/ui19-export/exports/

    Returns:
        Path to the output directory (created if doesn't exist)
    """
    if override:
        path = Path(override).expanduser()
    else:
        configured = get_setting("output_dir")
        path = Path(configured).expanduser() if configured else get_data_path() / EXPORTS_DIRNAME

    path.mkdir(parents=True, exist_ok=True)
    return path


def get_default_system() -> Optional[str]:
    """Configured default target system, or None."""
    system = get_setting("default_system")
    if system is None:
        return None
    if not is_supported_system(system):
        raise ConfigError(
            f"settings.json default_system '{system}' is not supported. "
            f"Fix with: ui19-export settings set default_system <system>"
        )
    return system
