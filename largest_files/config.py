import logging
import os
import sys
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, ConfigDict, PositiveInt, ValidationError, field_validator

from .size_utils import parse_size_to_bytes


logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "LARGEST_FILES_CONFIG"
DEFAULT_COUNT = 10
GUI_DEFAULT_COUNT = 20


class ConfigError(ValueError):
    """Raised when the config file is missing when named explicitly, or holds invalid content."""


class Settings(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    count: PositiveInt = DEFAULT_COUNT
    gui_count: PositiveInt = GUI_DEFAULT_COUNT
    min_size: int = 0

    @field_validator("min_size", mode="before")
    @classmethod
    def _parse_min_size(cls, value):
        return parse_size_to_bytes(value) or 0


def default_config_path() -> Path:
    r"""
    Returns the platform-appropriate default config path.

    Returns:
        Path: Default config path for the current platform
            - $LARGEST_FILES_CONFIG when set
            - Windows: %APPDATA%\largest_files\config.yml
            - Others: $XDG_CONFIG_HOME/largest_files/config.yml or ~/.config/largest_files/config.yml
    """
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return Path(override).expanduser()
    if sys.platform == "win32":
        appdata = os.environ.get("APPDATA")
        if not appdata:
            return Path.home() / "AppData" / "Roaming" / "largest_files" / "config.yml"
        return Path(appdata) / "largest_files" / "config.yml"
    config_home = os.environ.get("XDG_CONFIG_HOME")
    if config_home:
        return Path(config_home) / "largest_files" / "config.yml"
    return Path.home() / ".config" / "largest_files" / "config.yml"


def load_settings(config_path: Optional[Path] = None) -> Settings:
    """
    Loads settings from the YAML config file.

    Args:
        config_path: Optional path to config file. If None, uses default platform path,
            and a missing file there yields the defaults.

    Raises:
        ConfigError: If an explicitly named file does not exist, cannot be parsed
            or holds invalid values
    """
    path = Path(config_path) if config_path else default_config_path()

    if not path.exists():
        if config_path:
            raise ConfigError(f"Configuration file not found at: {path}")
        logger.debug("No config file at %s; using defaults", path)
        return Settings()

    with open(path, "r", encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"Error parsing YAML file at {path}: {e}") from e

    if data is None:
        return Settings()
    if not isinstance(data, dict):
        raise ConfigError(f"Invalid configuration in {path}: expected a mapping at the top level")

    try:
        settings = Settings(**{str(k): v for k, v in data.items()})
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration in {path}: {e}") from e
    logger.debug("Loaded settings from %s: %s", path, settings)
    return settings
