"""Configuration management for the Veneer CLI."""

import logging
import os
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import List, Optional, Union

import yaml

from .render import DEFAULT_TEMPLATE_SUFFIXES

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "VENEER_CONFIG"
DEFAULT_CONFIG_NAME = "veneer.yaml"


class ConfigError(ValueError):
    """Raised when a configuration file cannot be used."""


@dataclass
class ConfigModel:
    """Settings shared by every command."""

    # Palette file used when --palette is not given
    palette: str = "veneer.toml"

    # Stripped from template file names to name the rendered output
    template_suffixes: List[str] = field(default_factory=lambda: list(DEFAULT_TEMPLATE_SUFFIXES))

    # Default build destination; None means the working directory
    output_dir: Optional[str] = None

    log_level: str = "WARNING"

    def __post_init__(self):
        """Post-initialization checks."""
        if isinstance(self.template_suffixes, str):
            self.template_suffixes = [self.template_suffixes]
        if logging.getLevelName(str(self.log_level).upper()) not in (
            logging.DEBUG, logging.INFO, logging.WARNING, logging.ERROR, logging.CRITICAL
        ):
            raise ConfigError(f"unknown log_level: {self.log_level}")
        self.log_level = str(self.log_level).upper()

    def to_yaml(self) -> str:
        """Serialize config to YAML."""
        data = {
            "palette": self.palette,
            "template_suffixes": list(self.template_suffixes),
            "output_dir": self.output_dir,
            "log_level": self.log_level,
        }
        return yaml.dump(data, default_flow_style=False, sort_keys=False)

    @classmethod
    def from_yaml(cls, yaml_str: str) -> "ConfigModel":
        """Deserialize config from YAML."""
        try:
            data = yaml.safe_load(yaml_str) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"invalid YAML: {e}") from e

        if not isinstance(data, dict):
            raise ConfigError("configuration root must be a mapping")

        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigError(f"unknown configuration keys: {', '.join(unknown)}")

        return cls(**data)


def find_config_path(explicit: Optional[Union[str, Path]] = None,
                     cwd: Optional[Path] = None) -> Optional[Path]:
    """Locate the configuration file.

    Order: explicit path, ``$VENEER_CONFIG``, ``veneer.yaml`` in ``cwd``.

    Raises:
        ConfigError: If an explicitly named file does not exist
    """
    if explicit is not None:
        path = Path(explicit)
        if not path.exists():
            raise ConfigError(f"config file not found: {path}")
        return path

    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        path = Path(env_path)
        if not path.exists():
            raise ConfigError(f"config file from ${CONFIG_ENV_VAR} not found: {path}")
        return path

    path = (cwd or Path.cwd()) / DEFAULT_CONFIG_NAME
    if path.exists():
        return path
    return None


def load_config(config_path: Optional[Union[str, Path]] = None,
                cwd: Optional[Path] = None) -> ConfigModel:
    """Load configuration from file, or defaults when there is none."""
    path = find_config_path(config_path, cwd)
    if path is None:
        logger.debug("No configuration file found, using defaults")
        return ConfigModel()

    try:
        yaml_content = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"cannot read config file {path}: {e}") from e

    try:
        config = ConfigModel.from_yaml(yaml_content)
    except (ConfigError, TypeError) as e:
        raise ConfigError(f"{path}: {e}") from e

    logger.debug(f"Loaded configuration from {path}")
    return config


def save_config(config: ConfigModel, config_path: Union[str, Path]) -> None:
    """Save configuration to file."""
    config_path = Path(config_path)
    config_path.parent.mkdir(parents=True, exist_ok=True)
    config_path.write_text(config.to_yaml(), encoding="utf-8")
    logger.debug(f"Configuration saved to {config_path}")
