"""
Configuration loading
Optional config.json with bulb name aliases and connection tuning
"""

import json
import logging
import os
from pathlib import Path
from typing import Dict, Optional, Union

from pydantic import BaseModel, Field, ValidationError

from .errors import ConfigError

log = logging.getLogger(__name__)

CONFIG_ENV_VAR = "CEILING_LIGHT_CONFIG"
DEFAULT_CONFIG_DIR = Path.home() / ".ceiling_light"
DEFAULT_CONFIG_FILE = DEFAULT_CONFIG_DIR / "config.json"


class ConnectionSettings(BaseModel):
    """Dial and session timing, in seconds"""

    connect_attempts: int = Field(50, ge=1, le=1000)
    connect_timeout: float = Field(0.3, gt=0)
    io_timeout: float = Field(0.2, gt=0)
    settle_delay: float = Field(0.005, ge=0)


class Config(BaseModel):
    bulbs: Dict[str, str] = Field(default_factory=dict)
    connection: ConnectionSettings = Field(default_factory=ConnectionSettings)

    def resolve_host(self, target: str) -> str:
        """Map a configured bulb name to its host, otherwise use target as-is"""
        host = self.bulbs.get(target, target)
        if host != target:
            log.debug("Resolved bulb %s to %s", target, host)
        return host


def load_config(path: Optional[Union[str, Path]] = None) -> Config:
    """
    Load configuration from path, $CEILING_LIGHT_CONFIG or the default file.
    Only the default file may be absent.
    """
    explicit = path is not None or bool(os.environ.get(CONFIG_ENV_VAR))
    config_path = Path(path or os.environ.get(CONFIG_ENV_VAR) or DEFAULT_CONFIG_FILE)

    try:
        with open(config_path, "r") as f:
            data = json.load(f)
    except FileNotFoundError:
        if explicit:
            raise ConfigError(f"config file {config_path} not found")
        log.debug("No config file at %s, using defaults", config_path)
        return Config()
    except json.JSONDecodeError as e:
        raise ConfigError(f"invalid JSON in config file {config_path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"cannot read config file {config_path}: {e}") from e

    try:
        config = Config.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"invalid config file {config_path}: {e}") from e

    log.debug("Loaded config from %s: %d bulbs", config_path, len(config.bulbs))
    return config
