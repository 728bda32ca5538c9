"""Configuration management for the monitoring plugin."""

import os
import json
import logging
from pathlib import Path
from typing import Optional, Dict, Any, Union
from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, Field, field_validator

try:
    import yaml
    YAML_AVAILABLE = True
except ImportError:
    YAML_AVAILABLE = False


VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class PluginConfig(BaseModel):
    """Plugin output configuration."""

    json_label: bool = Field(default=False, description="Render performance data labels as JSON")
    log_level: str = Field(default="INFO", description="Logging level")
    default_message: str = Field(default="check finished", description="Message used when a check reports none")

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log_level is a known logging level."""
        level = v.strip().upper()
        if level not in VALID_LOG_LEVELS:
            raise ValueError(f"Invalid log level: {v}")
        return level


def load_config_file(config_path: Union[str, Path]) -> Dict[str, Any]:
    """Load configuration from a file."""
    config_path = Path(config_path)

    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    logger = logging.getLogger(__name__)

    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            if config_path.suffix.lower() in ['.yaml', '.yml']:
                if not YAML_AVAILABLE:
                    raise ImportError("PyYAML is required for YAML config files. Install with: pip install pyyaml")
                return yaml.safe_load(f) or {}

            elif config_path.suffix.lower() == '.json':
                return json.load(f) or {}

            else:
                raise ValueError(f"Unsupported config file format: {config_path.suffix}")

    except Exception as e:
        logger.error(f"Failed to load config file {config_path}: {e}")
        raise


def find_config_file() -> Optional[Path]:
    """Find configuration file in standard locations."""
    search_paths = [
        Path.cwd() / "perfdata.yaml",
        Path.cwd() / "perfdata.yml",
        Path.cwd() / "perfdata.json",
        Path.home() / ".config" / "monitoring-plugin" / "config.yaml",
        Path.home() / ".config" / "monitoring-plugin" / "config.yml",
        Path.home() / ".config" / "monitoring-plugin" / "config.json",
    ]

    for config_path in search_paths:
        if config_path.exists():
            return config_path

    return None


def parse_bool(value: Union[str, bool]) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in ('true', '1', 'yes', 'on')
    return bool(value)


def load_config(config_file: Optional[Union[str, Path]] = None) -> PluginConfig:
    """Load configuration from multiple sources with priority order.

    Priority (highest to lowest):
    1. Environment variables (including a .env file in the working directory)
    2. Specified or auto-discovered config file
    3. Default values
    """
    logger = logging.getLogger(__name__)

    config_data: Dict[str, Any] = {}

    if config_file:
        config_path = Path(config_file)
        if not config_path.exists():
            raise FileNotFoundError(f"Specified config file not found: {config_path}")
        config_data = load_config_file(config_path)
        logger.info(f"Loaded configuration from: {config_path}")
    else:
        config_path = find_config_file()
        if config_path:
            config_data = load_config_file(config_path)
            logger.info(f"Auto-discovered configuration file: {config_path}")

    load_dotenv(find_dotenv(usecwd=True))

    env_config = {
        "json_label": os.getenv("PERFDATA_JSON_LABEL"),
        "default_message": os.getenv("PERFDATA_DEFAULT_MESSAGE"),
        "log_level": os.getenv("LOG_LEVEL"),
    }
    final_config = {**config_data, **{k: v for k, v in env_config.items() if v is not None}}

    return PluginConfig(
        json_label=parse_bool(final_config.get("json_label", False)),
        log_level=final_config.get("log_level", "INFO"),
        default_message=final_config.get("default_message", "check finished"),
    )
