"""Configuration loader."""

import os
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml
from pydantic import ValidationError

from .models import FeedConfig

CONFIG_PATH_ENV = "CMSFEED_CONFIG"

# Environment variable -> config field
ENV_FIELDS = {
    "CONTENTFUL_SPACE_ID": "space_id",
    "CONTENTFUL_ACCESS_TOKEN": "access_token",
    "CMSFEED_LOG_LEVEL": "log_level",
}


def read_config_file(config_path: Path) -> Dict[str, Any]:
    """Read settings from a YAML file."""
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    try:
        with open(config_path) as f:
            config_data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in config file: {e}")

    if config_data is None:
        return {}
    if not isinstance(config_data, dict):
        raise ValueError(f"Config file must contain a mapping: {config_path}")
    return config_data


def load_config(
    config_path: Optional[Path] = None,
    env: Optional[Mapping[str, str]] = None,
) -> FeedConfig:
    """
    Build the configuration once at process start.

    Settings are layered: model defaults, then the optional YAML file,
    then environment variables. Missing secrets are not an error here;
    they are checked before each upstream request.

    Args:
        config_path: YAML file with non-secret settings. Falls back to
            the path in CMSFEED_CONFIG when not given.
        env: Mapping used instead of os.environ (for testing)

    Returns:
        Validated configuration
    """
    if env is None:
        env = os.environ

    if config_path is None and env.get(CONFIG_PATH_ENV):
        config_path = Path(env[CONFIG_PATH_ENV])

    config_data: Dict[str, Any] = {}
    if config_path is not None:
        config_data = read_config_file(config_path)

    for env_name, field_name in ENV_FIELDS.items():
        value = env.get(env_name)
        if value:
            config_data[field_name] = value

    try:
        return FeedConfig(**config_data)
    except ValidationError as e:
        raise ValueError(f"Invalid configuration: {e}")
