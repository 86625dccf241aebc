"""Configuration management for cmsfeed."""

from .loader import load_config, read_config_file
from .models import ChannelConfig, FeedConfig, ServerConfig

__all__ = [
    "FeedConfig",
    "ChannelConfig",
    "ServerConfig",
    "load_config",
    "read_config_file",
]
