"""Configuration management for Pi-hole Monitor."""

from pihole_monitor.config.loader import ConfigurationError, get_config, load_config, reload_config
from pihole_monitor.config.settings import PiholeSettings

__all__ = [
    "ConfigurationError",
    "PiholeSettings",
    "get_config",
    "load_config",
    "reload_config",
]
