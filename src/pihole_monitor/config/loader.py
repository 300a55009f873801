"""Configuration loading with YAML, environment override, and Docker secrets support."""

from __future__ import annotations

import os
import sys
import threading
from pathlib import Path
from typing import Any, Dict, List, Optional

import structlog
import yaml
from pydantic import ValidationError

from pihole_monitor.config.settings import PiholeSettings

log = structlog.get_logger(__name__)

ENV_PREFIX = "PIHOLE_"


class ConfigurationError(Exception):
    """Raised when configuration is invalid or cannot be loaded."""

    pass


_config: Optional[PiholeSettings] = None
_config_lock = threading.Lock()


def resolve_file_secrets() -> Dict[str, str]:
    """Resolve Docker secrets pattern (_FILE suffix) from environment.

    Scans environment for variables matching PIHOLE_*_FILE pattern,
    reads the file contents, and returns a dict of the base variable
    names to their values.

    Example:
        PIHOLE_PASSWORD_FILE=/run/secrets/pihole_password
        -> Returns {"PASSWORD": "<file contents>"}
    """
    secrets: Dict[str, str] = {}
    suffix = "_FILE"

    for key, filepath in os.environ.items():
        if not (key.startswith(ENV_PREFIX) and key.endswith(suffix)):
            continue
        base_name = key[len(ENV_PREFIX) : -len(suffix)]
        path = Path(filepath)
        if not path.exists():
            # Validation reports whatever ends up missing
            log.warning("secret_file_not_found", env_var=key, path=filepath)
            continue
        try:
            secrets[base_name] = path.read_text().strip()
        except PermissionError:
            raise ConfigurationError(
                f"Cannot read secret file '{filepath}' specified by {key}: permission denied"
            )
        except OSError as e:
            raise ConfigurationError(
                f"Error reading secret file '{filepath}' specified by {key}: {e}"
            )

    return secrets


def load_yaml_config(config_path: Optional[str] = None) -> Dict[str, Any]:
    """Load configuration from YAML file if specified.

    Args:
        config_path: Path to YAML config file. If None, checks CONFIG_PATH env var.

    Returns:
        Dict of configuration values from YAML, or empty dict if no file.
    """
    path = config_path or os.environ.get("CONFIG_PATH")

    if not path:
        return {}

    try:
        with open(path) as f:
            data = yaml.safe_load(f)
            return data if isinstance(data, dict) else {}
    except FileNotFoundError:
        raise ConfigurationError(
            f"Configuration file not found: {path}\n"
            "Ensure CONFIG_PATH points to a valid YAML file, or remove it to use environment variables only."
        )
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in configuration file {path}: {e}")
    except PermissionError:
        raise ConfigurationError(f"Cannot read configuration file {path}: permission denied")


def format_validation_errors(errors: List[Dict[str, Any]]) -> List[str]:
    """Format Pydantic validation errors into user-friendly messages."""
    messages: List[str] = []
    for error in errors:
        loc = ".".join(str(part) for part in error.get("loc", []))
        msg = error.get("msg", "Invalid value")
        input_val = error.get("input")

        if "missing" in msg.lower() or "required" in msg.lower():
            hint = f"Set {ENV_PREFIX}{loc.upper()} environment variable or add '{loc}:' to config file."
            messages.append(f"Configuration error: '{loc}' is required. {hint}")
        elif input_val is not None and loc != "password":
            messages.append(f"Configuration error: '{loc}' {msg}, got: {input_val}")
        else:
            messages.append(f"Configuration error: '{loc}' {msg}")

    return messages


def load_config(config_path: Optional[str] = None) -> PiholeSettings:
    """Load and validate configuration.

    Configuration is loaded with the following precedence:
    1. Environment variables (highest priority)
    2. Docker secrets (_FILE pattern)
    3. YAML configuration file
    4. Default values (lowest priority)

    Args:
        config_path: Optional path to YAML config file (sets CONFIG_PATH env).

    Returns:
        Validated PiholeSettings instance.

    Raises:
        ConfigurationError: If configuration file cannot be read.
        SystemExit: If validation fails (exits with code 1 after printing errors).
    """
    global _config

    if config_path:
        os.environ["CONFIG_PATH"] = config_path

    # Fail early with a readable message; the settings source swallows errors
    load_yaml_config()

    for key, value in resolve_file_secrets().items():
        env_key = f"{ENV_PREFIX}{key}"
        if env_key not in os.environ:
            os.environ[env_key] = value

    try:
        settings = PiholeSettings()
    except ValidationError as e:
        for msg in format_validation_errors(e.errors()):
            print(msg, file=sys.stderr)
        sys.exit(1)

    with _config_lock:
        _config = settings
    return settings


def get_config() -> PiholeSettings:
    """Get the current configuration.

    Raises:
        ConfigurationError: If configuration has not been loaded.
    """
    with _config_lock:
        if _config is None:
            raise ConfigurationError("Configuration not loaded. Call load_config() first.")
        return _config


def reload_config() -> PiholeSettings:
    """Reload configuration from disk.

    Used by the SIGHUP handler in serve mode.
    """
    global _config
    with _config_lock:
        _config = None
    return load_config()
