"""
Pi-hole Monitor - Keep an eye on a Pi-hole appliance from the command line.

This package polls the Pi-hole v6 management API, keeps the last known-good
statistics snapshot as a fallback, and classifies the appliance's health
into OK, WARNING, or ERROR.

Features:
- Configuration via YAML with environment variable overrides
- Docker secrets support for the admin password
- Structured logging (JSON for production, text for development)
- Cache fallback when the appliance is unreachable
- Small, medium, and large text layouts
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
