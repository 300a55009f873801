"""Pi-hole API client module.

Provides the PiholeClient for the v6 REST API along with session
authentication helpers and the exception hierarchy.
"""

from pihole_monitor.api.auth import SESSION_HEADER, authenticate, logout
from pihole_monitor.api.client import PiholeClient
from pihole_monitor.api.exceptions import (
    AuthError,
    CredentialError,
    FetchError,
    PiholeAPIError,
)

__all__ = [
    "PiholeClient",
    "SESSION_HEADER",
    "authenticate",
    "logout",
    "AuthError",
    "CredentialError",
    "FetchError",
    "PiholeAPIError",
]
