"""Custom exceptions for Pi-hole API operations.

All exceptions inherit from PiholeAPIError so a refresh cycle can map any
acquisition failure to the cache fallback with a single handler.
"""

from typing import Optional

# Length of response body kept for diagnostics
BODY_EXCERPT_LENGTH = 200


def body_excerpt(text: Optional[str]) -> str:
    """Truncate a response body for error messages."""
    return (text or "")[:BODY_EXCERPT_LENGTH]


class PiholeAPIError(Exception):
    """Base exception for all Pi-hole API errors.

    Attributes:
        message: Human-readable error message.
        hint: Optional troubleshooting hint.
        status_code: HTTP status code if a response was received.
        body_excerpt: First characters of the response body.
    """

    exit_code: int = 1

    def __init__(
        self,
        message: str,
        hint: Optional[str] = None,
        status_code: Optional[int] = None,
        body_excerpt: Optional[str] = None,
    ) -> None:
        self.message = message
        self.hint = hint
        self.status_code = status_code
        self.body_excerpt = body_excerpt
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the exception message with optional hint."""
        if self.hint:
            return f"{self.message}\n\nHint: {self.hint}"
        return self.message


class AuthError(PiholeAPIError):
    """Exchanging the password for a session failed.

    Raised when:
    - The appliance answers with a non-2xx status (wrong password, rate limit)
    - A 2xx response carries no session token
    - The login request fails at transport level or times out
    """

    exit_code: int = 3


class FetchError(PiholeAPIError):
    """Retrieving the statistics document failed.

    Raised when:
    - The appliance answers with a non-2xx status
    - The body is not a JSON object
    - The request fails at transport level or times out
    """

    exit_code: int = 2


class CredentialError(PiholeAPIError):
    """No usable admin password is available."""

    def __init__(
        self,
        message: str = "No Pi-hole admin password configured",
        hint: Optional[str] = None,
    ) -> None:
        if hint is None:
            hint = "Run 'pihole-monitor --set-password' or set PIHOLE_PASSWORD."
        super().__init__(message=message, hint=hint)
