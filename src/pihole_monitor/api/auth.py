"""Session authentication against the Pi-hole v6 API.

This module handles:
- Exchanging the admin password for a session id (sid)
- Best-effort logout to release the session on the appliance
"""

from typing import Any, Optional

import httpx
import structlog

from .exceptions import AuthError, body_excerpt

logger = structlog.get_logger(__name__)

SESSION_HEADER = "X-FTL-SID"


def _extract_sid(payload: Any) -> Optional[str]:
    if not isinstance(payload, dict):
        return None
    session = payload.get("session")
    if not isinstance(session, dict):
        return None
    sid = session.get("sid")
    if not isinstance(sid, str) or not sid:
        return None
    return sid


def authenticate(
    client: httpx.Client,
    base_url: str,
    password: str,
    timeout: float = 10,
    endpoint: str = "/api/auth",
) -> str:
    """Authenticate with the Pi-hole and return a session id.

    Performs exactly one request, no retry.

    Args:
        client: httpx.Client used for the request.
        base_url: Base URL of the appliance (e.g., http://192.168.178.10).
        password: Admin password.
        timeout: Request timeout in seconds.
        endpoint: Path of the authentication endpoint.

    Returns:
        The session id to send in the X-FTL-SID header.

    Raises:
        AuthError: Non-2xx status, missing token, or transport failure.

    Note:
        The password is never logged at any level.
    """
    if not password:
        raise AuthError(message="Cannot authenticate with an empty password")

    login_url = f"{base_url}{endpoint}"
    logger.debug("authenticating", url=login_url)

    try:
        response = client.post(
            login_url,
            json={"password": password},
            headers={"Accept": "application/json"},
            timeout=timeout,
        )
    except httpx.TimeoutException as e:
        raise AuthError(message=f"Login timed out after {timeout}s: {e}")
    except httpx.RequestError as e:
        raise AuthError(message=f"Connection failed during authentication: {e}")

    if not response.is_success:
        excerpt = body_excerpt(response.text)
        raise AuthError(
            message=f"Login failed HTTP {response.status_code}: {excerpt}",
            status_code=response.status_code,
            body_excerpt=excerpt,
        )

    try:
        payload = response.json()
    except ValueError:
        payload = None

    sid = _extract_sid(payload)
    if sid is None:
        raise AuthError(
            message="no token in response",
            status_code=response.status_code,
            body_excerpt=body_excerpt(response.text),
        )

    logger.info("authentication_successful")
    return sid


def logout(
    client: httpx.Client,
    base_url: str,
    sid: str,
    timeout: float = 10,
    endpoint: str = "/api/auth",
) -> None:
    """Release the session on the Pi-hole (best-effort).

    Errors are logged but not raised; an abandoned session simply expires.
    """
    try:
        response = client.delete(
            f"{base_url}{endpoint}",
            headers={SESSION_HEADER: sid},
            timeout=timeout,
        )
        if response.is_success:
            logger.debug("logout_successful")
        else:
            logger.debug("logout_status", status_code=response.status_code)
    except httpx.HTTPError as e:
        logger.debug("logout_failed", error=str(e))
