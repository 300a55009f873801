"""Pi-hole API client.

The PiholeClient wraps an httpx.Client and exposes the two calls a refresh
cycle needs: exchanging the admin password for a session, and fetching the
statistics summary with that session.

Example usage:
    from pihole_monitor.config import PiholeSettings
    from pihole_monitor.api import PiholeClient

    settings = PiholeSettings(base_url="http://192.168.178.10")

    with PiholeClient(settings) as client:
        sample = client.fetch_summary(password="secret")
        print(sample.total_queries)
"""

from datetime import datetime
from typing import Callable, Optional

import httpx
import structlog

from pihole_monitor.config import PiholeSettings
from pihole_monitor.models import Sample
from pihole_monitor.utils.timestamps import utc_now

from .auth import SESSION_HEADER, authenticate, logout
from .exceptions import FetchError, body_excerpt

logger = structlog.get_logger(__name__)


class PiholeClient:
    """Client for the Pi-hole v6 management API.

    Sessions are never reused: every fetch_summary() call logs in, fetches
    once, and (optionally) logs out again.

    Example:
        with PiholeClient(settings) as client:
            sid = client.login(password)
            sample = client.fetch_stats(sid)
    """

    def __init__(
        self,
        settings: PiholeSettings,
        transport: Optional[httpx.BaseTransport] = None,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        """Initialize the client.

        Args:
            settings: Connection settings.
            transport: Optional httpx transport (tests use httpx.MockTransport).
            clock: Source of the fetch timestamp.
        """
        self.settings = settings
        self.base_url = settings.base_url
        self._transport = transport
        self._clock = clock
        self._client: Optional[httpx.Client] = None

    def connect(self) -> None:
        """Create the underlying HTTP client. Safe to call twice."""
        if self._client is None:
            self._client = httpx.Client(
                verify=self.settings.verify_ssl,
                transport=self._transport,
            )

    def close(self) -> None:
        """Close the HTTP client. Safe to call when not connected."""
        if self._client is not None:
            self._client.close()
            self._client = None

    @property
    def http(self) -> httpx.Client:
        self.connect()
        assert self._client is not None  # For type checker
        return self._client

    def login(self, password: str) -> str:
        """Exchange the password for a session id.

        Raises:
            AuthError: Login rejected, malformed response or transport failure.
        """
        return authenticate(
            client=self.http,
            base_url=self.base_url,
            password=password,
            timeout=self.settings.login_timeout,
            endpoint=self.settings.auth_endpoint,
        )

    def logout(self, sid: str) -> None:
        """Release a session (best-effort, never raises)."""
        logout(
            client=self.http,
            base_url=self.base_url,
            sid=sid,
            timeout=self.settings.login_timeout,
            endpoint=self.settings.auth_endpoint,
        )

    def fetch_stats(self, sid: str) -> Sample:
        """Fetch the statistics summary and normalize it into a Sample.

        Args:
            sid: Session id from login().

        Returns:
            Sample stamped with the time of the successful parse.

        Raises:
            FetchError: Non-2xx status, body not a JSON object, or transport failure.
        """
        url = f"{self.base_url}{self.settings.stats_endpoint}"
        try:
            response = self.http.get(
                url,
                headers={SESSION_HEADER: sid, "Accept": "application/json"},
                timeout=self.settings.stats_timeout,
            )
        except httpx.TimeoutException as e:
            raise FetchError(message=f"Stats request timed out after {self.settings.stats_timeout}s: {e}")
        except httpx.RequestError as e:
            raise FetchError(message=f"Connection failed during stats request: {e}")

        excerpt = body_excerpt(response.text)
        if not response.is_success:
            raise FetchError(
                message=f"Stats failed HTTP {response.status_code}: {excerpt}",
                status_code=response.status_code,
                body_excerpt=excerpt,
            )

        try:
            payload = response.json()
        except ValueError:
            payload = None

        if not isinstance(payload, dict):
            raise FetchError(
                message=f"Stats failed HTTP {response.status_code}: unparsable body: {excerpt}",
                status_code=response.status_code,
                body_excerpt=excerpt,
            )

        sample = Sample.from_api_response(payload, fetched_at=self._clock())
        logger.debug(
            "stats_fetched",
            total_queries=sample.total_queries,
            clients_total=sample.clients_total,
        )
        return sample

    def fetch_summary(self, password: str) -> Sample:
        """Log in, fetch the statistics once, and release the session."""
        sid = self.login(password)
        try:
            return self.fetch_stats(sid)
        finally:
            if self.settings.logout_after_fetch:
                self.logout(sid)

    def __enter__(self) -> "PiholeClient":
        self.connect()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
