"""Refresh cycle: acquire live statistics or fall back to the cache.

One call to RefreshOrchestrator.refresh() runs the whole pipeline:
1. Load the cached sample (baseline for the trend check)
2. Read the credential, authenticate, fetch and normalize statistics
3. On success persist the new sample; on any failure use the cached
   sample, or the zero-state when there is none
4. Evaluate the status against the baseline loaded in step 1

Failures never escape refresh(); they are logged and reported through
RefreshResult.error and the resulting status.
"""

from datetime import datetime
from typing import Callable, Optional

import structlog

from pihole_monitor.analysis import StatusEvaluator, StatusThresholds
from pihole_monitor.api import PiholeAPIError, PiholeClient
from pihole_monitor.cache import SampleStore
from pihole_monitor.config import PiholeSettings
from pihole_monitor.models import RefreshResult, Sample
from pihole_monitor.secrets import CredentialProvider, SecretStore
from pihole_monitor.utils.timestamps import utc_now

log = structlog.get_logger(__name__)


class RefreshOrchestrator:
    """Runs single best-effort refresh cycles. No retries, no concurrency."""

    def __init__(
        self,
        client_factory: Callable[[], PiholeClient],
        credentials: CredentialProvider,
        store: SampleStore,
        evaluator: Optional[StatusEvaluator] = None,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        """Initialize the orchestrator.

        Args:
            client_factory: Creates a fresh PiholeClient for each cycle
            credentials: Source of the admin password
            store: Cache of the last known-good sample
            evaluator: Status evaluator (default thresholds if omitted)
            clock: Source of "now" for the evaluation
        """
        self.client_factory = client_factory
        self.credentials = credentials
        self.store = store
        self.evaluator = evaluator or StatusEvaluator(clock=clock)
        self._clock = clock

    def _acquire(self) -> Sample:
        password = self.credentials.get()
        with self.client_factory() as client:
            return client.fetch_summary(password)

    def refresh(self) -> RefreshResult:
        """Run one refresh cycle.

        Returns:
            RefreshResult with the sample to show, the liveness flag, the
            status, and the failure cause when the fetch did not succeed.
        """
        previous = self.store.load()
        error: Optional[str] = None

        try:
            sample = self._acquire()
        except PiholeAPIError as e:
            error = e.message
            log.warning(
                "refresh_fallback",
                error=error,
                status_code=e.status_code,
                cached=previous is not None,
            )
        except Exception as e:
            error = str(e) or type(e).__name__
            log.error(
                "refresh_unexpected_error",
                error=error,
                cached=previous is not None,
                exc_info=True,
            )
        else:
            self.store.save(sample)

        if error is None:
            is_live = True
        else:
            is_live = False
            sample = previous if previous is not None else Sample.zero_state()

        status = self.evaluator.evaluate(sample, is_live, previous, now=self._clock())
        log.info(
            "refresh_complete",
            live=is_live,
            level=status.level.value,
            reason=status.reason.value if status.reason else None,
        )
        return RefreshResult(sample=sample, is_live=is_live, status=status, error=error)

    @classmethod
    def from_settings(
        cls, settings: PiholeSettings, secret_store: SecretStore
    ) -> "RefreshOrchestrator":
        """Wire an orchestrator from configuration and a secret store."""
        return cls(
            client_factory=lambda: PiholeClient(settings),
            credentials=CredentialProvider(
                secret_store, key=settings.password_key, fallback=settings.password
            ),
            store=SampleStore(secret_store, key=settings.cache_key),
            evaluator=StatusEvaluator(StatusThresholds.from_settings(settings)),
        )
