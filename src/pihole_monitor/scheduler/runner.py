"""Scheduled runner using APScheduler."""

from datetime import datetime
from datetime import timezone as dt_timezone
from typing import Any, Callable

import structlog
from apscheduler.events import EVENT_JOB_ERROR
from apscheduler.schedulers.blocking import BlockingScheduler
from apscheduler.triggers.interval import IntervalTrigger

log = structlog.get_logger(__name__)


class SchedulerError(Exception):
    """Raised when scheduler configuration fails."""

    pass


class ScheduledRunner:
    """APScheduler-based runner for refresh cycles.

    Jobs never overlap (max_instances=1) and missed runs are coalesced,
    so at most one refresh cycle touches the sample cache at a time.
    """

    def __init__(
        self,
        timezone: str = "UTC",
        misfire_grace_time: int = 600,
    ) -> None:
        """Initialize scheduler.

        Args:
            timezone: IANA timezone for the scheduler
            misfire_grace_time: Seconds after scheduled time to still run missed job
        """
        self.timezone = timezone
        self.misfire_grace_time = misfire_grace_time

    def _create_scheduler(self) -> BlockingScheduler:
        """Create configured BlockingScheduler."""
        job_defaults = {
            "coalesce": True,
            "misfire_grace_time": self.misfire_grace_time,
            "max_instances": 1,
        }
        return BlockingScheduler(
            timezone=self.timezone,
            job_defaults=job_defaults,
        )

    def run_interval(self, func: Callable[[], None], hours: float) -> None:
        """Run func now and then every ``hours`` until interrupted.

        Raises:
            SchedulerError: If the interval is not positive
        """
        if hours <= 0:
            raise SchedulerError(f"Refresh interval must be positive, got {hours}")

        scheduler = self._create_scheduler()
        trigger = IntervalTrigger(hours=hours, timezone=self.timezone)
        scheduler.add_job(
            func,
            trigger,
            id="refresh_job",
            next_run_time=datetime.now(dt_timezone.utc),
        )
        log.info("job_scheduled", schedule_type="interval", hours=hours, timezone=self.timezone)

        def on_job_error(event: Any) -> None:
            log.error("job_failed", error=str(event.exception))

        scheduler.add_listener(on_job_error, EVENT_JOB_ERROR)

        log.info("scheduler_starting", timezone=self.timezone)
        try:
            scheduler.start()
        except KeyboardInterrupt:
            log.info("scheduler_shutdown", reason="keyboard interrupt")
