"""Scheduling of unattended refresh cycles."""

from pihole_monitor.scheduler.runner import ScheduledRunner, SchedulerError

__all__ = ["ScheduledRunner", "SchedulerError"]
