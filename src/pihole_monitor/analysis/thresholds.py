"""Status threshold configuration.

Defines the configurable limits used by the status rules.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pihole_monitor.config import PiholeSettings


@dataclass(frozen=True)
class StatusThresholds:
    """Configurable thresholds for status evaluation.

    Attributes:
        error_stale_minutes: Cache age (inclusive) at which an unreachable
            appliance is reported as offline instead of stale
        clients_warn_max: Client count at or below which a live sample warns
        delta_window_minutes: Maximum age of the previous sample for the
            query delta check
        min_query_delta: New queries expected within the delta window
    """

    error_stale_minutes: float = 120.0
    clients_warn_max: int = 1
    delta_window_minutes: float = 30.0
    min_query_delta: int = 10

    @classmethod
    def from_settings(cls, settings: "PiholeSettings") -> "StatusThresholds":
        return cls(
            error_stale_minutes=settings.error_stale_minutes,
            clients_warn_max=settings.clients_warn_max,
            delta_window_minutes=settings.delta_window_minutes,
            min_query_delta=settings.min_query_delta,
        )


# Default thresholds for production use
DEFAULT_THRESHOLDS = StatusThresholds()
