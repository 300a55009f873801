"""Data models for Pi-hole Monitor."""

from pihole_monitor.models.enums import FormFactor, StatusLevel, StatusReason
from pihole_monitor.models.result import RefreshResult, StatusResult
from pihole_monitor.models.sample import Sample

__all__ = [
    "FormFactor",
    "RefreshResult",
    "Sample",
    "StatusLevel",
    "StatusReason",
    "StatusResult",
]
