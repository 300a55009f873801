"""Outcome types of status evaluation and refresh cycles."""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from pihole_monitor.models.enums import StatusLevel, StatusReason
from pihole_monitor.models.sample import Sample


@dataclass(frozen=True)
class StatusResult:
    """Health classification produced fresh on every refresh.

    Attributes:
        level: OK, WARNING or ERROR
        reason: Machine-readable tag, None for OK
        params: Substitution parameters for the reason text (e.g. client count)
    """

    level: StatusLevel
    reason: Optional[StatusReason] = None
    params: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def ok(cls) -> "StatusResult":
        return cls(level=StatusLevel.OK)

    @classmethod
    def warning(cls, reason: StatusReason, **params: Any) -> "StatusResult":
        return cls(level=StatusLevel.WARNING, reason=reason, params=params)

    @classmethod
    def error(cls, reason: StatusReason, **params: Any) -> "StatusResult":
        return cls(level=StatusLevel.ERROR, reason=reason, params=params)


@dataclass(frozen=True)
class RefreshResult:
    """Result of one refresh cycle handed to the rendering consumer."""

    sample: Sample
    is_live: bool
    status: StatusResult
    error: Optional[str] = None
