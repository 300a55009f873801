"""Immutable rendering configuration."""

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pihole_monitor.config import PiholeSettings


@dataclass(frozen=True)
class RenderOptions:
    """Presentation settings threaded through the renderer only.

    Attributes:
        locale: Message catalog and number format ("de_DE" or "en_US")
        display_timezone: IANA timezone for displayed clock times
        refresh_hours: Interval used for the next-refresh hint
    """

    locale: str = "de_DE"
    display_timezone: str = "UTC"
    refresh_hours: float = 6

    @classmethod
    def from_settings(cls, settings: "PiholeSettings") -> "RenderOptions":
        return cls(
            locale=settings.locale,
            display_timezone=settings.display_timezone,
            refresh_hours=settings.refresh_hours,
        )
