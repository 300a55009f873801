"""Normalized statistics snapshot of a Pi-hole appliance.

A Sample is always fully populated: every counter defaults to 0 when the
source omits it, and malformed or negative values normalize to 0 as well.
Persisted samples use camelCase keys (``fetchedAt``, ``totalQueries``, ...).
"""

import math
from datetime import datetime
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from pihole_monitor.utils.timestamps import minutes_since, normalize_timestamp, utc_now

COUNTER_FIELDS = (
    "total_queries",
    "queries_blocked",
    "domains_on_list",
    "forwarded",
    "cached_count",
    "unique_domains",
    "clients_total",
)


def _as_count(value: Any) -> int:
    """Coerce a source value to a non-negative integer, 0 when unusable."""
    if value is None or isinstance(value, bool):
        return 0
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0
    if not math.isfinite(number) or number < 0:
        return 0
    return int(number)


def _as_percentage(value: Any) -> float:
    """Coerce a source value to a ratio in [0, 100], 0 when unusable."""
    if value is None or isinstance(value, bool):
        return 0.0
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0.0
    if not math.isfinite(number):
        return 0.0
    return min(max(number, 0.0), 100.0)


def _section(payload: Dict[str, Any], name: str) -> Dict[str, Any]:
    section = payload.get(name)
    return section if isinstance(section, dict) else {}


class Sample(BaseModel):
    """Statistics snapshot from the Pi-hole stats/summary API."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    fetched_at: Optional[datetime] = Field(
        default=None, description="UTC time of the successful fetch, None in the zero-state"
    )
    total_queries: int = Field(default=0, ge=0)
    queries_blocked: int = Field(default=0, ge=0)
    percentage_blocked: float = Field(default=0.0, ge=0.0, le=100.0)
    domains_on_list: int = Field(default=0, ge=0)
    forwarded: int = Field(default=0, ge=0)
    cached_count: int = Field(default=0, ge=0)
    unique_domains: int = Field(default=0, ge=0)
    clients_total: int = Field(default=0, ge=0)

    @field_validator(*COUNTER_FIELDS, mode="before")
    @classmethod
    def _normalize_counter(cls, v: Any) -> int:
        return _as_count(v)

    @field_validator("percentage_blocked", mode="before")
    @classmethod
    def _normalize_percentage(cls, v: Any) -> float:
        return _as_percentage(v)

    @field_validator("fetched_at", mode="before")
    @classmethod
    def _normalize_fetched_at(cls, v: Any) -> Optional[datetime]:
        if v is None or v == "":
            return None
        try:
            return normalize_timestamp(v)
        except (ValueError, OverflowError) as e:
            raise ValueError(f"Invalid fetchedAt: {e}") from e

    @property
    def is_zero_state(self) -> bool:
        """True for the synthetic sample used when no data exists anywhere."""
        return self.fetched_at is None

    def age_minutes(self, now: Optional[datetime] = None) -> Optional[float]:
        """Minutes since the sample was fetched, None in the zero-state."""
        return minutes_since(self.fetched_at, now or utc_now())

    def to_json(self) -> str:
        """Serialize to the persisted cache schema."""
        return self.model_dump_json(by_alias=True)

    @classmethod
    def from_json(cls, raw: str) -> "Sample":
        """Parse a persisted cache entry.

        Raises:
            pydantic.ValidationError: If the payload is not a Sample object.
        """
        return cls.model_validate_json(raw)

    @classmethod
    def zero_state(cls) -> "Sample":
        """Synthetic sample with no timestamp and all counters at 0."""
        return cls()

    @classmethod
    def from_api_response(
        cls,
        response: Dict[str, Any],
        fetched_at: Optional[datetime] = None,
    ) -> "Sample":
        """Factory for creating a Sample from a raw stats/summary response.

        Args:
            response: Parsed JSON body of the statistics endpoint
            fetched_at: Time of the successful parse (defaults to now)

        Returns:
            Sample with missing sub-fields defaulted to 0
        """
        queries = _section(response, "queries")
        clients = _section(response, "clients")
        gravity = _section(response, "gravity")

        return cls(
            fetched_at=fetched_at or utc_now(),
            total_queries=queries.get("total"),
            queries_blocked=queries.get("blocked"),
            # Taken as reported, never recomputed from total/blocked
            percentage_blocked=queries.get("percent_blocked"),
            domains_on_list=gravity.get("domains_being_blocked"),
            forwarded=queries.get("forwarded"),
            cached_count=queries.get("cached"),
            unique_domains=queries.get("unique_domains"),
            clients_total=clients.get("total"),
        )
