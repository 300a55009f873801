"""Test helpers: fixed clock, sample builder, fake Pi-hole API."""

import json
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, List

import httpx

from pihole_monitor.models import Sample

NOW = datetime(2026, 10, 18, 12, 0, 0, tzinfo=timezone.utc)

STATS_PAYLOAD: Dict[str, Any] = {
    "queries": {
        "total": 12345,
        "blocked": 2345,
        "percent_blocked": 18.99,
        "unique_domains": 890,
        "forwarded": 6000,
        "cached": 4000,
        "types": {"A": 9000, "AAAA": 3000},
    },
    "clients": {"active": 7, "total": 9},
    "gravity": {"domains_being_blocked": 150000, "last_update": 1760000000},
    "took": 0.003,
}


def make_sample(minutes_ago: float = 0, **fields: Any) -> Sample:
    """Build a sample fetched ``minutes_ago`` before NOW."""
    defaults: Dict[str, Any] = {
        "total_queries": 1000,
        "queries_blocked": 200,
        "percentage_blocked": 20.0,
        "clients_total": 5,
    }
    defaults.update(fields)
    return Sample(fetched_at=NOW - timedelta(minutes=minutes_ago), **defaults)


class FakePihole:
    """httpx.MockTransport handler emulating the Pi-hole v6 API."""

    def __init__(
        self,
        password: str = "secret",
        stats: Any = None,
        stats_status: int = 200,
    ) -> None:
        self.password = password
        self.stats = STATS_PAYLOAD if stats is None else stats
        self.stats_status = stats_status
        self.requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if request.url.path == "/api/auth" and request.method == "POST":
            body = json.loads(request.content or b"{}")
            if body.get("password") != self.password:
                return httpx.Response(
                    401,
                    json={"error": {"key": "unauthorized", "message": "Unauthorized"}},
                )
            return httpx.Response(
                200, json={"session": {"valid": True, "sid": "sid-123", "validity": 1800}}
            )
        if request.url.path == "/api/auth" and request.method == "DELETE":
            return httpx.Response(204)
        if request.url.path == "/api/stats/summary":
            if request.headers.get("X-FTL-SID") != "sid-123":
                return httpx.Response(401, json={"error": {"key": "unauthorized"}})
            if isinstance(self.stats, str):
                return httpx.Response(self.stats_status, text=self.stats)
            return httpx.Response(self.stats_status, json=self.stats)
        return httpx.Response(404, text="not found")

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)

    def paths(self) -> List[str]:
        return [f"{r.method} {r.url.path}" for r in self.requests]
