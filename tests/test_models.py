"""Tests for Sample normalization and status result types."""

import json
from datetime import datetime, timedelta, timezone

import pytest
from pydantic import ValidationError

from helpers import NOW, STATS_PAYLOAD, make_sample
from pihole_monitor.models import (
    RefreshResult,
    Sample,
    StatusLevel,
    StatusReason,
    StatusResult,
)


class TestSampleFromApiResponse:
    """Tests for Sample.from_api_response()."""

    def test_maps_nested_fields(self) -> None:
        """All counters are taken from their nested source fields."""
        sample = Sample.from_api_response(STATS_PAYLOAD, fetched_at=NOW)

        assert sample.fetched_at == NOW
        assert sample.total_queries == 12345
        assert sample.queries_blocked == 2345
        assert sample.percentage_blocked == 18.99
        assert sample.domains_on_list == 150000
        assert sample.forwarded == 6000
        assert sample.cached_count == 4000
        assert sample.unique_domains == 890
        assert sample.clients_total == 9

    def test_missing_sections_default_to_zero(self) -> None:
        """An empty document still yields a fully populated sample."""
        sample = Sample.from_api_response({}, fetched_at=NOW)

        assert sample.fetched_at == NOW
        assert sample.total_queries == 0
        assert sample.queries_blocked == 0
        assert sample.percentage_blocked == 0.0
        assert sample.domains_on_list == 0
        assert sample.clients_total == 0

    def test_percentage_not_recomputed(self) -> None:
        """percent_blocked is taken verbatim even if inconsistent with counts."""
        payload = {"queries": {"total": 100, "blocked": 50, "percent_blocked": 12.5}}

        sample = Sample.from_api_response(payload, fetched_at=NOW)

        assert sample.percentage_blocked == 12.5

    def test_extra_fields_ignored(self) -> None:
        payload = {"queries": {"total": 5, "frequency": 1.2}, "system": {"uptime": 1}}

        sample = Sample.from_api_response(payload, fetched_at=NOW)

        assert sample.total_queries == 5

    def test_stamps_current_time_by_default(self) -> None:
        before = datetime.now(timezone.utc)
        sample = Sample.from_api_response(STATS_PAYLOAD)
        after = datetime.now(timezone.utc)

        assert sample.fetched_at is not None
        assert before <= sample.fetched_at <= after

    @pytest.mark.parametrize(
        "payload",
        [
            {},
            {"queries": None, "clients": "n/a", "gravity": []},
            {"queries": {"total": -5, "blocked": "abc", "percent_blocked": 250}},
            {"queries": {"total": "17", "percent_blocked": -3}},
            {"queries": {"total": float("nan"), "percent_blocked": float("inf")}},
            {"queries": {"total": True, "cached": None}, "clients": {"total": 3.7}},
        ],
    )
    def test_normalized_fields_within_bounds(self, payload) -> None:
        """Counters are >= 0 and the percentage is in [0, 100] for any input."""
        sample = Sample.from_api_response(payload, fetched_at=NOW)

        for name in (
            "total_queries",
            "queries_blocked",
            "domains_on_list",
            "forwarded",
            "cached_count",
            "unique_domains",
            "clients_total",
        ):
            value = getattr(sample, name)
            assert isinstance(value, int)
            assert value >= 0
        assert 0.0 <= sample.percentage_blocked <= 100.0

    def test_numeric_strings_are_accepted(self) -> None:
        payload = {"queries": {"total": "17", "percent_blocked": "4.5"}}

        sample = Sample.from_api_response(payload, fetched_at=NOW)

        assert sample.total_queries == 17
        assert sample.percentage_blocked == 4.5


class TestSampleState:
    """Tests for zero-state, age and serialization."""

    def test_zero_state(self) -> None:
        sample = Sample.zero_state()

        assert sample.fetched_at is None
        assert sample.is_zero_state
        assert sample.total_queries == 0
        assert sample.percentage_blocked == 0.0

    def test_age_minutes(self) -> None:
        sample = make_sample(minutes_ago=42)

        assert sample.age_minutes(NOW) == pytest.approx(42.0)

    def test_age_of_zero_state_is_none(self) -> None:
        assert Sample.zero_state().age_minutes(NOW) is None

    def test_json_uses_camel_case_schema(self) -> None:
        sample = make_sample(minutes_ago=5, cached_count=3)

        data = json.loads(sample.to_json())

        assert set(data) == {
            "fetchedAt",
            "totalQueries",
            "queriesBlocked",
            "percentageBlocked",
            "domainsOnList",
            "forwarded",
            "cachedCount",
            "uniqueDomains",
            "clientsTotal",
        }
        assert data["cachedCount"] == 3

    def test_from_json_accepts_persisted_entry(self) -> None:
        raw = json.dumps(
            {
                "fetchedAt": "2026-10-18T11:30:00.000Z",
                "totalQueries": 10,
                "percentageBlocked": 3.5,
            }
        )

        sample = Sample.from_json(raw)

        assert sample.fetched_at == NOW - timedelta(minutes=30)
        assert sample.total_queries == 10
        assert sample.clients_total == 0

    @pytest.mark.parametrize("fetched_at", [1e300, "99999999999999999999999", "yesterday-ish"])
    def test_out_of_range_timestamp_is_validation_error(self, fetched_at: object) -> None:
        raw = json.dumps({"fetchedAt": fetched_at, "totalQueries": 5})

        with pytest.raises(ValidationError, match="fetchedAt"):
            Sample.from_json(raw)

    def test_naive_timestamp_is_treated_as_utc(self) -> None:
        sample = Sample(fetched_at=datetime(2026, 10, 18, 12, 0))

        assert sample.fetched_at == NOW

    def test_sample_is_immutable(self) -> None:
        sample = make_sample()

        with pytest.raises(Exception):
            sample.total_queries = 5


class TestStatusResult:
    """Tests for StatusResult constructors and RefreshResult."""

    def test_ok_has_no_reason(self) -> None:
        result = StatusResult.ok()

        assert result.level == StatusLevel.OK
        assert result.reason is None
        assert result.params == {}

    def test_warning_carries_params(self) -> None:
        result = StatusResult.warning(StatusReason.TOO_FEW_CLIENTS, clients=1)

        assert result.level == StatusLevel.WARNING
        assert result.reason == StatusReason.TOO_FEW_CLIENTS
        assert result.params == {"clients": 1}

    def test_reason_values_are_machine_readable_tags(self) -> None:
        assert StatusReason.STALE_CACHE.value == "stale-cache"
        assert StatusReason.LOW_QUERY_DELTA.value == "low-query-delta"

    def test_refresh_result_defaults(self) -> None:
        result = RefreshResult(
            sample=Sample.zero_state(),
            is_live=False,
            status=StatusResult.error(StatusReason.OFFLINE),
        )

        assert result.error is None
