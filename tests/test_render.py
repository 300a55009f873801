"""Tests for locale formatting and text layouts."""

import math
from datetime import timedelta

import pytest

from helpers import NOW, make_sample
from pihole_monitor.models import (
    FormFactor,
    RefreshResult,
    Sample,
    StatusReason,
    StatusResult,
)
from pihole_monitor.render import (
    Renderer,
    RenderOptions,
    age_text,
    failure_notice,
    format_int,
    format_pct,
    format_time,
    next_refresh_at,
    status_text,
)
from pihole_monitor.render.renderer import COLUMN_WIDTH


class TestFormatInt:
    """Thousands grouping."""

    def test_german_grouping(self) -> None:
        assert format_int(1234567, "de_DE") == "1.234.567"

    def test_english_grouping(self) -> None:
        assert format_int(1234567, "en_US") == "1,234,567"

    def test_small_number(self) -> None:
        assert format_int(42) == "42"

    @pytest.mark.parametrize("value", [None, "n/a"])
    def test_invalid_is_zero(self, value: object) -> None:
        assert format_int(value) == "0"


class TestFormatPct:
    """Percentage with one decimal."""

    def test_german_decimal_comma(self) -> None:
        assert format_pct(23.44, "de_DE") == "23,4 %"

    def test_english_decimal_point(self) -> None:
        assert format_pct(23.44, "en_US") == "23.4 %"

    def test_zero(self) -> None:
        assert format_pct(0) == "0,0 %"

    @pytest.mark.parametrize("value", [None, "abc", math.nan, math.inf])
    def test_placeholder(self, value: object) -> None:
        assert format_pct(value) == "–"


class TestAgeText:
    """Relative age buckets."""

    @pytest.mark.parametrize(
        "delta, expected",
        [
            (timedelta(seconds=20), "gerade eben"),
            (timedelta(seconds=30), "vor 1 Min"),
            (timedelta(minutes=5), "vor 5 Min"),
            (timedelta(minutes=59, seconds=20), "vor 59 Min"),
            (timedelta(minutes=59, seconds=40), "vor 1 Std"),
            (timedelta(minutes=90), "vor 2 Std"),
            (timedelta(hours=47), "vor 47 Std"),
            (timedelta(hours=48), "vor 2 Tg"),
            (timedelta(days=5), "vor 5 Tg"),
        ],
    )
    def test_german_buckets(self, delta: timedelta, expected: str) -> None:
        assert age_text(NOW - delta, "de_DE", now=NOW) == expected

    def test_english(self) -> None:
        assert age_text(NOW - timedelta(minutes=5), "en_US", now=NOW) == "5 min ago"

    def test_missing_timestamp(self) -> None:
        assert age_text(None, "de_DE", now=NOW) == "kein Zeitstempel"

    def test_future_timestamp_is_just_now(self) -> None:
        assert age_text(NOW + timedelta(minutes=3), "de_DE", now=NOW) == "gerade eben"

    def test_unknown_locale_falls_back(self) -> None:
        assert age_text(None, "fr_FR", now=NOW) == "kein Zeitstempel"


class TestFormatTime:
    """Clock times."""

    def test_utc(self) -> None:
        assert format_time(NOW) == "12:00"

    def test_display_timezone(self) -> None:
        assert format_time(NOW, "Europe/Berlin") == "14:00"

    def test_missing(self) -> None:
        assert format_time(None) == "–"


class TestStatusText:
    """Localized status line."""

    def test_ok(self) -> None:
        assert status_text(StatusResult.ok()) == "OK: Alles in Ordnung"

    def test_parameterized_reason(self) -> None:
        status = StatusResult.warning(StatusReason.TOO_FEW_CLIENTS, clients=1)
        assert status_text(status) == "WARNUNG: Nur 1 Client(s) aktiv"

    def test_english_delta(self) -> None:
        status = StatusResult.warning(StatusReason.LOW_QUERY_DELTA, delta=3)
        assert status_text(status, "en_US") == (
            "WARNING: Only 3 new queries since the last fetch"
        )

    def test_error(self) -> None:
        status = StatusResult.error(StatusReason.OFFLINE)
        assert status_text(status) == "FEHLER: Pi-hole nicht erreichbar"

    def test_missing_params_keep_template(self) -> None:
        status = StatusResult.warning(StatusReason.TOO_FEW_CLIENTS)
        assert status_text(status) == "WARNUNG: Nur {clients} Client(s) aktiv"


class TestFailureNotice:
    """Interactive failure notice."""

    def test_contains_error(self) -> None:
        notice = failure_notice("Login failed HTTP 401: unauthorized")
        assert notice.startswith("Pi-hole nicht erreichbar\n")
        assert notice.endswith("Fehler: Login failed HTTP 401: unauthorized")

    def test_english(self) -> None:
        assert "Error: boom" in failure_notice("boom", "en_US")


def test_next_refresh_at() -> None:
    assert next_refresh_at(NOW, 6) == NOW + timedelta(hours=6)


def live_result(**fields) -> RefreshResult:
    sample = make_sample(
        minutes_ago=5,
        total_queries=12345,
        queries_blocked=2345,
        percentage_blocked=18.99,
        domains_on_list=150000,
        forwarded=6000,
        cached_count=4000,
        unique_domains=890,
        clients_total=9,
        **fields,
    )
    return RefreshResult(sample=sample, is_live=True, status=StatusResult.ok())


class TestRenderer:
    """Layouts rendered through the Jinja2 templates."""

    def test_medium_german(self) -> None:
        text = Renderer().render(live_result(), FormFactor.MEDIUM, now=NOW)
        lines = text.splitlines()

        assert lines[0] == "Pi-hole  [Live]"
        assert lines[1] == "Stand: vor 5 Min"
        assert lines[2] == "OK: Alles in Ordnung"
        assert "19,0 %" in lines
        assert "Total queries".ljust(COLUMN_WIDTH) + "Queries blocked" in lines
        assert "12.345".ljust(COLUMN_WIDTH) + "2.345" in lines
        assert "Domains on list: 150.000" in lines

    def test_small_has_percentage_and_counts(self) -> None:
        text = Renderer().render(live_result(), "small", now=NOW)

        assert "19,0 %" in text
        assert "Blocked: 2.345" in text
        assert "Total: 12.345" in text
        assert "Forwarded" not in text

    def test_large_english_with_footer(self) -> None:
        options = RenderOptions(locale="en_US", display_timezone="Europe/Berlin", refresh_hours=6)
        text = Renderer(options).render(live_result(), FormFactor.LARGE, now=NOW)
        lines = text.splitlines()

        assert lines[1] == "As of: 5 min ago"
        assert "Forwarded".ljust(COLUMN_WIDTH) + "Cached" in lines
        assert "6,000".ljust(COLUMN_WIDTH) + "4,000" in lines
        assert "9".ljust(COLUMN_WIDTH) + "890" in lines
        assert "Live • last update 13:55 • 5 min ago" in lines
        assert lines[-1] == "Next refresh 20:00"

    def test_cache_badge_and_status(self) -> None:
        result = RefreshResult(
            sample=make_sample(minutes_ago=20),
            is_live=False,
            status=StatusResult.warning(StatusReason.STALE_CACHE),
            error="Network is unreachable",
        )

        text = Renderer().render(result, now=NOW)

        assert text.startswith("Pi-hole  [Cache]\n")
        assert "WARNUNG: Letzte bekannte Werte aus dem Cache" in text
        assert "Network is unreachable" not in text

    def test_zero_state(self) -> None:
        result = RefreshResult(
            sample=Sample.zero_state(),
            is_live=False,
            status=StatusResult.error(StatusReason.OFFLINE),
        )

        text = Renderer().render(result, FormFactor.LARGE, now=NOW)

        assert "Stand: kein Zeitstempel" in text
        assert "0,0 %" in text
        assert "Cache • letztes Update – • kein Zeitstempel" in text
        assert "FEHLER: Pi-hole nicht erreichbar" in text

    @pytest.mark.parametrize("form_factor", list(FormFactor))
    def test_single_trailing_newline(self, form_factor: FormFactor) -> None:
        text = Renderer().render(live_result(), form_factor, now=NOW)

        assert text.endswith("\n")
        assert not text.endswith("\n\n")

    def test_unknown_form_factor(self) -> None:
        with pytest.raises(ValueError):
            Renderer().render(live_result(), "huge", now=NOW)

    def test_options_from_settings(self, settings) -> None:
        settings = settings.model_copy(update={"locale": "en_US", "refresh_hours": 2})

        options = RenderOptions.from_settings(settings)

        assert options == RenderOptions(locale="en_US", display_timezone="UTC", refresh_hours=2)
