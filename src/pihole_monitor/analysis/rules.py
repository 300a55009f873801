"""Ordered status rules.

The rules form a decision table evaluated top to bottom; the first rule
whose predicate holds produces the StatusResult. Order is significant:
offline handling comes before any check of the counters, and the client
count check shadows the query delta check.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Callable, List, Optional

from pihole_monitor.analysis.thresholds import StatusThresholds
from pihole_monitor.models import Sample, StatusReason, StatusResult


@dataclass(frozen=True)
class EvaluationContext:
    """Inputs of one evaluation."""

    current: Sample
    is_live: bool
    previous: Optional[Sample]
    now: datetime
    thresholds: StatusThresholds

    @property
    def current_age(self) -> Optional[float]:
        return self.current.age_minutes(self.now)

    @property
    def previous_age(self) -> Optional[float]:
        if self.previous is None:
            return None
        return self.previous.age_minutes(self.now)

    @property
    def query_delta(self) -> Optional[int]:
        if self.previous is None:
            return None
        return self.current.total_queries - self.previous.total_queries


@dataclass(frozen=True)
class StatusRule:
    """One row of the decision table.

    Attributes:
        name: Rule name for debugging and logs
        applies: Predicate over the evaluation context
        result: Builds the StatusResult when the predicate holds
    """

    name: str
    applies: Callable[[EvaluationContext], bool]
    result: Callable[[EvaluationContext], StatusResult]


def _age_params(ctx: EvaluationContext) -> dict:
    age = ctx.current_age
    return {} if age is None else {"age_minutes": round(age)}


def _is_stale(ctx: EvaluationContext) -> bool:
    age = ctx.current_age
    return age is not None and age >= ctx.thresholds.error_stale_minutes


def _has_low_query_delta(ctx: EvaluationContext) -> bool:
    """True when two recent samples show almost no new queries.

    Needs at least two clients and a previous sample that is older than
    the current time but within the delta window. A negative delta (counter
    reset) never matches.
    """
    if ctx.current.clients_total < 2:
        return False
    age = ctx.previous_age
    if age is None or not (0 < age <= ctx.thresholds.delta_window_minutes):
        return False
    delta = ctx.query_delta
    return delta is not None and 0 <= delta < ctx.thresholds.min_query_delta


DEFAULT_RULES: List[StatusRule] = [
    # Not live: data comes from the cache or is the zero-state
    StatusRule(
        name="offline_without_data",
        applies=lambda ctx: not ctx.is_live and ctx.current.fetched_at is None,
        result=lambda ctx: StatusResult.error(StatusReason.OFFLINE),
    ),
    StatusRule(
        name="offline_stale_cache",
        applies=lambda ctx: not ctx.is_live and _is_stale(ctx),
        result=lambda ctx: StatusResult.error(StatusReason.OFFLINE, **_age_params(ctx)),
    ),
    StatusRule(
        # Cached data is at best a warning, however fresh
        name="cached_data",
        applies=lambda ctx: not ctx.is_live,
        result=lambda ctx: StatusResult.warning(StatusReason.STALE_CACHE, **_age_params(ctx)),
    ),
    # Live
    StatusRule(
        name="no_query_activity",
        applies=lambda ctx: ctx.current.total_queries <= 0,
        result=lambda ctx: StatusResult.error(StatusReason.NO_QUERY_ACTIVITY),
    ),
    StatusRule(
        name="too_few_clients",
        applies=lambda ctx: ctx.current.clients_total <= ctx.thresholds.clients_warn_max,
        result=lambda ctx: StatusResult.warning(
            StatusReason.TOO_FEW_CLIENTS, clients=ctx.current.clients_total
        ),
    ),
    StatusRule(
        name="low_query_delta",
        applies=_has_low_query_delta,
        result=lambda ctx: StatusResult.warning(
            StatusReason.LOW_QUERY_DELTA, delta=ctx.query_delta
        ),
    ),
    StatusRule(
        name="zero_blocking_rate",
        applies=lambda ctx: ctx.current.percentage_blocked == 0,
        result=lambda ctx: StatusResult.warning(StatusReason.ZERO_BLOCKING_RATE),
    ),
    StatusRule(
        name="healthy",
        applies=lambda ctx: True,
        result=lambda ctx: StatusResult.ok(),
    ),
]
