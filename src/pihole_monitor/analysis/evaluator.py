"""Status evaluator for classifying appliance health.

Applies the ordered rule table to the current sample, the liveness flag,
and the previous cached sample. Evaluation has no side effects besides a
debug log line and never raises for valid samples.
"""

from datetime import datetime
from typing import Callable, List, Optional

import structlog

from pihole_monitor.analysis.rules import DEFAULT_RULES, EvaluationContext, StatusRule
from pihole_monitor.analysis.thresholds import DEFAULT_THRESHOLDS, StatusThresholds
from pihole_monitor.models import Sample, StatusResult
from pihole_monitor.utils.timestamps import utc_now

logger = structlog.get_logger(__name__)


class StatusEvaluator:
    """First-match evaluator over an ordered list of StatusRules."""

    def __init__(
        self,
        thresholds: Optional[StatusThresholds] = None,
        clock: Callable[[], datetime] = utc_now,
        rules: Optional[List[StatusRule]] = None,
    ):
        """Initialize the evaluator.

        Args:
            thresholds: Custom thresholds. Defaults to DEFAULT_THRESHOLDS.
            clock: Source of "now" for age computations.
            rules: Rule table. Defaults to DEFAULT_RULES.
        """
        self._thresholds = thresholds or DEFAULT_THRESHOLDS
        self._clock = clock
        self._rules = list(rules) if rules is not None else DEFAULT_RULES

    @property
    def thresholds(self) -> StatusThresholds:
        return self._thresholds

    def evaluate(
        self,
        current: Sample,
        is_live: bool,
        previous: Optional[Sample] = None,
        now: Optional[datetime] = None,
    ) -> StatusResult:
        """Classify the appliance.

        Args:
            current: Sample shown to the user (live, cached, or zero-state)
            is_live: Whether this cycle's fetch succeeded end-to-end
            previous: Cached sample loaded before this cycle, if any
            now: Evaluation time, defaults to the evaluator's clock

        Returns:
            StatusResult of the first matching rule
        """
        ctx = EvaluationContext(
            current=current,
            is_live=is_live,
            previous=previous,
            now=now or self._clock(),
            thresholds=self._thresholds,
        )
        for rule in self._rules:
            if rule.applies(ctx):
                status = rule.result(ctx)
                logger.debug(
                    "status_evaluated",
                    rule=rule.name,
                    level=status.level.value,
                    reason=status.reason.value if status.reason else None,
                )
                return status
        return StatusResult.ok()
