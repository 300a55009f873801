"""Health classification of Pi-hole samples."""

from pihole_monitor.analysis.evaluator import StatusEvaluator
from pihole_monitor.analysis.rules import DEFAULT_RULES, EvaluationContext, StatusRule
from pihole_monitor.analysis.thresholds import DEFAULT_THRESHOLDS, StatusThresholds

__all__ = [
    "DEFAULT_RULES",
    "DEFAULT_THRESHOLDS",
    "EvaluationContext",
    "StatusEvaluator",
    "StatusRule",
    "StatusThresholds",
]
