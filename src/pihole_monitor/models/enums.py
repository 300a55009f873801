"""Shared enumerations for the Pi-hole Monitor models."""

from enum import Enum


class StatusLevel(str, Enum):
    """Health classification of the appliance."""

    OK = "ok"
    WARNING = "warning"
    ERROR = "error"


class StatusReason(str, Enum):
    """Machine-readable reason attached to a non-OK status."""

    OFFLINE = "offline"
    STALE_CACHE = "stale-cache"
    NO_QUERY_ACTIVITY = "no-query-activity"
    TOO_FEW_CLIENTS = "too-few-clients"
    LOW_QUERY_DELTA = "low-query-delta"
    ZERO_BLOCKING_RATE = "zero-blocking-rate"


class FormFactor(str, Enum):
    """Size class requested by the rendering consumer."""

    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"
