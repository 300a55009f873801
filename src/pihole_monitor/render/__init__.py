"""Presentation of refresh results (text layouts, localization)."""

from pihole_monitor.render.formatting import (
    age_text,
    failure_notice,
    format_int,
    format_pct,
    format_time,
    status_text,
)
from pihole_monitor.render.options import RenderOptions
from pihole_monitor.render.renderer import Renderer, next_refresh_at

__all__ = [
    "RenderOptions",
    "Renderer",
    "age_text",
    "failure_notice",
    "format_int",
    "format_pct",
    "format_time",
    "next_refresh_at",
    "status_text",
]
