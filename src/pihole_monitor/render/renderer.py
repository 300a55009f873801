"""Text renderer for refresh results using Jinja2 templates.

Purely presentational: takes a RefreshResult and a form factor and
returns text. Nothing here feeds back into the refresh cycle.
"""

from datetime import datetime, timedelta
from typing import Any, Dict, Optional, Union

from jinja2 import DictLoader, Environment, StrictUndefined

from pihole_monitor.models import FormFactor, RefreshResult
from pihole_monitor.render.formatting import (
    age_text,
    format_int,
    format_pct,
    format_time,
    status_text,
)
from pihole_monitor.render.messages import catalog
from pihole_monitor.render.options import RenderOptions
from pihole_monitor.render.templates import TEMPLATES
from pihole_monitor.utils.timestamps import utc_now

COLUMN_WIDTH = 20


def next_refresh_at(now: datetime, hours: float) -> datetime:
    """Time at which the next scheduled refresh is due."""
    return now + timedelta(hours=hours)


class Renderer:
    """Renders RefreshResults into small, medium or large text layouts.

    Attributes:
        options: Immutable presentation settings
        env: Jinja2 Environment with the bundled templates
    """

    def __init__(self, options: Optional[RenderOptions] = None) -> None:
        self.options = options or RenderOptions()
        self.env = Environment(
            loader=DictLoader(TEMPLATES),
            undefined=StrictUndefined,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )
        self.env.filters["col"] = lambda value, width=COLUMN_WIDTH: str(value).ljust(width)

    def _build_context(self, result: RefreshResult, now: datetime) -> Dict[str, Any]:
        locale = self.options.locale
        messages = catalog(locale)
        sample = result.sample
        badge = messages["live"] if result.is_live else messages["cache"]
        age = age_text(sample.fetched_at, locale, now=now)
        next_refresh = format_time(
            next_refresh_at(now, self.options.refresh_hours), self.options.display_timezone
        )

        return {
            "m": messages,
            "badge": badge,
            "as_of": messages["as_of"].format(age=age),
            "status_line": status_text(result.status, locale),
            "pct": format_pct(sample.percentage_blocked, locale),
            "total": format_int(sample.total_queries, locale),
            "blocked": format_int(sample.queries_blocked, locale),
            "forwarded": format_int(sample.forwarded, locale),
            "cached": format_int(sample.cached_count, locale),
            "clients": format_int(sample.clients_total, locale),
            "unique_domains": format_int(sample.unique_domains, locale),
            "domains_on_list": format_int(sample.domains_on_list, locale),
            "footer": messages["footer"].format(
                badge=badge,
                time=format_time(sample.fetched_at, self.options.display_timezone),
                age=age,
            ),
            "next_refresh": messages["next_refresh"].format(time=next_refresh),
        }

    def render(
        self,
        result: RefreshResult,
        form_factor: Union[FormFactor, str] = FormFactor.MEDIUM,
        now: Optional[datetime] = None,
    ) -> str:
        """Render a refresh result.

        Args:
            result: Output of a refresh cycle
            form_factor: small, medium or large
            now: Reference time for relative ages (defaults to now)

        Returns:
            Rendered text ending with a single newline
        """
        form_factor = FormFactor(form_factor)
        template = self.env.get_template(f"{form_factor.value}.txt")
        text = template.render(**self._build_context(result, now or utc_now()))
        return text.rstrip() + "\n"
