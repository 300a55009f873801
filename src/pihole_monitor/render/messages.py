"""Message catalogs for the supported locales."""

from typing import Dict

MESSAGES: Dict[str, Dict[str, str]] = {
    "de_DE": {
        "title": "Pi-hole",
        "live": "Live",
        "cache": "Cache",
        "as_of": "Stand: {age}",
        "just_now": "gerade eben",
        "minutes_ago": "vor {n} Min",
        "hours_ago": "vor {n} Std",
        "days_ago": "vor {n} Tg",
        "no_timestamp": "kein Zeitstempel",
        "footer": "{badge} • letztes Update {time} • {age}",
        "next_refresh": "Nächste Aktualisierung {time}",
        "blocking_rate": "Blocking rate",
        "blocked": "Blocked",
        "total": "Total",
        "total_queries": "Total queries",
        "queries_blocked": "Queries blocked",
        "forwarded": "Forwarded",
        "cached": "Cached",
        "clients": "Clients",
        "unique_domains": "Unique domains",
        "domains_on_list": "Domains on list",
        "level.ok": "OK",
        "level.warning": "WARNUNG",
        "level.error": "FEHLER",
        "reason.none": "Alles in Ordnung",
        "reason.offline": "Pi-hole nicht erreichbar",
        "reason.stale-cache": "Letzte bekannte Werte aus dem Cache",
        "reason.no-query-activity": "Keine DNS-Anfragen",
        "reason.too-few-clients": "Nur {clients} Client(s) aktiv",
        "reason.low-query-delta": "Nur {delta} neue Anfragen seit dem letzten Abruf",
        "reason.zero-blocking-rate": "Es wird nichts geblockt",
        "notice.title": "Pi-hole nicht erreichbar",
        "notice.body": "Es werden die letzten bekannten Werte angezeigt.\n\nFehler: {error}",
    },
    "en_US": {
        "title": "Pi-hole",
        "live": "Live",
        "cache": "Cache",
        "as_of": "As of: {age}",
        "just_now": "just now",
        "minutes_ago": "{n} min ago",
        "hours_ago": "{n} h ago",
        "days_ago": "{n} d ago",
        "no_timestamp": "no timestamp",
        "footer": "{badge} • last update {time} • {age}",
        "next_refresh": "Next refresh {time}",
        "blocking_rate": "Blocking rate",
        "blocked": "Blocked",
        "total": "Total",
        "total_queries": "Total queries",
        "queries_blocked": "Queries blocked",
        "forwarded": "Forwarded",
        "cached": "Cached",
        "clients": "Clients",
        "unique_domains": "Unique domains",
        "domains_on_list": "Domains on list",
        "level.ok": "OK",
        "level.warning": "WARNING",
        "level.error": "ERROR",
        "reason.none": "All good",
        "reason.offline": "Pi-hole unreachable",
        "reason.stale-cache": "Showing last known values from cache",
        "reason.no-query-activity": "No DNS queries",
        "reason.too-few-clients": "Only {clients} client(s) active",
        "reason.low-query-delta": "Only {delta} new queries since the last fetch",
        "reason.zero-blocking-rate": "Nothing is being blocked",
        "notice.title": "Pi-hole unreachable",
        "notice.body": "Showing last known values.\n\nError: {error}",
    },
}

DEFAULT_LOCALE = "de_DE"


def catalog(locale: str) -> Dict[str, str]:
    """Message catalog for a locale, falling back to the default."""
    return MESSAGES.get(locale, MESSAGES[DEFAULT_LOCALE])
