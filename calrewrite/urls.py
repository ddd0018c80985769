"""
Source URL handling.

A TimeEdit schedule is published twice under the same path:

    https://se.timeedit.net/web/bth/db1/sched1/ri1234.ics
    https://se.timeedit.net/web/bth/db1/sched1/ri1234.csv

Only the calendar URL is given; the CSV URL is derived from it.
"""

from __future__ import annotations

from dataclasses import dataclass
from urllib.parse import unquote, urlparse

from calrewrite.errors import InvalidUrlError, UntrustedSourceError


CALENDAR_SUFFIX = ".ics"
TABLE_SUFFIX = ".csv"


@dataclass
class SourceUrls:
    calendar: str
    table: str


def resolve_url(raw: str, expected_host: str) -> SourceUrls:
    """
    Validate a calendar URL and derive the companion CSV URL.

    Raises:
        InvalidUrlError: the URL cannot be decoded or parsed, or has no .ics path
        UntrustedSourceError: the host is not expected_host
    """
    try:
        decoded = unquote(str(raw).strip(), errors="strict")
        # Subscription links are often published as webcal://
        if decoded.lower().startswith("webcal://"):
            decoded = "https://" + decoded[len("webcal://"):]
        parsed = urlparse(decoded)
        hostname = parsed.hostname
    except (UnicodeDecodeError, ValueError):
        raise InvalidUrlError(f"Expected a correct URL, was: {raw}")

    if parsed.scheme not in ("http", "https") or not hostname:
        raise InvalidUrlError(f"Expected a correct URL, was: {raw}")

    if hostname != expected_host:
        raise UntrustedSourceError(f"Expected a {expected_host} URL, was: {raw}")

    if not parsed.path.endswith(CALENDAR_SUFFIX):
        raise InvalidUrlError(f"Expected a URL to an {CALENDAR_SUFFIX} file, was: {raw}")

    table_path = parsed.path[: -len(CALENDAR_SUFFIX)] + TABLE_SUFFIX
    return SourceUrls(
        calendar=parsed.geturl(),
        table=parsed._replace(path=table_path).geturl(),
    )
