from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Tuple

import requests

from calrewrite.errors import FetchError


log = logging.getLogger(__name__)


def fetch_text(url: str, timeout: float = 30.0) -> str:
    """
    GET url and return the response body as text.

    Raises FetchError on network failure or any status other than 200.
    """
    log.debug("fetching %s", url)
    try:
        resp = requests.get(url, timeout=timeout)
    except requests.RequestException as e:
        raise FetchError(f"Request to {url} failed: {e}", url)

    # Redirects are followed by requests; anything but OK is a failure here
    if resp.status_code != 200:
        raise FetchError(
            f"Expected response to be 'OK', was '{resp.status_code}'",
            url,
            status=resp.status_code,
        )

    # TimeEdit does not always declare a charset; the exports are UTF-8
    if resp.encoding is None or resp.encoding.lower() == "iso-8859-1":
        resp.encoding = "utf-8"
    return resp.text


def fetch_sources(calendar_url: str, table_url: str, timeout: float = 30.0) -> Tuple[str, str]:
    """
    Fetch the calendar and the CSV export in parallel.

    Returns (calendar_text, table_text). The first failure is raised.
    """
    with ThreadPoolExecutor(max_workers=2) as pool:
        ics_future = pool.submit(fetch_text, calendar_url, timeout)
        csv_future = pool.submit(fetch_text, table_url, timeout)
        return ics_future.result(), csv_future.result()
