"""
The rewrite pipeline.

Every stage takes the Options record of the run, adds its own fields and
hands it on:

    parse_url -> fetch -> parse_ics -> parse_csv -> get_rules
      -> get_course_codes -> get_events -> sort_events -> finalize_events

Any error ends the run; no partial calendar is produced.
"""

from __future__ import annotations

import logging
from typing import Callable, List, Optional

from calrewrite.align import pair_events, sort_blocks, sort_records
from calrewrite.columns import take_columns
from calrewrite.config import RewriteConfig
from calrewrite.feeds import calendar_events, parse_calendar, parse_table, serialize_calendar
from calrewrite.fetch import fetch_sources
from calrewrite.legend import take_course_codes
from calrewrite.model import Options
from calrewrite.project import project_events
from calrewrite.rewrite import rewrite_calendar
from calrewrite.urls import resolve_url

log = logging.getLogger(__name__)

Stage = Callable[[Options, RewriteConfig], Options]


def parse_url(options: Options, config: RewriteConfig) -> Options:
    log.debug("parsing url")
    urls = resolve_url(options.url, config.host)
    options.calendar_url = urls.calendar
    options.table_url = urls.table
    return options


def fetch(options: Options, config: RewriteConfig) -> Options:
    log.debug("fetching ics and csv")
    options.ics, options.csv = fetch_sources(options.calendar_url, options.table_url, config.timeout)
    return options


def parse_ics(options: Options, config: RewriteConfig) -> Options:
    log.debug("parsing ics")
    options.calendar = parse_calendar(options.ics)
    return options


def parse_csv(options: Options, config: RewriteConfig) -> Options:
    log.debug("parsing csv")
    options.rows = parse_table(options.csv, skip_rows=config.skip_rows)
    return options


def get_rules(options: Options, config: RewriteConfig) -> Options:
    log.debug("getting rules")
    options.columns = take_columns(options.rows, config.labels)
    return options


def get_course_codes(options: Options, config: RewriteConfig) -> Options:
    log.debug("getting course codes")
    options.course_codes = take_course_codes(options.rows)
    log.debug("found %d course codes", len(options.course_codes))
    return options


def get_events(options: Options, config: RewriteConfig) -> Options:
    log.debug("getting events")
    options.events = project_events(options.rows, options.columns, strict=config.strict_timestamps)
    return options


def sort_events(options: Options, config: RewriteConfig) -> Options:
    log.debug("sorting events")
    options.sorted_blocks = sort_blocks(calendar_events(options.calendar))
    options.events = sort_records(options.events)
    return options


def finalize_events(options: Options, config: RewriteConfig) -> Options:
    log.debug("finalizing events")
    pairs = pair_events(options.sorted_blocks, options.events)
    calendar = rewrite_calendar(options.calendar, pairs, options.course_codes, config)
    options.output = serialize_calendar(calendar)
    return options


STAGES: List[Stage] = [
    parse_url,
    fetch,
    parse_ics,
    parse_csv,
    get_rules,
    get_course_codes,
    get_events,
    sort_events,
    finalize_events,
]


def run_stages(options: Options, config: RewriteConfig, stages: List[Stage] = STAGES) -> Options:
    for stage in stages:
        options = stage(options, config)
    return options


def run_pipeline(url: str, config: Optional[RewriteConfig] = None) -> str:
    """
    Fetch, rewrite and serialize the calendar published at url.
    """
    options = run_stages(Options(url=url), config or RewriteConfig())
    return options.output
