"""
Parsing and serialization of the two source formats.

- calendar text  <-> icalendar.Calendar
- CSV text        -> list of rows, each {column position: value}

The CSV is read without a header: the label row is an ordinary row here and
is picked up later by calrewrite.columns.
"""

from __future__ import annotations

import csv
import io
from typing import Any, Dict, List

from icalendar import Calendar

from calrewrite.errors import ParseError


def parse_calendar(text: str) -> Calendar:
    try:
        return Calendar.from_ical(text)
    except ValueError as e:
        raise ParseError(f"Could not parse calendar: {e}")


def calendar_events(calendar: Calendar) -> List[Any]:
    """
    Return the top-level VEVENT components of a calendar.
    """
    return [c for c in calendar.subcomponents if c.name == "VEVENT"]


def serialize_calendar(calendar: Calendar) -> str:
    return calendar.to_ical().decode("utf-8")


def parse_table(text: str, skip_rows: int = 0) -> List[Dict[int, str]]:
    """
    Parse CSV text into rows of {column position: value}.

    Blank lines are ignored. The first skip_rows rows are dropped.
    """
    # A BOM would otherwise end up in the first header label
    if text.startswith("\ufeff"):
        text = text[1:]

    rows: List[Dict[int, str]] = []
    try:
        for record in csv.reader(io.StringIO(text)):
            if not record:
                continue
            rows.append({i: value.strip() for i, value in enumerate(record)})
    except csv.Error as e:
        raise ParseError(f"Could not parse CSV: {e}")

    return rows[skip_rows:]
