"""
CSV rows -> ProjectedEvent records.
"""

from __future__ import annotations

from datetime import datetime
from typing import Dict, List, Mapping, Optional

from calrewrite.errors import MalformedTimestampError
from calrewrite.model import ProjectedEvent


def _timestamp(date: Optional[str], time: Optional[str], strict: bool = False) -> Optional[datetime]:
    """
    Combine 'YYYY-MM-DD' and 'HH:MM' into a naive local datetime.

    Returns None for missing or malformed input unless strict is set.
    """
    value = f"{date}T{time}:00"
    try:
        if not date or not time:
            raise ValueError("missing date or time")
        return datetime.strptime(value, "%Y-%m-%dT%H:%M:%S")
    except ValueError:
        if strict:
            raise MalformedTimestampError(f"Invalid timestamp: {value!r}")
        return None


def project_event(row: Mapping[int, str], columns: Mapping[str, int], strict: bool = False) -> ProjectedEvent:
    def cell(role: str) -> Optional[str]:
        position = columns.get(role)
        if position is None:
            return None
        return row.get(position)

    return ProjectedEvent(
        start=_timestamp(cell("startDate"), cell("startTime"), strict),
        stop=_timestamp(cell("stopDate"), cell("stopTime"), strict),
        course=cell("course"),
        person=cell("person"),
        room=cell("room"),
        type=cell("type"),
        text=cell("text"),
        info=cell("info"),
    )


def project_events(
    rows: List[Dict[int, str]],
    columns: Mapping[str, int],
    strict: bool = False,
) -> List[ProjectedEvent]:
    """
    Build one record per data row, keeping row order.
    """
    return [project_event(row, columns, strict) for row in rows]
