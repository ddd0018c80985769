"""
Ordering and pairing of calendar events with CSV records.

The calendar and the CSV describe the same events but list them in different
orders and share no key. Both are sorted by start time and then paired by
position; this only works if neither source has events the other lacks.
"""

from __future__ import annotations

import logging
from datetime import date, datetime, time
from typing import Any, List, Optional, Tuple

from calrewrite.model import ProjectedEvent

log = logging.getLogger(__name__)


def _sort_key(moment: Optional[datetime]) -> Tuple[int, float]:
    # Events without a usable start go last
    if moment is None:
        return (1, 0.0)
    return (0, moment.timestamp())


def block_start(block: Any) -> Optional[datetime]:
    """
    Start of a VEVENT as a datetime, or None if it has none.

    All-day events (DATE values) start at midnight. An unreadable DTSTART
    counts as no start.
    """
    prop = block.get("DTSTART")
    if prop is None:
        return None
    try:
        value = prop.dt
    except ValueError:
        # Unreadable DTSTART values are kept by icalendar as broken properties
        return None
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime.combine(value, time.min)
    return None


def sort_blocks(blocks: List[Any]) -> List[Any]:
    return sorted(blocks, key=lambda b: _sort_key(block_start(b)))


def sort_records(records: List[ProjectedEvent]) -> List[ProjectedEvent]:
    return sorted(records, key=lambda r: _sort_key(r.start))


def pair_events(blocks: List[Any], records: List[ProjectedEvent]) -> List[Tuple[Any, ProjectedEvent]]:
    """
    Pair sorted blocks and records by position, up to the shorter length.
    """
    if len(blocks) != len(records):
        log.warning(
            "calendar has %d events but CSV has %d rows; %d left unpaired",
            len(blocks),
            len(records),
            abs(len(blocks) - len(records)),
        )
    return list(zip(blocks, records))
