"""
Central data model definitions used across the project.

This module defines the records that flow through the rewrite pipeline:
- ProjectedEvent: one CSV data row, typed by column role
- FilterRule / Decision: one step of the inclusion policy
- Options: the accumulator every pipeline stage reads from and adds to
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional


# Column roles understood by the projector
ROLES = (
    "startDate",
    "startTime",
    "stopDate",
    "stopTime",
    "course",
    "person",
    "room",
    "type",
    "text",
    "info",
)


@dataclass
class ProjectedEvent:
    """
    Represents one teaching event as described by a CSV data row.

    start/stop are None when the row's date or time could not be parsed.
    """

    start: Optional[datetime]
    stop: Optional[datetime]
    course: Optional[str]
    person: Optional[str]
    room: Optional[str]
    type: Optional[str]
    text: Optional[str]
    info: Optional[str]


class Decision(enum.Enum):
    INCLUDE = "include"
    EXCLUDE = "exclude"
    # include, but replace the title with the rule's fixed title
    REWRITE = "rewrite"


@dataclass
class FilterRule:
    """
    One step of the inclusion policy.

    A rule matches when every condition that is set is a substring of the
    corresponding event field. Matching is case sensitive.
    """

    decision: Decision
    course: Optional[str] = None
    type: Optional[str] = None
    text: Optional[str] = None
    title: Optional[str] = None

    def matches(self, event: ProjectedEvent) -> bool:
        for name in ("course", "type", "text"):
            needle = getattr(self, name)
            if needle is None:
                continue
            value = getattr(event, name)
            if not value or needle not in value:
                return False
        return True


@dataclass
class Options:
    """
    Accumulating state of one pipeline run.

    Each stage fills in its own fields and never clears the ones before it.
    """

    url: str
    calendar_url: Optional[str] = None
    table_url: Optional[str] = None
    ics: Optional[str] = None
    csv: Optional[str] = None
    calendar: Any = None
    rows: List[Dict[int, str]] = field(default_factory=list)
    columns: Optional[Dict[str, int]] = None
    course_codes: Optional[Dict[str, str]] = None
    events: Optional[List[ProjectedEvent]] = None
    sorted_blocks: Optional[List[Any]] = None
    output: Optional[str] = None
