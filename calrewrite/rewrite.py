"""
Rewriting and filtering of calendar events.

Each calendar event gets its title and description from the paired CSV
record:

    SUMMARY:      "<type>: <course name>"  (or just "<course name>")
    DESCRIPTION:  "Lärare: ...\\nKurs: ...\\nInfo: ...\\nText:..."

The course name comes from the legend when the course field contains a
known course code. The filter rules then decide whether the event stays.
"""

from __future__ import annotations

import logging
import re
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple

from icalendar import Calendar

from calrewrite.config import RewriteConfig
from calrewrite.errors import MissingCourseError
from calrewrite.model import Decision, FilterRule, ProjectedEvent

log = logging.getLogger(__name__)


def resolve_course_name(course: str, codes: Mapping[str, str]) -> str:
    """
    Replace a course string by its legend description.

    Only the first known code found in the string is used. The raw string
    is returned when no code matches or the code has no description.
    """
    if not codes:
        return course

    expression = re.compile("|".join(re.escape(code) for code in codes))
    match = expression.search(course)
    if match is None:
        return course
    return codes.get(match.group(0)) or course


def build_summary(record: ProjectedEvent, codes: Mapping[str, str]) -> str:
    name = resolve_course_name(record.course or "", codes)
    if record.type:
        return f"{record.type}: {name}"
    return name


def build_description(record: ProjectedEvent, lines: Sequence[Tuple[str, str]]) -> str:
    """
    One "<prefix><value>" line per non-empty field, in the configured order.
    """
    parts: List[str] = []
    for name, prefix in lines:
        value = getattr(record, name)
        if value:
            parts.append(f"{prefix}{value}")
    return "\n".join(parts)


def decide(record: ProjectedEvent, rules: Sequence[FilterRule]) -> Tuple[Decision, Optional[FilterRule]]:
    """
    Return the decision of the first matching rule; INCLUDE if none match.
    """
    for rule in rules:
        if rule.matches(record):
            return rule.decision, rule
    return Decision.INCLUDE, None


def _set_text(block: Any, name: str, value: str) -> None:
    block.pop(name, None)
    block.add(name, value)


def rewrite_calendar(
    calendar: Calendar,
    pairs: Sequence[Tuple[Any, ProjectedEvent]],
    codes: Dict[str, str],
    config: RewriteConfig,
) -> Calendar:
    """
    Rewrite the paired events and rebuild the calendar's event list.

    Raises MissingCourseError before touching the calendar if any paired
    record has no course.
    """
    for _, record in pairs:
        if not record.course:
            raise MissingCourseError(f"Course is not available: {record!r}")

    kept: List[Any] = []
    excluded = 0

    for block, record in pairs:
        decision, rule = decide(record, config.rules)

        if decision is Decision.EXCLUDE:
            excluded += 1
            continue

        if decision is Decision.REWRITE and rule is not None and rule.title:
            summary = rule.title
        else:
            summary = build_summary(record, codes)

        _set_text(block, "SUMMARY", summary)
        _set_text(block, "DESCRIPTION", build_description(record, config.description_lines))
        kept.append(block)

    log.debug("kept %d events, excluded %d", len(kept), excluded)

    calendar.subcomponents = [c for c in calendar.subcomponents if c.name != "VEVENT"]
    for block in kept:
        calendar.add_component(block)

    return calendar
