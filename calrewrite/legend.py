"""
Course code legend.

The CSV export has one row whose single cell lists every course in the
schedule, e.g.:

    MA1446, Analys 2, FY1420, Fysik, mekanik och vågrörelselära

There is no escaping and descriptions may contain commas, so the cell is
split on the course codes themselves.

Known limitation: a description that contains a code shaped substring is cut
off at that substring.
"""

from __future__ import annotations

import re
from typing import Dict, List, Optional

from calrewrite.errors import EmptyLegendError


# Course codes are always two uppercase letters and four digits
COURSE_CODE = re.compile(r"[A-Z]{2}[0-9]{4}")
CODE_LENGTH = 6


def extract_course_codes(cell: Optional[str]) -> Dict[str, str]:
    """
    Split a legend cell into {course code: description}.
    """
    if cell is None:
        raise EmptyLegendError("Expected a course code legend, found none")

    codes: Dict[str, str] = {}

    # Skip anything in front of the first code, e.g. "Kurs: "
    first = COURSE_CODE.search(cell)
    rest = cell[first.start():] if first else ""

    while rest:
        code = rest[:CODE_LENGTH]
        # Code is followed by ", "
        rest = rest[CODE_LENGTH:].lstrip(", ")

        following = COURSE_CODE.search(rest)
        if following is None:
            codes[code] = rest.strip()
            rest = ""
        else:
            # Description is followed by ", " before the next code
            codes[code] = rest[: following.start()].strip().rstrip(",").strip()
            rest = rest[following.start():]

    return codes


def take_course_codes(rows: List[Dict[int, str]]) -> Dict[str, str]:
    """
    Remove the legend row from rows and extract its course codes.
    """
    if not rows:
        raise EmptyLegendError("Expected a course code legend, found none")
    return extract_course_codes(rows.pop(0).get(0))
