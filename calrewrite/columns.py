"""
Column role resolution.

The CSV export carries no schema; its first row holds human readable labels.
Each label is looked up in a fixed label table to find which column holds the
start date, the course, the teacher and so on.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Mapping

log = logging.getLogger(__name__)


def resolve_columns(header: Mapping[int, str], labels: Mapping[str, str]) -> Dict[str, int]:
    """
    Map column roles to column positions by exact label match.

    Unknown labels are ignored and roles without a label are left out.
    If two columns share a role, the rightmost one wins.
    """
    columns: Dict[str, int] = {}
    for position in sorted(header):
        role = labels.get(header[position])
        if role is not None:
            columns[role] = position
    return columns


def take_columns(rows: List[Dict[int, str]], labels: Mapping[str, str]) -> Dict[str, int]:
    """
    Remove the header row from rows and resolve it.
    """
    header = rows.pop(0) if rows else {}
    columns = resolve_columns(header, labels)

    missing = sorted(set(labels.values()) - set(columns))
    if missing:
        log.debug("no column found for roles: %s", ", ".join(missing))

    return columns
