"""
Unit tests for sorting and pairing.
"""

import unittest
from datetime import date, datetime

from icalendar import Event

from calrewrite.align import block_start, pair_events, sort_blocks, sort_records
from calrewrite.feeds import calendar_events, parse_calendar
from calrewrite.model import ProjectedEvent


def _block(uid: str, start: object = None) -> Event:
    ev = Event()
    ev.add("uid", uid)
    if start is not None:
        ev.add("dtstart", start)
    return ev


def _record(course: str, start: object) -> ProjectedEvent:
    return ProjectedEvent(start, None, course, None, None, None, None, None)


class TestSortBlocks(unittest.TestCase):
    def test_ascending_by_start(self) -> None:
        blocks = [
            _block("b", datetime(2017, 8, 29, 8, 0)),
            _block("a", datetime(2017, 8, 28, 8, 0)),
            _block("c", datetime(2017, 8, 29, 13, 0)),
        ]
        self.assertEqual([str(b["UID"]) for b in sort_blocks(blocks)], ["a", "b", "c"])

    def test_sorting_sorted_input_is_noop(self) -> None:
        blocks = [
            _block("a", datetime(2017, 8, 28, 8, 0)),
            _block("b", datetime(2017, 8, 28, 8, 0)),
            _block("c", datetime(2017, 8, 29, 8, 0)),
        ]
        once = sort_blocks(blocks)
        self.assertEqual(once, blocks)
        self.assertEqual(sort_blocks(once), once)

    def test_all_day_and_missing_start(self) -> None:
        blocks = [_block("none"), _block("day", date(2017, 8, 28)), _block("morning", datetime(2017, 8, 27, 9, 0))]
        self.assertEqual([str(b["UID"]) for b in sort_blocks(blocks)], ["morning", "day", "none"])
        self.assertEqual(block_start(blocks[1]), datetime(2017, 8, 28, 0, 0))
        self.assertIsNone(block_start(blocks[0]))

    def test_unreadable_start_sorts_last(self) -> None:
        ics = "\r\n".join(
            [
                "BEGIN:VCALENDAR",
                "VERSION:2.0",
                "PRODID:-//TimeEdit//EN",
                "BEGIN:VEVENT",
                "UID:broken",
                "DTSTART:garbage",
                "END:VEVENT",
                "BEGIN:VEVENT",
                "UID:ok",
                "DTSTART:20170828T080000Z",
                "END:VEVENT",
                "END:VCALENDAR",
                "",
            ]
        )
        blocks = calendar_events(parse_calendar(ics))
        self.assertIsNone(block_start(blocks[0]))
        self.assertEqual([str(b["UID"]) for b in sort_blocks(blocks)], ["ok", "broken"])


class TestSortRecords(unittest.TestCase):
    def test_ascending_and_stable(self) -> None:
        records = [
            _record("late", datetime(2017, 9, 1, 8, 0)),
            _record("tie-1", datetime(2017, 8, 28, 8, 0)),
            _record("broken", None),
            _record("tie-2", datetime(2017, 8, 28, 8, 0)),
        ]
        ordered = sort_records(records)
        self.assertEqual([r.course for r in ordered], ["tie-1", "tie-2", "late", "broken"])

        starts = [r.start for r in ordered if r.start is not None]
        self.assertEqual(starts, sorted(starts))


class TestPairEvents(unittest.TestCase):
    def test_pairs_by_position(self) -> None:
        pairs = pair_events(["x", "y"], [_record("a", None), _record("b", None)])
        self.assertEqual([(b, r.course) for b, r in pairs], [("x", "a"), ("y", "b")])

    def test_mismatch_pairs_up_to_shorter_and_warns(self) -> None:
        with self.assertLogs("calrewrite.align", level="WARNING"):
            pairs = pair_events(["x", "y", "z"], [_record("a", None)])
        self.assertEqual(len(pairs), 1)


if __name__ == "__main__":
    unittest.main()
