"""
Unit tests for projecting CSV rows into event records.
"""

import unittest
from datetime import datetime

from calrewrite.errors import MalformedTimestampError
from calrewrite.project import project_events

COLUMNS = {
    "startDate": 0,
    "startTime": 1,
    "stopDate": 2,
    "stopTime": 3,
    "course": 4,
    "person": 5,
    "type": 6,
    "text": 7,
}

ROW = {
    0: "2017-08-28",
    1: "08:15",
    2: "2017-08-28",
    3: "10:00",
    4: "MA1446 Linjär Algebra",
    5: "Anna Andersson",
    6: "Föreläsning",
    7: "DVACD16",
}


class TestProjectEvents(unittest.TestCase):
    def test_fields_are_read_by_role(self) -> None:
        (event,) = project_events([ROW], COLUMNS)
        self.assertEqual(event.start, datetime(2017, 8, 28, 8, 15))
        self.assertEqual(event.stop, datetime(2017, 8, 28, 10, 0))
        self.assertEqual(event.course, "MA1446 Linjär Algebra")
        self.assertEqual(event.person, "Anna Andersson")
        self.assertEqual(event.type, "Föreläsning")
        self.assertEqual(event.text, "DVACD16")

    def test_missing_roles_give_none(self) -> None:
        (event,) = project_events([ROW], COLUMNS)
        self.assertIsNone(event.room)
        self.assertIsNone(event.info)

    def test_row_order_is_kept(self) -> None:
        later = dict(ROW)
        later[0] = "2017-09-01"
        events = project_events([later, ROW], COLUMNS)
        self.assertEqual([e.start.day for e in events], [1, 28])

    def test_malformed_time_is_tolerated(self) -> None:
        bad = dict(ROW)
        bad[1] = "8.15"
        (event,) = project_events([bad], COLUMNS)
        self.assertIsNone(event.start)
        self.assertIsNotNone(event.stop)

    def test_malformed_time_raises_in_strict_mode(self) -> None:
        bad = dict(ROW)
        bad[0] = "28/08/2017"
        with self.assertRaises(MalformedTimestampError):
            project_events([bad], COLUMNS, strict=True)


if __name__ == "__main__":
    unittest.main()
