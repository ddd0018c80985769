"""
Unit tests for calendar and CSV parsing.
"""

import unittest

from calrewrite.errors import ParseError
from calrewrite.feeds import calendar_events, parse_calendar, parse_table, serialize_calendar

ICS = "\r\n".join(
    [
        "BEGIN:VCALENDAR",
        "VERSION:2.0",
        "PRODID:-//TimeEdit//EN",
        "BEGIN:VEVENT",
        "UID:1@timeedit",
        "DTSTART:20170829T080000Z",
        "DTEND:20170829T100000Z",
        "SUMMARY:MA1446",
        "END:VEVENT",
        "BEGIN:VEVENT",
        "UID:2@timeedit",
        "DTSTART:20170828T080000Z",
        "DTEND:20170828T100000Z",
        "SUMMARY:FY1420",
        "END:VEVENT",
        "END:VCALENDAR",
        "",
    ]
)


class TestParseCalendar(unittest.TestCase):
    def test_events_are_found(self) -> None:
        cal = parse_calendar(ICS)
        events = calendar_events(cal)
        self.assertEqual([str(e["SUMMARY"]) for e in events], ["MA1446", "FY1420"])

    def test_serialize_keeps_events(self) -> None:
        text = serialize_calendar(parse_calendar(ICS))
        self.assertEqual(text.count("BEGIN:VEVENT"), 2)
        self.assertIn("UID:1@timeedit", text)

    def test_garbage_raises_parse_error(self) -> None:
        with self.assertRaises(ParseError):
            parse_calendar("this is not a calendar")


class TestParseTable(unittest.TestCase):
    def test_rows_are_keyed_by_position(self) -> None:
        rows = parse_table('Startdatum,Kurs\n2017-08-28,"MA1446, Analys"\n')
        self.assertEqual(rows, [{0: "Startdatum", 1: "Kurs"}, {0: "2017-08-28", 1: "MA1446, Analys"}])

    def test_blank_lines_and_bom_are_ignored(self) -> None:
        rows = parse_table("\ufeffKurs\n\nMA1446\n")
        self.assertEqual(rows, [{0: "Kurs"}, {0: "MA1446"}])

    def test_skip_rows_drops_preamble(self) -> None:
        rows = parse_table("2017-08-28 - 2018-01-14\nKurs\nMA1446\n", skip_rows=1)
        self.assertEqual(rows[0], {0: "Kurs"})


if __name__ == "__main__":
    unittest.main()
