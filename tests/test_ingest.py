"""
Ingestion: single timestamps, start/stop ranges, layouts, malformed lines.
"""
import io
import sys
import unittest
from datetime import datetime, timezone
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from punchcard.analysis import When
from punchcard.ingest import LineParseError, expand_range, ingest_lines, parse_line

MONDAY, SUNDAY = 0, 6


class TestParseLine(unittest.TestCase):
    def test_single_timestamp(self):
        # 2023-01-02 is a Monday
        self.assertEqual(parse_line("2023-01-02 09:00:00 +0000\n"), [When(MONDAY, 9)])

    def test_range_is_stop_exclusive(self):
        line = "2023-01-02 08:00:00 +0000\t2023-01-02 11:00:00 +0000"
        self.assertEqual(
            parse_line(line), [When(MONDAY, 8), When(MONDAY, 9), When(MONDAY, 10)]
        )

    def test_range_steps_whole_hours_from_start(self):
        line = "2023-01-02 08:30:00 +0000\t2023-01-02 10:15:00 +0000"
        self.assertEqual(
            parse_line(line), [When(MONDAY, 8), When(MONDAY, 9), When(MONDAY, 10)]
        )

    def test_range_within_one_hour_counts_that_hour(self):
        line = "2023-01-02 08:30:00 +0000\t2023-01-02 08:45:00 +0000"
        self.assertEqual(parse_line(line), [When(MONDAY, 8)])

    def test_expand_range_starts_on_the_hour(self):
        start = datetime(2023, 1, 2, 8, 30, 15, 500, tzinfo=timezone.utc)
        stop = datetime(2023, 1, 2, 10, 0, tzinfo=timezone.utc)
        self.assertEqual([t.hour for t in expand_range(start, stop)], [8, 9])
        self.assertEqual(list(expand_range(stop, start)), [])

    def test_range_crosses_midnight(self):
        line = "2023-01-08 23:00:00 +0000\t2023-01-09 01:00:00 +0000"
        self.assertEqual(parse_line(line), [When(SUNDAY, 23), When(MONDAY, 0)])

    def test_empty_or_reversed_range(self):
        self.assertEqual(parse_line("2023-01-02 11:00:00 +0000\t2023-01-02 11:00:00 +0000"), [])
        self.assertEqual(parse_line("2023-01-02 11:00:00 +0000\t2023-01-02 08:00:00 +0000"), [])
        self.assertEqual(parse_line("2023-01-02 08:45:00 +0000\t2023-01-02 08:30:00 +0000"), [])

    def test_uses_timestamp_offset(self):
        self.assertEqual(parse_line("2023-01-02 01:00:00 +0200"), [When(MONDAY, 1)])

    def test_custom_layout_and_delimiter(self):
        line = "2023-01-02T08:00:00,2023-01-02T10:00:00"
        keys = parse_line(line, layout="%Y-%m-%dT%H:%M:%S", delimiter=",")
        self.assertEqual(keys, [When(MONDAY, 8), When(MONDAY, 9)])

    def test_blank_line(self):
        self.assertEqual(parse_line("   \n"), [])

    def test_malformed(self):
        for line in ("yesterday", "2023-01-02 09:00:00", "a\tb\tc"):
            with self.assertRaises(LineParseError):
                parse_line(line)


class TestIngest(unittest.TestCase):
    def test_same_instant_twice(self):
        b = ingest_lines(["2023-01-02 09:00:00 +0000\n", "2023-01-02 09:00:00 +0000\n"])
        self.assertEqual(b.count((MONDAY, 9)), 2)
        self.assertEqual(b.sum(), 2)
        self.assertEqual(b.max(), 2)
        self.assertEqual(b.normalized()[When(MONDAY, 9)], 1.0)

    def test_range_line(self):
        b = ingest_lines(io.StringIO("2023-01-02 08:00:00 +0000\t2023-01-02 11:00:00 +0000\n"))
        self.assertEqual([b.count((MONDAY, h)) for h in (7, 8, 9, 10, 11)], [0, 1, 1, 1, 0])

    def test_bad_lines_are_logged_and_skipped(self):
        lines = ["garbage\n", "2023-01-02 09:00:00 +0000\n", "2023-13-02 09:00:00 +0000\n"]
        with self.assertLogs("punchcard.ingest", level="WARNING") as logs:
            b = ingest_lines(lines)
        self.assertEqual(b.sum(), 1)
        self.assertEqual(len(logs.records), 2)
        self.assertIn("line 1", logs.output[0])
        self.assertIn("line 3", logs.output[1])

    def test_read_errors_propagate(self):
        def broken():
            yield "2023-01-02 09:00:00 +0000\n"
            raise OSError("device gone")

        with self.assertRaises(OSError):
            ingest_lines(broken())


if __name__ == "__main__":
    unittest.main()
