"""Tests for absolute and relative modification-time formatting."""

from __future__ import annotations

import re
import unittest
from datetime import datetime, timedelta, timezone

from recent.errors import TimestampError
from recent.timefmt import ABSOLUTE_TIME_FORMAT, format_times, relative_phrase

NOW = datetime(2026, 3, 1, 12, 0, tzinfo=timezone.utc)
MINUTE = 60
HOUR = 60 * MINUTE
DAY = 24 * HOUR


def _ns(moment: datetime) -> int:
    return int(moment.timestamp()) * 1_000_000_000


class RelativePhraseTests(unittest.TestCase):
    def test_threshold_table(self) -> None:
        cases = [
            (0, "a few seconds ago"),
            (44, "a few seconds ago"),
            (45, "a minute ago"),
            (89, "a minute ago"),
            (90, "2 minutes ago"),
            (5 * MINUTE, "5 minutes ago"),
            (44 * MINUTE, "44 minutes ago"),
            (45 * MINUTE, "an hour ago"),
            (HOUR, "an hour ago"),
            (2 * HOUR, "2 hours ago"),
            (21 * HOUR, "21 hours ago"),
            (22 * HOUR, "a day ago"),
            (35 * HOUR, "a day ago"),
            (36 * HOUR, "2 days ago"),
            (3 * DAY, "3 days ago"),
            (25 * DAY, "25 days ago"),
            (26 * DAY, "a month ago"),
            (45 * DAY, "a month ago"),
            (46 * DAY, "2 months ago"),
            (319 * DAY, "10 months ago"),
            (320 * DAY, "a year ago"),
            (547 * DAY, "a year ago"),
            (548 * DAY, "2 years ago"),
            (3650 * DAY, "10 years ago"),
        ]
        for seconds, expected in cases:
            with self.subTest(seconds=seconds):
                self.assertEqual(relative_phrase(seconds), expected)

    def test_future_modification_reads_just_now(self) -> None:
        self.assertEqual(relative_phrase(-0.5), "just now")
        self.assertEqual(relative_phrase(-3 * DAY), "just now")


class FormatTimesTests(unittest.TestCase):
    def test_relative_phrase_is_measured_from_injected_now(self) -> None:
        _absolute, relative = format_times(NOW, _ns(NOW - timedelta(minutes=5)))

        self.assertEqual(relative, "5 minutes ago")

    def test_absolute_string_uses_local_time_and_fixed_layout(self) -> None:
        modified = NOW - timedelta(days=2, hours=3)

        absolute, _relative = format_times(NOW, _ns(modified))

        self.assertEqual(absolute, modified.astimezone().strftime(ABSOLUTE_TIME_FORMAT))
        self.assertRegex(absolute, re.compile(r"^\d{2}:\d{2}:\d{2} \d{2}-\S{3,}-\d{4}$"))

    def test_future_mtime_is_not_an_error(self) -> None:
        _absolute, relative = format_times(NOW, _ns(NOW + timedelta(hours=1)))

        self.assertEqual(relative, "just now")

    def test_naive_now_is_rejected(self) -> None:
        with self.assertRaises(TimestampError):
            format_times(datetime(2026, 3, 1, 12, 0), _ns(NOW))

    def test_unrepresentable_mtime_raises_timestamp_error(self) -> None:
        with self.assertRaises(TimestampError):
            format_times(NOW, 10**30)

    def test_timestamp_error_is_a_value_error(self) -> None:
        with self.assertRaises(ValueError):
            format_times(NOW, 10**30)


if __name__ == "__main__":
    unittest.main()
