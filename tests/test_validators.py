import unittest
from datetime import datetime, timezone

from studio.shared.validators import ensure_utc, parse_instant


class TestParseInstant(unittest.TestCase):
    def test_zulu_suffix(self):
        self.assertEqual(
            parse_instant("2026-03-14T10:00:00Z"),
            datetime(2026, 3, 14, 10, tzinfo=timezone.utc),
        )

    def test_offset_is_converted(self):
        self.assertEqual(
            parse_instant("2026-03-14T06:00:00-04:00"),
            datetime(2026, 3, 14, 10, tzinfo=timezone.utc),
        )

    def test_naive_is_utc(self):
        self.assertEqual(
            parse_instant(" 2026-03-14T10:00:00 "),
            datetime(2026, 3, 14, 10, tzinfo=timezone.utc),
        )

    def test_rejects_garbage(self):
        for value in ["", "   ", None, "next tuesday", "2026-13-40T10:00:00Z"]:
            with self.assertRaises(ValueError):
                parse_instant(value)


class TestEnsureUtc(unittest.TestCase):
    def test_keeps_utc(self):
        value = datetime(2026, 3, 14, 10, tzinfo=timezone.utc)
        self.assertEqual(ensure_utc(value), value)
        self.assertIs(ensure_utc(datetime(2026, 3, 14, 10)).tzinfo, timezone.utc)
