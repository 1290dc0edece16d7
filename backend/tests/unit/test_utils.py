"""
Unit tests for shared/utils.py

Tests date parsing utilities and run summary printing.
"""

import unittest
from datetime import datetime, timezone
from unittest.mock import patch

from models.run import RunResult, RunStatus
from shared.utils import parse_datetime, print_run_summary


class TestParseDatetime(unittest.TestCase):
    """Tests for parse_datetime() function."""

    def test_parse_iso_with_z(self):
        result = parse_datetime("2026-01-24T10:00:00Z")

        self.assertEqual(result, datetime(2026, 1, 24, 10, 0, tzinfo=timezone.utc))

    def test_parse_microseconds(self):
        """TheNewsAPI style timestamps."""
        result = parse_datetime("2026-01-24T08:30:00.000000Z")

        self.assertEqual(result.hour, 8)
        self.assertEqual(result.minute, 30)

    def test_parse_verbose_format(self):
        result = parse_datetime("January 24, 2026")

        self.assertEqual(result.date().isoformat(), "2026-01-24")

    def test_empty_and_none(self):
        self.assertIsNone(parse_datetime(None))
        self.assertIsNone(parse_datetime(""))

    def test_invalid_date(self):
        self.assertIsNone(parse_datetime("banana"))


class TestPrintRunSummary(unittest.TestCase):
    """Tests for print_run_summary() function."""

    @patch("builtins.print")
    def test_prints_counts(self, mock_print):
        result = RunResult(
            run_id="abc123",
            status=RunStatus.SUCCEEDED,
            provider="NewsAPI",
            articles_fetched=3,
            notifications_generated=2,
            emails_sent=2,
            failed_providers=["TheNewsAPI"],
            started_at=datetime(2026, 1, 24, 12, 0),
            finished_at=datetime(2026, 1, 24, 12, 1),
        )

        print_run_summary(result)

        output = " ".join(str(call[0][0]) for call in mock_print.call_args_list if call[0])
        self.assertIn("abc123", output)
        self.assertIn("succeeded", output)
        self.assertIn("NewsAPI", output)
        self.assertIn("✓ Articles:      3", output)
        self.assertIn("✗ Failed providers: TheNewsAPI", output)

    @patch("builtins.print")
    def test_omits_failed_providers_when_none(self, mock_print):
        result = RunResult(run_id="x", started_at=datetime(2026, 1, 24))

        print_run_summary(result)

        output = " ".join(str(call[0][0]) for call in mock_print.call_args_list if call[0])
        self.assertNotIn("Failed providers", output)


if __name__ == "__main__":
    unittest.main()
