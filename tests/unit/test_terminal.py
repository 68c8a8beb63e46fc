"""Tests for terminal size, TTY detection and pager collaborators."""

from __future__ import annotations

import io
import os
import unittest
from unittest import mock

from recent import terminal


class TerminalSizeTests(unittest.TestCase):
    def test_reports_provider_size(self) -> None:
        provider = mock.Mock(return_value=os.terminal_size((132, 50)))

        self.assertEqual(terminal.terminal_size(provider), (132, 50))
        provider.assert_called_once_with((80, 24))

    def test_zero_dimensions_fall_back_to_defaults(self) -> None:
        provider = mock.Mock(return_value=os.terminal_size((0, 0)))

        self.assertEqual(terminal.terminal_size(provider), (80, 24))


class InteractivityTests(unittest.TestCase):
    def test_string_buffer_is_not_interactive(self) -> None:
        self.assertFalse(terminal.is_interactive(io.StringIO()))

    def test_tty_stream_is_interactive(self) -> None:
        stream = mock.Mock()
        stream.isatty.return_value = True

        self.assertTrue(terminal.is_interactive(stream))

    def test_closed_stream_is_not_interactive(self) -> None:
        stream = io.StringIO()
        stream.close()

        self.assertFalse(terminal.is_interactive(stream))


class PagerTests(unittest.TestCase):
    def test_should_page_only_when_lines_overflow(self) -> None:
        self.assertFalse(terminal.should_page(24, 24))
        self.assertTrue(terminal.should_page(25, 24))
        self.assertFalse(terminal.should_page(1, 24))

    def test_configured_pager_wins_over_environment(self) -> None:
        with mock.patch.dict(os.environ, {"PAGER": "more"}):
            self.assertEqual(terminal.resolve_pager_command("most -s"), ["most", "-s"])
            self.assertEqual(terminal.resolve_pager_command(None), ["more"])

    def test_blank_pager_values_fall_back_to_less(self) -> None:
        with mock.patch.dict(os.environ, {"PAGER": "  "}):
            self.assertEqual(terminal.resolve_pager_command(""), ["less", "-R"])
        with mock.patch.dict(os.environ, {}, clear=True):
            self.assertEqual(terminal.resolve_pager_command(None), ["less", "-R"])

    def test_launch_pager_pipes_text_to_command(self) -> None:
        with mock.patch("recent.terminal.subprocess.run") as run:
            error = terminal.launch_pager("Name\n", ["less", "-R"])

        self.assertIsNone(error)
        run.assert_called_once()
        self.assertEqual(run.call_args.args[0], ["less", "-R"])
        self.assertEqual(run.call_args.kwargs["input"], "Name\n")

    def test_launch_pager_reports_missing_binary(self) -> None:
        with mock.patch("recent.terminal.subprocess.run", side_effect=FileNotFoundError(2, "No such file")):
            error = terminal.launch_pager("Name\n", ["no-such-pager"])

        self.assertIsNotNone(error)
        self.assertIn("no-such-pager", error)


if __name__ == "__main__":
    unittest.main()
