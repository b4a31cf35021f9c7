"""Tests for the rich display module."""

import io
import re

from rich.console import Console

from intervalmap.core import IntervalMap
from intervalmap.display import (
    display_breakpoints,
    display_check_result,
    display_differences,
    display_error,
    display_fuzz_report,
    display_lookups,
    display_spinner_context,
)
from intervalmap.models import CanonicalityResult, FuzzReport, Mismatch


def _capture_console() -> tuple[Console, io.StringIO]:
    """Create a console that captures output to a string buffer.

    Returns:
        Tuple of (Console, StringIO buffer).
    """
    buf = io.StringIO()
    console = Console(file=buf, force_terminal=True, width=120)
    return console, buf


def _strip_ansi(text: str) -> str:
    """Remove ANSI escape codes from text.

    Args:
        text: Text potentially containing ANSI escape sequences.

    Returns:
        Plain text with all escape codes removed.
    """
    return re.sub(r"\x1b\[[0-9;]*m", "", text)


# --- display_breakpoints ---


class TestDisplayBreakpoints:
    """Tests for display_breakpoints."""

    def test_display_breakpoints_shows_intervals(self):
        """Test that each breakpoint is shown with its half-open interval."""
        console, buf = _capture_console()
        imap = IntervalMap("A")
        imap.assign(3, 5, "B")
        display_breakpoints(imap, title="example", console=console)
        output = _strip_ansi(buf.getvalue())
        assert "example" in output
        assert "[LOWEST, 3)" in output
        assert "[3, 5)" in output
        assert "[5, +inf)" in output
        assert "'B'" in output


# --- display_lookups ---


class TestDisplayLookups:
    """Tests for display_lookups."""

    def test_display_lookups_shows_pairs(self):
        """Test that each key and value is printed."""
        console, buf = _capture_console()
        display_lookups([(3, "B"), (7, "A")], console=console)
        output = _strip_ansi(buf.getvalue())
        assert "Lookups" in output
        assert "'B'" in output
        assert "7" in output

    def test_display_lookups_empty_prints_nothing(self):
        """Test that no table is printed without lookups."""
        console, buf = _capture_console()
        display_lookups([], console=console)
        assert buf.getvalue() == ""


# --- display_check_result ---


class TestDisplayCheckResult:
    """Tests for display_check_result."""

    def test_passed_result(self):
        """Test that a passing result reports the breakpoint count."""
        console, buf = _capture_console()
        result = CanonicalityResult(passed=True, violations=[], metrics={"breakpoints": 3})
        display_check_result(result, console=console)
        assert "Canonical: 3 breakpoints" in _strip_ansi(buf.getvalue())

    def test_failed_result_lists_violations(self):
        """Test that violations are listed for a failing result."""
        console, buf = _capture_console()
        result = CanonicalityResult(
            passed=False,
            violations=["breakpoints 3 and 5 both hold 'b'"],
            metrics={"breakpoints": 3},
        )
        display_check_result(result, console=console)
        output = _strip_ansi(buf.getvalue())
        assert "Not canonical" in output
        assert "both hold 'b'" in output


# --- display_differences ---


class TestDisplayDifferences:
    """Tests for display_differences."""

    def test_no_differences(self):
        """Test the matching message."""
        console, buf = _capture_console()
        display_differences([], console=console)
        assert "match" in _strip_ansi(buf.getvalue())

    def test_differences_listed(self):
        """Test that each difference is printed, including brackets."""
        console, buf = _capture_console()
        display_differences(["breakpoint [1]: expected x"], console=console)
        output = _strip_ansi(buf.getvalue())
        assert "differ" in output
        assert "breakpoint [1]: expected x" in output


# --- display_fuzz_report ---


class TestDisplayFuzzReport:
    """Tests for display_fuzz_report."""

    def test_passing_report_summary(self):
        """Test that the summary panel shows the seed and counts."""
        console, buf = _capture_console()
        report = FuzzReport(seed=99, rounds=10, assigns=9, empty_assigns=1, checks=50)
        display_fuzz_report(report, console=console)
        output = _strip_ansi(buf.getvalue())
        assert "Fuzz Report" in output
        assert "seed: 99" in output
        assert "assigns: 9 (empty: 1)" in output
        assert "Mismatches" not in output

    def test_failing_report_lists_mismatches(self):
        """Test that mismatches and violations are printed."""
        console, buf = _capture_console()
        report = FuzzReport(
            seed=1,
            rounds=10,
            mismatches=[Mismatch(round=2, key=-7, expected="a", actual="q")],
            canonicity_violations=["round 2: breakpoints 3 and 4 both hold 'a'"],
        )
        display_fuzz_report(report, console=console)
        output = _strip_ansi(buf.getvalue())
        assert "Mismatches (1)" in output
        assert "-7" in output
        assert "'q'" in output
        assert "round 2: breakpoints 3 and 4" in output


# --- display_error ---


class TestDisplayError:
    """Tests for display_error."""

    def test_display_error_shows_message(self):
        """Test that display_error prints the error message."""
        console, buf = _capture_console()
        display_error("something failed", console=console)
        assert "Error: something failed" in _strip_ansi(buf.getvalue())


# --- display_spinner_context ---


class TestDisplaySpinnerContext:
    """Tests for display_spinner_context."""

    def test_spinner_is_context_manager(self):
        """Test that the spinner can be entered and exited."""
        with display_spinner_context("working"):
            pass
