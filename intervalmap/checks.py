"""Canonical-form checks for interval map breakpoint sequences."""

from typing import Any, Iterable

from intervalmap.core import IntervalMap
from intervalmap.models import CanonicalityResult


def check_canonical(imap: IntervalMap) -> CanonicalityResult:
    """Check an interval map's stored breakpoints for canonical form.

    Args:
        imap: Interval map to inspect.

    Returns:
        CanonicalityResult with pass/fail status and violations.
    """
    return check_breakpoints(imap.breakpoints, imap.lowest)


def check_breakpoints(
    breakpoints: Iterable[tuple[Any, Any]], lowest: Any
) -> CanonicalityResult:
    """Check a ``(key, value)`` sequence for canonical form.

    Args:
        breakpoints: Breakpoints in stored order.
        lowest: Floor key that must open the sequence.

    Returns:
        CanonicalityResult with pass/fail status and violations.
    """
    pairs = list(breakpoints)
    violations: list[str] = []
    metrics: dict = {"breakpoints": len(pairs)}
    for checker in _CHECKERS:
        checker(pairs, lowest, violations)
    metrics["distinct_values"] = _count_distinct(value for _, value in pairs)
    return CanonicalityResult(
        passed=len(violations) == 0, violations=violations, metrics=metrics
    )


def _chk_floor(pairs: list, lowest: Any, v: list) -> None:
    """Check the sequence is non-empty and starts at the floor.

    Args:
        pairs: Breakpoint pairs.
        lowest: Floor key.
        v: Violations list.
    """
    if not pairs:
        v.append("breakpoint sequence is empty")
        return
    first = pairs[0][0]
    if first < lowest or lowest < first:
        v.append(f"first breakpoint {first!r} is not the floor {lowest!r}")


def _chk_ascending(pairs: list, lowest: Any, v: list) -> None:
    """Check keys are strictly ascending.

    Args:
        pairs: Breakpoint pairs.
        lowest: Floor key.
        v: Violations list.
    """
    for index in range(len(pairs) - 1):
        left, right = pairs[index][0], pairs[index + 1][0]
        if not left < right:
            v.append(f"breakpoint {right!r} does not follow {left!r} in key order")


def _chk_adjacent_values(pairs: list, lowest: Any, v: list) -> None:
    """Check no two consecutive breakpoints hold equal values.

    Args:
        pairs: Breakpoint pairs.
        lowest: Floor key.
        v: Violations list.
    """
    for index in range(len(pairs) - 1):
        (left_key, left_value), (right_key, right_value) = pairs[index], pairs[index + 1]
        if left_value == right_value:
            v.append(
                f"breakpoints {left_key!r} and {right_key!r} both hold {left_value!r}"
            )


_CHECKERS = [
    _chk_floor,
    _chk_ascending,
    _chk_adjacent_values,
]


def _count_distinct(values: Iterable[Any]) -> int:
    """Count distinct values using equality only.

    Args:
        values: Values to count.

    Returns:
        Number of pairwise-unequal values.
    """
    seen: list[Any] = []
    for value in values:
        if not any(value == other for other in seen):
            seen.append(value)
    return len(seen)
