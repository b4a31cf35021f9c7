"""Randomized differential testing of IntervalMap against a point table."""

import logging
import random

from intervalmap.checks import check_canonical
from intervalmap.config import FuzzConfig
from intervalmap.core import IntervalMap
from intervalmap.models import FuzzReport, Mismatch

logger = logging.getLogger(__name__)

# Share of inverted draws kept as-is to exercise the empty-interval no-op.
EMPTY_RANGE_RATE = 0.05


def run_fuzz(config: FuzzConfig, rng: random.Random | None = None) -> FuzzReport:
    """Apply random assigns and compare every recorded key with a brute-force table.

    Each round draws a key range and a value, records probe keys inside the
    range and anywhere in the key range, assigns, then checks the boundary
    keys around the range, every recorded key, and canonical form.

    Args:
        config: Key range, value range, round count and seed.
        rng: Optional random generator override for tests.

    Returns:
        FuzzReport summarizing the run.
    """
    seed = config.seed if config.seed is not None else random.randrange(2**32)
    rng = rng or random.Random(seed)
    imap: IntervalMap[int, str] = IntervalMap(config.initial_value)
    table: dict[int, str] = {}
    report = FuzzReport(seed=seed, rounds=config.rounds)

    for round_index in range(config.rounds):
        begin = rng.randint(config.key_min, config.key_max)
        end = rng.randint(config.key_min, config.key_max)
        value = chr(rng.randint(ord(config.value_min), ord(config.value_max)))
        if end < begin and rng.random() >= EMPTY_RANGE_RATE:
            begin, end = end, begin

        if not begin < end:
            _run_empty_round(imap, round_index, begin, end, value, report)
            continue

        _record_probes(imap, table, rng, config, begin, end, value)
        before = _boundary_values(imap, begin, end)
        imap.assign(begin, end, value)
        after = _boundary_values(imap, begin, end)
        report.assigns += 1

        report.mismatches.extend(
            _compare_boundaries(round_index, before, after, begin, end, value)
        )
        report.mismatches.extend(_verify_table(round_index, imap, table))
        report.checks += len(table)

        result = check_canonical(imap)
        report.canonicity_violations.extend(
            f"round {round_index}: {violation}" for violation in result.violations
        )
        report.max_breakpoints = max(report.max_breakpoints, len(imap))
        logger.debug(
            "round %d: [%d, %d) -> %r, %d breakpoints",
            round_index, begin, end, value, len(imap),
        )

    logger.info(
        "seed %d: %d assigns, %d empty, %d checks, %d mismatches",
        seed, report.assigns, report.empty_assigns, report.checks,
        len(report.mismatches),
    )
    return report


def _run_empty_round(
    imap: IntervalMap, round_index: int, begin: int, end: int, value: str,
    report: FuzzReport,
) -> None:
    """Assign an empty or inverted range and check nothing changed.

    Args:
        imap: Interval map under test.
        round_index: Current round number.
        begin: Range start, not below ``end``.
        end: Range end.
        value: Value passed to assign.
        report: Report to update.
    """
    snapshot = imap.breakpoints
    imap.assign(begin, end, value)
    report.empty_assigns += 1
    if imap.breakpoints != snapshot:
        report.canonicity_violations.append(
            f"round {round_index}: empty range [{begin}, {end}) changed the map"
        )


def _record_probes(
    imap: IntervalMap, table: dict[int, str], rng: random.Random,
    config: FuzzConfig, begin: int, end: int, value: str,
) -> None:
    """Update the brute-force table for an assign that is about to happen.

    Args:
        imap: Interval map before the assign.
        table: Brute-force table of expected values, updated in place.
        rng: Random generator.
        config: Fuzz settings.
        begin: Range start.
        end: Range end (exclusive).
        value: Value about to be assigned.
    """
    for key in table:
        if begin <= key < end:
            table[key] = value
    for _ in range(config.probes_per_round):
        table[rng.randint(begin, end - 1)] = value
    for _ in range(config.probes_per_round):
        key = rng.randint(config.key_min, config.key_max)
        if begin <= key < end:
            table[key] = value
        else:
            table.setdefault(key, imap[key])


def _boundary_keys(begin: int, end: int) -> list[int]:
    """Return the keys that straddle both edges of ``[begin, end)``.

    Args:
        begin: Range start.
        end: Range end (exclusive).

    Returns:
        Sorted unique keys around both boundaries.
    """
    keys = {begin - 1, begin, end - 1, end, end + 1}
    if begin + 1 < end:
        keys.add(begin + 1)
    return sorted(keys)


def _boundary_values(imap: IntervalMap, begin: int, end: int) -> dict[int, str]:
    """Look up every boundary key of a range.

    Args:
        imap: Interval map to read.
        begin: Range start.
        end: Range end (exclusive).

    Returns:
        Mapping of boundary key to looked-up value.
    """
    return {key: imap[key] for key in _boundary_keys(begin, end)}


def _compare_boundaries(
    round_index: int, before: dict[int, str], after: dict[int, str],
    begin: int, end: int, value: str,
) -> list[Mismatch]:
    """Compare boundary values before and after an assign.

    Args:
        round_index: Current round number.
        before: Boundary values before the assign.
        after: Boundary values after the assign.
        begin: Range start.
        end: Range end (exclusive).
        value: Assigned value.

    Returns:
        Mismatches for keys that changed outside the range or kept a stale
        value inside it.
    """
    mismatches: list[Mismatch] = []
    for key, actual in after.items():
        expected = value if begin <= key < end else before[key]
        if actual != expected:
            mismatches.append(
                Mismatch(round=round_index, key=key, expected=expected, actual=actual)
            )
    return mismatches


def _verify_table(
    round_index: int, imap: IntervalMap, table: dict[int, str]
) -> list[Mismatch]:
    """Check every recorded key of the brute-force table against the map.

    Args:
        round_index: Current round number.
        imap: Interval map under test.
        table: Expected values per key.

    Returns:
        One Mismatch per differing key.
    """
    return [
        Mismatch(round=round_index, key=key, expected=expected, actual=imap[key])
        for key, expected in sorted(table.items())
        if imap[key] != expected
    ]
