"""Parse and replay YAML scripts of interval map assignments."""

import logging
from pathlib import Path
from typing import Any

import yaml

from intervalmap.core import IntervalMap
from intervalmap.limits import KeyLimits, resolve_limits
from intervalmap.models import ReplayScript

logger = logging.getLogger(__name__)


def parse_script(script_path: Path) -> ReplayScript:
    """Parse a YAML replay script and return a ReplayScript model.

    Args:
        script_path: Path to the YAML script file.

    Returns:
        ReplayScript populated from the YAML data.
    """
    data = yaml.safe_load(script_path.read_text())
    if not data:
        raise ValueError("Script file is empty")
    return ReplayScript(**data)


def resolve_key(raw: Any, limits: KeyLimits) -> Any:
    """Map the ``lowest``/``highest`` script keywords onto a key domain.

    Args:
        raw: Key as written in the script.
        limits: Key domain of the script.

    Returns:
        The concrete key.
    """
    if raw == "lowest":
        return limits.lowest
    if raw == "highest":
        return limits.highest
    if not limits.contains(raw):
        raise ValueError(
            f"Key {raw!r} is outside [{limits.lowest!r}, {limits.highest!r}]"
        )
    return raw


def replay_script(script: ReplayScript) -> IntervalMap:
    """Build an interval map and apply every operation of a script in order.

    Args:
        script: Parsed replay script.

    Returns:
        The resulting interval map.
    """
    limits = resolve_limits(script.limits)
    imap: IntervalMap = IntervalMap(script.initial, lowest=limits.lowest)
    for index, op in enumerate(script.operations):
        begin = resolve_key(op.begin, limits)
        end = resolve_key(op.end, limits)
        if not begin < end:
            logger.info("op %d: [%r, %r) is empty, skipped", index, begin, end)
        imap.assign(begin, end, op.value)
        logger.debug("op %d: %d breakpoints after assign", index, len(imap))
    return imap


def probe_lookups(
    imap: IntervalMap, script: ReplayScript, extra: list[int] | None = None
) -> list[tuple[Any, Any]]:
    """Look up every probe key of a script plus any extra keys.

    Args:
        imap: Interval map produced by ``replay_script``.
        script: Script providing the probe keys and key domain.
        extra: Additional keys, for example from the command line.

    Returns:
        List of ``(key, value)`` pairs in probe order.
    """
    limits = resolve_limits(script.limits)
    keys = [resolve_key(raw, limits) for raw in [*script.probes, *(extra or [])]]
    return [(key, imap[key]) for key in keys]


def compare_expected(imap: IntervalMap, script: ReplayScript) -> list[str]:
    """Describe differences between actual and expected breakpoints.

    Args:
        imap: Interval map produced by ``replay_script``.
        script: Script whose ``expected`` breakpoints are compared.

    Returns:
        List of difference messages; empty when nothing is expected or
        everything matches.
    """
    if script.expected is None:
        return []
    limits = resolve_limits(script.limits)
    expected = [(resolve_key(key, limits), value) for key, value in script.expected]
    actual = list(imap.breakpoints)

    differences: list[str] = []
    if len(actual) != len(expected):
        differences.append(
            f"expected {len(expected)} breakpoints, found {len(actual)}"
        )
    for index, (want, got) in enumerate(zip(expected, actual)):
        if want != got:
            differences.append(f"breakpoint {index}: expected {want!r}, found {got!r}")
    return differences
