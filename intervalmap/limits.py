"""Key-domain floors and ceilings for interval maps."""

from dataclasses import dataclass
from typing import Any


class _Bound:
    """Sentinel key that orders strictly below or above every other key.

    Ordinary keys compare against a bound through Python's reflected
    comparisons, so ``3 < HIGHEST`` and ``LOWEST < "a"`` both hold without
    the key type knowing about bounds.
    """

    __slots__ = ("_name", "_below")

    def __init__(self, name: str, below: bool) -> None:
        self._name = name
        self._below = below

    def __lt__(self, other: Any) -> bool:
        return other is not self and self._below

    def __gt__(self, other: Any) -> bool:
        return other is not self and not self._below

    def __le__(self, other: Any) -> bool:
        return other is self or self._below

    def __ge__(self, other: Any) -> bool:
        return other is self or not self._below

    def __eq__(self, other: Any) -> bool:
        return other is self

    def __hash__(self) -> int:
        return hash(self._name)

    def __repr__(self) -> str:
        return self._name

    def __copy__(self) -> "_Bound":
        return self

    def __deepcopy__(self, memo: dict) -> "_Bound":
        return self


LOWEST = _Bound("LOWEST", below=True)
HIGHEST = _Bound("HIGHEST", below=False)


@dataclass(frozen=True)
class KeyLimits:
    """Smallest and largest representable key of a key domain.

    Attributes:
        lowest: Floor of the domain, always present as a breakpoint.
        highest: Largest representable key.
    """

    lowest: Any
    highest: Any

    def contains(self, key: Any) -> bool:
        """Return True when ``lowest <= key <= highest``.

        Args:
            key: Key to test, compared with ``<`` only.

        Returns:
            Whether the key lies inside the domain.
        """
        return not key < self.lowest and not self.highest < key


UNBOUNDED = KeyLimits(LOWEST, HIGHEST)
INT32 = KeyLimits(-(2**31), 2**31 - 1)
INT64 = KeyLimits(-(2**63), 2**63 - 1)

_NAMED_LIMITS = {
    "unbounded": UNBOUNDED,
    "int32": INT32,
    "int64": INT64,
}


def resolve_limits(name: str) -> KeyLimits:
    """Look up a named key domain.

    Args:
        name: One of ``unbounded``, ``int32`` or ``int64``.

    Returns:
        The matching KeyLimits preset.
    """
    limits = _NAMED_LIMITS.get(name.lower())
    if limits is None:
        raise ValueError(f"Unknown key limits: {name}")
    return limits
