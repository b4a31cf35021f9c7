"""Piecewise-constant map from an ordered key domain to values."""

from typing import Any, Generic, TypeVar

from sortedcontainers import SortedDict

from intervalmap.limits import LOWEST

K = TypeVar("K")
V = TypeVar("V")


class IntervalMap(Generic[K, V]):
    """A total function over an ordered key domain stored as breakpoints.

    Each breakpoint ``(k, v)`` means the function equals ``v`` on
    ``[k, next breakpoint)``. The floor key is always present and no two
    adjacent breakpoints hold equal values, so the stored sequence is the
    unique minimal representation of the function.

    Keys are compared with ``<`` only and must be hashable; values are
    compared with ``==`` only. Instances are not safe for concurrent use.
    """

    def __init__(self, initial: V, lowest: K = LOWEST) -> None:
        """Associate the whole key domain with ``initial``.

        Args:
            initial: Value of the function everywhere.
            lowest: Floor of the key domain. Defaults to a sentinel that
                orders below every key.
        """
        self._lowest = lowest
        self._breakpoints: SortedDict = SortedDict()
        self._breakpoints[lowest] = initial

    @property
    def lowest(self) -> K:
        return self._lowest

    @property
    def breakpoints(self) -> tuple[tuple[K, V], ...]:
        """Snapshot of the stored ``(key, value)`` pairs in key order."""
        return tuple(self._breakpoints.items())

    def lookup(self, key: K) -> V:
        """Return the value of the greatest breakpoint not above ``key``.

        Args:
            key: Key to look up.

        Returns:
            The function's value at ``key``.

        Raises:
            KeyError: If ``key`` orders below the floor of the domain.
        """
        index = self._breakpoints.bisect_right(key)
        if index == 0:
            raise KeyError(key)
        return self._breakpoints.peekitem(index - 1)[1]

    def __getitem__(self, key: K) -> V:
        return self.lookup(key)

    def assign(self, begin: K, end: K, value: V) -> None:
        """Set the function to ``value`` on ``[begin, end)``.

        When ``not (begin < end)`` the interval is empty and the call does
        nothing. Callers that need to detect that case test it themselves.

        Args:
            begin: First key of the interval (inclusive).
            end: End of the interval (exclusive).
            value: Value to assign.

        Raises:
            KeyError: If ``begin`` orders below the floor of the domain.
        """
        if not begin < end:
            return
        if begin < self._lowest:
            raise KeyError(begin)

        breakpoints = self._breakpoints
        end_value = self.lookup(end)

        # A breakpoint at ``end`` is dropped too; it is restored below when
        # the value really changes there.
        for key in list(breakpoints.irange(begin, end)):
            del breakpoints[key]

        index = breakpoints.bisect_left(begin)
        if index == 0 or breakpoints.peekitem(index - 1)[1] != value:
            breakpoints[begin] = value

        if end_value != value:
            breakpoints[end] = end_value

    def __len__(self) -> int:
        return len(self._breakpoints)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, IntervalMap):
            return NotImplemented
        return self.breakpoints == other.breakpoints

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        pairs = ", ".join(f"{k!r}: {v!r}" for k, v in self._breakpoints.items())
        return f"{type(self).__name__}({{{pairs}}})"
