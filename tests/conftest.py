import pytest

from intervalmap.core import IntervalMap
from intervalmap.limits import INT32


class Key:
    """Key type that supports only ``<``, ``==`` and hashing."""

    __slots__ = ("val",)

    def __init__(self, val: int) -> None:
        self.val = val

    def __lt__(self, other):
        if not isinstance(other, Key):
            return NotImplemented
        return self.val < other.val

    def __eq__(self, other):
        if not isinstance(other, Key):
            return NotImplemented
        return self.val == other.val

    def __hash__(self):
        return hash(self.val)

    def __le__(self, other):
        raise AssertionError("Key only supports <")

    def __gt__(self, other):
        raise AssertionError("Key only supports <")

    def __ge__(self, other):
        raise AssertionError("Key only supports <")

    def __repr__(self):
        return f"Key({self.val})"


class Val:
    """Value type that supports only ``==``."""

    __slots__ = ("val",)

    def __init__(self, val: str) -> None:
        self.val = val

    def __eq__(self, other):
        if not isinstance(other, Val):
            return NotImplemented
        return self.val == other.val

    def __repr__(self):
        return f"Val({self.val!r})"


KEY_MIN = Key(INT32.lowest)
KEY_MAX = Key(INT32.highest)


@pytest.fixture
def key_map():
    """Provide a map over restricted Key/Val types, constant ``'a'``.

    Returns:
        IntervalMap floored at the smallest int32 key.
    """
    return IntervalMap(Val("a"), lowest=KEY_MIN)


@pytest.fixture
def b_map(key_map):
    """Provide the ``'a'`` map with ``[10, 100)`` assigned ``'b'``.

    Args:
        key_map: Constant ``'a'`` map fixture.

    Returns:
        IntervalMap with breakpoints ``{min: 'a', 10: 'b', 100: 'a'}``.
    """
    key_map.assign(Key(10), Key(100), Val("b"))
    return key_map


@pytest.fixture
def script_data():
    """Provide a minimal replay script as a dict.

    Returns:
        Script data matching the reference example.
    """
    return {
        "name": "example",
        "description": "Constant A with [3, 5) set to B",
        "initial": "A",
        "operations": [{"begin": 3, "end": 5, "value": "B"}],
        "probes": [0, 2, 3, 4, 5],
        "expected": [["lowest", "A"], [3, "B"], [5, "A"]],
    }
