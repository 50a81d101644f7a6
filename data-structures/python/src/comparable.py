"""
Comparable - the value contract stored by the binary search tree.

Any item placed in the tree must be able to compare itself against a probe
value, expose its current value, and accept an update when an equal item is
inserted again. `Item` is a generic implementation driven by plain functions;
`string_item`, `int_item` and `float_item` are ready-made adapters.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Optional

LT = -1
EQ = 0
GT = 1

CompareFunc = Callable[[Any, Any], float]
UpdateFunc = Callable[[Any, Any], Any]


def sign(result: float) -> int:
    """Collapse any negative / zero / positive comparison result to LT / EQ / GT."""
    if result < EQ:
        return LT
    if result > EQ:
        return GT
    return EQ


class Comparable(ABC):
    @abstractmethod
    def compare(self, other: Any) -> int:
        """
        Compare the stored value against `other`.

        Returns:
            A negative number if the stored value is less than `other`, zero if
            equal, positive if greater. Callers only look at the sign.
        """

    @abstractmethod
    def value(self) -> Any:
        """Return the stored value."""

    @abstractmethod
    def update(self, with_value: Any) -> None:
        """
        Called on the stored item when an equal item is inserted.

        Implementations may replace the stored value or ignore the call.
        """


class Item(Comparable):
    """Comparable whose behaviour is defined by the functions it is built with."""

    def __init__(
        self,
        value: Any,
        comparer: CompareFunc,
        updater: Optional[UpdateFunc] = None,
    ) -> None:
        """
        Args:
            value: Value to store
            comparer: comparer(this, to) returning a negative, zero or positive
                number; required
            updater: updater(this, with_value) returning the new stored value;
                when omitted, update() is a no-op
        """
        if comparer is None or not callable(comparer):
            raise ValueError("comparer is required")
        self._value = value
        self._comparer = comparer
        self._updater = updater

    def compare(self, other: Any) -> int:
        return sign(self._comparer(self._value, other))

    def value(self) -> Any:
        return self._value

    def update(self, with_value: Any) -> None:
        if self._updater is None:
            return
        self._value = self._updater(self._value, with_value)

    def __repr__(self) -> str:
        return f"Item({self._value!r})"


def string_item(value: str, ignore_case: bool = False) -> Item:
    """Wrap a string; probes are compared through str(), optionally case-folded."""

    def compare_strings(this: str, to: Any) -> int:
        left, right = this, str(to)
        if ignore_case:
            left, right = left.lower(), right.lower()
        if left < right:
            return LT
        if left > right:
            return GT
        return EQ

    return Item(value, compare_strings)


def _difference(this: float, to: float) -> float:
    return this - to


def int_item(value: int) -> Item:
    return Item(value, _difference)


def float_item(value: float) -> Item:
    return Item(value, _difference)
