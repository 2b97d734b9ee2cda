from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from numbers import Real
from typing import Any, Iterable, Iterator, List


@dataclass(frozen=True)
class GroupConfig:
    """Options for building a Group from an existing sequence.

    Attributes
    ----------
    copy_on_create:
        When ``True`` (default) the factory stores a private copy of the
        input. When ``False`` and the input is a ``list``, the group shares
        that list with the caller, so later external mutations are visible
        through the group.
    """

    copy_on_create: bool = True


def _is_nan(value: Any) -> bool:
    if isinstance(value, Decimal):
        return value.is_nan()
    if isinstance(value, Real) and not isinstance(value, bool):
        return bool(value != value)
    return False


def strict_equal(a: Any, b: Any) -> bool:
    """Return True if `a` and `b` are strictly equal.

    Booleans, numbers (``numbers.Real`` and ``Decimal``), strings and bytes
    compare by value, numbers across types (``1 == 1.0``); NaN of any
    numeric type is never equal, not even to itself. Everything else
    compares by identity.
    """
    if a is b:
        return not _is_nan(a)
    if isinstance(a, bool) or isinstance(b, bool):
        return isinstance(a, bool) and isinstance(b, bool) and a == b
    if isinstance(a, (Real, Decimal)) and isinstance(b, (Real, Decimal)):
        if _is_nan(a) or _is_nan(b):
            return False
        return bool(a == b)
    if isinstance(a, str) and isinstance(b, str):
        return a == b
    if isinstance(a, bytes) and isinstance(b, bytes):
        return a == b
    return False


class Group:
    """A collection of distinct values with linear-time membership tests.

    Elements are kept in insertion order in a plain list. ``add`` refuses
    elements that are already present; the constructor and
    :meth:`from_iterable` store their input as-is, duplicates included.
    """

    def __init__(self, elements: Iterable[Any] | None = None) -> None:
        self._content: List[Any] = [] if elements is None else list(elements)

    @classmethod
    def from_iterable(cls, elements: Iterable[Any], config: GroupConfig | None = None) -> Group:
        """Build a group holding `elements` (no de-duplication)."""
        if config is None:
            config = GroupConfig()

        group = cls()
        if not config.copy_on_create and isinstance(elements, list):
            group._content = elements
        else:
            group._content = list(elements)
        return group

    def has(self, element: Any) -> bool:
        for e in self._content:
            if strict_equal(e, element):
                return True
        return False

    def add(self, element: Any) -> None:
        if not self.has(element):
            self._content.append(element)

    def delete(self, element: Any) -> None:
        self._content = [e for e in self._content if not strict_equal(e, element)]

    def __contains__(self, element: Any) -> bool:
        return self.has(element)

    def __len__(self) -> int:
        return len(self._content)

    def __iter__(self) -> Iterator[Any]:
        # Snapshot taken here; later mutations do not leak into this iterator.
        return iter(tuple(self._content))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Group):
            return NotImplemented
        if len(self._content) != len(other._content):
            return False
        return all(strict_equal(a, b) for a, b in zip(self._content, other._content))

    def __repr__(self) -> str:
        return f"Group({self._content!r})"
