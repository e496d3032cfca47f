"""Ordered sets and lists of string elements, with their text forms."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Union

Element = Union[str, tuple]


class DuplicateElementError(ValueError):
    """Raised when an element is added to a set that already holds it."""


def _normalise(item: object) -> Element:
    if isinstance(item, str):
        return item
    if isinstance(item, (list, tuple)):
        return tuple(_normalise(part) for part in item)
    raise TypeError(f"unsupported set element: {item!r}")


class ElementSet:
    """A set that keeps its elements in insertion order.

    Elements are strings or tuples of strings (such as transitions).
    """

    def __init__(self, items: Iterable[object] = ()) -> None:
        self._items: list[Element] = []
        self._seen: set[Element] = set()
        for item in items:
            self.add(item)

    def add(self, item: object) -> None:
        """Append an element; raise DuplicateElementError if it is present."""
        element = _normalise(item)
        if element in self._seen:
            raise DuplicateElementError(f"element already in the set: {element!r}")
        self._items.append(element)
        self._seen.add(element)

    def __contains__(self, item: object) -> bool:
        try:
            return _normalise(item) in self._seen
        except TypeError:
            return False

    def __iter__(self) -> Iterator[Element]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ElementSet):
            return NotImplemented
        return self._seen == other._seen

    def __hash__(self) -> int:
        return hash(frozenset(self._seen))

    def __repr__(self) -> str:
        return f"ElementSet({self._items!r})"

    def union(self, other: ElementSet) -> ElementSet:
        """Elements of this set, then those of the other not already present."""
        result = ElementSet(self)
        for item in other:
            if item not in result:
                result.add(item)
        return result

    def intersection(self, other: ElementSet) -> ElementSet:
        """Elements present in both sets, in this set's order."""
        return ElementSet(item for item in self if item in other)

    def difference(self, other: ElementSet) -> ElementSet:
        """Elements of this set that are not in the other."""
        common = self.intersection(other)
        return ElementSet(item for item in self if item not in common)

    def issubset(self, other: ElementSet) -> bool:
        """True when every element of this set is in the other."""
        if len(self) > len(other):
            return False
        return all(item in other for item in self)

    def __str__(self) -> str:
        parts = []
        last = len(self._items) - 1
        for index, item in enumerate(self._items):
            if isinstance(item, str):
                parts.append(item if index == last else item + " ")
            else:
                parts.append(format_list(item))
        return "{" + "".join(parts) + "}"


def _split_elements(text: str) -> list[str]:
    if not text:
        return []
    pieces = text.split(",")
    if len(pieces) > 1 and pieces[-1] == "":
        pieces.pop()
    return pieces


def _strip_delimiters(text: str, opening: str, closing: str) -> str:
    if text.startswith(opening) and text.endswith(closing) and len(text) >= 2:
        return text[1:-1]
    return text


def parse_set(text: str) -> ElementSet:
    """Parse comma-separated elements (optionally in braces) into a set."""
    return ElementSet(_split_elements(_strip_delimiters(text, "{", "}")))


def parse_list(text: str) -> tuple[str, ...]:
    """Parse comma-separated elements (optionally in brackets) into a tuple."""
    return tuple(_split_elements(_strip_delimiters(text, "[", "]")))


def format_element(item: object) -> str:
    """Text form of a single element, list or set."""
    if isinstance(item, str):
        return item
    if isinstance(item, ElementSet):
        return str(item)
    if isinstance(item, (list, tuple)):
        return format_list(item)
    raise TypeError(f"cannot format {item!r}")


def format_list(items: Iterable[object]) -> str:
    """Text form of a list: each string followed by a space, in brackets."""
    parts = []
    for item in items:
        if isinstance(item, str):
            parts.append(item + " ")
        elif isinstance(item, ElementSet):
            parts.append(str(item))
        else:
            raise TypeError(f"cannot format list item {item!r}")
    return "[" + "".join(parts) + "]"