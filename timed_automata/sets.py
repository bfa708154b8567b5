"""Helpers for working with collections of sets."""

from __future__ import annotations

from collections.abc import Hashable, Iterable, Iterator
from itertools import combinations
from typing import TypeVar

T = TypeVar("T", bound=Hashable)
U = TypeVar("U")


def are_disjoint(sets: Iterable[set[T]]) -> bool:
    """Return True if no two of the given sets share an element."""
    return all(left.isdisjoint(right) for left, right in combinations(list(sets), 2))


def union(sets: Iterable[set[T]]) -> set[T]:
    """Return the union of all given sets."""
    result: set[T] = set()
    for items in sets:
        result.update(items)
    return result


def intersection(sets: Iterable[set[T]]) -> set[T]:
    """Return the intersection of all given sets, or an empty set if there are none."""
    iterator = iter(sets)
    first = next(iterator, None)
    if first is None:
        return set()
    result = set(first)
    for items in iterator:
        result &= items
    return result


def subtract(lhs: Iterable[T], rhs: set[T]) -> set[T]:
    """Return the elements of ``lhs`` that are not in ``rhs``."""
    return {item for item in lhs if item not in rhs}


def skip_nth(iterable: Iterable[U], n: int) -> Iterator[U]:
    """Yield every item of ``iterable`` except the one at position ``n``."""
    for index, item in enumerate(iterable):
        if index != n:
            yield item