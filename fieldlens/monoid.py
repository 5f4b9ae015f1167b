"""
Monoid protocol and fold. Lenses are a monoid under composition,
with the identity lens as the neutral element.
"""
from collections.abc import Iterable
from functools import reduce
from typing import Protocol, Self


class Monoid(Protocol):
    """
    Values with an associative `append` and a neutral `mempty`:
        a.append(mempty) == a == mempty.append(a)
        (a.append(b)).append(c) == a.append(b.append(c))
    """

    def append(self, other: Self) -> Self:
        """Associative combination."""
        ...

    @classmethod
    def mempty(cls) -> Self:
        """Neutral element for append."""
        ...


def mconcat[M: Monoid](monoids: Iterable[M], empty: M) -> M:
    """
    Fold with append from the left, starting at `empty`,
    so an empty input folds to `empty`.
    """
    return reduce(lambda acc, m: acc.append(m), monoids, empty)
