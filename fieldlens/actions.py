"""
Actions over a store, built from lenses, and the reducer that
applies them.
"""
import logging
from collections.abc import Callable, Iterable
from functools import reduce
from itertools import accumulate
from typing import TypeVar

from .lens import Lens

logger = logging.getLogger(__name__)

S = TypeVar("S")
T = TypeVar("T")

# An Action is a function that has the store as argument,
#   and returns the next store
type Action[S] = Callable[[S], S]


def set_(l: Lens[S, T], v: T) -> Action[S]:
    """
    Action that writes v at the focus of the lens.
    """
    return l.set(v)


def over(l: Lens[S, T], f: Callable[[T], T]) -> Action[S]:
    """
    Action that applies f to the focused value.
    """
    return l.over(f)


def reducer(store: S, action: Action[S]) -> S:
    """
    Next store after one action.
    """
    return action(store)


def combine_actions(*acts: Action[S]) -> Action[S]:
    """
    Combine actions into one that runs them left to right.
    No actions combine to an action returning the store unchanged.
    """
    def combined_action(store: S) -> S:
        return reduce(reducer, acts, store)
    return combined_action


def replay(store: S, acts: Iterable[Action[S]]) -> list[S]:
    """
    Every store the actions pass through, starting with `store`
    and ending with the final one.
    """
    stores = list(accumulate(acts, reducer, initial=store))
    logger.debug("replayed %d actions", len(stores) - 1)
    return stores
