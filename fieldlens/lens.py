"""
Lenses for reading and immutably updating fields of nested records.
"""
import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, TypeVar

from .monoid import Monoid, mconcat
from .records import check_field, field_names, field_type, is_replaceable, \
    replace_field

logger = logging.getLogger(__name__)

S = TypeVar("S")  # whole record (source)
T = TypeVar("T")  # focused field type
U = TypeVar("U")  # focus of an inner lens

@dataclass(frozen=True)
class Lens[S, T](Monoid):
    """
    Allows for focused access and modification of a specific field
    within a larger record.

    Lenses form a monoid under composition: `append` composes,
    `mempty` is the identity lens.
    """
    get: Callable[[S], T]  # function to get the field value
    set: Callable[[T], Callable[[S], S]]  # curried: new value, then record

    def __rshift__(self, inner: "Lens[T, U]") -> "Lens[S, U]":
        """
        Enables using the >> operator for composing lenses,
        outer on the left.
        """
        return compose(self, inner)

    def append(self, other: "Lens[T, Any]") -> "Lens[S, Any]":
        return compose(self, other)

    @classmethod
    def mempty(cls) -> "Lens[Any, Any]":
        """Returns the identity lens."""
        return identity()

    def over(self, f: Callable[[T], T]) -> Callable[[S], S]:
        """
        Record update that applies f to the focused value.
        """
        return lambda s: self.set(f(self.get(s)))(s)


def lens(owner: type, field_name: str) -> Lens:
    """
    Create a lens for accessing a specific field of a record type.
    Fails here, not on first use, if the field does not exist.
    """
    check_field(owner, field_name)
    logger.debug("lens %s.%s", owner.__name__, field_name)
    return Lens(
        get=lambda s: getattr(s, field_name),
        set=lambda v: lambda s: replace_field(s, field_name, v)
    )


def compose(outer: Lens[S, T], inner: Lens[T, U]) -> Lens[S, U]:
    """
    Chain two lenses end to end.

    The setter reads the current intermediate value, updates it through
    `inner`, then writes it back through `outer`, so fields of the
    intermediate record that `inner` does not touch survive.
    """
    def _set(u: U) -> Callable[[S], S]:
        def _update(s: S) -> S:
            t = outer.get(s)
            updated = inner.set(u)(t)
            return outer.set(updated)(s)
        return _update

    return Lens(
        get=lambda s: inner.get(outer.get(s)),
        set=_set
    )


def identity() -> Lens[Any, Any]:
    """
    Lens focusing on the whole value.
    """
    return Lens(
        get=lambda s: s,
        set=lambda v: lambda _: v
    )


def path(*lenses: Lens) -> Lens:
    """
    Compose lenses left to right, outermost first.
    An empty path is the identity lens.
    """
    return mconcat(lenses, Lens.mempty())


def lens_path(owner: type, dotted: str) -> Lens:
    """
    Build a composed lens from a dotted field path such as
    "user.profile.name". Each step's owner is the declared type of the
    previous field, so every name is checked before the lens is returned.
    """
    names = dotted.split(".")
    leaves: list[Lens] = []
    current: Any = owner
    for i, name in enumerate(names):
        leaves.append(lens(current, name))
        if i < len(names) - 1:
            current = field_type(current, name)
    logger.debug("lens path %s.%s", owner.__name__, dotted)
    return path(*leaves)


def lenses_for(owner: type) -> Mapping[str, Lens]:
    """
    Read-only mapping from field name to a leaf lens for every
    replaceable field of the record type.
    """
    return MappingProxyType({
        name: lens(owner, name)
        for name in field_names(owner)
        if is_replaceable(owner, name)
    })

