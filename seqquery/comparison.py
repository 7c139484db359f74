"""Equality capabilities used to compare elements and keys."""

from abc import ABC, abstractmethod

from .errors import ArgumentTypeError, InvalidArgumentError


class EqualityComparer(ABC):
    """Equality relation over elements of some type.

    `equals` must be reflexive, symmetric and transitive, and `hash` must
    agree with it: elements that compare equal share the same hash.
    """
    @abstractmethod
    def equals(self, a, b):
        raise NotImplementedError

    @abstractmethod
    def hash(self, x):
        raise NotImplementedError


class DefaultEqualityComparer(EqualityComparer):
    """The intrinsic equality of the elements (`==` and :func:`hash`)."""
    def equals(self, a, b):
        return a == b

    def hash(self, x):
        return hash(x)

    def __repr__(self):
        return self.__class__.__name__ + "()"


class FunctionComparer(EqualityComparer):
    """Adapt plain functions into an :class:`EqualityComparer`.

    Args:
        equals (Callable[[Any, Any], bool]): the equality test.
        hash (Optional[Callable[[Any], int]]): a hash function consistent
            with `equals`, only needed to build dictionaries and lookups.
    """
    def __init__(self, equals, hash=None):
        if not callable(equals):
            raise TypeError("equals must be callable")

        self.equals_fn = equals
        self.hash_fn = hash

    def equals(self, a, b):
        return self.equals_fn(a, b)

    def hash(self, x):
        if self.hash_fn is None:
            raise InvalidArgumentError(
                "this comparer cannot hash keys, provide a hash function")

        return self.hash_fn(x)


default_comparer = DefaultEqualityComparer()


def resolve_comparer(comparer=None):
    """Return the comparer to use for one operator call.

    `None` selects the intrinsic equality of the elements, plain callables
    are taken as an `equals(a, b)` function.
    """
    if comparer is None:
        return default_comparer
    elif isinstance(comparer, EqualityComparer):
        return comparer
    elif callable(comparer):
        return FunctionComparer(comparer)
    else:
        raise ArgumentTypeError(
            "comparer must be an EqualityComparer or a callable, not "
            + comparer.__class__.__name__)


class ComparerKey:
    """Hashable wrapper making a dict honor a custom comparer."""
    __slots__ = ('key', 'comparer', 'hash_value')

    def __init__(self, key, comparer):
        self.key = key
        self.comparer = comparer
        self.hash_value = comparer.hash(key)

    def __hash__(self):
        return self.hash_value

    def __eq__(self, other):
        return self.comparer.equals(self.key, other.key)
