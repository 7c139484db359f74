from collections.abc import Iterator, Mapping, Sized

from .comparison import ComparerKey, resolve_comparer, default_comparer
from .errors import DuplicateKeyError, InvalidArgumentError, wrap_errors
from .utils import check_not_none, get_logger, identity, missing


logger = get_logger(__name__)


@wrap_errors
def to_array(source):
    """Return the elements of `source` as a tuple.

    Sized re-iterable sources are enumerated twice: once to count the
    elements and once to fill the result. Any other source, notably
    iterators and generators, is read once into a growing buffer.

    Raises:
        NullArgumentError: if `source` is None.
        InvalidArgumentError: if a sized source yields a different number of
            elements on the second enumeration.
    """
    check_not_none(source=source)

    if not isinstance(source, Sized) or isinstance(source, Iterator):
        logger.debug("buffering %s in a single pass",
                     source.__class__.__name__)
        return tuple(to_list(source))

    logger.debug("counting then filling %s", source.__class__.__name__)
    n = 0
    for _ in source:
        n += 1

    result = [None] * n
    i = 0
    for item in source:
        if i == len(result):
            raise InvalidArgumentError("source grew during materialization")
        result[i] = item
        i += 1

    if i != len(result):
        raise InvalidArgumentError("source shrank during materialization")

    return tuple(result)


@wrap_errors
def to_list(source):
    """Return the elements of `source` in a new list.

    Raises:
        NullArgumentError: if `source` is None.
    """
    check_not_none(source=source)

    result = []
    for item in source:
        result.append(item)

    return result


@wrap_errors
def to_dictionary(source, key_fn, value_fn=missing, comparer=None):
    """Build a dictionary from the elements of a sequence.

    Args:
        source (Iterable): Source of elements.
        key_fn (Callable): Computes the key of an element.
        value_fn (Callable): Computes the value of an element, the element
            itself is used if omitted.
        comparer (Optional[EqualityComparer]): Equality of the keys, the
            intrinsic equality of the keys by default. It must implement
            `hash`.

    Returns:
        (Mapping): The mapping of each key to its value, in the order of
        the source. A :class:`dict` with the default comparer, a
        :class:`ComparerDict` otherwise.

    Raises:
        NullArgumentError: if `source`, `key_fn` or `value_fn` is None.
        DuplicateKeyError: as soon as a key is computed twice.

    Example:

        >>> seqquery.to_dictionary(["a", "bb"], len)
        {1: 'a', 2: 'bb'}
    """
    if value_fn is missing:
        value_fn = identity
    check_not_none(source=source, key_fn=key_fn, value_fn=value_fn)
    comparer = resolve_comparer(comparer)

    if comparer is default_comparer:
        result = {}
        for item in source:
            key = key_fn(item)
            value = value_fn(item)
            if key in result:
                raise DuplicateKeyError("duplicate key {!r}".format(key))
            result[key] = value

        return result

    result = ComparerDict(comparer)
    for item in source:
        result._add(key_fn(item), value_fn(item))

    return result


class ComparerDict(Mapping):
    """Read-only mapping whose keys are matched with an
    :class:`~seqquery.comparison.EqualityComparer`.

    Built by :func:`to_dictionary` when a comparer is given, keys keep
    the insertion order.
    """
    def __init__(self, comparer):
        self.comparer = comparer
        self.entries = {}

    def _add(self, key, value):
        wrapped = ComparerKey(key, self.comparer)
        if wrapped in self.entries:
            raise DuplicateKeyError("duplicate key {!r}".format(key))
        self.entries[wrapped] = value

    def __getitem__(self, key):
        try:
            return self.entries[ComparerKey(key, self.comparer)]
        except KeyError:
            raise KeyError(key) from None

    def __iter__(self):
        for wrapped in self.entries:
            yield wrapped.key

    def __len__(self):
        return len(self.entries)

    def __repr__(self):
        return "ComparerDict({{{}}})".format(", ".join(
            "{!r}: {!r}".format(k.key, v) for k, v in self.entries.items()))


class Grouping:
    """The elements of a :class:`Lookup` sharing the same key."""
    def __init__(self, key, elements):
        self.key = key
        self.elements = elements

    def __len__(self):
        return len(self.elements)

    def __iter__(self):
        return iter(self.elements)

    def __repr__(self):
        return "Grouping({!r}, {!r})".format(self.key, self.elements)


class Lookup:
    """Read-only one-to-many mapping built by :func:`to_lookup`.

    Iterating over a lookup yields :class:`Grouping` objects in the order
    in which their keys were first seen.
    """
    def __init__(self, comparer):
        self.comparer = comparer
        self.groups = {}

    def _wrap(self, key):
        if self.comparer is default_comparer:
            return key
        return ComparerKey(key, self.comparer)

    def _add(self, key, element):
        wrapped = self._wrap(key)
        group = self.groups.get(wrapped)
        if group is None:
            group = self.groups[wrapped] = Grouping(key, [])
        group.elements.append(element)

    def __len__(self):
        return len(self.groups)

    def __contains__(self, key):
        return self._wrap(key) in self.groups

    def __getitem__(self, key):
        group = self.groups.get(self._wrap(key))
        return () if group is None else tuple(group.elements)

    def __iter__(self):
        return iter(self.groups.values())


@wrap_errors
def to_lookup(source, key_fn, value_fn=missing, comparer=None):
    """Group the elements of a sequence by key.

    Same arguments as :func:`to_dictionary`, but elements sharing a key are
    gathered instead of being rejected.

    Example:

        >>> lookup = seqquery.to_lookup(["a", "b", "cc"], len)
        >>> lookup[1]
        ('a', 'b')
        >>> lookup[3]
        ()
    """
    if value_fn is missing:
        value_fn = identity
    check_not_none(source=source, key_fn=key_fn, value_fn=value_fn)

    result = Lookup(resolve_comparer(comparer))
    for item in source:
        result._add(key_fn(item), value_fn(item))

    return result
