from .comparison import resolve_comparer
from .errors import wrap_errors
from .utils import check_not_none, missing


# sentinel marking an exhausted cursor
_end = object()


@wrap_errors
def contains(source, value, comparer=None):
    """Tell whether `source` has an element equal to `value`.

    Enumeration stops at the first match.

    Args:
        source (Iterable): Source of elements.
        value (Any): Value to look for.
        comparer (Optional[Union[EqualityComparer, Callable]]): Equality
            relation, the intrinsic equality of the elements by default.
    """
    check_not_none(source=source)
    comparer = resolve_comparer(comparer)

    for item in source:
        if comparer.equals(item, value):
            return True

    return False


@wrap_errors
def all_of(source, predicate):
    """Tell whether every element of `source` satisfies `predicate`.

    Enumeration stops at the first failure, an empty source gives `True`.
    """
    check_not_none(source=source, predicate=predicate)

    for item in source:
        if not predicate(item):
            return False

    return True


@wrap_errors
def any_of(source, predicate=missing):
    """Tell whether `source` has an element, optionally one satisfying
    `predicate`.

    Enumeration stops at the first match, so `predicate` should be free of
    side effects: elements after the match are not visited.
    """
    check_not_none(source=source)

    if predicate is missing:
        return next(iter(source), _end) is not _end

    check_not_none(predicate=predicate)
    for item in source:
        if predicate(item):
            return True

    return False


@wrap_errors
def sequence_equal(first, second, comparer=None):
    """Tell whether two sequences have equal elements in the same order.

    Both sources are enumerated in lockstep, comparison stops at the first
    mismatching pair or as soon as one source is exhausted before the
    other.

    Example:

        >>> seqquery.sequence_equal([1, 2], [1, 2, 3])
        False
    """
    check_not_none(first=first, second=second)
    comparer = resolve_comparer(comparer)

    first_cursor = iter(first)
    second_cursor = iter(second)
    while True:
        a = next(first_cursor, _end)
        b = next(second_cursor, _end)

        if a is _end or b is _end:
            return a is b
        if not comparer.equals(a, b):
            return False
