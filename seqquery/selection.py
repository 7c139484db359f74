"""Selection of a single element.

Each family (element at, single, first, last) is implemented by a single
scan returning a :class:`Scan` result. The raising entry points turn a
miss into :class:`~seqquery.errors.NotFoundError`, the `_or_default` ones
into the `default` value. A found element is never confused with the
default, even when it is equal to it.
"""

import itertools
from collections import namedtuple

from .errors import (AmbiguousMatchError, ArgumentTypeError, NotFoundError,
                     wrap_errors)
from .utils import always, check_not_none, isint, missing


Scan = namedtuple('Scan', ['value', 'found'])

not_found = Scan(None, False)


def _unwrap(scan, what):
    if not scan.found:
        raise NotFoundError(what)
    return scan.value


def _resolve(source, predicate):
    if predicate is missing:
        predicate = always
    check_not_none(source=source, predicate=predicate)
    return predicate


# Element at ------------------------------------------------------------------

def _scan_element_at(source, index):
    check_not_none(source=source, index=index)
    if not isint(index):
        raise ArgumentTypeError("index must be an integer, not "
                                + index.__class__.__name__)
    if index < 0:
        return not_found

    for item in itertools.islice(source, index, None):
        return Scan(item, True)

    return not_found


@wrap_errors
def element_at(source, index):
    """Return the element at position `index` of `source`.

    The source is enumerated up to the requested position.

    Raises:
        NullArgumentError: if `source` is None.
        NotFoundError: if `index` is negative or past the end of `source`.
        ArgumentTypeError: if `index` is not an integer.
    """
    return _unwrap(_scan_element_at(source, index),
                   "index {} is out of range".format(index))


@wrap_errors
def element_at_or_default(source, index, default=None):
    """Return the element at position `index` of `source` or `default` if
    `index` is negative or past the end of `source`."""
    scan = _scan_element_at(source, index)
    return scan.value if scan.found else default


# Single ----------------------------------------------------------------------

def _scan_single(source, predicate):
    result = not_found
    for item in source:
        if predicate(item):
            if result.found:
                raise AmbiguousMatchError(
                    "more than one element matches")
            result = Scan(item, True)

    return result


@wrap_errors
def single(source, predicate=missing):
    """Return the only element of `source` satisfying `predicate`.

    Without a predicate, `source` must contain exactly one element.

    Raises:
        NullArgumentError: if `source` or `predicate` is None.
        NotFoundError: if no element matches.
        AmbiguousMatchError: as soon as a second element matches.
    """
    predicate = _resolve(source, predicate)
    return _unwrap(_scan_single(source, predicate), "no element matches")


@wrap_errors
def single_or_default(source, predicate=missing, default=None):
    """Return the only element of `source` satisfying `predicate`, or
    `default` if none does.

    Raises:
        AmbiguousMatchError: as soon as a second element matches, there is
            no default for ambiguous queries.
    """
    predicate = _resolve(source, predicate)
    scan = _scan_single(source, predicate)
    return scan.value if scan.found else default


# First -----------------------------------------------------------------------

def _scan_first(source, predicate):
    for item in source:
        if predicate(item):
            return Scan(item, True)

    return not_found


@wrap_errors
def first(source, predicate=missing):
    """Return the first element of `source` satisfying `predicate`.

    Enumeration stops at the first match.

    Raises:
        NullArgumentError: if `source` or `predicate` is None.
        NotFoundError: if no element matches.

    Example:

        >>> seqquery.first([1, 2, 3, 4], lambda x: x % 2 == 0)
        2
    """
    predicate = _resolve(source, predicate)
    return _unwrap(_scan_first(source, predicate), "no element matches")


@wrap_errors
def first_or_default(source, predicate=missing, default=None):
    """Return the first element of `source` satisfying `predicate`, or
    `default` if none does."""
    predicate = _resolve(source, predicate)
    scan = _scan_first(source, predicate)
    return scan.value if scan.found else default


# Last ------------------------------------------------------------------------

def _scan_last(source, predicate):
    result = not_found
    for item in source:
        if predicate(item):
            result = Scan(item, True)

    return result


@wrap_errors
def last(source, predicate=missing):
    """Return the last element of `source` satisfying `predicate`.

    The whole source is enumerated.

    Raises:
        NullArgumentError: if `source` or `predicate` is None.
        NotFoundError: if no element matches.
    """
    predicate = _resolve(source, predicate)
    return _unwrap(_scan_last(source, predicate), "no element matches")


@wrap_errors
def last_or_default(source, predicate=missing, default=None):
    """Return the last element of `source` satisfying `predicate`, or
    `default` if none does."""
    predicate = _resolve(source, predicate)
    scan = _scan_last(source, predicate)
    return scan.value if scan.found else default
