import itertools

from .errors import ArgumentTypeError, InvalidArgumentError, maxint
from .utils import isint


class Empty:
    def __len__(self):
        return 0

    def __iter__(self):
        return iter(())


def empty():
    """Return a sequence without any element."""
    return Empty()


class Repetition:
    def __init__(self, item, times):
        self.object = item
        self.times = times

    def __len__(self):
        return self.times

    def __iter__(self):
        return itertools.repeat(self.object, self.times)


def repeat(element, count):
    """Make a sequence by repeating a value.

    Args:
        element (Any): Value to be (virtually) replicated.
        count (int): Number of repetitions.

    Raises:
        InvalidArgumentError: if `count` is negative.

    Example:

        >>> list(seqquery.repeat(3, 5))
        [3, 3, 3, 3, 3]
    """
    if not isint(count):
        raise ArgumentTypeError("count must be an integer, not "
                        + count.__class__.__name__)
    if count < 0:
        raise InvalidArgumentError(
            "{!r}, the value of count, is negative".format(count))

    return Repetition(element, count)


class IntRange:
    def __init__(self, start, count):
        self.start = start
        self.count = count

    def __len__(self):
        return self.count

    def __iter__(self):
        # each cursor restarts from start
        i = self.start
        for _ in range(self.count):
            yield i
            i += 1


def int_range(start, count):
    """Return the `count` consecutive integers starting at `start`.

    Values are produced on demand.

    Raises:
        InvalidArgumentError: if `count` is negative or if the last value
            would exceed :func:`seqquery.maxint`.

    Example:

        >>> list(seqquery.int_range(3, 4))
        [3, 4, 5, 6]
    """
    if not isint(start) or not isint(count):
        raise ArgumentTypeError("start and count must be integers")
    if count < 0:
        raise InvalidArgumentError(
            "{!r}, the value of count, is negative".format(count))
    if start + count - 1 > maxint():
        raise InvalidArgumentError(
            "{!r} and {!r}, the values of start and count respectively, "
            "result in overflow".format(start, count))

    return IntRange(start, count)
