"""Debugging tools."""

from time import monotonic

from .utils import check_not_none


class Debug(object):
    def __init__(self, source, func, max_calls, max_rate):
        self.source = source
        self.max_calls = max_calls
        self.max_rate = max_rate
        self.n_calls = 0
        self.last_call = monotonic()
        self.func = func

    def silence(self):
        if self.max_calls is not None:
            if self.n_calls >= self.max_calls:
                return True

        if self.max_rate is not None:
            elapsed = monotonic() - self.last_call
            if elapsed < (1.0 / self.max_rate):
                return True

        return False

    def __iter__(self):
        for i, value in enumerate(self.source):
            if not self.silence():
                self.func(i, value)
                self.last_call = monotonic()
                self.n_calls += 1

            yield value


def debug(source, func, max_calls=None, max_rate=None):
    """Wrap a source to trigger a function on each element read.

    Args:
        source (Iterable):
            Source sequence.
        func (Callable):
            A function to call whenever an item is read, must take the
            position and value of the items.
        max_calls (Optional[int]):
            An optional count limit on how many times `func` is invoked
            (default None).
        max_rate (Optional[int]):
            An optional rate limit to avoid spamming `func`.

    Returns:
        (Iterable): The wrapped source.

    Example:

        >>> watched = debug([1, 2, 3, 4, 5], lambda i, v: print(v), 2)
        >>> seqquery.first(watched, lambda x: x > 3)
        1
        2
        4
    """
    check_not_none(source=source, func=func)
    return Debug(source, func, max_calls, max_rate)


class Monitor(object):
    def __init__(self, source):
        self.source = source
        self.n_cursors = 0
        self.n_reads = 0

    def reset(self):
        """Reset counters."""
        self.n_cursors = 0
        self.n_reads = 0

    def __iter__(self):
        self.n_cursors += 1
        for value in self.source:
            self.n_reads += 1
            yield value


def monitor(source):
    """Wrap a source to count how it is enumerated.

    The wrapper exposes two counters:

    * :code:`n_cursors` the number of times iteration was started.
    * :code:`n_reads` the number of elements read across all cursors.

    and :code:`reset()` to set them back to zero.

    Example:

        >>> watched = monitor([1, 2, 3, 4])
        >>> seqquery.first(watched, lambda x: x > 1)
        2
        >>> watched.n_cursors, watched.n_reads
        (1, 2)
    """
    check_not_none(source=source)
    return Monitor(source)
