from .errors import QueryOverflowError, maxint, wrap_errors
from .utils import always, check_not_none, missing


@wrap_errors
def count(source, predicate=missing):
    """Count the elements of `source`, optionally only those satisfying
    `predicate`.

    The source is always enumerated, even when it supports :func:`len`.

    Raises:
        NullArgumentError: if `source` or `predicate` is None.
        QueryOverflowError: if the count would exceed
            :func:`seqquery.maxint`.
    """
    if predicate is missing:
        predicate = always
    check_not_none(source=source, predicate=predicate)

    limit = maxint()
    n = 0
    for item in source:
        if predicate(item):
            if n == limit:
                raise QueryOverflowError(
                    "count exceeds maxint ({})".format(limit))
            n += 1

    return n
