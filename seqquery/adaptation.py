from .errors import (ArgumentTypeError, EvaluationError, InvalidCastError,
                     format_stack,
                     must_propagate)
from .utils import check_not_none


class AsSequence(object):
    def __init__(self, source):
        self.source = source
        self.stack = format_stack(2)

    def __iter__(self):
        i = 0
        try:
            for item in self.source:
                yield item
                i += 1

        except Exception as error:
            if must_propagate(error):
                raise
            else:
                msg = "Failed to read item {} in {} created at:\n{}".format(
                    i, self.__class__.__name__, self.stack)
                raise EvaluationError(msg) from error


def as_sequence(source):
    """Expose `source` through iteration only.

    Indexing, :func:`len` and any other capability of the source are
    hidden, elements are read from the source as they are requested.

    Example:

        >>> data = [1, 2, 3]
        >>> seq = seqquery.as_sequence(data)
        >>> list(seq)
        [1, 2, 3]
        >>> hasattr(seq, '__getitem__')
        False
    """
    check_not_none(source=source)
    return AsSequence(source)


class Cast(object):
    def __init__(self, source, cls):
        self.source = source
        self.cls = cls
        self.stack = format_stack(2)

    def __iter__(self):
        i = 0
        try:
            for item in self.source:
                if not isinstance(item, self.cls):
                    raise InvalidCastError(
                        "item {} of type {} is not an instance of {}".format(
                            i, item.__class__.__name__, self.type_name))
                yield item
                i += 1

        except Exception as error:
            if must_propagate(error):
                raise
            else:
                msg = "Failed to read item {} in {} created at:\n{}".format(
                    i, self.__class__.__name__, self.stack)
                raise EvaluationError(msg) from error

    @property
    def type_name(self):
        if isinstance(self.cls, tuple):
            return " or ".join(c.__name__ for c in self.cls)
        return self.cls.__name__


def cast(source, cls):
    """Check the type of the elements of `source` as they are read.

    Args:
        source (Iterable): Source of elements.
        cls (Union[type, Tuple[type, ...]]): Expected type(s), as accepted by
            :func:`python:isinstance`.

    Returns:
        (Iterable): The elements of `source`, unchanged.

    Raises:
        NullArgumentError: if `source` is None.
        InvalidCastError: upon reaching the first element which is not an
            instance of `cls`, preceding elements are yielded normally.

    Example:

        >>> it = iter(seqquery.cast([1, 2, "x"], int))
        >>> next(it), next(it)
        (1, 2)
        >>> next(it)
        Traceback (most recent call last):
        ...
        seqquery.errors.InvalidCastError: item 2 of type str is not an instance of int
    """
    check_not_none(source=source, cls=cls)
    if not isinstance(cls, (type, tuple)):
        raise ArgumentTypeError("cls must be a type or a tuple of types")

    return Cast(source, cls)
