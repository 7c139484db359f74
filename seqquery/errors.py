import functools
import inspect
import sys
import threading

from tblib import pickling_support


class QueryError(Exception):
    """Base class of the failures detected by seqquery operators."""


class NullArgumentError(QueryError, TypeError):
    """Raised when a required source or function argument is None."""


class InvalidArgumentError(QueryError, ValueError):
    """Raised when a generation parameter is out of its valid domain."""


class InvalidCastError(QueryError, TypeError):
    """Raised when an element fails the runtime type check of
    :func:`seqquery.cast`."""


class DuplicateKeyError(QueryError, KeyError):
    """Raised when a computed key is already present in a dictionary being
    built."""

    def __str__(self):
        # KeyError quotes its argument
        return Exception.__str__(self)


class NotFoundError(QueryError, LookupError):
    """Raised when no element matches the criterion of a selector."""


class AmbiguousMatchError(QueryError, ValueError):
    """Raised when more than one element matches a single element query."""


class QueryOverflowError(QueryError, OverflowError):
    """Raised when a count would exceed :func:`maxint`."""


class ArgumentTypeError(QueryError, TypeError):
    """Raised when an argument is not of a supported type."""


class EvaluationError(Exception):
    """Raised when user code triggered by an operator fails."""


# tracebacks survive pickling, eg. to report failures from worker processes
pickling_support.install()


# Settings --------------------------------------------------------------------

def seterr(evaluation=None):
    """Set how errors are handled.

    Args:
        evaluation (str): how errors from user code (predicates, key
            functions, comparers, sources) triggered by seqquery are
            propagated:

            - `'wrap'`: raise :class:`EvaluationError` with original error as
              its cause.
            - `'passthrough'`: let the error propagate through seqquery code
              (default).
            - `None` leave unchanged and return current setting

    Returns:
        The setting value.

    Failures detected by seqquery itself (:class:`QueryError`) are never
    wrapped.
    """
    if evaluation == 'wrap':
        config.passthrough = False
    elif evaluation == 'passthrough':
        config.passthrough = True
    elif evaluation is not None:
        raise ValueError("evaluation must be 'wrap' or 'passthrough'")

    return "passthrough" if config.passthrough else 'wrap'


def maxint(value=None):
    """Set the largest integer that counts and ranges may reach.

    Args:
        value (Optional[int]): the new limit, `None` to leave unchanged.

    Returns:
        The setting value, :data:`sys.maxsize` unless changed.
    """
    if value is not None:
        if value < 0:
            raise ValueError("maxint must be positive")
        config.maxint = int(value)

    return config.maxint


class Config(threading.local):
    def __init__(self):
        super().__init__()
        self.passthrough = True
        self.maxint = sys.maxsize


config = Config()


def must_propagate(error):
    return (config.passthrough
            or isinstance(error, (QueryError, EvaluationError)))


def wrap_errors(func):
    """Decorate an eager operator to apply the :func:`seterr` policy."""
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)

        except Exception as error:
            if must_propagate(error):
                raise
            else:
                msg = "Failed to evaluate {}()".format(func.__name__)
                raise EvaluationError(msg) from error

    return wrapper


# Helpers ---------------------------------------------------------------------

def unindent(lines):
    if lines is None:
        return []

    prefix = lines[0]
    while len(prefix) > 0 and not prefix.isspace():
        prefix = prefix[:-1]

    for line in lines[1:]:
        while not line.startswith(prefix):
            prefix = prefix[:-1]

    return [line[len(prefix):] for line in lines]


def format_stack(skip=1):
    out = ""
    for frame in inspect.stack()[:skip:-1]:
        _, filename, lineno, function, code_context, _ = frame
        out += "  File \"{}\", line {}, in {}\n".format(
            filename, lineno, function)
        for line in unindent(code_context):
            out += "    " + line

    return out
