"""Miscellaneous tools for internal use."""

import logging
import numbers
from logging import NullHandler

from .errors import NullArgumentError


# used to tell an omitted optional argument from an explicit None
missing = object()


def isint(x):
    """Return wether `x` is an integral number."""
    return isinstance(x, numbers.Integral)


def get_logger(name):
    logger = logging.getLogger(name)
    logger.addHandler(NullHandler())
    return logger


def check_not_none(**arguments):
    """Raise :class:`NullArgumentError` naming the first absent argument."""
    for name, value in arguments.items():
        if value is None:
            raise NullArgumentError(name + " must not be None")


def always(_):
    return True


def identity(x):
    return x
