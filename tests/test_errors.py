import pickle
import threading
import sys
import pytest
from seqquery import (count, first, single, to_dictionary, seterr, maxint,
                      element_at, element_at_or_default, repeat, int_range,
                      cast, contains, ArgumentTypeError,
                      EvaluationError, QueryError, NotFoundError,
                      AmbiguousMatchError, NullArgumentError,
                      InvalidArgumentError, InvalidCastError,
                      DuplicateKeyError, QueryOverflowError)


class CustomException(Exception):
    pass


def fail(x):
    del x
    raise CustomException


def test_hierarchy():
    for error_t, builtin_t in [(NullArgumentError, TypeError),
                               (InvalidArgumentError, ValueError),
                               (InvalidCastError, TypeError),
                               (DuplicateKeyError, KeyError),
                               (NotFoundError, LookupError),
                               (AmbiguousMatchError, ValueError),
                               (QueryOverflowError, OverflowError),
                               (ArgumentTypeError, TypeError)]:
        assert issubclass(error_t, QueryError)
        assert issubclass(error_t, builtin_t)

    assert not issubclass(EvaluationError, QueryError)


@pytest.mark.parametrize('evaluation', ['wrap', 'passthrough'])
def test_user_errors(evaluation):
    old = seterr(evaluation)
    error_t = EvaluationError if evaluation == "wrap" else CustomException

    try:
        with pytest.raises(error_t) as excinfo:
            first([1, 2], fail)
        if evaluation == "wrap":
            assert isinstance(excinfo.value.__cause__, CustomException)

        with pytest.raises(error_t):
            count([1], fail)

        with pytest.raises(error_t):
            to_dictionary([1], fail)

        # library failures go through unchanged
        with pytest.raises(AmbiguousMatchError):
            single([1, 2])
        with pytest.raises(NotFoundError):
            first([])

        # nested operator failures are not downgraded
        with pytest.raises(AmbiguousMatchError):
            first([[1, 1]], lambda x: single(x) == 1)

    finally:
        seterr(old)


def test_seterr():
    old = seterr()
    assert old == 'passthrough'

    try:
        assert seterr('wrap') == 'wrap'
        assert seterr() == 'wrap'
        with pytest.raises(ValueError):
            seterr('ignore')
    finally:
        seterr(old)


def test_settings_are_thread_local():
    old = maxint()
    seen = []

    def read():
        seen.append((maxint(), seterr()))

    try:
        maxint(10)
        seterr('wrap')
        t = threading.Thread(target=read)
        t.start()
        t.join()
    finally:
        maxint(old)
        seterr('passthrough')

    assert seen == [(sys.maxsize, 'passthrough')]

    with pytest.raises(ValueError):
        maxint(-1)


def test_pickled_errors_keep_traceback():
    try:
        first([])
    except NotFoundError as error:
        restored = pickle.loads(pickle.dumps(error))

    assert isinstance(restored, NotFoundError)
    assert str(restored) == "no element matches"
    assert restored.__traceback__ is not None


@pytest.mark.parametrize('evaluation', ['wrap', 'passthrough'])
def test_argument_type_errors_not_wrapped(evaluation):
    old = seterr(evaluation)

    try:
        with pytest.raises(ArgumentTypeError):
            element_at([1, 2], 1.0)
        with pytest.raises(ArgumentTypeError):
            element_at_or_default([1, 2], "0")
        with pytest.raises(ArgumentTypeError):
            contains([1], 1, comparer=3)
        with pytest.raises(ArgumentTypeError):
            repeat(1, 1.5)
        with pytest.raises(ArgumentTypeError):
            int_range(0.5, 2)
        with pytest.raises(ArgumentTypeError):
            cast([1], "int")
    finally:
        seterr(old)
