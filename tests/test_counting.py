from random import randint
import pytest
from seqquery import (count, maxint, as_sequence, empty, repeat,
                      NullArgumentError, QueryOverflowError)
from seqquery.instrument import monitor


@pytest.fixture
def small_maxint():
    old = maxint()
    maxint(10)
    yield 10
    maxint(old)


def test_count():
    arr = [randint(0, 100) for _ in range(100)]

    assert count(arr) == 100
    assert count(as_sequence(arr)) == 100
    assert count(x for x in arr) == 100
    assert count(empty()) == 0

    def is_even(x):
        return x % 2 == 0

    assert count(arr, is_even) == len([x for x in arr if is_even(x)])
    assert count(empty(), is_even) == 0

    with pytest.raises(NullArgumentError):
        count(None)
    with pytest.raises(NullArgumentError):
        count(arr, None)


def test_count_enumerates():
    # len() is not trusted
    watched = monitor(repeat(0, 7))
    assert count(watched) == 7
    assert watched.n_reads == 7


def test_count_overflow(small_maxint):
    assert count(repeat(0, small_maxint)) == small_maxint

    with pytest.raises(QueryOverflowError):
        count(repeat(0, small_maxint + 1))

    with pytest.raises(OverflowError):
        count(as_sequence(range(100)))

    # only matching elements count towards the limit
    assert count(range(100), lambda x: x < small_maxint) == small_maxint
    with pytest.raises(QueryOverflowError):
        count(range(100), lambda x: x <= small_maxint)


def test_overflow_detected_before_wrapping(small_maxint):
    watched = monitor(repeat(0, 100))
    with pytest.raises(QueryOverflowError):
        count(watched)
    assert watched.n_reads == small_maxint + 1
