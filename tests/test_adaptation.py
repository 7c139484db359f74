import pytest
from seqquery import (as_sequence, cast, int_range, seterr, EvaluationError,
                      InvalidCastError, NullArgumentError)


def test_as_sequence():
    arr = [1, 2, 3]
    seq = as_sequence(arr)

    assert list(seq) == arr
    assert list(seq) == arr
    assert not hasattr(seq, '__len__')
    assert not hasattr(seq, '__getitem__')

    gen = (x for x in arr)
    assert list(as_sequence(gen)) == arr

    with pytest.raises(NullArgumentError):
        as_sequence(None)


@pytest.mark.timeout(5)
def test_as_sequence_is_lazy():
    it = iter(as_sequence(int_range(0, 10 ** 12)))
    assert [next(it) for _ in range(3)] == [0, 1, 2]


def test_cast():
    assert list(cast([1, 2, 3], int)) == [1, 2, 3]
    assert list(cast([1, "a", 2.5], (int, str, float))) == [1, "a", 2.5]
    assert list(cast([True, 1], int)) == [True, 1]  # bool is an int

    with pytest.raises(NullArgumentError):
        cast(None, int)

    with pytest.raises(NullArgumentError):
        cast([1], None)

    with pytest.raises(TypeError):
        cast([1], "int")


def test_cast_fails_lazily():
    casted = cast([1, 2, "x", 3], int)  # no failure before iteration

    it = iter(casted)
    assert next(it) == 1
    assert next(it) == 2
    with pytest.raises(InvalidCastError):
        next(it)

    with pytest.raises(TypeError):
        list(casted)


class CustomException(Exception):
    pass


@pytest.mark.parametrize('evaluation', ['wrap', 'passthrough'])
def test_adapters_exceptions(evaluation):
    def failing():
        yield 1
        raise CustomException

    class Source:
        def __iter__(self):
            return failing()

    old = seterr(evaluation)
    error_t = EvaluationError if evaluation == "wrap" else CustomException

    try:
        for adapted in [as_sequence(Source()), cast(Source(), int)]:
            it = iter(adapted)
            assert next(it) == 1
            with pytest.raises(error_t):
                next(it)

        # library failures are never wrapped
        with pytest.raises(InvalidCastError):
            list(cast(["x"], int))

    finally:
        seterr(old)
