"""
A python library to query sequences.

The seqquery package contains functions to generate, inspect and
materialize sequences (anything that supports iteration such as lists,
generators or the sequences returned by seqquery itself).

Generators and adapters feature on-demand evaluation: elements are
produced only when the returned sequence is iterated, and each iteration
restarts production from scratch. All other operators consume their
source right away, enumerating it at most once per call (see
:func:`to_array` for the exception) and stopping as soon as the result is
known.

Failures are reported by distinct subclasses of :class:`QueryError` so
that callers can tell for instance an index out of range
(:class:`NotFoundError`) from an ambiguous match
(:class:`AmbiguousMatchError`).

Cursors are not thread-safe: a given iterator must only be advanced by one
thread. Independent cursors over the same source may be used from
different threads only if the source itself supports it.
"""

from . import instrument
from .adaptation import as_sequence, cast
from .comparison import (DefaultEqualityComparer, EqualityComparer,
                         FunctionComparer)
from .counting import count
from .errors import (
    AmbiguousMatchError,
    ArgumentTypeError,
    DuplicateKeyError,
    EvaluationError,
    InvalidArgumentError,
    InvalidCastError,
    NotFoundError,
    NullArgumentError,
    QueryError,
    QueryOverflowError,
    maxint,
    seterr,
)
from .generation import empty, int_range, repeat
from .materialization import (ComparerDict, Grouping, Lookup, to_array,
                              to_dictionary, to_list, to_lookup)
from .predicates import all_of, any_of, contains, sequence_equal
from .selection import (
    element_at,
    element_at_or_default,
    first,
    first_or_default,
    last,
    last_or_default,
    single,
    single_or_default,
)

__all__ = [
    "QueryError",
    "NullArgumentError",
    "InvalidArgumentError",
    "InvalidCastError",
    "DuplicateKeyError",
    "NotFoundError",
    "AmbiguousMatchError",
    "QueryOverflowError",
    "ArgumentTypeError",
    "EvaluationError",
    "seterr",
    "maxint",
    "EqualityComparer",
    "DefaultEqualityComparer",
    "FunctionComparer",
    "empty",
    "repeat",
    "int_range",
    "as_sequence",
    "cast",
    "to_array",
    "to_list",
    "to_dictionary",
    "to_lookup",
    "ComparerDict",
    "Lookup",
    "Grouping",
    "contains",
    "all_of",
    "any_of",
    "sequence_equal",
    "element_at",
    "element_at_or_default",
    "single",
    "single_or_default",
    "first",
    "first_or_default",
    "last",
    "last_or_default",
    "count",
]
