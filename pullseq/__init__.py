"""
A python library to build and consume lazy sequences.

The pullseq package contains functions to transform iterables (anything
that supports iteration such as lists, generators or files) without
materializing intermediate results.

Every operation returns a cursor which pulls values from its source one
at a time when they are requested, which makes it possible to chain
transformations over large or infinite sources.
The :func:`lazy` wrapper exposes the same operations as chainable methods
along with terminal operations (search, aggregation, collection).
"""

from . import instrument
from .consumers import (
    collect_to,
    collect_with,
    every,
    find,
    for_each,
    includes,
    reduce,
    skip,
    some,
    some_count,
    to_list,
)
from .errors import EmptyReduceError, EvaluationError, NotIterableError, seterr
from .indexing import take, take_while
from .mapping import flat_map, sfilter, smap, starmap
from .protocol import EXHAUSTED, Cursor, Kind, as_cursor, kind_of
from .sequence import Iter, lazy
from .shape import collate, concatenate, flatten

__all__ = [
    "EXHAUSTED",
    "Cursor",
    "Kind",
    "as_cursor",
    "kind_of",
    "Iter",
    "lazy",
    "EvaluationError",
    "NotIterableError",
    "EmptyReduceError",
    "seterr",
    "smap",
    "starmap",
    "sfilter",
    "flat_map",
    "take",
    "take_while",
    "flatten",
    "collate",
    "concatenate",
    "for_each",
    "every",
    "some",
    "some_count",
    "find",
    "includes",
    "reduce",
    "collect_to",
    "collect_with",
    "to_list",
    "skip",
]
