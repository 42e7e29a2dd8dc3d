from decimal import Decimal

import numpy as np
import pytest
from pullseq import EXHAUSTED, Cursor, Kind, NotIterableError, as_cursor, \
    kind_of
from pullseq.protocol import IteratorCursor, same_value


class Flaky(Cursor):
    """Produces values again after having reported exhaustion."""
    def __init__(self):
        self.n = 0

    def pull(self):
        self.n += 1
        return EXHAUSTED if self.n == 3 else self.n


def test_cursor_iteration():
    cursor = as_cursor([1, 2, 3])
    assert cursor.advance() == 1
    assert next(cursor) == 2
    assert list(cursor) == [3]
    assert cursor.advance() is EXHAUSTED
    assert list(cursor) == []


def test_sticky_exhaustion():
    cursor = Flaky()
    assert [cursor.advance() for _ in range(6)] \
        == [1, 2, EXHAUSTED, EXHAUSTED, EXHAUSTED, EXHAUSTED]
    assert cursor.n == 3


def test_as_cursor():
    cursor = IteratorCursor(range(3))
    assert as_cursor(cursor) is cursor
    assert list(as_cursor("abc")) == ['a', 'b', 'c']
    assert list(as_cursor(x for x in range(3))) == [0, 1, 2]

    for value in [1, None, 1.5, object()]:
        with pytest.raises(NotIterableError):
            as_cursor(value)

    with pytest.raises(TypeError):
        as_cursor(3)


def test_release():
    cursor = IteratorCursor([1])
    list(cursor)
    assert cursor.exhausted
    assert cursor.iterator is None


def test_kind_of():
    for value in [[1], (), {}, set(), range(2), iter([]), np.zeros(3),
                  as_cursor([])]:
        assert kind_of(value) is Kind.NESTED

    for value in [1, 1.5, None, "ab", "", b"ab", bytearray(b"a"), object()]:
        assert kind_of(value) is Kind.OPAQUE


def test_same_value():
    assert same_value(1, 1)
    assert same_value(1, 1.0)
    assert not same_value(1, 2)
    assert same_value(float('nan'), float('nan'))
    assert same_value(float('nan'), np.nan)
    assert same_value(Decimal('NaN'), float('nan'))
    assert not same_value(float('nan'), 1)
    assert not same_value("nan", float('nan'))
    assert not same_value(None, float('nan'))


class Indexable:
    """Only supports the `__getitem__` sequence protocol."""
    def __getitem__(self, i):
        if i >= 3:
            raise IndexError(i)
        return i * 10


def test_sequence_protocol():
    assert list(as_cursor(Indexable())) == [0, 10, 20]
    assert kind_of(Indexable()) is Kind.NESTED
    assert kind_of(np.array(5)) is Kind.OPAQUE


def test_stop_iteration_in_pull():
    class Broken(Cursor):
        def pull(self):
            raise StopIteration

    cursor = Broken()
    with pytest.raises(RuntimeError) as excinfo:
        list(cursor)
    assert isinstance(excinfo.value.__cause__, StopIteration)


def test_same_value_arrays():
    arr = np.array([1, 2])
    assert not same_value(arr, 5)
    assert not same_value(arr, np.array([1, 2]))
    assert same_value(arr, arr)
