from collections import Counter, deque
from random import randint

import numpy as np
import pytest
from pullseq import EmptyReduceError, NotIterableError, as_cursor, \
    collect_to, collect_with, every, find, for_each, includes, reduce, skip, \
    some, some_count, to_list


def pulling(values, pulled):
    for v in values:
        pulled.append(v)
        yield v


def test_for_each():
    seen = []
    assert for_each([1, 2, 3], seen.append) is None
    assert seen == [1, 2, 3]

    seen = []
    for_each([1, 2], lambda target, x: target.append(x * 2), seen)
    assert seen == [2, 4]


def test_every_some():
    arr = [randint(0, 100) for _ in range(100)]
    assert every(arr, lambda x: x >= 0)
    assert every(arr, lambda x: x > 50) == all(x > 50 for x in arr)
    assert some(arr, lambda x: x > 50) == any(x > 50 for x in arr)
    assert every([], lambda x: False)
    assert not some([], lambda x: True)

    pulled = []
    assert not every(pulling([1, 2, -1, 3], pulled), lambda x: x > 0)
    assert pulled == [1, 2, -1]

    pulled = []
    assert some(pulling([1, 2, -1, 3], pulled), lambda x: x < 0)
    assert pulled == [1, 2, -1]

    assert some([1, 2], lambda lim, x: x > lim, 1)
    assert not every([1, 2], lambda lim, x: x > lim, 1)


def test_some_count():
    pulled = []
    values = pulling([1, 3, 2, 5, 7, 9], pulled)
    assert some_count(values, lambda x: x % 2 == 1, 3)
    assert pulled == [1, 3, 2, 5]

    assert not some_count([1, 2, 3], lambda x: x % 2 == 1, 3)
    assert some_count([1], lambda lim, x: x < lim, 1, 2)

    with pytest.raises(TypeError):
        some_count([1], bool, None)


def test_some_count_consumes():
    cursor = as_cursor([1, 1, 0, 1])
    assert some_count(cursor, bool, 2)
    # only the remaining values are examined
    assert not some_count(cursor, bool, 2)


def test_find():
    assert find(range(10), lambda x: x > 3) == 4
    assert find(range(10), lambda x: x > 30) is None
    assert find(range(10), lambda x: x > 30, default=-1) == -1
    assert find([None, 0, 1], lambda x: x is None, default=-1) is None
    assert find(range(10), lambda lim, x: x > lim, 7) == 8


def test_includes():
    assert includes([1, 2, 3], 2)
    assert not includes([1, 2, 3], 4)
    assert includes([1.0, float('nan')], float('nan'))
    assert includes(np.array([1.0, np.nan]), float('nan'))
    assert not includes([1.0, 2.0], float('nan'))
    assert not includes(["a", None], float('nan'))
    assert includes([None], None)

    pulled = []
    assert includes(pulling([3, 1, 4, 1], pulled), 1)
    assert pulled == [3, 1]


def test_reduce():
    arr = [randint(0, 100) for _ in range(50)]
    assert reduce(arr, lambda a, b: a + b) == sum(arr)
    assert reduce(arr, lambda a, b: a + b, 10) == sum(arr) + 10
    assert reduce([], lambda a, b: a + b, 10) == 10
    assert reduce([5], lambda a, b: a + b) == 5
    assert reduce([1, 2], lambda a, b: a + [b], []) == [1, 2]
    assert reduce([1, 2], lambda a, b: b if a is None else a, None) == 1

    with pytest.raises(EmptyReduceError):
        reduce([], lambda a, b: a + b)

    cursor = as_cursor([1])
    list(cursor)
    with pytest.raises(TypeError) as excinfo:
        reduce(cursor, lambda a, b: a + b)
    assert "no initial value" in str(excinfo.value)


def test_collect():
    assert collect_to(range(5), list) == list(range(5))
    assert collect_to("abc", "".join) == "abc"
    assert collect_to([1, 1, 2], Counter) == Counter({1: 2, 2: 1})
    assert collect_to(iter([1, 2]), deque) == deque([1, 2])
    assert collect_to(range(3), lambda it: np.fromiter(it, dtype=int)).sum() \
        == 3

    target = {}
    assert collect_with(["a", "bb"], target,
                        lambda d, x: d.setdefault(len(x), x)) is None
    assert target == {1: "a", 2: "bb"}


def test_to_list():
    cursor = as_cursor(range(5))
    next(cursor)
    assert to_list(cursor) == [1, 2, 3, 4]
    assert to_list(cursor) == []


def test_skip():
    cursor = as_cursor(range(10))
    assert skip(cursor, 3) is cursor
    assert list(cursor) == list(range(3, 10))

    cursor = skip(range(3), 10)
    assert list(cursor) == []

    pulled = []
    cursor = skip(pulling(range(10), pulled), 4)
    assert pulled == [0, 1, 2, 3]
    assert list(skip(cursor, 0)) == list(range(4, 10))
    assert list(skip([1, 2], -3)) == [1, 2]


def test_not_iterable():
    for op in [lambda s: to_list(s), lambda s: includes(s, 1),
               lambda s: reduce(s, max), lambda s: skip(s, 1)]:
        with pytest.raises(NotIterableError):
            op(42)


def test_includes_arrays():
    arr = np.array([1, 2])
    assert not includes([arr], 5)
    assert includes([arr, 5], 5)
    assert includes([np.array([3]), arr], arr)
