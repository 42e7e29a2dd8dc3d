"""Terminal operations.

These functions drive a sequence to partial or full exhaustion and return
a plain result. They accept any iterable, when given a cursor or an
:class:`~pullseq.Iter` they consume it from its current position, so
calling two of them in a row on the same cursor sees the remaining values
only.
"""

from .errors import EmptyReduceError
from .protocol import EXHAUSTED, as_cursor, same_value
from .utils import bind, get_logger, isint, unset


logger = get_logger(__name__)


def for_each(sequence, fn, this_arg=unset):
    """Call `fn` on each value, return values are ignored."""
    fn = bind(fn, this_arg)
    for value in as_cursor(sequence):
        fn(value)


def every(sequence, predicate, this_arg=unset):
    """Return wether all values satisfy `predicate`.

    Stops at the first failing value.
    """
    predicate = bind(predicate, this_arg)
    for value in as_cursor(sequence):
        if not predicate(value):
            return False
    return True


def some(sequence, predicate, this_arg=unset):
    """Return wether any value satisfies `predicate`.

    Stops at the first satisfying value.
    """
    predicate = bind(predicate, this_arg)
    for value in as_cursor(sequence):
        if predicate(value):
            return True
    return False


def some_count(sequence, predicate, count, this_arg=unset):
    """Return wether at least `count` values satisfy `predicate`.

    Stops as soon as the predicate has held `count` times.

    Example:

        >>> some_count([1, 2, 3, 4, 5], lambda x: x % 2 == 1, 2)
        True
    """
    if not isint(count):
        raise TypeError("count must be an integer")

    predicate = bind(predicate, this_arg)
    n = 0
    for value in as_cursor(sequence):
        if predicate(value):
            n += 1
            if n == count:
                return True
    return False


def find(sequence, predicate, this_arg=unset, default=None):
    """Return the first value satisfying `predicate`, or `default`."""
    predicate = bind(predicate, this_arg)
    for value in as_cursor(sequence):
        if predicate(value):
            return value
    return default


def includes(sequence, element):
    """Return wether `element` is one of the values.

    Unlike the `in` operator, NaN values match each other.

    Example:

        >>> includes([1.0, float('nan')], float('nan'))
        True
    """
    for value in as_cursor(sequence):
        if same_value(value, element):
            return True
    return False


def reduce(sequence, reducer, initial=unset):
    """Combine the values into one with `reducer`.

    Args:
        sequence (Iterable): The values to combine.
        reducer (Callable[[Any, Any], Any]): Combines the accumulated value
            and the next value.
        initial (Any): Starting value, the first value of the sequence is
            used if not specified.

    Raises:
        EmptyReduceError: `initial` is not specified and the sequence is
            exhausted.

    Example:

        >>> reduce([1, 2, 3], lambda acc, x: acc + x)
        6
        >>> reduce([], lambda acc, x: acc + x, 10)
        10
    """
    cursor = as_cursor(sequence)
    result = initial

    if result is unset:
        result = cursor.advance()
        if result is EXHAUSTED:
            raise EmptyReduceError(
                "reduce of exhausted sequence with no initial value")

    for value in cursor:
        result = reducer(result, value)
    return result


def collect_to(sequence, factory):
    """Build a container by passing the remaining values to `factory`.

    Example:

        >>> collect_to(pullseq.smap(str.upper, "abc"), "".join)
        'ABC'
    """
    return factory(as_cursor(sequence))


def collect_with(sequence, target, collector):
    """Call :code:`collector(target, value)` on each value."""
    for value in as_cursor(sequence):
        collector(target, value)


def to_list(sequence):
    """Return the remaining values in a list."""
    return list(as_cursor(sequence))


def skip(sequence, amount):
    """Discard the next `amount` values and return the cursor.

    Values are pulled immediately, skipping stops silently if the sequence
    runs out first.
    """
    cursor = as_cursor(sequence)
    for i in range(amount):
        if cursor.advance() is EXHAUSTED:
            logger.debug("sequence exhausted after skipping %d/%d values",
                         i, amount)
            break

    return cursor
