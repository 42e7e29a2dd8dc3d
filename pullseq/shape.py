"""Operations that assemble sequences or their elements."""

import math

from .protocol import EXHAUSTED, Cursor, Kind, as_cursor, check_iterable, \
    classify
from .utils import isint


class Flattening(Cursor):
    def __init__(self, upstream, depth=1):
        if not (isint(depth) or depth == math.inf) or depth < 0:
            raise ValueError("depth must be a positive integer or math.inf")

        self.depth = depth
        self.stack = [as_cursor(upstream)]

    def pull(self):
        while len(self.stack) > 0:
            value = self.stack[-1].advance()

            if value is EXHAUSTED:
                self.stack.pop()
                continue

            if len(self.stack) - 1 < self.depth:
                kind, nested = classify(value)
                if kind is Kind.NESTED:
                    self.stack.append(nested)
                    continue

            return value

        return EXHAUSTED


class Collation(Cursor):
    def __init__(self, sequences):
        check_iterable(sequences)
        self.cursors = [as_cursor(seq) for seq in sequences]

    def pull(self):
        if len(self.cursors) == 0:
            return EXHAUSTED

        values = []
        for cursor in self.cursors:
            value = cursor.advance()
            if value is EXHAUSTED:
                return EXHAUSTED
            values.append(value)

        return tuple(values)

    def release(self):
        self.cursors = []


class Concatenation(Cursor):
    def __init__(self, sequences):
        check_iterable(sequences)
        sequences = list(sequences)
        for seq in sequences[1:]:
            check_iterable(seq)

        self.current = as_cursor(sequences[0]) if sequences else None
        self.remaining = iter(sequences[1:])

    def pull(self):
        while self.current is not None:
            value = self.current.advance()
            if value is not EXHAUSTED:
                return value

            following = next(self.remaining, EXHAUSTED)
            self.current = None if following is EXHAUSTED \
                else as_cursor(following)

        return EXHAUSTED

    def release(self):
        self.remaining = iter(())


def flatten(sequence, depth=1):
    """Return a view on the values of nested sequences.

    Nested sequences are flattened up to `depth` levels, values which are
    not sequences (including strings) are returned as they are regardless
    of the level they are found at.

    Args:
        sequence (Iterable): The input sequence.
        depth (int): How many levels of nesting to remove, `0` leaves the
            sequence unchanged and :data:`math.inf` flattens everything.

    Example:

        >>> data = [1, [2, [3, [4]]], "ab"]
        >>> list(pullseq.flatten(data))
        [1, 2, [3, [4]], 'ab']
        >>> list(pullseq.flatten(data, math.inf))
        [1, 2, 3, 4, 'ab']
    """
    return Flattening(sequence, depth)


def collate(sequences):
    """Return a view on the collated/pasted/stacked sequences.

    The n'th element is a tuple of the n'th elements from each sequence.
    The collation stops with the shortest sequence, without pulling the
    following sequences any further.

    Example:

        >>> arr = collate([[ 1,   2,   3,   4],
        ...                ['a', 'b', 'c'],
        ...                [ 5,   6,   7,   8]])
        >>> list(arr)
        [(1, 'a', 5), (2, 'b', 6), (3, 'c', 7)]
    """
    return Collation(sequences)


def concatenate(sequences):
    """Return a view on the concatenated sequences.

    The sequences are drained one after the other, each one is only
    iterated once the previous one is exhausted.

    Example:

        >>> data1 = [0, 1, 2, 3]
        >>> data2 = []
        >>> data3 = [4, 5]
        >>> list(pullseq.concatenate([data1, data2, data3]))
        [0, 1, 2, 3, 4, 5]
    """
    return Concatenation(sequences)
