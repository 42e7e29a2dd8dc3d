"""The pull protocol shared by every sequence and adaptor.

A :class:`Cursor` produces one value per call to
:meth:`Cursor.advance`, or :data:`EXHAUSTED` once it has nothing left.
Exhaustion is permanent: a cursor never produces a value after having
reported exhaustion, even if its upstream misbehaves.
"""

import enum
import numbers
from abc import ABC, abstractmethod
from collections.abc import Iterable

from .errors import NotIterableError


class _Exhausted(object):
    def __repr__(self):
        return "EXHAUSTED"


EXHAUSTED = _Exhausted()
"""Signal returned by :meth:`Cursor.advance` when no value is left."""


class Cursor(ABC):
    """Traversal state over a sequence.

    Subclasses implement :meth:`pull`, consumers call :meth:`advance`.
    A cursor is also a regular Python iterator.

    Cursors are owned by a single traversal and must not be advanced from
    two places at once.
    """
    exhausted = False

    @abstractmethod
    def pull(self):
        """Return the next value or :data:`EXHAUSTED`."""
        raise NotImplementedError

    def advance(self):
        if self.exhausted:
            return EXHAUSTED

        try:
            value = self.pull()
        except StopIteration as error:
            # would silently end the consumer loop
            raise RuntimeError(
                "{} raised StopIteration".format(self.__class__.__name__)) \
                from error

        if value is EXHAUSTED:
            self.exhausted = True
            self.release()

        return value

    def release(self):
        """Drop references to upstream state once exhausted."""

    def __iter__(self):
        return self

    def __next__(self):
        value = self.advance()
        if value is EXHAUSTED:
            raise StopIteration
        return value


class IteratorCursor(Cursor):
    def __init__(self, iterable):
        self.iterator = iter(iterable)

    def pull(self):
        return next(self.iterator, EXHAUSTED)

    def release(self):
        self.iterator = None


# Enumerability ---------------------------------------------------------------

ATOMIC_TYPES = (str, bytes, bytearray)


class Kind(enum.Enum):
    """How adaptors treat a value met inside a sequence."""
    OPAQUE = 0
    NESTED = 1


def classify(value):
    """Return the kind of `value` and a cursor over it if it is nested.

    Anything accepted by :func:`python:iter` is nested, including objects
    which only implement the `__getitem__` sequence protocol. Text and
    binary strings are leaves even though they are iterable.
    """
    if isinstance(value, ATOMIC_TYPES):
        return Kind.OPAQUE, None
    if isinstance(value, Cursor):
        return Kind.NESTED, value

    try:
        iterator = iter(value)
    except TypeError:
        return Kind.OPAQUE, None

    return Kind.NESTED, IteratorCursor(iterator)


def kind_of(value):
    """Classify a value as a leaf or as a nested sequence.

    Example:

        >>> kind_of([1, 2])
        <Kind.NESTED: 1>
        >>> kind_of("ab")
        <Kind.OPAQUE: 0>
    """
    return classify(value)[0]


def check_iterable(source):
    """Raise :class:`NotIterableError` if `source` cannot be iterated.

    The check does not call `iter`, so that sources can be opened later.
    """
    if isinstance(source, (Cursor, Iterable)):
        return
    if hasattr(type(source), "__getitem__"):  # sequence protocol
        return

    raise NotIterableError(
        "{} object is not iterable".format(source.__class__.__name__))


def as_cursor(source):
    """Return a cursor over `source`.

    Raises:
        NotIterableError: `source` does not support iteration.
    """
    if isinstance(source, Cursor):
        return source

    try:
        iterator = iter(source)
    except TypeError:
        raise NotIterableError(
            "{} object is not iterable".format(
                source.__class__.__name__)) from None

    return IteratorCursor(iterator)


# Equality --------------------------------------------------------------------

def isnan(x):
    return isinstance(x, numbers.Number) and x != x


def same_value(a, b):
    """Equality where two NaN numbers are considered the same value.

    Values without a truth value for `==` (arrays) only match themselves.
    """
    if a is b:
        return True

    try:
        if a == b:
            return True
    except ValueError:  # ambiguous elementwise comparison
        return False

    return isnan(a) and isnan(b)
