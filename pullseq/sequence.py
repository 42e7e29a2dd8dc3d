from . import consumers
from .indexing import Taking, TakingWhile
from .mapping import Filtering, FlatMapping, Mapping
from .protocol import Cursor, as_cursor
from .shape import Collation, Concatenation, Flattening
from .utils import unset


class Iter(Cursor):
    """Chainable wrapper around a cursor.

    Lazy operations (:meth:`map`, :meth:`filter`...) return a new
    :class:`Iter` which takes over the cursor of this one, so a chain
    should be built from the last returned object only. Terminal
    operations consume the values.

    Args:
        source (Iterable): Any iterable object.

    Raises:
        NotIterableError: `source` cannot be iterated.
    """
    def __init__(self, source):
        self.cursor = as_cursor(source)

    def pull(self):
        return self.cursor.advance()

    # Terminal operations -----------------------------------------------------

    def for_each(self, fn, this_arg=unset):
        consumers.for_each(self, fn, this_arg)

    def each(self, fn, this_arg=unset):
        """Alias for :meth:`for_each`."""
        consumers.for_each(self, fn, this_arg)

    def every(self, predicate, this_arg=unset):
        return consumers.every(self, predicate, this_arg)

    def some(self, predicate, this_arg=unset):
        return consumers.some(self, predicate, this_arg)

    def some_count(self, predicate, count, this_arg=unset):
        return consumers.some_count(self, predicate, count, this_arg)

    def find(self, predicate, this_arg=unset, default=None):
        return consumers.find(self, predicate, this_arg, default)

    def includes(self, element):
        return consumers.includes(self, element)

    def reduce(self, reducer, initial=unset):
        return consumers.reduce(self, reducer, initial)

    def collect_to(self, factory):
        return consumers.collect_to(self, factory)

    def collect_with(self, target, collector):
        consumers.collect_with(self, target, collector)

    def to_list(self):
        return consumers.to_list(self)

    def skip(self, amount):
        """Discard the next `amount` values immediately and return `self`."""
        return consumers.skip(self, amount)

    # Lazy operations ---------------------------------------------------------

    def map(self, f, this_arg=unset):
        return Iter(Mapping(self.cursor, f, this_arg))

    def filter(self, predicate, this_arg=unset):
        return Iter(Filtering(self.cursor, predicate, this_arg))

    def flat(self, depth=1):
        return Iter(Flattening(self.cursor, depth))

    def flat_map(self, f, this_arg=unset):
        return Iter(FlatMapping(self.cursor, f, this_arg))

    def zip(self, *sequences):
        return Iter(Collation((self.cursor,) + sequences))

    def join(self, *sequences):
        return Iter(Concatenation((self.cursor,) + sequences))

    def take(self, amount):
        return Iter(Taking(self.cursor, amount))

    def take_while(self, predicate, this_arg=unset):
        return Iter(TakingWhile(self.cursor, predicate, this_arg))


def lazy(source):
    """Wrap an iterable into a chainable lazy sequence.

    Example:

        >>> s = pullseq.lazy(range(10))
        >>> s.filter(lambda x: x % 3 == 0).map(lambda x: x * 10).to_list()
        [0, 30, 60, 90]
        >>> pullseq.lazy([[1, 2], [3]]).flat().reduce(lambda a, b: a + b)
        6
    """
    return Iter(source)
