from .errors import format_stack, reraise_err
from .protocol import EXHAUSTED, Cursor, Kind, as_cursor, classify
from .shape import collate
from .utils import bind, unset


class Mapping(Cursor):
    def __init__(self, upstream, f, this_arg=unset):
        self.f = bind(f, this_arg)
        self.upstream = as_cursor(upstream)
        self.n_pulled = 0
        self.stack = format_stack(2)

    def pull(self):
        value = self.upstream.advance()
        if value is EXHAUSTED:
            return EXHAUSTED

        try:
            value = self.f(value)
        except Exception as error:
            reraise_err(self.n_pulled, error, self, self.stack)

        self.n_pulled += 1
        return value

    def release(self):
        self.upstream = None


class Filtering(Cursor):
    def __init__(self, upstream, predicate, this_arg=unset):
        self.predicate = bind(predicate, this_arg)
        self.upstream = as_cursor(upstream)
        self.n_pulled = 0
        self.stack = format_stack(2)

    def pull(self):
        while True:
            value = self.upstream.advance()
            if value is EXHAUSTED:
                return EXHAUSTED

            try:
                keep = self.predicate(value)
            except Exception as error:
                reraise_err(self.n_pulled, error, self, self.stack)

            self.n_pulled += 1
            if keep:
                return value

    def release(self):
        self.upstream = None


class FlatMapping(Cursor):
    def __init__(self, upstream, f, this_arg=unset):
        self.f = bind(f, this_arg)
        self.upstream = as_cursor(upstream)
        self.current = None
        self.n_pulled = 0
        self.stack = format_stack(2)

    def pull(self):
        while True:
            if self.current is None:
                value = self.upstream.advance()
                if value is EXHAUSTED:
                    return EXHAUSTED

                try:
                    value = self.f(value)
                except Exception as error:
                    reraise_err(self.n_pulled, error, self, self.stack)

                self.n_pulled += 1
                kind, nested = classify(value)
                if kind is Kind.OPAQUE:
                    return value

                self.current = nested

            value = self.current.advance()
            if value is not EXHAUSTED:
                return value

            self.current = None

    def release(self):
        self.upstream = None
        self.current = None


def smap(f, *sequences, this_arg=unset):
    """Return a mapping of `f` over the sequence(s).

    Equivalent to :code:`(f(x) for x in sequence)`, values are computed
    one at a time when pulled.

    If several sequences are passed, they will be zipped together and their
    items will be passed as distinct arguments to f:
    :code:`(f(*x) for x in zip(*sequences))`

    Args:
        f (Callable): The mapping function.
        sequences (Iterable): One or several input sequences.
        this_arg (Any): Optional call-context, passed as the first
            argument of `f` when specified.

    Example:

        >>> m = pullseq.smap(lambda x: x + 2, [1, 2, 3, 4])
        >>> print(list(m))
        [3, 4, 5, 6]
        >>> def do(y, z):
        ...     print("computing now")
        ...     return y + z
        ...
        >>> a, b = [1, 2, 3], [4, 3, 2]
        >>> m = pullseq.smap(do, a, b)
        >>> print([v for v in m])
        computing now
        computing now
        computing now
        [5, 5, 5]
    """
    if len(sequences) <= 0:
        raise ValueError("at least one input sequence must be provided")

    if len(sequences) == 1:
        return Mapping(sequences[0], f, this_arg)

    g = bind(f, this_arg)
    return Mapping(collate(sequences), lambda args: g(*args))


def starmap(f, sequence):
    """Map a function over a sequence of argument tuples.

    A lazy equivalent of :func:`python:itertools.starmap`.
    """
    if not callable(f):
        raise TypeError("f must be callable")
    return Mapping(sequence, lambda x: f(*x))


def sfilter(predicate, sequence, this_arg=unset):
    """Return the values of `sequence` for which `predicate` holds.

    Upstream values are pulled until one passes the predicate, the
    relative order is preserved.

    Example:

        >>> list(pullseq.sfilter(lambda x: x % 2 == 0, range(10)))
        [0, 2, 4, 6, 8]
    """
    return Filtering(sequence, predicate, this_arg)


def flat_map(f, sequence, this_arg=unset):
    """Map `f` over a sequence and flatten the results by one level.

    Results which are not sequences themselves (strings included) are
    returned as single values.

    Example:

        >>> list(pullseq.flat_map(lambda x: [x] * x, [1, 0, 3]))
        [1, 3, 3, 3]
        >>> list(pullseq.flat_map(lambda x: x * 2, [1, [2]]))
        [2, 2, 2]
    """
    return FlatMapping(sequence, f, this_arg)
