from .errors import format_stack, reraise_err
from .protocol import EXHAUSTED, Cursor, as_cursor
from .utils import bind, get_logger, isint, unset


class Taking(Cursor):
    def __init__(self, upstream, amount):
        if not isint(amount):
            raise TypeError("amount must be an integer")
        if amount < 0:
            logger = get_logger(__name__)
            logger.warning("negative take amount %d, using 0", amount)
            amount = 0

        self.upstream = as_cursor(upstream)
        self.amount = amount
        self.iterated = 0

    def pull(self):
        # counts attempts, not values
        self.iterated += 1
        if self.iterated <= self.amount:
            return self.upstream.advance()
        return EXHAUSTED

    def release(self):
        self.upstream = None


class TakingWhile(Cursor):
    def __init__(self, upstream, predicate, this_arg=unset):
        self.predicate = bind(predicate, this_arg)
        self.upstream = as_cursor(upstream)
        self.n_pulled = 0
        self.stack = format_stack(2)

    def pull(self):
        value = self.upstream.advance()
        if value is EXHAUSTED:
            return EXHAUSTED

        try:
            keep = self.predicate(value)
        except Exception as error:
            reraise_err(self.n_pulled, error, self, self.stack)

        self.n_pulled += 1
        return value if keep else EXHAUSTED

    def release(self):
        self.upstream = None


def take(sequence, amount):
    """Return a view on the first `amount` values of a sequence.

    The upstream sequence is not pulled beyond `amount` values, which makes
    `take` the usual way to bound an infinite source.

    Example:

        >>> import itertools
        >>> list(pullseq.take(itertools.count(), 4))
        [0, 1, 2, 3]
    """
    return Taking(sequence, amount)


def take_while(predicate, sequence, this_arg=unset):
    """Return the longest prefix of a sequence satisfying `predicate`.

    The first value failing the predicate is consumed and discarded, and no
    value is pulled afterwards.

    Example:

        >>> list(pullseq.take_while(lambda x: x < 3, [1, 2, 3, 1]))
        [1, 2]
    """
    return TakingWhile(sequence, predicate, this_arg)
