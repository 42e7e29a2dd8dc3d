"""Debugging tools."""

import math
from time import monotonic, perf_counter

from .errors import format_stack, reraise_err
from .protocol import EXHAUSTED, Cursor, as_cursor


class Debug(Cursor):
    def __init__(self, sequence, func, max_calls, max_rate):
        if not callable(func):
            raise TypeError("func must be callable")

        self.upstream = as_cursor(sequence)
        self.max_calls = max_calls
        self.max_rate = max_rate
        self.n_calls = 0
        self.n_pulled = 0
        self.last_call = monotonic()
        self.func = func
        self.stack = format_stack(2)

    def silence(self):
        if self.max_calls is not None:
            if self.n_calls >= self.max_calls:
                return True

        if self.max_rate is not None:
            elapsed = monotonic() - self.last_call
            if elapsed < (1.0 / self.max_rate):
                return True

        return False

    def pull(self):
        value = self.upstream.advance()
        if value is EXHAUSTED:
            return EXHAUSTED

        if not self.silence():
            try:
                self.func(self.n_pulled, value)
            except Exception as error:
                reraise_err(self.n_pulled, error, self, self.stack)
            self.last_call = monotonic()
            self.n_calls += 1

        self.n_pulled += 1
        return value

    def release(self):
        self.upstream = None


def debug(sequence, func, max_calls=None, max_rate=None):
    """Wrap a sequence to trigger a function on each pulled value.

    Args:
        sequence (Iterable):
            Source sequence.
        func (Callable):
            A function to call whenever a value is pulled, must take the
            index and value of the items.
        max_calls (Optional[int]):
            An optional count limit on how many times `func` is invoked
            (default None).
        max_rate (Optional[int]):
            An optional rate limit to avoid spamming `func`.

    Returns:
        (Cursor): The wrapped sequence.

    Example:

        .. testsetup::

           from pullseq.instrument import debug

        >>> sequence = [1, 2, 3, 4, 5]
        >>> watchthis = debug(sequence, lambda i, v: print(v), 2)
        >>> x = next(watchthis)
        1
        >>> y = next(watchthis)
        2
        >>> z = next(watchthis)
    """
    return Debug(sequence, func, max_calls, max_rate)


class ThroughputMonitor(Cursor):
    def __init__(self, sequence):
        self.upstream = as_cursor(sequence)
        self.n_calls = 0
        self.time_spent = 0

    def reset(self):
        """Reset perf counter."""
        self.n_calls = 0
        self.time_spent = 0

    def throughput(self):
        """Returns average measured throughput.

        Returns `inf` if pulling was too fast to be measured.
        """
        if self.n_calls == 0:
            raise RuntimeError(
                "cannot measure throughput before any element was pulled")
        if self.time_spent == 0:
            return math.inf

        return self.n_calls / self.time_spent

    def read_delay(self):
        """Return average measured time spent pulling values."""
        if self.n_calls == 0:
            raise RuntimeError(
                "cannot measure read delay before any element was pulled")

        return self.time_spent / self.n_calls

    def pull(self):
        t_start = perf_counter()
        value = self.upstream.advance()
        t_stop = perf_counter()

        if value is not EXHAUSTED:
            self.time_spent += t_stop - t_start
            self.n_calls += 1

        return value

    def release(self):
        self.upstream = None


def monitor_throughput(sequence):
    """Wrap a sequence in a cursor with three additional methods:

    * :code:`read_delay()` the average time it takes to pull a value.
    * :code:`throughput()` the invert of the above.
    * :code:`reset()` resets the accumulated statistics.

    """
    return ThroughputMonitor(sequence)
