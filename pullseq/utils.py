"""Miscellaneous tools for internal use."""

import functools
import logging
import numbers
from logging import NullHandler


unset = object()


def isint(x):
    """Return wether `x` is an integral number."""
    return isinstance(x, numbers.Integral)


def get_logger(name):
    logger = logging.getLogger(name)
    logger.addHandler(NullHandler())
    return logger


def bind(func, this_arg=unset):
    """Return `func` with its call-context bound.

    When `this_arg` is given, the returned callable invokes
    :code:`func(this_arg, *args)`, otherwise `func` is returned unchanged.
    """
    if not callable(func):
        raise TypeError("f must be callable")
    if this_arg is unset:
        return func
    return functools.partial(func, this_arg)
