"""Miscellaneous tools for internal use."""

import logging
import numbers
from logging import NullHandler

from .errors import InvalidArgumentError, InvalidSliceError


def isint(x):
    """Return wether `x` is an integral number."""
    return isinstance(x, numbers.Integral)


def clip(x, a, b):
    """Clip value within specified range."""
    return max(a, min(x, b))


def ceildiv(a, b):
    """Return the ceiling of `a / b` using integer arithmetic only."""
    return -(-a // b)


def get_logger(name):
    logger = logging.getLogger(name)
    logger.addHandler(NullHandler())
    return logger


def as_dimensions(dimensions):
    """Normalize dimension arguments into a tuple of sizes.

    Args:
        dimensions (Sequence): Either several integers or a single
            sequence of integers, as received by a variadic function.

    Return:
        Tuple[int]: The dimensions.
    """
    if len(dimensions) == 1 and not isint(dimensions[0]):
        dimensions = dimensions[0]

    try:
        dimensions = tuple(dimensions)
    except TypeError:
        raise InvalidArgumentError(
            "dimensions must be integers, not "
            + dimensions.__class__.__name__) from None

    for d in dimensions:
        if not isint(d):
            raise InvalidArgumentError(
                "dimensions must be integers, not " + d.__class__.__name__)
        if d < 0:
            raise InvalidArgumentError(
                "negative dimensions are not allowed: {}".format(dimensions))

    return tuple(int(d) for d in dimensions)


def normalize_slice(start, stop, step, size):
    """Normalize slice parameters.

    Args:
        start (Optional[int]): start index
        stop (Optional[int]): stop index
        step (Optional[int]): step size
        size (int): size of the sliced axis

    Return:
        (int, int, int): A triplet of integers start, stop, step such
        that the selected positions are :code:`start + i * step` for
        :code:`0 <= i < slice_length(start, stop, step)`. start and stop
        lie in `[0, size]` for a positive step and in `[-1, size - 1]`
        for a negative one.
    """
    if step is None:
        step = 1
    elif step == 0:
        raise InvalidSliceError("slice step cannot be 0")

    if start is None:
        start = 0 if step > 0 else size - 1
    elif start < 0:
        start = size + start

    if stop is None:
        stop = size if step > 0 else -1
    elif stop < 0:
        stop = size + stop

    if step > 0:
        start = clip(start, 0, size)
        stop = clip(stop, 0, size)
    else:
        start = clip(start, -1, size - 1)
        stop = clip(stop, -1, size - 1)

    return start, stop, step


def slice_length(start, stop, step):
    """Number of positions selected by normalized slice parameters."""
    return max(0, ceildiv(stop - start, step))
