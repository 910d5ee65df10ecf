"""Adapters giving flat read/write access to the containers under views.

A view never touches its data directly, it goes through one of the
backends below which are selected once, when the view is created, by
:func:`make_backend`.
"""

import array
import collections.abc
from abc import ABC, abstractmethod
from functools import singledispatch

from .errors import OutOfRangeError, UnsupportedBackendError, error_config
from .utils import get_logger


logger = get_logger(__name__)


class Backend(ABC):
    """Flat access to the elements of a container."""

    readonly = False

    def __init__(self, data):
        self.data = data

    @abstractmethod
    def read(self, offset):
        raise NotImplementedError

    @abstractmethod
    def write(self, offset, value):
        raise NotImplementedError

    @abstractmethod
    def __len__(self):
        raise NotImplementedError

    def check_offset(self, offset):
        if offset < 0 or offset >= len(self):
            raise OutOfRangeError(
                self.__class__.__name__ + " offset out of range")

    def __repr__(self):
        return "{}({})".format(
            self.__class__.__name__, self.data.__class__.__name__)


class ArrayBackend(Backend):
    """Fixed-size buffers, the size is captured once."""
    def __init__(self, data):
        super().__init__(data)
        self.size = len(data)

    def read(self, offset):
        self.check_offset(offset)
        return self.data[offset]

    def write(self, offset, value):
        self.check_offset(offset)
        self.data[offset] = value

    def __len__(self):
        return self.size


class ListBackend(Backend):
    """Growable sequences, the current length is used for every access."""
    def read(self, offset):
        self.check_offset(offset)
        return self.data[offset]

    def write(self, offset, value):
        self.check_offset(offset)
        self.data[offset] = value

    def __len__(self):
        return len(self.data)


class ReadOnlyBackend(Backend):
    """Immutable sequences, writes are dropped."""

    readonly = True

    def read(self, offset):
        self.check_offset(offset)
        return self.data[offset]

    def write(self, offset, value):
        if error_config.readonly == 'warn':
            logger.warning(
                "ignored write at offset %d of read-only %s",
                offset, self.data.__class__.__name__)

    def __len__(self):
        return len(self.data)


class ViewBackend(Backend):
    """Another view used as a flat buffer.

    Offsets are counted in row-major order over the shape of the
    wrapped view, whether it is sliced or not.
    """
    @property
    def readonly(self):
        return self.data.backend.readonly

    def read(self, offset):
        return self.data.get_value(*self.data.shape.unravel_index(offset))

    def write(self, offset, value):
        self.data.set_value(self.data.shape.unravel_index(offset), value)

    def __len__(self):
        return self.data.size


@singledispatch
def make_backend(data):
    """Return the backend adapter suited to a container.

    Args:
        data (Any): A list or mutable sequence, an immutable sequence,
            an :mod:`python:array`, a numpy array, a view or any other
            iterable which will be copied into a list.

    Return:
        Backend: The adapter.
    """
    if isinstance(data, collections.abc.MutableSequence):
        return ListBackend(data)
    elif isinstance(data, collections.abc.Sequence):
        return ReadOnlyBackend(data)
    elif hasattr(data, '__array_interface__') and hasattr(data, 'flat'):
        # numpy arrays are addressed through their flat iterator, which
        # writes through to the array whatever its memory layout
        if not data.flags.writeable:
            return ReadOnlyBackend(data.flat)
        return ArrayBackend(data.flat)
    elif isinstance(data, collections.abc.Iterable) \
            and not isinstance(data, (collections.abc.Mapping,
                                      collections.abc.Set)):
        return ArrayBackend(list(data))
    else:
        raise UnsupportedBackendError(
            "unsupported data source type: {}".format(type(data)))


@make_backend.register(Backend)
def _(data):
    return data


@make_backend.register(list)
def _(data):
    return ListBackend(data)


@make_backend.register(array.array)
@make_backend.register(bytearray)
def _(data):
    return ArrayBackend(data)


@make_backend.register(memoryview)
def _(data):
    if data.readonly:
        return ReadOnlyBackend(data)
    return ArrayBackend(data)


@make_backend.register(tuple)
@make_backend.register(range)
@make_backend.register(str)
@make_backend.register(bytes)
def _(data):
    return ReadOnlyBackend(data)
