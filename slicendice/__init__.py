"""
A python library to slice and reshape flat containers as n-d arrays.

The slicendice package maps multi-dimensional coordinates onto the
elements of flat containers (lists, arrays, tuples...) in row-major
order. Views support integer indexing, slicing, reshaping, item
assignment and iteration without ever copying the underlying data:
slices and reshapes are views over the same container and writes go
straight to it.

Slices can also be written compactly as text, following python's own
syntax, one specification per axis: `"1:, ::2"`.
"""

from .backends import (
    ArrayBackend,
    Backend,
    ListBackend,
    ReadOnlyBackend,
    ViewBackend,
    make_backend,
)
from .errors import (
    InvalidArgumentError,
    InvalidSliceError,
    OutOfRangeError,
    ReshapeError,
    UnsupportedBackendError,
    seterr,
)
from .indexing import Slice, format_slices, index, parse_slices
from .shape import Shape, SlicedShape
from .view import ArrayView, view
from .version import version as __version__

__all__ = [
    "__version__",
    "view",
    "ArrayView",
    "Shape",
    "SlicedShape",
    "Slice",
    "index",
    "parse_slices",
    "format_slices",
    "make_backend",
    "Backend",
    "ArrayBackend",
    "ListBackend",
    "ReadOnlyBackend",
    "ViewBackend",
    "OutOfRangeError",
    "InvalidSliceError",
    "InvalidArgumentError",
    "UnsupportedBackendError",
    "ReshapeError",
    "seterr",
]
