"""Mapping from multi-dimensional coordinates to flat offsets."""

import itertools

from .errors import InvalidSliceError, OutOfRangeError
from .indexing import Slice
from .utils import as_dimensions, isint, slice_length


def row_major_strides(dimensions):
    """Return the strides of a C-ordered buffer with given dimensions."""
    strides = []
    stride = 1
    for d in reversed(dimensions):
        strides.append(stride)
        stride *= d
    return tuple(reversed(strides))


def _check_coordinate(coord, axis, length):
    if not isint(coord):
        raise TypeError(
            "coordinates must be integers, not " + coord.__class__.__name__)
    if coord < 0 or coord >= length:
        raise OutOfRangeError(
            "index {} is out of range for axis {} with length {}".format(
                coord, axis, length))


class Shape:
    """Dimensions of a row-major multi-dimensional buffer.

    Args:
        dimensions (int or Sequence[int]): size along each axis, either
            as separate arguments or as a single sequence, no argument
            gives a 0-rank shape which holds a single scalar.

    Example:

        >>> shape = Shape(2, 3)
        >>> shape.strides
        (3, 1)
        >>> shape.get_index((1, 2))
        5
    """
    def __init__(self, *dimensions):
        self._dimensions = as_dimensions(dimensions)
        self._strides = row_major_strides(self._dimensions)

    @property
    def dimensions(self):
        return self._dimensions

    @property
    def strides(self):
        return self._strides

    @property
    def rank(self):
        return len(self._dimensions)

    @property
    def size(self):
        size = 1
        for d in self._dimensions:
            size *= d
        return size

    @property
    def is_sliced(self):
        return False

    @property
    def root(self):
        """The un-sliced shape at the base of this shape."""
        return self

    def length(self, axis=0):
        """Return the size along `axis`."""
        if axis < -self.rank or axis >= self.rank:
            raise OutOfRangeError(
                "axis {} is out of range for shape of rank {}".format(
                    axis, self.rank))
        return self._dimensions[axis]

    def get_index(self, coords):
        """Return the flat offset of an element.

        Args:
            coords (Sequence[int]): coordinates of the element, if less
                than `rank` coordinates are given, the offset of the
                first element of the designated sub-volume is returned.

        Return:
            int: The offset of the element in the flat buffer.
        """
        coords = tuple(coords)
        if len(coords) > self.rank:
            raise OutOfRangeError(
                "too many coordinates ({}) for shape of rank {}".format(
                    len(coords), self.rank))

        offset = 0
        for axis, (c, d, s) in enumerate(
                zip(coords, self._dimensions, self._strides)):
            _check_coordinate(c, axis, d)
            offset += c * s

        return offset

    def unravel_index(self, offset):
        """Return the coordinates of the element at the nth position.

        The position is counted in row-major order over this shape.
        """
        if offset < 0 or offset >= self.size:
            raise OutOfRangeError(
                "offset {} is out of range for shape of size {}".format(
                    offset, self.size))

        coords = []
        for d in reversed(self._dimensions):
            coords.append(offset % d)
            offset //= d

        return tuple(reversed(coords))

    def coordinates(self):
        """Iterate over all coordinates in row-major order."""
        return itertools.product(*(range(d) for d in self._dimensions))

    def offsets(self):
        """Iterate over the offsets of the elements in row-major order."""
        return iter(range(self.size))

    def __getitem__(self, axis):
        return self.length(axis)

    def __iter__(self):
        return iter(self._dimensions)

    def __eq__(self, other):
        if isinstance(other, Shape):
            return self._dimensions == other.dimensions
        elif isinstance(other, tuple):
            return self._dimensions == other
        return NotImplemented

    def __hash__(self):
        return hash(self._dimensions)

    def __repr__(self):
        return "Shape({})".format(", ".join(map(str, self._dimensions)))


class SlicedShape(Shape):
    """Shape of a sliced sub-volume of another shape.

    Coordinates in the sliced shape are translated into coordinates in
    the parent shape, the parent then gives the flat offset. Axes
    selected by an index slice are dropped, axes without a slice are
    kept whole.

    Args:
        parent (Shape): the sliced shape, which is referenced, not
            copied.
        slices (Sequence[Slice]): one slice per leading axis of the
            parent.
    """
    def __init__(self, parent, slices):
        slices = tuple(slices)
        if len(slices) > parent.rank:
            raise InvalidSliceError(
                "too many slices ({}) for shape of rank {}".format(
                    len(slices), parent.rank))

        slices += (Slice(),) * (parent.rank - len(slices))
        bounds = tuple(s.resolve(parent.length(axis))
                       for axis, s in enumerate(slices))

        self.parent = parent
        self.slices = slices
        self.bounds = bounds

        super().__init__(tuple(
            slice_length(*b) for s, b in zip(slices, bounds)
            if not s.is_index))

    @property
    def is_sliced(self):
        return True

    @property
    def root(self):
        return self.parent.root

    def get_index(self, coords):
        coords = tuple(coords)
        if len(coords) > self.rank:
            raise OutOfRangeError(
                "too many coordinates ({}) for shape of rank {}".format(
                    len(coords), self.rank))

        parent_coords = []
        axis = 0
        for s, (start, _, step) in zip(self.slices, self.bounds):
            if s.is_index:
                parent_coords.append(start)
                continue

            if axis < len(coords):
                c = coords[axis]
                _check_coordinate(c, axis, self._dimensions[axis])
            else:
                c = 0

            parent_coords.append(start + c * step)
            axis += 1

        return self.parent.get_index(parent_coords)

    def offsets(self):
        for coords in self.coordinates():
            yield self.get_index(coords)

    def __repr__(self):
        return "SlicedShape({!r}, '{}')".format(
            self.parent, ",".join(str(s) for s in self.slices))
