"""Multi-dimensional views over flat containers."""

from .backends import ViewBackend, make_backend
from .errors import InvalidArgumentError, OutOfRangeError, ReshapeError, \
    error_config
from .indexing import as_slices, index
from .shape import Shape, SlicedShape
from .utils import get_logger, isint


logger = get_logger(__name__)


class ArrayView:
    """A multi-dimensional view over a flat container.

    The view does not copy nor own the data, reads and writes are
    forwarded to the container so that changes are visible both ways.
    Slicing a view returns another view over the same container.

    Args:
        data (Any): The container, see :func:`make_backend` for the
            supported types.
        shape (Optional[Shape or Sequence[int]]): Dimensions of the
            view, defaults to a 1D view over all the elements.
    """
    def __init__(self, data, shape=None):
        self.backend = make_backend(data)

        if shape is None:
            shape = Shape(len(self.backend))
        elif not isinstance(shape, Shape):
            shape = Shape(shape)

        self.shape = shape

    @classmethod
    def range(cls, stop, start=0, step=1):
        """Return a 1D view over evenly spaced integers.

        Unlike :class:`python:range`, bounds are always enumerated in
        ascending order: if `stop` is lower than `start` the two are
        swapped.

        Args:
            stop (int): end value, excluded.
            start (int): first value (default 0).
            step (int): strictly positive increment (default 1).

        Example:

            >>> ArrayView.range(5, start=1, step=2).tolist()
            [1, 3]
            >>> ArrayView.range(2, start=5).tolist()
            [2, 3, 4]
        """
        if step < 1:
            raise InvalidArgumentError(
                "step must be > 0, given: {}".format(step))

        if stop < start:
            logger.warning(
                "range stop %d is lower than start %d, bounds are swapped",
                stop, start)
            start, stop = stop, start

        return cls(list(range(start, stop, step)))

    @property
    def rank(self):
        return self.shape.rank

    @property
    def size(self):
        return self.shape.size

    @property
    def dimensions(self):
        return self.shape.dimensions

    @property
    def is_sliced(self):
        return self.shape.is_sliced

    def get_value(self, *coords):
        """Return the element at given coordinates.

        Negative coordinates are not supported. With less than `rank`
        coordinates, the first element of the designated sub-volume is
        returned.
        """
        return self.backend.read(self.shape.get_index(coords))

    def set_value(self, coords, value):
        """Assign the element at given coordinates."""
        if isint(coords):
            coords = (coords,)
        self.backend.write(self.shape.get_index(coords), value)

    def set_values(self, coords, values):
        """Assign consecutive elements of the container.

        The values are written one after the other in the container,
        starting from the element at `coords`. Nothing is written if
        the values would overrun the container.
        """
        if isint(coords):
            coords = (coords,)

        values = list(values)
        offset = self.shape.get_index(coords)
        if offset + len(values) > len(self.backend):
            raise OutOfRangeError(
                "cannot write {} values from offset {} into {} elements".format(
                    len(values), offset, len(self.backend)))

        for value in values:
            self.backend.write(offset, value)
            offset += 1

    def get_slice(self, *slices):
        """Return a view on a sliced sub-volume.

        Args:
            slices: :class:`Slice` objects, python slices, integers
                (which drop the axis) or a slicing expression (see
                :func:`parse_slices`), one per leading axis.

        Example:

            >>> data = view(list(range(10)))
            >>> data.get_slice("2:8:2").tolist()
            [2, 4, 6]
            >>> data.get_slice(slice(None, -1)).tolist()
            [0, 1, 2, 3, 4, 5, 6, 7, 8]
        """
        return ArrayView(self.backend, SlicedShape(self.shape,
                                                   as_slices(slices)))

    def reshape(self, *dimensions):
        """Return a view of the same elements with other dimensions.

        The elements of an unsliced view are remapped directly, those of
        a sliced view are read in row-major order through the sliced
        view itself. Nothing is copied in both cases.
        """
        shape = Shape(*dimensions)

        if shape.size != self.size:
            if error_config.reshape == 'raise':
                raise ReshapeError(
                    "cannot reshape view of size {} into shape {}".format(
                        self.size, shape.dimensions))
            logger.warning(
                "reshaping view of size %d into shape %s of size %d",
                self.size, shape.dimensions, shape.size)

        if self.is_sliced:
            logger.debug("wrapping sliced view %s to reshape it into %s",
                         self.shape, shape)
            return ArrayView(ViewBackend(self), shape)

        return ArrayView(self.backend, shape)

    def tolist(self):
        """Return the elements as nested lists."""
        if self.rank == 0:
            return self.get_value()
        elif self.rank == 1:
            return list(self)
        else:
            return [self.get_slice(index(i)).tolist()
                    for i in range(len(self))]

    def _element_coords(self, keys):
        # full coordinates address an element, anything else a slice
        if len(keys) != self.rank or not all(isint(k) for k in keys):
            return None

        return tuple(k + d if k < 0 else k
                     for k, d in zip(keys, self.dimensions))

    def __len__(self):
        if self.rank == 0:
            raise TypeError("len() of unsized " + self.__class__.__name__)
        return self.shape.length(0)

    def __iter__(self):
        for offset in self.shape.offsets():
            yield self.backend.read(offset)

    def __getitem__(self, key):
        keys = key if isinstance(key, tuple) else (key,)

        coords = self._element_coords(keys)
        if coords is not None:
            return self.get_value(*coords)

        return self.get_slice(*keys)

    def __setitem__(self, key, value):
        keys = key if isinstance(key, tuple) else (key,)

        coords = self._element_coords(keys)
        if coords is not None:
            self.set_value(coords, value)
            return

        target = self.get_slice(*keys)
        if target.rank == 0:
            target.set_value((), value)
            return

        values = list(value)
        if len(values) != target.size:
            raise ValueError(
                self.__class__.__name__
                + " only supports one-to-one assignment")

        for offset, v in zip(target.shape.offsets(), values):
            target.backend.write(offset, v)

    def to_string(self, flat=False):
        """Return a nested brackets representation of the elements.

        Args:
            flat (bool): whether to write everything on a single line,
                only the line breaks are dropped, indentation is kept.
        """
        out = []
        self._pretty_print(out, flat)
        return "".join(out)

    def _pretty_print(self, out, flat=False, indent=0):
        if self.rank == 0:
            out.append(str(self.get_value()))
            return

        if self.rank == 1:
            out.append("[" + ", ".join(str(x) for x in self) + "]")
            return

        out.append("[")
        size = len(self)
        for i in range(size):
            if i > 0:
                out.append(" " * (indent + 1))
            # reduce the volume to a sub-volume of rank - 1
            sub_volume = self.get_slice(index(i))
            sub_volume._pretty_print(out, flat, indent + 1)
            if i < size - 1:
                out.append(",")
                if not flat:
                    out.append("\n")
                    if sub_volume.rank > 1:
                        out.append("\n")
        out.append("]")

    def __str__(self):
        return self.to_string()

    def __repr__(self):
        return "{}({}, shape={})".format(
            self.__class__.__name__, self.to_string(flat=True),
            self.dimensions)


@make_backend.register(ArrayView)
def _(data):
    return ViewBackend(data)


def view(data, shape=None):
    """Return a multi-dimensional view over a flat container.

    Args:
        data (Any): A list or mutable sequence, an immutable sequence
            (writes are then ignored), an :mod:`python:array`, a numpy
            array, another view or any iterable, which is copied.
        shape (Optional[Sequence[int]]): Dimensions of the view,
            defaults to a 1D view over all the elements.

    Example:

        >>> data = [1, 2, 3, 4, 5, 6]
        >>> grid = view(data, (2, 3))
        >>> grid[1, 0]
        4
        >>> grid["1"].tolist()
        [4, 5, 6]
        >>> grid[0, 0] = -1
        >>> data[0]
        -1
        >>> print(grid)
        [[-1, 2, 3],
         [4, 5, 6]]
    """
    return ArrayView(data, shape)
