"""Slice expressions selecting a sub-range or a single position of an axis."""

from .errors import InvalidSliceError, OutOfRangeError
from .utils import isint, normalize_slice, slice_length


class Slice:
    """Selection along one axis.

    A slice either selects positions `start, start + step, ...` up to
    `stop` excluded, or a single position (`is_index`) in which case the
    axis is dropped from the resulting view.

    Negative `start` and `stop` count from the end of the axis, they are
    resolved against the actual axis length by :meth:`resolve`.
    """
    def __init__(self, start=None, stop=None, step=None, is_index=False):
        for name, value in (('start', start), ('stop', stop), ('step', step)):
            if value is not None and not isint(value):
                raise InvalidSliceError(
                    "slice {} must be an integer or None, not {}".format(
                        name, value.__class__.__name__))

        if step == 0:
            raise InvalidSliceError("slice step cannot be 0")

        if is_index:
            if start is None:
                raise InvalidSliceError("index slice requires a position")
            if stop is not None or step not in (None, 1):
                raise InvalidSliceError(
                    "index slice cannot have a stop or a step")

        self.start = None if start is None else int(start)
        self.stop = None if stop is None else int(stop)
        self.step = 1 if step is None else int(step)
        self.is_index = bool(is_index)

    @classmethod
    def index(cls, i):
        """Return a slice selecting position `i` and dropping the axis."""
        return cls(i, is_index=True)

    @classmethod
    def from_builtin(cls, key):
        """Convert a python :class:`python:slice` object."""
        return cls(key.start, key.stop, key.step)

    @classmethod
    def parse(cls, text):
        """Alias for :func:`parse_slices`."""
        return parse_slices(text)

    def resolve(self, length):
        """Resolve the slice against an axis.

        Args:
            length (int): length of the sliced axis.

        Return:
            (int, int, int): start, stop and step where negative values
            have been translated and bounds clamped to the axis, for an
            index slice, the position `i` gives `(i, i + 1, 1)`.
        """
        if self.is_index:
            i = self.start + length if self.start < 0 else self.start
            if i < 0 or i >= length:
                raise OutOfRangeError(
                    "index {} is out of range for axis of length {}".format(
                        self.start, length))
            return i, i + 1, 1

        return normalize_slice(self.start, self.stop, self.step, length)

    def length(self, length):
        """Return the number of positions selected on an axis."""
        return slice_length(*self.resolve(length))

    def __eq__(self, other):
        if not isinstance(other, Slice):
            return NotImplemented
        return (self.start, self.stop, self.step, self.is_index) \
            == (other.start, other.stop, other.step, other.is_index)

    def __hash__(self):
        return hash((self.start, self.stop, self.step, self.is_index))

    def __repr__(self):
        if self.is_index:
            return "Slice.index({})".format(self.start)
        return "Slice({}, {}, {})".format(self.start, self.stop, self.step)

    def __str__(self):
        if self.is_index:
            return str(self.start)

        out = "{}:{}".format(
            "" if self.start is None else self.start,
            "" if self.stop is None else self.stop)
        if self.step != 1:
            out += ":{}".format(self.step)
        return out


def index(i):
    """Return a slice which selects a single position and drops the axis.

    Example:

        >>> from slicendice import view
        >>> data = view([1, 2, 3, 4, 5, 6], (2, 3))
        >>> data.get_slice(index(1)).tolist()
        [4, 5, 6]
    """
    return Slice.index(i)


def _parse_bound(part, spec):
    part = part.strip()
    if part == "":
        return None

    try:
        return int(part)
    except ValueError:
        raise InvalidSliceError(
            "invalid slice specification: '{}'".format(spec)) from None


def _parse_spec(spec):
    spec = spec.strip()
    if spec == "":
        raise InvalidSliceError("empty slice specification")

    parts = spec.split(":")
    if len(parts) > 3:
        raise InvalidSliceError(
            "invalid slice specification: '{}'".format(spec))

    bounds = [_parse_bound(p, spec) for p in parts]

    if len(bounds) == 1:
        return Slice.index(bounds[0])

    return Slice(*bounds)


def parse_slices(text):
    """Parse a textual slicing expression.

    The expression lists one specification per axis separated by commas,
    following python's slicing syntax: `start:stop:step` where any part
    can be omitted. A specification without colon selects a single
    position and drops the axis. Axes which are not specified are kept
    whole.

    Args:
        text (str): the slicing expression, an empty string selects
            everything.

    Return:
        Tuple[Slice]: One slice per specified axis.

    Example:

        >>> parse_slices("1:, ::2")
        (Slice(1, None, 1), Slice(None, None, 2))
        >>> parse_slices("-1")
        (Slice.index(-1),)
    """
    if not isinstance(text, str):
        raise TypeError(
            "slicing expression must be a string, not "
            + text.__class__.__name__)

    if text.strip() == "":
        return ()

    return tuple(_parse_spec(spec) for spec in text.split(","))


def format_slices(slices):
    """Return the textual expression for a sequence of slices.

    The result is parsed back by :func:`parse_slices` into equal slices.
    """
    return ",".join(str(s) for s in slices)


def as_slices(keys):
    """Convert slicing keys into slices.

    Args:
        keys (Sequence): :class:`Slice` objects, python slices, integers
            (single position) or slicing expressions (see
            :func:`parse_slices`), a single tuple or list of such keys
            is also accepted.

    Return:
        Tuple[Slice]: One slice per key.
    """
    if len(keys) == 1 and isinstance(keys[0], (tuple, list)):
        keys = keys[0]

    out = []
    for k in keys:
        if isinstance(k, Slice):
            out.append(k)
        elif isinstance(k, slice):
            out.append(Slice.from_builtin(k))
        elif isint(k):
            out.append(Slice.index(k))
        elif isinstance(k, str):
            out.extend(parse_slices(k))
        else:
            raise TypeError(
                "slices must be Slice, slice, int or str, not "
                + k.__class__.__name__)

    return tuple(out)
