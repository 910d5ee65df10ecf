import collections.abc
import itertools
import logging
import random

import pytest
from slicendice import ArrayView, InvalidArgumentError, OutOfRangeError, \
    ReshapeError, Shape, Slice, ViewBackend, index, parse_slices, seterr, \
    view


class CountingSequence(collections.abc.Sequence):
    def __init__(self, data):
        self.data = data
        self.n_reads = 0

    def __len__(self):
        return len(self.data)

    def __iter__(self):
        return iter(self.data)

    def __getitem__(self, item):
        self.n_reads += 1
        return self.data[item]


def random_dimensions():
    return tuple(random.randint(1, 4) for _ in range(random.randint(1, 4)))


def test_construction():
    data = [random.random() for _ in range(10)]
    v = view(data)
    assert v.shape == Shape(10)
    assert v.rank == 1
    assert v.size == 10
    assert len(v) == 10
    assert list(v) == data
    assert not v.is_sliced

    v = ArrayView(data, (2, 5))
    assert v.dimensions == (2, 5)
    assert len(v) == 2

    v = ArrayView(data, Shape(5, 2))
    assert v.dimensions == (5, 2)

    v = view(x for x in range(4))
    assert list(v) == [0, 1, 2, 3]

    with pytest.raises(InvalidArgumentError):
        view(data, (2, -5))


def test_row_major_enumeration():
    v = view([0, 1, 2, 3, 4, 5], (2, 3))
    assert list(v) == [0, 1, 2, 3, 4, 5]
    assert v.tolist() == [[0, 1, 2], [3, 4, 5]]


def test_enumeration_restartable():
    v = view(list(range(10)))["1::3"]
    it = iter(v)
    assert next(it) == 1
    assert list(v) == [1, 4, 7]
    assert list(it) == [4, 7]
    assert list(v) == [1, 4, 7]


def test_get_value():
    data = list(range(24))
    v = view(data, (2, 3, 4))
    for c in itertools.product(range(2), range(3), range(4)):
        assert v.get_value(*c) == c[0] * 12 + c[1] * 4 + c[2]

    # partial coordinates give the first element of the sub-volume
    assert v.get_value(1) == 12
    assert v.get_value(1, 2) == 20

    with pytest.raises(OutOfRangeError):
        v.get_value(2, 0, 0)

    with pytest.raises(OutOfRangeError):
        v.get_value(-1, 0, 0)


def test_set_value():
    data = [0] * 6
    v = view(data, (2, 3))
    v.set_value((1, 2), 5)
    v.set_value([0, 1], 1)
    assert data == [0, 1, 0, 0, 0, 5]

    w = view(data)
    w.set_value(0, 7)
    assert data[0] == 7

    with pytest.raises(OutOfRangeError):
        v.set_value((2, 0), 1)


def test_set_values():
    data = [0] * 6
    v = view(data, (2, 3))
    v.set_values((1, 0), [7, 8, 9])
    assert data == [0, 0, 0, 7, 8, 9]
    v.set_values(0, [1, 2])
    assert data == [1, 2, 0, 7, 8, 9]
    v.set_values((0, 1), iter([-1, -2, -3]))
    assert data == [1, -1, -2, -3, 8, 9]

    with pytest.raises(OutOfRangeError):
        v.set_values((2, 0), [1])

    # nothing is written when the values overrun the container
    data = [0] * 4
    with pytest.raises(OutOfRangeError):
        view(data).set_values(2, [1, 2, 3])
    assert data == [0, 0, 0, 0]

    data = [0] * 6
    with pytest.raises(OutOfRangeError):
        view(data, (2, 3)).set_values((1, 1), iter([1, 2, 3]))
    assert data == [0] * 6

    view(data, (2, 3)).set_values((1, 1), [1, 2])
    assert data == [0, 0, 0, 0, 1, 2]


def test_slicing_examples():
    v = view([0, 1, 2, 3, 4, 5, 6, 7, 8, 9])
    assert list(v.get_slice("2:8:2")) == [2, 4, 6]
    assert list(v.get_slice(":-1")) == [0, 1, 2, 3, 4, 5, 6, 7, 8]
    assert list(v.get_slice("::-1")) == list(range(9, -1, -1))
    assert list(v.get_slice(Slice(2, 8, 2))) == [2, 4, 6]
    assert list(v.get_slice(slice(None, -1))) == list(range(9))
    assert list(v[2:8:2]) == [2, 4, 6]

    grid = view([1, 2, 3, 4, 5, 6], (2, 3))
    row = grid.get_slice(index(1))
    assert row.rank == 1
    assert list(row) == [4, 5, 6]
    assert grid.get_slice("1").tolist() == [4, 5, 6]
    assert grid.get_slice(":, 1").tolist() == [2, 5]
    assert grid.get_slice("::-1, ::-1").tolist() == [[6, 5, 4], [3, 2, 1]]
    assert grid.get_slice(":, 5:").tolist() == [[], []]


def test_slice_is_noop_with_full_axis():
    for _ in range(10):
        dims = random_dimensions()
        n = Shape(dims).size
        v = view([random.random() for _ in range(n)], dims)
        s = v.get_slice(":")
        assert s.is_sliced
        assert s.dimensions == v.dimensions
        for c in itertools.product(*(range(d) for d in dims)):
            assert s.get_value(*c) == v.get_value(*c)


def test_slice_against_nested_lists():
    data = list(range(5 * 6))
    nested = [data[i * 6:(i + 1) * 6] for i in range(5)]
    v = view(data, (5, 6))

    for _ in range(100):
        k0 = slice(random.choice([None, random.randint(-7, 7)]),
                   random.choice([None, random.randint(-7, 7)]),
                   random.choice([None, 1, 2, -1, -3]))
        k1 = slice(random.choice([None, random.randint(-7, 7)]),
                   random.choice([None, random.randint(-7, 7)]),
                   random.choice([None, 1, 3, -2]))
        expected = [row[k1] for row in nested[k0]]
        assert v[k0, k1].tolist() == expected
        assert list(v[k0, k1]) == list(itertools.chain(*expected))


def test_nested_slicing():
    data = list(range(100))
    v = view(data, (10, 10))
    s = v["1:-1, ::2"]["::3, 1:"]
    assert s.dimensions == (3, 4)
    assert s.tolist() == [[12, 14, 16, 18], [42, 44, 46, 48],
                          [72, 74, 76, 78]]
    assert s.shape.root is v.shape


def test_slicing_is_zero_copy():
    data = CountingSequence(list(range(12)))
    v = view(data, (3, 4))
    s = v.get_slice("1:, ::2")
    assert data.n_reads == 0

    data.data[4] = -4
    assert s.get_value(0, 0) == -4
    assert data.n_reads == 1

    lst = list(range(12))
    s = view(lst, (3, 4))["1:, 1"]
    s[0] = -1
    assert lst[5] == -1


def test_getitem():
    v = view([1, 2, 3, 4, 5, 6], (2, 3))
    assert v[1, 2] == 6
    assert v[-1, -1] == 6
    assert v[0, -3] == 1
    assert v[1].tolist() == [4, 5, 6]
    assert v[-2].tolist() == [1, 2, 3]
    assert v[:, 1].tolist() == [2, 5]
    assert v["1"].tolist() == [4, 5, 6]
    assert v[Slice(1)].tolist() == [[4, 5, 6]]
    assert v[1][2] == 6

    with pytest.raises(OutOfRangeError):
        v[2, 0]

    with pytest.raises(OutOfRangeError):
        v[0, -4]

    with pytest.raises(OutOfRangeError):
        v[2]

    with pytest.raises(TypeError):
        v[1.0]

    with pytest.raises(TypeError):
        v[0, 1.0]


def test_setitem():
    data = [0] * 6
    v = view(data, (2, 3))
    v[1, 1] = 4
    v[-1, -1] = 5
    assert data == [0, 0, 0, 0, 4, 5]

    v["0"] = [1, 2, 3]
    assert data == [1, 2, 3, 0, 4, 5]

    v[:, 0] = [-1, -2]
    assert data == [-1, 2, 3, -2, 4, 5]

    v["::-1, ::-1"] = range(6)
    assert data == [5, 4, 3, 2, 1, 0]

    v["1, 1"] = 42
    assert data[4] == 42

    v[:] = view(list(range(6)))
    assert data == list(range(6))

    with pytest.raises(ValueError):
        v["0"] = [1, 2]


def test_len_rank_zero():
    scalar = view([1, 2, 3]).get_slice(index(1))
    assert scalar.rank == 0
    assert scalar.size == 1
    assert scalar.get_value() == 2
    assert scalar[()] == 2
    assert list(scalar) == [2]
    assert scalar.tolist() == 2

    with pytest.raises(TypeError):
        len(scalar)


def test_reshape():
    data = list(range(24))
    v = view(data)
    r = v.reshape(2, 3, 4)
    assert r.backend is v.backend
    assert r.shape == Shape(2, 3, 4)
    assert r.tolist() == [[[i * 12 + j * 4 + k for k in range(4)]
                           for j in range(3)] for i in range(2)]
    assert list(r.reshape(24)) == data
    assert list(r.reshape((4, 6)).reshape([24])) == data

    r[1, 2, 3] = -1
    assert data[23] == -1

    for _ in range(10):
        dims = random_dimensions()
        w = view(list(range(Shape(dims).size)))
        assert list(w.reshape(dims).reshape(w.dimensions)) == list(w)


def test_reshape_sliced():
    data = list(range(12))
    v = view(data, (3, 4))
    s = v["::2, 1:3"]
    r = s.reshape(4)
    assert isinstance(r.backend, ViewBackend)
    assert r.backend.data is s
    assert list(r) == [1, 2, 9, 10]
    assert s.reshape(2, 2).tolist() == [[1, 2], [9, 10]]
    assert r.reshape(2, 2)["::-1"].tolist() == [[9, 10], [1, 2]]

    r[3] = -1
    assert data[10] == -1

    data[9] = -9
    assert list(r) == [1, 2, -9, -1]


def test_reshape_size_mismatch(caplog):
    v = view(list(range(6)))

    with pytest.raises(ReshapeError):
        v.reshape(4, 2)

    with pytest.raises(ReshapeError):
        v["1:"].reshape(6)

    seterr(reshape='ignore')
    try:
        with caplog.at_level(logging.WARNING, logger="slicendice.view"):
            r = v.reshape(2, 2)
        assert "reshaping" in caplog.text
        assert r.tolist() == [[0, 1], [2, 3]]

        r = v.reshape(4, 2)
        with pytest.raises(OutOfRangeError):
            list(r)
    finally:
        seterr(reshape='raise')


def test_range():
    assert list(ArrayView.range(5)) == [0, 1, 2, 3, 4]
    assert list(ArrayView.range(5, start=1, step=2)) == [1, 3]
    assert list(ArrayView.range(10, 3, 3)) == [3, 6, 9]
    assert list(ArrayView.range(0)) == []

    r = ArrayView.range(6)
    r[0] = 10
    assert r[0] == 10

    with pytest.raises(InvalidArgumentError):
        ArrayView.range(5, step=0)

    with pytest.raises(InvalidArgumentError):
        ArrayView.range(5, step=-1)

    big = ArrayView.range(2 ** 63 + 5, start=2 ** 63, step=2)
    assert list(big) == [2 ** 63, 2 ** 63 + 2, 2 ** 63 + 4]
    assert list(ArrayView.range(-2 ** 70 + 2, start=-2 ** 70)) \
        == [-2 ** 70, -2 ** 70 + 1]


def test_range_swaps_descending_bounds(caplog):
    # descending bounds are enumerated in ascending order on purpose
    with caplog.at_level(logging.WARNING, logger="slicendice.view"):
        r = ArrayView.range(stop=2, start=5)
    assert list(r) == [2, 3, 4]
    assert "swapped" in caplog.text


def test_readonly_view():
    data = (1, 2, 3, 4)
    v = view(data)
    v[0] = 10
    v.set_value(1, 5)
    v.set_values(0, [9, 9])
    v["1:"] = [0, 0, 0]
    assert list(v) == [1, 2, 3, 4]

    r = v.reshape(2, 2)["::-1"].reshape(4)
    r[0] = -1
    assert list(r) == [3, 4, 1, 2]
    assert list(v) == [1, 2, 3, 4]


def test_view_of_view():
    data = list(range(6))
    inner = view(data, (2, 3))["::-1"]
    outer = view(inner)
    assert outer.dimensions == (6,)
    assert list(outer) == [3, 4, 5, 0, 1, 2]
    outer[0] = -3
    assert data[3] == -3

    outer = ArrayView(inner, (3, 2))
    assert outer.tolist() == [[-3, 4], [5, 0], [1, 2]]


def test_numpy_view():
    np = pytest.importorskip("numpy")

    arr = np.arange(12)
    v = view(arr, (3, 4))
    assert v["1:, ::3"].tolist() == [[4, 7], [8, 11]]
    v[2, 3] = -1
    assert arr[11] == -1


def test_to_string():
    v = view([1, 2, 3, 4, 5, 6], (2, 3))
    assert str(v) == "[[1, 2, 3],\n [4, 5, 6]]"
    assert v.to_string(flat=True) == "[[1, 2, 3], [4, 5, 6]]"

    v = view(list(range(8)), (2, 2, 2))
    assert str(v) == "[[[0, 1],\n  [2, 3]],\n\n [[4, 5],\n  [6, 7]]]"
    assert v.to_string(flat=True) == "[[[0, 1],  [2, 3]], [[4, 5],  [6, 7]]]"
    assert v.to_string(flat=True) == str(v).replace("\n", "")

    assert str(view([1, 2, 3])) == "[1, 2, 3]"
    assert str(view([1, 2, 3])[1:1]) == "[]"
    assert str(view([None, "a"])) == "[None, a]"
    assert str(view([1, 2, 3]).get_slice(index(1))) == "2"
    assert str(view([], (0, 3))) == "[]"

    assert repr(view([1, 2, 3, 4], (2, 2))) \
        == "ArrayView([[1, 2], [3, 4]], shape=(2, 2))"


def test_parse_roundtrip_through_views():
    v = view(list(range(20)), (4, 5))
    for text in ["1:3, ::2", "::-1, 0", "-1", ":, -2:"]:
        assert v.get_slice(*parse_slices(text)).tolist() \
            == v.get_slice(text).tolist()
