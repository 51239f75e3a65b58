import numpy as np
import pytest

from neuralnet.exceptions import DimensionMismatch
from neuralnet.tensor import Matrix, Vector


def test_matrix_requires_two_dimensions():
    with pytest.raises(DimensionMismatch):
        Matrix([1.0, 2.0])
    with pytest.raises(DimensionMismatch):
        Vector([[1.0, 2.0]])


def test_operations_return_new_tensors():
    a = Matrix([[1.0, 2.0], [3.0, 4.0]])
    b = a + 1.0
    assert a.to_list() == [[1.0, 2.0], [3.0, 4.0]]
    assert b.to_list() == [[2.0, 3.0], [4.0, 5.0]]
    assert isinstance(b, Matrix)


def test_backing_array_is_read_only():
    a = Matrix([[1.0, 2.0]])
    with pytest.raises(ValueError):
        a.a[0, 0] = 5.0


def test_as_array_is_a_writable_copy():
    a = Matrix([[1.0, 2.0]])
    copy = a.as_array()
    copy[0, 0] = 9.0
    assert a.to_list() == [[1.0, 2.0]]


def test_input_array_is_copied():
    data = np.array([[1.0, 2.0]])
    a = Matrix(data)
    data[0, 0] = 7.0
    assert a.to_list() == [[1.0, 2.0]]


def test_elementwise_shape_mismatch():
    with pytest.raises(DimensionMismatch):
        Matrix.ones(2, 2) * Matrix.ones(2, 3)
    with pytest.raises(DimensionMismatch):
        Vector.ones(2) + Vector.ones(3)


def test_matrix_vector_broadcast_over_rows():
    a = Matrix([[1.0, 2.0], [3.0, 4.0]])
    b = a + Vector([10.0, 20.0])
    assert b.to_list() == [[11.0, 22.0], [13.0, 24.0]]

    with pytest.raises(DimensionMismatch):
        a + Vector([1.0, 2.0, 3.0])
    with pytest.raises(DimensionMismatch):
        Vector([10.0, 20.0]) + a


def test_reflected_scalar_operators():
    a = Matrix([[1.0, 2.0]])
    assert (2 * a).to_list() == [[2.0, 4.0]]
    assert (np.float64(2.0) * a).to_list() == [[2.0, 4.0]]
    assert (1.0 - a).to_list() == [[0.0, -1.0]]
    assert (2.0 / a).to_list() == [[2.0, 1.0]]
    assert (-a).to_list() == [[-1.0, -2.0]]


def test_unsupported_operand():
    with pytest.raises(TypeError):
        Matrix.ones(1, 1) + "a"


def test_matmul():
    a = Matrix([[1.0, 2.0], [3.0, 4.0]])
    b = Matrix([[1.0], [1.0]])
    assert (a @ b).to_list() == [[3.0], [7.0]]
    assert a.T.to_list() == [[1.0, 3.0], [2.0, 4.0]]

    with pytest.raises(DimensionMismatch):
        b @ b


def test_reductions():
    a = Matrix([[1.0, 2.0], [3.0, 6.0]])
    assert a.sum() == 12.0
    assert isinstance(a.sum(), float)
    assert a.sum(axis=0).to_list() == [4.0, 8.0]
    assert a.mean(axis=0).to_list() == [2.0, 4.0]
    assert a.variance(axis=0).to_list() == [1.0, 4.0]
    assert a.max() == 6.0
    assert a.min(axis=1).to_list() == [1.0, 3.0]


def test_clip_and_map():
    a = Matrix([[-1.0, 0.5, 2.0]])
    assert a.clip(0.0, 1.0).to_list() == [[0.0, 0.5, 1.0]]
    assert a.clip_lower(0.0).to_list() == [[0.0, 0.5, 2.0]]
    assert a.clip_upper(1.0).to_list() == [[-1.0, 0.5, 1.0]]
    assert a.map(np.abs).to_list() == [[1.0, 0.5, 2.0]]

    with pytest.raises(DimensionMismatch):
        a.map(lambda x: x.sum(axis=1))


def test_rows_columns_and_iteration():
    a = Matrix([[1.0, 2.0], [3.0, 4.0], [5.0, 6.0]])
    assert (a.m, a.n) == (3, 2)
    assert a.row(1).to_list() == [3.0, 4.0]
    assert a.column(0).to_list() == [1.0, 3.0, 5.0]
    assert a.rows([2, 0]).to_list() == [[5.0, 6.0], [1.0, 2.0]]
    assert [row.to_list() for row in a] == [[1.0, 2.0], [3.0, 4.0], [5.0, 6.0]]
    assert a.argmax(axis=1) == [1, 1, 1]


def test_factories():
    assert Matrix.zeros(2, 3).shape == (2, 3)
    assert Matrix.fill(0.5, 1, 2).to_list() == [[0.5, 0.5]]
    assert Matrix.identity(2).to_list() == [[1.0, 0.0], [0.0, 1.0]]
    assert Vector.fill(3.0, 2).to_list() == [3.0, 3.0]
    assert Vector([1.0, 2.0]).as_row_matrix().shape == (1, 2)
    assert Vector([1.0, 2.0]).as_column_matrix().shape == (2, 1)
