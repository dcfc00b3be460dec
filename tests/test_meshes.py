import numpy as np
import pytest

from surfacegeom.meshes import get_triangle, matrix_multiply


def test_get_triangle_picks_indexed_values():
    values = ["a", "b", "c", "d"]
    indices = [0, 1, 2, 2, 3, 0]
    assert get_triangle(values, indices, 0) == ("a", "b", "c")
    assert get_triangle(values, indices, 1) == ("c", "d", "a")


def test_get_triangle_out_of_range_index():
    with pytest.raises(IndexError):
        get_triangle([1, 2], [0, 1, 5], 0)


def test_matrix_multiply_identity():
    a = [[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]]
    assert np.allclose(matrix_multiply(a, np.eye(3)), a)
    assert np.allclose(matrix_multiply(np.eye(2), a), a)


def test_matrix_multiply_shape():
    result = matrix_multiply(np.ones((2, 3)), np.ones((3, 4)))
    assert result.shape == (2, 4)


def test_matrix_multiply_transpose_identity():
    rng = np.random.default_rng(1)
    a = rng.normal(size=(3, 2))
    b = rng.normal(size=(2, 4))
    left = matrix_multiply(a, b).T
    right = matrix_multiply(b.T, a.T)
    assert np.allclose(left, right)


def test_matrix_multiply_mismatch_raises():
    with pytest.raises(ValueError):
        matrix_multiply(np.ones((2, 3)), np.ones((2, 3)))