"""Tests for the matrix engine."""

import pytest
import numpy as np

from phongtracer.tuples import Tuple, point
from phongtracer.matrix import (
    Matrix, MatrixError, DimensionMismatchError,
    UnsupportedMatrixSizeError, SingularMatrixError
)


INVERTIBLE = [
    Matrix([[-5, 2, 6, -8], [1, -5, 1, 8], [7, 7, -6, -7], [1, -3, 7, 4]]),
    Matrix([[8, -5, 9, 2], [7, 5, 6, 1], [-6, 0, 9, 6], [-3, 0, -9, -4]]),
    Matrix([[9, 3, 0, 9], [-5, -2, -6, -3], [-4, 9, 6, 4], [-7, 6, 6, 2]]),
    Matrix([[6, 4, 4, 4], [5, 5, 7, 6], [4, -9, 3, -7], [9, 1, 7, -6]]),
]


class TestMatrixCreation:
    """Test Matrix construction and access."""

    def test_4x4(self):
        m = Matrix([
            [1, 2, 3, 4],
            [5.5, 6.5, 7.5, 8.5],
            [9, 10, 11, 12],
            [13.5, 14.5, 15.5, 16.5],
        ])
        assert m[0, 0] == 1
        assert m[0, 3] == 4
        assert m[1, 0] == 5.5
        assert m[1, 2] == 7.5
        assert m[2, 2] == 11
        assert m[3, 0] == 13.5
        assert m[3, 2] == 15.5

    def test_2x2_and_3x3(self):
        m2 = Matrix([[-3, 5], [1, -2]])
        assert m2.shape == (2, 2)
        assert m2[1, 1] == -2
        m3 = Matrix([[-3, 5, 0], [1, -2, -7], [0, 1, 1]])
        assert m3[2, 2] == 1

    def test_zeros(self):
        m = Matrix.zeros(3, 2)
        assert m.shape == (3, 2)
        assert all(m[r, c] == 0 for r in range(3) for c in range(2))

    def test_ragged_rows_rejected(self):
        with pytest.raises(DimensionMismatchError):
            Matrix([[1, 2], [3]])

    def test_non_numeric_entry_keeps_numpy_error(self):
        with pytest.raises(ValueError) as excinfo:
            Matrix([["a"]])
        assert not isinstance(excinfo.value, DimensionMismatchError)
        assert "same length" not in str(excinfo.value)

    def test_errors_are_value_errors(self):
        assert issubclass(MatrixError, ValueError)
        assert issubclass(SingularMatrixError, MatrixError)


class TestMatrixEquality:
    """Test approximate equality."""

    def test_equal(self):
        a = Matrix([[1, 2], [3, 4]])
        b = Matrix([[1, 2], [3, 4.000001]])
        assert a == b

    def test_not_equal(self):
        assert Matrix([[1, 2], [3, 4]]) != Matrix([[2, 3], [4, 5]])

    def test_different_shapes_not_equal(self):
        assert Matrix([[1, 0], [0, 1]]) != Matrix.identity(3)


class TestMatrixMultiply:
    """Test matrix products."""

    def test_multiply_4x4(self):
        a = Matrix([[1, 2, 3, 4], [5, 6, 7, 8], [9, 8, 7, 6], [5, 4, 3, 2]])
        b = Matrix([[-2, 1, 2, 3], [3, 2, 1, -1], [4, 3, 6, 5], [1, 2, 7, 8]])
        expected = Matrix([
            [20, 22, 50, 48],
            [44, 54, 114, 108],
            [40, 58, 110, 102],
            [16, 26, 46, 42],
        ])
        assert a * b == expected
        assert a @ b == expected

    def test_multiply_non_square(self):
        a = Matrix([[1, 2, 3], [4, 5, 6]])
        b = Matrix([[1, 0], [0, 1], [1, 1]])
        assert a * b == Matrix([[4, 5], [10, 11]])

    def test_multiply_dimension_mismatch(self):
        a = Matrix([[1, 2, 3], [4, 5, 6]])
        with pytest.raises(DimensionMismatchError):
            a * a

    def test_multiply_by_tuple(self):
        a = Matrix([[1, 2, 3, 4], [2, 4, 4, 2], [8, 6, 4, 1], [0, 0, 0, 1]])
        assert a * Tuple(1, 2, 3, 1) == Tuple(18, 24, 33, 1)

    def test_multiply_small_matrix_by_tuple(self):
        with pytest.raises(DimensionMismatchError):
            Matrix.identity(3) * Tuple(1, 2, 3, 1)

    @pytest.mark.parametrize("rows", [2, 3, 5])
    def test_multiply_non_square_matrix_by_tuple(self, rows):
        m = Matrix.from_array(np.eye(rows, 4))
        with pytest.raises(DimensionMismatchError):
            m * point(1, 2, 3)

    def test_identity(self):
        a = Matrix([[0, 1, 2, 4], [1, 2, 4, 8], [2, 4, 8, 16], [4, 8, 16, 32]])
        assert a * Matrix.identity() == a
        assert Matrix.identity() * Tuple(1, 2, 3, 4) == Tuple(1, 2, 3, 4)

    def test_composition_is_not_commutative(self):
        a = Matrix([[1, 2], [3, 4]])
        b = Matrix([[0, 1], [1, 0]])
        assert a * b != b * a


class TestTranspose:
    """Test transpose."""

    def test_transpose(self):
        a = Matrix([[0, 9, 3, 0], [9, 8, 0, 8], [1, 8, 5, 3], [0, 0, 5, 8]])
        assert a.transpose() == Matrix([[0, 9, 1, 0], [9, 8, 8, 0], [3, 0, 5, 5], [0, 8, 3, 8]])

    def test_transpose_identity(self):
        assert Matrix.identity().transpose() == Matrix.identity()

    def test_transpose_requires_square(self):
        with pytest.raises(DimensionMismatchError):
            Matrix([[1, 2, 3], [4, 5, 6]]).transpose()


class TestSubmatrix:
    """Test submatrix extraction."""

    def test_submatrix_3x3(self):
        a = Matrix([[1, 5, 0], [-3, 2, 7], [0, 6, -3]])
        assert a.submatrix(0, 2) == Matrix([[-3, 2], [0, 6]])

    def test_submatrix_4x4(self):
        a = Matrix([[-6, 1, 1, 6], [-8, 5, 8, 6], [-1, 0, 8, 2], [-7, 1, -1, 1]])
        assert a.submatrix(2, 1) == Matrix([[-6, 1, 6], [-8, 8, 6], [-7, -1, 1]])

    def test_submatrix_out_of_range(self):
        a = Matrix.identity(3)
        with pytest.raises(DimensionMismatchError):
            a.submatrix(3, 0)
        with pytest.raises(DimensionMismatchError):
            a.submatrix(0, -1)


class TestDeterminant:
    """Test minors, cofactors and determinants."""

    def test_determinant_2x2(self):
        assert Matrix([[1, 5], [-3, 2]]).determinant() == 17

    def test_minor_and_cofactor_2x2(self):
        a = Matrix([[1, 5], [-3, 2]])
        assert a.minor(0, 0) == 2
        assert a.cofactor(0, 1) == 3

    def test_minor_3x3(self):
        a = Matrix([[3, 5, 0], [2, -1, -7], [6, -1, 5]])
        assert a.submatrix(1, 0).determinant() == 25
        assert a.minor(1, 0) == 25

    def test_cofactor_3x3(self):
        a = Matrix([[3, 5, 0], [2, -1, -7], [6, -1, 5]])
        assert a.minor(0, 0) == -12
        assert a.cofactor(0, 0) == -12
        assert a.minor(1, 0) == 25
        assert a.cofactor(1, 0) == -25

    def test_determinant_3x3(self):
        a = Matrix([[1, 2, 6], [-5, 8, -4], [2, 6, 4]])
        assert a.cofactor(0, 0) == 56
        assert a.cofactor(0, 1) == 12
        assert a.cofactor(0, 2) == -46
        assert a.determinant() == -196

    def test_determinant_4x4(self):
        a = Matrix([[-2, -8, 3, 5], [-3, 1, 7, 3], [1, 2, -9, 6], [-6, 7, 7, -9]])
        assert a.cofactor(0, 0) == 690
        assert a.cofactor(0, 1) == 447
        assert a.cofactor(0, 2) == 210
        assert a.cofactor(0, 3) == 51
        assert a.determinant() == -4071

    def test_determinant_5x5_unsupported(self):
        with pytest.raises(UnsupportedMatrixSizeError):
            Matrix.identity(5).determinant()

    def test_cofactor_5x5_unsupported(self):
        with pytest.raises(UnsupportedMatrixSizeError):
            Matrix.identity(5).cofactor(0, 0)

    def test_determinant_1x1_unsupported(self):
        with pytest.raises(UnsupportedMatrixSizeError):
            Matrix([[3]]).determinant()

    def test_determinant_requires_square(self):
        with pytest.raises(DimensionMismatchError):
            Matrix([[1, 2, 3], [4, 5, 6]]).determinant()


class TestInverse:
    """Test matrix inversion."""

    def test_invertible(self):
        a = Matrix([[6, 4, 4, 4], [5, 5, 7, 6], [4, -9, 3, -7], [9, 1, 7, -6]])
        assert a.determinant() == -2120
        assert a.is_invertible()

    def test_not_invertible(self):
        a = Matrix([[-4, 2, -2, -3], [9, 6, 2, 6], [0, -5, 1, -5], [0, 0, 0, 0]])
        assert a.determinant() == 0
        assert not a.is_invertible()
        with pytest.raises(SingularMatrixError):
            a.inverse()

    def test_inverse_4x4(self):
        a = Matrix([[-5, 2, 6, -8], [1, -5, 1, 8], [7, 7, -6, -7], [1, -3, 7, 4]])
        b = a.inverse()
        assert a.determinant() == 532
        assert a.cofactor(2, 3) == -160
        assert b[3, 2] == pytest.approx(-160 / 532)
        assert a.cofactor(3, 2) == 105
        assert b[2, 3] == pytest.approx(105 / 532)
        assert b == Matrix([
            [0.21805, 0.45113, 0.24060, -0.04511],
            [-0.80827, -1.45677, -0.44361, 0.52068],
            [-0.07895, -0.22368, -0.05263, 0.19737],
            [-0.52256, -0.81391, -0.30075, 0.30639],
        ])

    def test_inverse_another(self):
        a = Matrix([[8, -5, 9, 2], [7, 5, 6, 1], [-6, 0, 9, 6], [-3, 0, -9, -4]])
        assert a.inverse() == Matrix([
            [-0.15385, -0.15385, -0.28205, -0.53846],
            [-0.07692, 0.12308, 0.02564, 0.03077],
            [0.35897, 0.35897, 0.43590, 0.92308],
            [-0.69231, -0.69231, -0.76923, -1.92308],
        ])

    def test_inverse_2x2(self):
        a = Matrix([[4, 7], [2, 6]])
        assert a.inverse() == Matrix([[0.6, -0.7], [-0.2, 0.4]])

    def test_inverse_5x5_unsupported(self):
        with pytest.raises(UnsupportedMatrixSizeError):
            Matrix.identity(5).inverse()

    def test_multiply_product_by_inverse(self):
        a = Matrix([[3, -9, 7, 3], [3, -8, 2, -9], [-4, 4, 4, 1], [-6, 5, -1, 1]])
        b = Matrix([[8, 2, 2, 2], [3, -1, 7, 0], [7, 0, 5, 4], [6, -2, 0, 5]])
        c = a * b
        assert c * b.inverse() == a

    @pytest.mark.parametrize("m", INVERTIBLE)
    def test_times_inverse_is_identity(self, m):
        assert m * m.inverse() == Matrix.identity()
        assert m.inverse() * m == Matrix.identity()

    @pytest.mark.parametrize("m", INVERTIBLE)
    def test_double_inverse(self, m):
        assert m.inverse().inverse() == m

    @pytest.mark.parametrize("m", INVERTIBLE)
    def test_transpose_of_inverse(self, m):
        assert m.inverse().transpose() == m.transpose().inverse()

    def test_identity_inverse(self):
        assert Matrix.identity().inverse() == Matrix.identity()
