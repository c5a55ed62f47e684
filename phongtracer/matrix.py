"""
Matrix engine.

Generic R x C matrices of doubles with:
- Multiplication (matrix x matrix, matrix x tuple)
- Transpose, submatrix, minor, cofactor
- Determinant by cofactor expansion along the first row
- Inversion through the cofactor matrix

Determinant, minor, cofactor and inverse only support sizes 2 to 4. Anything
larger raises UnsupportedMatrixSizeError rather than producing a result.
"""

from __future__ import annotations
from typing import Sequence, Union
import numpy as np

from .tuples import Tuple, EPSILON

MAX_SIZE = 4


class MatrixError(ValueError):
    """Base class for matrix operations that have no result."""
    pass


class DimensionMismatchError(MatrixError):
    """Operand shapes are not compatible with the requested operation."""
    pass


class UnsupportedMatrixSizeError(MatrixError):
    """Operation is only defined for square matrices of size 2 to 4."""
    pass


class SingularMatrixError(MatrixError):
    """Matrix has a zero determinant and cannot be inverted."""
    pass


class Matrix:
    """A fixed-size matrix whose dimensions are checked per operation."""

    __slots__ = ('_data',)

    def __init__(self, rows: Sequence[Sequence[float]]):
        if len({np.size(row) for row in rows}) > 1:
            raise DimensionMismatchError(
                f"Matrix rows must all have the same length, got {[np.size(row) for row in rows]}"
            )
        data = np.array(rows, dtype=np.float64)
        if data.ndim != 2 or 0 in data.shape:
            raise DimensionMismatchError(f"Matrix rows must be a non-empty rectangle, got shape {data.shape}")
        self._data = data

    @classmethod
    def from_array(cls, arr: np.ndarray) -> Matrix:
        m = cls.__new__(cls)
        m._data = np.asarray(arr, dtype=np.float64)
        return m

    @classmethod
    def zeros(cls, rows: int, cols: int) -> Matrix:
        return cls.from_array(np.zeros((rows, cols)))

    @classmethod
    def identity(cls, size: int = 4) -> Matrix:
        return cls.from_array(np.identity(size))

    @property
    def rows(self) -> int:
        return self._data.shape[0]

    @property
    def cols(self) -> int:
        return self._data.shape[1]

    @property
    def shape(self) -> tuple[int, int]:
        return self._data.shape

    def is_square(self) -> bool:
        return self.rows == self.cols

    def __getitem__(self, index: tuple[int, int]) -> float:
        return float(self._data[index])

    def __repr__(self) -> str:
        body = ", ".join(
            "[" + ", ".join(f"{v:.5f}" for v in row) + "]" for row in self._data
        )
        return f"Matrix([{body}])"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        if self.shape != other.shape:
            return False
        return bool(np.allclose(self._data, other._data, rtol=0.0, atol=EPSILON))

    __hash__ = None

    def __mul__(self, other: Union[Matrix, Tuple]) -> Union[Matrix, Tuple]:
        """Multiply by another matrix, or transform a tuple.

        Raises:
            DimensionMismatchError: If the inner dimensions differ, or a tuple
                is multiplied by anything other than a 4x4 matrix
        """
        if isinstance(other, Tuple):
            # The product must itself be a 4-tuple
            if self.shape != (4, 4):
                raise DimensionMismatchError(
                    f"Only a 4x4 matrix can transform a 4-tuple, got {self.rows}x{self.cols}"
                )
            return Tuple.from_array(self._data @ other._data)
        if isinstance(other, Matrix):
            if self.cols != other.rows:
                raise DimensionMismatchError(
                    f"Cannot multiply {self.rows}x{self.cols} by {other.rows}x{other.cols}"
                )
            return Matrix.from_array(self._data @ other._data)
        return NotImplemented

    __matmul__ = __mul__

    def transpose(self) -> Matrix:
        if not self.is_square():
            raise DimensionMismatchError(f"Only square matrices can be transposed, got {self.rows}x{self.cols}")
        return Matrix.from_array(self._data.T.copy())

    def submatrix(self, row: int, col: int) -> Matrix:
        """Return a copy with the given row and column removed."""
        if self.rows < 2 or self.cols < 2:
            raise DimensionMismatchError(f"A {self.rows}x{self.cols} matrix has no submatrix")
        if not (0 <= row < self.rows and 0 <= col < self.cols):
            raise DimensionMismatchError(f"Index ({row}, {col}) out of range for {self.rows}x{self.cols}")
        data = np.delete(np.delete(self._data, row, axis=0), col, axis=1)
        return Matrix.from_array(data)

    def _check_supported(self) -> None:
        if not self.is_square():
            raise DimensionMismatchError(f"Expected a square matrix, got {self.rows}x{self.cols}")
        if not 2 <= self.rows <= MAX_SIZE:
            raise UnsupportedMatrixSizeError(f"Size {self.rows} is not supported (2 to {MAX_SIZE} only)")

    def _expand(self) -> float:
        # Cofactor expansion along row 0, recursing down to 2x2 (or 1x1 for minors of 2x2)
        d = self._data
        n = d.shape[0]
        if n == 1:
            return float(d[0, 0])
        if n == 2:
            return float(d[0, 0] * d[1, 1] - d[0, 1] * d[1, 0])
        return sum(
            float(d[0, col]) * self._cofactor(0, col)
            for col in range(n)
        )

    def _cofactor(self, row: int, col: int) -> float:
        minor = self.submatrix(row, col)._expand()
        return -minor if (row + col) % 2 else minor

    def determinant(self) -> float:
        self._check_supported()
        return self._expand()

    def minor(self, row: int, col: int) -> float:
        """Determinant of the submatrix at (row, col)."""
        self._check_supported()
        return self.submatrix(row, col)._expand()

    def cofactor(self, row: int, col: int) -> float:
        """Minor at (row, col), negated when row + col is odd."""
        self._check_supported()
        return self._cofactor(row, col)

    def is_invertible(self) -> bool:
        return self.determinant() != 0

    def inverse(self) -> Matrix:
        """Invert through the cofactor matrix.

        Raises:
            UnsupportedMatrixSizeError: If the size is not 2 to 4
            SingularMatrixError: If the determinant is zero
        """
        det = self.determinant()
        if det == 0:
            raise SingularMatrixError("Matrix is not invertible (determinant is 0)")

        n = self.rows
        result = np.empty((n, n), dtype=np.float64)
        for row in range(n):
            for col in range(n):
                # Swapped indices transpose the cofactor matrix
                result[col, row] = self._cofactor(row, col) / det
        return Matrix.from_array(result)

    # Fluent transforms. Each call applies after the ones before it, so
    # identity().scale(...).translate(...) scales first, then translates.

    def translate(self, x: float, y: float, z: float) -> Matrix:
        from .transformations import translation
        return translation(x, y, z) * self

    def scale(self, x: float, y: float, z: float) -> Matrix:
        from .transformations import scaling
        return scaling(x, y, z) * self

    def rotate_x(self, radians: float) -> Matrix:
        from .transformations import rotation_x
        return rotation_x(radians) * self

    def rotate_y(self, radians: float) -> Matrix:
        from .transformations import rotation_y
        return rotation_y(radians) * self

    def rotate_z(self, radians: float) -> Matrix:
        from .transformations import rotation_z
        return rotation_z(radians) * self

    def shear(self, xy: float, xz: float, yx: float, yz: float, zx: float, zy: float) -> Matrix:
        from .transformations import shearing
        return shearing(xy, xz, yx, yz, zx, zy) * self

    def to_array(self) -> np.ndarray:
        """Return the underlying numpy array (copy)."""
        return self._data.copy()
