"""Affine transforms as immutable 4x4 matrices.

A ``Transform`` wraps a NumPy ``(4, 4)`` float64 array. Inversion uses the
cofactor (adjugate) method and fails loudly on singular matrices.

The chained builders read in application order: each call left-multiplies
the accumulated matrix, so

    >>> from src.whitted.core.transform import identity
    >>> m = identity().rotate_x(1.5708).scale(5, 5, 5).translate(10, 5, 7)

rotates first, then scales, then translates any point it is applied to. This
is the reverse of the textual order of the equivalent product
``translation(...) @ scaling(...) @ rotation_x(...)``.
"""

import math
from collections.abc import Sequence

import numpy as np
import numpy.typing as npt

from src.whitted.core.tuples import EPSILON, Tuple

Matrix = npt.NDArray[np.float64]


class SingularMatrixError(ValueError):
    """Raised when inverting a matrix whose determinant is zero."""


def _determinant(m: Matrix) -> float:
    size = m.shape[0]
    if size == 2:
        return float(m[0, 0] * m[1, 1] - m[0, 1] * m[1, 0])
    return float(sum(m[0, col] * _cofactor(m, 0, col) for col in range(size)))


def _submatrix(m: Matrix, row: int, col: int) -> Matrix:
    return np.delete(np.delete(m, row, axis=0), col, axis=1)


def _cofactor(m: Matrix, row: int, col: int) -> float:
    minor = _determinant(_submatrix(m, row, col))
    return -minor if (row + col) % 2 else minor


class Transform:
    """An immutable 4x4 transformation matrix.

    Attributes:
        data: Read-only ``(4, 4)`` float64 array of matrix entries.
    """

    __slots__ = ("data", "_inverse", "_normal_matrix")

    def __init__(self, values: "Sequence[Sequence[float]] | Matrix") -> None:
        data = np.array(values, dtype=np.float64)
        if data.shape != (4, 4):
            raise ValueError(f"Transform requires a 4x4 matrix, got shape {data.shape}")
        data.setflags(write=False)
        self.data = data
        self._inverse: Transform | None = None
        self._normal_matrix: Transform | None = None

    def __getstate__(self):
        return {"data": self.data}

    def __setstate__(self, state) -> None:
        data = np.array(state["data"], dtype=np.float64)
        data.setflags(write=False)
        self.data = data
        self._inverse = None
        self._normal_matrix = None

    def __getitem__(self, index: tuple[int, int]) -> float:
        return float(self.data[index])

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Transform):
            return NotImplemented
        return bool(np.all(np.abs(self.data - other.data) < EPSILON))

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Transform({self.data.tolist()})"

    def __matmul__(self, other):
        if isinstance(other, Transform):
            return Transform(self.data @ other.data)
        if isinstance(other, Tuple):
            return self.apply(other)
        return NotImplemented

    __mul__ = __matmul__

    def apply(self, t: Tuple) -> Tuple:
        """Transform a point or vector."""
        m = self.data
        x, y, z, w = t.x, t.y, t.z, t.w
        return Tuple(
            float(m[0, 0] * x + m[0, 1] * y + m[0, 2] * z + m[0, 3] * w),
            float(m[1, 0] * x + m[1, 1] * y + m[1, 2] * z + m[1, 3] * w),
            float(m[2, 0] * x + m[2, 1] * y + m[2, 2] * z + m[2, 3] * w),
            w,
        )

    def apply_linear(self, t: Tuple) -> Tuple:
        """Apply only the upper-left 3x3 block, returning a vector.

        Used for surface normals, where the translation column of the
        inverse-transpose would otherwise leak into ``w``.
        """
        m = self.data
        x, y, z = t.x, t.y, t.z
        return Tuple(
            float(m[0, 0] * x + m[0, 1] * y + m[0, 2] * z),
            float(m[1, 0] * x + m[1, 1] * y + m[1, 2] * z),
            float(m[2, 0] * x + m[2, 1] * y + m[2, 2] * z),
            0.0,
        )

    def transpose(self) -> "Transform":
        return Transform(self.data.T)

    def determinant(self) -> float:
        """Determinant by cofactor expansion along the first row."""
        return _determinant(self.data)

    def submatrix(self, row: int, col: int) -> Matrix:
        return _submatrix(self.data, row, col)

    def minor(self, row: int, col: int) -> float:
        return _determinant(_submatrix(self.data, row, col))

    def cofactor(self, row: int, col: int) -> float:
        return _cofactor(self.data, row, col)

    def is_invertible(self) -> bool:
        return self.determinant() != 0.0

    def inverse(self) -> "Transform":
        """Return the inverse via the adjugate matrix.

        The result is cached; transforms never change after construction.

        Raises:
            SingularMatrixError: If the determinant is zero.
        """
        if self._inverse is None:
            det = self.determinant()
            if det == 0.0:
                raise SingularMatrixError(
                    f"Attempted to invert a non-invertible matrix: {self.data.tolist()}"
                )
            adjugate = np.empty((4, 4), dtype=np.float64)
            for row in range(4):
                for col in range(4):
                    # Transposed placement: cofactor(row, col) lands at [col, row]
                    adjugate[col, row] = _cofactor(self.data, row, col)
            self._inverse = Transform(adjugate / det)
        return self._inverse

    def normal_matrix(self) -> "Transform":
        """transpose(inverse(self)), the matrix that carries normals to world space."""
        if self._normal_matrix is None:
            self._normal_matrix = self.inverse().transpose()
        return self._normal_matrix

    # Chained builders: each applies *after* everything already accumulated.

    def translate(self, x: float, y: float, z: float) -> "Transform":
        return translation(x, y, z) @ self

    def scale(self, x: float, y: float, z: float) -> "Transform":
        return scaling(x, y, z) @ self

    def rotate_x(self, radians: float) -> "Transform":
        return rotation_x(radians) @ self

    def rotate_y(self, radians: float) -> "Transform":
        return rotation_y(radians) @ self

    def rotate_z(self, radians: float) -> "Transform":
        return rotation_z(radians) @ self

    def shear(
        self, xy: float, xz: float, yx: float, yz: float, zx: float, zy: float
    ) -> "Transform":
        return shearing(xy, xz, yx, yz, zx, zy) @ self


def identity() -> Transform:
    return Transform(np.identity(4))


IDENTITY = identity()


def translation(x: float, y: float, z: float) -> Transform:
    m = np.identity(4)
    m[0:3, 3] = (x, y, z)
    return Transform(m)


def scaling(x: float, y: float, z: float) -> Transform:
    return Transform(np.diag((x, y, z, 1.0)))


def rotation_x(radians: float) -> Transform:
    c, s = math.cos(radians), math.sin(radians)
    return Transform(
        [
            [1.0, 0.0, 0.0, 0.0],
            [0.0, c, -s, 0.0],
            [0.0, s, c, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def rotation_y(radians: float) -> Transform:
    c, s = math.cos(radians), math.sin(radians)
    return Transform(
        [
            [c, 0.0, s, 0.0],
            [0.0, 1.0, 0.0, 0.0],
            [-s, 0.0, c, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def rotation_z(radians: float) -> Transform:
    c, s = math.cos(radians), math.sin(radians)
    return Transform(
        [
            [c, -s, 0.0, 0.0],
            [s, c, 0.0, 0.0],
            [0.0, 0.0, 1.0, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def shearing(xy: float, xz: float, yx: float, yz: float, zx: float, zy: float) -> Transform:
    """Shear each axis in proportion to the other two.

    ``xy`` moves x in proportion to y, ``xz`` moves x in proportion to z, and
    so on.
    """
    return Transform(
        [
            [1.0, xy, xz, 0.0],
            [yx, 1.0, yz, 0.0],
            [zx, zy, 1.0, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )
