"""Dense immutable matrices with cofactor-based determinant and inverse.

Matrices store their elements in a read-only float64 NumPy array. Products and
sums delegate to NumPy, while the determinant, minors, cofactors and the
inverse are computed explicitly by first-row cofactor expansion so that the
numerical behavior does not depend on LAPACK.

Example:
    >>> from raytracer.core.matrix import Matrix
    >>> m = Matrix([[1.0, 2.0], [3.0, 4.0]])
    >>> m.determinant()
    -2.0
    >>> Matrix.identity(4) @ Matrix.identity(4) == Matrix.identity(4)
    True
"""

from collections.abc import Iterable, Sequence
from typing import Literal

import numpy as np
import numpy.typing as npt

from raytracer.core.numeric import EPSILON

# Order in which a flat sequence fills a matrix
FillOrder = Literal["row", "column"]


class InvalidDimensionError(ValueError):
    """Raised when an operation is requested on a matrix of the wrong shape.

    Attributes:
        rows: Row count of the offending matrix.
        columns: Column count of the offending matrix.
    """

    def __init__(self, rows: int, columns: int, message: str) -> None:
        self.rows = rows
        self.columns = columns
        super().__init__(f"{message} (matrix is {rows}x{columns})")


class SingularMatrixError(ValueError):
    """Raised when inverting a matrix whose determinant is exactly zero."""


class Matrix:
    """An immutable N x M matrix of floats.

    Equality is tolerant: two matrices are equal when they have the same shape
    and every pair of elements differs by at most EPSILON.

    Attributes:
        rows: Number of rows.
        columns: Number of columns.
    """

    __slots__ = ("_elements",)

    def __init__(self, elements: Sequence[Sequence[float]] | npt.ArrayLike) -> None:
        """Create a matrix from nested row sequences or a 2-D array.

        Args:
            elements: Row-major nested sequences or a 2-D array.

        Raises:
            InvalidDimensionError: If the input is not two-dimensional.
        """
        array = np.array(elements, dtype=np.float64)
        if array.ndim != 2:
            shape = array.shape + (0, 0)
            raise InvalidDimensionError(
                int(shape[0]), int(shape[1]), "Matrix elements must be two-dimensional"
            )
        array.flags.writeable = False
        self._elements = array

    # =========================================================================
    # Constructors
    # =========================================================================

    @classmethod
    def identity(cls, n: int) -> "Matrix":
        """Create the n x n identity matrix."""
        return cls(np.identity(n))

    @classmethod
    def constant(cls, rows: int, columns: int, value: float) -> "Matrix":
        """Create a matrix with every element set to value."""
        return cls(np.full((rows, columns), value, dtype=np.float64))

    @classmethod
    def diagonal(cls, n: int, value: float) -> "Matrix":
        """Create an n x n matrix with value on the diagonal and zeros elsewhere."""
        return cls(np.identity(n) * value)

    @classmethod
    def from_sequence(
        cls,
        rows: int,
        columns: int,
        values: Iterable[float],
        order: FillOrder = "row",
    ) -> "Matrix":
        """Create a matrix by filling it from a flat sequence.

        Args:
            rows: Number of rows.
            columns: Number of columns.
            values: Exactly rows * columns values.
            order: "row" fills row by row, "column" fills column by column.

        Returns:
            The new matrix.

        Raises:
            InvalidDimensionError: If the number of values does not match.
            ValueError: If order is neither "row" nor "column".
        """
        if order not in ("row", "column"):
            raise ValueError(f"Unknown fill order {order!r}, expected 'row' or 'column'")
        flat = np.fromiter(values, dtype=np.float64)
        if flat.size != rows * columns:
            raise InvalidDimensionError(
                rows, columns, f"Expected {rows * columns} values, got {flat.size}"
            )
        if order == "row":
            return cls(flat.reshape((rows, columns)))
        return cls(flat.reshape((columns, rows)).T)

    # =========================================================================
    # Accessors
    # =========================================================================

    @property
    def rows(self) -> int:
        """Number of rows in the matrix."""
        return int(self._elements.shape[0])

    @property
    def columns(self) -> int:
        """Number of columns in the matrix."""
        return int(self._elements.shape[1])

    @property
    def shape(self) -> tuple[int, int]:
        """(rows, columns) of the matrix."""
        return self.rows, self.columns

    @property
    def elements(self) -> npt.NDArray[np.float64]:
        """Read-only view of the underlying array."""
        return self._elements

    def __getitem__(self, index: tuple[int, int]) -> float:
        row, column = index
        return float(self._elements[row, column])

    def tolist(self) -> list[list[float]]:
        """Return the elements as nested Python lists."""
        return self._elements.tolist()

    # =========================================================================
    # Arithmetic
    # =========================================================================

    def __matmul__(self, other: "Matrix") -> "Matrix":
        if not isinstance(other, Matrix):
            return NotImplemented
        if self.columns != other.rows:
            raise InvalidDimensionError(
                other.rows,
                other.columns,
                f"Cannot multiply a {self.rows}x{self.columns} matrix by this matrix",
            )
        return Matrix(self._elements @ other._elements)

    def __mul__(self, other: "Matrix | float") -> "Matrix":
        if isinstance(other, Matrix):
            return self @ other
        if isinstance(other, (int, float)):
            return Matrix(self._elements * other)
        return NotImplemented

    def __rmul__(self, other: float) -> "Matrix":
        if isinstance(other, (int, float)):
            return Matrix(other * self._elements)
        return NotImplemented

    def __add__(self, other: "Matrix | float") -> "Matrix":
        if isinstance(other, Matrix):
            if self.shape != other.shape:
                raise InvalidDimensionError(
                    other.rows,
                    other.columns,
                    f"Cannot add to a {self.rows}x{self.columns} matrix",
                )
            return Matrix(self._elements + other._elements)
        if isinstance(other, (int, float)):
            return Matrix(self._elements + other)
        return NotImplemented

    def __radd__(self, other: float) -> "Matrix":
        if isinstance(other, (int, float)):
            return Matrix(other + self._elements)
        return NotImplemented

    def multiply_tuple(self, values: Sequence[float]) -> tuple[float, ...]:
        """Multiply the matrix by a column vector given as a flat sequence.

        Args:
            values: Exactly `columns` values.

        Returns:
            The resulting column as a tuple of `rows` floats.

        Raises:
            InvalidDimensionError: If the length does not match the column count.
        """
        if len(values) != self.columns:
            raise InvalidDimensionError(
                self.rows,
                self.columns,
                f"Cannot multiply by a column of length {len(values)}",
            )
        product = self._elements @ np.asarray(values, dtype=np.float64)
        return tuple(float(v) for v in product)

    def transpose(self) -> "Matrix":
        """Return the transposed matrix."""
        return Matrix(self._elements.T)

    # =========================================================================
    # Submatrices
    # =========================================================================

    def submatrix(self, row: int, column: int) -> "Matrix":
        """Return the matrix obtained by deleting one row and one column."""
        reduced = np.delete(np.delete(self._elements, row, axis=0), column, axis=1)
        return Matrix(reduced)

    def replace_submatrix(self, row: int, column: int, sub: "Matrix") -> "Matrix":
        """Replace every element outside the given row and column.

        This is the inverse of `submatrix`: the elements of `sub` are written,
        in row-major order, into the positions not in `row` or `column`.

        Args:
            row: Row to leave untouched.
            column: Column to leave untouched.
            sub: Matrix of shape (rows - 1, columns - 1).

        Returns:
            The new matrix.

        Raises:
            InvalidDimensionError: If `sub` has the wrong shape.
        """
        if sub.shape != (self.rows - 1, self.columns - 1):
            raise InvalidDimensionError(
                sub.rows,
                sub.columns,
                f"Replacement for a {self.rows}x{self.columns} matrix has the wrong shape",
            )
        keep_rows = [i for i in range(self.rows) if i != row]
        keep_columns = [j for j in range(self.columns) if j != column]
        elements = self._elements.copy()
        elements[np.ix_(keep_rows, keep_columns)] = sub._elements
        return Matrix(elements)

    # =========================================================================
    # Determinant and inverse
    # =========================================================================

    def _require_square(self, operation: str) -> None:
        if self.rows != self.columns:
            raise InvalidDimensionError(
                self.rows, self.columns, f"{operation} is only supported for square matrices"
            )

    def determinant(self) -> float:
        """Compute the determinant by first-row cofactor expansion.

        Returns:
            The determinant.

        Raises:
            InvalidDimensionError: If the matrix is not square.
        """
        self._require_square("Determinant")
        e = self._elements
        # The empty matrix, reached as the minor of a 1x1 matrix
        if self.rows == 0:
            return 1.0
        if self.rows == 1:
            return float(e[0, 0])
        if self.rows == 2:
            return float(e[0, 0] * e[1, 1] - e[0, 1] * e[1, 0])
        return sum(float(e[0, j]) * self.cofactor(0, j) for j in range(self.columns))

    def minor(self, row: int, column: int) -> float:
        """Determinant of the submatrix without the given row and column."""
        self._require_square("Minor")
        return self.submatrix(row, column).determinant()

    def cofactor(self, row: int, column: int) -> float:
        """Signed minor: (-1)^(row + column) * minor(row, column)."""
        minor = self.minor(row, column)
        return minor if (row + column) % 2 == 0 else -minor

    @property
    def is_invertible(self) -> bool:
        """Whether the determinant is non-zero."""
        return self.determinant() != 0.0

    def inverse(self) -> "Matrix":
        """Invert the matrix through its adjugate.

        Only an exactly-zero determinant is rejected; nearly singular matrices
        are inverted as-is.

        Returns:
            The inverse matrix.

        Raises:
            InvalidDimensionError: If the matrix is not square.
            SingularMatrixError: If the determinant is exactly zero.
        """
        determinant = self.determinant()
        if determinant == 0.0:
            raise SingularMatrixError(
                f"Cannot invert a {self.rows}x{self.columns} matrix with zero determinant"
            )
        n = self.rows
        # Element (j, i) of the inverse is cofactor(i, j) / determinant
        inverted = np.empty((n, n), dtype=np.float64)
        for i in range(n):
            for j in range(n):
                inverted[j, i] = self.cofactor(i, j) / determinant
        return Matrix(inverted)

    # =========================================================================
    # Comparison and display
    # =========================================================================

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        if self.shape != other.shape:
            return False
        return bool(np.all(np.abs(self._elements - other._elements) <= EPSILON))

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Matrix({self.tolist()!r})"
