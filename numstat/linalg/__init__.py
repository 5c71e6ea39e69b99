"""
Elementary linear algebra.

Dense vectors and matrices over two element types (int64 and float64),
plus Gauss-Jordan inversion.

Public API:
    Vector                  magnitude, add, dot_product, scalar multiply
    Matrix                  swap_row, add, scalar_multiplication,
                            matrix_multiplication, transpose, inverse
    gauss_jordan_inverse    inversion kernel returning pivot diagnostics

Example:
    >>> from numstat.linalg import Matrix
    >>> A = Matrix([[4.0, 7.0], [2.0, 6.0]])
    >>> A.matrix_multiplication(A.inverse()).allclose(Matrix.identity(2))
    True
"""

from numstat.linalg.vector import Vector
from numstat.linalg.matrix import Matrix
from numstat.linalg.inversion import InversionResult, Pivoting, gauss_jordan_inverse

__all__ = [
    "Vector",
    "Matrix",
    "InversionResult",
    "Pivoting",
    "gauss_jordan_inverse",
]
