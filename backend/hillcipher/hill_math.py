import numpy as np
from typing import List

Matrix = List[List[int]]
Vector = List[int]

# Alphabet size (A-Z)
MODULUS = 26


class NoInverseExists(ValueError):
    def __init__(self, value: int, modulus: int):
        self.value = value
        self.modulus = modulus
        super().__init__(f"No modular inverse exists for determinant {value} (mod {modulus})")


def mod(n: int, m: int) -> int:
    """Reduce n into [0, m), negative n included."""
    if m <= 0:
        raise ValueError(f"Modulus must be positive, got {m}")
    return n % m


def mod_inverse(a: int, m: int) -> int:
    """Multiplicative inverse of a modulo m."""
    a = mod(a, m)
    # Linear search is instant for m = 26 and keeps the smallest x
    for x in range(1, m):
        if mod(a * x, m) == 1:
            return x
    raise NoInverseExists(a, m)


def _check_square(matrix: Matrix) -> int:
    n = len(matrix)
    if n == 0:
        raise ValueError("Matrix must have at least one row")
    for row in matrix:
        if len(row) != n:
            raise ValueError(f"Matrix must be square ({n}x{n})")
    return n


def minor(matrix: Matrix, exclude_row: int, exclude_col: int) -> Matrix:
    """Copy of matrix without the given row and column."""
    return [
        [val for c, val in enumerate(row) if c != exclude_col]
        for r, row in enumerate(matrix)
        if r != exclude_row
    ]


def _cofactor_expansion(matrix: Matrix) -> int:
    n = len(matrix)
    if n == 1:
        return matrix[0][0]
    if n == 2:
        return matrix[0][0] * matrix[1][1] - matrix[0][1] * matrix[1][0]

    det = 0
    for c in range(n):
        sign = 1 if c % 2 == 0 else -1
        det += sign * matrix[0][c] * _cofactor_expansion(minor(matrix, 0, c))
    return det


def determinant(matrix: Matrix, modulus: int = None) -> int:
    """
    Determinant by Laplace expansion along the first row.

    Recursive levels work over plain integers; when a modulus is given only
    the final value is reduced. Cost grows as O(n!), so this is meant for the
    small key matrices of the cipher.
    """
    _check_square(matrix)
    det = _cofactor_expansion(matrix)
    if modulus is not None:
        return mod(det, modulus)
    return det


def inverse_matrix(matrix: Matrix, modulus: int) -> Matrix:
    """
    Inverse of matrix modulo `modulus` via the adjugate:
    A^-1 = det(A)^-1 * adj(A), where adj(A)[j][i] is the (i, j) cofactor.

    Raises NoInverseExists when det(A) is not a unit modulo `modulus`.
    """
    n = _check_square(matrix)
    det = determinant(matrix, modulus)
    det_inv = mod_inverse(det, modulus)

    if n == 1:
        return [[det_inv]]

    adj = [[0] * n for _ in range(n)]
    for i in range(n):
        for j in range(n):
            cofactor = determinant(minor(matrix, i, j), modulus)
            if (i + j) % 2 == 1:
                cofactor = -cofactor
            # Transposed placement
            adj[j][i] = mod(cofactor * det_inv, modulus)
    return adj


def multiply_matrix_vector(matrix: Matrix, vector: Vector, modulus: int) -> Vector:
    n = len(matrix)
    if len(vector) != n:
        raise ValueError(f"Vector length {len(vector)} does not match matrix size {n}")

    result = [0] * n
    for i in range(n):
        val = 0
        for j in range(n):
            val += matrix[i][j] * vector[j]
        result[i] = mod(val, modulus)
    return result


def is_identity_mod(matrix: Matrix, other: Matrix, modulus: int) -> bool:
    """Check matrix . other == I (mod modulus)"""
    a = np.array(matrix, dtype=object)
    b = np.array(other, dtype=object)
    if a.shape != b.shape or a.ndim != 2 or a.shape[0] != a.shape[1]:
        return False
    product = np.mod(a.dot(b), modulus)
    return bool(np.array_equal(product.astype(int), np.eye(a.shape[0], dtype=int)))
