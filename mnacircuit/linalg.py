"""Dense complex linear algebra: LU decomposition with partial pivoting."""

from __future__ import annotations

from collections.abc import Sequence

from .formatting import format_phasor

Matrix = list[list[complex]]

_SINGULAR_TOLERANCE = 1e-12


class SingularMatrixError(ArithmeticError):
    """Raised when a matrix is singular or nearly singular."""


def zero_matrix(n: int) -> Matrix:
    """Return an ``n`` x ``n`` matrix of complex zeros."""
    return [[0j] * n for _ in range(n)]


def zero_vector(n: int) -> list[complex]:
    """Return a vector of ``n`` complex zeros."""
    return [0j] * n


def lu_decompose(matrix: Sequence[Sequence[complex]]) -> tuple[Matrix, list[int]]:
    """Factor a square matrix in place of a copy.

    Returns ``(lu, pivot)`` where ``lu`` holds the unit-lower factor below the
    diagonal and the upper factor on and above it, and ``pivot[i]`` is the
    original row now at position ``i``.
    """
    lu = [[complex(v) for v in row] for row in matrix]
    n = len(lu)
    if any(len(row) != n for row in lu):
        raise ValueError("matrix must be square")
    pivot = list(range(n))

    for i in range(n):
        pivot_row = max(range(i, n), key=lambda r: abs(lu[r][i]))
        if abs(lu[pivot_row][i]) < _SINGULAR_TOLERANCE:
            raise SingularMatrixError("matrix is singular or near-singular")
        if pivot_row != i:
            lu[i], lu[pivot_row] = lu[pivot_row], lu[i]
            pivot[i], pivot[pivot_row] = pivot[pivot_row], pivot[i]

        head = lu[i]
        for row in lu[i + 1 :]:
            factor = row[i] / head[i]
            row[i] = factor
            for k in range(i + 1, n):
                row[k] -= factor * head[k]

    return lu, pivot


def lu_solve_factored(
    lu: Sequence[Sequence[complex]], pivot: Sequence[int], b: Sequence[complex]
) -> list[complex]:
    """Solve ``A x = b`` given the factorisation produced by :func:`lu_decompose`."""
    n = len(lu)
    permuted = [complex(b[p]) for p in pivot]

    y: list[complex] = []
    for row, value in zip(lu, permuted):
        y.append(value - sum((a * yj for a, yj in zip(row, y)), 0j))

    x = [0j] * n
    for i in reversed(range(n)):
        row = lu[i]
        tail = sum((row[j] * x[j] for j in range(i + 1, n)), 0j)
        x[i] = (y[i] - tail) / row[i]
    return x


def lu_solve(matrix: Sequence[Sequence[complex]], b: Sequence[complex]) -> list[complex]:
    """Solve ``A x = b``; raises :class:`SingularMatrixError` for singular ``A``."""
    if len(b) != len(matrix):
        raise ValueError("right-hand side length does not match matrix size")
    lu, pivot = lu_decompose(matrix)
    return lu_solve_factored(lu, pivot, b)


def format_matrix(matrix: Sequence[Sequence[complex]]) -> str:
    """Render a matrix row by row, entries in phasor form separated by ``|``."""
    if not matrix:
        raise ValueError("matrix is empty")
    width = len(matrix[0])
    if any(len(row) != width for row in matrix):
        raise ValueError("matrix rows have different lengths")
    return "".join(
        "".join(f"{format_phasor(v)} | " for v in row) + "\n" for row in matrix
    )


def format_vector(vector: Sequence[complex]) -> str:
    """Render a vector in brackets, one phasor per line."""
    if not vector:
        raise ValueError("vector is empty")
    return "[ " + "".join(f"{format_phasor(v)}\n" for v in vector) + "]"