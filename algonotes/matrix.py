"""Matrix routines: orthogonality, spiral order, products and rectangles."""

from __future__ import annotations

import math
from collections.abc import Sequence


def _transpose_rows(matrix: Sequence[Sequence[float]]) -> list[list[float]]:
    return [list(column) for column in zip(*matrix)]


def is_orthogonal(matrix: Sequence[Sequence[float]]) -> bool:
    """Return True if ``matrix`` times its transpose is the identity."""
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError("matrix must be square")
    for i, row_i in enumerate(matrix):
        for j, row_j in enumerate(matrix):
            dot = sum(a * b for a, b in zip(row_i, row_j))
            expected = 1.0 if i == j else 0.0
            if not math.isclose(dot, expected, rel_tol=1e-9, abs_tol=1e-9):
                return False
    return True


def spiral_order(matrix: Sequence[Sequence[int]]) -> list[int]:
    """Return the elements read clockwise in a spiral from the top-left corner."""
    result: list[int] = []
    if not matrix or not matrix[0]:
        return result
    top, bottom = 0, len(matrix) - 1
    left, right = 0, len(matrix[0]) - 1
    while top <= bottom and left <= right:
        result.extend(matrix[top][left : right + 1])
        top += 1
        result.extend(matrix[row][right] for row in range(top, bottom + 1))
        right -= 1
        if top <= bottom:
            result.extend(matrix[bottom][col] for col in range(right, left - 1, -1))
            bottom -= 1
        if left <= right:
            result.extend(matrix[row][left] for row in range(bottom, top - 1, -1))
            left += 1
    return result


def multiply(
    first: Sequence[Sequence[float]], second: Sequence[Sequence[float]]
) -> list[list[float]]:
    """Return the matrix product of ``first`` and ``second``."""
    inner = len(first[0]) if first else 0
    if inner != len(second):
        raise ValueError("the matrices cannot be multiplied")
    columns = _transpose_rows(second)
    return [[sum(a * b for a, b in zip(row, column)) for column in columns] for row in first]


def largest_histogram_area(heights: Sequence[int]) -> int:
    """Return the area of the largest rectangle under a histogram."""
    best = 0
    stack: list[int] = []
    bars = list(heights)
    for index, height in enumerate([*bars, 0]):
        while stack and bars[stack[-1]] >= height:
            top = stack.pop()
            start = stack[-1] + 1 if stack else 0
            best = max(best, bars[top] * (index - start))
        stack.append(index)
    return best


def max_rectangle_area(matrix: Sequence[Sequence[int]]) -> int:
    """Return the area of the largest rectangle of non-zero cells in a 0/1 matrix."""
    best = 0
    heights: list[int] = []
    for row in matrix:
        if not heights:
            heights = list(row)
        else:
            heights = [cell + above if cell else 0 for cell, above in zip(row, heights)]
        best = max(best, largest_histogram_area(heights))
    return best


def corner_sum(grid: Sequence[Sequence[int]], value: int) -> int:
    """Score a 3x3 grid.

    Zero when the whole main diagonal equals ``value``; otherwise the larger of
    the sums of the three cells below and the three cells above the diagonal.
    """
    if len(grid) != 3 or any(len(row) != 3 for row in grid):
        raise ValueError("grid must be 3x3")
    if all(grid[i][i] == value for i in range(3)):
        return 0
    lower = grid[2][0] + grid[2][1] + grid[1][0]
    upper = grid[0][1] + grid[0][2] + grid[1][2]
    return max(lower, upper)