"""The numbered practice figures and a triangle of powers of two."""

from __future__ import annotations

from collections.abc import Callable


def _inverted_right() -> list[str]:
    return [" " * (5 - i) + "*" * i for i in range(5, 0, -1)]


def _inverted_double_spaced() -> list[str]:
    return ["  " * (5 - i) + "*" * i for i in range(5, 0, -1)]


def _gapped_pyramid() -> list[str]:
    lines = []
    for i in range(5):
        cells = "".join("  " if k % 2 else "* " for k in range(2 * i + 1))
        lines.append("  " * (6 - i) + cells)
    return lines


def _right_diamond() -> list[str]:
    upper = [" " * (4 - i) + "*" * (i + 1) for i in range(5)]
    lower = [" " * (5 - i) + "*" * i for i in range(4, 0, -1)]
    return upper + lower


def _split_diamond() -> list[str]:
    upper = ["*" * (3 - i) + " " * (2 * i + 1) + "*" * (3 - i) for i in range(4)]
    lower = ["*" * (3 - i) + " " * (2 * i + 1) + "*" * (3 - i) for i in range(2, -1, -1)]
    return upper + lower


def _counting_pyramid() -> list[str]:
    return [
        "  " * (6 - i) + "".join(f" {j}" for j in range(1, 2 * i))
        for i in range(1, 6)
    ]


def _hollow_number_pyramid() -> list[str]:
    lines = []
    for i in range(5):
        width = 2 * i + 1
        cells = "".join(
            f"{i + 1} " if k in (0, width - 1) else "0 " for k in range(width)
        )
        lines.append("  " * (4 - i) + cells)
    return lines


def _palindromic_digits() -> list[str]:
    lines = []
    for i in range(10, 0, -1):
        rising = "".join("0 " if k == 10 else f"{k} " for k in range(i, 11))
        falling = "".join(f"{k} " for k in range(9, i - 1, -1))
        lines.append("  " * (i - 1) + rising + falling)
    return lines


def _hollow_triangle() -> list[str]:
    return [
        "".join("* " if i == j or j == 0 or i == 4 else "  " for j in range(i, -1, -1))
        for i in range(5)
    ]


def _truncated_binomial_row() -> list[str]:
    # Only the first row is ever produced: the loop stops after it.
    row = 0
    value = 1
    parts = []
    for k in range(6):
        parts.append(f"  {value}{row}")
        numerator = value * (row - k)
        quotient = abs(numerator) // (k + 1)
        value = quotient if numerator >= 0 else -quotient
    return ["".join(parts), ""]


_FIGURES: dict[int, Callable[[], list[str]]] = {
    1: _inverted_right,
    2: _inverted_double_spaced,
    3: _gapped_pyramid,
    4: _right_diamond,
    5: _split_diamond,
    6: _counting_pyramid,
    7: _hollow_number_pyramid,
    8: _palindromic_digits,
    9: _hollow_triangle,
    10: _truncated_binomial_row,
}


def figure(number: int) -> list[str]:
    """Return the lines of practice figure ``number`` (1 to 10)."""
    try:
        build = _FIGURES[number]
    except KeyError:
        raise ValueError(f"no figure numbered {number}") from None
    return build()


def power_of_two_triangle(n: int) -> list[str]:
    """Row ``i`` lists 2**(i+j) for j below ``i``, in six-significant-digit form."""
    return [
        "".join(f"{2.0 ** (i + j):g}  " for j in range(i)) for i in range(1, n + 1)
    ]