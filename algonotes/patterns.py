"""Text patterns of stars and digits, each returned as a list of lines."""

from __future__ import annotations


def inverted_steps(n: int) -> list[str]:
    """Rows of stars shrinking by one, each shifted one column right."""
    return [" " * (i - 1) + "*" * (n - i + 1) for i in range(1, n + 1)]


def double_inverted_steps(n: int) -> list[str]:
    """Rows of stars shrinking by one, each shifted two columns right."""
    return [" " * (2 * i) + "*" * (n - i) for i in range(n)]


def spaced_pyramid(n: int) -> list[str]:
    """A centred pyramid of stars separated by single spaces."""
    return [" " * (n - i) + " ".join("*" * i) for i in range(1, n + 1)]


def right_diamond(n: int) -> list[str]:
    """A right-aligned triangle growing to ``n`` stars, then shrinking."""
    upper = [" " * (n - i) + "*" * i for i in range(1, n + 1)]
    lower = [" " * i + "*" * (n - i) for i in range(1, n)]
    return upper + lower


def hourglass_gap(n: int) -> list[str]:
    """A block of stars with a widening gap in the middle, then closing edges."""
    half = n // 2
    upper = [
        "".join(" " if half - i <= j <= half + i else "*" for j in range(n))
        for i in range(half + 1)
    ]
    lower = [
        "".join("*" if j <= i or j >= n - i - 1 else " " for j in range(n))
        for i in range(half)
    ]
    return upper + lower


def number_pyramid(n: int) -> list[str]:
    """Centred rows counting 1 up to 2i-1."""
    return [
        " " * (n - i) + "".join(str(j) for j in range(1, 2 * i))
        for i in range(1, n + 1)
    ]


def hollow_number_pyramid(n: int) -> list[str]:
    """Centred rows with the row number at both ends and zeros between."""
    lines = []
    for i in range(1, n + 1):
        width = 2 * i - 1
        cells = (str(i) if j in (1, width) else "0" for j in range(1, width + 1))
        lines.append(" " * (n - i) + "".join(cells))
    return lines


def digit_mountain(n: int) -> list[str]:
    """Rows rising to ``n`` and falling back, centred on the peak digit."""
    lines = []
    for i in range(1, n + 1):
        rising = "".join(str(j % 10) if j > n - i else " " for j in range(1, n + 1))
        falling = "".join(str(n - j) for j in range(1, i))
        lines.append(rising + falling)
    return lines


def _hollow_row(i: int, n: int) -> str:
    return "".join("*" if j in (1, i) or i == n else " " for j in range(1, i + 1))


def hollow_right_triangle(n: int) -> list[str]:
    """A left-aligned hollow triangle with a solid base."""
    return [_hollow_row(i, n) for i in range(1, n + 1)]


def hollow_left_triangle(n: int) -> list[str]:
    """A right-aligned hollow triangle with a solid base."""
    return [" " * (n - i) + _hollow_row(i, n) for i in range(1, n + 1)]


def right_arrow(n: int) -> list[str]:
    """An ``n`` by ``n`` arrow pointing right; ``n`` should be odd."""
    half = n // 2
    tip = half * 3
    return [
        "".join(
            "*" if i == half or j - i == half or i + j == tip else " " for j in range(n)
        )
        for i in range(n)
    ]


def left_arrow(n: int) -> list[str]:
    """An ``n`` by ``n`` arrow pointing left; ``n`` should be odd."""
    half = n // 2
    return [
        "".join(
            "*" if i == half or i - j == half or i + j == half else " " for j in range(n)
        )
        for i in range(n)
    ]


def right_aligned_triangle(n: int) -> list[str]:
    """``n + 1`` rows of width ``n + 1``, the stars growing from none to ``n``."""
    return [
        "".join(" " if j <= n - i else "*" for j in range(n + 1)) for i in range(n + 1)
    ]


def repeated_digit_triangle(n: int) -> list[str]:
    """Row ``i`` repeats the number ``i``, ``i`` times."""
    return [str(i) * i for i in range(1, n + 1)]


def star_pyramid(n: int) -> list[str]:
    """A centred solid pyramid of stars."""
    return [" " * (n - i) + "*" * (2 * i - 1) for i in range(1, n + 1)]


def floyd_triangle(n: int) -> list[str]:
    """Consecutive numbers from 1, one more on each row."""
    lines = []
    start = 1
    for row in range(1, n + 1):
        lines.append(" ".join(str(k) for k in range(start, start + row)))
        start += row
    return lines


def star_arrowhead(n: int) -> list[str]:
    """Left-aligned rows growing to ``n`` stars, then shrinking."""
    growing = left_triangle(n)
    return growing + growing[-2::-1] if growing else []


def star_diamond(n: int) -> list[str]:
    """A centred diamond of stars."""
    upper = star_pyramid(n)
    return upper + upper[-2::-1] if upper else []


def hollow_square(n: int) -> list[str]:
    """An ``n`` by ``n`` outline of stars."""
    return [
        "".join("*" if i in (1, n) or j in (1, n) else " " for j in range(1, n + 1))
        for i in range(1, n + 1)
    ]


def left_triangle(n: int) -> list[str]:
    """Left-aligned rows of one to ``n`` stars."""
    return ["*" * i for i in range(1, n + 1)]