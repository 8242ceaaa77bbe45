"""Small judge-style exercises."""

from __future__ import annotations

from collections.abc import Iterable


def first_capital(chars: Iterable[str]) -> str:
    """Return the first character from A to Z."""
    for char in chars:
        if "A" <= char <= "Z":
            return char
    raise ValueError("no capital letter found")


def votes_report(first: int, second: int, third: int) -> list[int | str]:
    """Report each count above 50; ``NOTA`` follows when the third is not above 50."""
    report: list[int | str] = []
    if first > 50:
        report.append(first)
    if second > 50:
        report.append(second)
    if third > 50:
        report.append(third)
    else:
        report.append("NOTA")
    return report


def exceeds_sum_of_others(first: int, second: int, third: int) -> bool:
    """Return True if the largest value is greater than the sum of the other two."""
    low, middle, high = sorted((first, second, third))
    return high > low + middle


def fifth(number: int) -> int:
    """Return ``number`` divided by 5, truncated toward zero."""
    quotient = abs(number) // 5
    return quotient if number >= 0 else -quotient