"""Small number-theory and arithmetic routines."""

from __future__ import annotations

from collections.abc import Iterable
from typing import NamedTuple


def primes_up_to(limit: int) -> list[int]:
    """Return the primes from 2 to ``limit`` inclusive, by the sieve of Eratosthenes."""
    if limit < 2:
        return []
    composite = bytearray(limit + 1)
    for candidate in range(2, int(limit**0.5) + 1):
        if not composite[candidate]:
            composite[candidate * candidate :: candidate] = bytes(
                len(range(candidate * candidate, limit + 1, candidate))
            )
            for multiple in range(candidate * candidate, limit + 1, candidate):
                composite[multiple] = 1
    return [n for n in range(2, limit + 1) if not composite[n]]


def is_palindrome_number(number: int) -> bool:
    """Return True if the decimal digits of ``number`` read the same reversed."""
    digits = str(abs(number))
    return digits == digits[::-1]


def max_subarray_sum(values: Iterable[int]) -> int:
    """Return the largest sum of a contiguous run (Kadane); never below zero."""
    numbers = list(values)
    if not numbers:
        raise ValueError("max_subarray_sum() of an empty sequence")
    current = 0
    best = 0
    for value in numbers:
        current = max(current + value, 0)
        best = max(best, current)
    return best


def power(base: int, exponent: int) -> int:
    """Return ``base`` raised to a non-negative ``exponent`` by repeated squaring."""
    if exponent < 0:
        raise ValueError("exponent must not be negative")
    if exponent == 0:
        return 1
    if exponent == 1:
        return base
    half = power(base, exponent // 2)
    if exponent % 2 == 0:
        return half * half
    return base * half * half


def factorial(n: int) -> int:
    """Return the product 1 * 2 * ... * n; 1 when ``n`` is below 1."""
    result = 1
    for factor in range(2, n + 1):
        result *= factor
    return result


def fibonacci(count: int) -> list[int]:
    """Return the first ``count`` Fibonacci numbers, starting 0, 1."""
    terms: list[int] = []
    a, b = 0, 1
    for _ in range(count):
        terms.append(a)
        a, b = b, a + b
    return terms


def divide(dividend: float, divisor: float) -> float:
    """Return the quotient as a float."""
    return dividend / divisor


def is_perfect(number: int) -> bool:
    """Return True if ``number`` equals the sum of its proper divisors."""
    if number < 1:
        return False
    return sum(d for d in range(1, number) if number % d == 0) == number


def is_armstrong(number: int, digits: int | None = None) -> bool:
    """Return True if the sum of the digits, each raised to ``digits``, is ``number``.

    When ``digits`` is omitted the count of digits of ``number`` is used.
    """
    if number < 0:
        return False
    text = str(number)
    exponent = len(text) if digits is None else digits
    return sum(int(d) ** exponent for d in text) == number


def is_prime(number: int) -> bool:
    """Return True if ``number`` is prime, by trial division."""
    if number < 2:
        return False
    divisor = 2
    while divisor * divisor <= number:
        if number % divisor == 0:
            return False
        divisor += 1
    return True


def is_leap_year(year: int) -> bool:
    """Return True for Gregorian leap years."""
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


_GRADES = (
    (91, 100, "A+"),
    (71, 90, "A"),
    (51, 70, "B"),
    (34, 50, "C"),
    (0, 33, "D"),
)


def grade(marks: int) -> str:
    """Return the letter grade for marks out of 100."""
    for low, high, letter in _GRADES:
        if low <= marks <= high:
            return letter
    raise ValueError(f"marks out of range: {marks}")


class Progression(NamedTuple):
    """Terms of an arithmetic progression together with their sum."""

    terms: list[int]
    total: int


def arithmetic_progression(count: int, first: int = 5, difference: int = 2) -> Progression:
    """Return the first ``count`` terms of an arithmetic progression and their sum."""
    terms = [first + i * difference for i in range(max(count, 0))]
    return Progression(terms, sum(terms))


def even_numbers(limit: int = 10) -> list[int]:
    """Return the even numbers from 1 to ``limit``."""
    return list(range(2, limit + 1, 2))


def odd_numbers(limit: int = 10) -> list[int]:
    """Return the odd numbers from 1 to ``limit``."""
    return list(range(1, limit + 1, 2))


def multiples(factor: int = 2, count: int = 10) -> list[int]:
    """Return the first ``count`` multiples of ``factor``, a multiplication table row."""
    return [factor * i for i in range(1, count + 1)]