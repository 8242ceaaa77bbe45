import math

import pytest

from algonotes.numbers import (
    arithmetic_progression,
    divide,
    even_numbers,
    factorial,
    fibonacci,
    grade,
    is_armstrong,
    is_leap_year,
    is_palindrome_number,
    is_perfect,
    is_prime,
    max_subarray_sum,
    multiples,
    odd_numbers,
    power,
    primes_up_to,
)


def test_sieve_agrees_with_trial_division():
    limit = 200
    assert primes_up_to(limit) == [n for n in range(limit + 1) if is_prime(n)]


def test_sieve_small_limits():
    assert primes_up_to(1) == []
    assert primes_up_to(0) == []
    assert primes_up_to(2) == [2]


def test_is_prime_rejects_below_two():
    assert not is_prime(1)
    assert not is_prime(0)
    assert not is_prime(-7)


@pytest.mark.parametrize("number", [121, 3443, 6776, 191, 48984])
def test_palindromes_from_source(number):
    assert is_palindrome_number(number)
    assert not is_palindrome_number(number * 10)


def test_palindrome_negative_and_zero():
    assert is_palindrome_number(0)
    assert is_palindrome_number(-121)


def test_max_subarray_classic():
    assert max_subarray_sum([-2, 1, -3, 4, -1, 2, 1, -5, 4]) == 6


def test_max_subarray_all_nonnegative_is_total():
    values = [3, 0, 7, 2]
    assert max_subarray_sum(values) == sum(values)


def test_max_subarray_all_negative_is_zero():
    assert max_subarray_sum([-5, -1, -8]) == 0


def test_max_subarray_empty():
    with pytest.raises(ValueError):
        max_subarray_sum([])


@pytest.mark.parametrize("base, exponent", [(2, 10), (3, 7), (5, 0), (7, 1), (-2, 5), (10, 13)])
def test_power_matches_operator(base, exponent):
    assert power(base, exponent) == base**exponent


def test_power_negative_exponent():
    with pytest.raises(ValueError):
        power(2, -1)


@pytest.mark.parametrize("n", [0, 1, 5, 12, 20])
def test_factorial_matches_math(n):
    assert factorial(n) == math.factorial(n)


def test_fibonacci_recurrence():
    terms = fibonacci(30)
    assert len(terms) == 30
    assert terms[:2] == [0, 1]
    for a, b, c in zip(terms, terms[1:], terms[2:]):
        assert c == a + b


def test_fibonacci_empty():
    assert fibonacci(0) == []


def test_divide_round_trip():
    assert divide(7, 2) * 2 == 7
    assert divide(1, 4) == 0.25


def test_divide_by_zero():
    with pytest.raises(ZeroDivisionError):
        divide(1, 0)


@pytest.mark.parametrize("number", [6, 28, 496, 8128])
def test_perfect_numbers_from_source(number):
    assert is_perfect(number)
    assert not is_perfect(number + 1)


def test_perfect_rejects_non_positive():
    assert not is_perfect(0)
    assert not is_perfect(-6)


def test_armstrong():
    assert is_armstrong(153, 3)
    assert is_armstrong(153)
    assert not is_armstrong(154, 3)


def test_armstrong_single_digits():
    for digit in range(10):
        assert is_armstrong(digit, 1)


@pytest.mark.parametrize("year", [1600, 2000, 2024])
def test_leap_years(year):
    assert is_leap_year(year)


@pytest.mark.parametrize("year", [1900, 2100, 2023])
def test_common_years(year):
    assert not is_leap_year(year)


@pytest.mark.parametrize(
    "marks, letter",
    [(100, "A+"), (91, "A+"), (90, "A"), (71, "A"), (70, "B"), (51, "B"),
     (50, "C"), (34, "C"), (33, "D"), (0, "D")],
)
def test_grade_boundaries(marks, letter):
    assert grade(marks) == letter


@pytest.mark.parametrize("marks", [-1, 101])
def test_grade_invalid(marks):
    with pytest.raises(ValueError):
        grade(marks)


def test_arithmetic_progression_defaults():
    terms, total = arithmetic_progression(6)
    assert len(terms) == 6
    assert terms[0] == 5
    assert all(b - a == 2 for a, b in zip(terms, terms[1:]))
    assert total == sum(terms)


def test_arithmetic_progression_custom():
    result = arithmetic_progression(4, first=1, difference=3)
    assert result.terms[0] == 1
    assert all(b - a == 3 for a, b in zip(result.terms, result.terms[1:]))
    assert result.total == sum(result.terms)


def test_arithmetic_progression_empty():
    assert arithmetic_progression(0).terms == []
    assert arithmetic_progression(0).total == 0


def test_even_and_odd_partition():
    evens = even_numbers(10)
    odds = odd_numbers(10)
    assert all(n % 2 == 0 for n in evens)
    assert all(n % 2 == 1 for n in odds)
    assert sorted(evens + odds) == list(range(1, 11))


def test_multiples_table():
    row = multiples(2, 10)
    assert len(row) == 10
    assert row[0] == 2
    assert all(b - a == 2 for a, b in zip(row, row[1:]))
    assert multiples() == row