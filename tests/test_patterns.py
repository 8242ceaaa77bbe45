import pytest

from algonotes import patterns as p

SIZES = [1, 2, 5, 8]


def test_left_triangle_matches_drawing():
    assert p.left_triangle(5) == ["*", "**", "***", "****", "*****"]


def test_repeated_digit_triangle_matches_drawing():
    assert p.repeated_digit_triangle(3) == ["1", "22", "333"]


def test_number_pyramid_matches_drawing():
    rows = [line.strip() for line in p.number_pyramid(5)]
    assert rows == ["1", "123", "12345", "1234567", "123456789"]


def test_hollow_number_pyramid_matches_drawing():
    rows = p.hollow_number_pyramid(8)
    assert [line.strip() for line in rows[:3]] == ["1", "202", "30003"]
    assert rows[-1] == "800000000000008"


def test_digit_mountain_matches_drawing():
    rows = p.digit_mountain(8)
    assert rows[0] == "       8"
    assert rows[1] == "      787"
    assert rows[-1] == "123456787654321"


def test_hourglass_gap_matches_drawing():
    rows = p.hourglass_gap(8)
    assert rows[0] == "**** ***"
    assert rows[-1] == "********"
    assert all(len(line) == 8 for line in rows)


def test_arrows_match_drawing():
    assert p.right_arrow(5) == ["  *  ", "   * ", "*****", "   * ", "  *  "]
    assert p.left_arrow(5) == ["  *  ", " *   ", "*****", " *   ", "  *  "]


@pytest.mark.parametrize("n", SIZES)
def test_star_diamond_is_pyramid_mirrored(n):
    pyramid = p.star_pyramid(n)
    assert p.star_diamond(n) == pyramid + pyramid[::-1][1:]


@pytest.mark.parametrize("n", SIZES)
def test_star_arrowhead_is_triangle_mirrored(n):
    assert p.star_arrowhead(n) == p.left_triangle(n) + p.left_triangle(n - 1)[::-1]


@pytest.mark.parametrize("n", SIZES)
def test_star_pyramid_is_centred(n):
    rows = p.star_pyramid(n)
    assert len(rows) == n
    assert rows[-1] == "*" * (2 * n - 1)
    assert all(len(line) == n - 1 + (len(line.strip()) + 1) // 2 for line in rows)


@pytest.mark.parametrize("n", SIZES)
def test_hollow_triangles_align(n):
    right = p.hollow_right_triangle(n)
    assert p.hollow_left_triangle(n) == [line.rjust(n) for line in right]
    assert right[-1] == "*" * n
    assert all(line[0] == line[-1] == "*" for line in right)


@pytest.mark.parametrize("n", SIZES)
def test_right_diamond_is_symmetric(n):
    rows = p.right_diamond(n)
    assert len(rows) == 2 * n - 1
    assert rows == rows[::-1]
    assert all(len(line) == n for line in rows)


@pytest.mark.parametrize("n", SIZES)
def test_inverted_steps(n):
    rows = p.inverted_steps(n)
    assert all(len(line) == n for line in rows)
    assert [line.count("*") for line in rows] == list(range(n, 0, -1))


@pytest.mark.parametrize("n", SIZES)
def test_double_inverted_steps(n):
    rows = p.double_inverted_steps(n)
    assert [line.count("*") for line in rows] == list(range(n, 0, -1))
    assert [len(line) - len(line.lstrip()) for line in rows] == list(range(0, 2 * n, 2))


@pytest.mark.parametrize("n", SIZES)
def test_spaced_pyramid(n):
    rows = p.spaced_pyramid(n)
    assert rows[-1] == " ".join("*" * n)
    assert all("**" not in line for line in rows)
    assert [line.count("*") for line in rows] == list(range(1, n + 1))


@pytest.mark.parametrize("n", SIZES)
def test_right_aligned_triangle(n):
    rows = p.right_aligned_triangle(n)
    assert len(rows) == n + 1
    assert rows[0] == " " * (n + 1)
    assert rows[-1].strip() == "*" * n
    assert all(len(line) == n + 1 for line in rows)


@pytest.mark.parametrize("n", SIZES)
def test_floyd_triangle_is_consecutive(n):
    rows = [[int(word) for word in line.split()] for line in p.floyd_triangle(n)]
    assert [len(row) for row in rows] == list(range(1, n + 1))
    flat = [value for row in rows for value in row]
    assert flat == list(range(1, len(flat) + 1))


@pytest.mark.parametrize("n", [2, 3, 6])
def test_hollow_square_outline(n):
    rows = p.hollow_square(n)
    assert rows[0] == rows[-1] == "*" * n
    assert all(line[0] == line[-1] == "*" and line.count("*") == 2 for line in rows[1:-1])


@pytest.mark.parametrize(
    "make",
    [p.left_triangle, p.star_pyramid, p.star_diamond, p.star_arrowhead, p.floyd_triangle],
)
def test_zero_size_is_empty(make):
    assert make(0) == []