import pytest

from problemset.numbers import (
    INT_MAX,
    INT_MIN,
    int_to_roman,
    is_palindrome,
    my_atoi,
    reverse_integer,
    triangle_type,
)

_ROMAN_VALUES = {"I": 1, "V": 5, "X": 10, "L": 50, "C": 100, "D": 500, "M": 1000}


def _parse_roman(text):
    total = 0
    for current, following in zip(text, text[1:] + " "):
        value = _ROMAN_VALUES[current]
        if following != " " and _ROMAN_VALUES[following] > value:
            total -= value
        else:
            total += value
    return total


@pytest.mark.parametrize(
    "num, expected",
    [(0, ""), (3, "III"), (4, "IV"), (9, "IX"), (40, "XL"), (900, "CM"), (3000, "MMM")],
)
def test_int_to_roman_table_values(num, expected):
    assert int_to_roman(num) == expected


def test_int_to_roman_round_trips_whole_range():
    seen = set()
    for num in range(1, 4000):
        roman = int_to_roman(num)
        assert _parse_roman(roman) == num
        seen.add(roman)
    assert len(seen) == 3999


@pytest.mark.parametrize("num", [-1, 4000])
def test_int_to_roman_rejects_out_of_range(num):
    with pytest.raises(ValueError):
        int_to_roman(num)


@pytest.mark.parametrize("x, expected", [(121, True), (-121, False), (10, False), (0, True)])
def test_is_palindrome_cases(x, expected):
    assert is_palindrome(x) is expected


@pytest.mark.parametrize("half", ["1", "12", "907", "45"])
def test_is_palindrome_mirrored_digits(half):
    assert is_palindrome(int(half + half[::-1]))
    assert is_palindrome(int(half + "5" + half[::-1]))


@pytest.mark.parametrize("x", [123, 4567, 1, 98765, 102030401])
def test_reverse_integer_round_trip(x):
    assert reverse_integer(reverse_integer(x)) == x
    assert reverse_integer(-x) == -reverse_integer(x)


def test_reverse_integer_digits_reverse():
    assert str(reverse_integer(123456789)) == "123456789"[::-1]


def test_reverse_integer_overflow_gives_zero():
    assert reverse_integer(INT_MAX) == 0
    assert reverse_integer(INT_MIN) == 0
    assert reverse_integer(0) == 0


@pytest.mark.parametrize("n", [0, 42, -42, 2147483647, -2147483648, 7])
def test_my_atoi_round_trip(n):
    assert my_atoi(str(n)) == n
    assert my_atoi("   " + str(n) + " with words") == n


def test_my_atoi_plus_sign_and_garbage():
    assert my_atoi("+17") == 17
    assert my_atoi("words and 987") == 0
    assert my_atoi("") == 0
    assert my_atoi("-") == 0


def test_my_atoi_clamps():
    assert my_atoi("-91283472332") == INT_MIN
    assert my_atoi("91283472332") == INT_MAX
    assert INT_MAX == 2**31 - 1


@pytest.mark.parametrize(
    "sides, expected",
    [
        ([3, 3, 3], "equilateral"),
        ([3, 4, 5], "scalene"),
        ([3, 3, 5], "isosceles"),
        ([1, 2, 3], "none"),
        ([1, 1, 7], "none"),
    ],
)
def test_triangle_type(sides, expected):
    assert triangle_type(sides) == expected


def test_triangle_type_is_order_independent():
    assert triangle_type([5, 3, 3]) == triangle_type([3, 5, 3]) == triangle_type([3, 3, 5])


def test_triangle_type_needs_three_sides():
    with pytest.raises(ValueError):
        triangle_type([1, 2])