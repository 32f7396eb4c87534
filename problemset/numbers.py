"""Integer problems: Roman numerals, digit reversal, parsing and triangle sides."""

from __future__ import annotations

import re

INT_MAX = 2**31 - 1
INT_MIN = -(2**31)

_ONES = ("", "I", "II", "III", "IV", "V", "VI", "VII", "VIII", "IX")
_TENS = ("", "X", "XX", "XXX", "XL", "L", "LX", "LXX", "LXXX", "XC")
_HUNDREDS = ("", "C", "CC", "CCC", "CD", "D", "DC", "DCC", "DCCC", "CM")
_THOUSANDS = ("", "M", "MM", "MMM")

_DIGITS = re.compile(r"[0-9]*")


def int_to_roman(num: int) -> str:
    """Return num (0 to 3999) in Roman numerals; 0 gives the empty string."""
    if not 0 <= num <= 3999:
        raise ValueError(f"{num} is outside 0..3999")
    return (
        _THOUSANDS[num // 1000]
        + _HUNDREDS[num % 1000 // 100]
        + _TENS[num % 100 // 10]
        + _ONES[num % 10]
    )


def is_palindrome(x: int) -> bool:
    """Tell whether the decimal digits of x read the same both ways; negatives never do."""
    if x < 0:
        return False
    digits = str(x)
    return digits == digits[::-1]


def reverse_integer(x: int) -> int:
    """Reverse the decimal digits of x, keeping its sign; 0 if the result leaves 32-bit range."""
    sign = -1 if x < 0 else 1
    result = sign * int(str(abs(x))[::-1])
    return result if INT_MIN <= result <= INT_MAX else 0


def my_atoi(s: str) -> int:
    """Parse a leading signed integer after spaces, clamping it to the 32-bit range."""
    text = s.lstrip(" ")
    negative = text[:1] == "-"
    if text[:1] in ("-", "+"):
        text = text[1:]
    digits = _DIGITS.match(text).group()
    value = int(digits) if digits else 0
    return max(-value, INT_MIN) if negative else min(value, INT_MAX)


def triangle_type(nums) -> str:
    """Classify three side lengths as 'equilateral', 'isosceles', 'scalene' or 'none'."""
    sides = list(nums)
    if len(sides) != 3:
        raise ValueError("a triangle needs exactly three sides")
    a, b, c = sides
    if not (a + b > c and b + c > a and a + c > b):
        return "none"
    if a == b == c:
        return "equilateral"
    if a == b or a == c or b == c:
        return "isosceles"
    return "scalene"