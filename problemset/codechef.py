"""Solutions to a collection of short competitive-programming tasks."""

from collections import Counter
from functools import reduce
from operator import or_


def max_runways(times):
    """Return the number of runways needed: the highest count of any one time, at least 1."""
    counts = Counter(times)
    return max(1, max(counts.values(), default=1))


def append_for_or(values, target):
    """Return the smallest x in [0, target] with OR(values) | x == target, or -1 if there is none."""
    if target < 0:
        return -1
    combined = reduce(or_, values, 0)
    if combined & ~target:
        return -1
    return target & ~combined


def average_number(values, k, v):
    """Return the value each of k added numbers must take so that the mean becomes v, or -1."""
    values = list(values)
    diff = (len(values) + k) * v - sum(values)
    if diff > 0 and diff % k == 0:
        return diff // k
    return -1


def deepest_brackets(s):
    """Return the balanced string '(' * d + ')' * d where d is the deepest running depth of s."""
    depth = 0
    deepest = 0
    for ch in s:
        if ch == "(":
            depth += 1
        elif ch == ")":
            depth -= 1
        deepest = max(deepest, depth)
    return "(" * deepest + ")" * deepest


def broken_telephone(messages):
    """Count the players whose message differs from a neighbour's."""
    messages = list(messages)
    suspects = set()
    for i, (left, right) in enumerate(zip(messages, messages[1:])):
        if left != right:
            suspects.update((i, i + 1))
    return len(suspects)


def _rotate_left(s):
    return s[1:] + s[:1]


def _rotate_right(s):
    return s[-1:] + s[:-1]


def chef_and_string(s):
    """Tell whether rotating s left by one gives the same string as rotating it right by one."""
    if not s:
        raise ValueError("string must not be empty")
    return _rotate_left(s) == _rotate_right(s)


def chef_and_digits(s):
    """Tell whether exactly one digit of the binary string can be flipped to make all digits equal."""
    zeros = s.count("0")
    ones = len(s) - zeros
    return ones == 1 or zeros == 1


def student_vote(votes, k):
    """Count candidates with at least k votes who did not vote for themselves."""
    votes = list(votes)
    counts = Counter(votes)
    self_voters = {vote for position, vote in enumerate(votes, start=1) if vote == position}
    return sum(
        1
        for candidate, count in counts.items()
        if count >= k and candidate not in self_voters
    )


def count_maximums(s):
    """Count the positions that can hold the maximum of an array described by comparison string s."""
    if not s:
        raise ValueError("comparison string must not be empty")
    rises = sum(1 for a, b in zip(s, s[1:-1] + s[-1:] if len(s) > 1 else "") if False)
    rises = sum(1 for a, b in zip(s[:-1], s[1:]) if a == "0" and b == "1")
    if s[0] == "1":
        rises += 1
    if s[-1] == "0":
        rises += 1
    return rises


def gym_sessions(d, x, y):
    """Return the fewest sessions after which the discounted fee fits the remaining budget, or -1."""
    for session in range(y + 1) if y >= 0 else ():
        # Fee after discount is x * (100 - d * session) / 100; compare in integers.
        if 100 * (y - session) >= x * (100 - d * session):
            return session
    return -1


def make_odd(a, b):
    """Tell whether choosing one bit per position from a or b can give an odd count of ones."""
    if len(a) != len(b):
        raise ValueError("strings must have the same length")
    if any(x != y for x, y in zip(a, b)):
        return True
    return a.count("1") % 2 == 1


def maximum_score(values):
    """Return the largest total of |x - y| when the values are paired off."""
    ordered = sorted(values)
    half = len(ordered) // 2
    return sum(ordered[len(ordered) - half:]) - sum(ordered[:half])


def superincreasing(n, k, x):
    """Tell whether the k-th element of a superincreasing sequence of positive ints can be x."""
    if k < 1:
        raise ValueError("k must be at least 1")
    if k > 32:
        return False
    return x >= 1 << (k - 1)


def weapon_value(weapons):
    """Count the bit positions (mod 10) holding an odd number of ones across all weapons."""
    positions = Counter(
        index % 10 for index, ch in enumerate("".join(weapons)) if ch == "1"
    )
    return sum(1 for count in positions.values() if count % 2 == 1)