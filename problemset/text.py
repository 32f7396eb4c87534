"""String problems: searching, bracket matching, counting letters and zigzag layout."""

from __future__ import annotations

from collections import Counter
from itertools import cycle

_OPENERS = {"]": "[", "}": "{", ")": "("}


def find_words_containing(words, x):
    """Return the indices of the words that contain the character x."""
    return [index for index, word in enumerate(words) if x in word]


def generate_parenthesis(n):
    """Return every balanced string of n bracket pairs, in lexicographic order."""
    if n < 0:
        raise ValueError("n must not be negative")
    results = []

    def build(prefix, opened, closed):
        if opened == n and closed == n:
            results.append(prefix)
            return
        if opened < n:
            build(prefix + "(", opened + 1, closed)
        if closed < opened:
            build(prefix + ")", opened, closed + 1)

    build("", 0, 0)
    return results


def longest_unequal_subsequence(words, groups):
    """Keep the first word of each run of equal consecutive groups."""
    result = []
    previous = object()
    for word, group in zip(words, groups):
        if group != previous:
            result.append(word)
        previous = group
    return result


def can_construct(ransom_note, magazine):
    """Tell whether the letters of magazine, each used once, can spell ransom_note."""
    return not Counter(ransom_note) - Counter(magazine)


def is_valid_parentheses(s):
    """Tell whether every closing bracket matches the most recent unclosed opener."""
    stack = []
    for ch in s:
        opener = _OPENERS.get(ch)
        if opener is None:
            stack.append(ch)
        elif stack and stack[-1] == opener:
            stack.pop()
        else:
            return False
    return not stack


def zigzag_convert(s, num_rows):
    """Write s in a zigzag over num_rows rows and read it row by row.

    With more than one row, spaces count as blank cells and are left out of the result.
    """
    if num_rows < 1:
        raise ValueError("num_rows must be at least 1")
    if num_rows == 1:
        return s
    rows = [[] for _ in range(num_rows)]
    path = [*range(num_rows), *range(num_rows - 2, 0, -1)]
    for ch, row in zip(s, cycle(path)):
        if ch != " ":
            rows[row].append(ch)
    return "".join("".join(row) for row in rows)