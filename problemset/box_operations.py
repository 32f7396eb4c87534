"""Range add, range floor-divide, range minimum and range sum over an array of boxes."""

import argparse
import sys


class BoxTree:
    """Segment tree over integer box values; every range is inclusive on both ends."""

    def __init__(self, values):
        values = list(values)
        if not values:
            raise ValueError("at least one box is required")
        self._n = len(values)
        size = 4 * self._n
        self._sum = [0] * size
        self._min = [0] * size
        self._max = [0] * size
        self._lazy = [0] * size
        self._build(1, 0, self._n, values)

    def __len__(self):
        return self._n

    def _build(self, node, lo, hi, values):
        if hi - lo == 1:
            self._sum[node] = self._min[node] = self._max[node] = values[lo]
            return
        mid = (lo + hi) // 2
        self._build(2 * node, lo, mid, values)
        self._build(2 * node + 1, mid, hi, values)
        self._pull(node)

    def _pull(self, node):
        left, right = 2 * node, 2 * node + 1
        self._min[node] = min(self._min[left], self._min[right])
        self._max[node] = max(self._max[left], self._max[right])
        self._sum[node] = self._sum[left] + self._sum[right]

    def _apply(self, node, lo, hi, delta):
        self._lazy[node] += delta
        self._min[node] += delta
        self._max[node] += delta
        self._sum[node] += delta * (hi - lo)

    def _push(self, node, lo, hi):
        delta = self._lazy[node]
        if delta:
            mid = (lo + hi) // 2
            self._apply(2 * node, lo, mid, delta)
            self._apply(2 * node + 1, mid, hi, delta)
            self._lazy[node] = 0

    def _check(self, left, right):
        if not 0 <= left <= right < self._n:
            raise IndexError(f"range [{left}, {right}] outside 0..{self._n - 1}")

    def add(self, left, right, delta):
        """Add delta to every box in [left, right]."""
        self._check(left, right)
        self._add(1, 0, self._n, left, right + 1, delta)

    def _add(self, node, lo, hi, l, r, delta):
        if r <= lo or hi <= l:
            return
        if l <= lo and hi <= r:
            self._apply(node, lo, hi, delta)
            return
        self._push(node, lo, hi)
        mid = (lo + hi) // 2
        self._add(2 * node, lo, mid, l, r, delta)
        self._add(2 * node + 1, mid, hi, l, r, delta)
        self._pull(node)

    def divide(self, left, right, divisor):
        """Replace every box in [left, right] with the floor of its value divided by divisor."""
        if divisor < 1:
            raise ValueError("divisor must be a positive integer")
        self._check(left, right)
        if divisor == 1:
            return
        self._divide(1, 0, self._n, left, right + 1, divisor)

    def _divide(self, node, lo, hi, l, r, divisor):
        if r <= lo or hi <= l:
            return
        if l <= lo and hi <= r:
            low, high = self._min[node], self._max[node]
            change = low // divisor - low
            if change == high // divisor - high:
                self._apply(node, lo, hi, change)
                return
        self._push(node, lo, hi)
        mid = (lo + hi) // 2
        self._divide(2 * node, lo, mid, l, r, divisor)
        self._divide(2 * node + 1, mid, hi, l, r, divisor)
        self._pull(node)

    def minimum(self, left, right):
        """Return the smallest box value in [left, right]."""
        self._check(left, right)
        return self._query_min(1, 0, self._n, left, right + 1)

    def _query_min(self, node, lo, hi, l, r):
        if l <= lo and hi <= r:
            return self._min[node]
        self._push(node, lo, hi)
        mid = (lo + hi) // 2
        if r <= mid:
            return self._query_min(2 * node, lo, mid, l, r)
        if l >= mid:
            return self._query_min(2 * node + 1, mid, hi, l, r)
        return min(
            self._query_min(2 * node, lo, mid, l, r),
            self._query_min(2 * node + 1, mid, hi, l, r),
        )

    def total(self, left, right):
        """Return the sum of the box values in [left, right]."""
        self._check(left, right)
        return self._query_sum(1, 0, self._n, left, right + 1)

    def _query_sum(self, node, lo, hi, l, r):
        if r <= lo or hi <= l:
            return 0
        if l <= lo and hi <= r:
            return self._sum[node]
        self._push(node, lo, hi)
        mid = (lo + hi) // 2
        return self._query_sum(2 * node, lo, mid, l, r) + self._query_sum(
            2 * node + 1, mid, hi, l, r
        )


def run_queries(values, queries):
    """Run queries of the form (op, left, right[, x]) and return the answers of ops 3 and 4.

    Op 1 adds x, op 2 floor-divides by x, op 3 asks for the minimum and op 4 for the sum.
    """
    tree = BoxTree(values)
    answers = []
    for op, left, right, *rest in queries:
        if op in (1, 2):
            if len(rest) != 1:
                raise ValueError(f"operation {op} needs one argument")
            if op == 1:
                tree.add(left, right, rest[0])
            else:
                tree.divide(left, right, rest[0])
        elif op == 3:
            answers.append(tree.minimum(left, right))
        elif op == 4:
            answers.append(tree.total(left, right))
        else:
            raise ValueError(f"unknown operation {op}")
    return answers


def _read_input(text):
    numbers = iter(int(token) for token in text.split())
    count = next(numbers)
    query_count = next(numbers)
    values = [next(numbers) for _ in range(count)]
    queries = []
    for _ in range(query_count):
        op, left, right = next(numbers), next(numbers), next(numbers)
        if op in (1, 2):
            queries.append((op, left, right, next(numbers)))
        else:
            queries.append((op, left, right))
    return values, queries


def main(argv=None):
    """Read boxes and queries from standard input and print the answers."""
    parser = argparse.ArgumentParser(
        description="Answer range add, divide, minimum and sum queries read from stdin."
    )
    parser.parse_args(argv)
    values, queries = _read_input(sys.stdin.read())
    for answer in run_queries(values, queries):
        print(answer)
    return 0