"""Solutions to two duel and slicing tasks."""


def has_liar(reports):
    """Tell whether the win reports of a line of duels cannot all be true.

    Player i duels players i-1 and i+1; reports[i] says whether player i won at least once.
    """
    reports = list(reports)
    if len(reports) < 2:
        raise ValueError("at least two players are needed")
    states = {first for first in (0, 1) if (first == 1) == bool(reports[0])}
    for report in reports[1:-1]:
        states = {
            current
            for previous in states
            for current in (0, 1)
            if (previous == 0 or current == 1) == bool(report)
        }
    consistent = any((last == 0) == bool(reports[-1]) for last in states)
    return not consistent


def _halvings(k):
    """Number of halving cuts needed to bring a side of length k down to 1."""
    return (k - 1).bit_length() if k > 1 else 0


def first_cut_cost(d, p):
    """Cuts needed when the first cut keeps the smaller part of a side of length d around position p."""
    if d <= 1:
        return 0
    return 1 + _halvings(min(p, d - p + 1))


def worst_cut_cost(d):
    """Cuts needed to reduce a side of length d to 1 by halving."""
    if d <= 1:
        return 0
    return 1 + _halvings((d + 1) // 2)


def slice_to_survive(n, m, a, b):
    """Return the number of turns for an n x m grid with a unit at (a, b)."""
    along_rows = first_cut_cost(n, a) + worst_cut_cost(m)
    along_columns = first_cut_cost(m, b) + worst_cut_cost(n)
    return min(along_rows, along_columns)