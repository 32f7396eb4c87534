import io
import random

import pytest

from problemset.box_operations import BoxTree, main, run_queries


class _NaiveBoxes:
    def __init__(self, values):
        self.values = list(values)

    def add(self, left, right, delta):
        for i in range(left, right + 1):
            self.values[i] += delta

    def divide(self, left, right, divisor):
        for i in range(left, right + 1):
            self.values[i] //= divisor

    def minimum(self, left, right):
        return min(self.values[left : right + 1])

    def total(self, left, right):
        return sum(self.values[left : right + 1])


@pytest.mark.parametrize("seed", [1, 7, 42])
def test_tree_agrees_with_plain_list(seed):
    rng = random.Random(seed)
    size = rng.randint(1, 23)
    values = [rng.randint(-60, 60) for _ in range(size)]
    tree = BoxTree(values)
    model = _NaiveBoxes(values)
    for _ in range(400):
        left = rng.randrange(size)
        right = rng.randrange(left, size)
        op = rng.randint(1, 4)
        if op == 1:
            delta = rng.randint(-30, 30)
            tree.add(left, right, delta)
            model.add(left, right, delta)
        elif op == 2:
            divisor = rng.randint(1, 5)
            tree.divide(left, right, divisor)
            model.divide(left, right, divisor)
        elif op == 3:
            assert tree.minimum(left, right) == model.minimum(left, right)
        else:
            assert tree.total(left, right) == model.total(left, right)
    assert tree.total(0, size - 1) == sum(model.values)


def test_divide_floors_negative_values():
    tree = BoxTree([-7, 7])
    tree.divide(0, 1, 2)
    assert tree.minimum(0, 0) == -7 // 2
    assert tree.total(0, 1) == -7 // 2 + 7 // 2


def test_divide_by_one_changes_nothing():
    values = [3, -4, 5]
    tree = BoxTree(values)
    tree.divide(0, 2, 1)
    assert tree.total(0, 2) == sum(values)
    assert tree.minimum(0, 2) == min(values)


def test_invalid_arguments():
    tree = BoxTree([1, 2, 3])
    with pytest.raises(ValueError):
        tree.divide(0, 2, 0)
    with pytest.raises(IndexError):
        tree.total(1, 3)
    with pytest.raises(IndexError):
        tree.minimum(2, 1)
    with pytest.raises(ValueError):
        BoxTree([])


def test_run_queries_answers_only_questions():
    values = [5, 10, 15]
    answers = run_queries(values, [(3, 0, 2), (1, 0, 0, 5), (4, 0, 2)])
    assert answers == [min(values), sum(values) + 5]


def test_run_queries_rejects_unknown_op():
    with pytest.raises(ValueError):
        run_queries([1], [(9, 0, 0)])
    with pytest.raises(ValueError):
        run_queries([1], [(1, 0, 0)])


def test_main_prints_answers(monkeypatch, capsys):
    values = [-5, -4, -3, -2, -1, 0, 1, 2, 3, 4]
    queries = [
        (1, 0, 4, 1),
        (1, 5, 9, 1),
        (2, 0, 9, 3),
        (3, 0, 9),
        (4, 0, 9),
        (3, 1, 5),
    ]
    lines = [f"{len(values)} {len(queries)}", " ".join(map(str, values))]
    lines += [" ".join(map(str, q)) for q in queries]
    monkeypatch.setattr("sys.stdin", io.StringIO("\n".join(lines) + "\n"))
    assert main([]) == 0
    printed = [int(line) for line in capsys.readouterr().out.split()]
    assert printed == run_queries(values, queries)