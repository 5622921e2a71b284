import io
import random

import pytest

from oddments.dumbsort import dumbsort, is_sorted, main, shuffle_once


@pytest.mark.parametrize(
    "values, expected",
    [([], True), ([1, 2, 2, 5], True), ([3, 1], False), ([-1, 2], False)],
)
def test_is_sorted(values, expected):
    assert is_sorted(values) is expected


def test_shuffle_keeps_values():
    values = [5, 3, 9, 1, 7]
    shuffle_once(values, random.Random(4))
    assert sorted(values) == [1, 3, 5, 7, 9]


@pytest.mark.parametrize("seed", [0, 1, 2])
def test_dumbsort_sorts(seed):
    values = [4, 0, 3, 1, 2]
    assert dumbsort(values, random.Random(seed)) == sorted(values)


def test_dumbsort_leaves_input_alone():
    values = [2, 1]
    dumbsort(values, random.Random(0))
    assert values == [2, 1]


def test_negative_rejected():
    with pytest.raises(ValueError):
        dumbsort([3, -1])


def test_main(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("3\n3 1 2\n"))
    assert main([]) == 0
    assert capsys.readouterr().out == "1 2 3 \n"


def test_main_without_input(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    assert main([]) == 1