import io

import pytest

from contest_solutions.abc355 import main, solve_a, solve_b, solve_c, solve_d


@pytest.mark.parametrize("a,b", [(1, 2), (2, 1), (1, 3), (3, 1), (2, 3), (3, 2)])
def test_solve_a_picks_remaining_suspect(a, b):
    assert {a, b, solve_a(a, b)} == {1, 2, 3}


@pytest.mark.parametrize("x", [1, 2, 3])
def test_solve_a_same_answer_is_ambiguous(x):
    assert solve_a(x, x) == -1


def test_solve_b_samples():
    assert solve_b([3, 2, 5], [4, 1])
    assert not solve_b([3, 1, 5], [4, 2])
    assert not solve_b([1], [2])


def test_solve_b_all_a_before_b():
    assert solve_b([1, 2], [10, 20, 30])


def test_solve_b_interleaved_never_adjacent():
    assert not solve_b([1, 3, 5, 7], [2, 4, 6, 8])


def test_solve_b_order_of_input_irrelevant():
    assert solve_b([9, 8, 1], [5]) == solve_b([1, 8, 9], [5])


def test_solve_c_samples():
    assert solve_c(3, [5, 1, 8, 9, 7]) == 4
    assert solve_c(3, [4, 2, 9, 7, 5]) == -1
    assert solve_c(4, [13, 9, 6, 5, 2, 7, 16, 14, 8, 3, 10, 11]) == 9


def test_solve_c_row_completion():
    calls = [4, 5, 6]
    assert solve_c(3, calls) == len(calls)


def test_solve_c_column_completion():
    calls = [2, 1, 5, 8]
    assert solve_c(3, calls) == len(calls)


def test_solve_c_anti_diagonal():
    calls = [3, 5, 7]
    assert solve_c(3, calls) == len(calls)


def test_solve_c_no_calls():
    assert solve_c(3, []) == -1


def test_solve_d_samples():
    assert solve_d([(1, 5), (7, 8), (3, 7)]) == 2
    assert solve_d([(3, 4), (2, 5), (1, 6)]) == 3
    assert solve_d([(1, 2), (3, 4)]) == 0


def test_solve_d_touching_endpoints_intersect():
    assert solve_d([(1, 2), (2, 3)]) == solve_d([(1, 3), (1, 3)])


def test_solve_d_identical_intervals_all_pairs():
    k = 6
    assert solve_d([(5, 10)] * k) == k * (k - 1) // 2


def test_solve_d_single_interval():
    assert solve_d([(1, 100)]) == 0


def _run_main(monkeypatch, capsys, problem, text):
    monkeypatch.setattr("sys.stdin", io.StringIO(text))
    assert main([problem]) == 0
    return capsys.readouterr().out


def test_main_a(monkeypatch, capsys):
    assert _run_main(monkeypatch, capsys, "a", "1 2\n") == f"{solve_a(1, 2)}\n"


def test_main_b(monkeypatch, capsys):
    assert _run_main(monkeypatch, capsys, "b", "3 2\n3 2 5\n4 1\n") == "Yes\n"
    assert _run_main(monkeypatch, capsys, "b", "3 2\n3 1 5\n4 2\n") == "No\n"


def test_main_c(monkeypatch, capsys):
    out = _run_main(monkeypatch, capsys, "c", "3 5\n5 1 8 9 7\n")
    assert out == f"{solve_c(3, [5, 1, 8, 9, 7])}\n"


def test_main_d(monkeypatch, capsys):
    out = _run_main(monkeypatch, capsys, "d", "3\n1 5\n7 8\n3 7\n")
    assert out == f"{solve_d([(1, 5), (7, 8), (3, 7)])}\n"


def test_main_unknown_problem():
    with pytest.raises(SystemExit):
        main(["z"])


def test_main_short_input(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("3 2\n1 2\n"))
    with pytest.raises(SystemExit):
        main(["b"])