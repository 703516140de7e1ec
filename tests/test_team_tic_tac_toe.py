import io

import pytest

from cowpuzzles.team_tic_tac_toe import main, possible_wins


@pytest.mark.parametrize(
    ("board", "want"),
    [
        (["COW", "XXO", "ABC"], (0, 2)),
        (["RRR", "RRR", "RRR"], (1, 0)),
        (["XYZ", "XYZ", "XYX"], (2, 2)),
        (["QQQ", "QPQ", "QQQ"], (1, 1)),
    ],
    ids=["sample input", "extreme", "example", "example 2"],
)
def test_possible_wins_cases(board, want):
    assert possible_wins(board) == want


def test_accepts_nested_lists():
    board = [["C", "O", "W"], ["X", "X", "O"], ["A", "B", "C"]]
    assert possible_wins(board) == (0, 2)


def test_transpose_gives_same_result():
    board = ["XYZ", "XYZ", "XYX"]
    transposed = ["".join(row[c] for row in board) for c in range(3)]
    assert possible_wins(transposed) == possible_wins(board)


@pytest.mark.parametrize("board", [["AB", "CD"], ["ABC", "DEF"], ["ABC", "DE", "FGH"]])
def test_rejects_wrong_shape(board):
    with pytest.raises(ValueError):
        possible_wins(board)


def test_main_prints_sample_answer(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("COW\nXXO\nABC\n"))
    assert main([]) == 0
    assert capsys.readouterr().out == "0\n2\n"


def test_main_rejects_short_board(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("COW\nXXO\n"))
    with pytest.raises(ValueError):
        main([])