import pytest

from adventsolve.cli import main, solve

DEPTHS = "199\n200\n208\n210\n200\n207\n240\n269\n260\n263\n"

CALORIES = "1000\n2000\n3000\n\n4000\n\n5000\n6000\n\n7000\n8000\n9000\n\n10000\n"

CRATES = (
    "    [D]    \n"
    "[N] [C]    \n"
    "[Z] [M] [P]\n"
    " 1   2   3 \n"
    "\n"
    "move 1 from 2 to 1\n"
    "move 3 from 1 to 3\n"
    "move 2 from 2 to 1\n"
    "move 1 from 1 to 2\n"
)


def test_solve_depth_increases():
    assert solve(2021, 1, 1, DEPTHS) == 7
    assert solve(2021, 1, 2, DEPTHS) == 5


def test_solve_calories():
    assert solve(2022, 1, 2, CALORIES) == 45000


def test_solve_unpacks_tuple_input():
    assert solve(2022, 5, 1, CRATES) == "CMZ"
    assert solve(2022, 5, 2, CRATES) == "MCD"


def test_solve_unknown_puzzle_raises():
    with pytest.raises(ValueError):
        solve(2022, 14, 1, "")


def test_solve_unknown_part_raises():
    with pytest.raises(ValueError):
        solve(2021, 1, 3, DEPTHS)


def test_main_reads_file_and_prints(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text(DEPTHS)
    assert main(["2021", "1", "1", str(path)]) == 0
    assert capsys.readouterr().out == "7\n"


def test_main_reports_unknown_puzzle(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text(DEPTHS)
    assert main(["2019", "1", "1", str(path)]) == 1
    assert "no solution" in capsys.readouterr().err


def test_main_reports_missing_file(tmp_path):
    assert main(["2021", "1", "1", str(tmp_path / "absent.txt")]) == 1