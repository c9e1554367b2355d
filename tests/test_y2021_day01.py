import pytest

from adventsolve import y2021_day01

PUZZLE_INPUT = """199
200
208
210
200
207
240
269
260
263"""

PREPARED = [199, 200, 208, 210, 200, 207, 240, 269, 260, 263]


def test_parse():
    assert y2021_day01.parse(PUZZLE_INPUT) == PREPARED


def test_parse_ignores_trailing_newline():
    assert y2021_day01.parse(PUZZLE_INPUT + "\n") == PREPARED


def test_part1():
    assert y2021_day01.part1(PREPARED) == 7


def test_part2():
    assert y2021_day01.part2(PREPARED) == 5


def test_part1_no_increase_for_constant_depths():
    assert y2021_day01.part1([5, 5, 5, 5]) == 0


def test_part2_too_few_values():
    assert y2021_day01.part2([1, 2, 3]) == 0


def test_parse_rejects_garbage():
    with pytest.raises(ValueError):
        y2021_day01.parse("12\nabc\n")