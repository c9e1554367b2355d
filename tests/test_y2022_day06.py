import pytest

from adventsolve import y2022_day06

PUZZLE_INPUT = "mjqjpqmgbljsphdztnvjfqwrcgsmlb\n"
PREPARED = "mjqjpqmgbljsphdztnvjfqwrcgsmlb"


def test_parse():
    assert y2022_day06.parse(PUZZLE_INPUT) == PREPARED


def test_part1():
    assert y2022_day06.part1(PREPARED) == 7


def test_part2():
    assert y2022_day06.part2(PREPARED) == 19


@pytest.mark.parametrize(
    ("signal", "packet", "message"),
    [
        ("bvwbjplbgvbhsrlpgdmjqwftvncz", 5, 23),
        ("nppdvjthqldpwncqszvftbrmjlhg", 6, 23),
        ("nznrnfrfntjfmvfwmzdfjlvtqnbhcprsg", 10, 29),
        ("zcfzfwzzqfrljwzlrfnpqdbhtmscgvjw", 11, 26),
    ],
)
def test_more_examples(signal, packet, message):
    assert y2022_day06.part1(signal) == packet
    assert y2022_day06.part2(signal) == message


def test_marker_is_distinct():
    signal = PREPARED
    end = y2022_day06.find_marker(signal, 4)
    assert len(set(signal[end - 4:end])) == 4


def test_no_marker_returns_zero():
    assert y2022_day06.find_marker("aaaaaaa", 4) == 0


def test_signal_shorter_than_marker():
    assert y2022_day06.find_marker("abc", 4) == 0