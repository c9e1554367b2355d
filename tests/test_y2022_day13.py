import pytest

from adventsolve.y2022_day13 import PacketPair, compare, parse, parse_packet, part1, part2

EXAMPLE = """[1,1,3,1,1]
[1,1,5,1,1]

[[1],[2,3,4]]
[[1],4]

[9]
[[8,7,6]]

[[4,4],4,4]
[[4,4],4,4,4]

[7,7,7,7]
[7,7,7]

[]
[3]

[[[]]]
[[]]

[1,[2,[3,[4,[5,6,7]]]],8,9]
[1,[2,[3,[4,[5,6,0]]]],8,9]
"""


def test_parse():
    pairs = parse("[1,[1,3],4,[6],[1,[2]]]\n[[]]\n")
    assert pairs == [PacketPair(left=[1, [1, 3], 4, [6], [1, [2]]], right=[[]])]


def test_part1():
    assert part1(parse(EXAMPLE)) == 13


def test_part2():
    assert part2(parse(EXAMPLE)) == 140


def test_compare_orders_integers():
    assert compare([1, 1, 3, 1, 1], [1, 1, 5, 1, 1]) < 0
    assert compare([9], [[8, 7, 6]]) > 0


def test_compare_mixed_types_wrap_integer():
    assert compare([[1], [2, 3, 4]], [[1], 4]) < 0


def test_compare_equal_packets():
    assert compare([[4, 4], 4], [[4, 4], 4]) == 0


def test_in_right_order_rejects_equal_packets():
    with pytest.raises(ValueError):
        PacketPair([1, 2], [1, 2]).in_right_order()


def test_in_right_order_by_length():
    assert PacketPair([], [3]).in_right_order() is True
    assert PacketPair([7, 7, 7, 7], [7, 7, 7]).in_right_order() is False


@pytest.mark.parametrize("text", ["[1,", "3", '["a"]', "[true]"])
def test_parse_packet_rejects_invalid(text):
    with pytest.raises(ValueError):
        parse_packet(text)