import pytest

from adventsolve.y2022_day11 import Monkey, parse, parse_monkey, parse_operation, part1, part2

EXAMPLE = """Monkey 0:
  Starting items: 79, 98
  Operation: new = old * 19
  Test: divisible by 23
    If true: throw to monkey 2
    If false: throw to monkey 3

Monkey 1:
  Starting items: 54, 65, 75, 74
  Operation: new = old + 6
  Test: divisible by 19
    If true: throw to monkey 2
    If false: throw to monkey 0

Monkey 2:
  Starting items: 79, 60, 97
  Operation: new = old * old
  Test: divisible by 13
    If true: throw to monkey 1
    If false: throw to monkey 3

Monkey 3:
  Starting items: 74
  Operation: new = old + 3
  Test: divisible by 17
    If true: throw to monkey 0
    If false: throw to monkey 1
"""

TWO_MONKEYS = "\n\n".join(EXAMPLE.split("\n\n")[:2]) + "\n"


def test_parse():
    monkeys = parse(TWO_MONKEYS)
    assert [(m.name, m.inspected, m.items, m.test, m.if_true, m.if_false) for m in monkeys] == [
        (0, 0, [79, 98], 23, 2, 3),
        (1, 0, [54, 65, 75, 74], 19, 2, 0),
    ]
    assert monkeys[0].operation(2) == 38
    assert monkeys[1].operation(2) == 8


def test_part1():
    assert part1(parse(EXAMPLE)) == 10605


def test_part2():
    assert part2(parse(EXAMPLE)) == 2713310158


def test_parts_do_not_mutate_input():
    monkeys = parse(EXAMPLE)
    part1(monkeys)
    assert monkeys[0].items == [79, 98]
    assert monkeys[0].inspected == 0


@pytest.mark.parametrize(
    "text, value, expected",
    [
        ("new = old * old", 5, 25),
        ("new = old + old", 5, 10),
        ("new = old * 3", 5, 15),
        ("Operation: new = old + 7", 5, 12),
    ],
)
def test_parse_operation(text, value, expected):
    assert parse_operation(text)(value) == expected


@pytest.mark.parametrize("text", ["new = old - 3", "new = old * x", "garbage"])
def test_parse_operation_rejects(text):
    with pytest.raises(ValueError):
        parse_operation(text)


def test_turn_throws_items():
    monkeys = parse(EXAMPLE)
    monkeys[0].turn(monkeys, 3, None)
    assert monkeys[0].items == []
    assert monkeys[0].inspected == 2
    assert monkeys[3].items == [74, 500, 620]


def test_parse_monkey_too_short():
    with pytest.raises(ValueError):
        parse_monkey(["Monkey 0:"])


def test_single_monkey_rejected():
    monkey = Monkey(0, [1], lambda old: old, 2, 0, 0)
    with pytest.raises(ValueError):
        part1([monkey])