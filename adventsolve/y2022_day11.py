"""Monkey in the middle: track items thrown between monkeys."""

import heapq
import math
import operator
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field, replace
from typing import Optional

Operation = Callable[[int], int]

_OPERATORS = {"+": operator.add, "*": operator.mul}


@dataclass
class Monkey:
    """A monkey, the items it holds and how it decides where to throw them."""

    name: int
    items: list[int]
    operation: Operation = field(compare=False, repr=False)
    test: int
    if_true: int
    if_false: int
    inspected: int = 0

    def turn(self, monkeys: Sequence["Monkey"], relief: int, modulus: Optional[int]) -> None:
        """Inspect and throw every held item."""
        items, self.items = self.items, []
        for item in items:
            self.inspected += 1
            worry = self.operation(item) // relief
            if modulus:
                worry %= modulus
            target = self.if_true if worry % self.test == 0 else self.if_false
            monkeys[target].items.append(worry)


def parse_operation(text: str) -> Operation:
    """Read an operation like ``new = old * 19``."""
    words = text.removeprefix("Operation: ").split()
    if len(words) != 5 or words[:3] != ["new", "=", "old"] or words[3] not in _OPERATORS:
        raise ValueError(f"monkey operation could not be parsed: {text!r}")
    apply = _OPERATORS[words[3]]
    operand = words[4]
    if operand == "old":
        return lambda old: apply(old, old)
    try:
        value = int(operand)
    except ValueError:
        raise ValueError(f"monkey operation could not be parsed: {text!r}") from None
    return lambda old: apply(old, value)


def parse_monkey(lines: Sequence[str]) -> Monkey:
    """Read the six stripped lines describing one monkey."""
    if len(lines) < 6:
        raise ValueError("a monkey is described by six lines")
    name, starting, operation, test, if_true, if_false = (line.strip() for line in lines[:6])
    items_text = starting.removeprefix("Starting items:").strip()
    return Monkey(
        name=int(name.removeprefix("Monkey ").removesuffix(":")),
        items=[int(item) for item in items_text.split(", ")] if items_text else [],
        operation=parse_operation(operation),
        test=int(test.removeprefix("Test: divisible by ")),
        if_true=int(if_true.removeprefix("If true: throw to monkey ")),
        if_false=int(if_false.removeprefix("If false: throw to monkey ")),
    )


def parse(text: str) -> list[Monkey]:
    blocks = text.strip("\n").split("\n\n")
    return [parse_monkey(block.split("\n")) for block in blocks]


def _monkey_business(
    monkeys: Sequence[Monkey], rounds: int, relief: int, modulus: Optional[int]
) -> int:
    troop = [replace(monkey, items=list(monkey.items)) for monkey in monkeys]
    if len(troop) < 2:
        raise ValueError("monkey business needs at least two monkeys")
    for _ in range(rounds):
        for monkey in troop:
            monkey.turn(troop, relief, modulus)
    first, second = heapq.nlargest(2, (monkey.inspected for monkey in troop))
    return first * second


def part1(monkeys: Sequence[Monkey]) -> int:
    """Monkey business after 20 rounds with worry relief."""
    return _monkey_business(monkeys, 20, 3, None)


def part2(monkeys: Sequence[Monkey]) -> int:
    """Monkey business after 10000 rounds without worry relief."""
    modulus = math.prod(monkey.test for monkey in monkeys)
    return _monkey_business(monkeys, 10_000, 1, modulus)