"""Extended polymerization: grow a polymer by pair insertion rules."""

from collections import Counter
from collections.abc import Mapping


class Polymer(Counter):
    """Counts of adjacent element pairs in a polymer."""

    @classmethod
    def from_template(cls, template: str) -> "Polymer":
        return cls(a + b for a, b in zip(template, template[1:]))

    def step(self, rules: Mapping[str, str]) -> "Polymer":
        """Apply every insertion rule once and return the new polymer."""
        result = Polymer()
        for pair, amount in self.items():
            insert = rules.get(pair)
            if insert is None:
                result[pair] = amount
            else:
                result[pair[0] + insert] += amount
                result[insert + pair[1]] += amount
        return result

    def element_counts(self) -> Counter:
        """Count elements by the second element of every pair."""
        counts: Counter = Counter()
        for pair, amount in self.items():
            counts[pair[1]] += amount
        return counts


def parse(text: str) -> tuple[Polymer, dict[str, str]]:
    """Return the polymer template and the pair insertion rules."""
    lines = text.split("\n")
    polymer = Polymer.from_template(lines[0])
    rules = {}
    for rule in lines[2:]:
        if not rule:
            continue
        pair, insert = rule.split(" -> ")
        rules[pair] = insert[0]
    return polymer, rules


def pair_insertion(text: str, steps: int) -> int:
    """Difference between the most and least common element after some steps."""
    polymer, rules = parse(text)
    for _ in range(steps):
        polymer = polymer.step(rules)
    counts = polymer.element_counts()
    if not counts:
        raise ValueError("polymer holds no elements")
    return max(counts.values()) - min(counts.values())


def part1(text: str) -> int:
    return pair_insertion(text, 10)


def part2(text: str) -> int:
    return pair_insertion(text, 40)