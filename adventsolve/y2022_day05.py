"""Supply stacks: rearrange crates with a giant cargo crane."""

from collections.abc import Sequence
from dataclasses import dataclass, field


@dataclass(frozen=True)
class ProcedureStep:
    """Move ``amount`` crates from stack ``source`` to stack ``target`` (1-based)."""

    amount: int
    source: int
    target: int


@dataclass
class CargoBay:
    """Crate stacks, each listed bottom to top."""

    stacks: list[list[str]] = field(default_factory=list)

    def copy(self) -> "CargoBay":
        return CargoBay([list(stack) for stack in self.stacks])

    def apply_step(self, step: ProcedureStep) -> None:
        """Move crates one at a time, reversing their order."""
        source = self.stacks[step.source - 1]
        target = self.stacks[step.target - 1]
        for _ in range(step.amount):
            if source:
                target.append(source.pop())

    def apply_step_directly(self, step: ProcedureStep) -> None:
        """Move crates all at once, keeping their order."""
        source = self.stacks[step.source - 1]
        target = self.stacks[step.target - 1]
        split = len(source) - min(step.amount, len(source))
        moved = source[split:]
        del source[split:]
        target.extend(moved)

    def top_crates(self) -> str:
        """The crate on top of every non-empty stack."""
        return "".join(stack[-1] for stack in self.stacks if stack)


def parse_cargo_bay(lines: Sequence[str]) -> CargoBay:
    """Read the drawing of stacks whose last line numbers them."""
    count = int(lines[-1].split()[-1])
    stacks: list[list[str]] = [[] for _ in range(count)]
    for line in lines[:-1]:
        for index, start in enumerate(range(0, len(line), 4)):
            chunk = line[start:start + 4]
            if not chunk.strip():
                continue
            if index >= count:
                raise ValueError(f"crate outside of the {count} stacks: {line!r}")
            stacks[index].append(chunk[1])
    for stack in stacks:
        stack.reverse()
    return CargoBay(stacks)


def parse_procedure_step(line: str) -> ProcedureStep:
    """Read a line like ``move 1 from 2 to 1``."""
    words = line.split(" ")
    return ProcedureStep(int(words[1]), int(words[3]), int(words[5]))


def parse(text: str) -> tuple[CargoBay, list[ProcedureStep]]:
    """Return the starting cargo bay and the rearrangement procedure."""
    drawing: list[str] = []
    steps: list[ProcedureStep] = []
    second_half = False
    for line in text.removesuffix("\n").split("\n"):
        if line == "":
            second_half = True
        elif second_half:
            steps.append(parse_procedure_step(line))
        else:
            drawing.append(line)
    return parse_cargo_bay(drawing), steps


def part1(bay: CargoBay, steps: Sequence[ProcedureStep]) -> str:
    """Top crates after moving one crate at a time."""
    bay = bay.copy()
    for step in steps:
        bay.apply_step(step)
    return bay.top_crates()


def part2(bay: CargoBay, steps: Sequence[ProcedureStep]) -> str:
    """Top crates after moving several crates at once."""
    bay = bay.copy()
    for step in steps:
        bay.apply_step_directly(step)
    return bay.top_crates()