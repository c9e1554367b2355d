from adventsolve.y2022_day05 import (
    CargoBay,
    ProcedureStep,
    parse,
    parse_cargo_bay,
    parse_procedure_step,
    part1,
    part2,
)

PUZZLE_INPUT = (
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

PREPARED_BAY = CargoBay([["Z", "N"], ["M", "C", "D"], ["P"]])
PREPARED_STEPS = [
    ProcedureStep(1, 2, 1),
    ProcedureStep(3, 1, 3),
    ProcedureStep(2, 2, 1),
    ProcedureStep(1, 1, 2),
]


def test_parse():
    bay, steps = parse(PUZZLE_INPUT)
    assert bay == PREPARED_BAY
    assert steps == PREPARED_STEPS


def test_part1():
    assert part1(PREPARED_BAY, PREPARED_STEPS) == "CMZ"


def test_part2():
    assert part2(PREPARED_BAY, PREPARED_STEPS) == "MCD"


def test_parts_leave_bay_untouched():
    bay = CargoBay([["Z", "N"], ["M", "C", "D"], ["P"]])
    part1(bay, PREPARED_STEPS)
    part2(bay, PREPARED_STEPS)
    assert bay == PREPARED_BAY


def test_parse_procedure_step():
    assert parse_procedure_step("move 12 from 3 to 9") == ProcedureStep(12, 3, 9)


def test_parse_cargo_bay_trimmed_lines():
    bay = parse_cargo_bay(["[A]", "[B] [C]", " 1   2 "])
    assert bay == CargoBay([["B", "A"], ["C"]])


def test_apply_step_reverses_order():
    bay = CargoBay([["A", "B", "C"], []])
    bay.apply_step(ProcedureStep(2, 1, 2))
    assert bay == CargoBay([["A"], ["C", "B"]])


def test_apply_step_directly_keeps_order():
    bay = CargoBay([["A", "B", "C"], []])
    bay.apply_step_directly(ProcedureStep(2, 1, 2))
    assert bay == CargoBay([["A"], ["B", "C"]])


def test_moving_more_than_available():
    one_by_one = CargoBay([["A"], ["X"]])
    one_by_one.apply_step(ProcedureStep(3, 1, 2))
    at_once = CargoBay([["A"], ["X"]])
    at_once.apply_step_directly(ProcedureStep(3, 1, 2))
    assert one_by_one == at_once == CargoBay([[], ["X", "A"]])


def test_top_crates_skips_empty_stacks():
    assert CargoBay([["A"], [], ["B", "C"]]).top_crates() == "AC"