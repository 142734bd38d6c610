"""Programming the springdroid to jump over holes in the hull."""

from __future__ import annotations

from typing import Sequence

from aoc2019.intcode.core import ExpectedOutput, LogicError
from aoc2019.intcode.cpu import CPU
from aoc2019.intcode.devices import Bus, CharQueue, IntQueue
from aoc2019.runner import load_input, run_parts

# Jump if the ground four ahead is solid and any of the next three is a hole.
WALK_SCRIPT = "NOT A J\nNOT B T\nOR T J\nNOT C T\nOR T J\nAND D J\nWALK\n"

# As before, but only when the landing spot also allows the next jump (H);
# always jump when the very next space is a hole.
RUN_SCRIPT = "NOT B J\nNOT C T\nOR T J\nAND D J\nAND H J\nNOT A T\nOR T J\nRUN\n"


def run_springscript(code: str, script: str) -> int:
    """Feed the script to the droid program and return the hull damage it reports.

    When the droid falls, the program's text output is raised as a LogicError.
    """
    output = IntQueue()
    CPU.parse(code).wrap(Bus(CharQueue(script), output)).run()
    if not output:
        raise ExpectedOutput()
    last = output[-1]
    if last <= 255:
        raise LogicError("".join(chr(value & 0xFF) for value in output))
    return last


def part1(text: str) -> int:
    return run_springscript(text, WALK_SCRIPT)


def part2(text: str) -> int:
    try:
        return run_springscript(text, RUN_SCRIPT)
    except LogicError as error:
        print(error)
        raise


def main(argv: Sequence[str] | None = None) -> None:
    run_parts(load_input("day21.txt", argv), [("Part 1", part1), ("Part 2", part2)])


if __name__ == "__main__":
    main()