"""Command that runs the sample branch program through the simulator."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Callable, Sequence

from .register_file import NUM_REGISTERS
from .simulator import TomasuloSimulator

SNAPSHOT_ADDRESSES = (10, 20, 50, 60, 100, 104, 108, 200)

TWO_BRANCH_PROGRAM = (
    "LOAD R1, 100(R0)",
    "ADD R2, R1, R0",
    "BEQ R1, R2, 2",
    "ADD R3, R1, R1",
    "MUL R4, R1, R1",
    "SUB R5, R2, R1",
    "BEQ R5, R1, 2",
    "NOR R6, R5, R5",
    "ADD R7, R1, R2",
)


def run_test(
    path: str, memory_init: Callable[[TomasuloSimulator], None]
) -> TomasuloSimulator:
    """Load ``path``, prepare memory, simulate and print the final state."""
    sim = TomasuloSimulator()
    sim.load_program(path)
    memory_init(sim)
    print(f"\n== Running {path} ==")
    sim.simulate()

    print("\nFinal Register File:")
    for reg in range(NUM_REGISTERS):
        print(f"R{reg} = {sim.registers.read(reg)}")

    print("\nFinal Memory Snapshot:")
    for addr in SNAPSHOT_ADDRESSES:
        print(f"MEM[{addr}] = {sim.memory.read(addr)}")
    return sim


def main(argv: Sequence[str] | None = None) -> int:
    """Write the two-branch sample program and run it."""
    parser = argparse.ArgumentParser(
        prog="tomasulo",
        description="Run the two-branch sample program on the Tomasulo simulator.",
    )
    parser.add_argument(
        "directory",
        nargs="?",
        default=".",
        help="directory to write the program file into (default: current)",
    )
    args = parser.parse_args(argv)

    path = Path(args.directory) / "tc6.txt"
    path.write_text("".join(f"{line}\n" for line in TWO_BRANCH_PROGRAM), encoding="utf-8")
    run_test(str(path), lambda sim: sim.memory.load_data(100, 5))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())