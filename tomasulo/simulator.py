"""Cycle-level Tomasulo out-of-order execution simulator."""

from __future__ import annotations

import math
import sys
from os import PathLike
from typing import Iterable, Union

from .instruction import Instruction, OpCode, parse_program
from .memory import Memory
from .register_file import NUM_REGISTERS, RegisterFile
from .reservation_station import ReservationStation

NUM_STATIONS = 8
MAX_CYCLES = 1000

_LATENCIES = {
    OpCode.ADD: 2,
    OpCode.SUB: 2,
    OpCode.MUL: 10,
    OpCode.NOR: 1,
    OpCode.LOAD: 6,
    OpCode.STORE: 6,
    OpCode.BEQ: 1,
    OpCode.CALL: 1,
    OpCode.RET: 1,
}

_NO_REGISTER_RESULT = frozenset({OpCode.STORE, OpCode.BEQ, OpCode.RET})


def execute_latency(op: OpCode) -> int:
    """Number of execute cycles an operation needs."""
    return _LATENCIES.get(op, 1)


def _writes_register(inst: Instruction) -> bool:
    return inst.opcode not in _NO_REGISTER_RESULT and inst.rd >= 0


class TomasuloSimulator:
    """Issues, executes and writes back a program through reservation stations.

    Branches are predicted not taken; issue stalls until a pending BEQ
    resolves at write-back.
    """

    def __init__(self) -> None:
        self.cycle = 0
        self.completed = 0
        self.branches = 0
        self.mispredictions = 0
        self.program_counter = 0
        self.branch_pending = False
        self.pending_beq_index = -1
        self.program: list[Instruction] = []
        self.stations = [ReservationStation(f"RS{i}") for i in range(NUM_STATIONS)]
        self.registers = RegisterFile()
        self.memory = Memory()

    def load_program(self, path: Union[str, PathLike]) -> None:
        """Append the instructions in the file at ``path`` to the program."""
        with open(path, encoding="utf-8") as handle:
            self.load_lines(handle)

    def load_lines(self, lines: Iterable[str]) -> None:
        """Append instructions given as assembly lines and reset the PC."""
        self.program_counter = 0
        self.program.extend(parse_program(lines))

    def simulate(self) -> None:
        """Run until every issued instruction has written back.

        Raises RuntimeError if the cycle limit is reached first.
        """
        for _ in range(MAX_CYCLES):
            self._write_back()
            self._execute()
            self._issue()
            self.cycle += 1
            issued = sum(1 for inst in self.program if inst.issue != -1)
            if self.completed >= issued:
                stuck = False
                break
        else:
            stuck = True

        if stuck:
            print("ERROR: Simulation stuck!")
            print(f"Instructions completed: {self.completed} / {len(self.program)}")
        self.print_stats()
        if stuck:
            raise RuntimeError(
                f"simulation stuck after {MAX_CYCLES} cycles: "
                f"{self.completed} / {len(self.program)} instructions completed"
            )

    def _write_back(self) -> None:
        for station in self.stations:
            if not station.busy or station.remaining_cycles != 0:
                continue
            inst = self.program[station.instr_index]
            result = self._execute_op(
                inst.opcode, station.vj, station.vk, inst.imm, station.instr_index
            )

            if _writes_register(inst):
                if self.registers.status[inst.rd] == station.name:
                    self.registers.status[inst.rd] = ""
                self.registers.write(inst.rd, result)
                self._broadcast(station.name, result)

            if inst.opcode is OpCode.BEQ:
                self._resolve_branch(station, inst)

            inst.write = self.cycle
            self.completed += 1
            station.busy = False
            print(f"WRITEBACK: Instr {station.instr_index} result = {result}")

    def _broadcast(self, tag: str, value: int) -> None:
        for other in self.stations:
            if not other.busy:
                continue
            if other.qj == tag:
                other.qj = ""
                other.vj = value
            if other.qk == tag:
                other.qk = ""
                other.vk = value

    def _resolve_branch(self, station: ReservationStation, inst: Instruction) -> None:
        self.branches += 1
        taken = station.vj == station.vk
        predicted_taken = False
        if taken != predicted_taken:
            self.mispredictions += 1
        self.program_counter = station.instr_index + 1 + (inst.imm if taken else 0)
        self.branch_pending = False
        self.pending_beq_index = -1

    def _execute(self) -> None:
        for station in self.stations:
            if not station.busy or station.remaining_cycles <= 0:
                continue
            if not station.operands_ready():
                continue
            inst = self.program[station.instr_index]
            if inst.start_exec == -1:
                inst.start_exec = self.cycle
            station.remaining_cycles -= 1
            if station.remaining_cycles == 0:
                inst.end_exec = self.cycle

    def _read_operand(self, reg: int) -> tuple[int, str]:
        tag = self.registers.status[reg]
        return (0 if tag else self.registers.read(reg)), tag

    def _issue(self) -> None:
        if not 0 <= self.program_counter < len(self.program):
            return
        if self.branch_pending:
            return
        inst = self.program[self.program_counter]
        if inst.issue != -1:
            return

        station = next((s for s in self.stations if not s.busy), None)
        if station is None:
            return

        station.busy = True
        station.op = inst.opcode
        station.dest = inst.rd
        station.instr_index = self.program_counter

        if inst.opcode is OpCode.STORE or inst.rs1 >= 0:
            station.vj, station.qj = self._read_operand(inst.rs1)
        if inst.opcode is OpCode.STORE or inst.rs2 >= 0:
            station.vk, station.qk = self._read_operand(inst.rs2)

        station.remaining_cycles = execute_latency(inst.opcode)
        inst.issue = self.cycle

        if _writes_register(inst):
            self.registers.status[inst.rd] = station.name

        if inst.opcode is OpCode.BEQ:
            self.branch_pending = True
            self.pending_beq_index = self.program_counter

        self.program_counter += 1

    def _execute_op(self, op: OpCode, a: int, b: int, imm: int, index: int) -> int:
        match op:
            case OpCode.ADD:
                return a + b
            case OpCode.SUB:
                return a - b
            case OpCode.MUL:
                return a * b
            case OpCode.NOR:
                return ~(a | b)
            case OpCode.LOAD:
                return self.memory.read(a + imm)
            case OpCode.STORE:
                self.memory.write(a + imm, b)
                return b
            case OpCode.CALL:
                self.registers.write(1, index + 1)
                return imm
            case OpCode.RET:
                return self.registers.read(1)
            case _:
                return 0

    def _ipc(self) -> float:
        if self.cycle == 0:
            return math.inf if self.program else math.nan
        return len(self.program) / self.cycle

    def _misprediction_percent(self) -> float:
        if not self.branches:
            return 0.0
        return 100.0 * self.mispredictions / self.branches

    def format_stats(self) -> str:
        """Per-instruction timing, total cycles, IPC and misprediction rate."""
        lines = ["Instruction Stats:"]
        lines.extend(
            f"Instr {i}: Issue={inst.issue}, Exec={inst.start_exec}-{inst.end_exec}, "
            f"WB={inst.write}"
            for i, inst in enumerate(self.program)
        )
        lines.append(f"Total Cycles: {self.cycle}")
        lines.append(f"IPC: {self._ipc():.2f}")
        lines.append(f"Branch Misprediction %: {self._misprediction_percent():.2f}%")
        return "\n".join(lines) + "\n"

    def print_stats(self) -> str:
        """Write the statistics report, preceded by a blank line, to stdout.

        Returns the text that was written.
        """
        report = "\n" + self.format_stats()
        sys.stdout.write(report)
        sys.stdout.flush()
        return report


__all__ = ["NUM_REGISTERS", "TomasuloSimulator", "execute_latency"]