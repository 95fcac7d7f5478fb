"""Instruction representation and assembly-text parsing."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterable

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")


class OpCode(Enum):
    """Operations understood by the simulator."""

    ADD = auto()
    SUB = auto()
    MUL = auto()
    NOR = auto()
    LOAD = auto()
    STORE = auto()
    BEQ = auto()
    CALL = auto()
    RET = auto()
    NOP = auto()


@dataclass
class Instruction:
    """One decoded instruction plus its pipeline timing record."""

    opcode: OpCode
    rd: int = -1
    rs1: int = -1
    rs2: int = -1
    imm: int = 0
    issue: int = -1
    start_exec: int = -1
    end_exec: int = -1
    write: int = -1


def _leading_int(text: str) -> int:
    """Parse the integer at the start of ``text``, ignoring any trailing junk."""
    match = _INT_PREFIX.match(text)
    if match is None:
        raise ValueError(f"invalid integer: {text!r}")
    return int(match.group(1))


def _register(token: str) -> int:
    """Decode a register token such as ``R3`` or ``R3,``."""
    if not token:
        raise ValueError("missing register operand")
    return _leading_int(token[1:])


def _memory_operand(token: str) -> tuple[int, int]:
    """Decode ``offset(Rn)`` into ``(offset, n)``."""
    start = token.find("(")
    end = token.find(")")
    if start < 0 or end < 0 or end < start:
        raise ValueError(f"invalid memory operand: {token!r}")
    return _leading_int(token[:start]), _leading_int(token[start + 2 : end])


def _operands(tokens: list[str], count: int, line: str) -> list[str]:
    if len(tokens) < count:
        raise ValueError(f"expected {count} operand(s) in {line.strip()!r}")
    return tokens[:count]


def parse_instruction(line: str) -> Instruction:
    """Decode one line of assembly; unknown mnemonics become NOP."""
    tokens = line.split()
    mnemonic = tokens[0] if tokens else ""
    operands = tokens[1:]
    opcode = OpCode.__members__.get(mnemonic, OpCode.NOP)
    inst = Instruction(opcode)

    if opcode is OpCode.LOAD:
        target, address = _operands(operands, 2, line)
        inst.rd = _register(target)
        inst.imm, inst.rs1 = _memory_operand(address)
    elif opcode is OpCode.STORE:
        source, address = _operands(operands, 2, line)
        inst.rs2 = _register(source)
        inst.imm, inst.rs1 = _memory_operand(address)
    elif opcode is OpCode.BEQ:
        first, second, offset = _operands(operands, 3, line)
        inst.rs1 = _register(first)
        inst.rs2 = _register(second)
        inst.imm = _leading_int(offset)
    elif opcode is OpCode.CALL:
        (label,) = _operands(operands, 1, line)
        inst.imm = _leading_int(label)
    elif opcode is OpCode.RET:
        inst.rs1 = 1
    elif opcode is not OpCode.NOP:
        dest, left, right = _operands(operands, 3, line)
        inst.rd = _register(dest)
        inst.rs1 = _register(left)
        inst.rs2 = _register(right)

    return inst


def parse_program(lines: Iterable[str]) -> list[Instruction]:
    """Decode every line, in order, into a list of instructions."""
    return [parse_instruction(line) for line in lines]