"""Reservation station entries."""

from __future__ import annotations

from dataclasses import dataclass

from .instruction import OpCode


@dataclass
class ReservationStation:
    """One slot holding an issued instruction until it writes back.

    ``qj``/``qk`` name the stations producing the operands; an empty tag
    means the matching ``vj``/``vk`` value is already available.
    """

    name: str
    busy: bool = False
    op: OpCode | None = None
    vj: int = 0
    vk: int = 0
    qj: str = ""
    qk: str = ""
    dest: int = -1
    instr_index: int = -1
    remaining_cycles: int = 0

    def operands_ready(self) -> bool:
        """True when no operand is still waiting on another station."""
        return not self.qj and not self.qk