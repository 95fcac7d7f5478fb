"""Architectural register file with rename status."""

from __future__ import annotations

NUM_REGISTERS = 8


class RegisterFile:
    """Eight integer registers; R0 always reads as zero.

    ``status[i]`` names the reservation station that will produce register
    ``i``, or is empty when the register value is current.
    """

    def __init__(self) -> None:
        self._values = [0] * NUM_REGISTERS
        self.status: list[str] = [""] * NUM_REGISTERS

    def read(self, reg: int) -> int:
        """Return the value held in register ``reg``."""
        if not 0 <= reg < NUM_REGISTERS:
            raise IndexError(f"register read out of bounds: R{reg}")
        return self._values[reg]

    def write(self, reg: int, value: int) -> None:
        """Set register ``reg``; writes to R0 are discarded."""
        if reg == 0:
            return
        if not 0 <= reg < NUM_REGISTERS:
            raise IndexError(f"register write out of bounds: R{reg}")
        self._values[reg] = value