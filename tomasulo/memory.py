"""Word-addressed data memory."""

from __future__ import annotations

MEMORY_SIZE = 65536


class Memory:
    """A 16-bit address space of integer words, preloaded with sample data."""

    def __init__(self) -> None:
        self._cells = [0] * MEMORY_SIZE
        self._cells[10] = 42
        self._cells[12] = 99

    @staticmethod
    def _check(addr: int, action: str) -> None:
        if not 0 <= addr < MEMORY_SIZE:
            raise IndexError(f"memory {action} out of bounds at address: {addr}")

    def read(self, addr: int) -> int:
        """Return the word stored at ``addr``."""
        self._check(addr, "read")
        return self._cells[addr]

    def write(self, addr: int, value: int) -> None:
        """Store ``value`` at ``addr``."""
        self._check(addr, "write")
        self._cells[addr] = value

    def load_data(self, addr: int, value: int) -> None:
        """Preload ``value`` at ``addr`` before a run."""
        self.write(addr, value)