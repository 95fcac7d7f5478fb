# tomasulo

A cycle-by-cycle simulator of Tomasulo's algorithm for out-of-order
execution. It runs programs written for a small machine with eight
registers (`R0`–`R7`, with `R0` always zero), 65,536 words of memory, and
eight reservation stations (`RS0`–`RS7`). Memory starts with the value 42 at
address 10 and 99 at address 12. Every other word starts at zero.

## Instruction set

| Instruction           | Meaning                               | Latency |
|-----------------------|---------------------------------------|---------|
| `ADD rd, rs1, rs2`    | `rd = rs1 + rs2`                      | 2       |
| `SUB rd, rs1, rs2`    | `rd = rs1 - rs2`                      | 2       |
| `MUL rd, rs1, rs2`    | `rd = rs1 * rs2`                      | 10      |
| `NOR rd, rs1, rs2`    | `rd = ~(rs1 \| rs2)`                  | 1       |
| `LOAD rd, imm(rs1)`   | `rd = MEM[rs1 + imm]`                 | 6       |
| `STORE rs2, imm(rs1)` | `MEM[rs1 + imm] = rs2`                | 6       |
| `BEQ rs1, rs2, imm`   | if equal, skip the next `imm` instrs  | 1       |
| `CALL imm`            | `R1 = address of the next instr`      | 1       |
| `RET`                 | reads `R1`                            | 1       |

Any other mnemonic, and a blank line, becomes a `NOP`. Branches are
predicted not taken. Issue stalls while a `BEQ` is unresolved, and the
program counter is set when the branch writes back. `CALL` and `RET` do
not redirect the program counter.

## Installation

```
pip install .
```

## Command line

```
tomasulo [directory]
```

This writes the built-in demonstration program to `tc6.txt` in
`directory`, which defaults to the current directory. It stores 5 at
address 100 and runs the program. The program has two `BEQ` instructions,
one taken and one not taken. The command prints every write-back as it
happens. It then prints the per-instruction timing (issue cycle, execution
window, write-back cycle), the total cycle count, the IPC and the branch
misprediction rate. Last come the final register file and the memory
words at addresses 10, 20, 50, 60, 100, 104, 108 and 200.

## Library use

```python
from tomasulo.simulator import TomasuloSimulator

sim = TomasuloSimulator()
sim.load_lines([
    "LOAD R1, 10(R0)",
    "ADD R2, R1, R1",
    "STORE R2, 20(R0)",
])
sim.simulate()
assert sim.registers.read(2) == 84
assert sim.memory.read(20) == 84
print(sim.format_stats())
```

- `load_lines(lines)` and `load_program(path)` append the parsed
  instructions to the program and reset the program counter to 0.
  `load_program` reads a text file with one instruction per line.
- `simulate()` runs write-back, execute and issue once per cycle. It stops
  when every issued instruction has written back, and prints each
  write-back and then the statistics. If 1000 cycles pass first, it prints
  an error and the statistics and raises `RuntimeError`.
- `format_stats()` returns the timing table and summary figures as text.
  `print_stats()` writes that text, after a blank line, to standard output
  and returns what it wrote.
- The simulator exposes `registers`, `memory`, `stations`, `program`,
  `cycle`, `completed`, `branches` and `mispredictions`. Each entry in
  `program` records its `issue`, `start_exec`, `end_exec` and `write` cycles.
  The value -1 means that stage has not happened.

`tomasulo.cli.run_test(path, memory_init)` loads a program file and calls
`memory_init(sim)` to prepare memory. It then simulates, prints the final
register file and memory snapshot, and returns the simulator.

The building blocks can be used on their own:

```python
from tomasulo.instruction import parse_instruction, parse_program, OpCode
from tomasulo.memory import Memory
from tomasulo.register_file import RegisterFile
from tomasulo.simulator import execute_latency

inst = parse_instruction("LOAD R1, 100(R0)")
assert inst.opcode is OpCode.LOAD and inst.rd == 1 and inst.imm == 100

mem = Memory()
mem.load_data(100, 5)
assert mem.read(100) == 5

regs = RegisterFile()
regs.write(0, 7)        # R0 is hard-wired to zero
assert regs.read(0) == 0

assert execute_latency(OpCode.MUL) == 10
```

Errors are raised as follows:

- Malformed operands raise `ValueError`.
- A memory address outside 0–65535 raises `IndexError`.
- A register number outside 0–7 raises `IndexError`.

`ReservationStation.operands_ready()` tells whether a station still waits
on another station's result.

## Running the tests

```
pip install .[test]
pytest
```