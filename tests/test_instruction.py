import pytest

from tomasulo.instruction import Instruction, OpCode, parse_instruction, parse_program


def test_load_fields():
    inst = parse_instruction("LOAD R1, 100(R0)")
    assert inst.opcode is OpCode.LOAD
    assert (inst.rd, inst.rs1, inst.rs2, inst.imm) == (1, 0, -1, 100)


def test_store_fields():
    inst = parse_instruction("STORE R3, 108(R0)")
    assert inst.opcode is OpCode.STORE
    assert (inst.rd, inst.rs1, inst.rs2, inst.imm) == (-1, 0, 3, 108)


def test_load_negative_offset_and_base_register():
    inst = parse_instruction("LOAD R5, -4(R2)")
    assert (inst.rd, inst.rs1, inst.imm) == (5, 2, -4)


def test_beq_fields():
    inst = parse_instruction("BEQ R1, R2, 2")
    assert inst.opcode is OpCode.BEQ
    assert (inst.rd, inst.rs1, inst.rs2, inst.imm) == (-1, 1, 2, 2)


def test_beq_negative_offset():
    assert parse_instruction("BEQ R4, R0, -3").imm == -3


def test_call_sets_immediate_only():
    inst = parse_instruction("CALL 7")
    assert inst.opcode is OpCode.CALL
    assert (inst.rd, inst.rs1, inst.rs2, inst.imm) == (-1, -1, -1, 7)


def test_ret_reads_r1():
    inst = parse_instruction("RET")
    assert inst.opcode is OpCode.RET
    assert inst.rs1 == 1
    assert inst.rd == -1


@pytest.mark.parametrize(
    "mnemonic, opcode",
    [("ADD", OpCode.ADD), ("SUB", OpCode.SUB), ("MUL", OpCode.MUL), ("NOR", OpCode.NOR)],
)
def test_three_register_ops(mnemonic, opcode):
    inst = parse_instruction(f"{mnemonic} R7, R1, R2")
    assert inst.opcode is opcode
    assert (inst.rd, inst.rs1, inst.rs2, inst.imm) == (7, 1, 2, 0)


@pytest.mark.parametrize("line", ["FOO R1, R2", "", "add R1, R2, R3", "   "])
def test_unknown_or_empty_is_nop(line):
    assert parse_instruction(line) == Instruction(OpCode.NOP)


def test_timing_fields_start_unset():
    inst = parse_instruction("ADD R1, R2, R3")
    assert (inst.issue, inst.start_exec, inst.end_exec, inst.write) == (-1, -1, -1, -1)


@pytest.mark.parametrize(
    "line",
    [
        "ADD R1, R2",
        "LOAD R1, 100",
        "LOAD R1",
        "STORE R1, x(R0)",
        "BEQ R1, R2, x",
        "BEQ R1, R2",
        "CALL",
        "SUB Rx, R1, R2",
    ],
)
def test_malformed_lines_raise(line):
    with pytest.raises(ValueError):
        parse_instruction(line)


def test_parse_program_preserves_order():
    lines = ["LOAD R1, 100(R0)\n", "ADD R2, R1, R0\n", "\n", "RET\n"]
    program = parse_program(lines)
    assert [inst.opcode for inst in program] == [OpCode.LOAD, OpCode.ADD, OpCode.NOP, OpCode.RET]
    assert program == [parse_instruction(line) for line in lines]


def test_parse_program_empty():
    assert parse_program([]) == []