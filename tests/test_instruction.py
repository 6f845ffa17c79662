import io

import pytest

from splc.bof import BOFReader, BOFWriter
from splc.instruction import (
    CompInstr,
    Func0,
    Func1,
    ImmedInstr,
    InstrType,
    InstructionError,
    JumpInstr,
    OpCode,
    OtherCompInstr,
    SyscallCode,
    SyscallInstr,
    UImmedInstr,
    assembly_form,
    decode,
    instruction_type,
    mnemonic,
    print_instruction,
    print_table_heading,
    read_instruction,
    syscall_mnemonic,
    write_instruction,
)

SAMPLES = [
    CompInstr(Func0.NOP),
    CompInstr(Func0.ADD, 1, -3, 4, 255),
    CompInstr(Func0.SWR, 7, -256, 2, 0),
    OtherCompInstr(Func1.LIT, 3, 5, -2048),
    OtherCompInstr(Func1.JREL, 0, 0, -5),
    OtherCompInstr(Func1.SLL, 2, 1, 31),
    SyscallInstr(SyscallCode.EXIT, 0, 0),
    SyscallInstr(SyscallCode.STOP_TRACING),
    SyscallInstr(SyscallCode.PRINT_INT, 1, -1),
    ImmedInstr(OpCode.ADDI, 1, 0, -32768),
    ImmedInstr(OpCode.BNE, 1, -1, 7),
    UImmedInstr(OpCode.NORI, 1, 0, 0xFFFF),
    JumpInstr(OpCode.CALL, (1 << 28) - 1),
    JumpInstr(OpCode.RTN),
]


@pytest.mark.parametrize("instr", SAMPLES)
def test_encode_decode_round_trip(instr):
    assert decode(instr.encode()) == instr


@pytest.mark.parametrize("instr", SAMPLES)
def test_encoding_fits_in_a_word_and_signed_decodes_same(instr):
    word = instr.encode()
    assert 0 <= word < 1 << 32
    signed = word - (1 << 32) if word >= 1 << 31 else word
    assert decode(signed) == instr


def test_nop_is_all_zero_bits():
    assert CompInstr(Func0.NOP).encode() == 0


def test_opcode_sits_in_low_four_bits():
    word = JumpInstr(OpCode.CALL, 5).encode()
    assert word & 0xF == OpCode.CALL
    assert word >> 4 == 5


def test_syscall_function_field_is_high_bits():
    word = SyscallInstr(SyscallCode.EXIT).encode()
    assert word >> 28 == Func1.SYS
    assert word & 0xF == OpCode.OTHC


def test_out_of_range_field_raises():
    with pytest.raises(InstructionError):
        CompInstr(Func0.ADD, 8, 0, 0, 0).encode()
    with pytest.raises(InstructionError):
        ImmedInstr(OpCode.ADDI, 0, 0, 1 << 15).encode()
    with pytest.raises(InstructionError):
        UImmedInstr(OpCode.ANDI, 0, 0, -1).encode()


def test_bad_constructions_raise():
    with pytest.raises(InstructionError):
        CompInstr(14)
    with pytest.raises(InstructionError):
        OtherCompInstr(Func1.SYS)
    with pytest.raises(InstructionError):
        JumpInstr(OpCode.ADDI, 0)
    with pytest.raises(InstructionError):
        ImmedInstr(OpCode.CALL)
    with pytest.raises(InstructionError):
        SyscallInstr(99)


def test_decode_unknown_function_raises():
    # opcode 0 with function 15 is not a computational function
    with pytest.raises(InstructionError):
        decode(15 << 28)
    # opcode 1 with function 0 is not defined
    with pytest.raises(InstructionError):
        decode(OpCode.OTHC)


def test_decode_unsigned_immediate_ops():
    instr = decode(UImmedInstr(OpCode.XORI, 2, 3, 0x8000).encode())
    assert isinstance(instr, UImmedInstr)
    assert instr.uimmed == 0x8000


def test_instruction_type():
    assert instruction_type(CompInstr(Func0.ADD)) is InstrType.COMP
    assert instruction_type(OtherCompInstr(Func1.MUL)) is InstrType.OTHER_COMP
    assert instruction_type(SyscallInstr(SyscallCode.EXIT)) is InstrType.SYSCALL
    assert instruction_type(ImmedInstr(OpCode.BEQ)) is InstrType.IMMED
    assert instruction_type(UImmedInstr(OpCode.ANDI)) is InstrType.IMMED
    assert instruction_type(JumpInstr(OpCode.JMPA)) is InstrType.JUMP
    assert instruction_type("nope") is InstrType.ERROR


def test_mnemonics():
    assert mnemonic(CompInstr(Func0.NOP)) == "NOP"
    assert mnemonic(CompInstr(Func0.LWI)) == "LWI"
    assert mnemonic(OtherCompInstr(Func1.CFHI)) == "CFHI"
    assert mnemonic(ImmedInstr(OpCode.BGEZ)) == "BGEZ"
    assert mnemonic(UImmedInstr(OpCode.BORI)) == "BORI"
    assert mnemonic(JumpInstr(OpCode.RTN)) == "RTN"
    assert mnemonic(SyscallInstr(SyscallCode.READ_CHAR)) == "RCH"


def test_syscall_mnemonic():
    assert syscall_mnemonic(SyscallCode.EXIT) == "EXIT"
    assert syscall_mnemonic(3) == "PINT"
    assert syscall_mnemonic(2046) == "STRA"
    assert syscall_mnemonic(2047) == "NOTR"
    with pytest.raises(InstructionError):
        syscall_mnemonic(99)


def test_assembly_form_without_operands():
    assert assembly_form(0, CompInstr(Func0.NOP)) == "NOP "
    assert assembly_form(0, JumpInstr(OpCode.RTN)) == "RTN "
    assert assembly_form(0, SyscallInstr(SyscallCode.START_TRACING)) == "STRA "


def test_assembly_form_operands_shown():
    form = assembly_form(0, CompInstr(Func0.ADD, 1, -3, 4, 2))
    assert form.startswith("ADD ")
    assert ", -3, " in form
    assert form.endswith(", 2")
    assert assembly_form(0, SyscallInstr(SyscallCode.EXIT, 0, 0)) == "EXIT 0"
    assert assembly_form(0, UImmedInstr(OpCode.NORI, 1, 0, 0xFFFF)).endswith(
        ", 0, 0xffff"
    )


def test_assembly_form_branch_targets():
    form = assembly_form(10, ImmedInstr(OpCode.BEQ, 1, -1, 3))
    assert form.startswith("BEQ ")
    assert form.endswith("\t# target is word address 13")
    jrel = assembly_form(10, OtherCompInstr(Func1.JREL, 0, 0, -4))
    assert jrel == "JREL -4\t# target is word address 6"
    jump = assembly_form(0, JumpInstr(OpCode.JMPA, 42))
    assert jump == "JMPA 42\t# target is word address 42"


def test_print_table_heading():
    out = io.StringIO()
    print_table_heading(out)
    assert out.getvalue() == "Address Instruction\n"


def test_print_instruction():
    out = io.StringIO()
    instr = CompInstr(Func0.NOP)
    print_instruction(out, 12, instr)
    line = out.getvalue()
    assert line.endswith("\n")
    prefix, rest = line.split(": ", 1)
    assert len(prefix) == 8
    assert prefix.strip() == "12"
    assert rest == assembly_form(12, instr) + "\n"


def test_write_and_read_instructions(tmp_path):
    path = tmp_path / "prog.bof"
    with BOFWriter(path) as writer:
        for instr in SAMPLES:
            write_instruction(writer, instr)
    with BOFReader(path) as reader:
        got = [read_instruction(reader) for _ in SAMPLES]
        assert reader.at_eof()
    assert got == SAMPLES


def test_read_instruction_past_end_raises(tmp_path):
    path = tmp_path / "empty.bof"
    path.write_bytes(b"\x00\x00")
    with BOFReader(path) as reader:
        with pytest.raises(InstructionError):
            read_instruction(reader)


def test_write_non_instruction_raises(tmp_path):
    with BOFWriter(tmp_path / "x.bof") as writer:
        with pytest.raises(InstructionError):
            write_instruction(writer, "not an instruction")