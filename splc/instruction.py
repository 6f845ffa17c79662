"""Binary machine instructions: their fields, 32-bit encoding and assembly form."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import ClassVar, Protocol, TextIO, Union

from .bof import BOFError

_WORD_MASK = 0xFFFFFFFF


class InstructionError(Exception):
    """Raised for instructions that cannot be encoded, decoded or shown."""


class OpCode(IntEnum):
    """Operation codes held in the low four bits of every instruction."""

    COMP = 0
    OTHC = 1
    ADDI = 2
    ANDI = 3
    BORI = 4
    NORI = 5
    XORI = 6
    BEQ = 7
    BGEZ = 8
    BGTZ = 9
    BLEZ = 10
    BLTZ = 11
    BNE = 12
    JMPA = 13
    CALL = 14
    RTN = 15


class Func0(IntEnum):
    """Function codes of computational instructions (opcode 0)."""

    NOP = 0
    ADD = 1
    SUB = 2
    CPW = 3
    CPR = 4
    AND = 5
    BOR = 6
    NOR = 7
    XOR = 8
    LWR = 9
    SWR = 10
    SCA = 11
    LWI = 12
    NEG = 13


class Func1(IntEnum):
    """Function codes of other computational instructions (opcode 1)."""

    LIT = 1
    ARI = 2
    SRI = 3
    MUL = 4
    DIV = 5
    CFHI = 6
    CFLO = 7
    SLL = 8
    SRL = 9
    JMP = 10
    CSI = 11
    JREL = 12
    SYS = 15


class InstrType(Enum):
    """The binary instruction formats."""

    COMP = 0
    OTHER_COMP = 1
    IMMED = 2
    JUMP = 3
    SYSCALL = 4
    ERROR = 5


class SyscallCode(IntEnum):
    """Codes that select a system call."""

    EXIT = 1
    PRINT_STR = 2
    PRINT_INT = 3
    PRINT_CHAR = 4
    READ_CHAR = 5
    START_TRACING = 2046
    STOP_TRACING = 2047


_SYSCALL_MNEMONICS = {
    SyscallCode.EXIT: "EXIT",
    SyscallCode.PRINT_STR: "PSTR",
    SyscallCode.PRINT_INT: "PINT",
    SyscallCode.PRINT_CHAR: "PCH",
    SyscallCode.READ_CHAR: "RCH",
    SyscallCode.START_TRACING: "STRA",
    SyscallCode.STOP_TRACING: "NOTR",
}

_IMMED_OPS = frozenset(
    {
        OpCode.ADDI,
        OpCode.ANDI,
        OpCode.BORI,
        OpCode.NORI,
        OpCode.XORI,
        OpCode.BEQ,
        OpCode.BGEZ,
        OpCode.BGTZ,
        OpCode.BLEZ,
        OpCode.BLTZ,
        OpCode.BNE,
    }
)
_UIMMED_OPS = frozenset({OpCode.ANDI, OpCode.BORI, OpCode.NORI, OpCode.XORI})
_BRANCH_OPS = frozenset(
    {OpCode.BEQ, OpCode.BGEZ, OpCode.BGTZ, OpCode.BLEZ, OpCode.BLTZ, OpCode.BNE}
)
_JUMP_OPS = frozenset({OpCode.JMPA, OpCode.CALL, OpCode.RTN})


def _field(name: str, value: int, bits: int, signed: bool) -> int:
    """Check that ``value`` fits in ``bits`` and return its raw bit pattern."""
    if signed:
        low, high = -(1 << (bits - 1)), (1 << (bits - 1)) - 1
    else:
        low, high = 0, (1 << bits) - 1
    if not low <= value <= high:
        raise InstructionError(
            f"Field {name} value {value} does not fit in {bits} "
            f"{'signed' if signed else 'unsigned'} bits"
        )
    return value & ((1 << bits) - 1)


def _sign_extend(value: int, bits: int) -> int:
    sign = 1 << (bits - 1)
    return (value ^ sign) - sign


def _bits(word: int, shift: int, bits: int) -> int:
    return (word >> shift) & ((1 << bits) - 1)


def _reg_name(reg: int) -> str:
    return f"$r{reg}"


@dataclass(frozen=True)
class CompInstr:
    """A computational instruction: two register/offset pairs and a function."""

    op: ClassVar[OpCode] = OpCode.COMP

    func: Func0
    rt: int = 0
    ot: int = 0
    rs: int = 0
    os: int = 0

    def __post_init__(self) -> None:
        try:
            object.__setattr__(self, "func", Func0(self.func))
        except ValueError as exc:
            raise InstructionError(
                f"Unknown computational instruction function ({self.func})"
            ) from exc

    def encode(self) -> int:
        """Return the instruction as an unsigned 32-bit word."""
        return (
            self.op
            | _field("rt", self.rt, 3, False) << 4
            | _field("ot", self.ot, 9, True) << 7
            | _field("rs", self.rs, 3, False) << 16
            | _field("os", self.os, 9, True) << 19
            | self.func << 28
        )


@dataclass(frozen=True)
class OtherCompInstr:
    """An other computational instruction (opcode 1), not a system call."""

    op: ClassVar[OpCode] = OpCode.OTHC

    func: Func1
    reg: int = 0
    offset: int = 0
    arg: int = 0

    def __post_init__(self) -> None:
        try:
            func = Func1(self.func)
        except ValueError as exc:
            raise InstructionError(
                f"Unknown other computational instruction function ({self.func})"
            ) from exc
        if func is Func1.SYS:
            raise InstructionError("System calls must be SyscallInstr values")
        object.__setattr__(self, "func", func)

    def encode(self) -> int:
        """Return the instruction as an unsigned 32-bit word."""
        return (
            self.op
            | _field("reg", self.reg, 3, False) << 4
            | _field("offset", self.offset, 9, True) << 7
            | _field("arg", self.arg, 12, True) << 16
            | self.func << 28
        )


@dataclass(frozen=True)
class SyscallInstr:
    """A system call instruction (opcode 1, function 15)."""

    op: ClassVar[OpCode] = OpCode.OTHC
    func: ClassVar[Func1] = Func1.SYS

    code: SyscallCode
    reg: int = 0
    offset: int = 0

    def __post_init__(self) -> None:
        try:
            object.__setattr__(self, "code", SyscallCode(self.code))
        except ValueError as exc:
            raise InstructionError(f"Unknown system call code ({self.code})") from exc

    def encode(self) -> int:
        """Return the instruction as an unsigned 32-bit word."""
        return (
            self.op
            | _field("reg", self.reg, 3, False) << 4
            | _field("offset", self.offset, 9, True) << 7
            | _field("code", self.code, 12, False) << 16
            | self.func << 28
        )


def _check_op(op: int, allowed: frozenset, kind: str) -> OpCode:
    try:
        code = OpCode(op)
    except ValueError as exc:
        raise InstructionError(f"Unknown op code ({op})") from exc
    if code not in allowed:
        raise InstructionError(f"Op code {code.name} is not a {kind} instruction")
    return code


@dataclass(frozen=True)
class ImmedInstr:
    """An immediate format instruction with a signed 16-bit operand."""

    op: OpCode
    reg: int = 0
    offset: int = 0
    immed: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "op", _check_op(self.op, _IMMED_OPS, "immediate"))

    def encode(self) -> int:
        """Return the instruction as an unsigned 32-bit word."""
        return (
            self.op
            | _field("reg", self.reg, 3, False) << 4
            | _field("offset", self.offset, 9, True) << 7
            | _field("immed", self.immed, 16, True) << 16
        )


@dataclass(frozen=True)
class UImmedInstr:
    """An immediate format instruction with an unsigned 16-bit operand."""

    op: OpCode
    reg: int = 0
    offset: int = 0
    uimmed: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "op", _check_op(self.op, _IMMED_OPS, "immediate"))

    def encode(self) -> int:
        """Return the instruction as an unsigned 32-bit word."""
        return (
            self.op
            | _field("reg", self.reg, 3, False) << 4
            | _field("offset", self.offset, 9, True) << 7
            | _field("uimmed", self.uimmed, 16, False) << 16
        )


@dataclass(frozen=True)
class JumpInstr:
    """A jump format instruction with a 28-bit word address."""

    op: OpCode
    addr: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "op", _check_op(self.op, _JUMP_OPS, "jump"))

    def encode(self) -> int:
        """Return the instruction as an unsigned 32-bit word."""
        return self.op | _field("addr", self.addr, 28, False) << 4


Instruction = Union[
    CompInstr, OtherCompInstr, SyscallInstr, ImmedInstr, UImmedInstr, JumpInstr
]


def decode(word: int) -> Instruction:
    """Decode a 32-bit word (signed or unsigned) into an instruction."""
    word &= _WORD_MASK
    op = OpCode(_bits(word, 0, 4))
    reg = _bits(word, 4, 3)
    offset = _sign_extend(_bits(word, 7, 9), 9)
    if op is OpCode.COMP:
        return CompInstr(
            _bits(word, 28, 4),
            reg,
            offset,
            _bits(word, 16, 3),
            _sign_extend(_bits(word, 19, 9), 9),
        )
    if op is OpCode.OTHC:
        func = _bits(word, 28, 4)
        if func == Func1.SYS:
            return SyscallInstr(_bits(word, 16, 12), reg, offset)
        return OtherCompInstr(func, reg, offset, _sign_extend(_bits(word, 16, 12), 12))
    if op in _UIMMED_OPS:
        return UImmedInstr(op, reg, offset, _bits(word, 16, 16))
    if op in _IMMED_OPS:
        return ImmedInstr(op, reg, offset, _sign_extend(_bits(word, 16, 16), 16))
    return JumpInstr(op, _bits(word, 4, 28))


def instruction_type(instr: object) -> InstrType:
    """Return the binary format of ``instr``."""
    if isinstance(instr, CompInstr):
        return InstrType.COMP
    if isinstance(instr, OtherCompInstr):
        return InstrType.OTHER_COMP
    if isinstance(instr, SyscallInstr):
        return InstrType.SYSCALL
    if isinstance(instr, (ImmedInstr, UImmedInstr)):
        return InstrType.IMMED
    if isinstance(instr, JumpInstr):
        return InstrType.JUMP
    return InstrType.ERROR


def syscall_mnemonic(code: int) -> str:
    """Return the mnemonic for a system call code."""
    try:
        return _SYSCALL_MNEMONICS[SyscallCode(code)]
    except ValueError as exc:
        raise InstructionError(
            f"Unknown code ({code}) in syscall_mnemonic"
        ) from exc


def mnemonic(instr: Instruction) -> str:
    """Return the assembly language name of ``instr``."""
    if isinstance(instr, SyscallInstr):
        return syscall_mnemonic(instr.code)
    if isinstance(instr, (CompInstr, OtherCompInstr)):
        return instr.func.name
    if isinstance(instr, (ImmedInstr, UImmedInstr, JumpInstr)):
        return instr.op.name
    raise InstructionError(f"Not an instruction: {instr!r}")


def _target_comment(target: int) -> str:
    return f"# target is word address {target & _WORD_MASK}"


def _operands(addr: int, instr: Instruction) -> str:
    if isinstance(instr, CompInstr):
        f = instr.func
        if f is Func0.NOP:
            return ""
        if f is Func0.CPR:
            return f"{_reg_name(instr.rt)}, {_reg_name(instr.rs)}"
        if f is Func0.LWR:
            return f"{_reg_name(instr.rt)}, {_reg_name(instr.rs)}, {instr.os}"
        if f is Func0.SWR:
            return f"{_reg_name(instr.rt)}, {instr.ot}, {_reg_name(instr.rs)}"
        return (
            f"{_reg_name(instr.rt)}, {instr.ot}, "
            f"{_reg_name(instr.rs)}, {instr.os}"
        )
    if isinstance(instr, OtherCompInstr):
        f = instr.func
        reg = _reg_name(instr.reg)
        if f is Func1.LIT:
            return f"{reg}, {instr.offset}, {instr.arg}"
        if f in (Func1.ARI, Func1.SRI):
            return f"{reg}, {instr.arg}"
        if f in (Func1.SLL, Func1.SRL):
            return f"{reg}, {instr.offset}, {instr.arg & 0xFFFF}"
        if f is Func1.JREL:
            return f"{instr.arg}\t{_target_comment(addr + instr.arg)}"
        return f"{reg}, {instr.offset}"
    if isinstance(instr, SyscallInstr):
        if instr.code is SyscallCode.EXIT:
            return f"{instr.offset}"
        if instr.code in (SyscallCode.START_TRACING, SyscallCode.STOP_TRACING):
            return ""
        return f"{_reg_name(instr.reg)}, {instr.offset}"
    if isinstance(instr, UImmedInstr):
        return f"{_reg_name(instr.reg)}, {instr.offset}, 0x{instr.uimmed:x}"
    if isinstance(instr, ImmedInstr):
        reg = _reg_name(instr.reg)
        if instr.op in _BRANCH_OPS:
            return (
                f"{reg}, {instr.offset}, {instr.immed}\t"
                f"{_target_comment(addr + instr.immed)}"
            )
        if instr.op in _UIMMED_OPS:
            return f"{reg}, {instr.offset}, 0x{instr.immed & 0xFFFF:x}"
        return f"{reg}, {instr.offset}, {instr.immed}"
    if isinstance(instr, JumpInstr):
        if instr.op is OpCode.RTN:
            return ""
        return f"{instr.addr}\t{_target_comment(instr.addr)}"
    raise InstructionError(f"Not an instruction: {instr!r}")


def assembly_form(addr: int, instr: Instruction) -> str:
    """Return the assembly language form of ``instr``, found at ``addr``."""
    return f"{mnemonic(instr)} {_operands(addr, instr)}"


def print_table_heading(out: TextIO) -> None:
    """Print the heading of an instruction listing on ``out``."""
    out.write("Address Instruction\n")


def print_instruction(out: TextIO, addr: int, instr: Instruction) -> None:
    """Print ``addr`` and the assembly form of ``instr`` as one line on ``out``."""
    out.write(f"{addr:8d}: {assembly_form(addr, instr)}\n")


class _WordWriter(Protocol):
    def write_word(self, word: int) -> None: ...


class _WordReader(Protocol):
    filename: str

    def read_word(self) -> int: ...


def write_instruction(writer: _WordWriter, instr: Instruction) -> None:
    """Write ``instr`` as one binary word to ``writer``."""
    if instruction_type(instr) is InstrType.ERROR:
        raise InstructionError(f"Unknown instruction type for {instr!r}")
    writer.write_word(instr.encode())


def read_instruction(reader: _WordReader) -> Instruction:
    """Read one binary instruction from ``reader``."""
    try:
        word = reader.read_word()
    except BOFError as exc:
        name = getattr(reader, "filename", "input")
        raise InstructionError(f"Cannot read instruction from {name}") from exc
    return decode(word)