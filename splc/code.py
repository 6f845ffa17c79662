"""Constructors for single machine instructions, one per assembly mnemonic.

Each function returns a fresh instruction value with the fields that the
mnemonic uses filled in and every other field zero.
"""

from __future__ import annotations

from .instruction import (
    CompInstr,
    Func0,
    Func1,
    ImmedInstr,
    JumpInstr,
    OpCode,
    OtherCompInstr,
    SyscallCode,
    SyscallInstr,
    UImmedInstr,
)

# --- computational format instructions ---


def nop() -> CompInstr:
    """Return a NOP instruction."""
    return CompInstr(Func0.NOP)


def add(t: int, ot: int, s: int, os: int) -> CompInstr:
    """Return an ADD instruction."""
    return CompInstr(Func0.ADD, t, ot, s, os)


def sub(t: int, ot: int, s: int, os: int) -> CompInstr:
    """Return a SUB instruction."""
    return CompInstr(Func0.SUB, t, ot, s, os)


def cpw(t: int, ot: int, s: int, os: int) -> CompInstr:
    """Return a CPW instruction."""
    return CompInstr(Func0.CPW, t, ot, s, os)


def cpr(t: int, s: int) -> CompInstr:
    """Return a CPR instruction."""
    return CompInstr(Func0.CPR, t, 0, s, 0)


def and_(t: int, ot: int, s: int, os: int) -> CompInstr:
    """Return an AND instruction."""
    return CompInstr(Func0.AND, t, ot, s, os)


def bor(t: int, ot: int, s: int, os: int) -> CompInstr:
    """Return a BOR instruction."""
    return CompInstr(Func0.BOR, t, ot, s, os)


def nor(t: int, ot: int, s: int, os: int) -> CompInstr:
    """Return a NOR instruction."""
    return CompInstr(Func0.NOR, t, ot, s, os)


def xor(t: int, ot: int, s: int, os: int) -> CompInstr:
    """Return an XOR instruction."""
    return CompInstr(Func0.XOR, t, ot, s, os)


def lwr(t: int, s: int, os: int) -> CompInstr:
    """Return an LWR instruction."""
    return CompInstr(Func0.LWR, t, 0, s, os)


def swr(t: int, ot: int, s: int) -> CompInstr:
    """Return an SWR instruction."""
    return CompInstr(Func0.SWR, t, ot, s, 0)


def sca(t: int, ot: int, s: int, os: int) -> CompInstr:
    """Return an SCA instruction."""
    return CompInstr(Func0.SCA, t, ot, s, os)


def lwi(t: int, ot: int, s: int, os: int) -> CompInstr:
    """Return an LWI instruction."""
    return CompInstr(Func0.LWI, t, ot, s, os)


def neg(t: int, ot: int, s: int, os: int) -> CompInstr:
    """Return a NEG instruction."""
    return CompInstr(Func0.NEG, t, ot, s, os)


# --- other computational format instructions ---


def lit(t: int, ot: int, i: int) -> OtherCompInstr:
    """Return a LIT instruction."""
    return OtherCompInstr(Func1.LIT, t, ot, i)


def ari(r: int, i: int) -> OtherCompInstr:
    """Return an ARI instruction."""
    return OtherCompInstr(Func1.ARI, r, 0, i)


def sri(r: int, i: int) -> OtherCompInstr:
    """Return an SRI instruction."""
    return OtherCompInstr(Func1.SRI, r, 0, i)


def mul(s: int, o: int) -> OtherCompInstr:
    """Return a MUL instruction."""
    return OtherCompInstr(Func1.MUL, s, o, 0)


def div(s: int, o: int) -> OtherCompInstr:
    """Return a DIV instruction."""
    return OtherCompInstr(Func1.DIV, s, o, 0)


def cfhi(t: int, o: int) -> OtherCompInstr:
    """Return a CFHI instruction."""
    return OtherCompInstr(Func1.CFHI, t, o, 0)


def cflo(t: int, o: int) -> OtherCompInstr:
    """Return a CFLO instruction."""
    return OtherCompInstr(Func1.CFLO, t, o, 0)


def sll(t: int, o: int, h: int) -> OtherCompInstr:
    """Return an SLL instruction."""
    return OtherCompInstr(Func1.SLL, t, o, h)


def srl(t: int, o: int, h: int) -> OtherCompInstr:
    """Return a right-shift instruction.

    It is encoded with the SLL function code, as the generated object
    files have always carried it.
    """
    return OtherCompInstr(Func1.SLL, t, o, h)


def jmp(s: int, o: int) -> OtherCompInstr:
    """Return a JMP instruction."""
    return OtherCompInstr(Func1.JMP, s, o, 0)


def csi(s: int, o: int) -> OtherCompInstr:
    """Return a CSI instruction."""
    return OtherCompInstr(Func1.CSI, s, o, 0)


def jrel(o: int) -> OtherCompInstr:
    """Return a JREL instruction jumping ``o`` words relative to itself."""
    return OtherCompInstr(Func1.JREL, 0, 0, o)


# --- immediate format instructions ---


def addi(r: int, o: int, i: int) -> ImmedInstr:
    """Return an ADDI instruction (signed immediate)."""
    return ImmedInstr(OpCode.ADDI, r, o, i)


def andi(r: int, o: int, u: int) -> UImmedInstr:
    """Return an ANDI instruction (unsigned immediate)."""
    return UImmedInstr(OpCode.ANDI, r, o, u)


def bori(r: int, o: int, u: int) -> UImmedInstr:
    """Return a BORI instruction (unsigned immediate)."""
    return UImmedInstr(OpCode.BORI, r, o, u)


def nori(r: int, o: int, u: int) -> UImmedInstr:
    """Return a NORI instruction (unsigned immediate)."""
    return UImmedInstr(OpCode.NORI, r, o, u)


def xori(r: int, o: int, u: int) -> UImmedInstr:
    """Return an XORI instruction (unsigned immediate)."""
    return UImmedInstr(OpCode.XORI, r, o, u)


def beq(r: int, o: int, i: int) -> ImmedInstr:
    """Return a BEQ instruction."""
    return ImmedInstr(OpCode.BEQ, r, o, i)


def bgez(r: int, o: int, i: int) -> ImmedInstr:
    """Return a BGEZ instruction."""
    return ImmedInstr(OpCode.BGEZ, r, o, i)


def bgtz(r: int, o: int, i: int) -> ImmedInstr:
    """Return a BGTZ instruction."""
    return ImmedInstr(OpCode.BGTZ, r, o, i)


def blez(r: int, o: int, i: int) -> ImmedInstr:
    """Return a BLEZ instruction."""
    return ImmedInstr(OpCode.BLEZ, r, o, i)


def bltz(r: int, o: int, i: int) -> ImmedInstr:
    """Return a BLTZ instruction."""
    return ImmedInstr(OpCode.BLTZ, r, o, i)


def bne(r: int, o: int, i: int) -> ImmedInstr:
    """Return a BNE instruction."""
    return ImmedInstr(OpCode.BNE, r, o, i)


# --- jump format instructions ---


def jmpa(a: int) -> JumpInstr:
    """Return a JMPA instruction to word address ``a``."""
    return JumpInstr(OpCode.JMPA, a)


def call(a: int) -> JumpInstr:
    """Return a CALL instruction to word address ``a``."""
    return JumpInstr(OpCode.CALL, a)


def rtn() -> JumpInstr:
    """Return an RTN instruction."""
    return JumpInstr(OpCode.RTN, 0)


# --- system calls ---


def exit_(o: int) -> SyscallInstr:
    """Return an EXIT system call with exit code ``o``."""
    return SyscallInstr(SyscallCode.EXIT, 0, o)


def pstr(s: int, o: int) -> SyscallInstr:
    """Return a PSTR system call."""
    return SyscallInstr(SyscallCode.PRINT_STR, s, o)


def pint(s: int, o: int) -> SyscallInstr:
    """Return a PINT system call."""
    return SyscallInstr(SyscallCode.PRINT_INT, s, o)


def pch(s: int, o: int) -> SyscallInstr:
    """Return a PCH system call."""
    return SyscallInstr(SyscallCode.PRINT_CHAR, s, o)


def rch(t: int, o: int) -> SyscallInstr:
    """Return an RCH system call."""
    return SyscallInstr(SyscallCode.READ_CHAR, t, o)


def stra() -> SyscallInstr:
    """Return a STRA system call (start tracing)."""
    return SyscallInstr(SyscallCode.START_TRACING, 0, 0)


def notr() -> SyscallInstr:
    """Return a NOTR system call (stop tracing)."""
    return SyscallInstr(SyscallCode.STOP_TRACING, 0, 0)