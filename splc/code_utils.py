"""Instruction sequences for common runtime-stack and register chores."""

from __future__ import annotations

from . import code
from .code_seq import CodeSeq

GP = 0
SP = 1
FP = 2
RA = 7

MINIMAL_STACK_ALLOC_IN_WORDS = 4
SAVED_SP_OFFSET = -1
SAVED_FP_OFFSET = -2
SAVED_STATIC_LINK_OFFSET = -3
SAVED_RA_OFFSET = -4

# Register that carries the static link into a new activation record.
_STATIC_LINK_REG = 3


def copy_regs(t: int, s: int) -> CodeSeq:
    """Return code that copies register ``s`` into register ``t``."""
    if t == SP or s == SP:
        raise ValueError("copy_regs cannot copy to or from SP")
    return CodeSeq([code.cpr(t, s)])


def load_static_link_into_reg(t: int, b: int) -> CodeSeq:
    """Return code loading the static link saved in the AR at ``b`` into ``t``."""
    return CodeSeq([code.lwr(t, b, SAVED_STATIC_LINK_OFFSET)])


def compute_fp(reg: int, levels_out: int) -> CodeSeq:
    """Return code putting the frame pointer ``levels_out`` scopes out in ``reg``."""
    if reg in (FP, RA):
        raise ValueError("compute_fp cannot target FP or RA")
    if levels_out < 0:
        raise ValueError(f"levels outward must be non-negative, not {levels_out}")
    ret = copy_regs(reg, FP)
    for _ in range(levels_out):
        ret.extend(load_static_link_into_reg(reg, reg))
    return ret


def allocate_stack_space(words: int) -> CodeSeq:
    """Return code allocating ``words`` words on the runtime stack."""
    if words < 0:
        raise ValueError(f"cannot allocate {words} words")
    return CodeSeq([code.sri(SP, words)])


def deallocate_stack_space(words: int) -> CodeSeq:
    """Return code freeing ``words`` words from the runtime stack."""
    if words < 0:
        raise ValueError(f"cannot deallocate {words} words")
    return CodeSeq([code.ari(SP, words)])


def save_registers_for_ar() -> CodeSeq:
    """Return code that saves SP, FP, the static link and RA, starting an AR."""
    ret = CodeSeq(
        [
            code.swr(SP, SAVED_SP_OFFSET, SP),
            code.swr(SP, SAVED_FP_OFFSET, FP),
            code.swr(SP, SAVED_STATIC_LINK_OFFSET, _STATIC_LINK_REG),
            code.swr(SP, SAVED_RA_OFFSET, RA),
            code.cpr(FP, SP),
        ]
    )
    ret.extend(allocate_stack_space(MINIMAL_STACK_ALLOC_IN_WORDS))
    return ret


def restore_registers_from_ar() -> CodeSeq:
    """Return code restoring RA, FP and SP from the current AR."""
    return CodeSeq(
        [
            code.lwr(RA, FP, SAVED_RA_OFFSET),
            code.lwr(_STATIC_LINK_REG, FP, SAVED_SP_OFFSET),
            code.lwr(FP, FP, SAVED_FP_OFFSET),
            code.cpr(SP, _STATIC_LINK_REG),
        ]
    )


def set_up_program() -> CodeSeq:
    """Return code that sets up the stack as if the program had been called."""
    ret = copy_regs(_STATIC_LINK_REG, FP)
    ret.extend(save_registers_for_ar())
    return ret


def tear_down_program() -> CodeSeq:
    """Return code that restores the saved registers and exits with code 0."""
    ret = restore_registers_from_ar()
    ret.append(code.exit_(0))
    return ret