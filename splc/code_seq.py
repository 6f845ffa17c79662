"""Sequences of machine instructions built up during code generation."""

from __future__ import annotations

from typing import Iterable, Iterator, TextIO

from .instruction import Instruction, assembly_form


class CodeSeq:
    """An ordered sequence of instructions that can be grown at its end."""

    def __init__(self, instrs: Iterable[Instruction] = ()) -> None:
        self._instrs: list[Instruction] = list(instrs)

    def __iter__(self) -> Iterator[Instruction]:
        return iter(self._instrs)

    def __len__(self) -> int:
        return len(self._instrs)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CodeSeq):
            return NotImplemented
        return self._instrs == other._instrs

    def __repr__(self) -> str:
        return f"CodeSeq({self._instrs!r})"

    def is_empty(self) -> bool:
        """Is the sequence empty?"""
        return not self._instrs

    def first(self) -> Instruction:
        """Return the first instruction."""
        if not self._instrs:
            raise IndexError("first of an empty code sequence")
        return self._instrs[0]

    def rest(self) -> CodeSeq:
        """Return a new sequence holding all but the first instruction."""
        if not self._instrs:
            raise IndexError("rest of an empty code sequence")
        return CodeSeq(self._instrs[1:])

    def last(self) -> Instruction:
        """Return the last instruction."""
        if not self._instrs:
            raise IndexError("last of an empty code sequence")
        return self._instrs[-1]

    def append(self, instr: Instruction) -> None:
        """Add ``instr`` to the end of the sequence."""
        if instr is None:
            raise ValueError("cannot append None to a code sequence")
        self._instrs.append(instr)

    def extend(self, other: Iterable[Instruction]) -> None:
        """Add every instruction of ``other`` to the end, in order."""
        self._instrs.extend(other)

    def debug_print(self, out: TextIO) -> None:
        """Write each instruction's assembly form on its own line to ``out``."""
        for instr in self._instrs:
            out.write(f"{assembly_form(0, instr)}\n")