"""Lexical addresses: scope levels outward plus an offset in the activation record."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class LexicalAddress:
    """Where a name lives: how many scopes out, and its word offset in that AR."""

    levels_outward: int
    offset_in_ar: int

    def __str__(self) -> str:
        return f"({self.levels_outward},{self.offset_in_ar})"