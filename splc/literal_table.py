"""A table of numeric literals, each placed once in the program's data section."""

from __future__ import annotations

from typing import Iterator, Optional, Protocol


class _WordWriter(Protocol):
    def write_word(self, word: int) -> None: ...


class LiteralTable:
    """Literals keyed by their source text, in order of first appearance.

    Each literal's offset is its word offset in the data section.
    """

    def __init__(self) -> None:
        self._offsets: dict[str, int] = {}
        self._values: list[int] = []

    def __len__(self) -> int:
        return len(self._values)

    def is_empty(self) -> bool:
        """Are there no literals?"""
        return not self._values

    def find_offset(self, text: str, value: int) -> Optional[int]:
        """Return the offset of the literal with this text, or None."""
        return self._offsets.get(text)

    def present(self, text: str, value: int) -> bool:
        """Is a literal with this text in the table?"""
        return self.find_offset(text, value) is not None

    def lookup(self, text: str, value: int) -> int:
        """Return the literal's offset, adding it first if it is new."""
        offset = self.find_offset(text, value)
        if offset is not None:
            return offset
        offset = len(self._values)
        self._offsets[text] = offset
        self._values.append(value)
        return offset

    def values(self, backwards: bool = False) -> Iterator[int]:
        """Yield the literal values in offset order, or in reverse."""
        return iter(reversed(self._values) if backwards else self._values)

    def output(self, writer: _WordWriter, backwards: bool = False) -> None:
        """Write every literal value as a word to ``writer``."""
        for value in self.values(backwards):
            writer.write_word(value)