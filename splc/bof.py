"""Binary object files: a fixed header followed by little-endian 32-bit words."""

from __future__ import annotations

import os
import struct
from dataclasses import dataclass
from typing import BinaryIO

MAGIC = b"BO32"
BYTES_PER_WORD = 4

_WORD = struct.Struct("<i")
_HEADER = struct.Struct("<4s5i")
HEADER_SIZE = _HEADER.size

_WORD_MIN = -(1 << 31)
_WORD_MAX = (1 << 32) - 1


class BOFError(Exception):
    """Raised when a binary object file cannot be read or written."""


def _to_signed(word: int) -> int:
    if not _WORD_MIN <= word <= _WORD_MAX:
        raise BOFError(f"Value {word} does not fit in a word")
    word &= 0xFFFFFFFF
    return word - (1 << 32) if word >= 1 << 31 else word


@dataclass
class BOFHeader:
    """The header at the start of every binary object file."""

    text_start_address: int = 0
    text_length: int = 0
    data_start_address: int = 0
    data_length: int = 0
    stack_bottom_addr: int = 0
    magic: bytes = MAGIC

    def has_correct_magic(self) -> bool:
        """Does this header carry the expected magic number?"""
        return self.magic[: len(MAGIC)] == MAGIC

    def to_bytes(self) -> bytes:
        """Return the header's binary form."""
        return _HEADER.pack(
            self.magic,
            _to_signed(self.text_start_address),
            _to_signed(self.text_length),
            _to_signed(self.data_start_address),
            _to_signed(self.data_length),
            _to_signed(self.stack_bottom_addr),
        )

    @classmethod
    def from_bytes(cls, data: bytes) -> BOFHeader:
        """Build a header from its binary form."""
        if len(data) < HEADER_SIZE:
            raise BOFError(
                f"Header needs {HEADER_SIZE} bytes, got {len(data)}"
            )
        magic, tsa, tl, dsa, dl, sba = _HEADER.unpack_from(data)
        return cls(tsa, tl, dsa, dl, sba, magic)


class BOFWriter:
    """Writes a binary object file."""

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self.filename = os.fspath(path)
        try:
            self._file: BinaryIO = open(self.filename, "wb")
        except OSError as exc:
            raise BOFError(
                f"Error opening file for writing: {self.filename}"
            ) from exc

    def write_header(self, header: BOFHeader) -> None:
        """Write the file header."""
        self.write_bytes(header.to_bytes())

    def write_word(self, word: int) -> None:
        """Write one word."""
        self.write_bytes(_WORD.pack(_to_signed(word)))

    def write_bytes(self, data: bytes) -> None:
        """Write raw bytes."""
        try:
            self._file.write(data)
        except (OSError, ValueError) as exc:
            raise BOFError(
                f"Cannot write {len(data)} bytes to {self.filename}"
            ) from exc

    def close(self) -> None:
        """Close the file."""
        try:
            self._file.close()
        except OSError as exc:
            raise BOFError(f"Could not close {self.filename}") from exc

    def __enter__(self) -> BOFWriter:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()


class BOFReader:
    """Reads a binary object file."""

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self.filename = os.fspath(path)
        try:
            self._file: BinaryIO = open(self.filename, "rb")
        except OSError as exc:
            raise BOFError(
                f"Error opening file for reading: {self.filename}"
            ) from exc

    def read_header(self) -> BOFHeader:
        """Read and check the file header."""
        data = self.read_bytes(HEADER_SIZE)
        if len(data) != HEADER_SIZE:
            raise BOFError(f"Cannot read header from {self.filename}")
        header = BOFHeader.from_bytes(data)
        if not header.has_correct_magic():
            raise BOFError(
                f"Wrong magic number code in file '{self.filename}'!"
            )
        return header

    def read_word(self) -> int:
        """Read one word."""
        data = self.read_bytes(BYTES_PER_WORD)
        if len(data) != BYTES_PER_WORD:
            raise BOFError(
                f"Cannot read a word from {self.filename} "
                f"(got {len(data)} bytes)"
            )
        return _WORD.unpack(data)[0]

    def read_bytes(self, count: int) -> bytes:
        """Read up to ``count`` bytes."""
        return self._file.read(count)

    def at_eof(self) -> bool:
        """Is there nothing left to read?"""
        return self._file.tell() >= self.file_bytes()

    def file_bytes(self) -> int:
        """Return the size of the file in bytes."""
        try:
            return os.stat(self.filename).st_size
        except OSError as exc:
            raise BOFError(
                f"Cannot stat {self.filename} to get its size!"
            ) from exc

    def close(self) -> None:
        """Close the file."""
        self._file.close()

    def __enter__(self) -> BOFReader:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()