"""Source file locations, used to point error messages at the program text."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class FileLocation:
    """A position in a source file: the file's name and a line number."""

    filename: str
    line: int

    def copy(self) -> FileLocation:
        """Return a fresh location equal to this one."""
        return FileLocation(self.filename, self.line)

    def __str__(self) -> str:
        return f"{self.filename}:{self.line}"