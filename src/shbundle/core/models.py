from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional


@dataclass
class Document:
    """A script to bundle and the directory its relative includes resolve against.

    `data` is the UTF-8 encoding of `text`; every offset handed around by the
    parser and the edit model refers to it.
    """
    text: str
    cwd: Path
    path: Optional[Path] = None
    data: bytes = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.data = self.text.encode('utf-8')

    @property
    def origin(self) -> str:
        """Human-readable label used in diagnostics."""
        return str(self.path) if self.path is not None else '<text>'

    def slice(self, start_byte: int, end_byte: int) -> str:
        return self.data[start_byte:end_byte].decode('utf-8')


@dataclass(frozen=True)
class Edit:
    """Replacement of the half-open byte range [start_byte, end_byte) of an original document."""
    start_byte: int
    end_byte: int
    new_content: str = ''

    def __post_init__(self) -> None:
        if self.start_byte < 0 or self.end_byte < self.start_byte:
            raise ValueError(f'invalid edit range [{self.start_byte}, {self.end_byte})')

    @property
    def span(self) -> tuple[int, int]:
        return (self.start_byte, self.end_byte)
