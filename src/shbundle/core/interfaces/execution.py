from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Protocol, runtime_checkable


@dataclass(frozen=True)
class CommandResult:
    """Captured outcome of one shell command."""
    command: str
    returncode: int
    stdout: bytes
    stderr: bytes


@runtime_checkable
class CommandRunnerProtocol(Protocol):
    """Runs a shell command to completion and captures its output."""

    def run(self, command: str, *, cwd: Optional[Path] = None) -> CommandResult:
        ...
