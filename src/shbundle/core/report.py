from __future__ import annotations

"""
Runtime report of a single bundle run.

Collected by the Bundler while it resolves the inclusion graph. It carries
no behavior of its own besides bookkeeping and JSON export.
"""

import json
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional


@dataclass
class BundleReport:
    started_at: float = field(default_factory=time.perf_counter)
    finished_at: float | None = None
    duration_s: float | None = None

    selector: Optional[str] = None

    files_inlined: List[str] = field(default_factory=list)
    duplicates_skipped: int = 0

    commands_executed: List[str] = field(default_factory=list)
    stderr_warnings: List[str] = field(default_factory=list)

    bytes_out: int = 0

    def add_file(self, path: Path) -> None:
        self.files_inlined.append(str(path))

    def add_duplicate(self) -> None:
        self.duplicates_skipped += 1

    def add_command(self, command: str, *, stderr: str = '') -> None:
        self.commands_executed.append(command)
        if stderr:
            self.stderr_warnings.append(stderr)

    def finish(self, output: str) -> None:
        self.finished_at = time.perf_counter()
        self.duration_s = self.finished_at - self.started_at
        self.bytes_out = len(output.encode('utf-8'))

    def to_json(self, *, indent: int = 2) -> str:
        return json.dumps(
            {
                "duration_s": self.duration_s,
                "selector": self.selector,
                "files_inlined": self.files_inlined,
                "duplicates_skipped": self.duplicates_skipped,
                "commands_executed": self.commands_executed,
                "stderr_warnings": self.stderr_warnings,
                "bytes_out": self.bytes_out,
            },
            indent=indent,
        )
