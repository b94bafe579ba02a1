from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Set

from shbundle.core.report import BundleReport


@dataclass
class BundleContext:
    """Cross-file state of exactly one bundle run.

    `visiting` is the stack of canonical paths currently being resolved and
    detects cycles; `visited` holds the files whose body was already inlined.
    """
    root_dir: Path
    selector: Optional[str] = None
    visiting: List[Path] = field(default_factory=list)
    visited: Set[Path] = field(default_factory=set)
    report: BundleReport = field(default_factory=BundleReport)

    def set_selector(self, text: str) -> None:
        self.selector = text
        self.report.selector = text
