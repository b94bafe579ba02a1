#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
build_fixtures – writes the script trees used by the shbundle test-suite.

Every tree is created under a caller-supplied root (usually a temporary
directory) so tests never share state on disk.
"""
from __future__ import annotations

import stat
import textwrap
from pathlib import Path

SHEBANG = "#!/bin/bash"


# ────────────────────────── helpers ──────────────────────────
def write(path: Path, body: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(textwrap.dedent(body).lstrip(), encoding="utf-8")
    return path


def chmod_x(path: Path) -> None:
    path.chmod(path.stat().st_mode | stat.S_IXUSR)


# ───────────────────── script trees ─────────────────────
def build_project(root: Path) -> Path:
    """A small project: main.sh sources two libraries, one of them twice.

    Returns the path of main.sh.
    """
    write(root / "lib" / "colors.sh", """
        #!/bin/bash
        RED='\\033[31m'
        RESET='\\033[0m'
    """)

    write(root / "lib" / "log.sh", """
        #!/bin/bash
        source ./colors.sh
        log() { printf '%s\\n' "$*"; }
    """)

    main = write(root / "main.sh", """
        #!/bin/bash
        source ./lib/log.sh
        . "lib/colors.sh"
        log "started"
    """)
    chmod_x(main)
    return main


def build_cycle(root: Path) -> Path:
    """x.sh sources y.sh which sources x.sh back. Returns x.sh."""
    write(root / "y.sh", """
        #!/bin/bash
        source ./x.sh
        echo y
    """)
    return write(root / "x.sh", """
        #!/bin/bash
        source ./y.sh
        echo x
    """)


if __name__ == "__main__":
    import sys

    target = Path(sys.argv[1] if len(sys.argv) > 1 else "test-fixtures").resolve()
    build_project(target / "project")
    build_cycle(target / "cycle")
    print(f"fixtures written to {target}")
