from __future__ import annotations

import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Mapping, Optional

from shbundle.constants import DEFAULT_SHELL


@dataclass(frozen=True)
class BundlerConfig:
    """Immutable settings of a Bundler.

    Attributes:
        root_dir: Directory included files must live under; also the base of
            the `# source <path>` labels.
        shell: Executable used to run `# build: inline` commands (`<shell> -c`).
        strict_selectors: Require every file of the graph to declare the shebang.
    """
    root_dir: Path
    shell: str = DEFAULT_SHELL
    strict_selectors: bool = False

    @classmethod
    def from_env(cls, root_dir: Path, env: Optional[Mapping[str, str]] = None) -> 'BundlerConfig':
        """Build a config for *root_dir* honoring SHBUNDLE_SHELL and SHBUNDLE_STRICT_SELECTORS."""
        env = os.environ if env is None else env
        shell = (env.get('SHBUNDLE_SHELL') or '').strip() or DEFAULT_SHELL
        strict = env.get('SHBUNDLE_STRICT_SELECTORS') == '1'
        return cls(root_dir=Path(root_dir), shell=shell, strict_selectors=strict)

    def with_overrides(self, *, shell: Optional[str] = None, strict_selectors: Optional[bool] = None) -> 'BundlerConfig':
        changes = {}
        if shell:
            changes['shell'] = shell
        if strict_selectors is not None:
            changes['strict_selectors'] = strict_selectors
        return replace(self, **changes)
