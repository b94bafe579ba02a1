from __future__ import annotations

"""Error taxonomy for a bundle run.

Every failure aborts the whole run; there is no partial output. Each class
keeps the offending path or text as attributes so callers can report them
without re-running.
"""

from pathlib import Path
from typing import Optional, Sequence


class BundleError(RuntimeError):
    """Base class for all bundling failures."""


class ParseError(BundleError):
    """Raised when the bash grammar rejects a document."""

    def __init__(self, origin: str, line: int | None = None, col: int | None = None) -> None:
        self.origin = origin
        self.line = line
        self.col = col
        where = origin
        if line is not None:
            where += f':line {line}'
        if col is not None:
            where += f':col {col}'
        super().__init__(f'could not parse {where}')


class ReadError(BundleError):
    """A script or a sourced file could not be read as UTF-8 text."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f'could not read {path}: {reason}')


class SelectorConflictError(BundleError):
    """Two files of the same bundle declare different interpreter selectors."""

    def __init__(self, expected: str, found: str) -> None:
        self.expected = expected
        self.found = found
        super().__init__(f'shebangs across all files must match. Found {expected} and {found}')


class SelectorMisplacedError(BundleError):
    """The interpreter selector is not on the first line of its file."""

    def __init__(self, text: str, line: int) -> None:
        self.text = text
        self.line = line
        super().__init__(f'the shebang must be at the top of the file, found {text!r} on line {line}')


class SelectorDuplicateError(BundleError):
    """A single file declares the interpreter selector more than once."""

    def __init__(self, text: str) -> None:
        self.text = text
        super().__init__(f'only one shebang per file is allowed, found another: {text!r}')


class SelectorMissingError(BundleError):
    """No interpreter selector was declared (anywhere, or in a file under strict mode)."""

    def __init__(self, origin: Optional[str] = None) -> None:
        self.origin = origin
        if origin:
            super().__init__(f'a shebang is required in {origin}')
        else:
            super().__init__('shebang is missing')


class CircularIncludeError(BundleError):
    """A file sources itself, directly or through other files."""

    def __init__(self, path: Path, chain: Sequence[Path] = ()) -> None:
        self.path = path
        self.chain = list(chain)
        cycle = ' -> '.join(str(p) for p in [*self.chain, path])
        super().__init__(f'circular dependencies are not supported: {cycle}')


class UnresolvableIncludeError(BundleError):
    """The argument of a source directive is not a static path to a readable file."""

    def __init__(self, argument: str, reason: str) -> None:
        self.argument = argument
        self.reason = reason
        super().__init__(f'failed to get full path for source: "{argument}" ({reason})')


class IncludeOutsideRootError(BundleError):
    """A sourced file lies outside the configured root directory."""

    def __init__(self, argument: str, path: Path, root: Path) -> None:
        self.argument = argument
        self.path = path
        self.root = root
        super().__init__(
            f'trying to access script outside of the root directory {root}: {argument}'
        )


class SubcommandFailureError(BundleError):
    """A command marked for build-time inlining could not be run or exited non-zero."""

    def __init__(self, command: str, returncode: int | None, reason: str = '') -> None:
        self.command = command
        self.returncode = returncode
        self.reason = reason
        if returncode is None:
            super().__init__(f'"{command}" could not be executed: {reason}')
        else:
            super().__init__(f'"{command}" returned with exit code {returncode}')


class EditsOverlapError(BundleError):
    """Two planned edits of the same document touch overlapping byte ranges."""

    def __init__(self, first: tuple[int, int], second: tuple[int, int]) -> None:
        self.first = first
        self.second = second
        super().__init__(f'edits are not disjoint: {first} and {second}')


__all__ = [
    'BundleError',
    'ParseError',
    'ReadError',
    'SelectorConflictError',
    'SelectorMisplacedError',
    'SelectorDuplicateError',
    'SelectorMissingError',
    'CircularIncludeError',
    'UnresolvableIncludeError',
    'IncludeOutsideRootError',
    'SubcommandFailureError',
    'EditsOverlapError',
]
