from __future__ import annotations

"""Include path resolution.

Include targets are resolved against the directory of the document that
sources them and canonicalized (absolute, symlinks resolved) so that the
canonical path can serve as the identity of a file across the whole
inclusion graph. The root directory only bounds which files may be inlined
and how they are labelled in the output.
"""

from pathlib import Path

from shbundle.core.interfaces.fs import PathResolverProtocol
from shbundle.errors import IncludeOutsideRootError, UnresolvableIncludeError


class IncludePathResolver(PathResolverProtocol):
    def __init__(self, root: Path) -> None:
        self._root = Path(root).resolve(strict=True)

    @property
    def root(self) -> Path:
        return self._root

    def resolve(self, base: Path, path: str) -> Path:
        """Resolve the literal include argument *path* against *base*."""
        try:
            resolved = (Path(base) / path).resolve(strict=True)
        except (OSError, RuntimeError) as exc:
            raise UnresolvableIncludeError(path, str(exc)) from exc
        if not resolved.is_file():
            raise UnresolvableIncludeError(path, 'not a regular file')
        return resolved

    def relative_to_root(self, path: Path) -> Path:
        try:
            return path.relative_to(self._root)
        except ValueError as exc:
            raise IncludeOutsideRootError(str(path), path, self._root) from exc

    def display(self, path: Path, argument: str) -> str:
        """Root-relative label of *path*; *argument* is the literal text used in errors."""
        try:
            return self.relative_to_root(path).as_posix()
        except IncludeOutsideRootError as exc:
            raise IncludeOutsideRootError(argument, path, self._root) from exc.__cause__
