from __future__ import annotations

"""Bundle orchestration.

The Bundler drives the recursive resolution of an inclusion graph: every
document is parsed, visited with a `DirectiveRecognizer` and rewritten with
the edits it planned. Included files are bundled depth-first through the
same path before the including document's edits are applied.

All cross-file state lives in a `BundleContext` created per `bundle()` call,
so a Bundler can be reused for any number of independent runs.
"""

from pathlib import Path
from typing import Optional

from shbundle.config import BundlerConfig
from shbundle.core.context import BundleContext
from shbundle.core.interfaces.execution import CommandRunnerProtocol
from shbundle.core.interfaces.logging import LoggerLikeProtocol
from shbundle.core.models import Document
from shbundle.core.report import BundleReport
from shbundle.errors import CircularIncludeError, ReadError, SelectorMissingError
from shbundle.logging.helpers import get_logger, trace_io
from shbundle.parsing.syntax import parse_document
from shbundle.parsing.visitor import visit
from shbundle.rendering.directives import DirectiveRecognizer
from shbundle.rendering.execution import ShellCommandRunner
from shbundle.rendering.path_resolver import IncludePathResolver


class Bundler:
    def __init__(
        self,
        config: BundlerConfig | Path | str,
        *,
        runner: Optional[CommandRunnerProtocol] = None,
        logger: Optional[LoggerLikeProtocol] = None,
    ) -> None:
        if not isinstance(config, BundlerConfig):
            config = BundlerConfig(root_dir=Path(config))
        self._log = logger or get_logger('bundler')
        self._resolver = IncludePathResolver(config.root_dir)
        self._config = config
        self._runner = runner or ShellCommandRunner(shell=config.shell, logger=get_logger('exec'))
        self._report: Optional[BundleReport] = None

    @property
    def root_dir(self) -> Path:
        """Canonical root directory."""
        return self._resolver.root

    @property
    def config(self) -> BundlerConfig:
        return self._config

    @property
    def report(self) -> Optional[BundleReport]:
        """Report of the most recent run, None before the first one."""
        return self._report

    # Entry points ---------------------------------------------------------

    def bundle(self, text: str, cwd: Path | str, *, origin: Optional[Path] = None) -> str:
        """Bundle *text* whose relative includes resolve against *cwd*.

        If *origin* names the file *text* was read from, that file counts as
        being resolved for the whole run, so sourcing it again is a cycle.

        Returns:
            The shebang, a blank line and the bundled body.
        """
        ctx = BundleContext(root_dir=self.root_dir)
        self._report = ctx.report

        origin_path = Path(origin).resolve() if origin is not None else None
        if origin_path is not None:
            ctx.visiting.append(origin_path)

        document = Document(text=text, cwd=Path(cwd), path=origin_path)
        body = self._bundle_text(ctx, document)

        if ctx.selector is None:
            raise SelectorMissingError()

        out = f'{ctx.selector}\n\n{body}'
        ctx.report.finish(out)
        self._log.info(
            '✔ bundled %d file(s), %d inline command(s)',
            len(ctx.report.files_inlined) + 1,
            len(ctx.report.commands_executed),
        )
        return out

    def bundle_file(self, path: Path | str) -> str:
        """Read *path* and bundle it relative to its own directory."""
        src = Path(path)
        text = self._read(src)
        return self.bundle(text, src.resolve().parent, origin=src)

    # Recursion ------------------------------------------------------------

    def _bundle_path(self, ctx: BundleContext, path: Path) -> str:
        if path in ctx.visiting:
            raise CircularIncludeError(path, ctx.visiting)
        ctx.visiting.append(path)
        try:
            text = self._read(path)
            out = self._bundle_text(ctx, Document(text=text, cwd=path.parent, path=path))
        finally:
            ctx.visiting.pop()

        ctx.visited.add(path)
        ctx.report.add_file(path)
        return out

    def _bundle_text(self, ctx: BundleContext, document: Document) -> str:
        tree = parse_document(document)
        recognizer = DirectiveRecognizer(
            document=document,
            context=ctx,
            resolver=self._resolver,
            runner=self._runner,
            include=lambda p: self._bundle_path(ctx, p),
            logger=get_logger('directives'),
        )
        visit(tree.root, recognizer)

        if self._config.strict_selectors and not recognizer.found_selector:
            raise SelectorMissingError(document.origin)

        return recognizer.edits.apply()

    def _read(self, path: Path) -> str:
        trace_io(self._log, 'read', path=str(path))
        try:
            return path.read_text(encoding='utf-8')
        except UnicodeDecodeError as exc:
            raise ReadError(path, str(exc)) from exc
