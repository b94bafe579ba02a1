from __future__ import annotations

"""Recognition of the constructs a bundle run acts upon.

`DirectiveRecognizer` is used as the handler of the tree visitor for one
document. It classifies every node into one of:

    * the interpreter selector (`#!...` on the first line),
    * an include directive (`source FILE` / `. FILE`),
    * a command substitution followed by the `# build: inline` marker,

and plans the edits that rewrite them. Every other node is inert.
"""

from pathlib import Path
from typing import Callable, Dict, Optional

from shbundle.constants import INLINE_MARKER, SECTION_FOOTER, SELECTOR_MARKER, SOURCE_COMMANDS
from shbundle.core.context import BundleContext
from shbundle.core.interfaces.execution import CommandRunnerProtocol
from shbundle.core.interfaces.logging import LoggerLikeProtocol
from shbundle.core.models import Document
from shbundle.errors import (
    SelectorConflictError,
    SelectorDuplicateError,
    SelectorMisplacedError,
    UnresolvableIncludeError,
)
from shbundle.logging.helpers import get_logger
from shbundle.parsing.syntax import NodeKind, SyntaxNode
from shbundle.processing.edits import EditSet
from shbundle.rendering.execution import encode_inline_output, run_inline, substitution_body
from shbundle.rendering.path_resolver import IncludePathResolver

IncludeCallback = Callable[[Path], str]

# Named children a double-quoted include argument may contain.
_STATIC_STRING_PARTS = frozenset({'string_content'})


def render_include(label: str, body: str) -> str:
    """Wrap the bundled *body* of an included file with its marker comments."""
    return f'# source {label}\n\n{body}\n\n{SECTION_FOOTER}'


class DirectiveRecognizer:
    """Visitor handler that plans the edits of a single document."""

    def __init__(
        self,
        *,
        document: Document,
        context: BundleContext,
        resolver: IncludePathResolver,
        runner: CommandRunnerProtocol,
        include: IncludeCallback,
        logger: Optional[LoggerLikeProtocol] = None,
    ) -> None:
        self._doc = document
        self._ctx = context
        self._resolver = resolver
        self._runner = runner
        self._include = include
        self._log = logger or get_logger('directives')
        self.found_selector = False
        self.edits = EditSet(document, logger=self._log)
        self._handlers: Dict[NodeKind, Callable[[SyntaxNode], None]] = {
            NodeKind.COMMENT: self._on_comment,
            NodeKind.COMMAND: self._on_command,
            NodeKind.COMMAND_SUBSTITUTION: self._on_substitution,
        }

    def __call__(self, node: SyntaxNode) -> None:
        handler = self._handlers.get(node.kind)
        if handler is not None:
            handler(node)

    # Interpreter selector -------------------------------------------------

    def _on_comment(self, node: SyntaxNode) -> None:
        text = node.text
        if not text.startswith(SELECTOR_MARKER):
            return

        if self.found_selector:
            raise SelectorDuplicateError(text)
        if node.start_row != 0:
            raise SelectorMisplacedError(text, node.start_row + 1)

        if self._ctx.selector is None:
            self._ctx.set_selector(text)
        elif self._ctx.selector != text:
            raise SelectorConflictError(self._ctx.selector, text)
        self.found_selector = True

        # Drop the line break after the shebang too, up to the next statement.
        nxt = node.next_sibling
        end = nxt.start_byte if nxt is not None else node.end_byte
        self.edits.delete(node.start_byte, end)

    # Include directive ----------------------------------------------------

    def _on_command(self, node: SyntaxNode) -> None:
        name = node.child(0)
        if name is None or name.text not in SOURCE_COMMANDS:
            return

        argument = self._include_argument(node)
        path = self._resolver.resolve(self._doc.cwd, argument)

        if path in self._ctx.visited:
            self._log.debug('%s already inlined, dropping repeated source', path)
            self._ctx.report.add_duplicate()
            content = ''
        else:
            label = self._resolver.display(path, argument)
            content = render_include(label, self._include(path))

        self.edits.replace(node.start_byte, node.end_byte, content)

    def _include_argument(self, node: SyntaxNode) -> str:
        arg = node.child(1)
        if arg is None:
            raise UnresolvableIncludeError('', 'source command missing its argument')
        if arg.kind is NodeKind.WORD:
            return arg.text
        if arg.kind is NodeKind.STRING:
            dynamic = [c for c in arg.named_children if c.type not in _STATIC_STRING_PARTS]
            if dynamic:
                raise UnresolvableIncludeError(arg.text, 'only static paths can be sourced')
            return arg.text[1:-1]
        raise UnresolvableIncludeError(arg.text, 'only static paths can be sourced')

    # Inline build substitution --------------------------------------------

    def _on_substitution(self, node: SyntaxNode) -> None:
        marker = node.next_named_sibling
        if marker is None:
            # Last token of its statement: the marker follows the enclosing node.
            parent = node.parent
            marker = parent.next_named_sibling if parent is not None else None
        if marker is None or marker.kind is not NodeKind.COMMENT or marker.text != INLINE_MARKER:
            return

        command = substitution_body(node.text)
        result = run_inline(self._runner, command, cwd=self._doc.cwd, logger=self._log)
        self._ctx.report.add_command(command, stderr=result.stderr.decode('utf-8', errors='replace'))

        self.edits.replace(node.start_byte, node.end_byte, encode_inline_output(result.stdout))
        self.edits.delete(marker.start_byte, marker.end_byte)
