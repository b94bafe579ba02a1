from __future__ import annotations

"""Syntax tree adapter over tree-sitter-bash.

The rest of the package never touches tree-sitter objects directly: it sees
`SyntaxNode` views that expose a small closed set of node kinds, byte spans
into the owning `Document` and the usual parent/child/sibling relations.
"""

import enum
from typing import Iterator, List, Optional

import tree_sitter_bash as tsbash
from tree_sitter import Language, Node, Parser, Tree

from shbundle.core.models import Document
from shbundle.errors import ParseError


class NodeKind(enum.Enum):
    COMMENT = 'comment'
    COMMAND = 'command'
    COMMAND_SUBSTITUTION = 'command_substitution'
    WORD = 'word'
    STRING = 'string'
    OTHER = 'other'


_KIND_BY_TYPE = {
    'comment': NodeKind.COMMENT,
    'command': NodeKind.COMMAND,
    'command_substitution': NodeKind.COMMAND_SUBSTITUTION,
    'word': NodeKind.WORD,
    'string': NodeKind.STRING,
    'raw_string': NodeKind.STRING,
}

_BASH_LANGUAGE: Optional[Language] = None


def _language() -> Language:
    global _BASH_LANGUAGE
    if _BASH_LANGUAGE is None:
        _BASH_LANGUAGE = Language(tsbash.language())
    return _BASH_LANGUAGE


class SyntaxNode:
    """Read-only view of one node of a parsed document."""

    __slots__ = ('_node', '_doc')

    def __init__(self, node: Node, document: Document) -> None:
        self._node = node
        self._doc = document

    def _wrap(self, node: Optional[Node]) -> Optional['SyntaxNode']:
        return SyntaxNode(node, self._doc) if node is not None else None

    @property
    def kind(self) -> NodeKind:
        return _KIND_BY_TYPE.get(self._node.type, NodeKind.OTHER)

    @property
    def type(self) -> str:
        """Raw grammar type, e.g. 'raw_string' or 'simple_expansion'."""
        return self._node.type

    @property
    def start_byte(self) -> int:
        return self._node.start_byte

    @property
    def end_byte(self) -> int:
        return self._node.end_byte

    @property
    def start_row(self) -> int:
        return self._node.start_point[0]

    @property
    def text(self) -> str:
        return self._doc.slice(self.start_byte, self.end_byte)

    @property
    def children(self) -> List['SyntaxNode']:
        return [SyntaxNode(c, self._doc) for c in self._node.children]

    @property
    def named_children(self) -> List['SyntaxNode']:
        return [SyntaxNode(c, self._doc) for c in self._node.named_children]

    def child(self, index: int) -> Optional['SyntaxNode']:
        return self._wrap(self._node.child(index))

    @property
    def parent(self) -> Optional['SyntaxNode']:
        return self._wrap(self._node.parent)

    @property
    def next_sibling(self) -> Optional['SyntaxNode']:
        return self._wrap(self._node.next_sibling)

    @property
    def next_named_sibling(self) -> Optional['SyntaxNode']:
        return self._wrap(self._node.next_named_sibling)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SyntaxNode):
            return NotImplemented
        return self._doc is other._doc and self._node == other._node

    def __repr__(self) -> str:
        return f'SyntaxNode({self.type!r}, {self.start_byte}..{self.end_byte})'


class SyntaxTree:
    """A parsed document together with its root node."""

    def __init__(self, tree: Tree, document: Document) -> None:
        self._tree = tree
        self.document = document

    @property
    def root(self) -> SyntaxNode:
        return SyntaxNode(self._tree.root_node, self.document)


def _first_error(node: Node) -> Optional[Node]:
    """Depth-first search for the first ERROR or MISSING node."""
    stack: List[Node] = [node]
    while stack:
        current = stack.pop()
        if current.type == 'ERROR' or current.is_missing:
            return current
        if current.has_error:
            stack.extend(reversed(current.children))
    return None


def parse_document(document: Document) -> SyntaxTree:
    """Parse *document* with the bash grammar.

    Raises:
        ParseError: when no tree is produced or the grammar reports an error node.
    """
    parser = Parser(_language())
    tree = parser.parse(document.data)
    if tree is None:
        raise ParseError(document.origin)
    if tree.root_node.has_error:
        bad = _first_error(tree.root_node)
        if bad is None:
            raise ParseError(document.origin)
        row, col = bad.start_point[0], bad.start_point[1]
        raise ParseError(document.origin, line=row + 1, col=col + 1)
    return SyntaxTree(tree, document)


def iter_nodes(node: SyntaxNode) -> Iterator[SyntaxNode]:
    """Yield *node* and all of its descendants in pre-order."""
    yield node
    for child in node.children:
        yield from iter_nodes(child)
