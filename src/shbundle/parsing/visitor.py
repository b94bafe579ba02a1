from __future__ import annotations

from typing import Callable

from shbundle.parsing.syntax import SyntaxNode

NodeHandler = Callable[[SyntaxNode], None]


def visit(node: SyntaxNode, handler: NodeHandler) -> None:
    """Call *handler* on *node* and then on every descendant, pre-order.

    The first exception raised by *handler* propagates immediately; the
    remaining siblings and ancestors are not visited.
    """
    handler(node)
    for child in node.children:
        visit(child, handler)
