# -*- coding: utf-8 -*-
"""Syntax tree adapter and pre-order visitor."""
from __future__ import annotations

import sys
import unittest
from pathlib import Path

SRC = Path(__file__).resolve().parents[1] / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from shbundle.core.models import Document  # noqa: E402
from shbundle.errors import ParseError  # noqa: E402
from shbundle.parsing.syntax import NodeKind, iter_nodes, parse_document  # noqa: E402
from shbundle.parsing.visitor import visit  # noqa: E402

SCRIPT = "#!/bin/bash\nsource ./lib.sh\nNOW=$(date) # build: inline\necho 'done'\n"


def _parse(text: str):
    return parse_document(Document(text=text, cwd=Path(".")))


class SyntaxAdapterTests(unittest.TestCase):
    def test_kinds_cover_the_recognized_constructs(self) -> None:
        kinds = {n.kind for n in iter_nodes(_parse(SCRIPT).root)}
        for kind in (
            NodeKind.COMMENT,
            NodeKind.COMMAND,
            NodeKind.COMMAND_SUBSTITUTION,
            NodeKind.WORD,
            NodeKind.STRING,
            NodeKind.OTHER,
        ):
            self.assertIn(kind, kinds)

    def test_text_and_spans_match_source(self) -> None:
        root = _parse(SCRIPT).root
        shebang = root.child(0)
        self.assertEqual(shebang.kind, NodeKind.COMMENT)
        self.assertEqual(shebang.text, "#!/bin/bash")
        self.assertEqual((shebang.start_byte, shebang.end_byte), (0, 11))
        self.assertEqual(shebang.start_row, 0)

        command = next(n for n in iter_nodes(root) if n.kind is NodeKind.COMMAND)
        self.assertEqual(command.child(0).text, "source")
        self.assertEqual(command.child(1).kind, NodeKind.WORD)
        self.assertEqual(command.child(1).text, "./lib.sh")
        self.assertEqual(command.parent, root)

    def test_single_quoted_literal_is_a_string(self) -> None:
        strings = [n for n in iter_nodes(_parse(SCRIPT).root) if n.kind is NodeKind.STRING]
        self.assertEqual([s.text for s in strings], ["'done'"])
        self.assertEqual(strings[0].type, "raw_string")

    def test_byte_spans_after_multibyte_text(self) -> None:
        text = "#!/bin/bash\necho 'ü'\nsource ./x.sh\n"
        root = _parse(text).root
        command = [n for n in iter_nodes(root) if n.kind is NodeKind.COMMAND][-1]
        self.assertEqual(command.text, "source ./x.sh")
        self.assertEqual(command.start_byte, len("#!/bin/bash\necho 'ü'\n".encode("utf-8")))

    def test_grammar_errors_raise_parse_error(self) -> None:
        with self.assertRaises(ParseError) as cm:
            _parse("#!/bin/bash\nif true; then\n  echo hi\n")
        self.assertEqual(cm.exception.origin, "<text>")


class VisitorTests(unittest.TestCase):
    def test_pre_order_parent_before_children(self) -> None:
        root = _parse(SCRIPT).root
        seen = []
        visit(root, seen.append)
        self.assertEqual(seen[0], root)
        self.assertEqual(seen, list(iter_nodes(root)))
        for index, node in enumerate(seen):
            parent = node.parent
            if parent is not None:
                self.assertLess(seen.index(parent), index)

    def test_first_error_stops_traversal(self) -> None:
        root = _parse(SCRIPT).root
        seen = []

        def handler(node):
            seen.append(node)
            if node.kind is NodeKind.COMMAND:
                raise RuntimeError("stop")

        with self.assertRaises(RuntimeError):
            visit(root, handler)
        self.assertEqual(seen[-1].kind, NodeKind.COMMAND)
        self.assertLess(len(seen), len(list(iter_nodes(root))))


if __name__ == "__main__":
    unittest.main()
