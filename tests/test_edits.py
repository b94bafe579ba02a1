# -*- coding: utf-8 -*-
"""Edit model: disjoint byte-range replacements applied in one pass."""
from __future__ import annotations

import itertools
import sys
import unittest
from pathlib import Path

SRC = Path(__file__).resolve().parents[1] / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from shbundle.core.models import Document, Edit  # noqa: E402
from shbundle.errors import EditsOverlapError  # noqa: E402
from shbundle.processing.edits import EditSet, apply_edits  # noqa: E402


class ApplyEditsTests(unittest.TestCase):
    def test_no_edits_returns_text_unchanged(self) -> None:
        self.assertEqual(apply_edits("echo hi\n", []), "echo hi\n")

    def test_growing_and_shrinking_edits_shift_later_ranges(self) -> None:
        text = "aaa bbb ccc"
        edits = [Edit(0, 3, "A"), Edit(4, 7, "BBBBB"), Edit(8, 11, "")]
        self.assertEqual(apply_edits(text, edits), "A BBBBB ")

    def test_insertion_order_does_not_matter(self) -> None:
        text = "one two three four"
        edits = [Edit(0, 3, "1"), Edit(4, 7, "22"), Edit(8, 13, ""), Edit(14, 18, "4444")]
        expected = apply_edits(text, sorted(edits, key=lambda e: e.start_byte))
        self.assertEqual(expected, "1 22  4444")
        for perm in itertools.permutations(edits):
            self.assertEqual(apply_edits(text, list(perm)), expected)

    def test_insertion_before_replacement_at_same_offset(self) -> None:
        forward = [Edit(3, 3, "X"), Edit(3, 5, "Y")]
        self.assertEqual(apply_edits("abcdefg", forward), "abcXYfg")
        self.assertEqual(apply_edits("abcdefg", list(reversed(forward))), "abcXYfg")

    def test_adjacent_edits_are_disjoint(self) -> None:
        self.assertEqual(apply_edits("abcd", [Edit(2, 4, "Z"), Edit(0, 2, "Y")]), "YZ")

    def test_overlap_is_rejected(self) -> None:
        with self.assertRaises(EditsOverlapError) as cm:
            apply_edits("abcdef", [Edit(0, 4, "x"), Edit(3, 5, "y")])
        self.assertEqual(cm.exception.first, (0, 4))
        self.assertEqual(cm.exception.second, (3, 5))
        self.assertIn("not disjoint", str(cm.exception))

    def test_offsets_are_utf8_bytes(self) -> None:
        text = "héllo wörld"
        # "héllo " is 7 bytes, "wörld" is 6 bytes.
        self.assertEqual(apply_edits(text, [Edit(7, 13, "there")]), "héllo there")

    def test_inverted_range_is_invalid(self) -> None:
        with self.assertRaises(ValueError):
            Edit(5, 3, "x")


class EditSetTests(unittest.TestCase):
    def test_collects_and_applies_against_document(self) -> None:
        doc = Document(text="#!/bin/sh\necho a\n", cwd=Path("."))
        edits = EditSet(doc)
        edits.delete(0, 10)
        edits.replace(15, 16, "b")
        self.assertEqual(len(edits), 2)
        self.assertEqual(edits.apply(), "echo b\n")

    def test_edit_past_end_of_document_is_rejected(self) -> None:
        edits = EditSet(Document(text="abc", cwd=Path(".")))
        with self.assertRaises(ValueError):
            edits.replace(1, 10, "x")


if __name__ == "__main__":
    unittest.main()
