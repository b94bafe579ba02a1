from __future__ import annotations

"""Disjoint edit collection and application.

Edits are expressed in byte offsets of the *original* document and applied
in a single left-to-right pass; a running offset translates each range into
the buffer as already rewritten by the edits before it.
"""

from typing import Iterable, List, Optional

from shbundle.core.interfaces.logging import LoggerLikeProtocol
from shbundle.core.models import Document, Edit
from shbundle.errors import EditsOverlapError
from shbundle.logging.helpers import get_logger


def apply_edits(text: str, edits: Iterable[Edit]) -> str:
    """Apply disjoint *edits* to *text* simultaneously and return the result.

    Raises:
        EditsOverlapError: if two edits cover overlapping byte ranges.
    """
    ordered = sorted(edits, key=lambda e: (e.start_byte, e.end_byte))
    for prev, nxt in zip(ordered, ordered[1:]):
        if prev.end_byte > nxt.start_byte:
            raise EditsOverlapError(prev.span, nxt.span)

    buf = bytearray(text.encode('utf-8'))
    offset = 0
    for edit in ordered:
        payload = edit.new_content.encode('utf-8')
        start = edit.start_byte + offset
        end = edit.end_byte + offset
        buf[start:end] = payload
        offset += len(payload) - (edit.end_byte - edit.start_byte)

    return buf.decode('utf-8')


class EditSet:
    """Edits planned for one document."""

    def __init__(self, document: Document, *, logger: Optional[LoggerLikeProtocol] = None) -> None:
        self._doc = document
        self._edits: List[Edit] = []
        self._log = logger or get_logger('edits')

    def add(self, edit: Edit) -> None:
        if edit.end_byte > len(self._doc.data):
            raise ValueError(f'edit {edit.span} exceeds document size {len(self._doc.data)}')
        self._edits.append(edit)

    def replace(self, start_byte: int, end_byte: int, new_content: str) -> None:
        self.add(Edit(start_byte, end_byte, new_content))

    def delete(self, start_byte: int, end_byte: int) -> None:
        self.add(Edit(start_byte, end_byte, ''))

    @property
    def edits(self) -> List[Edit]:
        return list(self._edits)

    def __len__(self) -> int:
        return len(self._edits)

    def apply(self) -> str:
        self._log.debug('applying %d edit(s) to %s', len(self._edits), self._doc.origin)
        return apply_edits(self._doc.text, self._edits)
