from __future__ import annotations

from typing import Iterable, List, Optional

from controller.alignment.text_align import as_text
from controller.alignment.word_align import align_words
from schemas.alignment import HighlightedChar, MultiAlignmentRow, Operation
from schemas.recall import RecallAttempt


_CSS_CLASSES = {
    "match": "char-match",
    "space": "char-match",
    "delete": "char-delete",
    "insert": "char-insert",
    "replace": "char-replace",
}


def _highlight(op: Operation) -> HighlightedChar:
    # a deleted character is shown with its original glyph
    char = op.candidate if op.candidate is not None else op.original
    return HighlightedChar(char=char or " ", op=op.type, css_class=_CSS_CLASSES[op.type])


def build_highlights(operations: Iterable[Operation]) -> List[HighlightedChar]:
    return [_highlight(op) for op in operations]


def build_reference_row(original: Optional[str]) -> MultiAlignmentRow:
    return MultiAlignmentRow(is_reference=True, text=as_text(original))


def build_attempt_row(original: Optional[str], attempt: RecallAttempt) -> MultiAlignmentRow:
    alignment = align_words(original, attempt.text)
    return MultiAlignmentRow(
        is_reference=False,
        session_id=attempt.session_id,
        timestamp=attempt.timestamp,
        text=alignment.aligned_candidate,
        operations=alignment.operations,
        highlights=build_highlights(alignment.operations),
        distance=alignment.distance,
    )


def build_rows(
    original: Optional[str],
    attempts: Iterable[RecallAttempt],
) -> List[MultiAlignmentRow]:
    """Reference row followed by one diff row per attempt.

    Attempts keep the order they are given in (callers sort them by
    timestamp). Each attempt is aligned against the reference on its own;
    there is no joint alignment across attempts.
    """
    rows = [build_reference_row(original)]
    rows.extend(build_attempt_row(original, attempt) for attempt in attempts)
    return rows
