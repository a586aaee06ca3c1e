from __future__ import annotations

import asyncio
import logging
from typing import Any, Iterable, List, Optional, Sequence, Tuple

from fastapi import HTTPException, status

from controller.alignment.history_builder import build_rows
from controller.alignment.scoring import build_session_totals, recall_distance
from controller.alignment.text_align import align_chars
from controller.alignment.word_align import align_words
from core.settings import get_max_attempts, get_max_batch_cells, get_max_text_length
from schemas.alignment import AlignmentResult, MultiAlignmentRow
from schemas.recall import Fragment, RecallAttempt, SessionTotal

logger = logging.getLogger(__name__)


def _check_text(label: str, value: Any) -> None:
    if value is None:
        return
    if not isinstance(value, str):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"'{label}' must be a string.",
        )
    limit = get_max_text_length()
    if len(value) > limit:
        logger.warning("Rejected %s of length %s (limit %s).", label, len(value), limit)
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"'{label}' exceeds the maximum length of {limit} characters.",
        )


def _check_attempt_count(attempts: Sequence[RecallAttempt]) -> None:
    limit = get_max_attempts()
    if len(attempts) > limit:
        logger.warning("Rejected batch of %s attempts (limit %s).", len(attempts), limit)
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Too many attempts: at most {limit} are accepted per request.",
        )


def _check_batch_cells(pairs: Iterable[Tuple[Optional[str], Optional[str]]]) -> None:
    cells = sum((len(a or "") + 1) * (len(b or "") + 1) for a, b in pairs)
    limit = get_max_batch_cells()
    if cells > limit:
        logger.warning("Rejected batch of %s alignment cells (limit %s).", cells, limit)
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Request is too large to align: shorten the texts or send fewer attempts.",
        )


async def score_recall(original: Optional[str], candidate: Optional[str]) -> int:
    _check_text("original", original)
    _check_text("candidate", candidate)
    return await asyncio.to_thread(recall_distance, original, candidate)


async def align_recall(
    original: Optional[str],
    candidate: Optional[str],
    granularity: str = "word",
) -> AlignmentResult:
    _check_text("original", original)
    _check_text("candidate", candidate)
    if granularity == "char":
        return await asyncio.to_thread(align_chars, original, candidate)
    if granularity == "word":
        return await asyncio.to_thread(align_words, original, candidate)
    raise HTTPException(
        status_code=status.HTTP_400_BAD_REQUEST,
        detail="Granularity must be 'word' or 'char'.",
    )


async def retrieve_session_totals(
    fragments: List[Fragment],
    attempts: List[RecallAttempt],
) -> List[SessionTotal]:
    _check_attempt_count(attempts)
    for fragment in fragments:
        _check_text("fragment content", fragment.content)
    for attempt in attempts:
        _check_text("attempt text", attempt.text)

    contents = {fragment.id: fragment.content for fragment in fragments}
    _check_batch_cells(
        (contents[attempt.fragment_id], attempt.text)
        for attempt in attempts
        if attempt.fragment_id in contents and attempt.text is not None
    )

    logger.info(
        "Computing session totals for %s fragments and %s attempts.",
        len(fragments),
        len(attempts),
    )
    return await asyncio.to_thread(build_session_totals, fragments, attempts)


async def retrieve_fragment_history(
    original: Optional[str],
    attempts: List[RecallAttempt],
    newest_first: bool = False,
) -> List[MultiAlignmentRow]:
    _check_text("original", original)
    _check_attempt_count(attempts)
    for attempt in attempts:
        _check_text("attempt text", attempt.text)
    _check_batch_cells((original, attempt.text) for attempt in attempts)

    ordered = sorted(attempts, key=lambda attempt: attempt.timestamp)
    logger.info("Building fragment history with %s attempt rows.", len(ordered))
    rows = await asyncio.to_thread(build_rows, original, ordered)
    if newest_first:
        return rows[:1] + rows[:0:-1]
    return rows
