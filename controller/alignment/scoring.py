from typing import Any, Dict, Iterable, List, Mapping, Optional

from controller.alignment.text_align import edit_distance
from schemas.recall import Fragment, FragmentId, RecallAttempt, SessionTotal


def recall_distance(original: Optional[str], candidate: Optional[str]) -> int:
    return edit_distance(original, candidate)


def total_distance(
    fragments: Iterable[Fragment],
    attempts_for_session: Mapping[Any, Optional[str]],
) -> int:
    # an unattempted fragment is "not yet tested", not maximally wrong
    recalled = {str(fragment_id): text for fragment_id, text in attempts_for_session.items()}
    total = 0
    for fragment in fragments:
        attempt = recalled.get(fragment.id)
        if attempt is None:
            continue
        total += recall_distance(fragment.content, attempt)
    return total


def _latest_attempts_by_session(
    attempts: Iterable[RecallAttempt],
) -> Dict[str, Dict[FragmentId, RecallAttempt]]:
    by_session: Dict[str, Dict[FragmentId, RecallAttempt]] = {}
    for attempt in attempts:
        session = by_session.setdefault(attempt.session_id, {})
        previous = session.get(attempt.fragment_id)
        if previous is None or attempt.timestamp >= previous.timestamp:
            session[attempt.fragment_id] = attempt
    return by_session


def build_session_totals(
    fragments: Iterable[Fragment],
    attempts: Iterable[RecallAttempt],
) -> List[SessionTotal]:
    """One trend point per session, oldest first.

    A session is dated by its earliest attempt. When a fragment was typed
    more than once in the same session the latest attempt counts. Attempts
    without a fragment id are not scored and do not open a session.
    """
    fragments = list(fragments)
    attempts = [attempt for attempt in attempts if attempt.fragment_id is not None]

    started: Dict[str, int] = {}
    for attempt in attempts:
        current = started.get(attempt.session_id)
        if current is None or attempt.timestamp < current:
            started[attempt.session_id] = attempt.timestamp

    totals: List[SessionTotal] = []
    for session_id, latest in _latest_attempts_by_session(attempts).items():
        recalled = {fragment_id: attempt.text for fragment_id, attempt in latest.items()}
        totals.append(
            SessionTotal(
                session_id=session_id,
                timestamp=started[session_id],
                total_distance=total_distance(fragments, recalled),
            )
        )

    totals.sort(key=lambda total: (total.timestamp, total.session_id))
    return totals
