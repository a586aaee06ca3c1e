from typing import List

from fastapi import APIRouter

from schemas.alignment import AlignmentResult, MultiAlignmentRow
from schemas.recall import (
    AlignRequest,
    DistanceOut,
    DistanceRequest,
    HistoryRequest,
    SessionTotal,
    SessionTotalsRequest,
)
from schemas.response_schema import APIResponse
from services.recall_service import (
    align_recall,
    retrieve_fragment_history,
    retrieve_session_totals,
    score_recall,
)

router = APIRouter(prefix="/recall", tags=["Recall"])


# ------------------------------
# Distance for one fragment/attempt pair
# ------------------------------
@router.post("/distance", response_model=APIResponse[DistanceOut])
async def get_distance(payload: DistanceRequest):
    distance = await score_recall(payload.original, payload.candidate)
    return APIResponse(status_code=200, data=DistanceOut(distance=distance), detail="Distance computed")


# ------------------------------
# Diff of one attempt against its fragment
# ------------------------------
@router.post("/align", response_model=APIResponse[AlignmentResult])
async def align(payload: AlignRequest):
    result = await align_recall(payload.original, payload.candidate, payload.granularity)
    return APIResponse(status_code=200, data=result, detail=f"Aligned at {payload.granularity} level")


# ------------------------------
# Trend chart points, one per session
# ------------------------------
@router.post("/sessions/totals", response_model=APIResponse[List[SessionTotal]])
async def session_totals(payload: SessionTotalsRequest):
    """
    Sums the distance of every recalled fragment per session.
    Sessions come back oldest first.
    """
    totals = await retrieve_session_totals(payload.fragments, payload.attempts)
    return APIResponse(status_code=200, data=totals, detail=f"Computed {len(totals)} session totals")


# ------------------------------
# Multi-session history table for one fragment
# ------------------------------
@router.post("/history", response_model=APIResponse[List[MultiAlignmentRow]])
async def fragment_history(payload: HistoryRequest):
    """
    Returns the reference row followed by one aligned row per attempt.
    """
    rows = await retrieve_fragment_history(
        payload.original, payload.attempts, newest_first=payload.newest_first
    )
    return APIResponse(status_code=200, data=rows, detail="History rows built")
