from __future__ import annotations

from typing import Any, List, Literal, Optional

from pydantic import AliasChoices, BaseModel, Field, field_validator

# ids arrive as JSON numbers or strings; both sides compare as str
FragmentId = str


def _fragment_id_as_str(value: Any) -> Any:
    if isinstance(value, (int, str)) and not isinstance(value, bool):
        return str(value)
    return value


class Fragment(BaseModel):
    id: FragmentId
    content: str = ""

    @field_validator("id", mode="before")
    @classmethod
    def normalize_id(cls, v):
        return _fragment_id_as_str(v)


class RecallAttempt(BaseModel):
    fragment_id: Optional[FragmentId] = Field(
        default=None,
        validation_alias=AliasChoices("fragment_id", "fragmentId"),
        serialization_alias="fragmentId",
    )
    session_id: str = Field(
        validation_alias=AliasChoices("session_id", "sessionId"),
        serialization_alias="sessionId",
    )
    timestamp: int
    text: Optional[str] = None

    @field_validator("fragment_id", mode="before")
    @classmethod
    def normalize_fragment_id(cls, v):
        return _fragment_id_as_str(v)


class SessionTotal(BaseModel):
    session_id: str = Field(
        validation_alias=AliasChoices("session_id", "sessionId"),
        serialization_alias="sessionId",
    )
    timestamp: int
    total_distance: int = Field(
        validation_alias=AliasChoices("total_distance", "totalDistance"),
        serialization_alias="totalDistance",
    )


class DistanceRequest(BaseModel):
    original: Optional[str] = None
    candidate: Optional[str] = None


class DistanceOut(BaseModel):
    distance: int


class AlignRequest(DistanceRequest):
    granularity: Literal["word", "char"] = "word"


class SessionTotalsRequest(BaseModel):
    fragments: List[Fragment]
    attempts: List[RecallAttempt] = Field(default_factory=list)


class HistoryRequest(BaseModel):
    original: Optional[str] = None
    attempts: List[RecallAttempt] = Field(default_factory=list)
    newest_first: bool = Field(
        default=False,
        validation_alias=AliasChoices("newest_first", "newestFirst"),
        serialization_alias="newestFirst",
    )
