from __future__ import annotations

from typing import List, Literal, Optional

from pydantic import AliasChoices, BaseModel, Field


OpType = Literal["match", "replace", "insert", "delete", "space"]

PLACEHOLDER = " "


class Operation(BaseModel):
    type: OpType
    original: Optional[str] = None
    candidate: Optional[str] = None

    @property
    def is_match(self) -> bool:
        # "space" is aligned whitespace, a match variant
        return self.type in ("match", "space")


class WordToken(BaseModel):
    kind: Literal["word", "space"]
    text: str


class AlignmentResult(BaseModel):
    operations: List[Operation] = Field(default_factory=list)
    aligned_original: str = Field(
        default="",
        validation_alias=AliasChoices("aligned_original", "alignedOriginal"),
        serialization_alias="alignedOriginal",
    )
    aligned_candidate: str = Field(
        default="",
        validation_alias=AliasChoices("aligned_candidate", "alignedCandidate"),
        serialization_alias="alignedCandidate",
    )
    distance: int = 0

    @classmethod
    def from_operations(cls, operations: List[Operation]) -> "AlignmentResult":
        aligned_original = "".join(
            op.original if op.original is not None else PLACEHOLDER for op in operations
        )
        aligned_candidate = "".join(
            op.candidate if op.candidate is not None else PLACEHOLDER for op in operations
        )
        return cls(
            operations=operations,
            aligned_original=aligned_original,
            aligned_candidate=aligned_candidate,
            distance=sum(1 for op in operations if not op.is_match),
        )


class HighlightedChar(BaseModel):
    char: str
    op: OpType
    css_class: Literal["char-match", "char-delete", "char-insert", "char-replace"] = Field(
        validation_alias=AliasChoices("css_class", "cssClass"),
        serialization_alias="cssClass",
    )


class MultiAlignmentRow(BaseModel):
    is_reference: bool = Field(
        validation_alias=AliasChoices("is_reference", "isReference"),
        serialization_alias="isReference",
    )
    session_id: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("session_id", "sessionId"),
        serialization_alias="sessionId",
    )
    timestamp: Optional[int] = None
    text: str
    operations: List[Operation] = Field(default_factory=list)
    highlights: List[HighlightedChar] = Field(default_factory=list)
    distance: Optional[int] = None
