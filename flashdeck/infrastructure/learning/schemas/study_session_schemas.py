"""Pydantic schemas for flip-card study sessions."""

from typing import Literal
from uuid import UUID

from pydantic import BaseModel, Field

from flashdeck.domain.learning.services.study_cycler import StudyStep
from flashdeck.domain.learning.value_objects import OwnerScope


class StudyStartRequest(BaseModel):
    """Schema for starting a study session."""

    scope: OwnerScope = Field(OwnerScope.MINE, description="Own cards or shared cards")
    lesson_ids: list[int] | Literal["all"] = Field(
        "all", description="'all' or an explicit list of lesson IDs"
    )
    wrap: bool | None = Field(
        None, description="Return to the first card after the last (server default when omitted)"
    )


class StudyCard(BaseModel):
    flashcard_id: int
    lesson_id: int
    front: str
    back: str


class StudySessionState(BaseModel):
    """Schema for the state of a study session."""

    session_id: UUID
    index: int = Field(..., ge=0)
    total: int = Field(..., ge=1)
    wrap: bool
    completed_cycles: int = Field(..., ge=0)
    showing_back: bool = Field(..., description="Flip state; resets on every move")
    visible_text: str = Field(..., description="The face currently shown")
    card: StudyCard
    last_step: StudyStep | None = Field(None, description="Outcome of the last next/prev")
