"""Pydantic schemas for live quiz sessions and quiz history."""

from datetime import datetime
from typing import Literal
from uuid import UUID

from pydantic import BaseModel, Field

from flashdeck.domain.learning.services.quiz_runner import QuizPhase
from flashdeck.domain.learning.value_objects import OwnerScope, QuizDirection


class QuizStartRequest(BaseModel):
    """Schema for starting a quiz."""

    scope: OwnerScope = Field(OwnerScope.MINE, description="Own cards or shared cards")
    lesson_ids: list[int] | Literal["all"] = Field(
        "all", description="'all' or an explicit list of lesson IDs"
    )
    question_count: int | None = Field(
        None, ge=1, le=500, description="Number of questions (server default when omitted)"
    )
    direction: QuizDirection = Field(QuizDirection.FRONT_TO_BACK, description="Prompt face")
    time_limit_seconds: float | None = Field(
        None, ge=0, description="Seconds per question; 0 or omitted for untimed"
    )


class QuizAnswerRequest(BaseModel):
    answer: str = Field(..., max_length=1000, description="Answer as typed by the player")


class QuizQuestion(BaseModel):
    """A question as shown in feedback and in the final record."""

    flashcard_id: int
    prompt: str
    expected_answer: str
    submitted_answer: str | None = None
    is_correct: bool | None = None


class QuizSessionState(BaseModel):
    """Schema for the state of a live quiz."""

    session_id: UUID
    phase: QuizPhase
    index: int = Field(..., ge=0, description="Index of the current question")
    total: int = Field(..., ge=1)
    score: int = Field(..., ge=0)
    aborted: bool
    direction: QuizDirection
    time_limit_seconds: float | None = None
    seconds_remaining: float | None = Field(
        None, description="Countdown of the current question, when timed"
    )
    prompt: str | None = Field(None, description="Prompt of the current question")
    feedback: QuizQuestion | None = Field(
        None, description="The question just answered, while feedback is showing"
    )
    questions: list[QuizQuestion] | None = Field(
        None, description="Per-question record, once finished"
    )
    record_id: int | None = Field(None, description="History record, once finished")


class QuizAnswerResponse(BaseModel):
    is_correct: bool
    expected_answer: str
    session: QuizSessionState


class QuizHistoryItem(BaseModel):
    """Schema for a persisted quiz result."""

    id: int
    direction: QuizDirection
    lesson_ids: list[int] | None = Field(None, description="None when all lessons were used")
    score: int
    total: int
    percentage: float
    aborted: bool
    created_at: datetime | None = None
    answers: list[QuizQuestion]


class QuizHistoryResponse(BaseModel):
    records: list[QuizHistoryItem]
    total: int = Field(..., ge=0, description="Total records for the owner")
    limit: int
    offset: int
