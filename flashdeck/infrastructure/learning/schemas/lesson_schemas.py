"""Pydantic schemas for Lesson API request/response validation."""

from datetime import datetime

from pydantic import BaseModel, Field

from flashdeck.domain.learning.value_objects import Visibility


class Lesson(BaseModel):
    """Schema for Lesson response."""

    id: int
    owner_id: str
    name: str
    visibility: Visibility
    created_at: datetime | None = None
    flashcard_count: int | None = Field(None, ge=0, description="Number of flashcards in the lesson")


class LessonCreateRequest(BaseModel):
    """Schema for creating a lesson."""

    name: str = Field(..., min_length=1, max_length=200, description="Lesson name")
    visibility: Visibility = Field(Visibility.PRIVATE, description="Private or public (shared)")


class LessonUpdateRequest(BaseModel):
    """Schema for renaming a lesson and/or changing its visibility."""

    name: str | None = Field(None, min_length=1, max_length=200, description="New lesson name")
    visibility: Visibility | None = Field(None, description="New visibility")


class LessonResponse(BaseModel):
    """Schema for lesson create/update response."""

    success: bool = Field(..., description="Whether the operation was successful")
    message: str = Field(..., description="Response message")
    lesson: Lesson = Field(..., description="The lesson")


class LessonDeleteResponse(BaseModel):
    success: bool = Field(..., description="Whether the deletion was successful")
    message: str = Field(..., description="Response message")


class LessonsListResponse(BaseModel):
    """Schema for list of lessons response."""

    lessons: list[Lesson] = Field(..., description="List of lessons, newest first")
