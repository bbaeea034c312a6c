"""Pydantic schemas for Flashcard API request/response validation."""

from datetime import datetime

from pydantic import BaseModel, Field

from flashdeck.domain.learning.value_objects import Visibility


class FlashcardBase(BaseModel):
    """Base schema for Flashcard."""

    front: str = Field(..., min_length=1, description="Front term of the flashcard")
    back: str = Field(..., min_length=1, description="Back term of the flashcard")


class Flashcard(FlashcardBase):
    """Schema for Flashcard response."""

    id: int
    owner_id: str
    lesson_id: int
    visibility: Visibility
    created_at: datetime | None = None


class FlashcardCreateRequest(FlashcardBase):
    """Schema for creating a new flashcard."""


class FlashcardCreateResponse(BaseModel):
    """Schema for flashcard creation response."""

    success: bool = Field(..., description="Whether the creation was successful")
    message: str = Field(..., description="Response message")
    flashcard: Flashcard = Field(..., description="Created flashcard")


class FlashcardDeleteResponse(BaseModel):
    """Schema for flashcard deletion response."""

    success: bool = Field(..., description="Whether the deletion was successful")
    message: str = Field(..., description="Response message")


class FlashcardsListResponse(BaseModel):
    """Schema for list of flashcards response."""

    flashcards: list[Flashcard] = Field(..., description="List of flashcards")
