"""Pydantic schemas for bulk flashcard import."""

from pydantic import BaseModel, Field

from flashdeck.infrastructure.learning.schemas.flashcard_schemas import Flashcard


class BulkImportRequest(BaseModel):
    """One ``front - back`` or ``front: back`` pair per line."""

    text: str = Field(..., max_length=100_000, description="Pasted vocabulary list")


class BulkImportResponse(BaseModel):
    """Schema for bulk import response."""

    success: bool = Field(..., description="Whether at least one flashcard was imported")
    message: str = Field(..., description="Summary, e.g. '3 imported, 1 failed'")
    imported_count: int = Field(..., ge=0)
    failed_count: int = Field(..., ge=0)
    failed_lines: list[str] = Field(..., description="Lines that could not be parsed")
    flashcards: list[Flashcard] = Field(..., description="Created flashcards")
    extracted_text: str | None = Field(None, description="Text recognised in the uploaded image")
