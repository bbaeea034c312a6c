"""Custom exception hierarchy for the flashdeck application."""


class FlashdeckError(Exception):
    """Base exception for all flashdeck errors."""

    def __init__(self, message: str, status_code: int = 500) -> None:
        """Initialize exception with message and optional status code."""
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


class NotFoundError(FlashdeckError):
    """Resource not found error."""

    def __init__(self, message: str) -> None:
        """Initialize with message and 404 status code."""
        super().__init__(message, status_code=404)


class LessonNotFoundError(NotFoundError):
    """Lesson not found error."""

    def __init__(self, lesson_id: int | None = None, *, message: str | None = None) -> None:
        """Initialize with lesson ID or custom message."""
        self.lesson_id = lesson_id
        if message:
            super().__init__(message)
        elif lesson_id is not None:
            super().__init__(f"Lesson with id {lesson_id} not found")
        else:
            super().__init__("Lesson not found")


class FlashcardNotFoundError(NotFoundError):
    """Flashcard not found error."""

    def __init__(self, flashcard_id: int) -> None:
        self.flashcard_id = flashcard_id
        super().__init__(f"Flashcard with id {flashcard_id} not found")


class SessionNotFoundError(NotFoundError):
    """Live quiz or study session not found (or already evicted)."""

    def __init__(self, session_id: object) -> None:
        self.session_id = session_id
        super().__init__(f"Session {session_id} not found")


class ValidationError(FlashdeckError):
    """Validation error."""

    def __init__(self, message: str, status_code: int = 400) -> None:
        super().__init__(message, status_code=status_code)


class ServiceError(FlashdeckError):
    """Service layer error."""


class TextExtractionError(ServiceError):
    """The OCR collaborator could not turn the image into text."""

    def __init__(self, reason: str) -> None:
        """Initialize with the reason reported by (or about) the OCR API."""
        self.reason = reason
        super().__init__(f"Text extraction failed: {reason}", status_code=502)
