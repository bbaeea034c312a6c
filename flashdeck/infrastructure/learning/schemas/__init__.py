from flashdeck.infrastructure.learning.schemas.flashcard_schemas import (
    Flashcard,
    FlashcardCreateRequest,
    FlashcardCreateResponse,
    FlashcardDeleteResponse,
    FlashcardsListResponse,
)
from flashdeck.infrastructure.learning.schemas.import_schemas import (
    BulkImportRequest,
    BulkImportResponse,
)
from flashdeck.infrastructure.learning.schemas.lesson_schemas import (
    Lesson,
    LessonCreateRequest,
    LessonDeleteResponse,
    LessonResponse,
    LessonsListResponse,
    LessonUpdateRequest,
)
from flashdeck.infrastructure.learning.schemas.quiz_session_schemas import (
    QuizAnswerRequest,
    QuizAnswerResponse,
    QuizHistoryItem,
    QuizHistoryResponse,
    QuizQuestion,
    QuizSessionState,
    QuizStartRequest,
)
from flashdeck.infrastructure.learning.schemas.study_session_schemas import (
    StudyCard,
    StudySessionState,
    StudyStartRequest,
)

__all__ = [
    "BulkImportRequest",
    "BulkImportResponse",
    "Flashcard",
    "FlashcardCreateRequest",
    "FlashcardCreateResponse",
    "FlashcardDeleteResponse",
    "FlashcardsListResponse",
    "Lesson",
    "LessonCreateRequest",
    "LessonDeleteResponse",
    "LessonResponse",
    "LessonUpdateRequest",
    "LessonsListResponse",
    "QuizAnswerRequest",
    "QuizAnswerResponse",
    "QuizHistoryItem",
    "QuizHistoryResponse",
    "QuizQuestion",
    "QuizSessionState",
    "QuizStartRequest",
    "StudyCard",
    "StudySessionState",
    "StudyStartRequest",
]
