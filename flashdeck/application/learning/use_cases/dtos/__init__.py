"""DTOs for learning use cases."""

from flashdeck.application.learning.use_cases.dtos.import_dtos import BulkImportSummary
from flashdeck.application.learning.use_cases.dtos.lesson_dtos import LessonWithCount
from flashdeck.application.learning.use_cases.dtos.session_dtos import LiveQuiz, LiveStudy

__all__ = ["BulkImportSummary", "LessonWithCount", "LiveQuiz", "LiveStudy"]
