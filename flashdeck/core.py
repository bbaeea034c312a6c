from dependency_injector import containers, providers
from sqlalchemy.orm import Session

from flashdeck.application.learning.use_cases.flashcards.bulk_import_flashcards_use_case import (
    BulkImportFlashcardsUseCase,
)
from flashdeck.application.learning.use_cases.flashcards.create_flashcard_use_case import (
    CreateFlashcardUseCase,
)
from flashdeck.application.learning.use_cases.flashcards.delete_flashcard_use_case import (
    DeleteFlashcardUseCase,
)
from flashdeck.application.learning.use_cases.flashcards.get_flashcards_use_case import (
    GetFlashcardsUseCase,
)
from flashdeck.application.learning.use_cases.flashcards.import_from_image_use_case import (
    ImportFlashcardsFromImageUseCase,
)
from flashdeck.application.learning.use_cases.lessons.create_lesson_use_case import (
    CreateLessonUseCase,
)
from flashdeck.application.learning.use_cases.lessons.delete_lesson_use_case import (
    DeleteLessonUseCase,
)
from flashdeck.application.learning.use_cases.lessons.get_lessons_use_case import (
    GetLessonsUseCase,
)
from flashdeck.application.learning.use_cases.lessons.update_lesson_use_case import (
    UpdateLessonUseCase,
)
from flashdeck.application.learning.use_cases.sessions.get_quiz_history_use_case import (
    GetQuizHistoryUseCase,
)
from flashdeck.application.learning.use_cases.sessions.quiz_session_use_case import (
    QuizSessionUseCase,
)
from flashdeck.application.learning.use_cases.sessions.start_quiz_use_case import (
    StartQuizUseCase,
)
from flashdeck.application.learning.use_cases.sessions.study_session_use_case import (
    StudySessionUseCase,
)
from flashdeck.config import get_settings
from flashdeck.database import open_session
from flashdeck.infrastructure.learning.repositories import (
    FlashcardRepository,
    LessonRepository,
    QuizSessionRecordRepository,
)
from flashdeck.infrastructure.learning.services import (
    AsyncioTimerScheduler,
    BlinkerChangeNotifier,
    EvictedQuizRecorder,
    LiveSessionRegistry,
    OcrSpaceTextExtractionService,
)


class Container(containers.DeclarativeContainer):
    """Dependency injection container."""

    settings = providers.Singleton(get_settings)

    # Declare db as a dependency that will be provided at runtime
    db = providers.Dependency(instance_of=Session)

    # Repositories
    lesson_repository = providers.Factory(LessonRepository, db=db)
    flashcard_repository = providers.Factory(FlashcardRepository, db=db)
    quiz_session_record_repository = providers.Factory(QuizSessionRecordRepository, db=db)

    # Application-scoped services (no db)
    change_notifier = providers.Singleton(BlinkerChangeNotifier)
    timer_scheduler = providers.Singleton(AsyncioTimerScheduler)
    evicted_quiz_recorder = providers.Singleton(EvictedQuizRecorder, session_factory=open_session)
    live_session_registry = providers.Singleton(
        LiveSessionRegistry,
        ttl_seconds=settings.provided.LIVE_SESSION_TTL_SECONDS,
        on_quiz_evicted=evicted_quiz_recorder,
    )
    text_extraction_service = providers.Singleton(
        OcrSpaceTextExtractionService,
        api_url=settings.provided.OCR_API_URL,
        api_key=settings.provided.OCR_API_KEY,
        language=settings.provided.OCR_LANGUAGE,
        timeout=settings.provided.OCR_TIMEOUT_SECONDS,
    )

    # Lessons
    create_lesson_use_case = providers.Factory(
        CreateLessonUseCase,
        lesson_repository=lesson_repository,
        change_notifier=change_notifier,
    )
    get_lessons_use_case = providers.Factory(
        GetLessonsUseCase,
        lesson_repository=lesson_repository,
    )
    update_lesson_use_case = providers.Factory(
        UpdateLessonUseCase,
        lesson_repository=lesson_repository,
        flashcard_repository=flashcard_repository,
        change_notifier=change_notifier,
    )
    delete_lesson_use_case = providers.Factory(
        DeleteLessonUseCase,
        lesson_repository=lesson_repository,
        change_notifier=change_notifier,
    )

    # Flashcards
    create_flashcard_use_case = providers.Factory(
        CreateFlashcardUseCase,
        flashcard_repository=flashcard_repository,
        lesson_repository=lesson_repository,
        change_notifier=change_notifier,
    )
    get_flashcards_use_case = providers.Factory(
        GetFlashcardsUseCase,
        flashcard_repository=flashcard_repository,
        lesson_repository=lesson_repository,
    )
    delete_flashcard_use_case = providers.Factory(
        DeleteFlashcardUseCase,
        flashcard_repository=flashcard_repository,
        change_notifier=change_notifier,
    )
    bulk_import_flashcards_use_case = providers.Factory(
        BulkImportFlashcardsUseCase,
        flashcard_repository=flashcard_repository,
        lesson_repository=lesson_repository,
        change_notifier=change_notifier,
    )
    import_flashcards_from_image_use_case = providers.Factory(
        ImportFlashcardsFromImageUseCase,
        lesson_repository=lesson_repository,
        text_extraction_service=text_extraction_service,
        bulk_import_use_case=bulk_import_flashcards_use_case,
    )

    # Live sessions
    start_quiz_use_case = providers.Factory(
        StartQuizUseCase,
        flashcard_repository=flashcard_repository,
        session_store=live_session_registry,
        scheduler=timer_scheduler,
        feedback_delay=settings.provided.QUIZ_FEEDBACK_SECONDS,
        default_question_count=settings.provided.QUIZ_DEFAULT_QUESTION_COUNT,
        max_time_limit=settings.provided.QUIZ_MAX_TIME_LIMIT_SECONDS,
    )
    quiz_session_use_case = providers.Factory(
        QuizSessionUseCase,
        session_store=live_session_registry,
        record_repository=quiz_session_record_repository,
    )
    get_quiz_history_use_case = providers.Factory(
        GetQuizHistoryUseCase,
        record_repository=quiz_session_record_repository,
    )
    study_session_use_case = providers.Factory(
        StudySessionUseCase,
        flashcard_repository=flashcard_repository,
        session_store=live_session_registry,
        default_wrap=settings.provided.STUDY_WRAP_AROUND,
    )


container = Container()
