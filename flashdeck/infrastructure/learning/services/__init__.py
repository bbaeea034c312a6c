from flashdeck.infrastructure.learning.services.asyncio_timer_scheduler import (
    AsyncioTimerScheduler,
)
from flashdeck.infrastructure.learning.services.blinker_change_notifier import (
    BlinkerChangeNotifier,
)
from flashdeck.infrastructure.learning.services.evicted_quiz_recorder import EvictedQuizRecorder
from flashdeck.infrastructure.learning.services.live_session_registry import LiveSessionRegistry
from flashdeck.infrastructure.learning.services.ocr_space_text_extraction_service import (
    OcrSpaceTextExtractionService,
)

__all__ = [
    "AsyncioTimerScheduler",
    "BlinkerChangeNotifier",
    "EvictedQuizRecorder",
    "LiveSessionRegistry",
    "OcrSpaceTextExtractionService",
]
