"""DTOs for bulk flashcard import use cases."""

from dataclasses import dataclass, field

from flashdeck.domain.learning.entities.flashcard import Flashcard


@dataclass
class BulkImportSummary:
    """Outcome of a bulk import: what was created and what was rejected."""

    flashcards: list[Flashcard] = field(default_factory=list)
    failed_lines: list[str] = field(default_factory=list)
    extracted_text: str | None = None

    @property
    def imported_count(self) -> int:
        return len(self.flashcards)

    @property
    def failed_count(self) -> int:
        return len(self.failed_lines)

    @property
    def message(self) -> str:
        return f"{self.imported_count} imported, {self.failed_count} failed"
