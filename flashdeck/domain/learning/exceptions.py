"""Learning module domain exceptions."""

from flashdeck.domain.common.exceptions import BusinessRuleViolationError


class NoEligibleCardsError(BusinessRuleViolationError):
    """Raised when the lesson selection leaves no flashcards to review."""

    def __init__(self) -> None:
        super().__init__(
            "no_eligible_cards",
            "No flashcards match the selected lessons. Add cards or pick other lessons.",
        )


class InsufficientCardsError(BusinessRuleViolationError):
    """Raised when a session would contain zero questions."""

    def __init__(self) -> None:
        super().__init__(
            "insufficient_cards",
            "Not enough flashcards to start a session.",
        )


class QuizFinishedError(BusinessRuleViolationError):
    """Raised when an intent reaches a quiz that has already finished."""

    def __init__(self) -> None:
        super().__init__("quiz_finished", "This quiz has already finished.")


class AnswerNotExpectedError(BusinessRuleViolationError):
    """Raised when an answer arrives while feedback for the last one is shown."""

    def __init__(self, index: int) -> None:
        super().__init__(
            "answer_not_expected",
            f"Question {index + 1} has already been answered.",
        )
        self.index = index
