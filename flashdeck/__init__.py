"""flashdeck: vocabulary flashcards with quiz and study sessions."""

__version__ = "0.1.0"
