"""
Learning bounded context - Domain layer.

This context handles vocabulary review:
- Lessons and the flashcards they group
- Quiz sessions with scoring, timing and replay
- Flip-card study sessions
- Bulk flashcard entry from text

Aggregates:
- Lesson: groups flashcards and owns their visibility
- QuizRunner: one live, scored quiz
"""
