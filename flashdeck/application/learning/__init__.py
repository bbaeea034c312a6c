"""
Learning bounded context - Application layer.

Use cases orchestrate lessons, flashcards and sessions through repository
and collaborator protocols; no use case touches the database directly.
"""
