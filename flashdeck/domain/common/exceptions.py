"""
Errors raised by the domain layer.

``flashdeck.main`` maps them onto HTTP statuses: rule violations become
409 (422 for the empty-deck rules), missing entities 404 and everything
else 400.
"""


class DomainError(Exception):
    """Base class for every error the domain raises."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(DomainError):
    """A value handed to the domain is malformed, e.g. a negative time limit."""

    def __init__(self, message: str, field: str | None = None, value: object = None) -> None:
        super().__init__(message)
        self.field = field
        self.value = value


class EntityNotFoundError(DomainError):
    def __init__(self, entity_type: str, entity_id: object) -> None:
        super().__init__(f"{entity_type} with id {entity_id} not found")
        self.entity_type = entity_type
        self.entity_id = entity_id


class BusinessRuleViolationError(DomainError):
    """
    An intent is not allowed in the current state.

    ``rule`` is a stable snake_case name that API clients can branch on,
    e.g. ``quiz_finished``.
    """

    def __init__(self, rule: str, message: str | None = None) -> None:
        super().__init__(message or f"Business rule violated: {rule}")
        self.rule = rule


class InvariantViolationError(DomainError):
    """An aggregate would end up in a state it must never be in."""

    def __init__(self, aggregate: str, invariant: str) -> None:
        super().__init__(f"Invariant violation in {aggregate}: {invariant}")
        self.aggregate = aggregate
        self.invariant = invariant
