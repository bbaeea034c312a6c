"""Immutable domain values compared by their fields."""


class ValueObject:
    """
    Mixin for frozen dataclasses that have no identity of their own.

    Equality and hashing come from the dataclass. Subclasses validate in
    ``__post_init__`` and describe how they cross the storage and API
    boundary through ``to_primitive``.
    """

    def to_primitive(self) -> object:
        fields = vars(self)
        if len(fields) == 1:
            return next(iter(fields.values()))
        return dict(fields)
