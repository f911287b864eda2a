"""Errors raised while selecting, reading or assigning mapped fields."""

from __future__ import annotations


class MappingError(ValueError):
    """Base class for every failure raised by the mapper."""


class IncorrectlyAnnotatedFieldError(MappingError):
    """A field carries more than one ``Mapped`` marker or cannot be resolved."""

    def __init__(self, msg: str, *, owner: type, field: str | None = None) -> None:
        super().__init__(msg)
        self.owner = owner
        self.field = field


class MissingValueError(MappingError):
    """The field map does not supply a key the mapper requires."""

    def __init__(self, key: str) -> None:
        msg = f"map does not supply a value for field's key: {key}"
        super().__init__(msg)
        self.key = key


class NullPrimitiveError(MappingError, TypeError):
    """``None`` was assigned to a primitive field while null defaulting is off."""

    def __init__(self, field: str, hint: type) -> None:
        msg = f"cannot assign None to primitive field {field!r} of type {hint.__name__}"
        super().__init__(msg)
        self.field = field
        self.hint = hint


class FieldAccessError(MappingError):
    """A field could not be read from or written to its owner."""

    def __init__(self, msg: str, *, field: str) -> None:
        super().__init__(msg)
        self.field = field


class ConstructionError(MappingError):
    """A target class could not be instantiated without arguments."""

    def __init__(self, target: type) -> None:
        msg = f"cannot create an object of type {target.__qualname__}"
        super().__init__(msg)
        self.target = target
