"""record-mapper - map object fields to string-keyed maps and back"""

from ._version import version as __version__
from .errors import (
    ConstructionError,
    FieldAccessError,
    IncorrectlyAnnotatedFieldError,
    MappingError,
    MissingValueError,
    NullPrimitiveError,
)
from .fields import FieldDescriptor, Mapped, declared_fields, mapped_fields
from .mapping import Mapper, MapperConfig


__all__ = [
    "ConstructionError",
    "FieldAccessError",
    "FieldDescriptor",
    "IncorrectlyAnnotatedFieldError",
    "Mapped",
    "Mapper",
    "MapperConfig",
    "MappingError",
    "MissingValueError",
    "NullPrimitiveError",
    "__version__",
    "declared_fields",
    "mapped_fields",
]
