"""Field markers, field selection and primitive defaults."""

from .defaults import PRIMITIVE_DEFAULTS, is_primitive, primitive_default
from .marker import Mapped
from .selector import FieldDescriptor, declared_fields, mapped_fields, mapping_key


__all__ = [
    "PRIMITIVE_DEFAULTS",
    "FieldDescriptor",
    "Mapped",
    "declared_fields",
    "is_primitive",
    "mapped_fields",
    "mapping_key",
    "primitive_default",
]
