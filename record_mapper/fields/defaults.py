"""Zero values substituted for ``None`` in primitive fields."""

from __future__ import annotations

from types import MappingProxyType
from typing import Any


PRIMITIVE_DEFAULTS: MappingProxyType[type, Any] = MappingProxyType(
    {
        bool: False,
        int: 0,
        float: 0.0,
        complex: 0j,
    }
)


def is_primitive(hint: Any) -> bool:
    """Return True when ``hint`` is a non-nullable primitive type."""
    return isinstance(hint, type) and hint in PRIMITIVE_DEFAULTS


def primitive_default(hint: type) -> Any:
    """Return the zero value for a primitive type."""
    try:
        return PRIMITIVE_DEFAULTS[hint]
    except KeyError:
        msg = f"not a primitive type: {hint!r}"
        raise TypeError(msg) from None
