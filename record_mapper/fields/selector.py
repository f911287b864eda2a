"""Selection of declared fields and derivation of their export keys."""

from __future__ import annotations

import inspect
import logging
from dataclasses import dataclass
from types import UnionType
from typing import Annotated, Any, ClassVar, Union, get_args, get_origin

from record_mapper.errors import FieldAccessError, IncorrectlyAnnotatedFieldError, NullPrimitiveError

from .defaults import is_primitive
from .marker import Mapped


logger = logging.getLogger(__name__)

UNMAPPED = ""


def _unwrap(annotation: Any) -> tuple[Any, tuple[Mapped, ...], bool]:
    """Strip ``Annotated`` and ``ClassVar`` layers from an annotation.

    Markers placed on a union member, as in ``Annotated[int, Mapped()] | None``,
    count as markers of the field.

    Returns the bare type, the ``Mapped`` markers found on the way and
    whether the field is shared (class-level).
    """
    hint = annotation
    markers: list[Mapped] = []
    shared = False
    while True:
        origin = get_origin(hint)
        if origin is Annotated:
            markers.extend(meta for meta in hint.__metadata__ if isinstance(meta, Mapped))
            hint = hint.__origin__
        elif origin is ClassVar:
            shared = True
            hint = get_args(hint)[0]
        elif hint is ClassVar:
            shared = True
            hint = Any
        elif origin is Union or origin is UnionType:
            members: list[Any] = []
            member_markers: list[Mapped] = []
            for member in get_args(hint):
                member_hint, found, _ = _unwrap(member)
                member_markers.extend(found)
                members.append(member_hint)
            if member_markers:
                markers.extend(member_markers)
                hint = Union[tuple(members)]
            return hint, tuple(markers), shared
        else:
            return hint, tuple(markers), shared


def _own_annotations(owner: type) -> dict[str, Any]:
    try:
        return inspect.get_annotations(owner, eval_str=True)
    except (NameError, SyntaxError, TypeError, AttributeError) as exc:
        msg = (
            f"cannot resolve field annotations of {owner.__qualname__}: {exc}; "
            "annotated types must be importable at runtime"
        )
        raise IncorrectlyAnnotatedFieldError(msg, owner=owner) from exc


def _unmangled(owner: type, name: str) -> str:
    # private names are stored as _Owner__name
    prefix = f"_{owner.__name__.lstrip('_')}__"
    if prefix != "___" and name.startswith(prefix):
        return name[len(prefix) - 2 :]
    return name


def _key_from_markers(owner: type, name: str, markers: tuple[Mapped, ...]) -> str:
    if not markers:
        return UNMAPPED
    if len(markers) > 1:
        msg = f"incorrectly annotated field: {owner.__qualname__}.{name} carries {len(markers)} Mapped markers"
        raise IncorrectlyAnnotatedFieldError(msg, owner=owner, field=name)
    return markers[0].key or _unmangled(owner, name)


def mapping_key(owner: type, name: str, annotation: Any) -> str:
    """Return the export key of a field, or an empty string when it is unmapped."""
    _, markers, _ = _unwrap(annotation)
    return _key_from_markers(owner, name, markers)


@dataclass(frozen=True, slots=True)
class FieldDescriptor:
    """A field declared directly on ``owner`` together with its export key."""

    owner: type
    name: str
    key: str
    hint: Any
    shared: bool = False

    @property
    def is_mapped(self) -> bool:
        return self.key != UNMAPPED

    @property
    def is_primitive(self) -> bool:
        return is_primitive(self.hint)

    def read(self, obj: object) -> Any:
        """Return the current value of this field on ``obj``."""
        source = self.owner if self.shared else obj
        if self.shared:
            logger.debug("reading shared field %s.%s", self.owner.__qualname__, self.name)
        try:
            return getattr(source, self.name)
        except AttributeError as exc:
            msg = f"inaccessible field: {self.owner.__qualname__}.{self.name}"
            raise FieldAccessError(msg, field=self.name) from exc

    def write(self, obj: object, value: Any) -> None:
        """Assign ``value`` to this field on ``obj``.

        ``None`` is rejected for primitive fields; callers that want a zero
        value substituted must do so before writing.
        """
        if value is None and self.is_primitive:
            raise NullPrimitiveError(self.name, self.hint)
        target = self.owner if self.shared else obj
        if self.shared:
            logger.debug("writing shared field %s.%s", self.owner.__qualname__, self.name)
        try:
            setattr(target, self.name, value)
        except (AttributeError, TypeError) as exc:
            msg = f"cannot set field's value: {self.owner.__qualname__}.{self.name}"
            raise FieldAccessError(msg, field=self.name) from exc


def declared_fields(owner: type) -> tuple[FieldDescriptor, ...]:
    """Return the fields declared directly on ``owner`` in declaration order.

    Fields annotated only on base classes are not included. Unmapped fields
    are included with an empty key.
    """
    descriptors: list[FieldDescriptor] = []
    for name, annotation in _own_annotations(owner).items():
        hint, markers, shared = _unwrap(annotation)
        key = _key_from_markers(owner, name, markers)
        descriptors.append(FieldDescriptor(owner=owner, name=name, key=key, hint=hint, shared=shared))
    return tuple(descriptors)


def mapped_fields(owner: type) -> tuple[FieldDescriptor, ...]:
    """Return only the declared fields that carry a ``Mapped`` marker."""
    return tuple(field for field in declared_fields(owner) if field.is_mapped)
