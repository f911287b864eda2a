"""Forward and reverse mapping between objects and field maps."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Self, TypeVar, overload

from record_mapper.errors import ConstructionError, MissingValueError
from record_mapper.fields import mapped_fields, primitive_default


if TYPE_CHECKING:
    from collections.abc import Mapping, MutableMapping

    from record_mapper.fields import FieldDescriptor


logger = logging.getLogger(__name__)

_T = TypeVar("_T")


@dataclass(frozen=True, slots=True)
class MapperConfig:
    """Policies applied by a ``Mapper`` when populating objects.

    Attributes
    ----------
    primitive_accepts_null
        Replace ``None`` destined for a ``bool``/``int``/``float``/``complex``
        field with that type's zero value instead of rejecting it.
    map_must_supply_all_values
        Require every mapped field's key to be present in the input map.
    """

    primitive_accepts_null: bool = True
    map_must_supply_all_values: bool = False


class Mapper:
    """Map objects to string-keyed field maps and back."""

    __slots__ = ("_config",)

    class Builder:
        """Collect mapper policies and build an immutable ``Mapper``."""

        def __init__(self) -> None:
            super().__init__()
            self._primitive_accepts_null = True
            self._map_must_supply_all_values = False

        def with_primitive_not_null(self) -> Self:
            """Reject ``None`` for primitive fields instead of defaulting it."""
            self._primitive_accepts_null = False
            return self

        def with_map_must_supply_all_values(self) -> Self:
            """Fail when the input map lacks the key of any mapped field."""
            self._map_must_supply_all_values = True
            return self

        def build(self) -> Mapper:
            config = MapperConfig(
                primitive_accepts_null=self._primitive_accepts_null,
                map_must_supply_all_values=self._map_must_supply_all_values,
            )
            return Mapper(config)

    def __init__(self, config: MapperConfig | None = None) -> None:
        super().__init__()
        self._config = config if config is not None else MapperConfig()

    @property
    def config(self) -> MapperConfig:
        return self._config

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._config!r})"

    def to_map(self, value: object, output_map: MutableMapping[str, Any] | None = None) -> MutableMapping[str, Any]:
        """Store the mapped fields of ``value`` under their export keys.

        When ``output_map`` is given it is updated in place and returned;
        entries not written by ``value`` are left untouched.
        """
        target: MutableMapping[str, Any] = {} if output_map is None else output_map
        fields = mapped_fields(type(value))
        logger.debug("mapping %d fields of %s", len(fields), type(value).__qualname__)
        for field in fields:
            target[field.key] = field.read(value)
        return target

    @overload
    def to_object(self, fields_map: Mapping[str, Any], target: type[_T]) -> _T: ...

    @overload
    def to_object(self, fields_map: Mapping[str, Any], target: _T) -> _T: ...

    def to_object(self, fields_map: Mapping[str, Any], target: Any) -> Any:
        """Populate an object from ``fields_map``.

        A class is instantiated with no arguments first; any other object is
        populated in place. The populated object is returned.
        """
        if isinstance(target, type):
            target = self._create(target)
        fields = mapped_fields(type(target))
        logger.debug("populating %d fields of %s", len(fields), type(target).__qualname__)
        for field in fields:
            field.write(target, self._resolve(field, fields_map))
        return target

    @staticmethod
    def _create(target: type[_T]) -> _T:
        try:
            return target()
        except Exception as exc:
            raise ConstructionError(target) from exc

    def _resolve(self, field: FieldDescriptor, fields_map: Mapping[str, Any]) -> Any:
        if field.key not in fields_map:
            if self._config.map_must_supply_all_values:
                raise MissingValueError(field.key)
            value = None
        else:
            value = fields_map[field.key]

        if value is None and field.is_primitive and self._config.primitive_accepts_null:
            return primitive_default(field.hint)
        return value
