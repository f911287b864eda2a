"""Object to field map conversion."""

from .mapper import Mapper, MapperConfig


__all__ = ["Mapper", "MapperConfig"]
