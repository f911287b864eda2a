"""Record classes shared by the mapper tests."""

from dataclasses import dataclass
from typing import Annotated, ClassVar

from record_mapper import Mapped


class Sample:
    string_field: Annotated[str | None, Mapped()] = None
    integer_field: Annotated[int | None, Mapped()] = None
    int_field: Annotated[int, Mapped()] = 0
    long_field: Annotated[int | None, Mapped(key="someLong")] = None
    o: Annotated[object, Mapped()] = None
    shared_string: ClassVar[Annotated[str | None, Mapped()]] = None
    string_list: Annotated[list[str] | None, Mapped()] = None
    unmapped_field: object = None

    def __init__(self) -> None:
        self.string_field = "text"
        self.integer_field = 42
        self.int_field = 256
        self.long_field = 789
        self.o = None
        self.string_list = ["elem1"]
        self.unmapped_field = "hidden"


class SampleSubclass(Sample):
    subclass_field: Annotated[str | None, Mapped()] = None

    def __init__(self) -> None:
        super().__init__()
        self.subclass_field = "subclass"


class NoFields:
    pass


class Primitives:
    flag: Annotated[bool, Mapped()] = True
    count: Annotated[int, Mapped()] = 7
    ratio: Annotated[float, Mapped()] = 1.5
    phase: Annotated[complex, Mapped()] = 1j
    maybe_count: Annotated[int | None, Mapped()] = 7


class DoublyMarked:
    value: Annotated[str, Mapped(), Mapped(key="other")] = "x"


class NestedDoublyMarked:
    value: Annotated[Annotated[str, Mapped()], Mapped()] = "x"


class Colliding:
    first: Annotated[str, Mapped(key="same")] = "first"
    second: Annotated[str, Mapped(key="same")] = "second"


@dataclass
class Point:
    x: Annotated[int, Mapped()] = 0
    y: Annotated[int, Mapped()] = 0
    label: Annotated[str | None, Mapped(key="name")] = None


@dataclass(frozen=True)
class FrozenPoint:
    x: Annotated[int, Mapped()] = 0


class RequiresArgument:
    value: Annotated[str | None, Mapped()] = None

    def __init__(self, value: str) -> None:
        self.value = value


class FailingConstructor:
    value: Annotated[str | None, Mapped()] = None

    def __init__(self) -> None:
        msg = "constructor failed"
        raise RuntimeError(msg)


class Unassigned:
    value: Annotated[str, Mapped()]


class ReadOnly:
    value: Annotated[str, Mapped()]

    def __init__(self) -> None:
        self._value = "fixed"

    @property
    def value(self) -> str:
        return self._value


class UnionMarked:
    count: Annotated[int, Mapped()] | None = 3
    label: Annotated[str, Mapped(key="name")] | None = None


class UnionDoublyMarked:
    value: Annotated[int, Mapped()] | Annotated[str, Mapped()] = 0


class PrivateField:
    __secret: Annotated[str | None, Mapped()] = "hidden"

    @property
    def secret(self) -> str | None:
        return self.__secret
