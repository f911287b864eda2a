"""Field marker used to opt a class attribute into mapping."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Mapped:
    """Opt a field into mapping, optionally under an explicit key.

    Place the marker in the field's ``Annotated`` metadata::

        class Account:
            owner: Annotated[str | None, Mapped()] = None
            balance: Annotated[int, Mapped(key="amount")] = 0

    An empty ``key`` means the field's own name is used as the export key;
    for a private ``__name`` field that is ``__name``, not the mangled
    ``_Account__name``. The marker may also sit on one member of a union,
    e.g. ``Annotated[int, Mapped()] | None``.

    Annotations are evaluated when the class is mapped, so the annotated
    types must be importable at runtime, not only under ``TYPE_CHECKING``.
    """

    key: str = ""
