"""Minimal example mapping a record to a dict and back."""

from dataclasses import dataclass
from typing import Annotated

from record_mapper import Mapped, Mapper, MissingValueError


@dataclass
class Account:
    owner: Annotated[str | None, Mapped()] = None
    balance: Annotated[int, Mapped(key="amount")] = 0
    notes: str = ""


def main() -> None:
    """Run a forward and reverse mapping with both policies."""
    mapper = Mapper.Builder().build()
    account = Account(owner="alice", balance=30, notes="not mapped")

    fields_map = mapper.to_map(account)
    print("to_map:", fields_map)

    restored = mapper.to_object({"owner": "bob", "amount": None}, Account)
    print("to_object:", restored)

    strict = Mapper.Builder().with_map_must_supply_all_values().build()
    try:
        strict.to_object({"owner": "carol"}, Account)
    except MissingValueError as exc:
        print("strict:", exc)


if __name__ == "__main__":
    main()
