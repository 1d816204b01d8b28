"""Validation error collection populated by ``Action.is_valid()``."""

from __future__ import annotations

from collections.abc import Iterator


class ValidationErrors:
    """Ordered mapping of field name to validation messages.

    Errors that do not belong to a single input are stored under
    :attr:`BASE`. Fields keep the order in which their first error was added.
    """

    BASE = "base"

    def __init__(self) -> None:
        self._messages: dict[str, list[str]] = {}

    def add(self, field: str, message: str) -> None:
        self._messages.setdefault(field, []).append(message)

    def __getitem__(self, field: str) -> list[str]:
        return list(self._messages.get(field, []))

    def __contains__(self, field: object) -> bool:
        return field in self._messages

    def __iter__(self) -> Iterator[str]:
        return iter(self._messages)

    def __len__(self) -> int:
        return sum(len(msgs) for msgs in self._messages.values())

    def __bool__(self) -> bool:
        return bool(self._messages)

    def __repr__(self) -> str:
        return f"ValidationErrors({self._messages!r})"

    def full_messages(self) -> list[str]:
        messages: list[str] = []
        for field, msgs in self._messages.items():
            for msg in msgs:
                messages.append(msg if field == self.BASE else f"{field}: {msg}")
        return messages

    def to_dict(self) -> dict[str, list[str]]:
        return {field: list(msgs) for field, msgs in self._messages.items()}
