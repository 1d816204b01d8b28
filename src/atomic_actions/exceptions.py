"""Custom exception hierarchy for atomic actions."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from atomic_actions.action.errors import ValidationErrors


class ActionsError(Exception):
    """Base exception for all atomic-actions errors."""


class ActionValidationError(ActionsError):
    """Raised by ``Action.save()`` when the action failed validation."""

    def __init__(self, errors: ValidationErrors) -> None:
        super().__init__(", ".join(errors.full_messages()))
        self.errors = errors


class ActionNotImplementedError(ActionsError, NotImplementedError):
    """Raised when a concrete action does not override ``execute()``."""


class ActionStateError(ActionsError):
    """Raised when a single-use action is invoked a second time."""


class UnknownAttributeError(ActionsError, TypeError):
    """Raised when an action is constructed with undeclared inputs."""

    def __init__(self, action_name: str, names: list[str]) -> None:
        super().__init__(
            f"{action_name} got unknown attribute(s): {', '.join(names)}"
        )
        self.names = names


class PersistenceError(ActionsError):
    """Base for errors raised by the persistence engine."""


class RecordInvalid(PersistenceError):
    """Raised when a record fails validation before it is written."""

    def __init__(self, message: str, errors: dict[str, list[str]] | None = None) -> None:
        super().__init__(message)
        self.errors = errors or {}


class RecordNotFound(PersistenceError):
    """Raised when a lookup by id finds nothing."""


class ConstraintViolation(PersistenceError):
    """Raised when the database rejects a write (NOT NULL, FOREIGN KEY, ...)."""


class TransactionClosedError(PersistenceError):
    """Raised when a transaction is used after it has been closed."""


class TransactionRolledBack(PersistenceError):
    """Raised when an outer transaction exits after a nested block failed."""
