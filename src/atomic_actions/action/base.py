"""Action base class: validate, then execute inside one transaction."""

from __future__ import annotations

import enum
import logging
import typing
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, ValidationError, create_model

from atomic_actions.action.errors import ValidationErrors
from atomic_actions.db.transaction import Transaction, TransactionScope
from atomic_actions.exceptions import (
    ActionNotImplementedError,
    ActionStateError,
    ActionValidationError,
    UnknownAttributeError,
)

logger = logging.getLogger(__name__)


class ActionState(str, enum.Enum):
    CREATED = "CREATED"
    VALID = "VALID"
    INVALID = "INVALID"
    RUNNING = "RUNNING"
    FAILED = "FAILED"
    COMMITTED = "COMMITTED"
    DONE = "DONE"


_EXECUTED_STATES = frozenset(
    {ActionState.RUNNING, ActionState.FAILED, ActionState.COMMITTED, ActionState.DONE}
)


class Action:
    """A single-use unit of business logic guarded by validation.

    Subclasses declare their inputs as class annotations (pydantic types and
    ``Field(...)`` defaults are honoured) and override :meth:`execute`::

        class CreateUser(Action):
            name: NonBlankStr

            def execute(self, tx: Transaction) -> None:
                self.user = create_user(tx, self.name)

        action = CreateUser(name="foo")
        action.save(db)

    Construction never validates. :meth:`is_valid` evaluates the declared
    rules plus the :meth:`validate` hook. :meth:`try_save` returns ``False``
    on validation failure but lets anything raised by :meth:`execute`
    propagate after the transaction has rolled back.
    """

    errors: ValidationErrors
    state: ActionState

    _inputs_model: ClassVar[type[BaseModel] | None] = None

    def __init__(self, **inputs: Any) -> None:
        model = type(self).inputs_model()
        unknown = sorted(set(inputs) - set(model.model_fields))
        if unknown:
            raise UnknownAttributeError(type(self).__name__, unknown)
        for name, field in model.model_fields.items():
            if name in inputs:
                value = inputs[name]
            elif field.is_required():
                value = None
            else:
                value = field.get_default(call_default_factory=True)
            setattr(self, name, value)
        self.errors = ValidationErrors()
        self.state = ActionState.CREATED

    @classmethod
    def inputs_model(cls) -> type[BaseModel]:
        """Pydantic model holding the validation rules for this action's inputs."""
        cached = cls.__dict__.get("_inputs_model")
        if cached is not None:
            return cached

        own = set(Action.__annotations__)
        fields: dict[str, Any] = {}
        for name, annotation in typing.get_type_hints(cls, include_extras=True).items():
            if name.startswith("_") or name in own:
                continue
            if typing.get_origin(annotation) is ClassVar:
                continue
            fields[name] = (annotation, _class_default(cls, name))

        model = create_model(
            f"{cls.__name__}Inputs",
            __config__=ConfigDict(arbitrary_types_allowed=True),
            **fields,
        )
        cls._inputs_model = model
        return model

    @property
    def executed(self) -> bool:
        return self.state in _EXECUTED_STATES

    def is_valid(self) -> bool:
        errors = ValidationErrors()
        self.errors = errors

        model = type(self).inputs_model()
        data: dict[str, Any] = {}
        for name, field in model.model_fields.items():
            value = getattr(self, name)
            # Unset required inputs are reported as missing, not as type errors.
            if value is None and field.is_required():
                continue
            data[name] = value
        try:
            model.model_validate(data)
        except ValidationError as exc:
            for err in exc.errors(include_url=False):
                loc = err["loc"]
                errors.add(str(loc[0]) if loc else ValidationErrors.BASE, err["msg"])

        self.validate()

        if not self.executed:
            self.state = ActionState.INVALID if errors else ActionState.VALID
        return not errors

    def validate(self) -> None:
        """Hook for custom rules; add messages to ``self.errors``."""

    def try_save(self, scope: TransactionScope) -> bool:
        if self.executed:
            raise ActionStateError(
                f"{type(self).__name__} already executed (state {self.state.value})"
            )
        if not self.is_valid():
            logger.debug(
                "%s failed validation: %s",
                type(self).__name__,
                ", ".join(self.errors.full_messages()),
            )
            return False

        self.state = ActionState.RUNNING
        try:
            with scope.transaction() as tx:
                self.execute(tx)
        except Exception as exc:
            self.state = ActionState.FAILED
            logger.warning(
                "%s failed during execute, transaction rolled back: %s",
                type(self).__name__,
                exc,
            )
            raise
        self.state = ActionState.COMMITTED

        self.after_execute()
        self.state = ActionState.DONE
        return True

    def save(self, scope: TransactionScope) -> None:
        if not self.try_save(scope):
            raise ActionValidationError(self.errors)

    def execute(self, tx: Transaction) -> None:
        raise ActionNotImplementedError(
            f"{type(self).__name__} must implement execute()"
        )

    def after_execute(self) -> None:
        """Runs once after a committed execute(); not part of the transaction."""


def _class_default(cls: type, name: str) -> Any:
    for klass in cls.__mro__:
        if name in klass.__dict__:
            return klass.__dict__[name]
    return ...
