"""Reusable validation rules for action inputs."""

from __future__ import annotations

from typing import Annotated, Any, TypeVar

from pydantic import AfterValidator, StringConstraints

T = TypeVar("T")

# "   " and "" are both rejected.
NonBlankStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


def _require_present(value: Any) -> Any:
    if value is None:
        raise ValueError("must be present")
    if hasattr(value, "__len__") and len(value) == 0:
        raise ValueError("must not be empty")
    return value


Present = Annotated[T, AfterValidator(_require_present)]
