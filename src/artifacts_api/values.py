"""Validated value types.

Each type wraps one primitive that is guaranteed, by construction, to satisfy
its constraints. ``Type.of(raw)`` is the validation point: it either returns a
frozen instance or raises InvalidInput naming the first rule that failed.
Values are built in strict mode, so no coercion happens (``"3"`` is not a page
number and ``True`` is not an integer).

String lengths count code points, not bytes. Patterns run on pydantic's regex
engine, where ``$`` only matches at the very end of the input.
"""

from enum import Enum
from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from artifacts_api.errors import InvalidInput

CODE_PATTERN = r"^[a-zA-Z0-9_-]+$"
MAX_SIZE = 100

V = TypeVar("V", bound="ValidatedValue")
E = TypeVar("E", bound=Enum)


class ValidatedValue(BaseModel):
    """A primitive that satisfied its constraints when it was created."""

    model_config = ConfigDict(frozen=True, strict=True)

    value: Any

    @classmethod
    def of(cls: type[V], raw: Any) -> V:
        """Validate ``raw`` and wrap it, or raise InvalidInput."""
        try:
            return cls(value=raw)
        except ValidationError as exc:
            error = exc.errors()[0]
            raise InvalidInput(cls.__name__, error["type"], raw, error["msg"]) from exc

    def __str__(self) -> str:
        return str(self.value)


class Username(ValidatedValue):
    value: str = Field(min_length=6, max_length=32, pattern=CODE_PATTERN)


class Password(ValidatedValue):
    value: str = Field(min_length=5, max_length=50, pattern=r"^[^\s]+$")


class LoginName(ValidatedValue):
    """Account name sent to the token exchange: any text without ``:``."""

    value: str = Field(min_length=1, pattern=r"^[^:]+$")


class LoginPassword(ValidatedValue):
    value: str = Field(min_length=1)


class Email(ValidatedValue):
    value: str = Field(min_length=1, pattern=r"^\w+@\w+\.\w+$")


class Name(ValidatedValue):
    """Character name."""

    value: str = Field(min_length=1, pattern=CODE_PATTERN)


class Code(ValidatedValue):
    """Identifier of an item, monster, resource, map content or drop."""

    value: str = Field(min_length=1, pattern=CODE_PATTERN)


class Skin(ValidatedValue):
    value: str = Field(min_length=1, pattern=CODE_PATTERN)


class BearerToken(ValidatedValue):
    """Access token sent as ``Authorization: Bearer <token>``."""

    value: str = Field(min_length=1, pattern=r"^[\x21-\x7e]+$")


class Page(ValidatedValue):
    value: int = Field(ge=1)


class Size(ValidatedValue):
    value: int = Field(ge=1, le=MAX_SIZE)


class Level(ValidatedValue):
    value: int = Field(ge=1)


class Coordinate(ValidatedValue):
    # The world map extends into negative coordinates.
    value: int


def enum_value(enum_cls: type[E], raw: Any) -> E:
    """Refine ``raw`` into a member of ``enum_cls`` (by member or by value)."""
    if isinstance(raw, enum_cls):
        return raw
    try:
        return enum_cls(raw)
    except ValueError as exc:
        allowed = ", ".join(str(m.value) for m in enum_cls)
        raise InvalidInput(enum_cls.__name__, "enum", raw, f"expected one of {allowed}") from exc


def optional(value_type: type[V], raw: Any) -> V | None:
    """Validate ``raw`` unless it was left out."""
    return None if raw is None else value_type.of(raw)
