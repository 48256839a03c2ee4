"""Envelopes shared by every endpoint that returns a body."""

from typing import Generic, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


class ResponseSchema(BaseModel, Generic[T]):
    """Single item envelope: ``{"data": T}``."""

    data: T


class PaginatedResponseSchema(BaseModel, Generic[T]):
    """Paginated list envelope."""

    data: list[T]
    total: int | None = Field(default=None, ge=0)
    page: int = Field(ge=1)
    size: int = Field(ge=1)
    pages: int | None = Field(default=None, ge=0)


class MessageSchema(BaseModel):
    message: str
