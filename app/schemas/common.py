"""Response envelopes shared by the resource endpoints."""

from typing import Generic, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class DataResponse(BaseModel, Generic[T]):
    success: bool = True
    message: str | None = None
    data: T


class ListResponse(BaseModel, Generic[T]):
    success: bool = True
    data: list[T]
    total: int
