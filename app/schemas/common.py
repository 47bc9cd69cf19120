"""Shared schema bases and response envelopes."""

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class CamelRequest(BaseModel):
    """
    Request body whose keys arrive in camelCase (stationCode) and map to
    snake_case attributes (station_code). Unknown keys are dropped, so the
    declared fields are the allow-list of writable columns.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


class ORMRead(BaseModel):
    """Response row built from an ORM object; keys are the column names."""

    model_config = ConfigDict(from_attributes=True)


class DataResponse(BaseModel, Generic[T]):
    """Single-record envelope: {message, data}."""

    message: str
    data: T


class ListResponse(BaseModel, Generic[T]):
    """Collection envelope: {message, data, count}."""

    message: str
    data: list[T]
    count: int = Field(..., description="Number of rows in data")


class ErrorResponse(BaseModel):
    """Body of every error response."""

    success: bool = False
    message: str
    error: str | None = Field(default=None, description="Exception detail (dev only)")
