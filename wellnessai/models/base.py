"""Shared Pydantic base for wire models.

The REST API speaks camelCase JSON; Python code uses snake_case attributes.
"""

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class CamelModel(BaseModel):
    """Base model that reads and writes camelCase aliases."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


class Envelope(CamelModel, Generic[T]):
    """``{status, message, data}`` wrapper used by the coaching API.

    Attributes:
        status: HTTP-like status code echoed by the server.
        message: Human readable status message.
        data: The actual payload.
    """

    status: int = 200
    message: str = ""
    data: T
