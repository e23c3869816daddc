"""Response models for the conversion API."""

from pydantic import BaseModel


class ConvertResponse(BaseModel):
    """Response returned after a successful conversion."""

    url: str


class ErrorResponse(BaseModel):
    """Body returned for every failed request."""

    error: str
    details: str | None = None
