"""Pydantic v2 schemas for rendered payloads."""

from pydantic import BaseModel, ConfigDict


class ErrorPayload(BaseModel):
    """Body of every error response produced by the status helpers."""
    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {"message": "[missing field x]"}
        }
    )

    message: str

    def __str__(self) -> str:
        return self.message
