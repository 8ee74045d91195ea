"""
Response envelope DTOs - Application Layer

Every response body carries ``success`` and ``message``; JSON keys are
camelCase while Python attributes stay snake_case.
"""

from datetime import datetime, timezone
from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class CamelModel(BaseModel):
    """Base model serializing to camelCase and accepting either spelling."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class EnvelopeDTO(CamelModel):
    """Fields shared by every response."""

    success: bool = Field(default=True, description="Whether the operation succeeded")
    message: str = Field(description="Human readable outcome")
    timestamp: datetime = Field(
        default_factory=utc_now, description="When the response was generated"
    )


class ErrorResponseDTO(EnvelopeDTO):
    """Envelope returned for every failed request."""

    success: bool = Field(default=False, description="Always false")
    details: Dict[str, Any] = Field(
        default_factory=dict, description="Structured context about the failure"
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "success": False,
                "message": "brightness must be between 0 and 100, got 150",
                "timestamp": "2025-01-15T12:00:00Z",
                "details": {"field": "brightness", "value": 150},
            }
        }
    )
