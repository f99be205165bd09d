"""
Core schemas - shared Pydantic models for API requests and responses.
"""

from ninja import Schema
from pydantic import ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelSchema(Schema):
    """
    Base schema exposing camelCase field names on the wire.

    Python code keeps snake_case attributes; requests accept either form and
    routes declared with by_alias=True render camelCase.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ErrorResponse(Schema):
    """Standard error response format."""

    error: str = Field(..., description="Short machine-readable error label")
    message: str | None = Field(default=None, description="Human-readable detail")

    model_config = ConfigDict(
        json_schema_extra={"example": {"error": "Service not found"}},
    )
