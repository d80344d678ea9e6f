"""
Common API Schemas

Shared Pydantic models used across all API routers.
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """
    Base model for JSON bodies exchanged with the SPA.

    Attributes are snake_case in Python and camelCase on the wire; both
    spellings are accepted on input.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class ErrorResponse(CamelModel):
    """
    Standard error envelope for all API errors.

    Provides consistent error structure across all endpoints, including
    request validation failures and unknown routes.

    Attributes:
        error: Human-readable error message
        status_code: HTTP status code (repeated in the body)
    """

    error: str = Field(description="Human-readable error message")
    status_code: int = Field(description="HTTP status code")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "error": "Task 3fa85f64-5717-4562-b3fc-2c963f66afa6 not found",
                "statusCode": 404,
            }
        }
    )
