"""
API request and response models.

Pydantic models for FastAPI endpoint validation and OpenAPI schema generation.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class RegisterRequest(BaseModel):
    """
    Request model for user registration.

    Fields accept any JSON value so that missing or mistyped fields reach
    the registration validator (400 with field messages) instead of being
    rejected by FastAPI (422). Unknown keys, such as a client-supplied
    ``inactive`` flag, are dropped.
    """

    model_config = ConfigDict(extra="ignore")

    username: Any = Field(default=None, description="Username (4-32 characters)")
    email: Any = Field(default=None, description="Email address, unique per account")
    password: Any = Field(
        default=None,
        description="Password (min 6 characters, upper and lower case letter and a digit)",
    )


class UserCreatedResponse(BaseModel):
    """Response model for successful registration."""

    message: str


class ValidationErrorResponse(BaseModel):
    """Response model listing one localized message per failing field."""

    model_config = ConfigDict(populate_by_name=True)

    validation_errors: dict[str, str] = Field(alias="validationErrors")


class ErrorResponse(BaseModel):
    """Standard error response model."""

    detail: str
