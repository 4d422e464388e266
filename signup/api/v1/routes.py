"""
API v1 routes.

Defines the REST endpoint for user registration.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import JSONResponse

from signup.adapters.locale.catalog import MessageCatalog
from signup.api.dependencies import get_locale, get_message_catalog, get_registration_service
from signup.api.models import (
    ErrorResponse,
    RegisterRequest,
    UserCreatedResponse,
    ValidationErrorResponse,
)
from signup.domain.exceptions import PersistenceFailed, ValidationFailed
from signup.domain.registration import RegistrationService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["v1"])


@router.post(
    "/users",
    response_model=UserCreatedResponse,
    responses={
        400: {"model": ValidationErrorResponse, "description": "Validation error"},
        500: {"model": ErrorResponse, "description": "Account could not be stored"},
    },
    summary="Register a new user",
    description="Submit username, email and password to create an inactive account. "
    "An activation token is sent to the provided email.",
)
def create_user(
    request_data: RegisterRequest,
    locale: str = Depends(get_locale),
    catalog: MessageCatalog = Depends(get_message_catalog),
    service: RegistrationService = Depends(get_registration_service),
) -> UserCreatedResponse | JSONResponse:
    """
    Register a new user and send the activation email.

    - **username**: 4 to 32 characters
    - **email**: Valid email address not used by another account
    - **password**: Min 6 characters with upper and lower case letters and a digit

    Validation messages are localized from the Accept-Language header.
    """
    try:
        service.register(request_data.username, request_data.email, request_data.password)
    except ValidationFailed as exc:
        body = ValidationErrorResponse(validation_errors=catalog.translate(exc.errors, locale))
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=body.model_dump(by_alias=True),
        )
    except PersistenceFailed:
        logger.error("Registration failed: account store error")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Registration failed",
        ) from None

    return UserCreatedResponse(message="User created")
