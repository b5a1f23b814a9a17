"""
Auth API routes.

Defines the signup endpoint: POST /api/auth/signup
"""

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from src.api.dependencies import get_signup_service
from src.api.models import ErrorResponse, SignupRequest, SignupResponse, UserResponse
from src.domain.exceptions import UserAlreadyExists
from src.domain.signup import SignupService

router = APIRouter(tags=["auth"])

USER_EXISTS_MESSAGE = "User already exists"


@router.post(
    "/signup",
    response_model=SignupResponse,
    responses={
        400: {"model": ErrorResponse, "description": "User already exists"},
        422: {"description": "Validation error"},
    },
    summary="Sign up a new user",
    description="Create an account from email, password and name. "
    "A one-time passcode is requested for the email once the account is stored.",
)
def signup(
    request_data: SignupRequest,
    service: SignupService = Depends(get_signup_service),
) -> SignupResponse | JSONResponse:
    """
    Create a new account.

    - **email**: Valid email address
    - **password**: Password (8 characters to 72 bytes)
    - **name**: Display name (non-empty)

    Returns the created user on success.
    """
    try:
        account = service.signup(request_data.email, request_data.password, request_data.name)
    except UserAlreadyExists:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": USER_EXISTS_MESSAGE},
        )
    return SignupResponse(user=UserResponse.model_validate(account))
