"""Authentication API routes.

Provides endpoints for registration, sign-in, sign-out and the current
session. Route handlers translate :class:`AuthFailure` results into HTTP
responses and attach or clear the session cookie.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Response, status
from fastapi.responses import JSONResponse

from latchkey.core.logging import get_logger
from latchkey.domain.entities import AuthFailure
from latchkey.domain.exceptions import (
    DuplicateEmailError,
    HashingFailureError,
    InvalidPasswordError,
    StorageUnavailableError,
    TokenExpiredError,
    TokenInvalidError,
    UserNotFoundError,
)
from latchkey.domain.services import AuthenticationService
from latchkey.infrastructure.api.dependencies import (
    get_auth_service,
    get_cookie_policy,
    get_jwt_service,
    get_session_token,
)
from latchkey.infrastructure.api.schemas import (
    AccountResponse,
    ErrorResponse,
    LoginRequest,
    LoginResponse,
    MessageResponse,
    RegisterRequest,
)
from latchkey.infrastructure.auth import JWTService, SessionCookiePolicy

logger = get_logger(__name__)

router = APIRouter()

# Both credential failures are reported identically so a client cannot tell
# whether an email is registered.
INVALID_CREDENTIALS = ("invalid_credentials", "Invalid credentials")

FAILURE_STATUS = {
    DuplicateEmailError: status.HTTP_409_CONFLICT,
    UserNotFoundError: status.HTTP_401_UNAUTHORIZED,
    InvalidPasswordError: status.HTTP_401_UNAUTHORIZED,
    TokenExpiredError: status.HTTP_401_UNAUTHORIZED,
    TokenInvalidError: status.HTTP_401_UNAUTHORIZED,
    HashingFailureError: status.HTTP_500_INTERNAL_SERVER_ERROR,
    StorageUnavailableError: status.HTTP_503_SERVICE_UNAVAILABLE,
}


def failure_response(failure: AuthFailure) -> JSONResponse:
    """Map a failed result to a JSON error response."""
    error = failure.error
    if isinstance(error, (UserNotFoundError, InvalidPasswordError)):
        code, message = INVALID_CREDENTIALS
    else:
        code, message = error.code, error.message

    status_code = FAILURE_STATUS.get(type(error), status.HTTP_500_INTERNAL_SERVER_ERROR)
    headers = {"WWW-Authenticate": "Bearer"} if status_code == 401 else None
    if isinstance(error, StorageUnavailableError):
        headers = {"Retry-After": "1"}
    return JSONResponse(
        status_code=status_code,
        content={"error": code, "message": message},
        headers=headers,
    )


@router.post(
    "/register",
    status_code=status.HTTP_201_CREATED,
    response_model=AccountResponse,
    responses={
        409: {"model": ErrorResponse, "description": "Email already registered"},
        500: {"model": ErrorResponse, "description": "Password could not be hashed"},
        503: {"model": ErrorResponse, "description": "Account storage unavailable"},
    },
)
async def register(
    request: RegisterRequest,
    response: Response,
    service: Annotated[AuthenticationService, Depends(get_auth_service)],
    policy: Annotated[SessionCookiePolicy, Depends(get_cookie_policy)],
) -> AccountResponse | JSONResponse:
    """Register a new account and start its session."""
    result = await service.register(
        name=request.name,
        email=request.email,
        password=request.password,
        role=request.role,
    )
    if isinstance(result, AuthFailure):
        return failure_response(result)

    policy.attach(response, result.token)
    return AccountResponse.model_validate(result.account)


@router.post(
    "/login",
    status_code=status.HTTP_200_OK,
    response_model=LoginResponse,
    responses={
        401: {"model": ErrorResponse, "description": "Invalid credentials"},
        503: {"model": ErrorResponse, "description": "Account storage unavailable"},
    },
)
async def login(
    request: LoginRequest,
    response: Response,
    service: Annotated[AuthenticationService, Depends(get_auth_service)],
    policy: Annotated[SessionCookiePolicy, Depends(get_cookie_policy)],
    tokens: Annotated[JWTService, Depends(get_jwt_service)],
) -> LoginResponse | JSONResponse:
    """Verify credentials and start a session."""
    result = await service.authenticate(email=request.email, password=request.password)
    if isinstance(result, AuthFailure):
        return failure_response(result)

    policy.attach(response, result.token)
    account = result.account
    return LoginResponse(
        id=account.id,
        name=account.name,
        email=account.email,
        role=account.role,
        created_at=account.created_at,
        token=result.token,
        expires_in=tokens.expires_in,
    )


@router.post(
    "/logout",
    status_code=status.HTTP_200_OK,
    response_model=MessageResponse,
)
async def logout(
    response: Response,
    policy: Annotated[SessionCookiePolicy, Depends(get_cookie_policy)],
) -> MessageResponse:
    """End the session by expiring the session cookie."""
    AuthenticationService.terminate_session()
    policy.clear(response)
    return MessageResponse(message="Signed out")


@router.get(
    "/me",
    status_code=status.HTTP_200_OK,
    response_model=AccountResponse,
    responses={401: {"model": ErrorResponse, "description": "No valid session"}},
)
async def me(
    service: Annotated[AuthenticationService, Depends(get_auth_service)],
    token: Annotated[str | None, Depends(get_session_token)],
) -> AccountResponse | JSONResponse:
    """Return the account of the current session."""
    if token is None:
        return failure_response(AuthFailure(TokenInvalidError("No session token provided")))

    result = await service.resolve_session(token)
    if isinstance(result, AuthFailure):
        return failure_response(result)
    return AccountResponse.model_validate(result.account)
