from typing import Any, List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from src.api.error import raise_for_error
from src.app.services.password_hasher import IPasswordHasher
from src.app.services.reset_token_service import ResetTokenService
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.accounts import (
    AccountSummary,
    CreateAccountCommand,
    CreateAccountUseCase,
    CreatedAccountResponse,
    DeleteAccountUseCase,
    GetProfileUseCase,
    ListAccountsUseCase,
    MessageResponse,
    ProfileResponse,
    RegisterAccountUseCase,
    RegisterCommand,
    SavedResponse,
    UpdateAccountCommand,
    UpdateAccountUseCase,
)
from src.app.use_cases.auth import LoginResponse, LoginUseCase
from src.app.use_cases.password_reset import (
    AdminPasswordResetUseCase,
    ConfirmPasswordResetUseCase,
    PasswordResetConfirmedResponse,
    PasswordResetRequestedResponse,
    RequestPasswordResetUseCase,
)
from src.depends import (
    get_current_principal,
    get_password_hasher,
    get_reset_token_service,
    get_unit_of_work,
)
from src.domain.entities import AccountRole, Principal

router = APIRouter(prefix="/users", tags=["Users"])


# ============================================================================
# Request payloads
# ============================================================================
# Field rules (length, charset, strength) live in the use cases so that every
# flow reports them identically; the payloads only fix the shape.


class LoginRequest(BaseModel):
    login: str = Field(..., description="Username or email address")
    password: str


class RegisterRequest(BaseModel):
    username: str
    email: str
    password: str


class ForgotPasswordRequest(BaseModel):
    email: str


class CreateAccountRequest(BaseModel):
    username: str
    email: str
    password: str
    role: Optional[Any] = Field(None, description="'admin' or 'user' (default)")


class UpdateAccountRequest(BaseModel):
    username: Optional[str] = None
    email: Optional[str] = None
    role: Optional[Any] = Field(None, description="Ignored unless 'user' or 'admin'")


class ResetPasswordWithTokenRequest(BaseModel):
    password: str


# ============================================================================
# Public endpoints
# ============================================================================


@router.post("/login", status_code=status.HTTP_200_OK, response_model=LoginResponse)
async def login(
    request: LoginRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    hasher: IPasswordHasher = Depends(get_password_hasher),
):
    """
    Login with username or email.

    Raises:
        - 401 Unauthorized: INVALID_CREDENTIALS
    """
    result = await LoginUseCase(uow, hasher).execute(request.login, request.password)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.post(
    "/register", status_code=status.HTTP_201_CREATED, response_model=MessageResponse
)
async def register(
    request: RegisterRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    hasher: IPasswordHasher = Depends(get_password_hasher),
):
    """
    Self-registration. The new account always has the `user` role.

    Raises:
        - 400 Bad Request: MALFORMED_INPUT, VALIDATION_ERROR
        - 409 Conflict: EMAIL_ALREADY_EXISTS, USERNAME_ALREADY_EXISTS
        - 500 Internal Server Error: registration failed
    """
    command = RegisterCommand(
        username=request.username, email=request.email, password=request.password
    )
    result = await RegisterAccountUseCase(uow, hasher).execute(command)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.post(
    "/forgot-password",
    status_code=status.HTTP_200_OK,
    response_model=PasswordResetRequestedResponse,
)
async def forgot_password(
    request: ForgotPasswordRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    token_service: ResetTokenService = Depends(get_reset_token_service),
):
    """
    Request a password reset link.

    Security:
        - Same response whether or not the email is registered

    Raises:
        - 400 Bad Request: VALIDATION_ERROR (email syntax)
    """
    result = await RequestPasswordResetUseCase(uow, token_service).execute(request.email)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.post(
    "/reset-password-token/{token}",
    status_code=status.HTTP_200_OK,
    response_model=PasswordResetConfirmedResponse,
)
async def reset_password_with_token(
    token: str,
    request: ResetPasswordWithTokenRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    hasher: IPasswordHasher = Depends(get_password_hasher),
    token_service: ResetTokenService = Depends(get_reset_token_service),
):
    """
    Redeem a password reset token. The token itself is the credential.

    Raises:
        - 400 Bad Request: VALIDATION_ERROR (password strength)
        - 404 Not Found: INVALID_OR_EXPIRED_TOKEN (unknown, expired or used)
        - 500 Internal Server Error: password reset failed
    """
    use_case = ConfirmPasswordResetUseCase(uow, hasher, token_service)
    result = await use_case.execute(token, request.password)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


# ============================================================================
# Authenticated endpoints
# ============================================================================


@router.get("/me", status_code=status.HTTP_200_OK, response_model=ProfileResponse)
async def get_me(
    principal: Principal = Depends(get_current_principal),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Profile of the calling account.

    Raises:
        - 401 Unauthorized: missing or invalid bearer token
        - 404 Not Found: account no longer exists
    """
    result = await GetProfileUseCase(uow).execute(principal)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.get("", status_code=status.HTTP_200_OK, response_model=List[AccountSummary])
async def list_accounts(
    principal: Principal = Depends(get_current_principal),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    List all accounts (admin).

    Raises:
        - 403 Forbidden: caller is not an administrator
    """
    result = await ListAccountsUseCase(uow).execute(principal)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.post(
    "", status_code=status.HTTP_201_CREATED, response_model=CreatedAccountResponse
)
async def create_account(
    request: CreateAccountRequest,
    principal: Principal = Depends(get_current_principal),
    uow: UnitOfWork = Depends(get_unit_of_work),
    hasher: IPasswordHasher = Depends(get_password_hasher),
):
    """
    Create an account with a chosen role (admin).

    Raises:
        - 400 Bad Request: MALFORMED_INPUT, VALIDATION_ERROR
        - 403 Forbidden: caller is not an administrator
        - 409 Conflict: EMAIL_ALREADY_EXISTS, USERNAME_ALREADY_EXISTS
        - 500 Internal Server Error: user creation failed
    """
    command = CreateAccountCommand(
        username=request.username,
        email=request.email,
        password=request.password,
        role=request.role,
    )
    result = await CreateAccountUseCase(uow, hasher).execute(principal, command)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.post(
    "/create-admin", status_code=status.HTTP_201_CREATED, response_model=MessageResponse
)
async def create_admin(
    request: RegisterRequest,
    principal: Principal = Depends(get_current_principal),
    uow: UnitOfWork = Depends(get_unit_of_work),
    hasher: IPasswordHasher = Depends(get_password_hasher),
):
    """
    Create an administrator account (admin).

    Raises:
        - 400, 403, 409, 500 as for account creation
    """
    command = CreateAccountCommand(
        username=request.username,
        email=request.email,
        password=request.password,
        role=AccountRole.admin.value,
    )
    result = await CreateAccountUseCase(uow, hasher).execute(principal, command)
    if result.is_err():
        raise_for_error(result.error)
    return MessageResponse(message="Admin created successfully")


@router.put("/{account_id}", status_code=status.HTTP_200_OK, response_model=SavedResponse)
async def update_account(
    account_id: UUID,
    request: UpdateAccountRequest,
    principal: Principal = Depends(get_current_principal),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Update username, email and/or role (admin).

    An unrecognized role is ignored and the response is still `saved: true`.

    Raises:
        - 400 Bad Request: VALIDATION_ERROR on a supplied field
        - 403 Forbidden: caller is not an administrator
        - 404 Not Found: ACCOUNT_NOT_FOUND
        - 409 Conflict: EMAIL_ALREADY_EXISTS, USERNAME_ALREADY_EXISTS
    """
    command = UpdateAccountCommand(
        username=request.username, email=request.email, role=request.role
    )
    result = await UpdateAccountUseCase(uow).execute(principal, account_id, command)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.delete(
    "/{account_id}", status_code=status.HTTP_200_OK, response_model=MessageResponse
)
async def delete_account(
    account_id: UUID,
    principal: Principal = Depends(get_current_principal),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Delete an account and its outstanding reset tokens (admin).

    Raises:
        - 403 Forbidden: caller is not an administrator
        - 404 Not Found: ACCOUNT_NOT_FOUND
    """
    result = await DeleteAccountUseCase(uow).execute(principal, account_id)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.post(
    "/{account_id}/reset-password",
    status_code=status.HTTP_200_OK,
    response_model=PasswordResetRequestedResponse,
)
async def admin_reset_password(
    account_id: UUID,
    principal: Principal = Depends(get_current_principal),
    uow: UnitOfWork = Depends(get_unit_of_work),
    token_service: ResetTokenService = Depends(get_reset_token_service),
):
    """
    Email a password reset link to another account (admin).

    Raises:
        - 403 Forbidden: caller is not an administrator
        - 404 Not Found: ACCOUNT_NOT_FOUND
    """
    use_case = AdminPasswordResetUseCase(uow, token_service)
    result = await use_case.execute(principal, account_id)
    if result.is_err():
        raise_for_error(result.error)
    return result.value
