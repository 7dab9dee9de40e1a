"""
Account Use Case DTOs (Data Transfer Objects)

Commands carry raw caller input into the use cases; responses are the
structured results handed back to the API layer.
"""

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from src.domain.entities import Account

PROFILE_DATE_FORMAT = "%Y-%m-%d %H:%M"
LIST_DATE_FORMAT = "%Y-%m-%d"


# ============================================================================
# Commands
# ============================================================================


class RegisterCommand(BaseModel):
    """Self-registration intent; fields are validated by the use case"""

    username: str
    email: str
    password: str


class CreateAccountCommand(BaseModel):
    """Administrator creating an account with a chosen role"""

    username: str
    email: str
    password: str
    role: Optional[Any] = None


class UpdateAccountCommand(BaseModel):
    """Partial update; None means the field was not supplied"""

    username: Optional[str] = None
    email: Optional[str] = None
    role: Optional[Any] = None


# ============================================================================
# Response DTOs
# ============================================================================


class MessageResponse(BaseModel):
    message: str


class CreatedAccountResponse(BaseModel):
    id: str
    role: str


class SavedResponse(BaseModel):
    saved: bool = True


class ProfileResponse(BaseModel):
    """Account view returned to the account owner"""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    username: str
    email: str
    roles: List[str]
    created_at: str = Field(alias="createdAt")

    @classmethod
    def from_account(cls, account: Account) -> "ProfileResponse":
        return cls(
            id=str(account.id),
            username=account.username,
            email=account.email,
            roles=account.roles,
            created_at=account.created_at.strftime(PROFILE_DATE_FORMAT),
        )


class AccountSummary(BaseModel):
    """Account view in the administrator listing"""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    username: str
    email: str
    role: str
    created_at: str = Field(alias="createdAt")

    @classmethod
    def from_account(cls, account: Account) -> "AccountSummary":
        return cls(
            id=str(account.id),
            username=account.username,
            email=account.email,
            role=account.role.value,
            created_at=account.created_at.strftime(LIST_DATE_FORMAT),
        )
