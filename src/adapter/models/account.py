from datetime import datetime
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, SQLModel

from src.domain.base import utcnow
from src.domain.entities import Account, AccountRole


class AccountRecord(SQLModel, table=True):
    """
    Account row.

    The unique indexes on username and email are what actually enforce
    uniqueness; application-level checks only produce friendlier errors.
    """

    __tablename__ = "accounts"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    username: str = Field(unique=True, index=True, max_length=50)
    email: str = Field(unique=True, index=True, max_length=180)
    password_hash: str = Field(max_length=255)
    role: AccountRole = Field(default=AccountRole.user)

    created_at: datetime = Field(
        default_factory=utcnow, sa_column=Column(DateTime, nullable=False)
    )

    @classmethod
    def from_domain(cls, account: Account) -> "AccountRecord":
        return cls(**account.model_dump())

    def to_domain(self) -> Account:
        return Account(
            id=self.id,
            username=self.username,
            email=self.email,
            password_hash=self.password_hash,
            role=self.role,
            created_at=self.created_at,
        )
