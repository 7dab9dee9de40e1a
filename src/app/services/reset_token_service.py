"""
Password Reset Token Service

Issues, looks up and consumes single-use password reset tokens.
Called by the forgot-password and admin reset flows (issue) and by the
public redemption flow (consume). Runs inside the caller's unit of work.
"""

import hashlib
import logging
import secrets
from datetime import datetime, timedelta
from typing import Callable

from libs.result import Error, Result, Return
from src.app.services.notifier import IPasswordResetNotifier
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow
from src.domain.entities import Account, PasswordResetToken

logger = logging.getLogger(__name__)

# 32 bytes of randomness, 43 url-safe characters
TOKEN_BYTES = 32

INVALID_OR_EXPIRED_TOKEN = Error(
    "INVALID_OR_EXPIRED_TOKEN", "Invalid or expired token"
)


def hash_token(raw_token: str) -> str:
    return hashlib.sha256(raw_token.encode()).hexdigest()


class ResetTokenService:
    """
    Business Rules:
    - Raw token is cryptographically random and only ever handed to the notifier
    - Only the SHA-256 hash of the token is stored
    - Token expires `ttl` after creation
    - Unknown, expired and used tokens are reported identically
    - Redemption is exactly-once (conditional update in the store)
    - A failed notification does not undo the token
    """

    def __init__(
        self,
        uow: UnitOfWork,
        notifier: IPasswordResetNotifier,
        ttl: timedelta,
        frontend_url: str,
        clock: Callable[[], datetime] = utcnow,
    ):
        self.uow = uow
        self.notifier = notifier
        self.ttl = ttl
        self.frontend_url = frontend_url.rstrip("/")
        self._clock = clock

    def reset_url(self, raw_token: str) -> str:
        return f"{self.frontend_url}/reset-password/{raw_token}"

    async def issue(self, account: Account) -> PasswordResetToken:
        """
        Create and persist a token for `account`, then send the reset link.

        Commits the unit of work before notifying, so the token survives a
        delivery failure.
        """
        raw_token = secrets.token_urlsafe(TOKEN_BYTES)
        now = self._clock()

        token = await self.uow.password_reset_tokens.create(
            PasswordResetToken(
                account_id=account.id,
                token_hash=hash_token(raw_token),
                created_at=now,
                expires_at=now + self.ttl,
            )
        )
        purged = await self.uow.password_reset_tokens.purge_expired(now)
        await self.uow.commit()

        logger.info(
            "Password reset token %s issued for account %s (purged %d expired)",
            token.id,
            account.id,
            purged,
        )

        try:
            delivered = await self.notifier.send_password_reset(
                recipient=account.email,
                reset_url=self.reset_url(raw_token),
                display_name=account.username,
            )
        except Exception:
            # The mail outcome must not change the response
            logger.exception("Password reset notifier failed for account %s", account.id)
            delivered = False
        if not delivered:
            logger.warning(
                "Password reset email for account %s was not delivered; token %s stays valid",
                account.id,
                token.id,
            )

        return token

    async def lookup_valid(self, raw_token: str) -> Result[PasswordResetToken]:
        token = await self.uow.password_reset_tokens.get_valid_by_token_hash(
            hash_token(raw_token), self._clock()
        )
        if token is None:
            return Return.err(INVALID_OR_EXPIRED_TOKEN)
        return Return.ok(token)

    async def consume(
        self, raw_token: str, new_password_hash: str
    ) -> Result[PasswordResetToken]:
        """
        Redeem a token: set the owner's password hash and remove the token.

        The token is claimed with a conditional update first, so of several
        concurrent redemptions only one proceeds to change the password.
        """
        token = await self.uow.password_reset_tokens.mark_used_if_valid(
            hash_token(raw_token), self._clock()
        )
        if token is None:
            return Return.err(INVALID_OR_EXPIRED_TOKEN)

        updated = await self.uow.accounts.set_password_hash(
            token.account_id, new_password_hash
        )
        if not updated:
            # Owner deleted between claim and update
            await self.uow.rollback()
            return Return.err(INVALID_OR_EXPIRED_TOKEN)

        await self.uow.password_reset_tokens.delete(token.id)
        await self.uow.commit()

        logger.info(
            "Password reset token %s consumed for account %s",
            token.id,
            token.account_id,
        )
        return Return.ok(token)
