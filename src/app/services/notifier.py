from abc import ABC, abstractmethod


class IPasswordResetNotifier(ABC):
    """Outbound channel for password reset links"""

    @abstractmethod
    async def send_password_reset(
        self, recipient: str, reset_url: str, display_name: str
    ) -> bool:
        """
        Deliver the reset link.

        Returns False when delivery failed. Must not raise: callers treat
        the token as issued regardless of the delivery outcome.
        """
        pass
