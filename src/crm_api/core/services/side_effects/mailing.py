"""Transactional email collaborator."""

from abc import ABC, abstractmethod

from loguru import logger


class MailingService(ABC):
    """Sends account lifecycle emails."""

    @abstractmethod
    async def send_email(self, account_id: str, to: str, subject: str, body: str) -> None:
        raise NotImplementedError

    async def send_welcome_email(self, account_id: str, email: str, first_name: str) -> None:
        await self.send_email(
            account_id, email, "Welcome!", f"Hi {first_name}, thanks for signing up."
        )

    async def send_email_confirmation(
        self, account_id: str, email: str, confirmation_token: str
    ) -> None:
        await self.send_email(
            account_id,
            email,
            "Confirm your email",
            f"Use this token to confirm your email address: {confirmation_token}",
        )

    async def send_password_reset(self, account_id: str, email: str, reset_token: str) -> None:
        await self.send_email(
            account_id,
            email,
            "Password reset",
            f"Use this token to reset your password: {reset_token}",
        )

    async def send_account_deactivated(
        self, account_id: str, email: str, reason: str | None = None
    ) -> None:
        body = "Your account has been deactivated."
        if reason:
            body += f" Reason: {reason}"
        await self.send_email(account_id, email, "Account deactivated", body)

    async def send_account_activated(self, account_id: str, email: str) -> None:
        await self.send_email(
            account_id, email, "Account activated", "Your account has been activated."
        )


class LoggingMailingService(MailingService):
    """Logs emails instead of delivering them."""

    async def send_email(self, account_id: str, to: str, subject: str, body: str) -> None:
        logger.bind(channel="mail").info(
            "[MAIL] '{}' sent to {} for {}", subject, to, account_id
        )


class NoopMailingService(MailingService):
    async def send_email(self, account_id: str, to: str, subject: str, body: str) -> None:
        return None
