"""In-app notification collaborator."""

from abc import ABC, abstractmethod
from typing import Any, Literal

from loguru import logger

NotificationKind = Literal["info", "warning", "success", "error"]


class NotificationsService(ABC):
    """Pushes in-app notifications to an account."""

    @abstractmethod
    async def send_in_app(
        self,
        account_id: str,
        kind: NotificationKind,
        title: str,
        message: str,
        data: dict[str, Any] | None = None,
    ) -> None:
        raise NotImplementedError

    async def send_welcome(self, account_id: str, first_name: str) -> None:
        await self.send_in_app(
            account_id,
            "success",
            "Welcome!",
            f"Welcome to our platform, {first_name}!",
            {"type": "welcome"},
        )

    async def send_email_confirmed(self, account_id: str) -> None:
        await self.send_in_app(
            account_id,
            "success",
            "Email Confirmed",
            "Your email has been successfully confirmed.",
            {"type": "email_confirmed"},
        )

    async def send_account_deactivated(self, account_id: str, reason: str | None = None) -> None:
        message = "Your account has been deactivated."
        if reason:
            message += f" Reason: {reason}"
        await self.send_in_app(
            account_id,
            "warning",
            "Account Deactivated",
            message,
            {"type": "account_deactivated", "reason": reason},
        )

    async def send_account_activated(self, account_id: str) -> None:
        await self.send_in_app(
            account_id,
            "success",
            "Account Activated",
            "Your account has been activated successfully.",
            {"type": "account_activated"},
        )


class LoggingNotificationsService(NotificationsService):
    """Logs notifications instead of pushing them."""

    async def send_in_app(
        self,
        account_id: str,
        kind: NotificationKind,
        title: str,
        message: str,
        data: dict[str, Any] | None = None,
    ) -> None:
        logger.bind(channel="notification").info(
            "[NOTIFICATION] {} notification sent to {}: {} - {} (data: {})",
            kind.upper(),
            account_id,
            title,
            message,
            data,
        )


class NoopNotificationsService(NotificationsService):
    async def send_in_app(
        self,
        account_id: str,
        kind: NotificationKind,
        title: str,
        message: str,
        data: dict[str, Any] | None = None,
    ) -> None:
        return None
