"""Audit trail collaborator."""

from abc import ABC, abstractmethod
from typing import Any

from loguru import logger


class AuditService(ABC):
    """Records who did what to which record."""

    @abstractmethod
    async def log_action(
        self,
        action: str,
        actor_id: str | None = None,
        target_id: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Record a single audit entry.

        Args:
            action: Dotted action name, e.g. ``customers.create``
            actor_id: Who performed the action (``None`` for the system)
            target_id: Which record was affected
            details: Free-form structured context
        """
        raise NotImplementedError

    async def log_user_action(
        self, action: str, user_id: str, details: dict[str, Any] | None = None
    ) -> None:
        """Record an action a user performed on their own record."""
        await self.log_action(action, user_id, user_id, details)

    async def log_system_action(
        self, action: str, details: dict[str, Any] | None = None
    ) -> None:
        """Record an action with no user actor."""
        await self.log_action(action, None, None, details)


class LoggingAuditService(AuditService):
    """Writes audit entries to the application log."""

    async def log_action(
        self,
        action: str,
        actor_id: str | None = None,
        target_id: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        logger.bind(channel="audit", action=action).info(
            "[AUDIT] {} - User: {}, Target: {}, Details: {}",
            action,
            actor_id,
            target_id,
            details,
        )


class NoopAuditService(AuditService):
    async def log_action(
        self,
        action: str,
        actor_id: str | None = None,
        target_id: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        return None
