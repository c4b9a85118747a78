"""Product analytics collaborator."""

from abc import ABC, abstractmethod
from typing import Any

from loguru import logger


class AnalyticsService(ABC):
    """Tracks account lifecycle events for product analytics."""

    @abstractmethod
    async def track_event(
        self,
        event: str,
        account_id: str | None = None,
        properties: dict[str, Any] | None = None,
    ) -> None:
        raise NotImplementedError

    async def track_registration(
        self, account_id: str, properties: dict[str, Any] | None = None
    ) -> None:
        await self.track_event("user_registration", account_id, properties)

    async def track_login(
        self, account_id: str, properties: dict[str, Any] | None = None
    ) -> None:
        await self.track_event("user_login", account_id, properties)

    async def track_email_confirmation(
        self, account_id: str, properties: dict[str, Any] | None = None
    ) -> None:
        await self.track_event("email_confirmation", account_id, properties)

    async def track_deactivation(
        self,
        account_id: str,
        reason: str | None = None,
        properties: dict[str, Any] | None = None,
    ) -> None:
        await self.track_event(
            "user_deactivation", account_id, {"reason": reason, **(properties or {})}
        )

    async def track_activation(
        self, account_id: str, properties: dict[str, Any] | None = None
    ) -> None:
        await self.track_event("user_activation", account_id, properties)

    async def track_search(
        self,
        query: str,
        account_id: str | None = None,
        properties: dict[str, Any] | None = None,
    ) -> None:
        await self.track_event("user_search", account_id, {"query": query, **(properties or {})})

    async def track_profile_update(
        self,
        account_id: str,
        updated_fields: list[str],
        properties: dict[str, Any] | None = None,
    ) -> None:
        await self.track_event(
            "profile_update",
            account_id,
            {"updated_fields": updated_fields, **(properties or {})},
        )


class LoggingAnalyticsService(AnalyticsService):
    """Writes analytics events to the application log."""

    async def track_event(
        self,
        event: str,
        account_id: str | None = None,
        properties: dict[str, Any] | None = None,
    ) -> None:
        logger.bind(channel="analytics", event=event).info(
            "[ANALYTICS] {} tracked for {}: {}",
            event,
            account_id or "anonymous",
            properties,
        )


class NoopAnalyticsService(AnalyticsService):
    async def track_event(
        self,
        event: str,
        account_id: str | None = None,
        properties: dict[str, Any] | None = None,
    ) -> None:
        return None
