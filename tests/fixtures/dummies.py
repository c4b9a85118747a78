"""In-memory collaborators that record calls or fail on demand."""

from __future__ import annotations

from typing import Any

from crm_api.core.services.side_effects import (
    AnalyticsService,
    AuditService,
    MailingService,
    NotificationsService,
)


class RecordingAuditService(AuditService):
    def __init__(self) -> None:
        self.entries: list[dict[str, Any]] = []

    async def log_action(self, action, actor_id=None, target_id=None, details=None):
        self.entries.append(
            {"action": action, "actor_id": actor_id, "target_id": target_id, "details": details}
        )

    @property
    def actions(self) -> list[str]:
        return [entry["action"] for entry in self.entries]


class RecordingAnalyticsService(AnalyticsService):
    def __init__(self) -> None:
        self.events: list[tuple[str, str | None, dict[str, Any] | None]] = []

    async def track_event(self, event, account_id=None, properties=None):
        self.events.append((event, account_id, properties))


class RecordingMailingService(MailingService):
    def __init__(self) -> None:
        self.sent: list[dict[str, str]] = []

    async def send_email(self, account_id, to, subject, body):
        self.sent.append({"account_id": account_id, "to": to, "subject": subject, "body": body})


class RecordingNotificationsService(NotificationsService):
    def __init__(self) -> None:
        self.sent: list[dict[str, Any]] = []

    async def send_in_app(self, account_id, kind, title, message, data=None):
        self.sent.append(
            {"account_id": account_id, "kind": kind, "title": title, "data": data}
        )


class CollaboratorDown(RuntimeError):
    pass


class FailingAuditService(AuditService):
    async def log_action(self, action, actor_id=None, target_id=None, details=None):
        raise CollaboratorDown("audit store unavailable")


class FailingAnalyticsService(AnalyticsService):
    async def track_event(self, event, account_id=None, properties=None):
        raise CollaboratorDown("analytics unavailable")


class FailingMailingService(MailingService):
    async def send_email(self, account_id, to, subject, body):
        raise CollaboratorDown("smtp unavailable")


class FailingNotificationsService(NotificationsService):
    async def send_in_app(self, account_id, kind, title, message, data=None):
        raise CollaboratorDown("push gateway unavailable")
