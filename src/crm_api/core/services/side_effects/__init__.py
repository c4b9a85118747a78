"""Side-effect collaborators: audit, analytics, mailing and notifications."""

from .analytics import AnalyticsService, LoggingAnalyticsService, NoopAnalyticsService
from .audit import AuditService, LoggingAuditService, NoopAuditService
from .dispatcher import SideEffects, build_side_effects
from .mailing import LoggingMailingService, MailingService, NoopMailingService
from .notifications import (
    LoggingNotificationsService,
    NoopNotificationsService,
    NotificationsService,
)

__all__ = [
    "SideEffects",
    "build_side_effects",
    # Audit
    "AuditService",
    "LoggingAuditService",
    "NoopAuditService",
    # Analytics
    "AnalyticsService",
    "LoggingAnalyticsService",
    "NoopAnalyticsService",
    # Mailing
    "MailingService",
    "LoggingMailingService",
    "NoopMailingService",
    # Notifications
    "NotificationsService",
    "LoggingNotificationsService",
    "NoopNotificationsService",
]
