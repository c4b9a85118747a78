"""Failure-tolerant fan-out to the side-effect collaborators."""

import asyncio
from collections.abc import Awaitable
from dataclasses import dataclass
from typing import Literal

from loguru import logger

from .analytics import AnalyticsService, LoggingAnalyticsService, NoopAnalyticsService
from .audit import AuditService, LoggingAuditService, NoopAuditService
from .mailing import LoggingMailingService, MailingService, NoopMailingService
from .notifications import (
    LoggingNotificationsService,
    NoopNotificationsService,
    NotificationsService,
)


@dataclass
class SideEffects:
    """The four collaborators a use case may notify after a state change."""

    audit: AuditService
    analytics: AnalyticsService
    mailing: MailingService
    notifications: NotificationsService

    async def dispatch(self, action: str, **calls: Awaitable[None]) -> list[str]:
        """Await all ``calls`` concurrently and swallow their failures.

        A failing collaborator never fails the action that triggered it: the
        error is logged with its traceback and the collaborator's keyword name
        is returned so callers and tests can see what went wrong.

        Args:
            action: Action name used for log context, e.g. ``customers.create``
            **calls: Pending collaborator calls keyed by a short label

        Returns:
            Labels of the calls that raised.
        """
        if not calls:
            return []

        labels = list(calls)
        results = await asyncio.gather(*calls.values(), return_exceptions=True)

        failed = []
        for label, result in zip(labels, results, strict=True):
            if isinstance(result, Exception):
                logger.opt(exception=result).bind(
                    action=action,
                    collaborator=label,
                    error_type=type(result).__name__,
                ).warning("side_effect.failed")
                failed.append(label)
        return failed


def build_side_effects(backend: Literal["logging", "noop"] = "logging") -> SideEffects:
    """Create the collaborator bundle for the configured backend."""
    if backend == "noop":
        return SideEffects(
            audit=NoopAuditService(),
            analytics=NoopAnalyticsService(),
            mailing=NoopMailingService(),
            notifications=NoopNotificationsService(),
        )
    if backend == "logging":
        return SideEffects(
            audit=LoggingAuditService(),
            analytics=LoggingAnalyticsService(),
            mailing=LoggingMailingService(),
            notifications=LoggingNotificationsService(),
        )
    raise ValueError(f"Unknown side effects backend: {backend}")
