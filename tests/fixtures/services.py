from __future__ import annotations

from datetime import UTC, datetime, timedelta

import pytest
from sqlmodel import Session

from crm_api.core.services.accounts import AccountUseCases, build_account_use_cases
from crm_api.core.services.side_effects import SideEffects
from crm_api.entities.customer import CustomerTable
from crm_api.entities.kinds import CUSTOMER, USER
from crm_api.entities.user import UserTable

from .dummies import (
    FailingAnalyticsService,
    FailingAuditService,
    FailingMailingService,
    FailingNotificationsService,
    RecordingAnalyticsService,
    RecordingAuditService,
    RecordingMailingService,
    RecordingNotificationsService,
)


@pytest.fixture
def side_effects() -> SideEffects:
    return SideEffects(
        audit=RecordingAuditService(),
        analytics=RecordingAnalyticsService(),
        mailing=RecordingMailingService(),
        notifications=RecordingNotificationsService(),
    )


@pytest.fixture
def failing_side_effects() -> SideEffects:
    return SideEffects(
        audit=FailingAuditService(),
        analytics=FailingAnalyticsService(),
        mailing=FailingMailingService(),
        notifications=FailingNotificationsService(),
    )


@pytest.fixture
def customer_use_cases(session: Session, side_effects: SideEffects) -> AccountUseCases:
    return build_account_use_cases(CUSTOMER, session, side_effects)


@pytest.fixture
def user_use_cases(session: Session, side_effects: SideEffects) -> AccountUseCases:
    return build_account_use_cases(USER, session, side_effects)


@pytest.fixture
def seed_customers(session: Session):
    """Insert customers with strictly increasing creation times.

    SQLite keeps datetimes naive, so explicit timestamps make ordering deterministic.
    """

    def _seed(*people: tuple[str, str, str], **overrides) -> list[CustomerTable]:
        base = datetime(2024, 1, 1, tzinfo=UTC)
        rows = []
        for offset, (first_name, last_name, email) in enumerate(people):
            row = CustomerTable(
                first_name=first_name,
                last_name=last_name,
                email=email,
                created_at=base + timedelta(minutes=offset),
                updated_at=base + timedelta(minutes=offset),
                **overrides,
            )
            session.add(row)
            rows.append(row)
        session.commit()
        return rows

    return _seed


@pytest.fixture
def seed_user(session: Session):
    def _seed(email: str = "user@example.com", **fields) -> UserTable:
        row = UserTable(
            email=email,
            first_name=fields.pop("first_name", "Uma"),
            last_name=fields.pop("last_name", "User"),
            **fields,
        )
        session.add(row)
        session.commit()
        session.refresh(row)
        return row

    return _seed
