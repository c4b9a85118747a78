"""FastAPI dependency implementations."""

from __future__ import annotations

from collections.abc import Callable, Iterator

from fastapi import Depends, Request
from sqlmodel import Session

from crm_api.api.http.app_data import ApplicationDependencies
from crm_api.core.services.accounts import AccountUseCases, build_account_use_cases
from crm_api.core.services.database.db_session import DbSessionService
from crm_api.core.services.side_effects import SideEffects
from crm_api.entities.kinds import AccountKind


def get_database_service(request: Request) -> DbSessionService:
    """Get the database service instance."""
    app_deps: ApplicationDependencies = request.app.state.app_dependencies
    return app_deps.database_service


def get_db_session(
    database_service: DbSessionService = Depends(get_database_service),
) -> Iterator[Session]:
    """Yield a session for the duration of one request."""
    session = database_service.get_session()
    try:
        yield session
    finally:
        session.close()


def get_side_effects(request: Request) -> SideEffects:
    """Get the side-effect collaborators."""
    app_deps: ApplicationDependencies = request.app.state.app_dependencies
    return app_deps.side_effects


def account_use_cases(kind: AccountKind) -> Callable[..., AccountUseCases]:
    """Build a dependency that wires the use cases of ``kind`` per request."""

    def _get_use_cases(
        session: Session = Depends(get_db_session),
        side_effects: SideEffects = Depends(get_side_effects),
    ) -> AccountUseCases:
        return build_account_use_cases(kind, session, side_effects)

    return _get_use_cases
