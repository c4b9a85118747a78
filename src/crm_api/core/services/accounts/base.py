from collections.abc import Callable
from typing import Any, TypeVar

from starlette.concurrency import run_in_threadpool

from crm_api.core.exceptions import AccountNotFoundError
from crm_api.core.services.side_effects import SideEffects
from crm_api.entities.account import Account, AccountRepository
from crm_api.entities.kinds import AccountKind

T = TypeVar("T")


class AccountUseCase:
    """Shared wiring for the single-action account services.

    Subclasses implement ``handle`` and nothing else. Repository calls go
    through ``_db`` so the blocking session never runs on the event loop.
    """

    def __init__(
        self,
        kind: AccountKind,
        repository: AccountRepository,
        side_effects: SideEffects,
    ) -> None:
        self._kind = kind
        self._repository = repository
        self._side_effects = side_effects

    @property
    def kind(self) -> AccountKind:
        return self._kind

    async def _db(self, call: Callable[..., T], *args: Any) -> T:
        return await run_in_threadpool(call, *args)

    async def _get_or_raise(self, account_id: str) -> Account:
        account = await self._db(self._repository.find_by_id, account_id)
        if account is None:
            raise AccountNotFoundError(self._kind, account_id)
        return account
