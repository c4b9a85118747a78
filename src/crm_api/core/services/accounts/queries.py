"""Read-only account use cases."""

from crm_api.core.exceptions import AccountEmailNotFoundError, InvalidSearchQueryError
from crm_api.entities.account import Account

from .base import AccountUseCase

MIN_SEARCH_LENGTH = 2


class GetAccount(AccountUseCase):
    async def handle(self, account_id: str) -> Account:
        action = self._kind.action("get_by_id")
        await self._side_effects.dispatch(
            action,
            audit=self._side_effects.audit.log_system_action(
                action, {self._kind.id_key: account_id}
            ),
        )
        return await self._get_or_raise(account_id)


class GetAccountByEmail(AccountUseCase):
    async def handle(self, email: str) -> Account:
        action = self._kind.action("get_by_email")
        await self._side_effects.dispatch(
            action,
            audit=self._side_effects.audit.log_system_action(action, {"email": email}),
        )
        account = await self._db(self._repository.find_by_email, email)
        if account is None:
            raise AccountEmailNotFoundError(self._kind, email)
        return account


class ListAccounts(AccountUseCase):
    async def handle(self) -> list[Account]:
        """Every account of this kind, newest first."""
        action = self._kind.action("list_all")
        await self._side_effects.dispatch(
            action,
            audit=self._side_effects.audit.log_system_action(action),
            analytics=self._side_effects.analytics.track_search(f"all_{self._kind.plural}"),
        )
        return await self._db(self._repository.find_all)


class SearchAccounts(AccountUseCase):
    async def handle(self, query: str | None) -> list[Account]:
        """Substring search across first name, last name and email.

        Raises:
            InvalidSearchQueryError: if the trimmed query is shorter than two characters.
        """
        text = (query or "").strip()
        if len(text) < MIN_SEARCH_LENGTH:
            raise InvalidSearchQueryError(query)

        action = self._kind.action("search")
        await self._side_effects.dispatch(
            action,
            audit=self._side_effects.audit.log_system_action(action, {"query": text}),
            analytics=self._side_effects.analytics.track_search(text),
        )
        return await self._db(self._repository.search_by_text, text)
