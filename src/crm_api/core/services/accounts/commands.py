"""Account use cases that create, change or remove rows."""

from loguru import logger
from sqlalchemy.exc import IntegrityError

from crm_api.core.exceptions import EmailAlreadyExistsError
from crm_api.entities.account import Account

from .base import AccountUseCase
from .requests import CreateAccountRequest, UpdateAccountRequest


class CreateAccount(AccountUseCase):
    async def handle(self, request: CreateAccountRequest) -> Account:
        """Register a new account with an unused email.

        Raises:
            EmailAlreadyExistsError: if the email is taken; nothing is written.
        """
        if await self._db(self._repository.find_by_email, request.email) is not None:
            raise EmailAlreadyExistsError(self._kind, request.email)

        try:
            account = await self._db(self._repository.insert, request.model_dump())
        except IntegrityError as e:
            # Lost a race against a concurrent create with the same email
            raise EmailAlreadyExistsError(self._kind, request.email) from e

        logger.info("Created {} {}", self._kind.name, account.id)

        action = self._kind.action("create")
        effects = self._side_effects
        await effects.dispatch(
            action,
            audit=effects.audit.log_system_action(
                action, {self._kind.id_key: account.id, "email": account.email}
            ),
            analytics=effects.analytics.track_registration(account.id, {"email": account.email}),
            mailing=effects.mailing.send_welcome_email(
                account.id, account.email, account.first_name
            ),
            notifications=effects.notifications.send_welcome(account.id, account.first_name),
        )
        return account


class UpdateAccount(AccountUseCase):
    async def handle(self, account_id: str, request: UpdateAccountRequest) -> Account:
        """Apply the fields present in ``request``; an empty patch writes nothing."""
        account = await self._get_or_raise(account_id)

        changes = request.changes()
        updated_fields = list(changes)
        if changes:
            account = await self._db(self._repository.save, account.model_copy(update=changes))
            logger.info("Updated {} {}: {}", self._kind.name, account_id, updated_fields)

        action = self._kind.action("update")
        effects = self._side_effects
        await effects.dispatch(
            action,
            audit=effects.audit.log_user_action(
                action, account_id, {"updated_fields": updated_fields}
            ),
            analytics=effects.analytics.track_profile_update(account_id, updated_fields),
        )
        return account


class DeleteAccount(AccountUseCase):
    async def handle(self, account_id: str) -> None:
        await self._get_or_raise(account_id)
        await self._db(self._repository.delete, account_id)
        logger.info("Deleted {} {}", self._kind.name, account_id)

        action = self._kind.action("delete")
        await self._side_effects.dispatch(
            action,
            audit=self._side_effects.audit.log_system_action(
                action, {self._kind.id_key: account_id}
            ),
        )
