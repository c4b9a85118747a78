"""Email confirmation and activation state transitions."""

from loguru import logger

from crm_api.core.exceptions import AccountAlreadyActiveError, AccountAlreadyInactiveError
from crm_api.entities.account import Account

from .base import AccountUseCase


class ConfirmAccountEmail(AccountUseCase):
    async def handle(self, account_id: str) -> Account:
        """Mark the email as confirmed. Confirming twice is allowed."""
        account = await self._get_or_raise(account_id)
        changed = account.model_copy(update={"email_confirmed": True})
        account = await self._db(self._repository.save, changed)
        logger.info("Confirmed email of {} {}", self._kind.name, account_id)

        action = self._kind.action("confirm_email")
        effects = self._side_effects
        await effects.dispatch(
            action,
            audit=effects.audit.log_user_action(action, account_id),
            analytics=effects.analytics.track_email_confirmation(account_id),
            notifications=effects.notifications.send_email_confirmed(account_id),
        )
        return account


class ActivateAccount(AccountUseCase):
    async def handle(self, account_id: str) -> Account:
        """
        Raises:
            AccountNotFoundError: if the account does not exist.
            AccountAlreadyActiveError: if the account is already active.
        """
        account = await self._get_or_raise(account_id)
        if account.is_active:
            raise AccountAlreadyActiveError(self._kind, account_id)

        changed = account.model_copy(update={"is_active": True})
        account = await self._db(self._repository.save, changed)
        logger.info("Activated {} {}", self._kind.name, account_id)

        action = self._kind.action("activate")
        effects = self._side_effects
        await effects.dispatch(
            action,
            audit=effects.audit.log_system_action(action, {self._kind.id_key: account_id}),
            analytics=effects.analytics.track_activation(account_id),
            mailing=effects.mailing.send_account_activated(account_id, account.email),
            notifications=effects.notifications.send_account_activated(account_id),
        )
        return account


class DeactivateAccount(AccountUseCase):
    async def handle(self, account_id: str) -> Account:
        """
        Raises:
            AccountNotFoundError: if the account does not exist.
            AccountAlreadyInactiveError: if the account is already inactive.
        """
        account = await self._get_or_raise(account_id)
        if not account.is_active:
            raise AccountAlreadyInactiveError(self._kind, account_id)

        changed = account.model_copy(update={"is_active": False})
        account = await self._db(self._repository.save, changed)
        logger.info("Deactivated {} {}", self._kind.name, account_id)

        action = self._kind.action("deactivate")
        effects = self._side_effects
        await effects.dispatch(
            action,
            audit=effects.audit.log_system_action(action, {self._kind.id_key: account_id}),
            analytics=effects.analytics.track_deactivation(account_id),
            mailing=effects.mailing.send_account_deactivated(account_id, account.email),
            notifications=effects.notifications.send_account_deactivated(account_id),
        )
        return account
