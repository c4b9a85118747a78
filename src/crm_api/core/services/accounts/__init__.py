"""Single-action account services.

Each class implements exactly one use case through ``handle``. They are
generic over the account kind; ``build_account_use_cases`` wires a complete
set for one kind and one database session.
"""

from dataclasses import dataclass

from sqlmodel import Session

from crm_api.core.services.side_effects import SideEffects
from crm_api.entities.kinds import AccountKind

from .base import AccountUseCase
from .commands import CreateAccount, DeleteAccount, UpdateAccount
from .queries import GetAccount, GetAccountByEmail, ListAccounts, SearchAccounts
from .requests import CreateAccountRequest, UpdateAccountRequest
from .status import ActivateAccount, ConfirmAccountEmail, DeactivateAccount


@dataclass
class AccountUseCases:
    create: CreateAccount
    get: GetAccount
    get_by_email: GetAccountByEmail
    list: ListAccounts
    search: SearchAccounts
    update: UpdateAccount
    delete: DeleteAccount
    confirm_email: ConfirmAccountEmail
    activate: ActivateAccount
    deactivate: DeactivateAccount


def build_account_use_cases(
    kind: AccountKind, session: Session, side_effects: SideEffects
) -> AccountUseCases:
    """Create every use case for ``kind`` sharing one repository."""
    repository = kind.repository(session)

    def make(use_case: type[AccountUseCase]):
        return use_case(kind, repository, side_effects)

    return AccountUseCases(
        create=make(CreateAccount),
        get=make(GetAccount),
        get_by_email=make(GetAccountByEmail),
        list=make(ListAccounts),
        search=make(SearchAccounts),
        update=make(UpdateAccount),
        delete=make(DeleteAccount),
        confirm_email=make(ConfirmAccountEmail),
        activate=make(ActivateAccount),
        deactivate=make(DeactivateAccount),
    )


__all__ = [
    "AccountUseCase",
    "AccountUseCases",
    "build_account_use_cases",
    "CreateAccountRequest",
    "UpdateAccountRequest",
    "CreateAccount",
    "GetAccount",
    "GetAccountByEmail",
    "ListAccounts",
    "SearchAccounts",
    "UpdateAccount",
    "DeleteAccount",
    "ConfirmAccountEmail",
    "ActivateAccount",
    "DeactivateAccount",
]
