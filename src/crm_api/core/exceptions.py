"""Domain errors raised by the account use cases.

The HTTP layer maps each class to a status code; nothing here knows about HTTP.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from crm_api.entities.kinds import AccountKind


class AccountError(Exception):
    """Base class for every expected account failure."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class AccountNotFoundError(AccountError):
    def __init__(self, kind: AccountKind, account_id: str) -> None:
        super().__init__(f"{kind.label} with ID '{account_id}' not found")
        self.account_id = account_id


class AccountEmailNotFoundError(AccountNotFoundError):
    def __init__(self, kind: AccountKind, email: str) -> None:
        AccountError.__init__(self, f"{kind.label} with email '{email}' not found")
        self.account_id = None
        self.email = email


class EmailAlreadyExistsError(AccountError):
    def __init__(self, kind: AccountKind, email: str) -> None:
        super().__init__(f"{kind.label} with email '{email}' already exists")
        self.email = email


class AccountAlreadyActiveError(AccountError):
    def __init__(self, kind: AccountKind, account_id: str) -> None:
        super().__init__(f"{kind.label} with ID '{account_id}' is already active")
        self.account_id = account_id


class AccountAlreadyInactiveError(AccountError):
    def __init__(self, kind: AccountKind, account_id: str) -> None:
        super().__init__(f"{kind.label} with ID '{account_id}' is already inactive")
        self.account_id = account_id


class InvalidSearchQueryError(AccountError):
    def __init__(self, query: str | None) -> None:
        super().__init__(
            f"Search query '{query or ''}' is invalid. "
            "Query must be at least 2 characters long."
        )
        self.query = query
