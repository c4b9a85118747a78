"""User database table model."""

from crm_api.entities.account import AccountTable


class UserTable(AccountTable, table=True):
    """Database persistence model for users."""

    __tablename__ = "users"
