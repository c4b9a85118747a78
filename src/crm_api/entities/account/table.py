"""Column definitions shared by the customers and users tables."""

from sqlmodel import Field

from crm_api.entities._base import EntityTable


class AccountTable(EntityTable, table=False):
    """Persistence columns for an account.

    Not a table by itself: ``CustomerTable`` and ``UserTable`` inherit these
    columns into their own tables.
    """

    email: str = Field(index=True, unique=True)
    first_name: str
    last_name: str
    phone_number: str | None = None
    email_confirmed: bool = Field(default=False)
    is_active: bool = Field(default=True)
