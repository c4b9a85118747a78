"""Customer database table model."""

from crm_api.entities.account import AccountTable


class CustomerTable(AccountTable, table=True):
    """Database persistence model for customers."""

    __tablename__ = "customers"
