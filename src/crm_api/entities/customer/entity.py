"""Customer domain entity."""

from crm_api.entities.account import Account


class Customer(Account):
    """Customer entity as returned by the /customers endpoints."""
