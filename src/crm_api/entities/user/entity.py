"""User domain entity."""

from crm_api.entities.account import Account


class User(Account):
    """User entity as returned by the /users endpoints."""
