"""Account building blocks shared by customers and users.

- Account: Domain entity
- AccountTable: Column definitions (not a table on its own)
- AccountRepository: Data access layer, bound to a concrete table by subclasses
"""

from .entity import Account
from .repository import AccountRepository
from .table import AccountTable

__all__ = ["Account", "AccountRepository", "AccountTable"]
