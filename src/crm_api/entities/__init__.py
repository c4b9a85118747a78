"""Entities module with an entity-centric structure.

Each entity has its own package containing:
- entity.py: Domain model
- table.py: Database persistence model
- repository.py: Data access layer

Customers and users share the ``account`` package and differ only in their
table and in the ``AccountKind`` that describes them.
"""

from .account import Account, AccountRepository, AccountTable
from .customer import Customer, CustomerRepository, CustomerTable
from .kinds import ACCOUNT_KINDS, CUSTOMER, USER, AccountKind
from .user import User, UserRepository, UserTable

__all__ = [
    "Account",
    "AccountTable",
    "AccountRepository",
    "AccountKind",
    "ACCOUNT_KINDS",
    "CUSTOMER",
    "USER",
    "Customer",
    "CustomerTable",
    "CustomerRepository",
    "User",
    "UserTable",
    "UserRepository",
]
