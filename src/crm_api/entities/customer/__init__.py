"""Entity package: Customer."""

from .entity import Customer
from .repository import CustomerRepository
from .table import CustomerTable

__all__ = ["Customer", "CustomerRepository", "CustomerTable"]
