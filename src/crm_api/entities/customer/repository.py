from crm_api.entities.account import AccountRepository

from .entity import Customer
from .table import CustomerTable


class CustomerRepository(AccountRepository[Customer, CustomerTable]):
    """Data-access layer for customers."""

    entity_type = Customer
    table_type = CustomerTable
