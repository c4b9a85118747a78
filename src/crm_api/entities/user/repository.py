from crm_api.entities.account import AccountRepository

from .entity import User
from .table import UserTable


class UserRepository(AccountRepository[User, UserTable]):
    """Data-access layer for users."""

    entity_type = User
    table_type = UserTable
