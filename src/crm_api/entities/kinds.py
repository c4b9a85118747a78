"""Descriptors that bind the generic account component to a concrete entity."""

from dataclasses import dataclass

from crm_api.entities.account import AccountRepository
from crm_api.entities.customer import CustomerRepository
from crm_api.entities.user import UserRepository


@dataclass(frozen=True)
class AccountKind:
    """Names and persistence class for one account kind.

    ``label`` is used in error messages ("Customer with ID ..."), ``plural``
    in routes and audit action names ("customers.create").
    """

    name: str
    label: str
    plural: str
    repository: type[AccountRepository]

    @property
    def id_key(self) -> str:
        return f"{self.name}_id"

    def action(self, verb: str) -> str:
        return f"{self.plural}.{verb}"


CUSTOMER = AccountKind(
    name="customer",
    label="Customer",
    plural="customers",
    repository=CustomerRepository,
)

USER = AccountKind(
    name="user",
    label="User",
    plural="users",
    repository=UserRepository,
)

ACCOUNT_KINDS: dict[str, AccountKind] = {kind.plural: kind for kind in (CUSTOMER, USER)}
