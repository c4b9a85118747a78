"""Account domain entity shared by customers and users."""

from typing import Any

from pydantic import Field

from crm_api.entities._base import Entity


class Account(Entity):
    """A person registered in the system.

    Customers and users carry exactly the same attributes; the concrete
    subclasses only exist so responses and repositories stay typed.
    """

    email: str = Field(description="Email address, unique per account kind")
    first_name: str = Field(description="First name")
    last_name: str = Field(description="Last name")
    phone_number: str | None = Field(default=None, description="Phone number")
    email_confirmed: bool = Field(default=False, description="Whether the email was confirmed")
    is_active: bool = Field(default=True, description="Whether the account is active")

    def __eq__(self, other: Any) -> bool:
        """Compare accounts by business attributes, ignoring timestamps."""
        if not isinstance(other, Account):
            return False

        return (
            type(self) is type(other)
            and self.id == other.id
            and self.email == other.email
            and self.first_name == other.first_name
            and self.last_name == other.last_name
            and self.phone_number == other.phone_number
            and self.email_confirmed == other.email_confirmed
            and self.is_active == other.is_active
        )

    def __hash__(self) -> int:
        """Hash based on business attributes, ignoring timestamps."""
        return hash((
            self.id,
            self.email,
            self.first_name,
            self.last_name,
            self.phone_number,
            self.email_confirmed,
            self.is_active,
        ))
