"""Request payloads accepted by the account use cases."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

# Columns that cannot be cleared by sending ``null``.
_REQUIRED_ON_UPDATE = ("first_name", "last_name", "is_active")


class _AccountRequest(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        str_strip_whitespace=True,
        extra="forbid",
    )


class CreateAccountRequest(_AccountRequest):
    """Body of ``POST /customers`` and ``POST /users``."""

    email: str = Field(min_length=1, description="Email address, must be unused")
    first_name: str = Field(min_length=1, description="First name")
    last_name: str = Field(min_length=1, description="Last name")
    phone_number: str | None = Field(default=None, description="Phone number")


class UpdateAccountRequest(_AccountRequest):
    """Partial update; fields left out of the body are not touched."""

    first_name: str | None = Field(default=None, min_length=1)
    last_name: str | None = Field(default=None, min_length=1)
    phone_number: str | None = None
    is_active: bool | None = None

    def changes(self) -> dict[str, Any]:
        """Fields present in the request, keyed by attribute name."""
        provided = self.model_dump(exclude_unset=True)
        return {
            key: value
            for key, value in provided.items()
            if not (value is None and key in _REQUIRED_ON_UPDATE)
        }
