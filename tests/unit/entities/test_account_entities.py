"""Unit tests for the account entities, tables and kinds."""

from datetime import timedelta
from uuid import UUID

from crm_api.entities import (
    ACCOUNT_KINDS,
    CUSTOMER,
    USER,
    Customer,
    CustomerRepository,
    CustomerTable,
    User,
    UserRepository,
    UserTable,
)


class TestAccountEntity:
    def test_creation_with_defaults(self):
        customer = Customer(email="ada@example.com", first_name="Ada", last_name="Lovelace")

        UUID(customer.id)
        assert customer.phone_number is None
        assert customer.email_confirmed is False
        assert customer.is_active is True
        assert customer.created_at.tzinfo is not None

    def test_accepts_camel_case_input(self):
        user = User.model_validate(
            {
                "email": "grace@example.com",
                "firstName": "Grace",
                "lastName": "Hopper",
                "phoneNumber": "555-0100",
                "emailConfirmed": True,
            }
        )

        assert user.first_name == "Grace"
        assert user.phone_number == "555-0100"
        assert user.email_confirmed is True

    def test_serializes_with_camel_case_keys(self):
        customer = Customer(email="ada@example.com", first_name="Ada", last_name="Lovelace")

        data = customer.model_dump(by_alias=True, mode="json")

        assert set(data) == {
            "id",
            "email",
            "firstName",
            "lastName",
            "phoneNumber",
            "emailConfirmed",
            "isActive",
            "createdAt",
            "updatedAt",
        }

    def test_equality_ignores_timestamps(self):
        first = Customer(id="c-1", email="a@example.com", first_name="A", last_name="B")
        second = first.model_copy(update={"updated_at": first.updated_at + timedelta(hours=1)})

        assert first == second
        assert hash(first) == hash(second)

    def test_equality_compares_business_fields(self):
        first = Customer(id="c-1", email="a@example.com", first_name="A", last_name="B")
        second = first.model_copy(update={"is_active": False})

        assert first != second

    def test_customer_never_equals_user_with_same_fields(self):
        fields = {"id": "x", "email": "a@example.com", "first_name": "A", "last_name": "B"}

        assert Customer(**fields) != User(**fields)


class TestTables:
    def test_table_names(self):
        assert CustomerTable.__tablename__ == "customers"
        assert UserTable.__tablename__ == "users"

    def test_email_column_is_unique(self):
        for table in (CustomerTable, UserTable):
            assert table.__table__.c.email.unique is True


class TestAccountKinds:
    def test_registry(self):
        assert ACCOUNT_KINDS == {"customers": CUSTOMER, "users": USER}

    def test_kinds_bind_their_repositories(self):
        assert CUSTOMER.repository is CustomerRepository
        assert USER.repository is UserRepository
        assert CustomerRepository.entity_type is Customer
        assert UserRepository.table_type is UserTable

    def test_action_and_id_key(self):
        assert CUSTOMER.action("create") == "customers.create"
        assert USER.action("confirm_email") == "users.confirm_email"
        assert CUSTOMER.id_key == "customer_id"
        assert USER.id_key == "user_id"
