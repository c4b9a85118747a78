"""Tests for the shared account repository against an in-memory database."""

import pytest
from sqlalchemy.exc import IntegrityError

from crm_api.entities import Customer, CustomerRepository, User, UserRepository


@pytest.fixture
def repository(session) -> CustomerRepository:
    return CustomerRepository(session)


def _fields(email: str, first_name: str = "Ada", last_name: str = "Lovelace") -> dict:
    return {"email": email, "first_name": first_name, "last_name": last_name}


class TestInsertAndFind:
    def test_insert_assigns_id_and_defaults(self, repository):
        customer = repository.insert(_fields("ada@example.com"))

        assert isinstance(customer, Customer)
        assert customer.id
        assert customer.email_confirmed is False
        assert customer.is_active is True

    def test_insert_ignores_caller_supplied_system_fields(self, repository):
        customer = repository.insert({**_fields("ada@example.com"), "id": "chosen"})

        assert customer.id != "chosen"

    def test_find_by_id_and_email(self, repository):
        created = repository.insert(_fields("ada@example.com"))

        assert repository.find_by_id(created.id) == created
        assert repository.find_by_email("ada@example.com") == created
        assert repository.find_by_id("missing") is None
        assert repository.find_by_email("missing@example.com") is None

    def test_duplicate_email_raises_and_session_stays_usable(self, repository):
        repository.insert(_fields("ada@example.com"))

        with pytest.raises(IntegrityError):
            repository.insert(_fields("ada@example.com", first_name="Other"))

        assert len(repository.find_all()) == 1

    def test_customers_and_users_are_independent(self, session):
        customers = CustomerRepository(session)
        users = UserRepository(session)

        customers.insert(_fields("same@example.com"))
        user = users.insert(_fields("same@example.com"))

        assert isinstance(user, User)
        assert customers.find_by_email("same@example.com") is not None
        assert users.find_by_id(user.id) == user


class TestListing:
    def test_find_all_returns_newest_first(self, repository, seed_customers):
        seed_customers(
            ("Old", "One", "old@example.com"),
            ("Mid", "Two", "mid@example.com"),
            ("New", "Three", "new@example.com"),
        )

        emails = [customer.email for customer in repository.find_all()]

        assert emails == ["new@example.com", "mid@example.com", "old@example.com"]

    def test_search_matches_names_and_email(self, repository, seed_customers):
        seed_customers(
            ("John", "Smith", "john@example.com"),
            ("Jane", "Johnson", "jane@example.com"),
            ("Bob", "Brown", "bob@johnny.io"),
            ("Alice", "Walker", "alice@example.com"),
        )

        results = repository.search_by_text("John")

        assert [c.email for c in results] == [
            "bob@johnny.io",
            "jane@example.com",
            "john@example.com",
        ]

    def test_search_treats_wildcards_literally(self, repository, seed_customers):
        seed_customers(
            ("Rex", "Sx", "rxs@example.com"),
            ("Under", "Score", "under_score@example.com"),
        )

        assert [c.email for c in repository.search_by_text("r_s")] == [
            "under_score@example.com"
        ]
        assert repository.search_by_text("%") == []


class TestSave:
    def test_save_updates_fields_and_timestamp(self, repository):
        created = repository.insert(_fields("ada@example.com"))

        saved = repository.save(created.model_copy(update={"first_name": "Augusta"}))

        assert saved.first_name == "Augusta"
        assert saved.id == created.id
        assert repository.find_by_id(created.id).first_name == "Augusta"

    def test_save_keeps_creation_time(self, repository):
        created = repository.insert(_fields("ada@example.com"))

        saved = repository.save(created.model_copy(update={"is_active": False}))

        assert saved.created_at.replace(tzinfo=None) == created.created_at.replace(tzinfo=None)
        assert saved.updated_at.replace(tzinfo=None) >= created.updated_at.replace(tzinfo=None)

    def test_save_missing_row_raises(self, repository):
        with pytest.raises(ValueError, match="not found"):
            repository.save(Customer(email="ghost@example.com", first_name="G", last_name="H"))


class TestDelete:
    def test_delete_removes_row(self, repository):
        created = repository.insert(_fields("ada@example.com"))

        repository.delete(created.id)

        assert repository.find_by_id(created.id) is None

    def test_delete_unknown_id_is_noop(self, repository):
        repository.delete("missing")
        assert repository.find_all() == []
