"""Data-access layer shared by the account kinds."""

from typing import Any, ClassVar, Generic, TypeVar

from loguru import logger
from sqlalchemy import or_
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, col, select

from crm_api.entities._base import utc_now
from crm_api.entities.account.entity import Account
from crm_api.entities.account.table import AccountTable

EntityT = TypeVar("EntityT", bound=Account)
TableT = TypeVar("TableT", bound=AccountTable)

# Fields a caller may never overwrite through ``save``.
_SYSTEM_FIELDS = {"id", "created_at", "updated_at"}


class AccountRepository(Generic[EntityT, TableT]):
    """Data-access layer for one account table.

    Every write commits immediately. Reads return domain entities, never rows.
    """

    entity_type: ClassVar[type[Account]]
    table_type: ClassVar[type[AccountTable]]

    def __init__(self, session: Session) -> None:
        self._session = session

    def _to_entity(self, row: TableT) -> EntityT:
        return self.entity_type.model_validate(row, from_attributes=True)  # type: ignore[return-value]

    def _commit(self) -> None:
        try:
            self._session.commit()
        except IntegrityError:
            self._session.rollback()
            raise

    def find_by_id(self, account_id: str) -> EntityT | None:
        row = self._session.get(self.table_type, account_id)
        if row is None:
            return None
        return self._to_entity(row)

    def find_by_email(self, email: str) -> EntityT | None:
        statement = select(self.table_type).where(self.table_type.email == email)
        row = self._session.exec(statement).first()
        if row is None:
            return None
        return self._to_entity(row)

    def find_all(self) -> list[EntityT]:
        """Return every account, newest first."""
        statement = select(self.table_type).order_by(col(self.table_type.created_at).desc())
        return [self._to_entity(row) for row in self._session.exec(statement).all()]

    def search_by_text(self, text: str) -> list[EntityT]:
        """Substring match over first name, last name and email, newest first.

        ``%`` and ``_`` in ``text`` are matched literally. Case sensitivity is
        whatever the database's ``LIKE`` does.
        """
        table = self.table_type
        statement = (
            select(table)
            .where(
                or_(
                    col(table.first_name).contains(text, autoescape=True),
                    col(table.last_name).contains(text, autoescape=True),
                    col(table.email).contains(text, autoescape=True),
                )
            )
            .order_by(col(table.created_at).desc())
        )
        return [self._to_entity(row) for row in self._session.exec(statement).all()]

    def insert(self, fields: dict[str, Any]) -> EntityT:
        """Insert a new row; id and timestamps are assigned here.

        Raises:
            IntegrityError: if a unique constraint (email) is violated.
        """
        data = {key: value for key, value in fields.items() if key not in _SYSTEM_FIELDS}
        row = self.table_type(**data)
        self._session.add(row)
        self._commit()
        self._session.refresh(row)
        logger.debug("Inserted {} {}", self.table_type.__tablename__, row.id)
        return self._to_entity(row)

    def save(self, entity: EntityT) -> EntityT:
        """Persist the mutable fields of ``entity`` and refresh ``updated_at``.

        Raises:
            ValueError: if the row no longer exists.
        """
        row = self._session.get(self.table_type, entity.id)
        if row is None:
            raise ValueError(f"{self.entity_type.__name__} with ID '{entity.id}' not found")

        for key, value in entity.model_dump(exclude=_SYSTEM_FIELDS).items():
            setattr(row, key, value)
        row.updated_at = utc_now()

        self._session.add(row)
        self._commit()
        self._session.refresh(row)
        return self._to_entity(row)

    def delete(self, account_id: str) -> None:
        """Hard delete; absent ids are ignored."""
        row = self._session.get(self.table_type, account_id)
        if row is None:
            return
        self._session.delete(row)
        self._commit()
