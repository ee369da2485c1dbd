"""SQLAlchemy implementation of the entity data service."""

from collections.abc import Callable
from typing import Any, Generic, TypeVar

import logfire
from sqlalchemy import Table, delete, insert, select, update
from sqlalchemy.orm import Session

from entitykit.domain.error import InvalidArgumentError
from entitykit.domain.repository import EntityDataService
from entitykit.domain.value import EntityIdentity, is_null_or_empty
from entitykit.persistence.error import EntityNotStoredError

TEntity = TypeVar("TEntity")
TId = TypeVar("TId")


class SqlAlchemyEntityDataService(EntityDataService[TEntity, TId], Generic[TEntity, TId]):
    """Table-backed data service using SQLAlchemy Core.

    Entities are pydantic models by default: rows are written with
    ``model_dump()`` and read back with ``model_validate()``. Pass ``to_row``
    and ``from_row`` for other entity types.

    An empty id is left out of the INSERT so the database assigns one.
    Updating an entity with an empty id inserts it. Statements are flushed
    but not committed; whoever owns the session commits.
    """

    supports_upsert_on_update = True

    def __init__(
        self,
        session: Session,
        table: Table,
        model: type[TEntity] | None = None,
        identity: EntityIdentity | None = None,
        to_row: Callable[[TEntity], dict[str, Any]] | None = None,
        from_row: Callable[[dict[str, Any]], TEntity] | None = None,
        entity_name: str | None = None,
    ) -> None:
        """Initialize data service with a database session.

        Args:
            session: Database session
            table: Table holding the entity rows
            model: Pydantic model class for the entity
            identity: Id accessor; its field must name the primary key column
            to_row: Entity -> column values (defaults to model_dump)
            from_row: Column values -> entity (defaults to model.model_validate)
            entity_name: Name used in errors and spans (defaults to model name)
        """
        super().__init__(identity)
        if from_row is None and model is None:
            raise ValueError("Either model or from_row is required")

        self.session = session
        self.table = table
        self._id_column = table.c[self.identity.field]
        self._to_row = to_row or (lambda entity: entity.model_dump())
        self._from_row = from_row or model.model_validate
        self.entity_name = entity_name or (model.__name__ if model else table.name)

    def get_all(self) -> list[TEntity]:
        """Return every stored entity ordered by id."""
        stmt = select(self.table).order_by(self._id_column)
        result = self.session.execute(stmt)
        return [self._from_row(row._asdict()) for row in result.fetchall()]

    def get_by_id(self, entity_id: TId) -> TEntity | None:
        """Find entity by id."""
        if is_null_or_empty(entity_id):
            return None
        stmt = select(self.table).where(self._id_column == entity_id)
        row = self.session.execute(stmt).fetchone()
        return self._from_row(row._asdict()) if row else None

    def add(self, entity: TEntity) -> TEntity:
        """Insert a new row, writing the assigned id back onto the entity."""
        if entity is None:
            raise InvalidArgumentError("entity", "Entity must not be None")

        values = self._values(entity)
        transient = self.identity.is_transient(entity)
        if transient:
            values.pop(self.identity.field, None)

        result = self.session.execute(insert(self.table).values(**values))
        self.session.flush()

        if transient:
            self.identity.set(entity, result.inserted_primary_key[0])

        logfire.debug(
            "Row inserted",
            table=self.table.name,
            entity_id=str(self.identity.get(entity)),
        )
        return entity

    def update(self, entity: TEntity) -> TEntity:
        """Update the row matching the entity's id, or insert if it has none."""
        if entity is None:
            raise InvalidArgumentError("entity", "Entity must not be None")

        if self.identity.is_transient(entity):
            return self.add(entity)

        entity_id = self.identity.get(entity)
        stmt = (
            update(self.table)
            .where(self._id_column == entity_id)
            .values(**self._values(entity))
        )
        result = self.session.execute(stmt)
        if result.rowcount == 0:
            raise EntityNotStoredError(self.entity_name, entity_id)

        self.session.flush()
        return entity

    def delete(self, entity: TEntity) -> None:
        """Delete the row matching the entity's id."""
        if entity is None:
            raise InvalidArgumentError("entity", "Entity must not be None")

        entity_id = self.identity.get(entity)
        if is_null_or_empty(entity_id):
            raise EntityNotStoredError(self.entity_name, entity_id)

        result = self.session.execute(
            delete(self.table).where(self._id_column == entity_id)
        )
        if result.rowcount == 0:
            raise EntityNotStoredError(self.entity_name, entity_id)

        self.session.flush()

    def _values(self, entity: TEntity) -> dict[str, Any]:
        """Column values for the entity, restricted to the table's columns."""
        columns = set(self.table.c.keys())
        return {
            key: value for key, value in self._to_row(entity).items() if key in columns
        }
