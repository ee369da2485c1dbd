"""In-memory implementation of the entity data service."""

from collections.abc import Callable
from copy import deepcopy
from itertools import count
from typing import Any, Generic, TypeVar

import logfire

from entitykit.domain.error import InvalidArgumentError
from entitykit.domain.repository import EntityDataService
from entitykit.domain.value import EntityIdentity, is_null_or_empty
from entitykit.persistence.error import DuplicateEntityError, EntityNotStoredError

TEntity = TypeVar("TEntity")
TId = TypeVar("TId")


def sequential_ids(start: int = 1) -> Callable[[], int]:
    """Id factory yielding start, start + 1, ..."""
    counter = count(start)
    return lambda: next(counter)


class InMemoryEntityDataService(EntityDataService[TEntity, TId], Generic[TEntity, TId]):
    """Dict-backed data service.

    Entities are deep-copied on the way in and out so callers never share
    state with the store. A pre-set unused id is honoured on add; otherwise
    ids come from ``id_factory`` (skipping ids already taken).
    """

    def __init__(
        self,
        identity: EntityIdentity | None = None,
        id_factory: Callable[[], Any] | None = None,
        upsert_on_update: bool = False,
        entity_name: str | None = None,
    ) -> None:
        """Initialize empty store.

        Args:
            identity: Id accessor for the stored entity type
            id_factory: Produces candidate ids for new entities
            upsert_on_update: Treat update of an empty-id entity as add
            entity_name: Name used in errors and spans
        """
        super().__init__(identity)
        self._entities: dict[Any, TEntity] = {}
        self._id_factory = id_factory or sequential_ids()
        self.supports_upsert_on_update = upsert_on_update
        if entity_name:
            self.entity_name = entity_name

    def get_all(self) -> list[TEntity]:
        """Return every stored entity."""
        return [deepcopy(entity) for entity in self._entities.values()]

    def get_by_id(self, entity_id: TId) -> TEntity | None:
        """Find entity by id."""
        if is_null_or_empty(entity_id):
            return None
        entity = self._entities.get(entity_id)
        return deepcopy(entity) if entity is not None else None

    def add(self, entity: TEntity) -> TEntity:
        """Store a new entity, assigning an id if it has none."""
        if entity is None:
            raise InvalidArgumentError("entity", "Entity must not be None")

        if self.identity.is_transient(entity):
            self.identity.set(entity, self._next_id())
        elif self.identity.get(entity) in self._entities:
            raise DuplicateEntityError(self.entity_name, self.identity.get(entity))

        entity_id = self.identity.get(entity)
        self._entities[entity_id] = deepcopy(entity)
        logfire.debug("Entity stored", entity=self.entity_name, entity_id=str(entity_id))
        return entity

    def update(self, entity: TEntity) -> TEntity:
        """Replace a stored entity."""
        if entity is None:
            raise InvalidArgumentError("entity", "Entity must not be None")

        if self.identity.is_transient(entity) and self.supports_upsert_on_update:
            return self.add(entity)

        entity_id = self.identity.get(entity)
        if is_null_or_empty(entity_id) or entity_id not in self._entities:
            raise EntityNotStoredError(self.entity_name, entity_id)

        self._entities[entity_id] = deepcopy(entity)
        return entity

    def delete(self, entity: TEntity) -> None:
        """Remove a stored entity."""
        if entity is None:
            raise InvalidArgumentError("entity", "Entity must not be None")

        entity_id = self.identity.get(entity)
        if is_null_or_empty(entity_id) or entity_id not in self._entities:
            raise EntityNotStoredError(self.entity_name, entity_id)

        del self._entities[entity_id]

    def _next_id(self) -> Any:
        """Next id from the factory that is neither empty nor taken."""
        while True:
            candidate = self._id_factory()
            if not is_null_or_empty(candidate) and candidate not in self._entities:
                return candidate
