"""Entity data service interface.

The data service is the persistence collaborator every DomainService
delegates to. Implementations live in the persistence layer (or in the
application that owns the storage).
"""

from abc import ABC, abstractmethod
from collections.abc import Iterable
from typing import Generic, TypeVar

from entitykit.domain.value import EntityIdentity

TEntity = TypeVar("TEntity")
TId = TypeVar("TId")


class EntityDataService(ABC, Generic[TEntity, TId]):
    """CRUD contract for a single entity type.

    Lookups signal absence with None rather than an error; validation and
    "not found" reporting are the DomainService's job.

    Attributes:
        identity: Accessor for the entity's id attribute
        entity_name: Name of the stored entity type, used in messages
        supports_upsert_on_update: Whether ``update`` of an entity with an
            empty id creates a new record instead of failing
    """

    identity: EntityIdentity = EntityIdentity()
    entity_name: str = "Entity"
    supports_upsert_on_update: bool = False

    def __init__(self, identity: EntityIdentity | None = None) -> None:
        if identity is not None:
            self.identity = identity

    @abstractmethod
    def get_all(self) -> Iterable[TEntity]:
        """Return every stored entity, unfiltered (lazily or as a list)."""
        pass

    @abstractmethod
    def get_by_id(self, entity_id: TId) -> TEntity | None:
        """Find an entity by id.

        Args:
            entity_id: The entity identifier

        Returns:
            The entity if found, None otherwise (including for an empty id)
        """
        pass

    @abstractmethod
    def add(self, entity: TEntity) -> TEntity:
        """Persist a new entity.

        Args:
            entity: Entity to store

        Returns:
            The stored entity, carrying its assigned id

        Raises:
            InvalidArgumentError: If entity is None
        """
        pass

    @abstractmethod
    def update(self, entity: TEntity) -> TEntity:
        """Persist changes to a stored entity.

        Args:
            entity: Entity carrying the id of a stored record

        Returns:
            The updated entity

        Raises:
            InvalidArgumentError: If entity is None
            DataServiceError: If no stored record matches (store-specific)
        """
        pass

    @abstractmethod
    def delete(self, entity: TEntity) -> None:
        """Remove a stored entity.

        Args:
            entity: Entity carrying the id of a stored record

        Raises:
            DataServiceError: If the entity is not stored (store-specific)
        """
        pass
