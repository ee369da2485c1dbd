"""Generic CRUD domain service."""

from collections.abc import Callable
from typing import Generic, TypeVar

import logfire

from entitykit.domain.error import InvalidArgumentError, NotFoundError
from entitykit.domain.repository import EntityDataService
from entitykit.domain.value import is_null_or_empty

from .base import Service

TDomain = TypeVar("TDomain")
TId = TypeVar("TId")

AddPreProcess = Callable[[TDomain], None]
UpdatePreProcess = Callable[[TDomain, TDomain], None]
PostProcess = Callable[[TDomain], None]


class DomainService(Service, Generic[TDomain, TId]):
    """Validating CRUD service over an entity data service.

    Fails fast on bad input, turns lookup misses into ``NotFoundError`` and
    runs optional hooks around mutations in the order
    pre-process -> data service -> post-process. Errors raised by the data
    service propagate unchanged.

    Example:
        class EmployeeService(DomainService[Employee, int]):
            pass

        service = EmployeeService(employee_data_service)
        employee = service.add(Employee(first_name="Ada"), pre_process=stamp)
    """

    def __init__(
        self,
        data_service: EntityDataService[TDomain, TId],
        entity_name: str | None = None,
    ) -> None:
        """Initialize domain service.

        Args:
            data_service: Persistence collaborator for the entity
            entity_name: Name used in NotFoundError (defaults to the data
                service's entity name)
        """
        self.data_service = data_service
        self.entity_name = entity_name or data_service.entity_name

    def get_all(self) -> list[TDomain]:
        """Get all entities.

        Returns:
            Every entity the data service holds, unfiltered
        """
        with logfire.span("domain_service.get_all", entity=self.entity_name):
            entities = list(self.data_service.get_all())
            logfire.info(
                "Entities retrieved", entity=self.entity_name, count=len(entities)
            )
            return entities

    def get_by_id(self, entity_id: TId) -> TDomain:
        """Get an entity by id.

        Args:
            entity_id: Entity identifier

        Returns:
            The stored entity

        Raises:
            InvalidArgumentError: If entity_id is null or empty
            NotFoundError: If no entity has this id
        """
        if is_null_or_empty(entity_id):
            raise InvalidArgumentError("entity_id", "Lookup id must not be empty")

        with logfire.span(
            "domain_service.get_by_id",
            entity=self.entity_name,
            entity_id=str(entity_id),
        ):
            entity = self.data_service.get_by_id(entity_id)
            if entity is None:
                logfire.warn(
                    "Entity not found", entity=self.entity_name, entity_id=str(entity_id)
                )
                raise NotFoundError(self.entity_name, entity_id)
            return entity

    def add(
        self,
        entity: TDomain,
        pre_process: AddPreProcess | None = None,
        post_process: PostProcess | None = None,
    ) -> TDomain:
        """Add a new entity.

        Args:
            entity: Entity to add
            pre_process: Called with the entity before it is stored
            post_process: Called with the stored entity before it is returned

        Returns:
            The stored entity

        Raises:
            InvalidArgumentError: If entity is None
        """
        if entity is None:
            raise InvalidArgumentError("entity", "Entity must not be None")

        with logfire.span("domain_service.add", entity=self.entity_name):
            if pre_process is not None:
                pre_process(entity)

            created = self.data_service.add(entity)

            if post_process is not None:
                post_process(created)

            logfire.info("Entity added", entity=self.entity_name)
            return created

    def update(
        self,
        entity_id: TId,
        new_entity: TDomain,
        pre_process: UpdatePreProcess | None = None,
        post_process: PostProcess | None = None,
    ) -> TDomain:
        """Update a stored entity.

        Args:
            entity_id: Id of the entity being replaced
            new_entity: Entity carrying the new state
            pre_process: Called with (old_entity, new_entity) before storing,
                e.g. to merge fields or record an audit trail
            post_process: Called with the updated entity before it is returned

        Returns:
            The updated entity

        Raises:
            InvalidArgumentError: If entity_id is empty or new_entity is None
            NotFoundError: If no entity has this id
        """
        if is_null_or_empty(entity_id):
            raise InvalidArgumentError("entity_id", "Update id must not be empty")
        if new_entity is None:
            raise InvalidArgumentError("new_entity", "Entity must not be None")

        with logfire.span(
            "domain_service.update",
            entity=self.entity_name,
            entity_id=str(entity_id),
        ):
            old_entity = self.get_by_id(entity_id)

            if pre_process is not None:
                pre_process(old_entity, new_entity)

            updated = self.data_service.update(new_entity)

            if post_process is not None:
                post_process(updated)

            logfire.info(
                "Entity updated", entity=self.entity_name, entity_id=str(entity_id)
            )
            return updated

    def delete(self, entity_id: TId) -> None:
        """Delete a stored entity.

        Args:
            entity_id: Entity identifier

        Raises:
            InvalidArgumentError: If entity_id is null or empty
            NotFoundError: If no entity has this id
        """
        if is_null_or_empty(entity_id):
            raise InvalidArgumentError("entity_id", "Delete id must not be empty")

        with logfire.span(
            "domain_service.delete",
            entity=self.entity_name,
            entity_id=str(entity_id),
        ):
            entity = self.get_by_id(entity_id)
            self.data_service.delete(entity)
            logfire.info(
                "Entity deleted", entity=self.entity_name, entity_id=str(entity_id)
            )
