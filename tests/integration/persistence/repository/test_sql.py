"""Integration tests for SqlAlchemyEntityDataService.

Runs against in-memory SQLite through the same DI wiring production uses.
"""

from uuid import UUID, uuid4

import pytest
from sqlalchemy import Column, MetaData, String, Table, Uuid
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from entitykit.domain.model import DomainModel
from entitykit.domain.value import EntityIdentity
from entitykit.persistence.error import EntityNotStoredError
from entitykit.persistence.repository import SqlAlchemyEntityDataService
from entitykit.testing import ContractHarness, contract_test
from tests.harness import create_env_fixture
from tests.model import Employee, employees_table, make_employee

# Integration test fixture
integration_env = create_env_fixture()


@pytest.fixture
def session(integration_env) -> Session:
    return integration_env.get(Session)


@pytest.fixture
def data_service(session):
    return SqlAlchemyEntityDataService(session, employees_table, Employee)


@pytest.fixture
def harness(data_service):
    return ContractHarness(
        data_service=data_service, make_entity=make_employee, empty_id=0
    )


test_sql_contract = contract_test()


class Room(DomainModel):
    """Entity keyed by a client-generated UUID under a custom column name."""

    room_id: UUID | None = None
    name: str = ""


rooms_metadata = MetaData()
rooms_table = Table(
    "rooms",
    rooms_metadata,
    Column("room_id", Uuid, primary_key=True),
    Column("name", String(100), nullable=False),
)


class TestAdd:
    """Tests for add method."""

    def test_add_writes_database_id_back(self, data_service):
        """The database-assigned id is set on the returned entity."""
        employee = make_employee()

        result = data_service.add(employee)

        assert result is employee
        assert isinstance(result.id, int)
        assert result.id > 0

    def test_add_keeps_preset_id(self, data_service):
        """An explicit unused id is inserted as given."""
        employee = make_employee()
        employee.id = 100

        data_service.add(employee)

        assert data_service.get_by_id(100).first_name == "Ada"

    def test_add_duplicate_id_raises_database_error(self, data_service, session):
        """Driver errors pass through untranslated."""
        # Arrange
        employee = data_service.add(make_employee())
        duplicate = make_employee("Grace", "Hopper")
        duplicate.id = employee.id

        # Act & Assert
        with pytest.raises(IntegrityError):
            data_service.add(duplicate)
        session.rollback()

    def test_add_round_trips_all_columns(self, data_service):
        """Stored rows map back to equal entities."""
        employee = data_service.add(make_employee())

        assert data_service.get_by_id(employee.id) == employee


class TestGetAll:
    """Tests for get_all method."""

    def test_get_all_ordered_by_id(self, data_service):
        """Entities come back in id order."""
        # Arrange
        for name in ("Ada", "Grace", "Katherine"):
            data_service.add(make_employee(name))

        # Act
        result = data_service.get_all()

        # Assert
        assert [e.first_name for e in result] == ["Ada", "Grace", "Katherine"]
        assert [e.id for e in result] == sorted(e.id for e in result)


class TestUpdate:
    """Tests for update method."""

    def test_update_changes_row(self, data_service):
        """Updated values are read back."""
        # Arrange
        employee = data_service.add(make_employee())
        employee.last_name = "King"

        # Act
        data_service.update(employee)

        # Assert
        assert data_service.get_by_id(employee.id).last_name == "King"

    def test_update_unknown_id_raises(self, data_service):
        """Updating a row that does not exist fails."""
        employee = make_employee()
        employee.id = 100

        with pytest.raises(EntityNotStoredError) as exc_info:
            data_service.update(employee)
        assert exc_info.value.resource == "Employee"
        assert exc_info.value.identifier == 100


class TestDelete:
    """Tests for delete method."""

    def test_delete_empty_id_raises(self, data_service):
        """Deleting an entity that was never stored fails."""
        with pytest.raises(EntityNotStoredError):
            data_service.delete(make_employee())


class TestCustomIdentity:
    """Tests for entities with a non-default id column."""

    @pytest.fixture
    def room_service(self, session):
        rooms_metadata.create_all(session.connection())
        return SqlAlchemyEntityDataService(
            session,
            rooms_table,
            Room,
            identity=EntityIdentity(field="room_id"),
        )

    def test_custom_id_field(self, room_service):
        """Lookups and deletes use the configured id column."""
        # Arrange
        room = Room(room_id=uuid4(), name="Library")
        room_service.add(room)

        # Act
        found = room_service.get_by_id(room.room_id)
        room_service.delete(found)

        # Assert
        assert found.name == "Library"
        assert room_service.get_by_id(room.room_id) is None

    def test_requires_model_or_mapper(self, session):
        """A data service needs some way to build entities from rows."""
        with pytest.raises(ValueError, match="model or from_row"):
            SqlAlchemyEntityDataService(session, rooms_table)
