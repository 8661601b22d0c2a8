"""Tests for index setup, sample data and the health endpoint."""

from unittest.mock import AsyncMock, MagicMock

import pytest
from pymongo import ASCENDING
from pymongo.errors import ServerSelectionTimeoutError

from app.database import init_db, insert_sample_data


@pytest.fixture
def database():
    database = MagicMock()
    database.collection_name = "employee"
    database.employees.create_index = AsyncMock()
    database.employees.count_documents = AsyncMock()
    database.employees.insert_many = AsyncMock()
    database.ping = AsyncMock()
    return database


@pytest.mark.asyncio
async def test_init_db_creates_lookup_indexes(database):
    await init_db(database)

    keys = [call.args[0] for call in database.employees.create_index.await_args_list]
    assert keys == [[("organizationId", ASCENDING)], [("departmentId", ASCENDING)]]


@pytest.mark.asyncio
async def test_sample_data_skipped_when_collection_has_documents(database):
    database.employees.count_documents.return_value = 5

    assert await insert_sample_data(database) is False
    database.employees.insert_many.assert_not_awaited()


@pytest.mark.asyncio
async def test_sample_data_inserted_into_empty_collection(database):
    database.employees.count_documents.return_value = 0

    assert await insert_sample_data(database) is True
    documents = database.employees.insert_many.await_args.args[0]
    assert all({"organizationId", "departmentId", "name", "birthdate", "position"} <= set(d) for d in documents)


class TestHealth:

    @pytest.mark.asyncio
    async def test_healthy(self, test_client, database):
        from app.main import app
        from app.database import get_database

        app.dependency_overrides[get_database] = lambda: database
        response = await test_client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "healthy", "database": "connected"}

    @pytest.mark.asyncio
    async def test_unreachable_database(self, test_client, database):
        from app.main import app
        from app.database import get_database

        database.ping.side_effect = ServerSelectionTimeoutError("no servers")
        app.dependency_overrides[get_database] = lambda: database
        response = await test_client.get("/health")

        assert response.status_code == 503
        assert response.json()["database"] == "disconnected"
