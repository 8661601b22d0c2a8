"""
Shared pytest fixtures.

The environment is prepared before any ``app`` import so that settings
never point at a real MongoDB deployment.
"""

import os
from datetime import date
from typing import Dict, List, Optional, Tuple

import pytest
import pytest_asyncio
from bson import ObjectId
from httpx import AsyncClient, ASGITransport

os.environ["MONGODB_URI"] = "mongodb://localhost:27017"
os.environ["MONGODB_DB_NAME"] = "employee_service_test"
os.environ["LOG_LEVEL"] = "WARNING"

from app.models.employee import EmployeeModel  # noqa: E402
from app.schemas.employee import EmployeeIn  # noqa: E402
from app.schemas.page import PageRequest  # noqa: E402
from app.utils.object_id import parse_object_id  # noqa: E402


class InMemoryEmployeeRepository:
    """Dict-backed stand-in for EmployeeRepository, same method contract."""

    def __init__(self):
        self.documents: Dict[ObjectId, dict] = {}
        self.writes = 0

    async def insert(self, employee: EmployeeModel) -> EmployeeModel:
        self.writes += 1
        oid = ObjectId()
        self.documents[oid] = {"_id": oid, **employee.to_document()}
        return employee.model_copy(update={"id": oid})

    async def find_by_id(self, employee_id: str) -> Optional[EmployeeModel]:
        oid = parse_object_id(employee_id)
        if oid is None or oid not in self.documents:
            return None
        return EmployeeModel.model_validate(self.documents[oid])

    async def save(self, employee: EmployeeModel) -> EmployeeModel:
        if employee.id is None:
            return await self.insert(employee)
        self.writes += 1
        self.documents[employee.id] = {"_id": employee.id, **employee.to_document()}
        return employee

    async def replace(self, employee: EmployeeModel) -> bool:
        if employee.id not in self.documents:
            return False
        self.writes += 1
        self.documents[employee.id] = {"_id": employee.id, **employee.to_document()}
        return True

    async def delete(self, employee: EmployeeModel) -> bool:
        self.writes += 1
        return self.documents.pop(employee.id, None) is not None

    async def find_page(
        self, filter_key: Optional[str], filter_value: Optional[int], page_request: PageRequest
    ) -> Tuple[List[EmployeeModel], int]:
        matches = [
            doc for doc in self.documents.values()
            if filter_key is None or doc.get(filter_key) == filter_value
        ]
        # Apply the least significant key first; sorted() is stable
        for field, direction in reversed(page_request.sort_spec()):
            matches.sort(key=lambda doc: doc[field], reverse=direction < 0)
        sliced = matches[page_request.offset:page_request.offset + page_request.size]
        return [EmployeeModel.model_validate(doc) for doc in sliced], len(matches)


@pytest.fixture
def repository():
    return InMemoryEmployeeRepository()


@pytest.fixture
def employee_payload():
    """Wire-format body for creating an employee."""
    return {
        "organizationId": 1,
        "departmentId": 2,
        "name": "Alice",
        "birthdate": "1990-01-01",
        "position": "Engineer",
    }


@pytest.fixture
def employee_in():
    return EmployeeIn(
        organization_id=1,
        department_id=2,
        name="Alice",
        birthdate=date(1990, 1, 1),
        position="Engineer",
    )


@pytest_asyncio.fixture
async def test_client(repository):
    """
    HTTPX client talking to the app in-process.

    The repository dependency is replaced with the in-memory one, so the
    lifespan (and MongoDB) is never started.
    """
    from app.main import app
    from app.routes.employee import get_employee_repository

    app.dependency_overrides[get_employee_repository] = lambda: repository
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()
