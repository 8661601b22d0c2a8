# app/services/employee_service.py
import logging
from typing import Optional
from app.exceptions import EmployeeNotFoundError
from app.mappers.employee import to_model, to_schema
from app.models.employee import DEPARTMENT_ID, ORGANIZATION_ID, EmployeeModel
from app.repositories.employee import EmployeeRepository
from app.schemas.employee import EmployeeIn, EmployeeOut
from app.schemas.page import Page, PageRequest

logger = logging.getLogger(__name__)


class EmployeeService:
    def __init__(self, repository: EmployeeRepository):
        self.repository = repository

    async def create(self, employee: EmployeeIn) -> EmployeeOut:
        # Ids are assigned by the store
        model = to_model(employee.model_copy(update={"id": None}))
        created = await self.repository.insert(model)
        logger.info("Employee created: id=%s", created.id)
        return to_schema(created)

    async def update(self, employee_id: str, employee: EmployeeIn) -> EmployeeOut:
        await self._verify_exists(employee_id)
        model = to_model(employee.model_copy(update={"id": employee_id}))
        # The record may have been deleted since the check
        if not await self.repository.replace(model):
            raise EmployeeNotFoundError(employee_id)
        logger.info("Employee updated: id=%s", employee_id)
        return to_schema(model)

    async def find_by_id(self, employee_id: str) -> EmployeeOut:
        return to_schema(await self._verify_exists(employee_id))

    async def delete(self, employee_id: str) -> None:
        existing = await self._verify_exists(employee_id)
        if not await self.repository.delete(existing):
            raise EmployeeNotFoundError(employee_id)
        logger.info("Employee deleted: id=%s", employee_id)

    async def find_all(self, page_request: PageRequest) -> Page[EmployeeOut]:
        logger.info("Employee find all: %s", page_request)
        return await self._find_page(None, None, page_request)

    async def find_by_department(self, department_id: int, page_request: PageRequest) -> Page[EmployeeOut]:
        logger.info("Employee find by department: id=%s %s", department_id, page_request)
        return await self._find_page(DEPARTMENT_ID, department_id, page_request)

    async def find_by_organization(self, organization_id: int, page_request: PageRequest) -> Page[EmployeeOut]:
        logger.info("Employee find by organization: id=%s %s", organization_id, page_request)
        return await self._find_page(ORGANIZATION_ID, organization_id, page_request)

    async def _find_page(
        self, filter_key: Optional[str], filter_value: Optional[int], page_request: PageRequest
    ) -> Page[EmployeeOut]:
        models, total = await self.repository.find_page(filter_key, filter_value, page_request)
        return Page[EmployeeOut].build([to_schema(model) for model in models], total, page_request)

    async def _verify_exists(self, employee_id: str) -> EmployeeModel:
        existing = await self.repository.find_by_id(employee_id)
        if existing is None:
            raise EmployeeNotFoundError(employee_id)
        return existing
