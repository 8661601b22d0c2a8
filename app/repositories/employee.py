# app/repositories/employee.py
import logging
from typing import List, Optional, Tuple
from motor.motor_asyncio import AsyncIOMotorCollection
from app.models.employee import EmployeeModel
from app.schemas.page import PageRequest
from app.utils.object_id import parse_object_id

logger = logging.getLogger(__name__)


class EmployeeRepository:
    """Reads and writes employee documents in a single MongoDB collection."""

    def __init__(self, collection: AsyncIOMotorCollection):
        self.collection = collection

    async def insert(self, employee: EmployeeModel) -> EmployeeModel:
        result = await self.collection.insert_one(employee.to_document())
        return employee.model_copy(update={"id": result.inserted_id})

    async def find_by_id(self, employee_id: str) -> Optional[EmployeeModel]:
        oid = parse_object_id(employee_id)
        if oid is None:
            return None
        document = await self.collection.find_one({"_id": oid})
        if document is None:
            return None
        return EmployeeModel.model_validate(document)

    async def save(self, employee: EmployeeModel) -> EmployeeModel:
        """Insert ``employee`` or overwrite the document with its id."""
        if employee.id is None:
            return await self.insert(employee)
        await self.collection.replace_one({"_id": employee.id}, employee.to_document(), upsert=True)
        return employee

    async def replace(self, employee: EmployeeModel) -> bool:
        """Overwrite an existing document; returns False if none had this id."""
        result = await self.collection.replace_one({"_id": employee.id}, employee.to_document())
        return result.matched_count > 0

    async def delete(self, employee: EmployeeModel) -> bool:
        result = await self.collection.delete_one({"_id": employee.id})
        return result.deleted_count > 0

    async def find_page(
        self,
        filter_key: Optional[str],
        filter_value: Optional[int],
        page_request: PageRequest,
    ) -> Tuple[List[EmployeeModel], int]:
        """Return one page of employees and the total count matching the filter."""
        query = {filter_key: filter_value} if filter_key else {}
        total = await self.collection.count_documents(query)
        cursor = (
            self.collection.find(query)
            .sort(page_request.sort_spec())
            .skip(page_request.offset)
            .limit(page_request.size)
        )
        documents = await cursor.to_list(length=page_request.size)
        logger.debug("Fetched %d of %d employees for %s", len(documents), total, query)
        return [EmployeeModel.model_validate(document) for document in documents], total
