# app/models/employee.py
from datetime import datetime
from typing import Optional
from bson import ObjectId
from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

# Stored field names used for the secondary lookups
ORGANIZATION_ID = "organizationId"
DEPARTMENT_ID = "departmentId"

class EmployeeModel(BaseModel):
    id: Optional[ObjectId] = Field(default=None, alias="_id")
    organization_id: int
    department_id: int
    name: str
    birthdate: datetime
    position: str

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        arbitrary_types_allowed = True

    def to_document(self) -> dict:
        return self.model_dump(by_alias=True, exclude={"id"})
