# app/schemas/employee.py
from datetime import date
from typing import Optional
from pydantic import BaseModel, Field, field_validator
from pydantic.alias_generators import to_camel

# BSON integers are signed 64-bit
INT64_MIN = -2**63
INT64_MAX = 2**63 - 1

class EmployeeBase(BaseModel):
    organization_id: int = Field(..., ge=INT64_MIN, le=INT64_MAX, description="Organization the employee belongs to", examples=[1])
    department_id: int = Field(..., ge=INT64_MIN, le=INT64_MAX, description="Department the employee belongs to", examples=[2])
    name: str = Field(..., examples=["Alice"])
    birthdate: date = Field(..., examples=["1990-01-01"])
    position: str = Field(..., examples=["Engineer"])

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be blank")
        return value

    class Config:
        alias_generator = to_camel
        populate_by_name = True

class EmployeeIn(EmployeeBase):
    # Accepted for compatibility, never trusted: create drops it, update overwrites it
    id: Optional[str] = Field(default=None, description="Ignored on create; replaced by the path id on update")

class EmployeeOut(EmployeeBase):
    id: str

    class Config:
        from_attributes = True
