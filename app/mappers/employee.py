# app/mappers/employee.py
from datetime import datetime, time
from app.models.employee import EmployeeModel
from app.schemas.employee import EmployeeBase, EmployeeOut
from app.utils.object_id import parse_object_id


def to_model(employee: EmployeeBase) -> EmployeeModel:
    employee_id = getattr(employee, "id", None)
    return EmployeeModel(
        id=parse_object_id(employee_id) if employee_id else None,
        organization_id=employee.organization_id,
        department_id=employee.department_id,
        name=employee.name,
        # BSON has no date type
        birthdate=datetime.combine(employee.birthdate, time.min),
        position=employee.position,
    )


def to_schema(model: EmployeeModel) -> EmployeeOut:
    return EmployeeOut(
        id=str(model.id),
        organization_id=model.organization_id,
        department_id=model.department_id,
        name=model.name,
        birthdate=model.birthdate.date(),
        position=model.position,
    )
