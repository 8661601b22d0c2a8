# app/routes/employee.py
import logging
from typing import List, Optional
from fastapi import APIRouter, Depends, Path, Query, Response, status
from app.config import Settings, get_settings
from app.database import Database, get_database
from app.exceptions import InvalidPageRequestError, create_error_response
from app.repositories.employee import EmployeeRepository
from app.schemas.employee import INT64_MAX, INT64_MIN, EmployeeIn, EmployeeOut
from app.schemas.page import Page, PageRequest, parse_sort
from app.services.employee_service import EmployeeService

logger = logging.getLogger(__name__)

router = APIRouter()

NOT_FOUND_RESPONSE = {
    "description": "Employee with given id not found.",
    "content": {"application/json": {"example": create_error_response(
        message="Employee not found",
        details="Employee not found with id: 507f1f77bcf86cd799439011",
    )}},
}
BAD_REQUEST_RESPONSE = {"description": "Missing required fields or wrong field range value."}


def get_employee_repository(database: Database = Depends(get_database)) -> EmployeeRepository:
    return EmployeeRepository(database.employees)


def get_employee_service(
    repository: EmployeeRepository = Depends(get_employee_repository),
) -> EmployeeService:
    return EmployeeService(repository)


def get_page_request(
    page: int = Query(0, ge=0, description="Zero-based page index"),
    size: Optional[int] = Query(None, ge=1, description="Page size"),
    sort: List[str] = Query(default=[], description="Sort order: field[,asc|desc], repeatable"),
    settings: Settings = Depends(get_settings),
) -> PageRequest:
    size = min(size or settings.DEFAULT_PAGE_SIZE, settings.MAX_PAGE_SIZE)
    if page * size > INT64_MAX:
        raise InvalidPageRequestError(f"Page {page} of size {size} is out of range")
    return PageRequest(page=page, size=size, sort=parse_sort(sort))


@router.post(
    "/employees",
    response_model=EmployeeOut,
    summary="Create an employee",
    description="Employee creating operation",
    responses={400: BAD_REQUEST_RESPONSE},
)
@router.post("/employees/", response_model=EmployeeOut, include_in_schema=False)
async def create_employee(employee: EmployeeIn, service: EmployeeService = Depends(get_employee_service)):
    logger.info("Employee create: %s", employee)
    return await service.create(employee)


@router.put(
    "/employees/{employee_id}",
    response_model=EmployeeOut,
    summary="Update an employee",
    description="Replaces every field of the employee found by a given id",
    responses={400: BAD_REQUEST_RESPONSE, 404: NOT_FOUND_RESPONSE},
)
async def update_employee(
    employee_id: str,
    employee: EmployeeIn,
    service: EmployeeService = Depends(get_employee_service),
):
    logger.info("Employee update: id=%s value=%s", employee_id, employee)
    return await service.update(employee_id, employee)


@router.get(
    "/employees/{employee_id}",
    response_model=EmployeeOut,
    summary="Find employee by id",
    description="Returns employee found by a given id",
    responses={404: NOT_FOUND_RESPONSE},
)
async def get_employee(employee_id: str, service: EmployeeService = Depends(get_employee_service)):
    logger.info("Employee find: id=%s", employee_id)
    return await service.find_by_id(employee_id)


@router.delete(
    "/employees/{employee_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete employee by id",
    description="Delete an employee found by a given valid id",
    responses={404: NOT_FOUND_RESPONSE},
)
async def delete_employee(employee_id: str, service: EmployeeService = Depends(get_employee_service)):
    logger.info("Employee delete: id=%s", employee_id)
    await service.delete(employee_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get(
    "/employees",
    response_model=Page[EmployeeOut],
    summary="Listing employees",
    description="Return a page of employees",
)
@router.get("/employees/", response_model=Page[EmployeeOut], include_in_schema=False)
async def get_employees(
    page_request: PageRequest = Depends(get_page_request),
    service: EmployeeService = Depends(get_employee_service),
):
    logger.info("Employee find all: %s", page_request)
    return await service.find_all(page_request)


@router.get(
    "/employees/department/{departmentId}",
    response_model=Page[EmployeeOut],
    summary="Listing employees by department id",
    description="Return a page of employees by a given department id",
)
async def get_employees_by_department(
    department_id: int = Path(..., alias="departmentId", ge=INT64_MIN, le=INT64_MAX),
    page_request: PageRequest = Depends(get_page_request),
    service: EmployeeService = Depends(get_employee_service),
):
    logger.info("Employee find by department: id=%s %s", department_id, page_request)
    return await service.find_by_department(department_id, page_request)


@router.get(
    "/employees/organization/{organizationId}",
    response_model=Page[EmployeeOut],
    summary="Listing employees by organization id",
    description="Return a page of employees by a given organization id",
)
async def get_employees_by_organization(
    organization_id: int = Path(..., alias="organizationId", ge=INT64_MIN, le=INT64_MAX),
    page_request: PageRequest = Depends(get_page_request),
    service: EmployeeService = Depends(get_employee_service),
):
    logger.info("Employee find by organization: id=%s %s", organization_id, page_request)
    return await service.find_by_organization(organization_id, page_request)
