"""
Employees router.

Handles all employee endpoints:
- GET /employees - List employees (optional gender filter and paging)
- GET /employees/{employee_id} - Get one employee
- POST /employees - Create employee
- PUT /employees/{employee_id} - Replace employee
- DELETE /employees/{employee_id} - Delete employee
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status

from app.api.errors import ERROR_RESPONSES, to_http_exception
from app.core.errors import EmployeeNotFoundError, ServiceError
from app.deps.services import get_employee_service
from app.models.employee_schema import Employee, EmployeeCreate, EmployeeUpdate
from app.models.schema import ErrorResponse
from app.services.employee_service import EmployeeService
from app.services.pagination import paginate, require_both

logger = logging.getLogger(__name__)
employees_router = APIRouter(
    prefix="/employees",
    tags=["Employees"],
    responses={**ERROR_RESPONSES, status.HTTP_409_CONFLICT: {"model": ErrorResponse}},
)


@employees_router.get("", response_model=List[Employee])
async def list_employees(
    gender: Optional[str] = None,
    page: Optional[int] = Query(None),
    page_size: Optional[int] = Query(None, alias="pageSize"),
    service: EmployeeService = Depends(get_employee_service),
):
    """List employees, optionally filtered by gender and sliced into a page."""
    try:
        paged = require_both(page, page_size)
        if gender is not None:
            employees = await service.get_employees_by_gender(gender)
            return paginate(employees, page, page_size) if paged else employees
        if paged:
            return await service.get_employees_paginized(page, page_size)
        return await service.get_employees()
    except ServiceError as e:
        raise to_http_exception(e)
    except Exception:
        logger.exception("Failed to list employees")
        raise HTTPException(status_code=500, detail="Failed to list employees")


@employees_router.get("/{employee_id}", response_model=Employee)
async def get_employee(
    employee_id: str,
    service: EmployeeService = Depends(get_employee_service),
):
    try:
        employee = await service.get_employee(employee_id)
    except ServiceError as e:
        raise to_http_exception(e)
    except Exception:
        logger.exception(f"Failed to get employee {employee_id}")
        raise HTTPException(status_code=500, detail="Failed to get employee")
    if employee is None:
        raise to_http_exception(EmployeeNotFoundError(employee_id))
    return employee


@employees_router.post("", response_model=Employee, status_code=status.HTTP_201_CREATED)
async def create_employee(
    payload: EmployeeCreate,
    service: EmployeeService = Depends(get_employee_service),
):
    try:
        return await service.create_employee(payload)
    except ServiceError as e:
        raise to_http_exception(e)
    except Exception:
        logger.exception("Failed to create employee")
        raise HTTPException(status_code=500, detail="Failed to create employee")


@employees_router.put("/{employee_id}", response_model=Employee)
async def update_employee(
    employee_id: str,
    payload: EmployeeUpdate,
    service: EmployeeService = Depends(get_employee_service),
):
    """Replace every field of an employee, keeping its id."""
    try:
        employee = await service.update_employee(employee_id, payload)
    except ServiceError as e:
        raise to_http_exception(e)
    except Exception:
        logger.exception(f"Failed to update employee {employee_id}")
        raise HTTPException(status_code=500, detail="Failed to update employee")
    if employee is None:
        raise to_http_exception(EmployeeNotFoundError(employee_id))
    return employee


@employees_router.delete("/{employee_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_employee(
    employee_id: str,
    service: EmployeeService = Depends(get_employee_service),
):
    try:
        deleted = await service.delete_employee(employee_id)
    except ServiceError as e:
        raise to_http_exception(e)
    except Exception:
        logger.exception(f"Failed to delete employee {employee_id}")
        raise HTTPException(status_code=500, detail="Failed to delete employee")
    if not deleted:
        raise to_http_exception(EmployeeNotFoundError(employee_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
