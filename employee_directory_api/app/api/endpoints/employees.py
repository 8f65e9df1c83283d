"""
Employee endpoints.

These routes expose a CRUD API for the employee directory.  The list
endpoint accepts optional ``search``, ``sort`` and ``order`` query
parameters.  Unknown ids yield 404; storage failures yield 500 with a
short message naming the failed operation.
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, HTTPException, Query, Response, status

from employee_directory_api.app.core.storage import StorageError
from employee_directory_api.app.schemas.employee import (
    EmployeeCreate,
    EmployeeFilter,
    EmployeeRead,
    EmployeeUpdate,
)
from employee_directory_api.app.services.employee_service import (
    EmployeeNotFoundError,
    EmployeeService,
)

router = APIRouter()
logger = logging.getLogger(__name__)

NOT_FOUND = "Employee not found"


def _storage_failure(message: str, exc: StorageError) -> HTTPException:
    logger.exception("%s: %s", message, exc)
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=message)


@router.get("", response_model=List[EmployeeRead])
async def list_employees(
    search: Optional[str] = Query(None, description="Case-insensitive text matched against names, email, position and department"),
    sort: Optional[str] = Query(None, description="Field to sort by, e.g. lastName or salary"),
    order: Optional[str] = Query(None, description="asc (default) or desc"),
) -> List[EmployeeRead]:
    """Return employees, optionally filtered by ``search`` and sorted.

    An unknown ``sort`` field leaves the stored order unchanged.
    """
    try:
        return await EmployeeService.list_employees(EmployeeFilter(search=search, sort=sort, order=order))
    except StorageError as e:
        raise _storage_failure("Failed to fetch employees", e) from e


@router.get("/{employee_id}", response_model=EmployeeRead)
async def get_employee(employee_id: str) -> EmployeeRead:
    """Retrieve a single employee by ID."""
    try:
        return await EmployeeService.get_employee(employee_id)
    except EmployeeNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND) from e
    except StorageError as e:
        raise _storage_failure("Failed to fetch employee", e) from e


@router.post("", response_model=EmployeeRead, status_code=status.HTTP_201_CREATED)
async def create_employee(employee: EmployeeCreate) -> EmployeeRead:
    """Create a new employee; the id is generated by the server."""
    try:
        return await EmployeeService.create_employee(employee)
    except StorageError as e:
        raise _storage_failure("Failed to create employee", e) from e


@router.put("/{employee_id}", response_model=EmployeeRead)
async def update_employee(employee_id: str, employee: EmployeeUpdate) -> EmployeeRead:
    """Update an existing employee.

    Only the fields present in the body are changed.  An ``id`` in the
    body is ignored.
    """
    try:
        return await EmployeeService.update_employee(employee_id, employee)
    except EmployeeNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND) from e
    except StorageError as e:
        raise _storage_failure("Failed to update employee", e) from e


@router.delete("/{employee_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
async def delete_employee(employee_id: str) -> Response:
    """Delete an employee."""
    try:
        await EmployeeService.delete_employee(employee_id)
    except EmployeeNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND) from e
    except StorageError as e:
        raise _storage_failure("Failed to delete employee", e) from e
    return Response(status_code=status.HTTP_204_NO_CONTENT)
