"""
Service layer for employee records.

Every operation loads the full collection from the record store,
applies its change and, for mutations, writes the full collection
back.  Nothing is cached between calls so each operation sees the
latest persisted state.  Mutations hold the store lock for the whole
read-modify-write cycle and work on the raw stored entries, so entries
that fail validation are written back exactly as they were read.

Unknown ids raise :class:`EmployeeNotFoundError` before anything is
written.  :class:`StorageError` from the store is propagated to the
caller unchanged.
"""

from __future__ import annotations

import logging
import uuid
from typing import Any, List, Optional

from pydantic import ValidationError

from employee_directory_api.app.core.storage import get_store
from employee_directory_api.app.schemas.employee import (
    EmployeeCreate,
    EmployeeFilter,
    EmployeeRead,
    EmployeeUpdate,
)
from employee_directory_api.app.services.query_service import query_employees


logger = logging.getLogger(__name__)


class EmployeeNotFoundError(LookupError):
    """No employee with the requested id exists."""

    def __init__(self, employee_id: str) -> None:
        super().__init__(f"Employee {employee_id} not found")
        self.employee_id = employee_id


def new_employee_id() -> str:
    return str(uuid.uuid4())


def _document_id(document: Any) -> Optional[str]:
    return document.get("id") if isinstance(document, dict) else None


class EmployeeService:
    """Service class for managing employee records."""

    @classmethod
    async def list_employees(cls, criteria: Optional[EmployeeFilter] = None) -> List[EmployeeRead]:
        """Return the employees matching ``criteria``, searched and sorted."""
        return query_employees(get_store().load_all(), criteria)

    @classmethod
    async def get_employee(cls, employee_id: str) -> EmployeeRead:
        """Retrieve a single employee by ID."""
        for employee in get_store().load_all():
            if employee.id == employee_id:
                return employee
        raise EmployeeNotFoundError(employee_id)

    @classmethod
    async def create_employee(cls, data: EmployeeCreate) -> EmployeeRead:
        """Append a new employee with a freshly generated id and return it."""
        store = get_store()
        with store.lock:
            documents = store.load_documents(strict=True)
            employee = EmployeeRead(id=new_employee_id(), **data.model_dump())
            documents.append(employee.to_document())
            store.save_documents(documents)
        logger.info("Created employee %s", employee.id)
        return employee

    @classmethod
    async def update_employee(cls, employee_id: str, data: EmployeeUpdate) -> EmployeeRead:
        """Merge the fields set in ``data`` onto an existing employee.

        Fields absent from the patch keep their stored value and the
        id never changes.  Stored entries that are not valid employees
        cannot be updated and are reported as missing.
        """
        store = get_store()
        with store.lock:
            documents = store.load_documents(strict=True)
            for index, document in enumerate(documents):
                if _document_id(document) != employee_id:
                    continue
                try:
                    current = EmployeeRead.model_validate(document)
                except ValidationError:
                    logger.warning("Employee %s is stored in an invalid form and cannot be updated", employee_id)
                    continue
                break
            else:
                raise EmployeeNotFoundError(employee_id)
            changes = data.changes()
            updated = current.model_copy(update=changes)
            documents[index] = updated.to_document()
            store.save_documents(documents)
        logger.info("Updated employee %s (%s)", employee_id, ", ".join(sorted(changes)) or "no changes")
        return updated

    @classmethod
    async def delete_employee(cls, employee_id: str) -> None:
        """Remove the entries stored under ``employee_id``; every other entry is kept as is."""
        store = get_store()
        with store.lock:
            documents = store.load_documents(strict=True)
            remaining = [d for d in documents if _document_id(d) != employee_id]
            if len(remaining) == len(documents):
                raise EmployeeNotFoundError(employee_id)
            store.save_documents(remaining)
        logger.info("Deleted employee %s", employee_id)
