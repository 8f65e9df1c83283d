"""
Pydantic models for employee records.

``EmployeeBase`` holds the data fields shared by every variant;
``EmployeeCreate`` is the request body for creation, ``EmployeeRead``
adds the store‑assigned ``id`` and is what the store persists and the
API returns.  ``EmployeeUpdate`` is the partial patch applied by
updates: every field is optional and only the ones present in the
request are merged onto the stored record.

``EmployeeFilter`` carries the search and sort parameters of a list
request as an immutable value.
"""

from datetime import date
from typing import Any, Dict, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class EmployeeBase(BaseModel):
    model_config = ConfigDict(populate_by_name=True, allow_inf_nan=False)

    first_name: str = Field(..., alias="firstName", examples=["Bob"])
    last_name: str = Field(..., alias="lastName", examples=["Lee"])
    email: str = Field(..., examples=["bob.lee@example.com"])
    position: str = Field(..., examples=["Engineer"])
    department: str = Field(..., examples=["R&D"])
    # Whole numbers stay integers on disk and on the wire.
    salary: Union[int, float] = Field(..., examples=[50000])
    start_date: date = Field(..., alias="startDate", examples=["2021-03-01"])


class EmployeeCreate(EmployeeBase):
    """Schema for creating an employee."""
    pass


class EmployeeRead(EmployeeBase):
    """Schema for an employee as stored and returned by the API.

    Keys the schema does not know are kept and written back unchanged.
    """

    model_config = ConfigDict(extra="allow")

    id: str

    def to_document(self) -> Dict[str, Any]:
        """Return the JSON object persisted for this employee."""
        return self.model_dump(mode="json", by_alias=True)


class EmployeeUpdate(BaseModel):
    """Schema for updating an employee.

    All fields are optional; only provided fields will be updated.
    Unknown keys, ``id`` included, are ignored so a patch can never
    change a record's identity.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore", allow_inf_nan=False)

    first_name: Optional[str] = Field(None, alias="firstName")
    last_name: Optional[str] = Field(None, alias="lastName")
    email: Optional[str] = None
    position: Optional[str] = None
    department: Optional[str] = None
    salary: Optional[Union[int, float]] = None
    start_date: Optional[date] = Field(None, alias="startDate")

    def changes(self) -> dict:
        """Return the fields explicitly set to a value, keyed by attribute name."""
        return self.model_dump(exclude_unset=True, exclude_none=True)


class EmployeeFilter(BaseModel):
    """Search and sort parameters for listing employees.

    ``sort`` is the wire name of a field (``lastName``, ``salary``...).
    Unknown field names are tolerated here and ignored by the query.
    Any ``order`` other than ``"desc"`` sorts ascending.
    """

    model_config = ConfigDict(frozen=True)

    search: Optional[str] = None
    sort: Optional[str] = None
    order: Optional[str] = None

    @property
    def descending(self) -> bool:
        return (self.order or "").lower() == "desc"
