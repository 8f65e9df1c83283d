"""Employee directory API client.

This module defines a small client wrapper around the employee
directory REST API.  It is the service layer consumed by user
interfaces: it serializes list filters into query parameters, turns
JSON records into :class:`Employee` objects and raises
:class:`EmployeeAPIError` for every non-success response, so callers
never have to inspect partial or ambiguous results.

The client exposes one method per operation:

* :meth:`EmployeeDirectoryAPI.list_employees` – search and sort the directory.
* :meth:`EmployeeDirectoryAPI.get_employee` – fetch a single employee.
* :meth:`EmployeeDirectoryAPI.create_employee` – add an employee.
* :meth:`EmployeeDirectoryAPI.update_employee` – change some fields of an employee.
* :meth:`EmployeeDirectoryAPI.delete_employee` – remove an employee.

The client uses the ``requests`` library internally.  Any object with
a compatible ``request`` method may be passed as ``session``.
"""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass, fields
from typing import Any, Dict, List, Optional, Union

import requests


logger = logging.getLogger(__name__)

DEFAULT_PATH = "/api/employees"

# Dataclass attribute -> wire field name.
_WIRE_NAMES = {
    "id": "id",
    "first_name": "firstName",
    "last_name": "lastName",
    "email": "email",
    "position": "position",
    "department": "department",
    "salary": "salary",
    "start_date": "startDate",
}


class EmployeeAPIError(Exception):
    """A request to the employee directory API did not succeed.

    Attributes:
        status_code: HTTP status of the response, or ``None`` when no
            response was received (connection error, timeout...).
        message: Error detail reported by the server or the transport.
    """

    def __init__(self, status_code: Optional[int], message: str) -> None:
        super().__init__(f"{status_code}: {message}" if status_code else message)
        self.status_code = status_code
        self.message = message

    @property
    def not_found(self) -> bool:
        return self.status_code == 404


@dataclass
class Employee:
    """An employee record as returned by the API."""

    id: str
    first_name: str
    last_name: str
    email: str
    position: str
    department: str
    salary: Union[int, float]
    start_date: str

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> "Employee":
        try:
            return cls(**{attr: data[wire] for attr, wire in _WIRE_NAMES.items()})
        except (KeyError, TypeError) as exc:
            raise EmployeeAPIError(None, f"Malformed employee record: {data!r}") from exc

    def to_json(self) -> Dict[str, Any]:
        return to_wire(asdict(self))


@dataclass(frozen=True)
class EmployeeFilter:
    """Search and sort parameters for :meth:`EmployeeDirectoryAPI.list_employees`.

    ``sort`` takes a wire field name such as ``"lastName"`` or
    ``"salary"``; ``order`` is ``"asc"`` or ``"desc"``.
    """

    search: Optional[str] = None
    sort: Optional[str] = None
    order: Optional[str] = None

    def to_params(self) -> Dict[str, str]:
        """Query parameters for this filter; unset fields are omitted."""
        return {f.name: getattr(self, f.name) for f in fields(self) if getattr(self, f.name)}


def to_wire(values: Dict[str, Any]) -> Dict[str, Any]:
    """Rename attribute keys to wire names.  Keys already in wire form pass through."""
    return {_WIRE_NAMES.get(key, key): value for key, value in values.items()}


class EmployeeDirectoryAPI:
    """Client for the employee directory API."""

    def __init__(
        self,
        *,
        base_url: str,
        path: str = DEFAULT_PATH,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the server, e.g. ``http://localhost:3001``.
            path: Path of the employee collection below ``base_url``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per-request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.path = "/" + path.strip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helper
    # ------------------------------------------------------------------
    def _request(
        self, method: str, suffix: str = "", *, params: Dict[str, Any] | None = None,
        json_body: Any | None = None
    ) -> Any:
        """Perform an HTTP request and return the decoded JSON body.

        Returns ``None`` for responses without content.  Raises
        :class:`EmployeeAPIError` for transport failures and any
        status outside the 2xx range.
        """
        url = f"{self.base_url}{self.path}{suffix}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                params=params,
                json=json_body,
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            raise EmployeeAPIError(None, str(exc)) from exc

        if not 200 <= response.status_code < 300:
            try:
                err_json = response.json()
                message = err_json.get("detail") or err_json.get("error") or str(err_json)
            except ValueError:
                message = response.text
            if not isinstance(message, str):
                message = str(message)
            logger.error("API request failed (%s): %s", response.status_code, message)
            raise EmployeeAPIError(response.status_code, message or f"HTTP {response.status_code}")

        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as exc:
            raise EmployeeAPIError(response.status_code, "Response is not valid JSON") from exc

    # ------------------------------------------------------------------
    # Employee operations
    # ------------------------------------------------------------------
    def list_employees(self, criteria: Optional[EmployeeFilter] = None) -> List[Employee]:
        """Return the employees matching ``criteria`` in server order."""
        params = criteria.to_params() if criteria else {}
        data = self._request("GET", params=params or None)
        if not isinstance(data, list):
            raise EmployeeAPIError(None, "Expected a list of employees")
        return [Employee.from_json(item) for item in data]

    def get_employee(self, employee_id: str) -> Employee:
        return Employee.from_json(self._request("GET", f"/{employee_id}"))

    def create_employee(self, employee: Dict[str, Any]) -> Employee:
        """Create an employee and return it with its generated id.

        ``employee`` holds every field except ``id``; keys may use the
        attribute names of :class:`Employee` or the wire names.
        """
        return Employee.from_json(self._request("POST", json_body=to_wire(employee)))

    def update_employee(self, employee_id: str, changes: Dict[str, Any]) -> Employee:
        """Apply a partial update and return the full updated record."""
        return Employee.from_json(self._request("PUT", f"/{employee_id}", json_body=to_wire(changes)))

    def delete_employee(self, employee_id: str) -> None:
        self._request("DELETE", f"/{employee_id}")
