"""
Search and sort over an in-memory employee collection.

``query_employees`` is a pure function: it never reorders or mutates
the list it receives and always returns a new list.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Optional, Sequence

from employee_directory_api.app.schemas.employee import EmployeeFilter, EmployeeRead


# Attributes matched by the free-text search.
SEARCH_FIELDS = ("first_name", "last_name", "email", "position", "department")

# Sort keys by wire field name.  Strings compare lexicographically,
# salary numerically and start dates chronologically.
SORT_KEYS: Dict[str, Callable[[EmployeeRead], Any]] = {
    "id": lambda e: e.id,
    "firstName": lambda e: e.first_name,
    "lastName": lambda e: e.last_name,
    "email": lambda e: e.email,
    "position": lambda e: e.position,
    "department": lambda e: e.department,
    "salary": lambda e: e.salary,
    "startDate": lambda e: e.start_date,
}


def matches_search(employee: EmployeeRead, search: str) -> bool:
    """Case-insensitive substring match against the searchable fields."""
    needle = search.lower()
    return any(needle in getattr(employee, field).lower() for field in SEARCH_FIELDS)


def query_employees(
    records: Sequence[EmployeeRead], criteria: Optional[EmployeeFilter] = None
) -> List[EmployeeRead]:
    """Return the records matching ``criteria`` in the requested order.

    Without a search string every record matches.  Without a sort
    field, or with one that is not in :data:`SORT_KEYS`, the store
    order is kept.  Sorting is stable in both directions.
    """
    criteria = criteria or EmployeeFilter()
    result = [e.model_copy() for e in records]
    if criteria.search:
        result = [e for e in result if matches_search(e, criteria.search)]

    key = SORT_KEYS.get(criteria.sort) if criteria.sort else None
    if key is not None:
        # sorted() keeps equal keys in input order even with reverse=True
        result = sorted(result, key=key, reverse=criteria.descending)
    return result
