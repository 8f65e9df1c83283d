import asyncio
import json

import pytest

from employee_directory_api.app.core.config import settings
from employee_directory_api.app.core.storage import StorageError
from employee_directory_api.app.schemas.employee import EmployeeCreate, EmployeeFilter, EmployeeUpdate
from employee_directory_api.app.services.employee_service import EmployeeNotFoundError, EmployeeService

from .conftest import SAMPLE_EMPLOYEES


NEW_EMPLOYEE = {
    "firstName": "Dan",
    "lastName": "Ortiz",
    "email": "dan@example.com",
    "position": "Designer",
    "department": "Product",
    "salary": 62000,
    "startDate": "2024-01-08",
}


def run(coro):
    return asyncio.run(coro)


def stored_ids(path):
    return [e["id"] for e in json.loads(path.read_text(encoding="utf-8"))]


def test_create_appends_with_fresh_id(seeded_file):
    created = run(EmployeeService.create_employee(EmployeeCreate(**NEW_EMPLOYEE)))

    assert created.id not in {"1", "2", "3"}
    assert created.first_name == "Dan"
    assert stored_ids(seeded_file) == ["1", "2", "3", created.id]
    assert len(run(EmployeeService.list_employees())) == 4


def test_create_on_missing_file(data_file):
    first = run(EmployeeService.create_employee(EmployeeCreate(**NEW_EMPLOYEE)))
    second = run(EmployeeService.create_employee(EmployeeCreate(**NEW_EMPLOYEE)))

    assert first.id != second.id
    assert stored_ids(data_file) == [first.id, second.id]


def test_update_merges_only_given_fields(seeded_file):
    updated = run(EmployeeService.update_employee("1", EmployeeUpdate(salary=55000)))

    assert updated.id == "1"
    assert updated.salary == 55000
    assert updated.first_name == "Bob"
    assert updated.email == "bob.lee@example.com"
    assert run(EmployeeService.get_employee("1")) == updated


def test_update_ignores_id_and_nulls(seeded_file):
    patch = EmployeeUpdate.model_validate({"id": "999", "lastName": "Leigh", "email": None})
    updated = run(EmployeeService.update_employee("1", patch))

    assert updated.id == "1"
    assert updated.last_name == "Leigh"
    assert updated.email == "bob.lee@example.com"
    assert stored_ids(seeded_file) == ["1", "2", "3"]


def test_update_unknown_id_does_not_write(seeded_file):
    before = seeded_file.read_bytes()
    with pytest.raises(EmployeeNotFoundError):
        run(EmployeeService.update_employee("404", EmployeeUpdate(salary=1)))
    assert seeded_file.read_bytes() == before


def test_delete_then_delete_again(seeded_file):
    run(EmployeeService.delete_employee("1"))
    assert stored_ids(seeded_file) == ["2", "3"]

    before = seeded_file.read_bytes()
    with pytest.raises(EmployeeNotFoundError):
        run(EmployeeService.delete_employee("1"))
    assert seeded_file.read_bytes() == before


def test_get_unknown_id(seeded_file):
    with pytest.raises(EmployeeNotFoundError) as excinfo:
        run(EmployeeService.get_employee("nope"))
    assert excinfo.value.employee_id == "nope"


def test_list_applies_filter(seeded_file):
    result = run(EmployeeService.list_employees(EmployeeFilter(search="e", sort="salary", order="desc")))
    assert [e.id for e in result] == ["2", "1", "3"]


def test_ids_are_never_reused(seeded_file):
    created = run(EmployeeService.create_employee(EmployeeCreate(**NEW_EMPLOYEE)))
    run(EmployeeService.delete_employee(created.id))
    again = run(EmployeeService.create_employee(EmployeeCreate(**NEW_EMPLOYEE)))
    assert again.id != created.id


def test_storage_failures_propagate(tmp_path, monkeypatch):
    blocker = tmp_path / "blocker"
    blocker.write_text("")
    monkeypatch.setattr(settings, "data_file", str(blocker / "employees.json"))

    with pytest.raises(StorageError):
        run(EmployeeService.create_employee(EmployeeCreate(**NEW_EMPLOYEE)))


@pytest.fixture()
def mixed_file(data_file):
    """Store holding a valid record, one with an unknown key and one invalid entry."""
    entries = [
        SAMPLE_EMPLOYEES[0],
        {**SAMPLE_EMPLOYEES[1], "badge": "A-17"},
        {**SAMPLE_EMPLOYEES[2], "startDate": "", "note": "imported"},
    ]
    data_file.parent.mkdir(parents=True)
    data_file.write_text(json.dumps(entries, indent=2), encoding="utf-8")
    return data_file, entries


def stored(path):
    return json.loads(path.read_text(encoding="utf-8"))


def test_delete_keeps_entries_it_cannot_read(mixed_file):
    path, entries = mixed_file
    run(EmployeeService.delete_employee("1"))
    assert stored(path) == entries[1:]


def test_create_and_update_keep_other_entries_intact(mixed_file):
    path, entries = mixed_file
    created = run(EmployeeService.create_employee(EmployeeCreate(**NEW_EMPLOYEE)))
    updated = run(EmployeeService.update_employee("2", EmployeeUpdate(position="Director")))

    assert updated.to_document()["badge"] == "A-17"
    documents = stored(path)
    assert documents[0] == entries[0]
    assert documents[1] == {**entries[1], "position": "Director"}
    assert documents[2] == entries[2]
    assert documents[3]["id"] == created.id


def test_invalid_entry_is_hidden_but_deletable(mixed_file):
    path, entries = mixed_file
    assert [e.id for e in run(EmployeeService.list_employees())] == ["1", "2"]
    with pytest.raises(EmployeeNotFoundError):
        run(EmployeeService.update_employee("3", EmployeeUpdate(startDate="2022-07-04")))
    assert stored(path) == entries

    run(EmployeeService.delete_employee("3"))
    assert stored(path) == entries[:2]


def test_mutation_refuses_to_overwrite_corrupt_file(data_file):
    data_file.parent.mkdir(parents=True)
    data_file.write_text("[{broken", encoding="utf-8")

    assert run(EmployeeService.list_employees()) == []
    with pytest.raises(StorageError):
        run(EmployeeService.create_employee(EmployeeCreate(**NEW_EMPLOYEE)))
    assert data_file.read_text(encoding="utf-8") == "[{broken"


def test_whole_salaries_stay_integers(seeded_file):
    run(EmployeeService.update_employee("2", EmployeeUpdate(position="Director")))
    salaries = [e["salary"] for e in stored(seeded_file)]
    assert salaries == [50000, 80000, 50000]
    assert all(isinstance(s, int) for s in salaries)
