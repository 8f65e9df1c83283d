"""
Shared fixtures: every test gets its own data file under ``tmp_path``.
"""
from __future__ import annotations

import json

import pytest
from fastapi.testclient import TestClient

from employee_directory_api.app.core.config import settings
from employee_directory_api.app.core.storage import JsonEmployeeStore
from employee_directory_api.app.main import app


SAMPLE_EMPLOYEES = [
    {
        "id": "1",
        "firstName": "Bob",
        "lastName": "Lee",
        "email": "bob.lee@example.com",
        "position": "Engineer",
        "department": "R&D",
        "salary": 50000,
        "startDate": "2021-03-01",
    },
    {
        "id": "2",
        "firstName": "Amy",
        "lastName": "Zed",
        "email": "amy.zed@example.com",
        "position": "Manager",
        "department": "Sales",
        "salary": 80000,
        "startDate": "2019-11-15",
    },
    {
        "id": "3",
        "firstName": "Carol",
        "lastName": "Smith",
        "email": "carol@example.com",
        "position": "Analyst",
        "department": "Finance",
        "salary": 50000,
        "startDate": "2022-07-04",
    },
]


@pytest.fixture()
def data_file(tmp_path, monkeypatch):
    """Point the application at an empty temporary data file."""
    path = tmp_path / "data" / "employees.json"
    monkeypatch.setattr(settings, "data_file", str(path))
    return path


@pytest.fixture()
def seeded_file(data_file):
    data_file.parent.mkdir(parents=True, exist_ok=True)
    data_file.write_text(json.dumps(SAMPLE_EMPLOYEES, indent=2), encoding="utf-8")
    return data_file


@pytest.fixture()
def store(data_file):
    return JsonEmployeeStore(data_file)


@pytest.fixture()
def client(data_file):
    with TestClient(app) as test_client:
        yield test_client
