import pytest
from fastapi.testclient import TestClient
from mongomock_motor import AsyncMongoMockClient

from app.deps.db import get_db
from app.main import app
from app.repositories.company_repo import CompanyRepository
from app.repositories.employee_repo import EmployeeRepository
from app.services.company_service import CompanyService
from app.services.employee_service import EmployeeService


@pytest.fixture
def db():
    """A fresh in-memory database per test."""
    return AsyncMongoMockClient()["employees_test"]


@pytest.fixture
def employee_repository(db):
    return EmployeeRepository(db)


@pytest.fixture
def company_repository(db):
    return CompanyRepository(db)


@pytest.fixture
def employee_service(employee_repository):
    return EmployeeService(employee_repository)


@pytest.fixture
def company_service(company_repository, employee_repository):
    return CompanyService(company_repository, employee_repository)


@pytest.fixture
def client(db):
    async def _get_test_db():
        return db

    app.dependency_overrides[get_db] = _get_test_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
