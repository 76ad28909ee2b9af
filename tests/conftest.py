import os

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("AUTH_SECRET", "test-secret-key")

import pytest

import assetverse.models  # noqa: F401, registers all models
from assetverse.database import Database
from assetverse.models.user import User, Role
from assetverse.services.access_service import HRScope, EmployeeScope


TEST_DB_URL = "sqlite:///:memory:"


@pytest.fixture(scope="function")
def db():
    database = Database(TEST_DB_URL)
    database.create_all()
    session = database.session()
    yield session
    session.close()
    database.drop_all()
    database.dispose()


def make_hr(db, email="hr@acme.test", company="Acme", package_limit=5) -> HRScope:
    user = User(email=email, name="HR " + company, role=Role.hr, company_name=company, package_limit=package_limit)
    db.add(user)
    db.commit()
    return HRScope(user.email, user.name, user.company_name, user.company_logo)


def make_employee(db, email="alice@mail.test", name="Alice") -> EmployeeScope:
    user = User(email=email, name=name, role=Role.employee)
    db.add(user)
    db.commit()
    return EmployeeScope(user.email, user.name)


@pytest.fixture
def hr(db):
    return make_hr(db)


@pytest.fixture
def employee(db):
    return make_employee(db)


@pytest.fixture
def new_hr(db):
    return lambda **kwargs: make_hr(db, **kwargs)


@pytest.fixture
def new_employee(db):
    return lambda **kwargs: make_employee(db, **kwargs)
