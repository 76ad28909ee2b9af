import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from assetverse.config import settings
from assetverse.database import Database, get_db
from assetverse.main import app
from assetverse.security import TokenVerifier
from assetverse.services.payment_service import seed_packages

TEST_DB_URL = "sqlite:///:memory:"

verifier = TokenVerifier(settings.AUTH_SECRET, algorithm=settings.AUTH_ALGORITHM, audience=settings.AUTH_AUDIENCE)


def auth(email: str) -> dict:
    return {"Authorization": f"Bearer {verifier.issue(uid='uid-' + email, email=email)}"}


@pytest.fixture(scope="function")
def client():
    # StaticPool: all sessions share the same in-memory DB
    database = Database(TEST_DB_URL, poolclass=StaticPool)
    database.create_all()

    def override_get_db():
        db = database.session()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db

    db = database.session()
    seed_packages(db)
    db.close()

    with TestClient(app) as c:
        yield c

    app.dependency_overrides.clear()
    database.drop_all()
    database.dispose()


@pytest.fixture
def hr_headers(client):
    headers = auth("hr@acme.test")
    res = client.post("/users", json={"name": "Hana HR", "role": "hr", "company_name": "Acme"}, headers=headers)
    assert res.status_code == 201
    return headers


@pytest.fixture
def employee_headers(client):
    return register_employee(client, "alice@mail.test", "Alice")


def register_employee(client, email, name):
    headers = auth(email)
    res = client.post("/users", json={"name": name, "role": "employee"}, headers=headers)
    assert res.status_code == 201
    return headers


@pytest.fixture
def auth_headers():
    return auth


@pytest.fixture
def new_employee_headers(client):
    return lambda email, name: register_employee(client, email, name)
