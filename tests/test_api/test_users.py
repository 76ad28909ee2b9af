"""API tests for /users and /user."""


def test_register_hr(client, auth_headers):
    headers = auth_headers("Boss@Acme.test")
    res = client.post(
        "/users",
        json={"name": "Boss", "role": "hr", "company_name": "Acme", "company_logo": "https://img/logo.png"},
        headers=headers,
    )
    assert res.status_code == 201
    data = res.json()
    assert data["created"] is True
    user = data["user"]
    assert user["email"] == "boss@acme.test"
    assert user["role"] == "hr"
    assert user["package_limit"] == 5
    assert user["current_employees"] == 0
    assert user["subscription"] == "basic"


def test_register_twice_returns_existing(client, employee_headers):
    res = client.post("/users", json={"name": "Someone Else", "role": "employee"}, headers=employee_headers)
    assert res.status_code == 200
    assert res.json()["created"] is False
    assert res.json()["user"]["name"] == "Alice"


def test_register_hr_requires_company(client, auth_headers):
    res = client.post("/users", json={"name": "Boss", "role": "hr"}, headers=auth_headers("boss@acme.test"))
    assert res.status_code == 422


def test_current_user(client, employee_headers):
    res = client.get("/user", headers=employee_headers)
    assert res.status_code == 200
    assert res.json()["email"] == "alice@mail.test"
    assert res.json()["role"] == "employee"


def test_current_user_without_profile(client, auth_headers):
    res = client.get("/user", headers=auth_headers("nobody@mail.test"))
    assert res.status_code == 404


def test_update_profile(client, hr_headers):
    res = client.patch("/user", json={"name": "Hana Novak", "company_logo": "https://img/new.png"}, headers=hr_headers)
    assert res.status_code == 200
    assert res.json()["name"] == "Hana Novak"
    assert res.json()["company_logo"] == "https://img/new.png"
