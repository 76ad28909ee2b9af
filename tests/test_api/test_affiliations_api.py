"""API tests for employees, removal and team views."""


def _approve_new(client, hr_headers, employee_headers, qty=2, name="Laptop"):
    asset = client.post(
        "/assets",
        json={"product_name": name, "product_type": "Returnable", "product_quantity": qty},
        headers=hr_headers,
    ).json()
    req = client.post("/requests", json={"asset_id": asset["id"]}, headers=employee_headers).json()
    res = client.patch(f"/requests/{req['id']}/approve", headers=hr_headers)
    assert res.status_code == 200
    return asset["id"]


def test_employee_list(client, hr_headers, employee_headers):
    _approve_new(client, hr_headers, employee_headers)
    res = client.get("/employees", headers=hr_headers)
    assert res.status_code == 200
    data = res.json()
    assert data["total"] == 1
    assert data["items"][0]["employee_email"] == "alice@mail.test"
    assert data["items"][0]["assets_count"] == 1


def test_remove_employee_cascade(client, hr_headers, employee_headers):
    laptop = _approve_new(client, hr_headers, employee_headers, qty=2)

    res = client.delete("/employee-affiliations/alice@mail.test", headers=hr_headers)
    assert res.status_code == 200
    assert res.json() == {
        "employee_email": "alice@mail.test",
        "returned_assignments": 1,
        "current_employees": 0,
    }
    assert client.get(f"/assets/{laptop}", headers=hr_headers).json()["available_quantity"] == 2
    assert client.get("/employees", headers=hr_headers).json()["total"] == 0

    res = client.delete("/employee-affiliations/alice@mail.test", headers=hr_headers)
    assert res.status_code == 404


def test_my_companies_and_team(client, hr_headers, employee_headers, new_employee_headers):
    bob_headers = new_employee_headers("bob@mail.test", "Bob")
    _approve_new(client, hr_headers, employee_headers)
    _approve_new(client, hr_headers, bob_headers, name="Phone")

    res = client.get("/my-companies", headers=employee_headers)
    assert res.status_code == 200
    assert [c["company_name"] for c in res.json()] == ["Acme"]

    res = client.get("/my-team/hr@acme.test", headers=employee_headers)
    assert res.status_code == 200
    assert {m["employee_name"] for m in res.json()} == {"Alice", "Bob"}

    res = client.get("/my-team/hr@globex.test", headers=employee_headers)
    assert res.status_code == 404
