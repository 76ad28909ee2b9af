"""API tests for /assets and /available-assets."""


def _create(client, headers, name="Laptop", qty=2, product_type="Returnable"):
    res = client.post(
        "/assets",
        json={"product_name": name, "product_type": product_type, "product_quantity": qty},
        headers=headers,
    )
    assert res.status_code == 201
    return res.json()


def test_create_asset(client, hr_headers):
    data = _create(client, hr_headers, qty=3)
    assert data["product_quantity"] == 3
    assert data["available_quantity"] == 3
    assert data["hr_email"] == "hr@acme.test"
    assert data["company_name"] == "Acme"


def test_create_asset_negative_quantity(client, hr_headers):
    res = client.post(
        "/assets",
        json={"product_name": "Laptop", "product_type": "Returnable", "product_quantity": -1},
        headers=hr_headers,
    )
    assert res.status_code == 400
    assert res.json()["error"] == "invalid_input"


def test_create_asset_invalid_type(client, hr_headers):
    res = client.post(
        "/assets",
        json={"product_name": "Laptop", "product_type": "Borrowable", "product_quantity": 1},
        headers=hr_headers,
    )
    assert res.status_code == 422


def test_list_assets_with_search(client, hr_headers):
    _create(client, hr_headers, name="Laptop")
    _create(client, hr_headers, name="Monitor")
    res = client.get("/assets?search=lap", headers=hr_headers)
    assert res.status_code == 200
    data = res.json()
    assert data["total"] == 1
    assert data["items"][0]["product_name"] == "Laptop"


def test_edit_asset_resets_available(client, hr_headers):
    asset = _create(client, hr_headers, qty=2)
    res = client.put(f"/assets/{asset['id']}", json={"product_quantity": 6}, headers=hr_headers)
    assert res.status_code == 200
    assert res.json()["product_quantity"] == 6
    assert res.json()["available_quantity"] == 6


def test_other_company_asset_not_found(client, hr_headers, auth_headers):
    asset = _create(client, hr_headers)
    other = auth_headers("hr@globex.test")
    client.post("/users", json={"name": "Gina", "role": "hr", "company_name": "Globex"}, headers=other)

    assert client.get(f"/assets/{asset['id']}", headers=other).status_code == 404
    assert client.put(f"/assets/{asset['id']}", json={"product_name": "X"}, headers=other).status_code == 404
    assert client.delete(f"/assets/{asset['id']}", headers=other).status_code == 404


def test_delete_asset(client, hr_headers):
    asset = _create(client, hr_headers)
    res = client.delete(f"/assets/{asset['id']}", headers=hr_headers)
    assert res.status_code == 204
    assert client.get(f"/assets/{asset['id']}", headers=hr_headers).status_code == 404


def test_available_assets(client, hr_headers, employee_headers):
    _create(client, hr_headers, name="Laptop", qty=1)
    _create(client, hr_headers, name="Empty", qty=0)
    res = client.get("/available-assets", headers=employee_headers)
    assert res.status_code == 200
    names = [a["product_name"] for a in res.json()["items"]]
    assert names == ["Laptop"]
