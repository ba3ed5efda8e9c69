"""HTTP tests for sales, expenses, departments, targets, projections and NOI."""


def _department(client, name="Bakery", **extra):
    resp = client.post("/departments/", json={"name": name, **extra})
    assert resp.status_code == 201, resp.text
    return resp.json()


def test_department_name_is_stripped_and_unique(client):
    dept = _department(client, "  Bakery  ")
    assert dept["name"] == "Bakery"

    resp = client.post("/departments/", json={"name": "Bakery"})
    assert resp.status_code == 409
    assert resp.json()["error"]["code"] == "DEP202"


def test_department_with_sales_cannot_be_deleted(client):
    dept = _department(client)
    client.post("/sales/", json={"department_id": dept["id"], "amount": "10", "date": "2024-01-01"})

    resp = client.delete(f"/departments/{dept['id']}")
    assert resp.status_code == 409
    body = resp.json()["error"]
    assert body["code"] == "DEP201"
    assert body["details"]["sale_count"] == 1


def test_delete_empty_department(client):
    dept = _department(client)
    client.put("/targets/", json={"department_id": dept["id"], "year": 2024, "month": 1, "target_amount": "5"})

    assert client.delete(f"/departments/{dept['id']}").status_code == 204
    assert client.get("/departments/").json() == []
    assert client.delete(f"/departments/{dept['id']}").status_code == 404


def test_sale_for_unknown_department(client):
    resp = client.post("/sales/", json={"department_id": 99, "amount": "10", "date": "2024-01-01"})
    assert resp.status_code == 404
    assert resp.json()["error"]["code"] == "DEP200"


def test_sale_crud(client):
    dept = _department(client)
    created = client.post("/sales/", json={"department_id": dept["id"], "amount": "12.345", "date": "2024-03-04"})
    assert created.status_code == 201
    sale_id = created.json()["id"]
    assert float(created.json()["amount"]) == 12.34

    updated = client.put(f"/sales/{sale_id}", json={"amount": "20"})
    assert updated.status_code == 200
    assert float(updated.json()["amount"]) == 20

    listed = client.get("/sales/", params={"department_id": dept["id"]}).json()
    assert [s["id"] for s in listed] == [sale_id]

    assert client.delete(f"/sales/{sale_id}").status_code == 204
    missing = client.get(f"/sales/{sale_id}")
    assert missing.status_code == 404
    assert missing.json()["error"]["code"] == "REC300"


def test_negative_sale_rejected(client):
    dept = _department(client)
    resp = client.post("/sales/", json={"department_id": dept["id"], "amount": "-1", "date": "2024-03-04"})
    assert resp.status_code == 422


def test_expense_crud_and_filters(client):
    rent = client.post(
        "/expenses/", json={"description": "Rent", "amount": "900", "date": "2024-01-01", "category": "Rent"}
    ).json()
    client.post("/expenses/", json={"description": "Paper", "amount": "15", "date": "2024-02-01"})

    assert len(client.get("/expenses/").json()) == 2
    only_rent = client.get("/expenses/", params={"category": "Rent"}).json()
    assert [e["id"] for e in only_rent] == [rent["id"]]

    updated = client.put(f"/expenses/{rent['id']}", json={"category": "Utilities"})
    assert updated.json()["category"] == "Utilities"

    assert client.delete(f"/expenses/{rent['id']}").status_code == 204
    assert client.get(f"/expenses/{rent['id']}").status_code == 404


def test_target_upsert_and_bulk(client):
    dept = _department(client)
    payload = {"department_id": dept["id"], "year": 2024, "month": 5, "target_amount": "100"}
    first = client.put("/targets/", json=payload).json()
    second = client.put("/targets/", json={**payload, "target_amount": "150"}).json()
    assert first["id"] == second["id"]
    assert float(second["target_amount"]) == 150

    bulk = client.put(
        "/targets/bulk",
        json={
            "department_id": dept["id"],
            "year": 2024,
            "targets": [{"month": 5, "target_amount": "175"}, {"month": 6, "target_amount": "200"}],
        },
    )
    assert bulk.json() == {"count": 2}
    assert float(client.get(f"/targets/{dept['id']}/2024/5").json()["target_amount"]) == 175
    assert client.get(f"/targets/{dept['id']}/2024/7").status_code == 404


def test_target_for_unknown_department(client):
    resp = client.put("/targets/", json={"department_id": 5, "year": 2024, "month": 1, "target_amount": "1"})
    assert resp.status_code == 404


def test_projection_bulk_upsert_is_all_or_nothing(client):
    dept = _department(client)
    resp = client.put(
        "/projections/bulk",
        json={
            "year": 2024,
            "month": 1,
            "projections": [
                {"department_id": dept["id"], "avg_monthly": "10", "monthly_target": "20"},
                {"department_id": 999, "avg_monthly": "1", "monthly_target": "2"},
            ],
        },
    )
    assert resp.status_code == 404
    assert client.get("/projections/2024/1").json() == []

    ok = client.put(
        "/projections/bulk",
        json={"year": 2024, "month": 1, "projections": [{"department_id": dept["id"], "monthly_target": "20"}]},
    )
    assert ok.json() == {"count": 1}
    [stored] = client.get("/projections/2024/1").json()
    assert float(stored["monthly_target"]) == 20
    assert float(stored["avg_monthly"]) == 0


def test_noi_upsert_and_list(client):
    client.put("/noi/", json={"year": 2024, "month": 2, "noi_amount": "50"})
    client.put("/noi/", json={"year": 2024, "month": 1, "noi_amount": "10"})
    client.put("/noi/", json={"year": 2024, "month": 2, "noi_amount": "-5"})

    rows = client.get("/noi/2024").json()
    assert [(r["month"], float(r["noi_amount"])) for r in rows] == [(1, 10), (2, -5)]


def test_bulk_targets_with_repeated_month_keep_last_entry(client):
    dept = _department(client)
    resp = client.put(
        "/targets/bulk",
        json={
            "department_id": dept["id"],
            "year": 2024,
            "targets": [{"month": 1, "target_amount": "100"}, {"month": 1, "target_amount": "200"}],
        },
    )
    assert resp.status_code == 200, resp.text
    assert float(client.get(f"/targets/{dept['id']}/2024/1").json()["target_amount"]) == 200


def test_bulk_projections_with_repeated_department_keep_last_entry(client):
    dept = _department(client)
    resp = client.put(
        "/projections/bulk",
        json={
            "year": 2024,
            "month": 3,
            "projections": [
                {"department_id": dept["id"], "avg_monthly": "10", "monthly_target": "20"},
                {"department_id": dept["id"], "avg_monthly": "30", "monthly_target": "40"},
            ],
        },
    )
    assert resp.status_code == 200, resp.text
    [stored] = client.get("/projections/2024/3").json()
    assert (float(stored["avg_monthly"]), float(stored["monthly_target"])) == (30, 40)


def test_oversized_amounts_rejected(client):
    dept = _department(client)
    sale = client.post("/sales/", json={"department_id": dept["id"], "amount": "1e19", "date": "2024-03-04"})
    assert sale.status_code == 422
    expense = client.post("/expenses/", json={"description": "Huge", "amount": "1e19", "date": "2024-03-04"})
    assert expense.status_code == 422
