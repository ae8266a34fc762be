from decimal import Decimal

import pytest

pytestmark = pytest.mark.integration


def _invoice(customer_id: int, total: float, **overrides) -> dict:
    data = {
        "serial_number": "INV-2024-001",
        "invoice_date": "2024-05-01T10:00:00Z",
        "total_amount": total,
        "customer_id": customer_id,
        "status": "Pending",
    }
    data.update(overrides)
    return data


def test_invoice_amount_and_customer_name(client, customer_factory):
    customer = customer_factory("invoice@test.com", first_name="Grace", last_name="Hopper")

    zero = client.post("/invoices", json=_invoice(customer.id, 0))
    assert zero.status_code == 400
    assert zero.json()["detail"] == "Invoice amount must be greater than zero."

    r = client.post("/invoices", json=_invoice(customer.id, 5000))
    assert r.status_code == 201, r.text
    body = r.json()
    assert body["customer_name"] == "Grace Hopper"
    assert Decimal(str(body["total_amount"])) == Decimal("5000")
    assert r.headers["location"].endswith(f"/invoices/{body['id']}")

    got = client.get(f"/invoices/{body['id']}")
    assert got.status_code == 200
    assert got.json()["customer_name"] == "Grace Hopper"


def test_invoice_for_unknown_customer_is_400(client):
    r = client.post("/invoices", json=_invoice(4242, 100))
    assert r.status_code == 400
    assert r.json()["detail"] == "Customer with ID 4242 does not exist."


def test_amount_is_checked_before_customer(client):
    r = client.post("/invoices", json=_invoice(4242, -5))
    assert r.status_code == 400
    assert r.json()["detail"] == "Invoice amount must be greater than zero."


def test_invoice_update_list_and_delete(client, customer_factory):
    first = customer_factory("one@test.com", first_name="Ada", last_name="Lovelace")
    second = customer_factory("two@test.com", first_name="Alan", last_name="Turing")
    created = client.post("/invoices", json=_invoice(first.id, 1200)).json()

    bad = client.put(f"/invoices/{created['id']}", json=_invoice(first.id, 0))
    assert bad.status_code == 400

    upd = client.put(f"/invoices/{created['id']}", json=_invoice(second.id, 1500, status="Paid"))
    assert upd.status_code == 200, upd.text
    assert upd.json()["customer_name"] == "Alan Turing"
    assert upd.json()["status"] == "Paid"

    assert client.put("/invoices/9999", json=_invoice(first.id, 10)).status_code == 404

    assert [i["id"] for i in client.get("/invoices").json()] == [created["id"]]
    assert client.delete(f"/invoices/{created['id']}").status_code == 204
    assert client.get("/invoices").json() == []
    assert client.get(f"/invoices/{created['id']}").status_code == 404


def test_deleting_customer_blanks_name_on_existing_invoice(client, customer_factory):
    customer = customer_factory("gone@test.com")
    created = client.post("/invoices", json=_invoice(customer.id, 300)).json()

    assert client.delete(f"/customers/{customer.id}").status_code == 204

    got = client.get(f"/invoices/{created['id']}")
    assert got.status_code == 200
    assert got.json()["customer_name"] == ""


@pytest.mark.parametrize("total", [0.004, 10**18])
def test_total_outside_column_precision_is_422_and_not_stored(client, customer_factory, total):
    customer = customer_factory("precision@test.com")

    r = client.post("/invoices", json=_invoice(customer.id, total))

    assert r.status_code == 422
    assert client.get("/invoices").json() == []


def test_customer_balance_with_sub_cent_precision_is_422(client):
    r = client.post(
        "/customers",
        json={
            "first_name": "Sub",
            "last_name": "Cent",
            "email": "subcent@test.com",
            "identity_number": "1",
            "balance": 10.005,
            "phone_number": "1",
        },
    )
    assert r.status_code == 422
    assert client.get("/customers").json() == []
