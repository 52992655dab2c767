from evidenca.db import STROSKI


def test_create_expense(client, store):
    response = client.post("/stroski", json={"name": "Test Expense", "amount": 250})

    assert response.status_code == 201
    body = response.get_json()
    assert body["name"] == "Test Expense"
    assert body["amount"] == 250
    assert body["_id"]
    assert store.db[STROSKI].count_documents({}) == 1


def test_create_expense_invalid_name(client, store):
    response = client.post("/stroski", json={"amount": 250})

    assert response.status_code == 400
    assert response.get_json() == {"message": "Invalid name"}
    assert store.db[STROSKI].count_documents({}) == 0


def test_create_expense_invalid_amount(client, store):
    response = client.post("/stroski", json={"name": "Test", "amount": "veliko"})

    assert response.status_code == 400
    assert response.get_json() == {"message": "Invalid amount"}
    assert store.db[STROSKI].count_documents({}) == 0


def test_create_expense_from_form_rejects_string_amount(client, store):
    response = client.post("/stroski", data={"name": "x", "amount": "1"})

    assert response.status_code == 400
    assert response.get_json()["message"] == "Invalid amount"
    assert store.db[STROSKI].count_documents({}) == 0


def test_create_expense_with_plain_text_body(client):
    response = client.post("/stroski", data="name=x", content_type="text/plain")

    assert response.status_code == 400
    assert response.get_json()["message"] == "Invalid name"


def test_create_expense_with_large_integer_amount(client, store):
    response = client.post("/stroski", json={"name": "Big", "amount": 10 ** 20})

    assert response.status_code == 201
    assert response.get_json()["amount"] == float(10 ** 20)
    assert store.db[STROSKI].count_documents({}) == 1


def test_list_expenses(client):
    client.post("/stroski", json={"name": "A", "amount": 1})
    client.post("/stroski", json={"name": "B", "amount": 2.5})

    response = client.get("/stroski")

    assert response.status_code == 200
    names = [e["name"] for e in response.get_json()]
    assert sorted(names) == ["A", "B"]
