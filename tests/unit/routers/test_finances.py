"""
Unit tests for /api/finances.
"""


def create_entry(client, **overrides):
    payload = {"description": "Consultoria", "type": "receita", "amount": 500000, "date": "2026-10-01"}
    payload.update(overrides)
    response = client.post("/api/finances", json=payload)
    assert response.status_code == 201, response.text
    return response.json()


def test_create_finance(client):
    entry = create_entry(client, category="serviços")
    assert entry["amount"] == 500000
    assert entry["type"] == "receita"
    assert entry["category"] == "serviços"
    assert entry["date"] == "2026-10-01"


def test_list_ordered_by_date_and_filtered_by_type(client):
    create_entry(client, description="Outubro", date="2026-10-01")
    create_entry(client, description="Licença", type="despesa", amount=120000, date="2026-11-05")
    create_entry(client, description="Setembro", date="2026-09-15")

    entries = client.get("/api/finances").json()
    assert [e["description"] for e in entries] == ["Licença", "Outubro", "Setembro"]

    expenses = client.get("/api/finances", params={"type": "despesa"}).json()
    assert [e["description"] for e in expenses] == ["Licença"]


def test_amount_must_not_be_negative(client):
    response = client.post(
        "/api/finances", json={"description": "Estorno", "amount": -100, "date": "2026-10-01"}
    )
    assert response.status_code == 400
    assert "amount" in response.json()["message"]


def test_date_is_required(client):
    response = client.post("/api/finances", json={"description": "Sem data", "amount": 100})
    assert response.status_code == 400


def test_update_and_delete(client):
    entry = create_entry(client)
    response = client.put(f"/api/finances/{entry['id']}", json={"type": "despesa"})
    assert response.json()["type"] == "despesa"
    assert response.json()["amount"] == 500000

    assert client.delete(f"/api/finances/{entry['id']}").json() == {"success": True}
    response = client.delete(f"/api/finances/{entry['id']}")
    assert response.status_code == 404
    assert response.json() == {"message": "Lançamento não encontrado"}
