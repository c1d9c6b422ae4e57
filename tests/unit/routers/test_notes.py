"""
Unit tests for /api/notes: pinned-first ordering and update timestamps.
"""
from datetime import datetime


def create_note(client, **overrides):
    payload = {"title": "Nota", "content": "Conteúdo"}
    payload.update(overrides)
    response = client.post("/api/notes", json=payload)
    assert response.status_code == 201, response.text
    return response.json()


def parse(value: str) -> datetime:
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


def test_create_note_defaults(client):
    note = create_note(client)
    assert note["pinned"] is False
    assert note["color"] == "default"
    assert note["category"] == "geral"
    assert note["updatedAt"] == note["createdAt"]


def test_empty_update_advances_updated_at(client):
    note = create_note(client)

    response = client.put(f"/api/notes/{note['id']}", json={})
    assert response.status_code == 200
    updated = response.json()
    assert parse(updated["updatedAt"]) > parse(note["updatedAt"])
    assert updated["createdAt"] == note["createdAt"]
    assert updated["title"] == note["title"]


def test_pinned_first_then_most_recent(client):
    first = create_note(client, title="Primeira")
    create_note(client, title="Segunda")
    create_note(client, title="Terceira")

    client.put(f"/api/notes/{first['id']}", json={"pinned": True})

    titles = [n["title"] for n in client.get("/api/notes").json()]
    assert titles == ["Primeira", "Terceira", "Segunda"]


def test_editing_moves_note_up(client):
    first = create_note(client, title="Primeira")
    create_note(client, title="Segunda")

    client.put(f"/api/notes/{first['id']}", json={"content": "Revisada"})

    titles = [n["title"] for n in client.get("/api/notes").json()]
    assert titles == ["Primeira", "Segunda"]


def test_pinned_accepts_text_booleans(client):
    note = create_note(client, pinned="true")
    assert note["pinned"] is True


def test_filter_by_category(client):
    create_note(client, title="Onboarding", category="processos")
    create_note(client, title="Lista de compras")

    notes = client.get("/api/notes", params={"category": "processos"}).json()
    assert [n["title"] for n in notes] == ["Onboarding"]


def test_invalid_color(client):
    response = client.post("/api/notes", json={"title": "Nota", "color": "orange"})
    assert response.status_code == 400
    assert "color" in response.json()["message"]


def test_missing_note(client):
    assert client.put("/api/notes/nao-existe", json={}).status_code == 404
    response = client.delete("/api/notes/nao-existe")
    assert response.status_code == 404
    assert response.json() == {"message": "Nota não encontrada"}
