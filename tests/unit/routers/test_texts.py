def test_text_crud_cycle(client):
    response = client.post("/api/texts", json={"title": "Assinatura", "content": "Att, Equipe"})
    assert response.status_code == 201
    text = response.json()
    assert text["updatedAt"] == text["createdAt"]

    response = client.put(f"/api/texts/{text['id']}", json={"content": "Atenciosamente"})
    assert response.status_code == 200
    assert response.json()["content"] == "Atenciosamente"
    assert response.json()["title"] == "Assinatura"

    assert client.get(f"/api/texts/{text['id']}").json()["content"] == "Atenciosamente"
    assert client.delete(f"/api/texts/{text['id']}").json() == {"success": True}
    assert client.get(f"/api/texts/{text['id']}").status_code == 404


def test_texts_ordered_by_last_update(client):
    older = client.post("/api/texts", json={"title": "Antigo"}).json()
    client.post("/api/texts", json={"title": "Novo"})
    client.put(f"/api/texts/{older['id']}", json={})

    assert [t["title"] for t in client.get("/api/texts").json()] == ["Antigo", "Novo"]


def test_text_requires_title(client):
    response = client.post("/api/texts", json={"content": "sem título"})
    assert response.status_code == 400
    assert response.json()["message"].startswith("title")


def test_missing_text(client):
    assert client.get("/api/texts/nao-existe").json() == {"message": "Texto não encontrado"}
