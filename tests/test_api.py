import json


def test_health(client):
    r = client.get("/api/health")
    assert r.status_code == 200
    assert r.get_json()["database"] == "healthy"


def test_create_and_list_breads(client):
    r = client.post("/api/breads", json={"name": "Ciabatta"})
    assert r.status_code == 201, r.data
    created = r.get_json()
    assert created["name"] == "Ciabatta"

    r2 = client.get("/api/breads")
    assert r2.status_code == 200
    assert [b["id"] for b in r2.get_json()["items"]] == [created["id"]]


def test_create_validation_error(client):
    r = client.post("/api/sauces", json={})
    assert r.status_code == 400
    body = r.get_json()["error"]
    assert body["code"] == "VALIDATION_ERROR"
    assert "name" in body["details"]


def test_sandwich_requires_an_ingredient(client, menu):
    r = client.post("/api/sandwiches", json={
        "name": "Bare",
        "bread_id": menu["white"]["id"],
        "ingredient_ids": [],
    })
    assert r.status_code == 400
    assert "ingredient_ids" in r.get_json()["error"]["details"]


def test_create_sandwich(client, menu):
    r = client.post("/api/sandwiches", json={
        "name": "Ham & Cheese",
        "bread_id": menu["white"]["id"],
        "ingredient_ids": [menu["ham"]["id"], menu["cheese"]["id"]],
    })
    assert r.status_code == 201, r.data
    data = r.get_json()
    assert data["sauce_id"] is None
    assert sorted(data["ingredient_ids"]) == sorted([menu["ham"]["id"], menu["cheese"]["id"]])


def test_create_sandwich_unknown_bread(client, menu):
    r = client.post("/api/sandwiches", json={
        "name": "Ghost",
        "bread_id": "does-not-exist",
        "ingredient_ids": [menu["ham"]["id"]],
    })
    assert r.status_code == 500
    assert r.get_json()["error"]["code"] == "CREATE_FAILED"


def test_create_todo_without_content(client):
    r = client.post("/api/todos", json={})
    assert r.status_code == 201
    assert r.get_json()["content"] is None


def test_unknown_collection(client):
    assert client.get("/api/drinks").status_code == 404
    assert client.post("/api/drinks", json={"name": "Cola"}).status_code == 404
    assert client.get("/api/drinks/stream").status_code == 404


def test_stream_sends_first_snapshot(client, menu):
    r = client.get("/api/sauces/stream", buffered=False)
    try:
        assert r.status_code == 200
        assert r.mimetype == "text/event-stream"
        chunk = next(iter(r.response))
        if isinstance(chunk, bytes):
            chunk = chunk.decode()
        assert chunk.startswith("event: snapshot\n")
        payload = json.loads(chunk.split("data: ", 1)[1])
        assert payload["collection"] == "sauces"
        assert sorted(s["name"] for s in payload["items"]) == ["Mayo", "Mustard"]
    finally:
        r.close()


def test_idle_stream_sends_heartbeat(client, app, menu):
    app.config["SNAPSHOT_HEARTBEAT_INTERVAL"] = 0
    r = client.get("/api/breads/stream", buffered=False)
    try:
        chunks = iter(r.response)
        first = next(chunks)
        second = next(chunks)
        if isinstance(second, bytes):
            first, second = first.decode(), second.decode()
        assert first.startswith("event: snapshot\n")
        # nothing changed, so the next write is a comment line
        assert second == ": heartbeat\n\n"
    finally:
        r.close()
