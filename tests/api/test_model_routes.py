"""Model Routes: HTTP surface for the Model resource.

Tests cover:
    - POST /model -> 201, duplicate -> 400 BAD_REQUEST
    - GET /model, /model/{id}, /model/page
    - DELETE /model/{id} and /erase
    - GET / static text
"""

from model_service.api.routes.home import HOME_TEXT


async def test_create_returns_201_with_record(client):
    res = await client.post("/model", json={"id": 10, "name": "gear"})
    assert res.status_code == 201
    assert res.json() == {"id": 10, "name": "gear"}


async def test_create_then_get_returns_same_name(client):
    await client.post("/model", json={"id": 10, "name": "gear"})
    res = await client.get("/model/10")
    assert res.status_code == 200
    assert res.json()["name"] == "gear"


async def test_create_duplicate_returns_bad_request(client):
    await client.post("/model", json={"id": 10, "name": "gear"})
    res = await client.post("/model", json={"id": 10, "name": "sprocket"})
    assert res.status_code == 400
    body = res.json()
    assert body["code"] == "BAD_REQUEST"
    assert body["error"] == "Bad Request"
    assert body["message"] == "Model with same id exists."
    assert body["path"] == "/model"


async def test_list_all_models(seeded_client):
    res = await seeded_client.get("/model")
    assert res.status_code == 200
    assert sorted(m["id"] for m in res.json()) == [1, 2, 3]


async def test_list_all_empty(client):
    res = await client.get("/model")
    assert res.status_code == 200
    assert res.json() == []


async def test_get_missing_model_returns_404(client):
    res = await client.get("/model/999")
    assert res.status_code == 404
    body = res.json()
    assert body["status"] == 404
    assert body["error"] == "Not Found"
    assert body["code"] == "NOT_FOUND"
    assert body["message"] == "No model with given id found."
    assert body["path"] == "/model/999"


async def test_delete_model(seeded_client):
    res = await seeded_client.delete("/model/2")
    assert res.status_code == 200
    assert res.json() == {"message": "Model deleted.", "id": 2}

    res = await seeded_client.get("/model/2")
    assert res.status_code == 404


async def test_delete_missing_model_returns_404(client):
    res = await client.delete("/model/77")
    assert res.status_code == 404
    assert res.json()["code"] == "NOT_FOUND"


async def test_erase_deletes_everything(seeded_client):
    res = await seeded_client.delete("/erase")
    assert res.status_code == 200
    assert res.json() == {"message": "All models deleted."}

    res = await seeded_client.get("/model")
    assert res.json() == []


async def test_erase_on_empty_store(client):
    res = await client.delete("/erase")
    assert res.status_code == 200


async def test_page_larger_than_store(client):
    await client.post("/model", json={"id": 1, "name": "only"})
    res = await client.get("/model/page", params={"size": 2})
    assert res.status_code == 200
    body = res.json()
    assert body["content"] == [{"id": 1, "name": "only"}]
    assert body["page"] == {
        "size": 2, "number": 0, "totalElements": 1, "totalPages": 1,
    }


async def test_page_out_of_range_is_empty(seeded_client):
    res = await seeded_client.get("/model/page", params={"page": 5, "size": 2})
    assert res.status_code == 200
    body = res.json()
    assert body["content"] == []
    assert body["page"]["totalElements"] == 3
    assert body["page"]["totalPages"] == 2
    assert body["page"]["number"] == 5


async def test_page_sorted_by_name_desc(seeded_client):
    res = await seeded_client.get(
        "/model/page", params={"size": 2, "sort": "name,desc"},
    )
    names = [m["name"] for m in res.json()["content"]]
    assert names == ["charlie", "bravo"]


async def test_page_defaults(seeded_client):
    res = await seeded_client.get("/model/page", params={"page": "x", "size": "0"})
    assert res.json()["page"]["size"] == 20
    assert res.json()["page"]["number"] == 0


async def test_page_unknown_sort_property_is_bad_request(client):
    res = await client.get("/model/page", params={"sort": "colour"})
    assert res.status_code == 400
    assert res.json()["code"] == "BAD_REQUEST"


async def test_home_returns_static_text(client):
    res = await client.get("/")
    assert res.status_code == 200
    assert res.text == HOME_TEXT


async def test_debug_thread_reports_thread_metadata(client):
    res = await client.get("/debug/thread")
    assert res.status_code == 200
    assert {"name", "id", "native_id", "daemon", "task"} <= res.json().keys()
