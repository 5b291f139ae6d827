"""Error Handlers: every failure path leaves as the error envelope.

Tests cover:
    - Field violations -> VALIDATION_ERROR with ordered "field: reason" message
    - Unparsable or ill-typed bodies -> INVALID_JSON
    - Repository faults -> UNEXPECTED_ERROR without leaking the cause
    - Trace id echoed from the request header, generated when absent
    - Unknown routes -> NOT_FOUND envelope, wrong method keeps the Allow header
    - Ids outside the 64-bit column range are rejected with 400, never 500
"""

import pytest

from model_service.api.routes.models import get_model_service
from model_service.core.domain_types import MAX_MODEL_ID, MIN_MODEL_ID
from model_service.services.model_service import ModelService

from tests.services.fake_repository import FailingModelRepository

ENVELOPE_KEYS = {"status", "error", "code", "message", "path", "traceId"}


async def test_missing_fields_aggregate_in_order(client):
    res = await client.post("/model", json={})
    assert res.status_code == 400
    body = res.json()
    assert body["code"] == "VALIDATION_ERROR"
    assert body["message"] == "id: id is required; name: name is required"


async def test_null_id_is_validation_error(client):
    res = await client.post("/model", json={"id": None, "name": "x"})
    assert res.status_code == 400
    assert res.json()["message"] == "id: id is required"


async def test_blank_name_is_validation_error(client):
    res = await client.post("/model", json={"id": 1, "name": "   "})
    assert res.status_code == 400
    assert res.json()["code"] == "VALIDATION_ERROR"
    assert res.json()["message"] == "name: name is required"


async def test_unparsable_body_is_invalid_json(client):
    res = await client.post(
        "/model", content="{not json", headers={"Content-Type": "application/json"},
    )
    assert res.status_code == 400
    body = res.json()
    assert body["code"] == "INVALID_JSON"
    assert body["message"] == "Invalid JSON body."
    assert body["error"] == "Bad Request"


async def test_wrongly_typed_id_is_invalid_json(client):
    res = await client.post("/model", json={"id": "abc", "name": "x"})
    assert res.status_code == 400
    assert res.json()["code"] == "INVALID_JSON"


async def test_non_object_body_is_invalid_json(client):
    res = await client.post("/model", json=[1, 2])
    assert res.status_code == 400
    assert res.json()["code"] == "INVALID_JSON"


@pytest.mark.parametrize("model_id", [MAX_MODEL_ID + 1, MIN_MODEL_ID - 1, 2**70])
async def test_out_of_range_body_id_is_invalid_json(client, model_id):
    res = await client.post("/model", json={"id": model_id, "name": "x"})
    assert res.status_code == 400
    assert res.json()["code"] == "INVALID_JSON"
    assert res.json()["message"] == "Invalid JSON body."


@pytest.mark.parametrize("model_id", [MAX_MODEL_ID, MIN_MODEL_ID])
async def test_boundary_body_ids_are_stored(client, model_id):
    res = await client.post("/model", json={"id": model_id, "name": "edge"})
    assert res.status_code == 201
    res = await client.get(f"/model/{model_id}")
    assert res.status_code == 200
    assert res.json() == {"id": model_id, "name": "edge"}


@pytest.mark.parametrize("method", ["get", "delete"])
async def test_out_of_range_path_id_is_validation_error(client, method):
    res = await getattr(client, method)(f"/model/{MAX_MODEL_ID + 1}")
    assert res.status_code == 400
    body = res.json()
    assert body["code"] == "VALIDATION_ERROR"
    assert body["message"].startswith("id: ")


async def test_non_integer_path_id_is_validation_error(client):
    res = await client.get("/model/abc")
    assert res.status_code == 400
    body = res.json()
    assert body["code"] == "VALIDATION_ERROR"
    assert body["message"].startswith("id: ")


async def test_repository_fault_is_unexpected_error(make_client):
    async with make_client(raise_app_exceptions=False) as client:
        client.app.dependency_overrides[get_model_service] = (
            lambda: ModelService(FailingModelRepository())
        )
        res = await client.get("/model", headers={"X-Trace-Id": "trace-500"})

    assert res.status_code == 500
    body = res.json()
    assert body == {
        "status": 500,
        "error": "Internal Server Error",
        "code": "UNEXPECTED_ERROR",
        "message": "Unexpected error.",
        "path": "/model",
        "traceId": "trace-500",
    }
    assert "db-host" not in res.text


async def test_trace_id_is_echoed_from_request(client):
    res = await client.get("/model/404", headers={"X-Trace-Id": "trace-123"})
    assert res.json()["traceId"] == "trace-123"
    assert res.headers["X-Trace-Id"] == "trace-123"


async def test_trace_id_generated_when_absent(client):
    res = await client.get("/model/404")
    trace_id = res.json()["traceId"]
    assert trace_id != "unknown"
    assert res.headers["X-Trace-Id"] == trace_id


async def test_trace_ids_differ_between_requests(client):
    first = await client.get("/model/1")
    second = await client.get("/model/1")
    assert first.json()["traceId"] != second.json()["traceId"]


async def test_unknown_route_is_not_found_envelope(client):
    res = await client.get("/nope")
    assert res.status_code == 404
    body = res.json()
    assert set(body) == ENVELOPE_KEYS
    assert body["code"] == "NOT_FOUND"


async def test_wrong_method_is_bad_request_envelope(client):
    res = await client.put("/model/1", json={"id": 1, "name": "x"})
    assert res.status_code == 400
    assert res.json()["code"] == "BAD_REQUEST"
    assert "GET" in res.headers["Allow"]
