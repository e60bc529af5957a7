"""Functional contract tests for the reorder HTTP surface.

Calls the FastAPI app in-process via TestClient. Success bodies are checked
against a JSON Schema; failures must be application/problem+json with a
stable ``code``.
"""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient
from jsonschema import Draft202012Validator

from docorder.config import AppConfig, DocumentsConfig, ReorderConfig
from docorder.main import create_app

REORDER_RESPONSE_SCHEMA = {
    "type": "object",
    "required": ["new_order", "changes", "patches", "mutations", "message"],
    "properties": {
        "new_order": {"type": "array", "items": {"type": "object"}},
        "changes": {
            "type": "array",
            "items": {
                "type": "object",
                "required": ["id", "order_key"],
                "properties": {"id": {"type": "string"}, "order_key": {"type": "string"}},
            },
        },
        "patches": {
            "type": "array",
            "items": {
                "type": "array",
                "prefixItems": [{"type": "string"}, {"type": "object", "required": ["set"]}],
                "minItems": 2,
                "maxItems": 2,
            },
        },
        "mutations": {"type": "array", "items": {"type": "object", "required": ["patch"]}},
        "message": {"type": "string"},
    },
}

PROBLEM_SCHEMA = {
    "type": "object",
    "required": ["title", "status", "detail", "code"],
    "properties": {"status": {"type": "integer"}, "code": {"type": "string"}},
}


def _assert_problem(resp, status: int, code: str) -> None:
    assert resp.status_code == status
    assert resp.headers["content-type"].startswith("application/problem+json")
    body = resp.json()
    Draft202012Validator(PROBLEM_SCHEMA).validate(body)
    assert body["code"] == code


def test_reorder_with_drag_locations(client, letters) -> None:
    resp = client.post(
        "/api/v1/documents/reorder",
        json={
            "documents": letters,
            "selected_ids": ["A"],
            "source": {"index": 0, "droppableId": "list"},
            "destination": {"index": 2, "droppableId": "list"},
        },
    )

    assert resp.status_code == 200
    body = resp.json()
    Draft202012Validator(REORDER_RESPONSE_SCHEMA).validate(body)
    assert [d["_id"] for d in body["new_order"]] == ["B", "C", "A", "D"]
    assert body["changes"] == [{"id": "A", "order_key": "ci"}]
    assert body["patches"] == [["A", {"set": {"orderRank": "ci"}}]]
    assert body["mutations"] == [{"patch": {"id": "A", "set": {"orderRank": "ci"}}}]
    assert body["message"] == "Moved 1 Document down from position 1 to 3"
    assert resp.headers.get("X-Request-Id")


def test_reorder_with_flat_indices_multi_select(client, letters) -> None:
    resp = client.post(
        "/api/v1/documents/reorder",
        json={"documents": letters, "selected_ids": ["D", "B"], "source_index": 1, "destination_index": 0},
    )

    assert resp.status_code == 200
    body = resp.json()
    assert [d["_id"] for d in body["new_order"]] == ["B", "D", "A", "C"]
    assert [c["id"] for c in body["changes"]] == ["B", "D"]
    assert body["new_order"][0]["title"] == "Doc B"
    assert body["message"] == "Moved 2 Documents up from position 2 to 1"


def test_request_id_is_echoed(client, letters) -> None:
    resp = client.post(
        "/api/v1/documents/reorder",
        json={"documents": letters, "selected_ids": ["A"], "source_index": 0, "destination_index": 1},
        headers={"X-Request-Id": "req-123"},
    )
    assert resp.headers["X-Request-Id"] == "req-123"


def test_missing_indices_is_request_validation_problem(client, letters) -> None:
    resp = client.post("/api/v1/documents/reorder", json={"documents": letters, "selected_ids": ["A"]})
    _assert_problem(resp, 422, "REQUEST_VALIDATION_FAILED")
    assert resp.json()["errors"]


@pytest.mark.parametrize(
    "payload, code",
    [
        ({"selected_ids": ["A"], "source_index": 0, "destination_index": 9}, "REORDER_INVALID_INDEX"),
        ({"selected_ids": [], "source_index": 0, "destination_index": 1}, "REORDER_EMPTY_SELECTION"),
    ],
)
def test_precondition_failures_are_problems(client, letters, payload, code) -> None:
    resp = client.post("/api/v1/documents/reorder", json={"documents": letters, **payload})
    _assert_problem(resp, 422, code)


def test_empty_list_is_problem(client) -> None:
    resp = client.post(
        "/api/v1/documents/reorder",
        json={"documents": [], "selected_ids": ["A"], "source_index": 0, "destination_index": 0},
    )
    _assert_problem(resp, 422, "REORDER_EMPTY_LIST")


def test_lenient_config_skips_preconditions(letters) -> None:
    app = create_app(AppConfig(reorder=ReorderConfig(strict_preconditions=False)))
    with TestClient(app) as lenient:
        resp = lenient.post(
            "/api/v1/documents/reorder",
            json={"documents": letters, "selected_ids": [], "source_index": 0, "destination_index": 2},
        )
    assert resp.status_code == 200
    assert resp.json()["changes"] == []
    assert resp.json()["message"] == "Moved 0 Documents down from position 1 to 3"


def test_configured_field_names() -> None:
    app = create_app(AppConfig(documents=DocumentsConfig(id_field="id", order_field="rank")))
    docs = [{"id": "x", "rank": "b"}, {"id": "y", "rank": "d"}]
    with TestClient(app) as custom:
        resp = custom.post(
            "/api/v1/documents/reorder",
            json={"documents": docs, "selected_ids": ["y"], "source_index": 1, "destination_index": 0},
        )
    assert resp.status_code == 200
    body = resp.json()
    assert [d["id"] for d in body["new_order"]] == ["y", "x"]
    assert body["patches"][0][1] == {"set": {"rank": body["changes"][0]["order_key"]}}


def test_rank_between(client) -> None:
    assert client.post("/api/v1/ranks/between", json={"low": "c", "high": "d"}).json() == {"key": "ci"}
    assert client.post("/api/v1/ranks/between", json={}).json() == {"key": "i"}


def test_rank_between_out_of_order_is_problem(client) -> None:
    resp = client.post("/api/v1/ranks/between", json={"low": "d", "high": "c"})
    _assert_problem(resp, 422, "RANK_INVALID_INTERVAL")


def test_rank_seed(client) -> None:
    assert client.post("/api/v1/ranks/seed", json={"count": 3}).json() == {"keys": ["9", "i", "r"]}
    _assert_problem(client.post("/api/v1/ranks/seed", json={"count": -1}), 422, "REQUEST_VALIDATION_FAILED")


def test_health(client) -> None:
    assert client.get("/health").json() == {"status": "ok"}


def test_document_without_identifier_is_problem(client, letters) -> None:
    letters[2] = {"orderRank": "c"}
    resp = client.post(
        "/api/v1/documents/reorder",
        json={"documents": letters, "selected_ids": ["A"], "source_index": 0, "destination_index": 1},
    )
    _assert_problem(resp, 422, "REORDER_MISSING_ID")
