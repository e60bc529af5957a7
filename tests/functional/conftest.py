from __future__ import annotations

"""Functional test bootstrap for the reorder service.

Provides the four-document fixture used throughout the contract tests and an
in-process FastAPI TestClient built with default configuration, so no
environment or config files on disk influence results.
"""

import pytest


def make_documents(*pairs: tuple[str, str]) -> list[dict]:
    return [{"_id": doc_id, "orderRank": key, "title": f"Doc {doc_id}"} for doc_id, key in pairs]


@pytest.fixture
def letters() -> list[dict]:
    """A(a), B(b), C(c), D(d)."""
    return make_documents(("A", "a"), ("B", "b"), ("C", "c"), ("D", "d"))


@pytest.fixture
def client():
    from fastapi.testclient import TestClient

    from docorder.config import AppConfig
    from docorder.main import create_app

    with TestClient(create_app(AppConfig())) as test_client:
        yield test_client
