"""Tests for billed.store.api against an httpx.MockTransport backend."""

import asyncio
import json

import httpx
import pytest

from billed.errors import StoreError
from billed.store.api import ApiStore, get_api_store
from commons.storage import InMemorySessionStorage


def make_store(handler, storage=None):
    return ApiStore(
        base_url="http://api.test/",
        storage=storage,
        transport=httpx.MockTransport(handler),
    )


def test_create_posts_multipart_to_bills():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["method"] = request.method
        seen["url"] = str(request.url)
        seen["content_type"] = request.headers["content-type"]
        seen["body"] = request.content
        return httpx.Response(200, json={"fileUrl": "https://files.test/a.jpg", "key": "k1"})

    store = make_store(handler)
    result = asyncio.run(
        store.bills().create(data={"email": "a@b.c"}, files={"file": ("a.jpg", b"img", "image/jpeg")})
    )

    assert result == {"fileUrl": "https://files.test/a.jpg", "key": "k1"}
    assert seen["method"] == "POST"
    assert seen["url"] == "http://api.test/bills"
    assert seen["content_type"].startswith("multipart/form-data")
    assert b'name="email"' in seen["body"]
    assert b"a@b.c" in seen["body"]
    assert b'filename="a.jpg"' in seen["body"]


def test_update_patches_bill_with_json_body():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["method"] = request.method
        seen["path"] = request.url.path
        seen["content_type"] = request.headers["content-type"]
        seen["body"] = request.content
        return httpx.Response(200, json={"id": "1234"})

    payload = json.dumps({"name": "Taxi", "status": "pending"})
    result = asyncio.run(make_store(handler).bills().update(data=payload, selector="1234"))

    assert result == {"id": "1234"}
    assert seen["method"] == "PATCH"
    assert seen["path"] == "/bills/1234"
    assert seen["content_type"] == "application/json"
    assert json.loads(seen["body"]) == {"name": "Taxi", "status": "pending"}


def test_jwt_from_session_is_sent_as_bearer():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["auth"] = request.headers.get("authorization")
        return httpx.Response(200, json=[])

    storage = InMemorySessionStorage({"jwt": "secret-token"})
    assert asyncio.run(make_store(handler, storage).bills().list()) == []
    assert seen["auth"] == "Bearer secret-token"


def test_no_jwt_no_authorization_header():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["auth"] = request.headers.get("authorization")
        return httpx.Response(200, json={"id": "1"})

    asyncio.run(make_store(handler, InMemorySessionStorage()).bills().select("1"))
    assert seen["auth"] is None


def test_empty_body_returns_none():
    store = make_store(lambda request: httpx.Response(204))
    assert asyncio.run(store.bills().delete("1")) is None


def test_error_response_raises_store_error_with_server_message():
    store = make_store(lambda request: httpx.Response(401, json={"message": "jwt expired"}))
    with pytest.raises(StoreError) as exc:
        asyncio.run(store.bills().update(data="{}", selector="1"))
    assert exc.value.status_code == 401
    assert exc.value.message == "jwt expired"
    assert str(exc.value) == "401: jwt expired"


def test_error_response_without_json_body():
    store = make_store(lambda request: httpx.Response(500, text="oops"))
    with pytest.raises(StoreError) as exc:
        asyncio.run(store.bills().list())
    assert exc.value.status_code == 500


def test_network_error_is_wrapped():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(StoreError, match="connection refused") as exc:
        asyncio.run(make_store(handler).bills().list())
    assert exc.value.status_code is None


def test_get_api_store_from_config(monkeypatch):
    monkeypatch.delenv("BILLED_TEST_URL", raising=False)
    cfg = {
        "store": {"base_url": "http://cfg.test/", "base_url_env": "BILLED_TEST_URL", "timeout": 3},
        "session": {"jwt_key": "token"},
    }
    store = get_api_store(cfg=cfg)
    assert store.api.base_url == "http://cfg.test"
    assert store.api.timeout == 3
    assert store.api.jwt_key == "token"

    monkeypatch.setenv("BILLED_TEST_URL", "https://env.test")
    assert get_api_store(cfg=cfg).api.base_url == "https://env.test"


def test_get_api_store_defaults():
    store = get_api_store(cfg={})
    assert store.api.base_url == "http://localhost:5678"
    assert store.api.timeout is None
    assert store.api.jwt_key == "jwt"
