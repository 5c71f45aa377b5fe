import json

import httpx
import pytest
from starlette.requests import Request

from app.infrastructure.blob_storage import BlobStorageError, VercelBlobStore
from app.infrastructure.clerk import ClerkClient, ClerkUserNotFoundError, IdentityProviderError


def clerk_with(handler) -> ClerkClient:
    http = httpx.AsyncClient(base_url="https://api.clerk.test/v1", transport=httpx.MockTransport(handler))
    return ClerkClient(secret_key="sk_test", jwt_key="", http_client=http)


def blob_with(handler) -> VercelBlobStore:
    http = httpx.AsyncClient(base_url="https://blob.test", transport=httpx.MockTransport(handler))
    return VercelBlobStore(token="vercel_blob_rw_test", http_client=http)


async def test_clerk_get_user():
    def handler(request: httpx.Request):
        assert request.url.path == "/v1/users/user_1"
        assert request.headers["authorization"] == "Bearer sk_test"
        return httpx.Response(200, json={"id": "user_1"})

    clerk = clerk_with(handler)
    assert await clerk.get_user("user_1") == {"id": "user_1"}
    await clerk.aclose()


async def test_clerk_missing_user():
    clerk = clerk_with(lambda request: httpx.Response(404, json={"errors": []}))
    with pytest.raises(ClerkUserNotFoundError):
        await clerk.get_user("user_x")


async def test_clerk_server_error():
    clerk = clerk_with(lambda request: httpx.Response(500))
    with pytest.raises(IdentityProviderError):
        await clerk.list_users()


async def test_clerk_network_error():
    def handler(request):
        raise httpx.ConnectError("sin red", request=request)

    with pytest.raises(IdentityProviderError):
        await clerk_with(handler).get_user("user_1")


async def test_clerk_list_users_accepts_both_shapes():
    clerk = clerk_with(lambda request: httpx.Response(200, json=[{"id": "a"}]))
    assert await clerk.list_users() == [{"id": "a"}]

    clerk = clerk_with(lambda request: httpx.Response(200, json={"data": [{"id": "b"}]}))
    assert await clerk.list_users() == [{"id": "b"}]


async def test_clerk_update_metadata_body():
    seen = {}

    def handler(request: httpx.Request):
        seen["method"] = request.method
        seen["path"] = request.url.path
        seen["body"] = json.loads(request.content)
        return httpx.Response(200, json={"id": "user_1"})

    clerk = clerk_with(handler)
    await clerk.update_user_metadata("user_1", public_metadata={"role": "admin"})

    assert seen == {
        "method": "PATCH",
        "path": "/v1/users/user_1/metadata",
        "body": {"public_metadata": {"role": "admin"}},
    }


def test_clerk_without_session_is_anonymous():
    clerk = clerk_with(lambda request: httpx.Response(200))
    request = Request({"type": "http", "headers": []})
    assert clerk.authenticate_request(request) is None

    request = Request({"type": "http", "headers": [(b"authorization", b"Bearer basura")]})
    assert clerk.authenticate_request(request) is None


async def test_blob_put_returns_url():
    def handler(request: httpx.Request):
        assert request.method == "PUT"
        assert request.url.path == "/uploads/blog/foto.png"
        assert request.headers["x-content-type"] == "image/png"
        assert request.headers["authorization"] == "Bearer vercel_blob_rw_test"
        return httpx.Response(200, json={"url": "https://store.public.blob/uploads/blog/foto.png"})

    store = blob_with(handler)
    url = await store.put("uploads/blog/foto.png", b"img", "image/png")
    assert url == "https://store.public.blob/uploads/blog/foto.png"
    await store.aclose()


async def test_blob_list_and_delete():
    calls = []

    def handler(request: httpx.Request):
        calls.append((request.method, request.url.path, request.url.params.get("prefix")))
        if request.method == "GET":
            return httpx.Response(200, json={"blobs": [{"url": "https://b/x.png"}]})
        return httpx.Response(200)

    store = blob_with(handler)
    assert await store.list(prefix="uploads/") == [{"url": "https://b/x.png"}]
    await store.delete(["https://b/x.png"])

    assert calls == [("GET", "/", "uploads/"), ("POST", "/delete", None)]


async def test_blob_error_is_wrapped():
    store = blob_with(lambda request: httpx.Response(403, json={"error": "forbidden"}))
    with pytest.raises(BlobStorageError):
        await store.put("uploads/a.png", b"x", "image/png")
