"""HTTP collection gateway tests."""

from __future__ import annotations

import json

import httpx
import pytest
from collection_migrator.collection_api import CollectionApiError, HttpCollectionGateway
from collection_migrator.configuration.runtime_settings import ApiSettings

POSTS = {"name": "posts", "exposed": True, "schema": {"title": {"type": "string"}}}


def _settings(auth_token: str | None = None) -> ApiSettings:
    return ApiSettings(
        base_url="https://app.example.com/api",
        collections_path="/_dev/collections",
        timeout_seconds=5,
        auth_token=auth_token,
    )


def _gateway(handler, auth_token: str | None = None) -> HttpCollectionGateway:
    return HttpCollectionGateway(_settings(auth_token), transport=httpx.MockTransport(handler))


def test_create_collection_posts_payload_to_collections_resource() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(201, json=POSTS)

    with _gateway(handler, auth_token="secret") as gateway:
        stored = gateway.create_collection({"name": "posts", "schema": {}})

    assert stored.name == "posts"
    assert seen[0].method == "POST"
    assert seen[0].url == "https://app.example.com/api/_dev/collections"
    assert seen[0].headers["Authorization"] == "Bearer secret"
    assert json.loads(seen[0].content) == {"name": "posts", "schema": {}}


def test_edit_collection_patches_by_quoted_previous_name() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json=POSTS)

    with _gateway(handler) as gateway:
        gateway.edit_collection("blog posts", {"name": "posts"})

    assert seen[0].method == "PATCH"
    assert seen[0].url.raw_path == b"/api/_dev/collections/blog%20posts"
    assert "Authorization" not in seen[0].headers


def test_list_and_get_collections_parse_descriptors() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path.endswith("/collections"):
            return httpx.Response(200, json=[POSTS, {"name": "users", "schema": {}}])
        return httpx.Response(200, json=POSTS)

    with _gateway(handler) as gateway:
        listing = gateway.list_collections()
        single = gateway.get_collection("posts")

    assert [collection.name for collection in listing] == ["posts", "users"]
    assert single.schema == {"title": {"type": "string"}}


def test_error_status_is_reported_with_response_detail() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(409, text="collection already exists")

    with _gateway(handler) as gateway, pytest.raises(CollectionApiError) as excinfo:
        gateway.create_collection({"name": "posts"})

    assert "HTTP 409" in str(excinfo.value)
    assert "collection already exists" in str(excinfo.value)


def test_transport_failure_is_wrapped() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with _gateway(handler) as gateway, pytest.raises(CollectionApiError, match="failed"):
        gateway.list_collections()


@pytest.mark.parametrize(
    "response",
    [
        httpx.Response(200, text="<html>"),
        httpx.Response(200, json={"collections": []}),
    ],
)
def test_unexpected_listing_body_is_rejected(response: httpx.Response) -> None:
    with _gateway(lambda request: response) as gateway, pytest.raises(CollectionApiError):
        gateway.list_collections()


def test_invalid_descriptor_in_response_is_rejected() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"schema": {}})

    with (
        _gateway(handler) as gateway,
        pytest.raises(CollectionApiError, match="invalid collection"),
    ):
        gateway.get_collection("posts")
