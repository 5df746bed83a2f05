"""HTTP gateway to the collection persistence API."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from types import TracebackType
from typing import Any, Protocol
from urllib.parse import quote

import httpx

from collection_migrator.collection_descriptors.descriptor_models import CollectionDescriptor
from collection_migrator.collection_descriptors.descriptor_reader import (
    DescriptorError,
    parse_collection_descriptor,
)
from collection_migrator.configuration.runtime_settings import ApiSettings

logger = logging.getLogger(__name__)


class CollectionApiError(Exception):
    """Raised when the collection API is unreachable or rejects a request."""


class CollectionGateway(Protocol):
    """Persistence collaborator for collection definitions."""

    def list_collections(self) -> list[CollectionDescriptor]: ...

    def get_collection(self, name: str) -> CollectionDescriptor: ...

    def create_collection(self, payload: Mapping[str, Any]) -> CollectionDescriptor: ...

    def edit_collection(self, name: str, payload: Mapping[str, Any]) -> CollectionDescriptor: ...

    def close(self) -> None: ...


class HttpCollectionGateway:
    """Collection gateway backed by a synchronous ``httpx.Client``.

    Collections live under ``<base_url><collections_path>``: ``GET`` lists
    them, ``POST`` creates one, and ``GET``/``PATCH`` on ``/<name>`` read or
    update a single collection. Every successful response carries collection
    descriptors as JSON.
    """

    def __init__(
        self,
        api_settings: ApiSettings,
        *,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        headers = {"Accept": "application/json"}
        if api_settings.auth_token:
            headers["Authorization"] = f"Bearer {api_settings.auth_token}"
        self._settings = api_settings
        self._client = httpx.Client(
            base_url=api_settings.base_url,
            headers=headers,
            timeout=api_settings.timeout_seconds,
            transport=transport,
        )

    def __enter__(self) -> HttpCollectionGateway:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        self.close()

    def close(self) -> None:
        self._client.close()

    def list_collections(self) -> list[CollectionDescriptor]:
        body = self._request("GET", self._settings.collections_path)
        if not isinstance(body, list):
            raise CollectionApiError("Collection API returned a non-list collection listing.")
        return [self._descriptor_from(item) for item in body]

    def get_collection(self, name: str) -> CollectionDescriptor:
        return self._descriptor_from(self._request("GET", self._collection_path(name)))

    def create_collection(self, payload: Mapping[str, Any]) -> CollectionDescriptor:
        return self._descriptor_from(
            self._request("POST", self._settings.collections_path, payload)
        )

    def edit_collection(self, name: str, payload: Mapping[str, Any]) -> CollectionDescriptor:
        return self._descriptor_from(self._request("PATCH", self._collection_path(name), payload))

    def _collection_path(self, name: str) -> str:
        return f"{self._settings.collections_path}/{quote(name, safe='')}"

    def _request(self, method: str, path: str, payload: Mapping[str, Any] | None = None) -> Any:
        logger.debug("%s %s%s", method, self._settings.base_url, path)
        try:
            response = self._client.request(
                method, path, json=dict(payload) if payload is not None else None
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            detail = exc.response.text.strip()
            message = f"Collection API rejected {method} {path}: HTTP {exc.response.status_code}"
            raise CollectionApiError(f"{message}: {detail}" if detail else message) from exc
        except httpx.RequestError as exc:
            raise CollectionApiError(
                f"Collection API request {method} {path} failed: {exc}"
            ) from exc

        try:
            return response.json()
        except ValueError as exc:
            raise CollectionApiError(f"Collection API returned invalid JSON for {path}.") from exc

    @staticmethod
    def _descriptor_from(body: Any) -> CollectionDescriptor:
        try:
            return parse_collection_descriptor(body)
        except DescriptorError as exc:
            raise CollectionApiError(
                f"Collection API returned an invalid collection: {exc}"
            ) from exc
