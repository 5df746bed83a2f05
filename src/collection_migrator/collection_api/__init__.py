"""Collection API exports."""

from .collection_gateway import CollectionApiError, CollectionGateway, HttpCollectionGateway

__all__ = ["CollectionApiError", "CollectionGateway", "HttpCollectionGateway"]
